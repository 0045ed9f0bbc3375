"""Asset store backends and the factory that picks one from settings."""

from __future__ import annotations

import logging

from ..config import Settings
from .base import Asset, AssetStore, AssetStoreError
from .local import LocalAssetStore

logger = logging.getLogger(__name__)


def build_asset_store(settings: Settings) -> AssetStore:
    """Build the asset store selected by ``ASSET_STORE_BACKEND``."""
    if settings.asset_store_backend == "gcs":
        if not settings.asset_gcs_bucket:
            raise ValueError("ASSET_GCS_BUCKET must be set when ASSET_STORE_BACKEND=gcs")
        from .gcs import GCSAssetStore

        logger.info(f"Serving pages from gs://{settings.asset_gcs_bucket}/{settings.asset_gcs_prefix}")
        return GCSAssetStore(
            settings.asset_gcs_bucket,
            prefix=settings.asset_gcs_prefix,
            settings=settings,
        )

    store = LocalAssetStore(settings.assets_dir)
    logger.info(f"Serving pages from {store.root}")
    return store


__all__ = [
    "Asset",
    "AssetStore",
    "AssetStoreError",
    "LocalAssetStore",
    "build_asset_store",
]
