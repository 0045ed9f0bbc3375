"""Static pages served from a Google Cloud Storage bucket."""

from __future__ import annotations

import asyncio
import json
import logging
from pathlib import Path

from google.api_core import exceptions as gcs_exceptions
from google.cloud import storage
from google.oauth2 import service_account

from ..config import Settings, get_settings
from .base import Asset, AssetStore, AssetStoreError

logger = logging.getLogger(__name__)


def _get_credentials(settings: Settings):
    """Get GCP credentials from service account key."""
    key_path = settings.google_service_account_key
    if not key_path:
        return None

    path = Path(key_path).expanduser()
    if path.exists():
        return service_account.Credentials.from_service_account_file(str(path))

    # Try parsing as JSON
    try:
        key_data = json.loads(key_path)
    except json.JSONDecodeError:
        raise ValueError("GOOGLE_SERVICE_ACCOUNT_KEY is neither a file path nor valid JSON")
    return service_account.Credentials.from_service_account_info(key_data)


def _get_storage_client(settings: Settings | None = None) -> storage.Client:
    """Get a GCS client."""
    settings = settings or get_settings()
    credentials = _get_credentials(settings)
    return storage.Client(project=settings.google_project_id, credentials=credentials)


class GCSAssetStore(AssetStore):
    """Serve assets from ``gs://{bucket}/{prefix}{path}``."""

    def __init__(
        self,
        bucket: str,
        prefix: str = "",
        client: storage.Client | None = None,
        settings: Settings | None = None,
    ) -> None:
        self.prefix = prefix
        self._client = client or _get_storage_client(settings)
        self._bucket = self._client.bucket(bucket)

    def object_name(self, path: str) -> str:
        return f"{self.prefix}{path.lstrip('/')}"

    def _download(self, path: str) -> Asset | None:
        blob = self._bucket.blob(self.object_name(path))
        try:
            body = blob.download_as_bytes()
        except gcs_exceptions.NotFound:
            return None
        except gcs_exceptions.GoogleAPIError as e:
            raise AssetStoreError(
                f"Failed to download gs://{self._bucket.name}/{blob.name}: {e}", path=path
            ) from e
        return Asset(path=path, body=body)

    async def get(self, path: str) -> Asset | None:
        return await asyncio.to_thread(self._download, path)

    async def close(self) -> None:
        await asyncio.to_thread(self._client.close)
