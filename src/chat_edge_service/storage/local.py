"""Static pages served from a local directory."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path

from .base import Asset, AssetStore, AssetStoreError

logger = logging.getLogger(__name__)


class LocalAssetStore(AssetStore):
    """Serve assets from files under ``root``.

    Paths that resolve outside ``root`` or point at a directory are treated as
    missing.
    """

    def __init__(self, root: str | Path) -> None:
        self.root = Path(root).expanduser().resolve()

    def _locate(self, path: str) -> Path | None:
        candidate = (self.root / path.lstrip("/")).resolve()
        if candidate != self.root and self.root not in candidate.parents:
            logger.debug(f"Rejected asset path outside store root: {path!r}")
            return None
        if not candidate.is_file():
            return None
        return candidate

    def _read(self, path: str) -> Asset | None:
        file_path = self._locate(path)
        if file_path is None:
            return None
        try:
            return Asset(path=path, body=file_path.read_bytes())
        except FileNotFoundError:
            return None
        except OSError as e:
            raise AssetStoreError(f"Failed to read {file_path}: {e}", path=path) from e

    async def get(self, path: str) -> Asset | None:
        return await asyncio.to_thread(self._read, path)
