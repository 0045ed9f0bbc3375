"""Asset store interface shared by the storage backends."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


class AssetStoreError(Exception):
    """Storage backend failure other than a missing asset."""

    def __init__(self, message: str, path: str | None = None):
        super().__init__(message)
        self.path = path


@dataclass(slots=True, frozen=True)
class Asset:
    path: str
    body: bytes

    def text(self) -> str:
        return self.body.decode("utf-8", errors="replace")


class AssetStore(ABC):
    """Read-only key/value lookup for static pages."""

    @abstractmethod
    async def get(self, path: str) -> Asset | None:
        """Return the asset stored under ``path``, or None when there is none."""

    async def close(self) -> None:
        """Release backend resources. No-op by default."""
