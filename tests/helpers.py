"""Shared test helpers: in-memory fakes for the asset store and inference backend."""

from __future__ import annotations

from typing import Any

import httpx

from chat_edge_service.storage import Asset, AssetStore


class FakeAssetStore(AssetStore):
    """In-memory asset store."""

    def __init__(self, pages: dict[str, str | bytes] | None = None, error: Exception | None = None) -> None:
        self.pages = dict(pages or {})
        self.error = error
        self.lookups: list[str] = []

    async def get(self, path: str) -> Asset | None:
        self.lookups.append(path)
        if self.error is not None:
            raise self.error
        if path not in self.pages:
            return None
        page = self.pages[path]
        body = page if isinstance(page, bytes) else page.encode("utf-8")
        return Asset(path=path, body=body)


class FakeInferenceClient:
    """Records every run() call and returns a canned response."""

    def __init__(self, response: httpx.Response | None = None, error: Exception | None = None) -> None:
        self.response = response
        self.error = error
        self.calls: list[dict[str, Any]] = []

    async def run(self, model_id: str, inputs: dict[str, Any], *, return_raw_response: bool = False):
        self.calls.append(
            {"model_id": model_id, "inputs": inputs, "return_raw_response": return_raw_response}
        )
        if self.error is not None:
            raise self.error
        return self.response


def streaming_response(
    chunks: list[bytes],
    status_code: int = 200,
    headers: dict[str, str] | None = None,
) -> httpx.Response:
    """Build an unread httpx.Response whose body arrives in ``chunks``."""

    async def body():
        for chunk in chunks:
            yield chunk

    return httpx.Response(
        status_code,
        headers=headers if headers is not None else {"content-type": "text/event-stream"},
        content=body(),
    )
