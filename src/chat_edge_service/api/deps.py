"""Request dependencies backed by resources opened in the app lifespan."""

from __future__ import annotations

from fastapi import Request

from ..inference import WorkersAIClient
from ..storage import AssetStore


def get_asset_store(request: Request) -> AssetStore:
    return request.app.state.asset_store


def get_inference_client(request: Request) -> WorkersAIClient:
    return request.app.state.inference_client
