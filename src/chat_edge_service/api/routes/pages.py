"""HTML page routes."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from ...config import Settings, get_settings
from ...pages import render_static_page, render_user_page
from ...storage import AssetStore
from ..deps import get_asset_store

router = APIRouter()


@router.get("/")
async def index(store: AssetStore = Depends(get_asset_store)):
    return await render_static_page(store, "index.html")


@router.get("/about")
async def about(store: AssetStore = Depends(get_asset_store)):
    return await render_static_page(store, "about.html")


@router.get("/user/{user_id}")
async def user_page(
    user_id: str,
    store: AssetStore = Depends(get_asset_store),
    settings: Settings = Depends(get_settings),
):
    """Render user.html with ``{{userId}}`` replaced by the path segment."""
    return await render_user_page(store, user_id, escape=settings.html_escape_params)
