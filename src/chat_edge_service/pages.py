"""Static HTML pages: asset lookup and placeholder substitution."""

from __future__ import annotations

import html
import logging

from fastapi.responses import HTMLResponse, PlainTextResponse

from .storage import AssetStore

logger = logging.getLogger(__name__)

NOT_FOUND_BODY = "404 Not Found"
USER_ID_TOKEN = "{{userId}}"


async def resolve_asset(store: AssetStore, path: str) -> str | None:
    """Return the HTML stored under ``path`` or None when the store has no entry."""
    asset = await store.get(path)
    if asset is None:
        logger.debug(f"Asset not found: {path}")
        return None
    return asset.text()


def substitute(html_text: str, token: str, value: str, escape: bool = False) -> str:
    """Replace every literal occurrence of ``token`` with ``value``.

    Single pass: a ``token`` appearing inside ``value`` is not expanded again.
    ``value`` is inserted verbatim unless ``escape`` is set.
    """
    if escape:
        value = html.escape(value)
    return html_text.replace(token, value)


def not_found() -> PlainTextResponse:
    return PlainTextResponse(NOT_FOUND_BODY, status_code=404)


async def render_static_page(store: AssetStore, path: str) -> HTMLResponse | PlainTextResponse:
    page = await resolve_asset(store, path)
    if page is None:
        return not_found()
    return HTMLResponse(page)


async def render_user_page(
    store: AssetStore, user_id: str, escape: bool = False
) -> HTMLResponse | PlainTextResponse:
    page = await resolve_asset(store, "user.html")
    if page is None:
        return not_found()
    return HTMLResponse(substitute(page, USER_ID_TOKEN, user_id, escape=escape))
