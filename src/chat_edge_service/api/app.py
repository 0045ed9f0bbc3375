"""FastAPI application setup."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse

from ..config import get_settings
from ..inference import WorkersAIClient
from ..storage import AssetStoreError, build_asset_store
from .routes import chat, fallback, pages

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    settings = get_settings()
    logger.info("Chat edge service starting...")

    app.state.asset_store = build_asset_store(settings)
    # Connect timeout only; the backend bounds its own latency.
    http_client = httpx.AsyncClient(timeout=httpx.Timeout(None, connect=10.0))
    app.state.inference_client = WorkersAIClient(http_client, settings=settings)

    if not settings.workers_ai_configured:
        logger.warning("Workers AI credentials are not set; /api/chat will return 500")

    yield

    logger.info("Chat edge service shutting down...")
    await http_client.aclose()
    await app.state.asset_store.close()
    logger.info("Chat edge service shutdown complete")


async def asset_store_error_handler(request: Request, exc: AssetStoreError) -> PlainTextResponse:
    logger.error(f"Asset store failure on {request.url.path}: {exc}")
    return PlainTextResponse("500 Internal Server Error", status_code=500)


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title="Chat Edge Service",
        description="Static pages and a Workers AI chat proxy",
        version="0.1.0",
        lifespan=lifespan,
        debug=settings.debug,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )

    app.add_exception_handler(AssetStoreError, asset_store_error_handler)

    # First full match wins, so the catch-all goes last.
    app.include_router(pages.router, tags=["pages"])
    app.include_router(chat.router, tags=["chat"])
    fallback.register(app)

    return app


app = create_app()
