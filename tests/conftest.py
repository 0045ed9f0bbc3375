"""Shared test fixtures and configuration."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from chat_edge_service.api.app import create_app
from chat_edge_service.api.deps import get_asset_store, get_inference_client
from chat_edge_service.config import Settings, get_settings
from tests.helpers import FakeAssetStore, FakeInferenceClient, streaming_response


@pytest.fixture
def sample_pages():
    """Sample HTML pages keyed by logical path."""
    return {
        "index.html": "<html><body><h1>Home</h1></body></html>",
        "about.html": "<html><body><h1>About</h1></body></html>",
        "user.html": "<html><title>{{userId}}</title><body>Hello {{userId}} {{other}}</body></html>",
    }


@pytest.fixture
def asset_store(sample_pages):
    return FakeAssetStore(sample_pages)


@pytest.fixture
def inference_client():
    return FakeInferenceClient(
        streaming_response(
            [
                b'data: {"response":"Hel"}\n\n',
                b'data: {"response":"lo"}\n\n',
                b"data: [DONE]\n\n",
            ]
        )
    )


@pytest.fixture
def test_settings():
    return Settings(CLOUDFLARE_ACCOUNT_ID="test-account", CLOUDFLARE_API_TOKEN="test-token")


@pytest.fixture
def app(asset_store, inference_client, test_settings):
    """App with storage, inference and settings swapped for fakes (lifespan not run)."""
    application = create_app()
    application.dependency_overrides[get_asset_store] = lambda: asset_store
    application.dependency_overrides[get_inference_client] = lambda: inference_client
    application.dependency_overrides[get_settings] = lambda: test_settings
    return application


@pytest.fixture
def client(app):
    return TestClient(app)
