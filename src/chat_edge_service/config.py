"""Runtime configuration for the chat edge service."""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration for the chat edge service."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Static page storage
    asset_store_backend: Literal["local", "gcs"] = Field(default="local", alias="ASSET_STORE_BACKEND")
    assets_dir: str = Field(default="public", alias="ASSETS_DIR")

    # Google Cloud Storage (only read when ASSET_STORE_BACKEND=gcs)
    google_project_id: str | None = Field(default=None, alias="GOOGLE_PROJECT_ID")
    google_service_account_key: str | None = Field(default=None, alias="GOOGLE_SERVICE_ACCOUNT_KEY")
    asset_gcs_bucket: str | None = Field(default=None, alias="ASSET_GCS_BUCKET")
    asset_gcs_prefix: str = Field(default="", alias="ASSET_GCS_PREFIX")

    # Workers AI
    cloudflare_account_id: str | None = Field(default=None, alias="CLOUDFLARE_ACCOUNT_ID")
    cloudflare_api_token: str | None = Field(default=None, alias="CLOUDFLARE_API_TOKEN")
    workers_ai_base_url: str = Field(
        default="https://api.cloudflare.com/client/v4", alias="WORKERS_AI_BASE_URL"
    )

    # Off by default: /user/{id} inserts the raw id into user.html
    html_escape_params: bool = Field(default=False, alias="HTML_ESCAPE_PARAMS")

    # FastAPI
    app_host: str = Field(default="0.0.0.0", alias="APP_HOST")
    app_port: int = Field(default=8787, alias="APP_PORT")
    debug: bool = Field(default=False, alias="DEBUG")

    @property
    def workers_ai_configured(self) -> bool:
        return bool(self.cloudflare_account_id and self.cloudflare_api_token)


@lru_cache
def get_settings() -> Settings:
    """Return memoized settings so multiple imports share a single instance."""

    return Settings()  # type: ignore[call-arg]
