"""Client for the Cloudflare Workers AI REST API."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from ..config import Settings, get_settings

logger = logging.getLogger(__name__)


class InferenceError(Exception):
    """Error from the inference backend."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class WorkersAIClient:
    """Run Workers AI models over HTTP.

    The ``httpx.AsyncClient`` is shared across requests and owned by the caller
    (the application lifespan opens and closes it).
    """

    def __init__(self, http_client: httpx.AsyncClient, settings: Settings | None = None) -> None:
        self._http = http_client
        self._settings = settings or get_settings()

    def _build_request(self, model_id: str, inputs: dict[str, Any]) -> httpx.Request:
        settings = self._settings
        if not settings.workers_ai_configured:
            raise InferenceError(
                "Workers AI is not configured. Set CLOUDFLARE_ACCOUNT_ID and CLOUDFLARE_API_TOKEN."
            )

        base_url = settings.workers_ai_base_url.rstrip("/")
        url = f"{base_url}/accounts/{settings.cloudflare_account_id}/ai/run/{model_id}"
        return self._http.build_request(
            "POST",
            url,
            json=inputs,
            headers={"Authorization": f"Bearer {settings.cloudflare_api_token}"},
        )

    async def run(
        self,
        model_id: str,
        inputs: dict[str, Any],
        *,
        return_raw_response: bool = False,
    ) -> Any:
        """
        Run ``model_id`` with ``inputs``.

        Args:
            model_id: Workers AI model identifier, e.g. "@cf/meta/llama-3.3-70b-instruct-fp8-fast"
            inputs: Model inputs (messages, max_tokens, ...)
            return_raw_response: Return the unread streaming ``httpx.Response``
                instead of the decoded result. The caller must close it.

        Returns:
            The raw response, or the ``result`` field of the decoded body
        """
        request = self._build_request(model_id, inputs)

        try:
            response = await self._http.send(request, stream=True)
        except httpx.HTTPError as e:
            raise InferenceError(f"Failed to reach Workers AI: {e}") from e

        if return_raw_response:
            return response

        try:
            await response.aread()
        except httpx.HTTPError as e:
            raise InferenceError(f"Failed to read Workers AI response: {e}") from e
        finally:
            await response.aclose()

        if not response.is_success:
            raise InferenceError(
                f"Workers AI request failed ({response.status_code}): {response.text}",
                status_code=response.status_code,
            )

        try:
            payload = response.json()
        except ValueError as e:
            raise InferenceError("Workers AI returned a non-JSON body") from e
        return payload.get("result", payload) if isinstance(payload, dict) else payload
