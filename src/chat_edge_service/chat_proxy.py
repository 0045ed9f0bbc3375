"""Chat proxy: forward a conversation to Workers AI and relay the raw response.

The handler is single pass: parse the body, make sure a system message is
present, forward, relay. One error boundary wraps all of it and turns any
failure into a generic 500 so backend details never reach the caller.
"""

from __future__ import annotations

import logging
from typing import Iterable

import httpx
from fastapi.responses import JSONResponse, Response, StreamingResponse
from starlette.background import BackgroundTask

from .inference import WorkersAIClient
from .schemas import ChatMessage, ChatRequest, ErrorResponse

logger = logging.getLogger(__name__)

# https://developers.cloudflare.com/workers-ai/models/
MODEL_ID = "@cf/meta/llama-3.3-70b-instruct-fp8-fast"

SYSTEM_PROMPT = "You are a helpful, friendly assistant. Provide concise and accurate responses."

MAX_TOKENS = 1024

ERROR_MESSAGE = "Failed to process request"

# Set per connection by the server; never copied from the upstream response.
HOP_BY_HOP_HEADERS = frozenset(
    {
        "connection",
        "keep-alive",
        "proxy-authenticate",
        "proxy-authorization",
        "te",
        "trailer",
        "transfer-encoding",
        "upgrade",
    }
)


def parse_chat_request(body: bytes) -> ChatRequest:
    """Validate a raw JSON body. Raises ``pydantic.ValidationError`` on bad input."""
    return ChatRequest.model_validate_json(body)


def ensure_system_message(
    messages: Iterable[ChatMessage], prompt: str = SYSTEM_PROMPT
) -> list[ChatMessage]:
    """Return ``messages`` with a default system message prepended if none is present."""
    conversation = list(messages)
    if not any(message.role == "system" for message in conversation):
        conversation.insert(0, ChatMessage(role="system", content=prompt))
    return conversation


def build_inputs(messages: Iterable[ChatMessage]) -> dict:
    return {
        "messages": [message.model_dump() for message in messages],
        "max_tokens": MAX_TOKENS,
    }


def relay_response(upstream: httpx.Response) -> StreamingResponse:
    """Stream ``upstream`` back unchanged, closing it when the body is done."""
    response = StreamingResponse(
        upstream.aiter_raw(),
        status_code=upstream.status_code,
        background=BackgroundTask(upstream.aclose),
    )
    # multi_items keeps repeated headers such as set-cookie apart
    for name, value in upstream.headers.multi_items():
        if name.lower() not in HOP_BY_HOP_HEADERS:
            response.headers.append(name, value)
    return response


def error_response() -> JSONResponse:
    return JSONResponse(
        status_code=500,
        content=ErrorResponse(error=ERROR_MESSAGE).model_dump(),
    )


async def proxy_chat(body: bytes, client: WorkersAIClient) -> Response:
    try:
        payload = parse_chat_request(body)
        messages = ensure_system_message(payload.messages)
        upstream = await client.run(
            MODEL_ID,
            build_inputs(messages),
            return_raw_response=True,
        )
        return relay_response(upstream)
    except Exception:
        logger.exception("Error processing chat request")
        return error_response()
