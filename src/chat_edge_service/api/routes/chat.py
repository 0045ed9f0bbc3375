"""Chat API route."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Request

from ...chat_proxy import proxy_chat
from ...inference import WorkersAIClient
from ..deps import get_inference_client

router = APIRouter()


@router.post("/api/chat")
async def chat(request: Request, client: WorkersAIClient = Depends(get_inference_client)):
    """Forward the conversation to Workers AI and stream its raw response back.

    The body is read as bytes rather than declared as a model so malformed
    input gets the generic 500 instead of FastAPI's 422.
    """
    body = await request.body()
    return await proxy_chat(body, client)
