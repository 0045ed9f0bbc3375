"""Request and response bodies for the chat API."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ChatMessage(BaseModel):
    """A single conversation turn. Extra keys are kept and forwarded."""

    model_config = ConfigDict(extra="allow")

    role: Literal["system", "user", "assistant"]
    content: str


class ChatRequest(BaseModel):
    messages: list[ChatMessage] = Field(default_factory=list)

    @field_validator("messages", mode="before")
    @classmethod
    def _null_as_empty(cls, value):
        return [] if value is None else value


class ErrorResponse(BaseModel):
    error: str
