"""Catch-all route. Must be registered last.

A plain Starlette route with no method filter: every method is a full match,
so a known path with an unrouted method is a 404, never a 405.
"""

from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse

from ...pages import not_found

CATCH_ALL_PATH = "/{full_path:path}"


async def catch_all(request: Request) -> PlainTextResponse:
    return not_found()


def register(app: FastAPI) -> None:
    app.add_route(CATCH_ALL_PATH, catch_all, include_in_schema=False)
