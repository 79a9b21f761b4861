from __future__ import annotations

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

router = APIRouter()


@router.get("/ping", response_class=PlainTextResponse)
def ping() -> str:
    """
    Lightweight liveness probe endpoint.
    Always answers `ok`, whatever the query string or headers.
    """
    return "ok"
