"""
FastAPI exception handlers for identifier generation failures.

Entropy failures are server faults: they are logged with their cause and
answered with a 500, never retried.
"""

from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from ..observability.logging import get_logger
from ..schemas.response import ErrorResponse
from .uid import UidGenerationError

logger = get_logger("errors")


def install_exception_handlers(app: FastAPI) -> None:
    """Register exception handlers on the app."""

    @app.exception_handler(UidGenerationError)
    async def handle_uid_error(request: Request, exc: UidGenerationError) -> JSONResponse:
        logger.error(
            "Identifier generation failed",
            extra={
                "path": request.url.path,
                "error": str(exc),
                "cause": repr(exc.__cause__) if exc.__cause__ else None,
            },
        )
        return JSONResponse(
            status_code=500,
            content=ErrorResponse(detail="Identifier generation failed").model_dump(),
        )
