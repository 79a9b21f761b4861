from __future__ import annotations

import uvicorn
from fastapi import FastAPI

from .api.router import router as api_router
from .core.config import settings
from .core.exceptions import install_exception_handlers
from .observability import otel
from .observability.logging import get_logger, setup_logging
from .observability.middleware import TraceLoggingMiddleware

logger = get_logger("main")


def create_app() -> FastAPI:
    """
    Application factory.

    - Sets up JSON logging with trace/span IDs
    - Configures OpenTelemetry tracing when enabled
    - Attaches the request logging middleware and error handlers
    - Registers /ping and /uid at the root; docs and OpenAPI routes stay off
    """
    setup_logging()

    app = FastAPI(
        title=settings.app.name,
        version="0.1.0",
        openapi_url=None,
        docs_url=None,
        redoc_url=None,
    )

    otel.init_otel(app)

    app.add_middleware(TraceLoggingMiddleware)
    install_exception_handlers(app)

    app.include_router(api_router)

    return app


app = create_app()


def run() -> None:
    """Serve the app on the fixed port until interrupted."""
    cfg = settings.app
    print(f"{cfg.name} listening on http://localhost:{cfg.port}", flush=True)
    logger.info("Starting server", extra={"host": cfg.host, "port": cfg.port})
    # log_config=None keeps uvicorn's loggers on our JSON root handler.
    uvicorn.run(app, host=cfg.host, port=cfg.port, log_config=None)


if __name__ == "__main__":
    run()
