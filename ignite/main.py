"""
IgniteAI API server.

``create_app()`` assembles middleware and routes; the lifespan configures
logging, builds the orchestrator once (failing fast without an API key) and
stops any in-flight evaluation on shutdown.

Run with ``python -m ignite.main``.

Dependencies: fastapi, uvicorn, ignite.api, ignite.observability, ignite.configs
System role: Application initialization and configuration
"""

from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from ignite import __version__
from ignite.api import api_router
from ignite.api.deps.dependencies import get_service_cache
from ignite.configs import get_settings
from ignite.observability.logger import configure_logging
from ignite.observability.middleware import (
    CORRELATION_HEADER,
    CorrelationMiddleware,
    RequestLoggingMiddleware,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Configure logging and own the orchestrator for the app's lifetime."""
    settings = get_settings()
    configure_logging(settings.log_level)

    cache = get_service_cache()
    try:
        orchestrator = cache.orchestrator
    except Exception as e:
        logger.exception(
            f"{__name__}:lifespan - Failed to build evaluation orchestrator",
            extra={"error_type": type(e).__name__},
        )
        raise

    logger.info(
        f"{__name__}:lifespan - Ready environment={settings.environment}, "
        f"analysis_model={settings.gemini.analysis_model}, "
        f"image_model={settings.gemini.image_model}"
    )

    yield

    await orchestrator.shutdown()
    cache.clear()
    logger.info(f"{__name__}:lifespan - Shutdown complete")


def create_app() -> FastAPI:
    """
    Build the FastAPI application.

    Returns:
        FastAPI: Application with middleware and all routes mounted
    """
    settings = get_settings()
    app = FastAPI(
        title="IgniteAI Evaluation API",
        description="Structured business idea evaluation powered by Gemini",
        version=__version__,
        lifespan=lifespan,
    )

    # Middleware runs in reverse order of registration
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(CorrelationMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=False,
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
        expose_headers=[CORRELATION_HEADER],
    )

    app.include_router(api_router, prefix=settings.api_prefix)
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "ignite.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
