"""API routers."""

from .evaluation_stream import router as evaluation_stream_router
from .evaluations import router as evaluations_router
from .health import router as health_router

__all__ = [
    "evaluation_stream_router",
    "evaluations_router",
    "health_router",
]
