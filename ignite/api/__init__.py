"""
API routes module.

FastAPI routers for all HTTP and WebSocket endpoints.
"""

from fastapi import APIRouter

from .routers import (
    evaluation_stream_router,
    evaluations_router,
    health_router,
)

api_router = APIRouter()

# Include all routers
api_router.include_router(health_router)
api_router.include_router(evaluations_router)
api_router.include_router(evaluation_stream_router)

__all__ = ["api_router"]
