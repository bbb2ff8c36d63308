"""
API routes module.

FastAPI routers for all HTTP endpoints.
"""

from fastapi import APIRouter

from .routers import (
    auth_router,
    authors_router,
    comments_router,
    health_router,
    pages_router,
    posts_router,
)

api_router = APIRouter()

# Include all routers
api_router.include_router(pages_router)
api_router.include_router(auth_router)
api_router.include_router(health_router)
api_router.include_router(posts_router)
api_router.include_router(comments_router)
api_router.include_router(authors_router)

__all__ = ["api_router"]
