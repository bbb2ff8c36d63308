"""API routers."""

from .auth import router as auth_router
from .authors import router as authors_router
from .comments import router as comments_router
from .health import router as health_router
from .pages import router as pages_router
from .posts import router as posts_router

__all__ = [
    "auth_router",
    "authors_router",
    "comments_router",
    "health_router",
    "pages_router",
    "posts_router",
]
