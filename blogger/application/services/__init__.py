"""Service orchestrators."""

from .auth_service import AuthService
from .author_service import AuthorService
from .post_service import PostService

__all__ = [
    "AuthService",
    "AuthorService",
    "PostService",
]
