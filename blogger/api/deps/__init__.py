"""API-specific dependencies."""

from .dependencies import (
    get_auth_service,
    get_author_service,
    get_post_service,
    get_settings_dependency,
)
from .auth import SESSION_USER_KEY, AuthContext, get_auth_context

__all__ = [
    "AuthContext",
    "SESSION_USER_KEY",
    "get_auth_context",
    "get_auth_service",
    "get_author_service",
    "get_post_service",
    "get_settings_dependency",
]
