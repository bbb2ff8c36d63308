"""
Dependency injection container.

Factory functions for FastAPI dependencies.

Dependencies: blogger.configs, blogger.application, blogger.boundary
System role: DI container for service injection
"""

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from blogger.configs import Settings, get_settings
from blogger.boundary.db import get_async_db
from blogger.application.services import AuthService, AuthorService, PostService


def get_settings_dependency(request: Request) -> Settings:
    """
    Get the settings the running app was built with.

    Falls back to the process-wide singleton for apps created without
    explicit settings.
    """
    return getattr(request.app.state, "settings", None) or get_settings()


def get_auth_service(db: AsyncSession = Depends(get_async_db)) -> AuthService:
    """
    Get auth service instance.

    Args:
        db: Async database session (injected via Depends)

    Returns:
        AuthService: Auth service instance
    """
    return AuthService(db=db)


def get_post_service(
    db: AsyncSession = Depends(get_async_db),
    settings: Settings = Depends(get_settings_dependency),
) -> PostService:
    """
    Get post service instance configured with the blog behaviour variants.

    Args:
        db: Async database session (injected via Depends)
        settings: Application settings (injected via Depends)

    Returns:
        PostService: Post service instance
    """
    return PostService(
        db=db,
        populate_on_list=settings.blog.populate_authors_on_list,
        allow_ownerless_mutation=settings.blog.allow_ownerless_post_mutation,
    )


def get_author_service(db: AsyncSession = Depends(get_async_db)) -> AuthorService:
    """
    Get author service instance.

    Args:
        db: Async database session (injected via Depends)

    Returns:
        AuthorService: Author service instance
    """
    return AuthorService(db=db)
