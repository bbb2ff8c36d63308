"""
Request-scoped authentication context.

The session cookie is decoded and verified by Starlette's SessionMiddleware;
this module turns the stored user id into an optional user exactly once
per request and exposes the login/logout helpers handlers need.

Dependencies: fastapi, blogger.application.services
System role: Current-user resolution and session mutation
"""

from dataclasses import dataclass

from fastapi import Depends, Request
from sqlalchemy.exc import SQLAlchemyError

from blogger.application.services import AuthService
from blogger.boundary.db.models.user_model import UserModel
from blogger.core.identifiers import canonical_id

from .dependencies import get_auth_service

SESSION_USER_KEY = "user_id"


@dataclass
class AuthContext:
    """
    Optional authenticated user plus the session it came from.

    Attributes:
        request: Current request (owns the mutable session mapping)
        user: User resolved from the session, None when anonymous
    """

    request: Request
    user: UserModel | None = None

    @property
    def user_id(self):
        return self.user.id if self.user is not None else None

    @property
    def is_authenticated(self) -> bool:
        return self.user is not None

    def login(self, user: UserModel) -> None:
        """Store the user's id in the session and mark it current."""
        self.request.session[SESSION_USER_KEY] = str(user.id)
        self.user = user

    def logout(self) -> None:
        """Forget the stored id; later lookups resolve no user."""
        self.request.session.pop(SESSION_USER_KEY, None)
        self.user = None


async def get_auth_context(
    request: Request,
    auth_service: AuthService = Depends(get_auth_service),
) -> AuthContext:
    """
    Resolve the current user from the signed session cookie.

    Never raises. Stale ids (deleted users, garbage values) are dropped from
    the session so the cookie stops carrying them. When the lookup fails the
    request runs anonymously but the session is left untouched, so the user
    is still logged in once the database answers again.

    Args:
        request: Current request
        auth_service: Injected AuthService

    Returns:
        AuthContext: Context for this request
    """
    stored_id = request.session.get(SESSION_USER_KEY)
    try:
        user = await auth_service.get_user(canonical_id(stored_id))
    except SQLAlchemyError:
        return AuthContext(request=request)

    context = AuthContext(request=request, user=user)
    if stored_id is not None and user is None:
        context.logout()
    return context
