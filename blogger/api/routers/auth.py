"""
Signup, login and logout endpoints.

Routes:
- POST /users - Create account and log it in
- POST /login - Authenticate and log in
- GET /logout - Clear the session
- GET /api/users/current - Current user or 404

Dependencies: blogger.application.services, blogger.api.deps, blogger.models
System role: Session lifecycle HTTP API
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import RedirectResponse

from blogger.api.deps import (
    AuthContext,
    get_auth_context,
    get_auth_service,
    get_settings_dependency,
)
from blogger.application.services import AuthService
from blogger.application.services.auth_service import user_to_dict
from blogger.configs import Settings
from blogger.models.common import ErrorResponse
from blogger.models.user import CredentialsRequest, UserResponse

from .router_utils import handle_blog_errors, payload_of

logger = logging.getLogger(__name__)

router = APIRouter(tags=["auth"])


def _home() -> RedirectResponse:
    return RedirectResponse(url="/", status_code=status.HTTP_302_FOUND)


@router.post("/users", status_code=status.HTTP_302_FOUND, response_class=RedirectResponse)
@handle_blog_errors
async def signup(
    request: CredentialsRequest = Depends(payload_of(CredentialsRequest)),
    auth: AuthContext = Depends(get_auth_context),
    auth_service: AuthService = Depends(get_auth_service),
) -> RedirectResponse:
    """
    Create an account with a hashed password and log it in immediately.

    Raises:
        HTTPException(400): Email already registered
        HTTPException(422): Missing email or password
    """
    user = await auth_service.signup(
        email=request.user.email,
        password=request.user.password,
    )
    auth.login(user)

    logger.info("New user logged in", extra={"user_id": str(user.id)})
    return _home()


@router.post("/login", status_code=status.HTTP_302_FOUND, response_class=RedirectResponse)
@handle_blog_errors
async def login(
    request: CredentialsRequest = Depends(payload_of(CredentialsRequest)),
    auth: AuthContext = Depends(get_auth_context),
    auth_service: AuthService = Depends(get_auth_service),
    settings: Settings = Depends(get_settings_dependency),
) -> RedirectResponse:
    """
    Authenticate and store the user in the session.

    A failed login redirects to ``BLOG_LOGIN_FAILURE_REDIRECT`` or, when
    that is empty, answers 401.
    """
    user = await auth_service.authenticate(
        email=request.user.email,
        password=request.user.password,
    )
    if user is not None:
        auth.login(user)
        logger.info("User logged in", extra={"user_id": str(user.id)})
        return _home()

    logger.info("Login failed")
    failure_redirect = settings.blog.login_failure_redirect
    if failure_redirect:
        return RedirectResponse(url=failure_redirect, status_code=status.HTTP_302_FOUND)
    raise HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Invalid email or password",
    )


@router.get("/logout", status_code=status.HTTP_302_FOUND, response_class=RedirectResponse)
async def logout(auth: AuthContext = Depends(get_auth_context)) -> RedirectResponse:
    """Clear the session and go home."""
    if auth.is_authenticated:
        logger.info("User logged out", extra={"user_id": str(auth.user_id)})
    auth.logout()
    return _home()


@router.get(
    "/api/users/current",
    response_model=UserResponse,
    responses={404: {"model": ErrorResponse}},
)
async def current_user(auth: AuthContext = Depends(get_auth_context)) -> UserResponse:
    """
    Return the logged-in user.

    Raises:
        HTTPException(404): Nobody is logged in
    """
    if auth.user is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Please Login")
    return UserResponse(**user_to_dict(auth.user))
