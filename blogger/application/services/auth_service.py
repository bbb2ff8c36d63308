"""
Auth service orchestrator.

Signup, credential checks and session-user lookup.

Dependencies: blogger.boundary.db.CRUD, blogger.core.security
System role: Account use case orchestration
"""

import logging
from typing import Any

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from blogger.boundary.db.CRUD.user_crud import user_crud
from blogger.boundary.db.models.user_model import UserModel
from blogger.core.exceptions import EmailAlreadyRegisteredError
from blogger.core.security import dummy_verify, hash_password, verify_password

logger = logging.getLogger(__name__)


def user_to_dict(user: UserModel) -> dict:
    """Public fields of a user; the hash never leaves this layer."""
    return {
        "id": user.id,
        "email": user.email,
        "created_at": user.created_at,
        "updated_at": user.updated_at,
    }


class AuthService:
    """Auth service orchestrator."""

    def __init__(self, db: AsyncSession) -> None:
        """
        Initialize auth service with async database session.

        Args:
            db: Async SQLAlchemy session
        """
        self.db = db

    async def signup(self, email: str, password: str) -> UserModel:
        """
        Create an account with a hashed password.

        Args:
            email: Login email
            password: Raw password (hashed before storage)

        Returns:
            UserModel: The stored user

        Raises:
            EmailAlreadyRegisteredError: If the email already has an account
        """
        if await user_crud.get_by_email(self.db, email) is not None:
            raise EmailAlreadyRegisteredError(email)

        try:
            user = await user_crud.create(
                self.db,
                email=email,
                password_hash=hash_password(password),
            )
            await self.db.commit()
        except IntegrityError as e:
            # Lost a race with a concurrent signup for the same email
            await self.db.rollback()
            raise EmailAlreadyRegisteredError(email) from e

        logger.info("User signed up", extra={"user_id": str(user.id)})
        return user

    async def authenticate(self, email: str, password: str) -> UserModel | None:
        """
        Return the user only when the password matches.

        Unknown email and wrong password both resolve to None.

        Args:
            email: Login email
            password: Raw password

        Returns:
            UserModel | None: Authenticated user
        """
        user = await user_crud.get_by_email(self.db, email)
        if user is None:
            dummy_verify()
            return None
        if not verify_password(password, user.password_hash):
            return None
        return user

    async def get_user(self, user_id: Any) -> UserModel | None:
        """
        Resolve the user behind a session id.

        A missing, malformed or unknown id resolves to None. A failed lookup
        is rolled back and re-raised so callers can tell "no such user"
        apart from "could not check".

        Args:
            user_id: Id stored in the session, any representation

        Returns:
            UserModel | None: Current user

        Raises:
            SQLAlchemyError: If the lookup itself failed
        """
        if user_id is None:
            return None
        try:
            return await user_crud.get_by_id(self.db, user_id)
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.warning(
                "Session user lookup failed",
                extra={"user_id": str(user_id), "error": str(e)},
            )
            raise
