"""
User ORM model.

Dependencies: sqlalchemy, blogger.boundary.db.base
System role: Account persistence for signup/login
"""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from blogger.boundary.db.base import Base, UUIDMixin, TimestampMixin


class UserModel(Base, UUIDMixin, TimestampMixin):
    """
    Registered account.

    Only the bcrypt hash of the password is stored. Posts reference users
    through ``PostModel.author_id`` without a foreign key.

    Attributes:
        id: UUID primary key (auto-generated)
        email: Login email, unique
        password_hash: bcrypt hash produced by blogger.core.security
    """

    __tablename__ = "users"

    email: Mapped[str] = mapped_column(
        String(320),
        nullable=False,
        unique=True,
        index=True,
        doc="Login email",
    )
    password_hash: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        doc="bcrypt password hash",
    )
