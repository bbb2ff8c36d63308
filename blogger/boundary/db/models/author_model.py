"""
Author ORM model.

Dependencies: sqlalchemy, blogger.boundary.db.base
System role: Byline persistence
"""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from blogger.boundary.db.base import Base, UUIDMixin, TimestampMixin


class AuthorModel(Base, UUIDMixin, TimestampMixin):
    """Named byline that can be assigned to posts."""

    __tablename__ = "authors"

    name: Mapped[str | None] = mapped_column(
        String(255),
        nullable=True,
        doc="Display name",
    )
