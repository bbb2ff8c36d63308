"""
Post and comment ORM models.

Comments are owned by their post: they are loaded with it, ordered by
arrival, and deleted with it.

Dependencies: sqlalchemy, blogger.boundary.db.base
System role: Post persistence with embedded comments
"""

import enum
from uuid import UUID

from sqlalchemy import Enum, ForeignKey, Integer, Text, Uuid
from sqlalchemy.ext.orderinglist import ordering_list
from sqlalchemy.orm import Mapped, mapped_column, relationship

from blogger.boundary.db.base import Base, UUIDMixin, TimestampMixin


class AuthorType(str, enum.Enum):
    """Which table ``PostModel.author_id`` points into."""

    USER = "user"
    AUTHOR = "author"


class PostModel(Base, UUIDMixin, TimestampMixin):
    """
    Blog post.

    The author reference is not a foreign key: it may point at
    a user (the account that wrote the post) or at an author (assigned
    later), and it is allowed to dangle.

    Attributes:
        id: UUID primary key (auto-generated)
        text: Post body
        author_id: Referenced user/author id, or None for anonymous posts
        author_type: Table the reference points into
        comments: CommentModel rows in arrival order (cascade delete)
    """

    __tablename__ = "posts"

    text: Mapped[str | None] = mapped_column(
        Text,
        nullable=True,
        doc="Post body",
    )
    author_id: Mapped[UUID | None] = mapped_column(
        Uuid(as_uuid=True),
        nullable=True,
        index=True,
        doc="Referenced user or author id",
    )
    author_type: Mapped[AuthorType | None] = mapped_column(
        Enum(
            AuthorType,
            name="author_type",
            native_enum=False,
            length=16,
            values_callable=lambda members: [m.value for m in members],
        ),
        nullable=True,
        doc="Table author_id points into",
    )

    # Relationships
    comments = relationship(
        "CommentModel",
        back_populates="post",
        order_by="[CommentModel.position, CommentModel.created_at]",
        collection_class=ordering_list("position"),
        cascade="all, delete-orphan",
        lazy="selectin",
    )


class CommentModel(Base, UUIDMixin, TimestampMixin):
    """
    Comment embedded in a post.

    Attributes:
        post_id: Owning post
        position: Zero-based arrival index within the post
        text: Comment body
    """

    __tablename__ = "comments"

    post_id: Mapped[UUID] = mapped_column(
        ForeignKey("posts.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    position: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        default=0,
    )
    text: Mapped[str | None] = mapped_column(
        Text,
        nullable=True,
        doc="Comment body",
    )

    post = relationship("PostModel", back_populates="comments")
