"""
Database boundary layer: ORM models, CRUD operations, and connection management.

Exports:
  - Base, UUIDMixin, TimestampMixin: Model building blocks
  - get_async_engine(), get_async_session_factory(), get_async_db(): Connection management
  - create_all(), drop_all(): Schema helpers
  - UserModel, AuthorModel, PostModel, CommentModel: Domain entities
  - user_crud, author_crud, post_crud: CRUD operation singletons

Dependencies: sqlalchemy, blogger.configs
System role: Database adapter providing persistent storage for accounts,
authors, posts and their comments.
"""

from blogger.boundary.db.base import Base, TimestampMixin, UUIDMixin
from blogger.boundary.db.connection import (
    create_all,
    drop_all,
    get_async_db,
    get_async_engine,
    get_async_session_factory,
)
from blogger.boundary.db.models import (
    AuthorModel,
    AuthorType,
    CommentModel,
    PostModel,
    UserModel,
)
from blogger.boundary.db.CRUD import (
    AuthorCRUD,
    BaseCRUD,
    PostCRUD,
    UserCRUD,
    author_crud,
    post_crud,
    user_crud,
)

__all__ = [
    # Base classes
    "Base",
    "TimestampMixin",
    "UUIDMixin",
    # Connection
    "create_all",
    "drop_all",
    "get_async_db",
    "get_async_engine",
    "get_async_session_factory",
    # Models
    "UserModel",
    "AuthorModel",
    "PostModel",
    "CommentModel",
    "AuthorType",
    # CRUD classes
    "BaseCRUD",
    "UserCRUD",
    "AuthorCRUD",
    "PostCRUD",
    # CRUD singletons
    "user_crud",
    "author_crud",
    "post_crud",
]
