"""
Database models package.

Exports:
  - UserModel: Account ORM model
  - AuthorModel: Byline ORM model
  - PostModel, CommentModel, AuthorType: Posts with embedded comments

Dependencies: sqlalchemy, blogger.boundary.db.base
System role: Database model definitions for domain entities
"""

from blogger.boundary.db.models.user_model import UserModel
from blogger.boundary.db.models.author_model import AuthorModel
from blogger.boundary.db.models.post_model import AuthorType, CommentModel, PostModel

__all__ = [
    "UserModel",
    "AuthorModel",
    "PostModel",
    "CommentModel",
    "AuthorType",
]
