"""
CRUD operations for database models.

Exports base CRUD class and model-specific CRUD implementations
with pre-instantiated singletons for direct use.

Usage:
    from blogger.boundary.db.CRUD import post_crud, user_crud

    post = await post_crud.get_by_id(db, post_id)

    # Or instantiate classes directly for custom behavior
    from blogger.boundary.db.CRUD import PostCRUD
    custom_crud = PostCRUD()
"""

from blogger.boundary.db.CRUD.base_crud import BaseCRUD
from blogger.boundary.db.CRUD.user_crud import UserCRUD, user_crud
from blogger.boundary.db.CRUD.author_crud import AuthorCRUD, author_crud
from blogger.boundary.db.CRUD.post_crud import PostCRUD, post_crud

__all__ = [
    "BaseCRUD",
    "UserCRUD",
    "user_crud",
    "AuthorCRUD",
    "author_crud",
    "PostCRUD",
    "post_crud",
]
