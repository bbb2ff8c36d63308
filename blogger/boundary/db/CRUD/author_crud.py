"""
Author CRUD operations.

Dependencies: blogger.boundary.db.models
System role: Byline persistence operations
"""

from blogger.boundary.db.models.author_model import AuthorModel
from blogger.boundary.db.CRUD.base_crud import BaseCRUD


class AuthorCRUD(BaseCRUD[AuthorModel]):
    """CRUD operations for AuthorModel."""

    def __init__(self) -> None:
        """Initialize AuthorCRUD with AuthorModel."""
        super().__init__(AuthorModel)


author_crud = AuthorCRUD()
