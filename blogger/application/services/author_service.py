"""
Author service orchestrator.

Coordinates author creation, listing and assignment to posts.

Dependencies: blogger.boundary.db.CRUD
System role: Author use case orchestration
"""

import logging
from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from blogger.boundary.db.CRUD.author_crud import author_crud
from blogger.boundary.db.CRUD.post_crud import post_crud
from blogger.boundary.db.models.author_model import AuthorModel
from blogger.boundary.db.models.post_model import AuthorType
from blogger.core.exceptions import AuthorNotFoundError, PostNotFoundError
from blogger.application.services.post_service import post_to_dict

logger = logging.getLogger(__name__)


def author_to_dict(author: AuthorModel) -> dict:
    return {
        "id": author.id,
        "name": author.name,
        "created_at": author.created_at,
        "updated_at": author.updated_at,
    }


class AuthorService:
    """Author service orchestrator."""

    def __init__(self, db: AsyncSession) -> None:
        """
        Initialize author service with async database session.

        Args:
            db: Async SQLAlchemy session
        """
        self.db = db

    async def list_authors(self, limit: int | None = None, offset: int = 0) -> list[dict]:
        """Get all authors, oldest first."""
        authors = await author_crud.get_all(self.db, limit=limit, offset=offset)
        return [author_to_dict(a) for a in authors]

    async def create_author(self, name: str | None) -> dict:
        """
        Create an author.

        Args:
            name: Display name

        Returns:
            dict: Created author
        """
        author = await author_crud.create(self.db, name=name)
        await self.db.commit()

        logger.info("Author created", extra={"author_id": str(author.id)})
        return author_to_dict(author)

    async def assign_author(self, post_id: Any, author_id: Any) -> dict:
        """
        Point a post at an existing author.

        Args:
            post_id: Post ID, any representation
            author_id: Author ID, any representation

        Returns:
            dict: Updated post with the author populated

        Raises:
            AuthorNotFoundError: If the author does not exist
            PostNotFoundError: If the post does not exist
        """
        author = await author_crud.get_by_id(self.db, author_id)
        if author is None:
            raise AuthorNotFoundError(author_id)

        post = await post_crud.get_by_id(self.db, post_id)
        if post is None:
            raise PostNotFoundError(post_id)

        await post_crud.set_author(self.db, post, author.id, AuthorType.AUTHOR)
        await self.db.commit()

        logger.info(
            "Author assigned to post",
            extra={"post_id": str(post.id), "author_id": str(author.id)},
        )
        return post_to_dict(post, author)
