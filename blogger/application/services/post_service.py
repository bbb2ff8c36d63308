"""
Post service orchestrator.

Coordinates post and comment lifecycle operations, author population and
ownership checks.

Dependencies: blogger.boundary.db.CRUD, blogger.core
System role: Post/comment use case orchestration
"""

import logging
from typing import Any
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from blogger.boundary.db.CRUD.post_crud import post_crud
from blogger.boundary.db.models.author_model import AuthorModel
from blogger.boundary.db.models.post_model import AuthorType, CommentModel, PostModel
from blogger.boundary.db.models.user_model import UserModel
from blogger.core.exceptions import NotAuthorizedError, PostNotFoundError
from blogger.core.identifiers import same_id

logger = logging.getLogger(__name__)


def comment_to_dict(comment: CommentModel) -> dict:
    return {
        "id": comment.id,
        "text": comment.text,
        "position": comment.position,
        "created_at": comment.created_at,
        "updated_at": comment.updated_at,
    }


def author_ref_to_dict(ref: UserModel | AuthorModel | None) -> dict | None:
    if isinstance(ref, UserModel):
        return {"id": ref.id, "type": AuthorType.USER.value, "email": ref.email}
    if isinstance(ref, AuthorModel):
        return {"id": ref.id, "type": AuthorType.AUTHOR.value, "name": ref.name}
    return None


def post_to_dict(post: PostModel, author: UserModel | AuthorModel | None = None) -> dict:
    """
    Serialise a post.

    Args:
        post: Post with comments loaded
        author: Populated reference, None to leave the post unpopulated

    Returns:
        dict: Post fields, comments in arrival order
    """
    return {
        "id": post.id,
        "text": post.text,
        "author_id": post.author_id,
        "author_type": post.author_type.value if post.author_type else None,
        "author": author_ref_to_dict(author),
        "comments": [comment_to_dict(c) for c in post.comments],
        "created_at": post.created_at,
        "updated_at": post.updated_at,
    }


class PostService:
    """Post service orchestrator."""

    def __init__(
        self,
        db: AsyncSession,
        populate_on_list: bool = True,
        allow_ownerless_mutation: bool = False,
    ) -> None:
        """
        Initialize post service.

        Args:
            db: Async SQLAlchemy session
            populate_on_list: Embed author records in list_posts results
            allow_ownerless_mutation: Let anyone update/delete posts without an author
        """
        self.db = db
        self.populate_on_list = populate_on_list
        self.allow_ownerless_mutation = allow_ownerless_mutation

    async def _get_or_raise(self, post_id: Any) -> PostModel:
        post = await post_crud.get_by_id(self.db, post_id)
        if post is None:
            raise PostNotFoundError(post_id)
        return post

    async def populated(self, post: PostModel) -> dict:
        """Serialise a single post with its author reference resolved."""
        authors = await post_crud.resolve_authors(self.db, [post])
        return post_to_dict(post, authors.get(post.id))

    def _ensure_can_mutate(self, post: PostModel, requester_id: Any) -> None:
        if post.author_id is None and self.allow_ownerless_mutation:
            return
        if not same_id(requester_id, post.author_id):
            logger.warning(
                "Rejected post mutation by non-owner",
                extra={
                    "post_id": str(post.id),
                    "requester_id": str(requester_id),
                    "author_id": str(post.author_id),
                },
            )
            raise NotAuthorizedError(
                details={"post_id": str(post.id), "requester_id": str(requester_id)}
            )

    async def list_posts(self, limit: int | None = None, offset: int = 0) -> list[dict]:
        """
        Get all posts, oldest first.

        Args:
            limit: Maximum number of posts to return
            offset: Number of posts to skip

        Returns:
            list[dict]: Posts, populated when populate_on_list is set
        """
        posts = await post_crud.get_all(self.db, limit=limit, offset=offset)
        if not self.populate_on_list:
            return [post_to_dict(p) for p in posts]

        authors = await post_crud.resolve_authors(self.db, posts)
        return [post_to_dict(p, authors.get(p.id)) for p in posts]

    async def create_post(self, text: str | None, author: UserModel | None) -> dict:
        """
        Create a post owned by ``author`` (anonymous when None).

        Returns:
            dict: Created post with author populated
        """
        post = await post_crud.create(
            self.db,
            text=text,
            author_id=author.id if author else None,
            author_type=AuthorType.USER if author else None,
        )
        await self.db.commit()

        logger.info(
            "Post created",
            extra={"post_id": str(post.id), "author_id": str(post.author_id)},
        )
        return await self.populated(post)

    async def get_post(self, post_id: Any) -> dict:
        """
        Get a post by ID without populating its author.

        Raises:
            PostNotFoundError: If the post does not exist
        """
        post = await self._get_or_raise(post_id)
        return post_to_dict(post)

    async def update_post(self, post_id: Any, text: str | None, requester_id: Any) -> dict:
        """
        Replace a post's text.

        Args:
            post_id: Post ID, any representation
            text: New body
            requester_id: ID of the session user (None when anonymous)

        Returns:
            dict: Updated post with author populated

        Raises:
            PostNotFoundError: If the post does not exist
            NotAuthorizedError: If the requester does not own the post
        """
        post = await self._get_or_raise(post_id)
        self._ensure_can_mutate(post, requester_id)

        post.text = text
        await self.db.commit()

        logger.info("Post updated", extra={"post_id": str(post.id)})
        return await self.populated(post)

    async def delete_post(self, post_id: Any, requester_id: Any) -> UUID:
        """
        Delete a post and its comments.

        Returns:
            UUID: ID of the deleted post

        Raises:
            PostNotFoundError: If the post does not exist
            NotAuthorizedError: If the requester does not own the post
        """
        post = await self._get_or_raise(post_id)
        self._ensure_can_mutate(post, requester_id)

        deleted_id = post.id
        await post_crud.delete_by_id(self.db, deleted_id)
        await self.db.commit()

        logger.info("Post deleted", extra={"post_id": str(deleted_id)})
        return deleted_id

    async def list_comments(self, post_id: Any) -> list[dict]:
        """
        Get a post's comments in arrival order.

        Raises:
            PostNotFoundError: If the post does not exist
        """
        post = await self._get_or_raise(post_id)
        return [comment_to_dict(c) for c in post.comments]

    async def add_comment(self, post_id: Any, text: str | None) -> dict:
        """
        Append a comment to a post.

        Raises:
            PostNotFoundError: If the post does not exist
        """
        post = await self._get_or_raise(post_id)
        comment = await post_crud.add_comment(self.db, post, text)
        await self.db.commit()

        logger.info(
            "Comment added",
            extra={"post_id": str(post.id), "comment_id": str(comment.id), "position": comment.position},
        )
        return comment_to_dict(comment)
