"""
Post CRUD operations.

Provides post persistence plus comment appends and author population.
Comments are reached through their post only.

Dependencies: sqlalchemy, blogger.boundary.db.models, blogger.boundary.db.CRUD
System role: Post and comment persistence operations
"""

from typing import Sequence
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from blogger.boundary.db.models.post_model import AuthorType, CommentModel, PostModel
from blogger.boundary.db.CRUD.author_crud import author_crud
from blogger.boundary.db.CRUD.base_crud import BaseCRUD
from blogger.boundary.db.CRUD.user_crud import user_crud


class PostCRUD(BaseCRUD[PostModel]):
    """
    CRUD operations for PostModel.

    Comments load eagerly with their post (``lazy="selectin"``), so every
    query here returns posts whose comment list is safe to read.
    """

    def __init__(self) -> None:
        """Initialize PostCRUD with PostModel."""
        super().__init__(PostModel)

    async def add_comment(
        self,
        session: AsyncSession,
        post: PostModel,
        text: str | None,
    ) -> CommentModel:
        """
        Append a comment to the end of a post's comment list.

        Args:
            session: Async database session
            post: Owning post (comments already loaded)
            text: Comment body

        Returns:
            CommentModel with id, position and timestamps populated
        """
        comment = CommentModel(text=text)
        post.comments.append(comment)
        await session.flush()
        return comment

    async def set_author(
        self,
        session: AsyncSession,
        post: PostModel,
        author_id: UUID | None,
        author_type: AuthorType | None,
    ) -> PostModel:
        """
        Point a post at a user or an author.

        Args:
            session: Async database session
            post: Post to update
            author_id: Referenced id, None to clear
            author_type: Table the id points into

        Returns:
            The updated post
        """
        post.author_id = author_id
        post.author_type = author_type if author_id is not None else None
        await session.flush()
        return post

    async def resolve_authors(
        self,
        session: AsyncSession,
        posts: Sequence[PostModel],
    ) -> dict[UUID, object]:
        """
        Populate author references for a batch of posts.

        Runs at most one query per referenced table. Dangling references are
        simply absent from the result.

        Args:
            session: Async database session
            posts: Posts whose references should be resolved

        Returns:
            Mapping of post id to the referenced UserModel/AuthorModel
        """
        user_ids = [p.author_id for p in posts if p.author_type == AuthorType.USER]
        author_ids = [p.author_id for p in posts if p.author_type == AuthorType.AUTHOR]

        users = await user_crud.get_by_ids(session, user_ids) if user_ids else {}
        authors = await author_crud.get_by_ids(session, author_ids) if author_ids else {}

        resolved: dict[UUID, object] = {}
        for post in posts:
            if post.author_type == AuthorType.USER and post.author_id in users:
                resolved[post.id] = users[post.author_id]
            elif post.author_type == AuthorType.AUTHOR and post.author_id in authors:
                resolved[post.id] = authors[post.author_id]
        return resolved


post_crud = PostCRUD()
