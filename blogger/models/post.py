"""
Post and comment domain models and schemas.

Dependencies: pydantic
System role: Post/comment API contracts
"""

import uuid
from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field


class CreatePostRequest(BaseModel):
    """Request schema for creating a post."""

    text: str | None = Field(None, description="Post body")


class UpdatePostRequest(BaseModel):
    """Request schema for replacing a post's text."""

    text: str | None = Field(None, description="New post body")


class CreateCommentRequest(BaseModel):
    """Request schema for appending a comment."""

    text: str | None = Field(None, description="Comment body")


class CommentResponse(BaseModel):
    """Response schema for a single comment."""

    id: uuid.UUID
    text: str | None
    position: int
    created_at: datetime
    updated_at: datetime


class PostAuthorResponse(BaseModel):
    """Populated author reference: either a user or an author."""

    id: uuid.UUID
    type: Literal["user", "author"]
    name: str | None = None
    email: str | None = None


class PostResponse(BaseModel):
    """
    Response schema for post operations.

    ``author`` is only filled when the endpoint populates references;
    ``author_id`` is always present.
    """

    id: uuid.UUID
    text: str | None
    author_id: uuid.UUID | None
    author_type: Literal["user", "author"] | None
    author: PostAuthorResponse | None = None
    comments: list[CommentResponse] = Field(default_factory=list)
    created_at: datetime
    updated_at: datetime


class DeletePostResponse(BaseModel):
    """Response schema for a successful delete."""

    id: uuid.UUID
    deleted: bool = True
