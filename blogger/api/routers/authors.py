"""
Author API endpoints.

Routes:
- GET /api/authors - List authors
- POST /api/authors - Create author
- PUT /api/posts/{post_id}/authors/{author_id} - Assign author to post

Dependencies: blogger.application.services, blogger.models
System role: Author management HTTP API
"""

import logging

from fastapi import APIRouter, Depends, Query

from blogger.api.deps import get_author_service
from blogger.application.services import AuthorService
from blogger.models.author import AuthorResponse, CreateAuthorRequest
from blogger.models.common import ErrorResponse
from blogger.models.post import PostResponse

from .router_utils import handle_blog_errors, payload_of

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["authors"])


@router.get("/authors", response_model=list[AuthorResponse])
@handle_blog_errors
async def list_authors(
    limit: int | None = Query(None, ge=1),
    offset: int = Query(0, ge=0),
    author_service: AuthorService = Depends(get_author_service),
) -> list[AuthorResponse]:
    """List all authors, oldest first."""
    authors = await author_service.list_authors(limit=limit, offset=offset)
    return [AuthorResponse(**a) for a in authors]


@router.post("/authors", response_model=AuthorResponse)
@handle_blog_errors
async def create_author(
    request: CreateAuthorRequest = Depends(payload_of(CreateAuthorRequest)),
    author_service: AuthorService = Depends(get_author_service),
) -> AuthorResponse:
    """Create an author from the name in the body."""
    author = await author_service.create_author(name=request.name)
    return AuthorResponse(**author)


@router.put(
    "/posts/{post_id}/authors/{author_id}",
    response_model=PostResponse,
    responses={404: {"model": ErrorResponse}},
)
@handle_blog_errors
async def assign_author(
    post_id: str,
    author_id: str,
    author_service: AuthorService = Depends(get_author_service),
) -> PostResponse:
    """
    Point the post at the author.

    Raises:
        HTTPException(404): Author or post not found
    """
    logger.info(
        "Assigning author to post",
        extra={"post_id": post_id, "author_id": author_id},
    )
    post = await author_service.assign_author(post_id, author_id)
    return PostResponse(**post)
