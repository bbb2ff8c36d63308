"""
Post API endpoints.

Routes:
- GET /api/posts - List posts
- POST /api/posts - Create post owned by the current user
- GET /api/posts/{post_id} - Get single post
- PUT /api/posts/{post_id} - Update post (owner only)
- DELETE /api/posts/{post_id} - Delete post (owner only)

Dependencies: blogger.application.services, blogger.models
System role: Post management HTTP API
"""

import logging

from fastapi import APIRouter, Depends, Query

from blogger.api.deps import AuthContext, get_auth_context, get_post_service
from blogger.application.services import PostService
from blogger.models.common import ErrorResponse
from blogger.models.post import (
    CreatePostRequest,
    DeletePostResponse,
    PostResponse,
    UpdatePostRequest,
)

from .router_utils import handle_blog_errors, payload_of

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/posts", tags=["posts"])


@router.get("", response_model=list[PostResponse])
@handle_blog_errors
async def list_posts(
    limit: int | None = Query(None, ge=1),
    offset: int = Query(0, ge=0),
    post_service: PostService = Depends(get_post_service),
) -> list[PostResponse]:
    """
    List all posts, oldest first.

    Authors are embedded unless BLOG_POPULATE_AUTHORS_ON_LIST is off.
    """
    posts = await post_service.list_posts(limit=limit, offset=offset)

    logger.info(
        "Posts retrieved successfully",
        extra={"count": len(posts), "limit": limit, "offset": offset},
    )
    return [PostResponse(**p) for p in posts]


@router.post("", response_model=PostResponse)
@handle_blog_errors
async def create_post(
    request: CreatePostRequest = Depends(payload_of(CreatePostRequest)),
    auth: AuthContext = Depends(get_auth_context),
    post_service: PostService = Depends(get_post_service),
) -> PostResponse:
    """
    Create a post. Anonymous sessions create ownerless posts.

    Raises:
        HTTPException(500): Creation failed
    """
    post = await post_service.create_post(text=request.text, author=auth.user)
    return PostResponse(**post)


@router.get(
    "/{post_id}",
    response_model=PostResponse,
    responses={404: {"model": ErrorResponse}},
)
@handle_blog_errors
async def get_post(
    post_id: str,
    post_service: PostService = Depends(get_post_service),
) -> PostResponse:
    """
    Get single post (author reference not populated).

    Raises:
        HTTPException(404): Post not found
    """
    post = await post_service.get_post(post_id)
    return PostResponse(**post)


@router.put(
    "/{post_id}",
    response_model=PostResponse,
    responses={403: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
@handle_blog_errors
async def update_post(
    post_id: str,
    request: UpdatePostRequest = Depends(payload_of(UpdatePostRequest)),
    auth: AuthContext = Depends(get_auth_context),
    post_service: PostService = Depends(get_post_service),
) -> PostResponse:
    """
    Replace the post's text.

    Raises:
        HTTPException(403): Current session does not own the post
        HTTPException(404): Post not found
    """
    logger.info(
        "Updating post",
        extra={"post_id": post_id, "requester_id": str(auth.user_id)},
    )
    post = await post_service.update_post(post_id, text=request.text, requester_id=auth.user_id)
    return PostResponse(**post)


@router.delete(
    "/{post_id}",
    response_model=DeletePostResponse,
    responses={403: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
@handle_blog_errors
async def delete_post(
    post_id: str,
    auth: AuthContext = Depends(get_auth_context),
    post_service: PostService = Depends(get_post_service),
) -> DeletePostResponse:
    """
    Delete the post and its comments.

    Raises:
        HTTPException(403): Current session does not own the post
        HTTPException(404): Post not found
    """
    logger.info(
        "Deleting post",
        extra={"post_id": post_id, "requester_id": str(auth.user_id)},
    )
    deleted_id = await post_service.delete_post(post_id, requester_id=auth.user_id)
    return DeletePostResponse(id=deleted_id)
