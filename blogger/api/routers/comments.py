"""
Comment API endpoints.

Routes:
- GET /api/posts/{post_id}/comments - List a post's comments in order
- POST /api/posts/{post_id}/comments - Append a comment

Dependencies: blogger.application.services, blogger.models
System role: Comment HTTP API
"""

from fastapi import APIRouter, Depends

from blogger.api.deps import get_post_service
from blogger.application.services import PostService
from blogger.models.common import ErrorResponse
from blogger.models.post import CommentResponse, CreateCommentRequest

from .router_utils import handle_blog_errors, payload_of

router = APIRouter(
    prefix="/api/posts/{post_id}/comments",
    tags=["comments"],
    responses={404: {"model": ErrorResponse}},
)


@router.get("", response_model=list[CommentResponse])
@handle_blog_errors
async def list_comments(
    post_id: str,
    post_service: PostService = Depends(get_post_service),
) -> list[CommentResponse]:
    """List the post's comments in arrival order."""
    comments = await post_service.list_comments(post_id)
    return [CommentResponse(**c) for c in comments]


@router.post("", response_model=CommentResponse)
@handle_blog_errors
async def add_comment(
    post_id: str,
    request: CreateCommentRequest = Depends(payload_of(CreateCommentRequest)),
    post_service: PostService = Depends(get_post_service),
) -> CommentResponse:
    """Append a comment to the end of the post's comment list."""
    comment = await post_service.add_comment(post_id, text=request.text)
    return CommentResponse(**comment)
