"""Comment endpoints."""

import logging

from fastapi import APIRouter, HTTPException, Path, status

from codemmunity.api.v1.dependencies import CommentRepoDep, UserRepoDep
from codemmunity.schemas.comment import CommentCreate, CommentResponse
from codemmunity.schemas.post import POST_ID_MAX
from codemmunity.services.comment_service import create_comment, list_comments
from codemmunity.services.errors import UserNotFoundError

router = APIRouter(prefix="/comments", tags=["comments"])

logger = logging.getLogger(__name__)


@router.get("/{post_id}", response_model=list[CommentResponse])
def get_comments(
    comments: CommentRepoDep,
    post_id: int = Path(..., ge=0, le=POST_ID_MAX),
) -> list[CommentResponse]:
    """List comments on a post, newest first."""
    logger.info("GET /api/comments/%s", post_id)
    return list_comments(comments, post_id)


@router.post("", response_model=CommentResponse, status_code=status.HTTP_201_CREATED)
def new_comment(
    comment_data: CommentCreate,
    comments: CommentRepoDep,
    users: UserRepoDep,
) -> CommentResponse:
    """Add a comment to a post."""
    logger.info("POST /api/comments")
    try:
        return create_comment(
            repo=comments,
            users=users,
            post_id=comment_data.post_id,
            user_id=comment_data.user_id,
            data=comment_data.data,
        )
    except UserNotFoundError as err:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="User not found",
        ) from err
