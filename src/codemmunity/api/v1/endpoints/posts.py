"""Post-related endpoints for the Codemmunity API."""

import logging

from fastapi import APIRouter, HTTPException, Path, Query, status

from codemmunity.api.v1.dependencies import PostRepoDep, UserRepoDep
from codemmunity.schemas.post import POST_ID_MAX, PostCreate, PostResponse
from codemmunity.services.errors import PostNotFoundError, UserNotFoundError
from codemmunity.services.post_service import (
    create_post,
    delete_post,
    fetch_post,
    list_posts,
)

router = APIRouter(prefix="/posts", tags=["posts"])

logger = logging.getLogger(__name__)


@router.get("", response_model=list[PostResponse])
def get_posts(posts: PostRepoDep) -> list[PostResponse]:
    """List every post, newest first.

    Bodies are shortened to a fixed-length summary; fetch a single post to
    read it in full.
    """
    logger.info("GET /api/posts")
    return list_posts(posts)


@router.get("/{post_id}", response_model=PostResponse)
def get_post(
    posts: PostRepoDep,
    post_id: int = Path(..., ge=0, le=POST_ID_MAX),
) -> PostResponse:
    """Get a specific post by ID.

    Args:
        post_id: ID of the post to retrieve
        posts: Post repository

    Returns:
        Post with its full body

    Raises:
        HTTPException: If post not found. The 404 body is JSON
            ``{"detail": "Post not found"}`` like every other error, not the
            plain-text message older clients may expect.
    """
    logger.info("GET /api/posts/%s", post_id)
    try:
        return fetch_post(posts, post_id)
    except PostNotFoundError as err:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Post not found",
        ) from err


@router.post("", response_model=PostResponse, status_code=status.HTTP_201_CREATED)
def new_post(
    post_data: PostCreate,
    posts: PostRepoDep,
    users: UserRepoDep,
) -> PostResponse:
    """Create a new post.

    Raises:
        HTTPException: If the author is not registered
    """
    logger.info("POST /api/posts")
    try:
        return create_post(
            repo=posts,
            users=users,
            user_id=post_data.user_id,
            title=post_data.title,
            language=post_data.language,
            data=post_data.data,
        )
    except UserNotFoundError as err:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="User not found",
        ) from err


@router.delete("", status_code=status.HTTP_201_CREATED)
def remove_post(
    posts: PostRepoDep,
    user_id: str = Query(..., description="Owner of the post"),
    post_id: int = Query(..., ge=0, le=POST_ID_MAX, description="Post to delete"),
) -> dict[str, str]:
    """Delete a post owned by the given user; a non-matching pair still succeeds."""
    logger.info("DELETE /api/posts")
    delete_post(posts, user_id, post_id)
    return {"status": "success"}
