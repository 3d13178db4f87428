"""Service-level helpers for comments."""
from __future__ import annotations

import logging

from codemmunity.models.comment import Comment
from codemmunity.repositories.comment_repo import CommentRepository
from codemmunity.repositories.user_repo import UserRepository
from codemmunity.schemas.comment import CommentResponse
from codemmunity.services.user_service import lookup_user

logger = logging.getLogger(__name__)


def list_comments(repo: CommentRepository, post_id: int) -> list[CommentResponse]:
    """Return the comments on a post, newest first."""
    return [to_comment_out(comment, user_name) for comment, user_name in repo.list_for_post(post_id)]


def create_comment(
    *,
    repo: CommentRepository,
    users: UserRepository,
    post_id: int,
    user_id: str,
    data: str,
) -> CommentResponse:
    """Add a comment to a post.

    The post itself is not checked; comments on a missing post are stored
    and simply never listed alongside it.

    Raises:
        UserNotFoundError: If ``user_id`` is not in the directory.
    """
    user_name = lookup_user(users, user_id).user_name
    comment = repo.create(post_id=post_id, user_id=user_id, data=data)
    logger.info("Created comment %s on post %s", comment.comment_id, post_id)
    return to_comment_out(comment, user_name)


def to_comment_out(comment: Comment, user_name: str | None) -> CommentResponse:
    """Convert a Comment ORM instance to an API schema."""
    return CommentResponse(
        comment_id=comment.comment_id,
        post_id=comment.post_id,
        user_id=comment.user_id,
        user_name=user_name,
        data=comment.data,
        create_at=comment.create_at,
    )
