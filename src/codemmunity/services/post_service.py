"""Service-level helpers for reading and writing posts."""
from __future__ import annotations

import logging

from codemmunity.models.post import Post
from codemmunity.repositories.post_repo import PostRepository
from codemmunity.repositories.user_repo import UserRepository
from codemmunity.schemas.post import PostResponse
from codemmunity.services.errors import PostNotFoundError
from codemmunity.services.user_service import lookup_user

logger = logging.getLogger(__name__)

# Number of characters of the body kept in list views.
POST_SUMMARY_LENGTH = 35


def list_posts(repo: PostRepository) -> list[PostResponse]:
    """Return all posts newest first with their bodies cut to a summary."""
    return [
        to_post_out(post, user_name, summary=True)
        for post, user_name in repo.list_recent()
    ]


def fetch_post(repo: PostRepository, post_id: int) -> PostResponse:
    """Return a single post with its full body.

    Raises:
        PostNotFoundError: If the post does not exist.
    """
    row = repo.get_by_id(post_id)
    if row is None:
        raise PostNotFoundError(post_id)
    post, user_name = row
    return to_post_out(post, user_name)


def create_post(
    *,
    repo: PostRepository,
    users: UserRepository,
    user_id: str,
    title: str,
    language: str,
    data: str,
) -> PostResponse:
    """Create a post after checking the author against the directory.

    Args:
        repo: Repository used to persist the post.
        users: Directory used to resolve the author's display name.
        user_id: Identifier of the author.
        title: Post title.
        language: Free-text language tag.
        data: Post body.

    Returns:
        The stored post, carrying the author's name as of creation.

    Raises:
        UserNotFoundError: If ``user_id`` is not in the directory.

    Notes:
        The lookup and the insert are separate statements; a user removed in
        between still gets the post, carrying the name read by the lookup.
    """
    user_name = lookup_user(users, user_id).user_name
    post = repo.create(user_id=user_id, title=title, language=language, data=data)
    logger.info("Created post %s for user %s", post.post_id, user_id)
    return to_post_out(post, user_name)


def delete_post(repo: PostRepository, user_id: str, post_id: int) -> None:
    """Delete a post owned by ``user_id``; a non-matching pair is not an error."""
    if repo.delete(user_id=user_id, post_id=post_id) == 0:
        logger.debug("No post %s owned by %s to delete", post_id, user_id)


def to_post_out(post: Post, user_name: str | None, *, summary: bool = False) -> PostResponse:
    """Convert a Post ORM instance to an API schema."""
    data = post.data[:POST_SUMMARY_LENGTH] if summary else post.data
    return PostResponse(
        post_id=post.post_id,
        user_id=post.user_id,
        title=post.title,
        user_name=user_name,
        language=post.language,
        data=data,
        likes=post.likes,
        report_count=post.report_count,
        create_at=post.create_at,
    )
