"""Like counter adjustments."""
from __future__ import annotations

import logging

from codemmunity.repositories.post_repo import PostRepository
from codemmunity.schemas.like import LikeMode

logger = logging.getLogger(__name__)


def adjust_likes(repo: PostRepository, post_id: int, mode: LikeMode) -> str:
    """Apply a one-step like change to a post and return the status message.

    The count has no floor, and an unknown ``post_id`` updates nothing but is
    still reported as done.
    """
    if repo.add_likes(post_id, mode.delta) == 0:
        logger.warning("%s likes matched no post with id %s", mode.value, post_id)
    return f"{mode.value} likes"
