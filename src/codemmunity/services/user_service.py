"""Directory operations: look up, register and remove users."""
from __future__ import annotations

import logging

from codemmunity.models.user import User
from codemmunity.repositories.user_repo import UserRepository
from codemmunity.services.errors import UserNotFoundError

__all__ = [
    "lookup_user",
    "upsert_user",
    "remove_user",
]

logger = logging.getLogger(__name__)


def lookup_user(repo: UserRepository, user_id: str) -> User:
    """Return the directory entry for ``user_id``.

    Raises:
        UserNotFoundError: If no user has this identifier.
    """
    user = repo.get_by_id(user_id)
    if user is None:
        raise UserNotFoundError(user_id)
    return user


def upsert_user(repo: UserRepository, user_id: str, user_name: str) -> User:
    """Create the user or replace its display name."""
    user = repo.upsert(user_id=user_id, user_name=user_name)
    logger.debug("Upserted user %s", user_id)
    return user


def remove_user(repo: UserRepository, user_id: str) -> None:
    """Remove the user if present; posts and comments by the user are kept."""
    if repo.delete(user_id) == 0:
        logger.debug("Delete of unknown user %s ignored", user_id)
