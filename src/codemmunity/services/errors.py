# src/codemmunity/services/errors.py
"""Domain exceptions raised by the service layer."""

from __future__ import annotations


class CodemmunityError(RuntimeError):
    """Base exception for domain failures.

    Endpoints translate subclasses into HTTP responses; anything else that
    escapes a handler is treated as a server error.
    """


class UserNotFoundError(CodemmunityError):
    """Raised when a ``user_id`` has no entry in the directory."""

    def __init__(self, user_id: str) -> None:
        super().__init__(f"User {user_id!r} not found")
        self.user_id = user_id


class PostNotFoundError(CodemmunityError):
    """Raised when a ``post_id`` matches no post."""

    def __init__(self, post_id: int) -> None:
        super().__init__(f"Post {post_id} not found")
        self.post_id = post_id
