# src/codemmunity/services/__init__.py
"""Business logic services for the Codemmunity application."""

from .errors import CodemmunityError, PostNotFoundError, UserNotFoundError

__all__ = [
    "CodemmunityError",
    "PostNotFoundError",
    "UserNotFoundError",
]
