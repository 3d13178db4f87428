# src/codemmunity/schemas/__init__.py
"""
Pydantic schemas for API request/response models.

These schemas define the structure of API data for serialization and validation.
"""

from .comment import CommentCreate, CommentResponse
from .like import LikeMode
from .post import PostCreate, PostResponse
from .user import UserResponse

__all__ = [
    "CommentCreate", "CommentResponse",
    "LikeMode",
    "PostCreate", "PostResponse",
    "UserResponse",
]
