# src/codemmunity/schemas/post.py
"""Post-related Pydantic schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

# post.post_id and comment.post_id are signed 32-bit INTEGER columns.
POST_ID_MAX = 2**31 - 1


class PostCreate(BaseModel):
    """Schema for creating a new post."""

    user_id: str = Field(..., description="Author's user_id; must exist in the directory")
    title: str
    language: str = Field(..., description="Free-text language tag")
    data: str = Field(..., description="Post body")


class PostResponse(BaseModel):
    """Schema for post information returned by the API.

    ``user_name`` is looked up from the directory when the post is served and
    is ``None`` if the author has since been removed.
    """

    post_id: int
    user_id: str
    title: str
    user_name: str | None
    language: str
    data: str
    likes: int
    report_count: int
    create_at: datetime

    model_config = ConfigDict(from_attributes=True)
