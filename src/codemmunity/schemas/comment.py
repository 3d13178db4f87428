# src/codemmunity/schemas/comment.py
"""Comment-related Pydantic schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from codemmunity.schemas.post import POST_ID_MAX


class CommentCreate(BaseModel):
    """Schema for adding a comment to a post."""

    post_id: int = Field(..., ge=0, le=POST_ID_MAX)
    user_id: str
    data: str


class CommentResponse(BaseModel):
    """Schema for comment information returned by the API."""

    comment_id: int
    post_id: int
    user_id: str
    user_name: str | None
    data: str
    create_at: datetime

    model_config = ConfigDict(from_attributes=True)
