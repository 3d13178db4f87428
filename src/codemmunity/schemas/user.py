"""User-related Pydantic schemas."""

from pydantic import BaseModel, ConfigDict, Field


class UserResponse(BaseModel):
    """Schema for a directory entry returned by the API."""

    user_id: str = Field(..., description="External identity key")
    user_name: str = Field(..., description="Current display name")

    model_config = ConfigDict(from_attributes=True)
