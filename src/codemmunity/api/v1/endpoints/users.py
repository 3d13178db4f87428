"""User directory endpoints."""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException, Query, status

from codemmunity.api.v1.dependencies import UserRepoDep
from codemmunity.models import User
from codemmunity.schemas.user import UserResponse
from codemmunity.services.errors import UserNotFoundError
from codemmunity.services.user_service import lookup_user, remove_user, upsert_user

router = APIRouter(prefix="/users", tags=["users"])

logger = logging.getLogger(__name__)


@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
def register_user(
    users: UserRepoDep,
    user_id: str = Query(..., description="External identity key"),
    user_name: str = Query(..., description="Display name to store"),
) -> User:
    """Create a user or overwrite the display name of an existing one."""
    logger.info("POST /api/users")
    return upsert_user(users, user_id, user_name)


@router.get("/{user_id:path}", response_model=UserResponse)
def get_user(user_id: str, users: UserRepoDep) -> User:
    """Get a directory entry by user_id.

    Raises:
        HTTPException: If no user has this identifier
    """
    logger.info("GET /api/users/%s", user_id)
    try:
        return lookup_user(users, user_id)
    except UserNotFoundError as err:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="User not found",
        ) from err


@router.delete("", status_code=status.HTTP_200_OK)
def delete_user(
    users: UserRepoDep,
    user_id: str = Query(..., description="User to remove"),
    user_name: str | None = Query(None, description="Accepted for compatibility; ignored"),
) -> dict[str, str]:
    """Remove a user; removing an unknown user also succeeds."""
    logger.info("DELETE /api/users")
    remove_user(users, user_id)
    return {"status": "success"}
