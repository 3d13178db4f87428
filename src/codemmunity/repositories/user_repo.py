"""Data access helpers for the user directory."""
from __future__ import annotations

from sqlalchemy import delete, select
from sqlalchemy.orm import Session

from codemmunity.models.user import User

__all__ = ["UserRepository"]


class UserRepository:
    """Thin wrapper around database access for directory entries."""

    def __init__(self, session: Session) -> None:
        """Initialize the repository with a SQLAlchemy session."""
        self.session = session

    def get_by_id(self, user_id: str) -> User | None:
        """Return the user with an exact ``user_id`` match."""
        return self.session.execute(
            select(User).where(User.user_id == user_id)
        ).scalars().first()

    def upsert(self, *, user_id: str, user_name: str) -> User:
        """Insert the user, or overwrite the display name if the key exists."""
        user = self.session.merge(User(user_id=user_id, user_name=user_name))
        self.session.commit()
        self.session.refresh(user)
        return user

    def delete(self, user_id: str) -> int:
        """Delete the user and return the number of rows removed."""
        result = self.session.execute(delete(User).where(User.user_id == user_id))
        self.session.commit()
        return result.rowcount
