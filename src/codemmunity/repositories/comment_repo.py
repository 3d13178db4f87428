"""Data access helpers for comments."""
from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.orm import Session

from codemmunity.models.comment import Comment
from codemmunity.models.user import User

__all__ = ["CommentRepository"]


class CommentRepository:
    """Thin wrapper around database access for comment entities."""

    def __init__(self, session: Session) -> None:
        """Initialize the repository with a SQLAlchemy session."""
        self.session = session

    def list_for_post(self, post_id: int) -> list[tuple[Comment, str | None]]:
        """Return a post's comments, newest first, with each author's display name."""
        result = self.session.execute(
            select(Comment, User.user_name)
            .outerjoin(User, User.user_id == Comment.user_id)
            .where(Comment.post_id == post_id)
            .order_by(Comment.comment_id.desc())
        )
        return [(comment, user_name) for comment, user_name in result]

    def create(self, *, post_id: int, user_id: str, data: str) -> Comment:
        """Insert a new comment and return the persisted ORM instance."""
        comment = Comment(post_id=post_id, user_id=user_id, data=data)
        self.session.add(comment)
        self.session.commit()
        self.session.refresh(comment)
        return comment
