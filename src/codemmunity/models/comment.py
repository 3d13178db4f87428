# src/codemmunity/models/comment.py
"""SQLAlchemy model for comments attached to posts."""

from datetime import datetime

from sqlalchemy import DateTime, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from codemmunity.db.session import Base
from codemmunity.db.time import utcnow


class Comment(Base):
    """Append-only reply to a post."""

    __tablename__ = "comment"

    comment_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    post_id: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    user_id: Mapped[str] = mapped_column(String(128), nullable=False)
    data: Mapped[str] = mapped_column(Text, nullable=False)
    create_at: Mapped[datetime] = mapped_column(DateTime, default=utcnow, nullable=False)
