# src/codemmunity/models/post.py
"""SQLAlchemy model for posts."""

from datetime import datetime

from sqlalchemy import DateTime, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from codemmunity.db.session import Base
from codemmunity.db.time import utcnow


class Post(Base):
    """A code snippet or article shared by a user.

    The author's display name is not stored; it is resolved from the ``user``
    table whenever a post is served.
    """

    __tablename__ = "post"

    post_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    # No foreign key: removing a user leaves their posts in place.
    user_id: Mapped[str] = mapped_column(String(128), nullable=False, index=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    # Free-text tag, usually a programming language name.
    language: Mapped[str] = mapped_column(String(64), nullable=False)
    data: Mapped[str] = mapped_column(Text, nullable=False)

    # May go negative; see services.like_service.
    likes: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    report_count: Mapped[int] = mapped_column(Integer, default=0, nullable=False)

    create_at: Mapped[datetime] = mapped_column(DateTime, default=utcnow, nullable=False)
