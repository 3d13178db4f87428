"""Data access helpers for working with posts."""
from __future__ import annotations

from sqlalchemy import delete, select, update
from sqlalchemy.orm import Session

from codemmunity.models.post import Post
from codemmunity.models.user import User

__all__ = ["PostRepository", "PostRow"]

# A post paired with its author's current display name (None if the author is gone).
PostRow = tuple[Post, str | None]


class PostRepository:
    """Thin wrapper around database access for post entities."""

    def __init__(self, session: Session) -> None:
        """Initialize the repository with a SQLAlchemy session."""
        self.session = session

    def _with_author(self):
        return select(Post, User.user_name).outerjoin(User, User.user_id == Post.user_id)

    def list_recent(self) -> list[PostRow]:
        """Return every post, newest first."""
        result = self.session.execute(self._with_author().order_by(Post.post_id.desc()))
        return [(post, user_name) for post, user_name in result]

    def get_by_id(self, post_id: int) -> PostRow | None:
        """Return a post by identifier."""
        row = self.session.execute(
            self._with_author().where(Post.post_id == post_id)
        ).first()
        if row is None:
            return None
        return row[0], row[1]

    def create(self, *, user_id: str, title: str, language: str, data: str) -> Post:
        """Insert a new post and return the persisted ORM instance.

        Args:
            user_id: Author identifier; callers check it against the directory.
            title: Post title.
            language: Free-text language tag.
            data: Full post body.
        """
        post = Post(
            user_id=user_id,
            title=title,
            language=language,
            data=data,
            likes=0,
            report_count=0,
        )
        self.session.add(post)
        self.session.commit()
        self.session.refresh(post)
        return post

    def delete(self, *, user_id: str, post_id: int) -> int:
        """Delete the post matching both keys and return the number of rows removed."""
        result = self.session.execute(
            delete(Post).where(Post.user_id == user_id, Post.post_id == post_id)
        )
        self.session.commit()
        return result.rowcount

    def add_likes(self, post_id: int, delta: int) -> int:
        """Shift the like counter in a single UPDATE and return the rows affected."""
        result = self.session.execute(
            update(Post)
            .where(Post.post_id == post_id)
            .values(likes=Post.likes + delta)
        )
        self.session.commit()
        return result.rowcount
