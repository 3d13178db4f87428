"""Shared API dependencies for database access."""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.orm import Session

from codemmunity.db.session import get_db
from codemmunity.repositories import CommentRepository, PostRepository, UserRepository

# Type alias for database session dependency
SessionDep = Annotated[Session, Depends(get_db)]


def get_user_repo(db: SessionDep) -> UserRepository:
    """Return the directory repository bound to the request session."""
    return UserRepository(db)


def get_post_repo(db: SessionDep) -> PostRepository:
    """Return the post repository bound to the request session."""
    return PostRepository(db)


def get_comment_repo(db: SessionDep) -> CommentRepository:
    """Return the comment repository bound to the request session."""
    return CommentRepository(db)


UserRepoDep = Annotated[UserRepository, Depends(get_user_repo)]
PostRepoDep = Annotated[PostRepository, Depends(get_post_repo)]
CommentRepoDep = Annotated[CommentRepository, Depends(get_comment_repo)]
