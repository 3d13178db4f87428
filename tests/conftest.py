# tests/conftest.py
from __future__ import annotations

import os
from collections.abc import Generator, Iterator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

os.environ.setdefault("DATABASE_URL", "sqlite://")

from codemmunity.db.session import Base
from codemmunity.db.session import get_db as app_get_session
from codemmunity.main import app as fastapi_app
from codemmunity.models import Comment, Post, User
from codemmunity.repositories import CommentRepository, PostRepository, UserRepository

TEST_DB_URL = "sqlite://"


@pytest.fixture(scope="session")
def engine() -> Generator[Engine, None, None]:
    engine = create_engine(
        TEST_DB_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    try:
        yield engine
    finally:
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture()
def db_session(engine: Engine) -> Iterator[Session]:
    SessionLocal = sessionmaker(
        bind=engine,
        autocommit=False,
        autoflush=False,
        expire_on_commit=False,
    )
    session = SessionLocal()
    try:
        yield session
    finally:
        session.rollback()
        session.close()

        # Repositories commit, so wipe every table to keep tests isolated.
        with engine.begin() as cleanup_conn:
            for table in reversed(Base.metadata.sorted_tables):
                cleanup_conn.execute(table.delete())


@pytest.fixture(scope="session")
def app() -> FastAPI:
    return fastapi_app


@pytest.fixture(autouse=True)
def override_session_dependency(app: FastAPI, db_session: Session) -> Iterator[None]:
    def _get_session_override() -> Generator[Session, None, None]:
        yield db_session

    app.dependency_overrides[app_get_session] = _get_session_override
    try:
        yield
    finally:
        app.dependency_overrides.pop(app_get_session, None)


@pytest.fixture()
def client(app: FastAPI) -> Iterator[TestClient]:
    with TestClient(app, base_url="http://test") as test_client:
        yield test_client


@pytest.fixture()
def user_repo(db_session: Session) -> UserRepository:
    return UserRepository(db_session)


@pytest.fixture()
def post_repo(db_session: Session) -> PostRepository:
    return PostRepository(db_session)


@pytest.fixture()
def comment_repo(db_session: Session) -> CommentRepository:
    return CommentRepository(db_session)


@pytest.fixture()
def test_user(db_session: Session) -> Iterator[User]:
    """Create and return a persisted directory entry."""
    user = User(user_id="u1", user_name="Alice")
    db_session.add(user)
    db_session.commit()
    yield user


@pytest.fixture()
def other_user(db_session: Session) -> Iterator[User]:
    """Create and return a second persisted directory entry."""
    user = User(user_id="u2", user_name="Bob")
    db_session.add(user)
    db_session.commit()
    yield user


@pytest.fixture()
def test_post(db_session: Session, test_user: User) -> Iterator[Post]:
    """Create a baseline post authored by ``test_user``."""
    post = Post(
        user_id=test_user.user_id,
        title="Hello",
        language="python",
        data="print('hello world')",
    )
    db_session.add(post)
    db_session.commit()
    db_session.refresh(post)
    yield post


@pytest.fixture()
def test_comment(db_session: Session, test_post: Post, other_user: User) -> Iterator[Comment]:
    """Create a comment by ``other_user`` on ``test_post``."""
    comment = Comment(post_id=test_post.post_id, user_id=other_user.user_id, data="Nice one")
    db_session.add(comment)
    db_session.commit()
    db_session.refresh(comment)
    yield comment
