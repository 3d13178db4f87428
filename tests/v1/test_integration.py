# tests/v1/test_integration.py
"""Integration tests that walk through several endpoints together."""

from unittest.mock import patch

from fastapi import status
from sqlalchemy.exc import OperationalError


def test_register_post_and_fetch(client) -> None:
    """A registered user publishes a post that reads back with defaults filled in."""
    assert client.post(
        "/api/users", params={"user_id": "u1", "user_name": "Alice"}
    ).status_code == status.HTTP_201_CREATED

    created = client.post(
        "/api/posts",
        json={"user_id": "u1", "title": "T", "language": "rust", "data": "hello"},
    )
    assert created.status_code == status.HTTP_201_CREATED
    post_id = created.json()["post_id"]

    fetched = client.get(f"/api/posts/{post_id}")
    assert fetched.status_code == status.HTTP_200_OK
    body = fetched.json()
    assert {k: body[k] for k in ("user_id", "user_name", "title", "language", "data", "likes", "report_count")} == {
        "user_id": "u1",
        "user_name": "Alice",
        "title": "T",
        "language": "rust",
        "data": "hello",
        "likes": 0,
        "report_count": 0,
    }

    client.patch("/api/likes", params={"post_id": post_id, "mode": "Increment"})
    client.post("/api/comments", json={"post_id": post_id, "user_id": "u1", "data": "first!"})

    assert client.get(f"/api/posts/{post_id}").json()["likes"] == 1
    comments = client.get(f"/api/comments/{post_id}").json()
    assert [c["data"] for c in comments] == ["first!"]


def test_database_failure_is_500(client) -> None:
    with patch(
        "codemmunity.repositories.post_repo.PostRepository.list_recent",
        side_effect=OperationalError("select", {}, Exception("connection lost")),
    ):
        response = client.get("/api/posts")
    assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
    assert response.json() == {"detail": "Database error"}
