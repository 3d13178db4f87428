# tests/v1/test_posts.py
"""Tests for post-related endpoints."""

from fastapi import status

from codemmunity.models import Post
from codemmunity.services.post_service import POST_SUMMARY_LENGTH

LONG_BODY = "fn main() {\n    println!(\"a fairly long snippet of rust code\");\n}"


def _create(client, **overrides):
    payload = {
        "user_id": "u1",
        "title": "T",
        "language": "rust",
        "data": "hello",
    }
    payload.update(overrides)
    return client.post("/api/posts", json=payload)


def test_create_post_success(client, test_user) -> None:
    response = _create(client)
    assert response.status_code == status.HTTP_201_CREATED
    data = response.json()
    assert data["post_id"] > 0
    assert data["user_id"] == "u1"
    assert data["user_name"] == "Alice"
    assert data["likes"] == 0
    assert data["report_count"] == 0
    assert data["create_at"]


def test_create_post_unknown_user(client, db_session) -> None:
    """An unregistered author is rejected with a client error and nothing is stored."""
    response = _create(client, user_id="stranger")
    assert response.status_code == status.HTTP_404_NOT_FOUND
    assert response.json()["detail"] == "User not found"
    assert db_session.query(Post).count() == 0


def test_create_post_missing_field(client, test_user) -> None:
    response = client.post("/api/posts", json={"user_id": "u1", "title": "T"})
    assert response.status_code == status.HTTP_400_BAD_REQUEST


def test_list_posts_newest_first_with_summary(client, test_user) -> None:
    first = _create(client, title="first", data="short").json()
    second = _create(client, title="second", data=LONG_BODY).json()

    response = client.get("/api/posts")
    assert response.status_code == status.HTTP_200_OK
    posts = response.json()
    assert [p["post_id"] for p in posts] == [second["post_id"], first["post_id"]]
    assert posts[0]["data"] == LONG_BODY[:POST_SUMMARY_LENGTH]
    assert len(posts[0]["data"]) == 35
    assert posts[1]["data"] == "short"
    assert all(p["user_name"] == "Alice" for p in posts)


def test_get_post_returns_full_body(client, test_user) -> None:
    created = _create(client, data=LONG_BODY).json()

    response = client.get(f"/api/posts/{created['post_id']}")
    assert response.status_code == status.HTTP_200_OK
    assert response.json()["data"] == LONG_BODY


def test_get_post_not_found(client) -> None:
    response = client.get("/api/posts/99999")
    assert response.status_code == status.HTTP_404_NOT_FOUND
    assert response.json()["detail"] == "Post not found"


def test_get_post_reflects_current_user_name(client, test_post) -> None:
    client.post("/api/users", params={"user_id": test_post.user_id, "user_name": "Alicia"})
    response = client.get(f"/api/posts/{test_post.post_id}")
    assert response.json()["user_name"] == "Alicia"


def test_list_posts_empty(client) -> None:
    response = client.get("/api/posts")
    assert response.status_code == status.HTTP_200_OK
    assert response.json() == []


def test_delete_post(client, test_post) -> None:
    response = client.delete(
        "/api/posts",
        params={"user_id": test_post.user_id, "post_id": test_post.post_id},
    )
    assert response.status_code == status.HTTP_201_CREATED
    assert client.get(f"/api/posts/{test_post.post_id}").status_code == status.HTTP_404_NOT_FOUND


def test_delete_post_wrong_owner_is_noop(client, test_post, other_user) -> None:
    """A pair that matches no row still reports success and deletes nothing."""
    response = client.delete(
        "/api/posts",
        params={"user_id": other_user.user_id, "post_id": test_post.post_id},
    )
    assert response.status_code == status.HTTP_201_CREATED
    assert client.get(f"/api/posts/{test_post.post_id}").status_code == status.HTTP_200_OK


def test_delete_post_invalid_id(client) -> None:
    response = client.delete("/api/posts", params={"user_id": "u1", "post_id": "abc"})
    assert response.status_code == status.HTTP_400_BAD_REQUEST


def test_get_post_not_found_body_is_json(client) -> None:
    response = client.get("/api/posts/1")
    assert response.status_code == status.HTTP_404_NOT_FOUND
    assert response.headers["content-type"].startswith("application/json")


def test_get_post_id_out_of_range(client) -> None:
    response = client.get(f"/api/posts/{2**70}")
    assert response.status_code == status.HTTP_400_BAD_REQUEST

    response = client.get("/api/posts/-1")
    assert response.status_code == status.HTTP_400_BAD_REQUEST


def test_get_post_largest_id_is_not_found(client) -> None:
    response = client.get(f"/api/posts/{2**31 - 1}")
    assert response.status_code == status.HTTP_404_NOT_FOUND


def test_delete_post_id_out_of_range(client) -> None:
    response = client.delete("/api/posts", params={"user_id": "u1", "post_id": 2**31})
    assert response.status_code == status.HTTP_400_BAD_REQUEST
