"""
Router tests with mocked services.

Services are replaced through dependency_overrides so only the HTTP layer
(parsing, status codes, response shapes) is under test.
"""

from datetime import datetime
from uuid import uuid4

import pytest
from fastapi import Request
from fastapi.testclient import TestClient

from blogger.api.deps import AuthContext, get_auth_context, get_author_service, get_post_service
from blogger.boundary.db.models import UserModel
from blogger.core.exceptions import AuthorNotFoundError, NotAuthorizedError, PostNotFoundError


def _post(**overrides):
    now = datetime.now()
    post = {
        "id": uuid4(),
        "text": "hello",
        "author_id": None,
        "author_type": None,
        "author": None,
        "comments": [],
        "created_at": now,
        "updated_at": now,
    }
    post.update(overrides)
    return post


def _comment(text, position):
    now = datetime.now()
    return {"id": uuid4(), "text": text, "position": position, "created_at": now, "updated_at": now}


@pytest.fixture
def current_user():
    return UserModel(id=uuid4(), email="owner@example.com", password_hash="x")


@pytest.fixture
def client(app, mock_post_service, mock_author_service, current_user):
    def auth_override(request: Request) -> AuthContext:
        return AuthContext(request=request, user=current_user)

    app.dependency_overrides[get_post_service] = lambda: mock_post_service
    app.dependency_overrides[get_author_service] = lambda: mock_author_service
    app.dependency_overrides[get_auth_context] = auth_override
    yield TestClient(app, follow_redirects=False)
    app.dependency_overrides.clear()


def test_list_posts(client, mock_post_service):
    mock_post_service.list_posts.return_value = [_post(text="one"), _post(text="two")]

    response = client.get("/api/posts")

    assert response.status_code == 200
    data = response.json()
    assert [p["text"] for p in data] == ["one", "two"]
    mock_post_service.list_posts.assert_called_once_with(limit=None, offset=0)


def test_list_posts_pagination(client, mock_post_service):
    mock_post_service.list_posts.return_value = []

    response = client.get("/api/posts?limit=5&offset=10")

    assert response.status_code == 200
    mock_post_service.list_posts.assert_called_once_with(limit=5, offset=10)


def test_list_posts_rejects_bad_limit(client, mock_post_service):
    response = client.get("/api/posts?limit=0")

    assert response.status_code == 422
    assert "err" in response.json()
    mock_post_service.list_posts.assert_not_called()


def test_create_post_uses_session_user(client, mock_post_service, current_user):
    mock_post_service.create_post.return_value = _post(
        text="mine", author_id=current_user.id, author_type="user",
        author={"id": current_user.id, "type": "user", "email": current_user.email},
    )

    response = client.post("/api/posts", json={"text": "mine"})

    assert response.status_code == 200
    data = response.json()
    assert data["author"]["email"] == "owner@example.com"
    mock_post_service.create_post.assert_called_once_with(text="mine", author=current_user)


def test_create_post_from_form(client, mock_post_service):
    mock_post_service.create_post.return_value = _post(text="form post")

    response = client.post("/api/posts", data={"text": "form post"})

    assert response.status_code == 200
    assert mock_post_service.create_post.call_args.kwargs["text"] == "form post"


def test_get_post_not_found(client, mock_post_service):
    mock_post_service.get_post.side_effect = PostNotFoundError("missing")

    response = client.get("/api/posts/missing")

    assert response.status_code == 404
    assert response.json() == {"err": "no post with id missing"}


def test_update_post_forbidden(client, mock_post_service, current_user):
    post_id = str(uuid4())
    mock_post_service.update_post.side_effect = NotAuthorizedError()

    response = client.put(f"/api/posts/{post_id}", json={"text": "edit"})

    assert response.status_code == 403
    assert response.json() == {"err": "NOT AUTHORIZED"}
    mock_post_service.update_post.assert_called_once_with(
        post_id, text="edit", requester_id=current_user.id
    )


def test_delete_post(client, mock_post_service):
    post_id = uuid4()
    mock_post_service.delete_post.return_value = post_id

    response = client.delete(f"/api/posts/{post_id}")

    assert response.status_code == 200
    assert response.json() == {"id": str(post_id), "deleted": True}


def test_list_comments(client, mock_post_service):
    post_id = str(uuid4())
    mock_post_service.list_comments.return_value = [_comment("a", 0), _comment("b", 1)]

    response = client.get(f"/api/posts/{post_id}/comments")

    assert response.status_code == 200
    assert [c["text"] for c in response.json()] == ["a", "b"]
    mock_post_service.list_comments.assert_called_once_with(post_id)


def test_add_comment(client, mock_post_service):
    post_id = str(uuid4())
    mock_post_service.add_comment.return_value = _comment("nice", 0)

    response = client.post(f"/api/posts/{post_id}/comments", json={"text": "nice"})

    assert response.status_code == 200
    assert response.json()["position"] == 0
    mock_post_service.add_comment.assert_called_once_with(post_id, text="nice")


def test_create_author(client, mock_author_service):
    now = datetime.now()
    author_id = uuid4()
    mock_author_service.create_author.return_value = {
        "id": author_id, "name": "Ann", "created_at": now, "updated_at": now,
    }

    response = client.post("/api/authors", json={"name": "Ann"})

    assert response.status_code == 200
    assert response.json()["id"] == str(author_id)
    mock_author_service.create_author.assert_called_once_with(name="Ann")


def test_assign_author_not_found(client, mock_author_service):
    mock_author_service.assign_author.side_effect = AuthorNotFoundError("x")

    response = client.put(f"/api/posts/{uuid4()}/authors/x")

    assert response.status_code == 404
    assert response.json() == {"err": "no author with id x"}


def test_unexpected_service_failure_is_500(client, mock_post_service):
    mock_post_service.list_posts.side_effect = RuntimeError("kaboom")

    response = client.get("/api/posts")

    assert response.status_code == 500
    assert "kaboom" in response.json()["err"]


def test_health(client):
    response = client.get("/api/health")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_correlation_header_is_echoed(client):
    response = client.get("/api/health", headers={"X-Correlation-ID": "trace-123"})

    assert response.headers["X-Correlation-ID"] == "trace-123"


def test_correlation_header_is_generated(client):
    response = client.get("/api/health")

    assert response.headers["X-Correlation-ID"]
