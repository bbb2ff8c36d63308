"""
Unit tests for request payload parsing.

Tests bracketed form key expansion and the payload_of dependency against a
minimal FastAPI app so both JSON and form bodies are exercised.
"""

import pytest
from fastapi import Depends, FastAPI
from fastapi.testclient import TestClient

from blogger.api.routers.router_utils import (
    expand_form_keys,
    payload_of,
    register_exception_handlers,
)
from blogger.models.post import CreatePostRequest
from blogger.models.user import CredentialsRequest


class TestExpandFormKeys:
    """Test suite for expand_form_keys."""

    def test_flat_keys_are_unchanged(self):
        assert expand_form_keys([("text", "hello")]) == {"text": "hello"}

    def test_bracketed_keys_nest(self):
        result = expand_form_keys([
            ("user[email]", "a@example.com"),
            ("user[password]", "pw"),
        ])
        assert result == {"user": {"email": "a@example.com", "password": "pw"}}

    def test_multiple_levels_nest(self):
        assert expand_form_keys([("a[b][c]", "1")]) == {"a": {"b": {"c": "1"}}}

    def test_later_keys_win(self):
        assert expand_form_keys([("text", "one"), ("text", "two")]) == {"text": "two"}

    def test_nested_key_replaces_scalar(self):
        result = expand_form_keys([("user", "x"), ("user[email]", "a@example.com")])
        assert result == {"user": {"email": "a@example.com"}}

    def test_unbalanced_brackets_kept_verbatim(self):
        assert expand_form_keys([("user[email", "x")]) == {"user[email": "x"}


class TestCredentialsRequest:
    """Test suite for the signup/login body schema."""

    def test_nested_shape(self):
        body = CredentialsRequest.model_validate(
            {"user": {"email": "a@example.com", "password": "pw"}}
        )
        assert body.user.email == "a@example.com"

    def test_flat_shape_is_wrapped(self):
        body = CredentialsRequest.model_validate({"email": "a@example.com", "password": "pw"})
        assert body.user.password == "pw"


@pytest.fixture
def echo_client():
    app = FastAPI()
    register_exception_handlers(app)

    @app.post("/echo-post")
    async def echo_post(body: CreatePostRequest = Depends(payload_of(CreatePostRequest))):
        return {"text": body.text}

    @app.post("/echo-credentials")
    async def echo_credentials(
        body: CredentialsRequest = Depends(payload_of(CredentialsRequest)),
    ):
        return {"email": body.user.email}

    return TestClient(app)


class TestPayloadOf:
    """Test suite for the payload_of dependency factory."""

    def test_json_body(self, echo_client):
        response = echo_client.post("/echo-post", json={"text": "hello"})
        assert response.status_code == 200
        assert response.json() == {"text": "hello"}

    def test_form_body(self, echo_client):
        response = echo_client.post("/echo-post", data={"text": "hello"})
        assert response.status_code == 200
        assert response.json() == {"text": "hello"}

    def test_bracketed_form_body(self, echo_client):
        response = echo_client.post(
            "/echo-credentials",
            data={"user[email]": "a@example.com", "user[password]": "pw"},
        )
        assert response.status_code == 200
        assert response.json() == {"email": "a@example.com"}

    def test_empty_body_uses_defaults(self, echo_client):
        response = echo_client.post("/echo-post")
        assert response.status_code == 200
        assert response.json() == {"text": None}

    def test_invalid_json_is_422(self, echo_client):
        response = echo_client.post(
            "/echo-post",
            content=b"{not json",
            headers={"content-type": "application/json"},
        )
        assert response.status_code == 422
        assert "err" in response.json()

    def test_json_array_is_422(self, echo_client):
        response = echo_client.post("/echo-post", json=["text"])
        assert response.status_code == 422

    def test_missing_required_field_is_422(self, echo_client):
        response = echo_client.post("/echo-credentials", json={"user": {"email": "a@example.com"}})
        assert response.status_code == 422
        body = response.json()
        assert "password" in body["err"]
        assert body["errors"]
