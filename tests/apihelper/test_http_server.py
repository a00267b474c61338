"""Tests for FastAPI envelope responses and error handlers."""

from __future__ import annotations

from fastapi.testclient import TestClient

from packages.apihelper.envelope import ResponseConfig, decode
from packages.apihelper.errors import (
    StatusClass,
    new,
    soft_error,
    with_code,
    with_message,
    with_status,
)
from packages.apihelper.http import create_app, respond_error, respond_ok


def _build_app():
    app = create_app(title="users")

    @app.get("/users/{user_id}")
    def get_user(user_id: int):
        if user_id == 42:
            return respond_ok({"id": 42, "name": "Ada"})
        raise new(
            f"user {user_id} missing",
            with_status(StatusClass.NOT_FOUND),
            with_code("USER_NOT_FOUND"),
            with_message("User not found"),
        )

    @app.get("/quota")
    def quota():
        raise soft_error("QUOTA_NOTICE", "quota nearly used")

    @app.get("/crash")
    def crash():
        raise ValueError("disk on fire")

    @app.get("/quiet")
    def quiet():
        return respond_error(ValueError("secret"), config=ResponseConfig(include_details=False))

    return app


def test_respond_ok_writes_success_envelope() -> None:
    """A successful route should answer 200 with the payload in data."""
    client = TestClient(_build_app())

    response = client.get("/users/42")

    assert response.status_code == 200
    assert response.json() == {
        "status": 200,
        "success": True,
        "data": {"id": 42, "name": "Ada"},
    }


def test_classified_error_uses_mapped_status() -> None:
    """A raised classified error should answer with its mapped status."""
    client = TestClient(_build_app())

    response = client.get("/users/7")

    assert response.status_code == 404
    assert response.json()["error"] == {
        "code": "USER_NOT_FOUND",
        "message": "User not found",
        "detail": "user 7 missing",
    }


def test_soft_error_answers_200_with_failure_envelope() -> None:
    """A soft error should keep the HTTP 200 status line."""
    client = TestClient(_build_app())

    response = client.get("/quota")

    assert response.status_code == 200
    assert response.json()["success"] is False
    assert response.json()["error"]["code"] == "QUOTA_NOTICE"


def test_foreign_error_answers_500_with_default_code() -> None:
    """An unclassified exception should become a 500 error envelope."""
    client = TestClient(_build_app(), raise_server_exceptions=False)

    response = client.get("/crash")

    assert response.status_code == 500
    body = response.json()
    assert body["success"] is False
    assert body["error"]["code"] == "INTERNAL_SERVER_ERROR"
    assert body["error"]["detail"] == "disk on fire"


def test_respond_error_honours_explicit_config() -> None:
    """An explicit config should control whether detail is written."""
    client = TestClient(_build_app())

    response = client.get("/quiet")

    assert response.status_code == 500
    assert "detail" not in response.json()["error"]


def test_server_body_decodes_on_client_side() -> None:
    """The written body should decode into the same error on the client."""
    client = TestClient(_build_app())

    response = client.get("/users/7")
    error = decode(response.content, status_code=response.status_code).err()

    assert error is not None
    assert error.status == 404
    assert error.code == "USER_NOT_FOUND"


def test_unknown_route_answers_with_error_envelope() -> None:
    """Framework 404s should be written as error envelopes."""
    client = TestClient(_build_app())

    response = client.get("/nope")

    assert response.status_code == 404
    assert response.json() == {
        "status": 404,
        "success": False,
        "data": None,
        "error": {"code": "NOT_FOUND", "message": "Not Found", "detail": "Not Found"},
    }


def test_disallowed_method_keeps_allow_header() -> None:
    """Framework 405s should keep their headers inside an envelope response."""
    client = TestClient(_build_app())

    response = client.post("/users/42")

    assert response.status_code == 405
    assert "GET" in response.headers["allow"]
    assert response.json()["error"]["code"] == "METHOD_NOT_ALLOWED"


def test_request_validation_failure_answers_422_envelope() -> None:
    """Invalid path parameters should produce a validation error envelope."""
    client = TestClient(_build_app())

    response = client.get("/users/abc")

    assert response.status_code == 422
    error = response.json()["error"]
    assert error["code"] == "REQUEST_VALIDATION_FAILED"
    assert error["message"] == "Request validation failed"
    assert error["details"][0]["loc"] == ["path", "user_id"]
