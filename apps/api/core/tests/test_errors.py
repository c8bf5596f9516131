"""Tests for RFC 7807 error handling."""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from apps.api.core.errors import (
    PayloadTooLargeError,
    UnsupportedMediaError,
    ValidationError,
    register_error_handlers,
)


@pytest.fixture
def error_app():
    """Create a test app with error handlers registered."""
    app = FastAPI()
    register_error_handlers(app)

    @app.get("/test/validation")
    async def raise_validation():
        raise ValidationError("CSV has no data rows")

    @app.get("/test/media")
    async def raise_media():
        raise UnsupportedMediaError()

    @app.get("/test/too-large")
    async def raise_too_large():
        raise PayloadTooLargeError("File too large (max 5MB)")

    @app.get("/test/unhandled")
    async def raise_unhandled():
        raise RuntimeError("Unexpected crash")

    return app


@pytest.fixture
def client(error_app):
    return TestClient(error_app, raise_server_exceptions=False)


class TestRFC7807ErrorFormat:
    """All errors should return RFC 7807 Problem Details format."""

    def test_validation_error_returns_rfc7807(self, client):
        response = client.get("/test/validation")
        assert response.status_code == 422
        body = response.json()
        assert body["type"] == "about:blank"
        assert body["title"] == "Unprocessable Entity"
        assert body["status"] == 422
        assert body["detail"] == "CSV has no data rows"
        assert body["instance"] == "/test/validation"

    def test_unsupported_media_returns_rfc7807(self, client):
        response = client.get("/test/media")
        assert response.status_code == 415
        assert response.json()["detail"] == "Unsupported file type"

    def test_payload_too_large_returns_rfc7807(self, client):
        response = client.get("/test/too-large")
        assert response.status_code == 413
        assert response.json()["title"] == "Payload Too Large"

    def test_unknown_route_returns_rfc7807(self, client):
        response = client.get("/test/missing")
        assert response.status_code == 404
        assert response.json()["title"] == "Not Found"

    def test_unhandled_error_returns_rfc7807(self, client):
        response = client.get("/test/unhandled")
        assert response.status_code == 500
        body = response.json()
        assert body["title"] == "Internal Server Error"
        assert body["detail"] == "An unexpected error occurred"

    def test_wrong_method_returns_rfc7807(self, client):
        response = client.post("/test/validation")
        assert response.status_code == 405
        assert response.json()["title"] == "Method Not Allowed"
