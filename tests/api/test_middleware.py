"""Tests for API middleware."""

from fastapi.testclient import TestClient


class TestRequestIdMiddleware:
    """Tests for request ID correlation middleware."""

    def test_generates_request_id_if_not_provided(self, client: TestClient) -> None:
        """Should generate request ID if not in request headers."""
        response = client.get("/health")
        assert response.status_code == 200
        # UUID format
        assert len(response.headers["X-Request-ID"]) == 36

    def test_uses_provided_request_id(self, client: TestClient) -> None:
        """Should use request ID from request headers."""
        response = client.get("/health", headers={"X-Request-ID": "req-12345"})
        assert response.headers["X-Request-ID"] == "req-12345"

    def test_request_id_in_error_body(self, auth_client: TestClient) -> None:
        """Should echo the request ID in error responses."""
        response = auth_client.get(
            "/drafts/nonexistent", headers={"X-Request-ID": "req-404"}
        )
        assert response.status_code == 404
        assert response.json()["request_id"] == "req-404"


class TestApiKeyMiddleware:
    """Tests for API key authentication middleware."""

    def test_public_endpoints_dont_require_auth(self, client: TestClient) -> None:
        """Public endpoints should work without authentication."""
        assert client.get("/health").status_code == 200
        assert client.get("/ready").status_code == 200

    def test_missing_header_rejected(self, client: TestClient) -> None:
        """Protected endpoints should require authentication."""
        response = client.post("/drafts")
        assert response.status_code == 401
        assert response.json()["error_code"] == "UNAUTHORIZED"
        assert response.headers["WWW-Authenticate"] == "Bearer"

    def test_invalid_auth_format_rejected(self, client: TestClient) -> None:
        """Invalid authorization header format should be rejected."""
        response = client.post("/drafts", headers={"Authorization": "InvalidFormat"})
        assert response.status_code == 401
        assert response.json()["error_code"] == "UNAUTHORIZED"

    def test_invalid_api_key_rejected(self, client: TestClient) -> None:
        """Invalid API key should be rejected."""
        response = client.post("/drafts", headers={"Authorization": "Bearer wrong-key"})
        assert response.status_code == 401
        assert response.json()["error_code"] == "INVALID_API_KEY"

    def test_valid_api_key_accepted(self, auth_client: TestClient) -> None:
        """Valid API key should be accepted."""
        assert auth_client.post("/drafts").status_code == 201
