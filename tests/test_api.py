"""
API endpoint tests.
"""

from fastapi.testclient import TestClient


class TestHealthEndpoints:
    """Test basic health/status endpoints."""

    def test_root_endpoint(self, client: TestClient):
        """Test root endpoint returns ok status."""
        response = client.get("/")
        assert response.status_code == 200
        data = response.json()
        assert data.get("status") == "ok"

    def test_docs_endpoint(self, client: TestClient):
        """Test Swagger docs are accessible."""
        response = client.get("/docs")
        assert response.status_code == 200

    def test_openapi_schema(self, client: TestClient):
        """Test OpenAPI schema lists the user and contact routes."""
        response = client.get("/openapi.json")
        assert response.status_code == 200
        paths = response.json()["paths"]
        assert "/api/users/register" in paths
        assert "/api/users/login" in paths
        assert "/api/users/current" in paths
        assert "/api/contacts" in paths
        assert "/api/contacts/{contact_id}" in paths


class TestAuthRequired:
    """Protected routes reject requests before touching the database."""

    def test_contacts_without_header(self, client: TestClient):
        response = client.get("/api/contacts")
        assert response.status_code == 401
        body = response.json()
        assert body["title"] == "Unauthorized"
        assert body["message"] == "User is not authorized or token is missing"
        assert response.headers["WWW-Authenticate"] == "Bearer"

    def test_contacts_with_wrong_scheme(self, client: TestClient):
        response = client.get("/api/contacts", headers={"Authorization": "Basic abc"})
        assert response.status_code == 401

    def test_contacts_with_empty_bearer(self, client: TestClient):
        response = client.get("/api/contacts", headers={"Authorization": "Bearer "})
        assert response.status_code == 401

    def test_contacts_with_garbage_token(self, client: TestClient):
        response = client.get(
            "/api/contacts/abc", headers={"Authorization": "Bearer not-a-jwt"}
        )
        assert response.status_code == 401
        assert response.json()["message"] == "User is not authorized"

    def test_current_user_requires_token(self, client: TestClient):
        response = client.get("/api/users/current")
        assert response.status_code == 401

    def test_double_space_after_bearer_rejected(self, client: TestClient, settings):
        from contacts_api.core.security import TokenConfig, TokenIdentity, TokenService

        token = TokenService(TokenConfig.from_settings(settings)).issue(
            TokenIdentity(id="x", username="alice", email="alice@x.com")
        )
        response = client.get("/api/users/current", headers={"Authorization": f"Bearer  {token}"})
        assert response.status_code == 401
        response = client.get("/api/users/current", headers={"Authorization": f"Bearer {token}"})
        assert response.status_code == 200

    def test_lowercase_scheme_rejected(self, client: TestClient):
        response = client.get("/api/contacts", headers={"Authorization": "bearer abc"})
        assert response.status_code == 401

    def test_openapi_declares_bearer_scheme(self, client: TestClient):
        schemes = client.get("/openapi.json").json()["components"]["securitySchemes"]
        assert schemes["HTTPBearer"]["scheme"] == "bearer"
