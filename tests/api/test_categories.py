"""Tests for category API endpoints."""

from fastapi.testclient import TestClient


def create_category(auth_client: TestClient, name: str) -> dict:
    """Finalize a named draft and return the category payload."""
    session_id = auth_client.post("/drafts").json()["sessionId"]
    auth_client.put(f"/drafts/{session_id}/name", json={"name": name})
    response = auth_client.post(f"/drafts/{session_id}/finalize")
    assert response.status_code == 201
    return response.json()


class TestListCategories:
    """Tests for GET /categories endpoint."""

    def test_empty(self, auth_client: TestClient) -> None:
        """Should return an empty page before anything is finalized."""
        response = auth_client.get("/categories")
        assert response.status_code == 200
        data = response.json()
        assert data["items"] == []
        assert data["total"] == 0
        assert data["hasMore"] is False

    def test_pagination(self, auth_client: TestClient) -> None:
        """Should page through categories in creation order."""
        for name in ["Phones", "Laptops", "TVs"]:
            create_category(auth_client, name)

        response = auth_client.get("/categories", params={"page": 1, "page_size": 2})
        data = response.json()
        assert [c["name"] for c in data["items"]] == ["Phones", "Laptops"]
        assert data["total"] == 3
        assert data["pageSize"] == 2
        assert data["hasMore"] is True

        response = auth_client.get("/categories", params={"page": 2, "page_size": 2})
        data = response.json()
        assert [c["name"] for c in data["items"]] == ["TVs"]
        assert data["hasMore"] is False

    def test_invalid_page(self, auth_client: TestClient) -> None:
        """Should reject page numbers below 1."""
        response = auth_client.get("/categories", params={"page": 0})
        assert response.status_code == 422


class TestGetCategory:
    """Tests for GET /categories/{id} endpoint."""

    def test_get_category(self, auth_client: TestClient) -> None:
        """Should return a finalized category."""
        created = create_category(auth_client, "Phones")

        response = auth_client.get(f"/categories/{created['id']}")
        assert response.status_code == 200
        assert response.json() == created

    def test_get_unknown_category(self, auth_client: TestClient) -> None:
        """Should return 404 for unknown categories."""
        response = auth_client.get("/categories/C404")
        assert response.status_code == 404
        assert response.json()["error_code"] == "CATEGORY_NOT_FOUND"
