"""Tests for category endpoints."""

from fastapi.testclient import TestClient


class TestListCategories:
    """Tests for GET /categories."""

    def test_ordered_by_name(self, client: TestClient) -> None:
        response = client.get("/categories")
        assert response.status_code == 200
        names = [c["name"] for c in response.json()["categories"]]
        assert names == ["Accessories", "Clothing", "Footwear"]


class TestGetCategory:
    """Tests for GET /categories/{id}."""

    def test_category_with_products(self, client: TestClient) -> None:
        response = client.get("/categories/2")
        assert response.status_code == 200
        data = response.json()
        assert data["category"] == {
            "id": 2,
            "name": "Footwear",
            "description": "Shoes and boots",
        }
        assert {p["id"] for p in data["products"]} == {3, 4}
        assert data["total"] == 2
        assert data["hasMore"] is False

    def test_paged(self, client: TestClient) -> None:
        response = client.get("/categories/1", params={"page": 2, "limit": 3})
        data = response.json()
        assert data["page"] == 2
        assert data["total"] == 4
        assert len(data["products"]) == 1
        assert data["hasMore"] is False

    def test_unknown_category(self, client: TestClient) -> None:
        """Unlike the product listing, an unknown category is a 404 here."""
        response = client.get("/categories/999")
        assert response.status_code == 404
        data = response.json()
        assert data["error_code"] == "CATEGORY_NOT_FOUND"
        assert data["details"] == []

    def test_limit_above_ceiling(self, client: TestClient) -> None:
        assert client.get("/categories/1", params={"limit": 500}).status_code == 400
