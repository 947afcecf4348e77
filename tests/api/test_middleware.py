"""Tests for API middleware."""

from collections.abc import Callable

from fastapi.testclient import TestClient

from storefront.catalog.repository import InMemoryCatalogStore
from storefront.main import app


class ExplodingStore(InMemoryCatalogStore):
    async def list_categories(self):
        raise RuntimeError("boom")


class TestRequestId:
    """Tests for request ID correlation."""

    def test_generates_request_id_if_not_provided(self, client: TestClient) -> None:
        """Should generate request ID if not in request headers."""
        response = client.get("/health")
        assert response.status_code == 200
        # UUID format
        assert len(response.headers["X-Request-ID"]) == 36

    def test_uses_provided_request_id(self, client: TestClient) -> None:
        """Should use request ID from request headers."""
        custom_id = "custom-request-id-12345"
        response = client.get("/products", headers={"X-Request-ID": custom_id})
        assert response.status_code == 200
        assert response.headers["X-Request-ID"] == custom_id


class TestUnhandledErrors:
    """Tests for unhandled exception handling."""

    def test_unhandled_error_is_500_envelope(self, override_store: Callable) -> None:
        override_store(ExplodingStore())
        response = TestClient(app).get(
            "/categories", headers={"X-Request-ID": "req-boom"}
        )
        assert response.status_code == 500
        data = response.json()
        assert data["error_code"] == "INTERNAL_ERROR"
        assert data["request_id"] == "req-boom"
        assert "boom" not in data["message"]

    def test_unknown_route(self, client: TestClient) -> None:
        response = client.get("/nowhere")
        assert response.status_code == 404
        assert response.json()["error_code"] == "NOT_FOUND"
