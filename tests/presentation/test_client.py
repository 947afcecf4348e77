"""Tests for the storefront API client."""

import httpx
import pytest

from storefront.presentation.client import APIError, StorefrontClient


def mock_client(handler) -> StorefrontClient:
    return StorefrontClient(
        base_url="http://storefront.test",
        transport=httpx.MockTransport(handler),
    )


class TestStorefrontClient:
    """Tests against the in-process catalog app."""

    @pytest.mark.asyncio
    async def test_list_products(self, api: StorefrontClient) -> None:
        response = await api.list_products(category=2, sort="top-rated")
        assert response.success
        assert [p["id"] for p in response.data["products"]] == [4, 3]

    @pytest.mark.asyncio
    async def test_list_products_filters(self, api: StorefrontClient) -> None:
        response = await api.list_products(
            min_price=20, max_price=90, min_rating=4, in_stock=True, limit=50
        )
        assert response.success
        assert {p["id"] for p in response.data["products"]} == {2, 6, 7, 9}

    @pytest.mark.asyncio
    async def test_featured(self, api: StorefrontClient) -> None:
        response = await api.featured_products("most-ordered", limit=2)
        assert [p["id"] for p in response.data["products"]] == [8, 3]

    @pytest.mark.asyncio
    async def test_categories(self, api: StorefrontClient) -> None:
        response = await api.list_categories()
        assert len(response.data["categories"]) == 3

        detail = await api.get_category(3, page=1, limit=2)
        assert detail.data["category"]["name"] == "Accessories"
        assert detail.data["hasMore"] is True

    @pytest.mark.asyncio
    async def test_api_error_parsed(self, api: StorefrontClient) -> None:
        response = await api.list_products(limit=0)
        assert not response.success
        assert response.error.error_code == "VALIDATION_ERROR"
        assert response.error.status_code == 400
        assert response.error.details[0]["field"] == "limit"
        assert not response.error.retryable

    @pytest.mark.asyncio
    async def test_not_found(self, api: StorefrontClient) -> None:
        response = await api.get_category(999)
        assert response.error.error_code == "CATEGORY_NOT_FOUND"
        assert response.error.status_code == 404


class TestTransportFailures:
    """Transport failures become error responses."""

    @pytest.mark.asyncio
    async def test_timeout(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("too slow", request=request)

        client = mock_client(handler)
        response = await client.list_categories()
        await client.close()

        assert not response.success
        assert response.error.error_code == "TIMEOUT"
        assert response.error.retryable

    @pytest.mark.asyncio
    async def test_connection_error(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("refused", request=request)

        client = mock_client(handler)
        response = await client.featured_products("newest")
        await client.close()

        assert response.error.error_code == "REQUEST_ERROR"
        assert response.error.retryable

    @pytest.mark.asyncio
    async def test_non_json_error_body(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(502, text="Bad Gateway")

        client = mock_client(handler)
        response = await client.list_products()
        await client.close()

        assert response.error.error_code == "UNKNOWN_ERROR"
        assert response.error.status_code == 502
        assert response.error.retryable

    @pytest.mark.asyncio
    async def test_none_params_dropped(self) -> None:
        seen: list[httpx.URL] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request.url)
            return httpx.Response(200, json={"products": []})

        client = mock_client(handler)
        await client.list_products(category=1, in_stock=False)
        await client.close()

        assert dict(seen[0].params) == {"category": "1"}


def test_retryable() -> None:
    assert APIError("STORE_UNAVAILABLE", "down", 503).retryable
    assert not APIError("PRODUCT_NOT_FOUND", "missing", 404).retryable
