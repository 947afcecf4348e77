"""Tests for storefront page view models."""

import httpx
import pytest

from storefront.presentation.client import APIError, APIResponse, StorefrontClient
from storefront.presentation.views import (
    EMPTY_MESSAGE,
    FAILED_MESSAGE,
    ViewState,
    category_page,
    grid_from_response,
    home_page,
    product_grid,
)


def failing_client(status_code: int, body: dict | None = None) -> StorefrontClient:
    """Client whose every request fails with the given status."""

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status_code, json=body or {})

    return StorefrontClient(
        base_url="http://storefront.test",
        transport=httpx.MockTransport(handler),
    )


class TestGridFromResponse:
    """Tests for grid view states."""

    def test_ready(self) -> None:
        grid = grid_from_response(
            APIResponse(
                success=True,
                data={"products": [{"id": 1}], "page": 2, "total": 5, "hasMore": True},
            )
        )
        assert grid.state == ViewState.READY
        assert grid.page == 2
        assert grid.total == 5
        assert grid.has_more

    def test_empty(self) -> None:
        grid = grid_from_response(APIResponse(success=True, data={"products": []}))
        assert grid.state == ViewState.EMPTY
        assert grid.message == EMPTY_MESSAGE

    def test_failed_retryable(self) -> None:
        error = APIError("STORE_UNAVAILABLE", "Product store unavailable", 503)
        grid = grid_from_response(APIResponse(success=False, error=error))
        assert grid.state == ViewState.FAILED
        assert grid.message == FAILED_MESSAGE
        assert grid.retryable

    def test_failed_bad_request(self) -> None:
        """Rejected filters show the API's explanation without a retry."""
        error = APIError("VALIDATION_ERROR", "Invalid maxPrice: must not be below price_min", 400)
        grid = grid_from_response(APIResponse(success=False, error=error))
        assert grid.state == ViewState.FAILED
        assert grid.message == error.message
        assert not grid.retryable


class TestHomePage:
    """Tests for the home page."""

    @pytest.mark.asyncio
    async def test_sections(self, api: StorefrontClient) -> None:
        page = await home_page(api)

        assert page.categories.state == ViewState.READY
        assert [s.title for s in page.sections] == ["Most Popular", "Top Rated", "New Arrivals"]
        for section in page.sections:
            assert section.grid.state == ViewState.READY
            assert len(section.grid.products) == 4

        most_popular = page.sections[0]
        assert [p["id"] for p in most_popular.grid.products] == [8, 3, 7, 1]

    @pytest.mark.asyncio
    async def test_store_outage(self) -> None:
        """Every section fails independently with a retry prompt."""
        client = failing_client(503, {"error_code": "STORE_UNAVAILABLE", "message": "down"})
        page = await home_page(client)
        await client.close()

        assert page.categories.state == ViewState.FAILED
        for section in page.sections:
            assert section.grid.state == ViewState.FAILED
            assert section.grid.retryable
            assert section.grid.message == FAILED_MESSAGE


class TestCategoryPage:
    """Tests for category pages."""

    @pytest.mark.asyncio
    async def test_ready(self, api: StorefrontClient) -> None:
        page = await category_page(api, 2)
        assert page.state == ViewState.READY
        assert page.category["name"] == "Footwear"
        assert {p["id"] for p in page.grid.products} == {3, 4}

    @pytest.mark.asyncio
    async def test_unknown_category(self, api: StorefrontClient) -> None:
        page = await category_page(api, 999)
        assert page.state == ViewState.EMPTY
        assert page.category is None
        assert page.message == "Category not found"

    @pytest.mark.asyncio
    async def test_outage(self) -> None:
        client = failing_client(503)
        page = await category_page(client, 1)
        await client.close()

        assert page.state == ViewState.FAILED
        assert page.grid.retryable


class TestProductGrid:
    """Tests for the filterable grid."""

    @pytest.mark.asyncio
    async def test_filtered(self, api: StorefrontClient) -> None:
        grid = await product_grid(api, search="jacket", sort="price-asc")
        assert grid.state == ViewState.READY
        assert [p["id"] for p in grid.products] == [5, 9]

    @pytest.mark.asyncio
    async def test_no_matches(self, api: StorefrontClient) -> None:
        grid = await product_grid(api, search="umbrella")
        assert grid.state == ViewState.EMPTY
        assert grid.message == EMPTY_MESSAGE
