"""Storefront page view models.

Builds what the storefront pages display from catalog API responses:
the home page (categories plus featured lists), category pages and the
filterable product grid. Builders never raise; an API failure becomes a
``failed`` view the page renders with a retry prompt.
"""

import asyncio
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

import structlog

from storefront.presentation.client import APIResponse, StorefrontClient

logger = structlog.get_logger()

EMPTY_MESSAGE = "No products found"
FAILED_MESSAGE = "We couldn't load products right now. Please try again."


class ViewState(str, Enum):
    """What a section of a page should show."""

    READY = "ready"
    EMPTY = "empty"
    FAILED = "failed"


@dataclass
class ProductGridView:
    """A grid of product cards with pagination.

    Attributes:
        state: Ready, empty or failed.
        products: Product payloads to render as cards.
        page: Current page.
        total: Products matching the filters.
        has_more: Whether a next page exists.
        message: Text for empty/failed states.
        retryable: Whether to offer a retry button.
    """

    state: ViewState
    products: list[dict[str, Any]] = field(default_factory=list)
    page: int = 1
    total: int = 0
    has_more: bool = False
    message: str | None = None
    retryable: bool = False


@dataclass
class FeaturedSection:
    """A titled featured list on the home page."""

    title: str
    filter_type: str
    grid: ProductGridView
    subtitle: str | None = None


@dataclass
class CategoryListView:
    """Category navigation."""

    state: ViewState
    categories: list[dict[str, Any]] = field(default_factory=list)
    retryable: bool = False


@dataclass
class HomePage:
    """Home page view model."""

    categories: CategoryListView
    sections: list[FeaturedSection]


@dataclass
class CategoryPage:
    """Category page view model."""

    state: ViewState
    category: dict[str, Any] | None
    grid: ProductGridView
    message: str | None = None


# Featured lists shown on the home page, top to bottom
HOME_SECTIONS = [
    ("Most Popular", "most-ordered", "What everyone is buying"),
    ("Top Rated", "top-rated", "Loved by our customers"),
    ("New Arrivals", "newest", "Fresh additions to the catalog"),
]


def _failed_grid(response: APIResponse) -> ProductGridView:
    error = response.error
    logger.warning(
        "Catalog request failed",
        error_code=error.error_code if error else None,
        status_code=error.status_code if error else None,
    )
    retryable = error.retryable if error else True
    message = FAILED_MESSAGE if retryable else (error.message if error else FAILED_MESSAGE)
    return ProductGridView(state=ViewState.FAILED, message=message, retryable=retryable)


def grid_from_response(response: APIResponse) -> ProductGridView:
    """Turn a listing response into a grid view.

    Args:
        response: Response from a product listing or featured endpoint.

    Returns:
        Grid view in the ready, empty or failed state.
    """
    if not response.success or response.data is None:
        return _failed_grid(response)

    data = response.data
    products = data.get("products", [])
    if not products:
        return ProductGridView(
            state=ViewState.EMPTY,
            page=data.get("page", 1),
            message=EMPTY_MESSAGE,
        )

    return ProductGridView(
        state=ViewState.READY,
        products=products,
        page=data.get("page", 1),
        total=data.get("total", len(products)),
        has_more=data.get("hasMore", False),
    )


async def product_grid(client: StorefrontClient, **filters: Any) -> ProductGridView:
    """Build the filterable product grid.

    Args:
        client: Catalog API client.
        **filters: Passed to StorefrontClient.list_products.

    Returns:
        Grid view.
    """
    response = await client.list_products(**filters)
    return grid_from_response(response)


async def featured_section(
    client: StorefrontClient,
    title: str,
    filter_type: str,
    subtitle: str | None = None,
    limit: int | None = None,
) -> FeaturedSection:
    """Build one featured list section."""
    response = await client.featured_products(filter_type, limit=limit)
    return FeaturedSection(
        title=title,
        filter_type=filter_type,
        subtitle=subtitle,
        grid=grid_from_response(response),
    )


async def category_list(client: StorefrontClient) -> CategoryListView:
    """Build the category navigation."""
    response = await client.list_categories()
    if not response.success or response.data is None:
        return CategoryListView(state=ViewState.FAILED, retryable=True)

    categories = response.data.get("categories", [])
    return CategoryListView(
        state=ViewState.READY if categories else ViewState.EMPTY,
        categories=categories,
    )


async def home_page(client: StorefrontClient, limit: int | None = None) -> HomePage:
    """Build the home page.

    Sections load concurrently and fail independently.

    Args:
        client: Catalog API client.
        limit: Products per featured section.

    Returns:
        Home page view model.
    """
    categories, *sections = await asyncio.gather(
        category_list(client),
        *(
            featured_section(client, title, filter_type, subtitle, limit)
            for title, filter_type, subtitle in HOME_SECTIONS
        ),
    )
    return HomePage(categories=categories, sections=list(sections))


async def category_page(
    client: StorefrontClient,
    category_id: int,
    page: int | None = None,
) -> CategoryPage:
    """Build a category page.

    Args:
        client: Catalog API client.
        category_id: Category to show.
        page: Page of products.

    Returns:
        Category page view model.
    """
    response = await client.get_category(category_id, page=page)

    if response.error and response.error.status_code == 404:
        return CategoryPage(
            state=ViewState.EMPTY,
            category=None,
            grid=ProductGridView(state=ViewState.EMPTY, message=EMPTY_MESSAGE),
            message="Category not found",
        )

    if not response.success or response.data is None:
        grid = _failed_grid(response)
        return CategoryPage(state=ViewState.FAILED, category=None, grid=grid, message=grid.message)

    grid = grid_from_response(response)
    return CategoryPage(state=grid.state, category=response.data.get("category"), grid=grid)
