"""Presentation layer.

API client and page view models for the storefront front end.
"""

from storefront.presentation.client import APIError, APIResponse, StorefrontClient
from storefront.presentation.views import (
    CategoryPage,
    HomePage,
    ProductGridView,
    ViewState,
    category_page,
    home_page,
    product_grid,
)

__all__ = [
    "APIError",
    "APIResponse",
    "StorefrontClient",
    "CategoryPage",
    "HomePage",
    "ProductGridView",
    "ViewState",
    "category_page",
    "home_page",
    "product_grid",
]
