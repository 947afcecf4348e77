"""Product Catalog.

Provides catalog entities, the listing query contract, catalog stores
and the service that answers filtered, sorted and paginated listings.
"""

from storefront.catalog.entities import Category, Product
from storefront.catalog.query import (
    SORT_POLICY,
    CatalogPage,
    FeaturedType,
    FilterRequest,
    SortKey,
    SortMode,
)
from storefront.catalog.repository import CatalogStore, InMemoryCatalogStore, SqlCatalogStore
from storefront.catalog.service import CatalogService

__all__ = [
    # Entities
    "Category",
    "Product",
    # Query contract
    "CatalogPage",
    "FeaturedType",
    "FilterRequest",
    "SORT_POLICY",
    "SortKey",
    "SortMode",
    # Stores
    "CatalogStore",
    "InMemoryCatalogStore",
    "SqlCatalogStore",
    # Service
    "CatalogService",
]
