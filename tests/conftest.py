"""Shared fixtures for catalog tests."""

from datetime import datetime, timedelta, timezone
from decimal import Decimal
from typing import Any, Callable

import pytest

from storefront.catalog.entities import Category, Product
from storefront.catalog.repository import InMemoryCatalogStore
from storefront.catalog.service import CatalogService

T0 = datetime(2024, 6, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def make_product() -> Callable[..., Product]:
    """Factory for products with sensible defaults."""

    def _make(product_id: int, **overrides: Any) -> Product:
        data: dict[str, Any] = {
            "id": product_id,
            "name": f"Product {product_id}",
            "category_id": 1,
            "price": Decimal("10.00"),
            "rating": Decimal("4.0"),
            "order_count": 0,
            "created_at": T0,
            "stock": 10,
        }
        data.update(overrides)
        return Product(**data)

    return _make


@pytest.fixture
def categories() -> list[Category]:
    """Example categories."""
    return [
        Category(id=1, name="Clothing", description="Apparel"),
        Category(id=2, name="Footwear", description="Shoes and boots"),
        Category(id=3, name="Accessories"),
    ]


@pytest.fixture
def products(make_product: Callable[..., Product]) -> list[Product]:
    """A varied catalog with deliberate ties on every sort key."""
    return [
        make_product(1, name="Cotton T-shirt", category_id=1, price="19.99",
                     rating="4.5", order_count=120, created_at=T0, stock=50),
        make_product(2, name="Blue Jeans", category_id=1, price="49.99",
                     rating="4.0", order_count=80, created_at=T0 + timedelta(days=1), stock=30),
        make_product(3, name="Running Sneakers", category_id=2, price="89.99",
                     rating="4.5", order_count=120, created_at=T0 + timedelta(days=2), stock=0),
        make_product(4, name="Leather Boots", category_id=2, price="129.99",
                     rating="5.0", order_count=40, created_at=T0 + timedelta(days=2), stock=20),
        make_product(5, name="Rain Jacket", category_id=1, price="79.99",
                     rating="3.5", order_count=80, created_at=T0 + timedelta(days=3), stock=15),
        make_product(6, name="Baseball Cap", category_id=3, price="24.99",
                     rating="4.0", order_count=10, created_at=T0 + timedelta(days=4), stock=40),
        make_product(7, name="Canvas Backpack", category_id=3, price="59.99",
                     rating="4.5", order_count=120, created_at=T0 + timedelta(days=2), stock=18),
        make_product(8, name="Wool Socks", category_id=3, price="9.99",
                     rating="3.0", order_count=200, created_at=T0 + timedelta(days=5), stock=60),
        make_product(9, name="Denim Jacket", category_id=1, price="89.99",
                     rating="4.0", order_count=0, created_at=T0 + timedelta(days=6), stock=5),
        make_product(10, name="Retired Sandals", category_id=2, price="29.99",
                     rating="5.0", order_count=500, created_at=T0 + timedelta(days=7),
                     stock=5, active=False),
    ]


@pytest.fixture
def store(products: list[Product], categories: list[Category]) -> InMemoryCatalogStore:
    """In-memory store holding the example catalog."""
    return InMemoryCatalogStore(products, categories)


@pytest.fixture
def service(store: InMemoryCatalogStore) -> CatalogService:
    """Catalog service over the in-memory store."""
    return CatalogService(store, max_limit=50, timeout=1.0)
