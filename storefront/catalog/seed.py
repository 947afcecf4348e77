"""Example catalog data.

Deterministic example categories and products for local runs, demos and
the seed script. Ratings, order counts and creation times are derived
from a seeded random generator so every run produces the same catalog.
"""

import random
from datetime import datetime, timedelta, timezone
from decimal import Decimal
from typing import Any

import structlog

from storefront.catalog.entities import Category, Product
from storefront.catalog.repository import CatalogStore

logger = structlog.get_logger()


# ============================================================================
# Constants
# ============================================================================

EXAMPLE_CATEGORIES = [
    {"id": 1, "name": "Clothing", "description": "Apparel and clothing items"},
    {"id": 2, "name": "Footwear", "description": "Shoes and boots"},
    {"id": 3, "name": "Accessories", "description": "Fashion accessories"},
]

EXAMPLE_PRODUCTS = [
    {"id": 1, "name": "T-shirt", "price": "19.99", "category_id": 1, "stock": 50,
     "description": "Comfortable cotton t-shirt in various colors"},
    {"id": 2, "name": "Jeans", "price": "49.99", "category_id": 1, "stock": 30,
     "description": "Classic blue jeans with perfect fit"},
    {"id": 3, "name": "Sneakers", "price": "89.99", "category_id": 2, "stock": 25,
     "description": "Running sneakers with cushioned sole"},
    {"id": 4, "name": "Boots", "price": "129.99", "category_id": 2, "stock": 20,
     "description": "Durable leather boots for all weather"},
    {"id": 5, "name": "Jacket", "price": "79.99", "category_id": 1, "stock": 15,
     "description": "Lightweight jacket for cool evenings"},
    {"id": 6, "name": "Cap", "price": "24.99", "category_id": 3, "stock": 40,
     "description": "Adjustable baseball cap"},
    {"id": 7, "name": "Backpack", "price": "59.99", "category_id": 3, "stock": 18,
     "description": "Everyday backpack with laptop sleeve"},
    {"id": 8, "name": "Socks", "price": "9.99", "category_id": 3, "stock": 60,
     "description": "Pack of breathable cotton socks"},
]

# Creation times are spread backwards from this instant
EPOCH = datetime(2024, 1, 1, tzinfo=timezone.utc)


# ============================================================================
# Generation
# ============================================================================


def example_catalog(seed: int = 42) -> tuple[list[Category], list[Product]]:
    """Build the example catalog.

    Args:
        seed: Random seed for ratings, order counts and timestamps.

    Returns:
        Categories and products.
    """
    rng = random.Random(seed)

    categories = [Category(**data) for data in EXAMPLE_CATEGORIES]
    products = [_example_product(rng, data) for data in EXAMPLE_PRODUCTS]

    return categories, products


def _example_product(rng: random.Random, data: dict[str, Any]) -> Product:
    rating = Decimal(str(round(rng.uniform(3.0, 5.0) * 2) / 2))
    return Product(
        id=data["id"],
        name=data["name"],
        category_id=data["category_id"],
        price=Decimal(data["price"]),
        rating=rating,
        order_count=rng.randint(0, 200),
        created_at=EPOCH - timedelta(days=rng.randint(0, 365), minutes=data["id"]),
        stock=data["stock"],
        description=data["description"],
        image_url=f"/images/{data['name'].lower()}.jpg",
    )


async def seed_store(store: CatalogStore, seed: int = 42) -> dict[str, int]:
    """Write the example catalog into a store.

    Existing rows with the same ids are overwritten.

    Args:
        store: Target store.
        seed: Random seed.

    Returns:
        Counts of what was written.
    """
    categories, products = example_catalog(seed)

    for category in categories:
        await store.save_category(category)
    for product in products:
        await store.save_product(product)

    logger.info(
        "Catalog seeded",
        categories=len(categories),
        products=len(products),
    )
    return {"categories": len(categories), "products": len(products)}
