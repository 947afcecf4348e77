#!/usr/bin/env python3
"""Seed product catalog script.

Creates the catalog tables and writes the example categories and
products into the configured database.

Usage:
    python scripts/seed_catalog.py
    python scripts/seed_catalog.py --seed 7
    python scripts/seed_catalog.py --drop
"""

import argparse
import asyncio
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from storefront.catalog.repository import SqlCatalogStore
from storefront.catalog.seed import seed_store
from storefront.infrastructure.config import settings
from storefront.infrastructure.database import async_session_factory, create_tables, engine
from storefront.infrastructure.logging import configure_logging


async def seed(seed_value: int) -> dict[str, int]:
    """Seed the example catalog.

    Args:
        seed_value: Random seed for generated fields.

    Returns:
        Seeding counts.
    """
    async with async_session_factory() as session:
        result = await seed_store(SqlCatalogStore(session), seed=seed_value)
        await session.commit()
        return result


async def main() -> None:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Seed the storefront product catalog",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=42,
        help="Random seed for ratings, order counts and dates (default: 42)",
    )
    parser.add_argument(
        "--drop",
        action="store_true",
        help="Drop and recreate catalog tables before seeding",
    )

    args = parser.parse_args()
    configure_logging(settings.log_level)

    print("=" * 60)
    print("Storefront Catalog Seeder")
    print("=" * 60)

    print("Creating database tables...")
    await create_tables(drop=args.drop)
    print("Tables ready.")
    print()

    try:
        result = await seed(args.seed)
    finally:
        await engine.dispose()

    print(f"  ✓ Categories: {result['categories']}")
    print(f"  ✓ Products: {result['products']}")
    print("=" * 60)
    print("Seeding complete!")
    print("=" * 60)


if __name__ == "__main__":
    asyncio.run(main())
