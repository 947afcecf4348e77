"""Product catalog stores.

The catalog service talks to a ``CatalogStore``. Two implementations
are provided: an in-memory store used for tests and local runs, and a
SQLAlchemy store backed by the application database.

Example usage:
    async with async_session_factory() as session:
        store = SqlCatalogStore(session)
        products, total = await store.find_products(
            FilterRequest(category_id=1, sort="top-rated", limit=20),
        )
"""

from collections.abc import Iterable
from contextlib import asynccontextmanager
from dataclasses import replace
from typing import AsyncIterator, Protocol

import structlog
from sqlalchemy import and_, func, select, text
from sqlalchemy.exc import InterfaceError, OperationalError
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.catalog.entities import Category, Product
from storefront.catalog.models import CategoryRecord, ProductRecord
from storefront.catalog.query import FilterRequest, order_products
from storefront.domain.exceptions import StoreUnavailableError

logger = structlog.get_logger()


class CatalogStore(Protocol):
    """Store-access interface used by the catalog service."""

    async def find_products(self, request: FilterRequest) -> tuple[list[Product], int]:
        """Return the requested page of matching products and the match count."""
        ...

    async def get_product(self, product_id: int) -> Product | None:
        """Get a product by id, active or not."""
        ...

    async def add_product(self, product: Product) -> Product:
        """Insert a new product under a store-assigned id."""
        ...

    async def save_product(self, product: Product) -> Product:
        """Insert or update a product."""
        ...

    async def list_categories(self) -> list[Category]:
        """List all categories ordered by name."""
        ...

    async def get_category(self, category_id: int) -> Category | None:
        """Get a category by id."""
        ...

    async def save_category(self, category: Category) -> Category:
        """Insert or update a category."""
        ...

    async def ping(self) -> None:
        """Check the store is reachable."""
        ...


# ============================================================================
# In-Memory Store
# ============================================================================


class InMemoryCatalogStore:
    """In-memory catalog store."""

    def __init__(
        self,
        products: Iterable[Product] = (),
        categories: Iterable[Category] = (),
    ) -> None:
        self._products: dict[int, Product] = {p.id: p for p in products}
        self._categories: dict[int, Category] = {c.id: c for c in categories}

    async def find_products(self, request: FilterRequest) -> tuple[list[Product], int]:
        """Filter, order and slice stored products."""
        matching = [p for p in self._products.values() if request.matches(p)]
        ordered = order_products(matching, request.sort)
        start = request.offset
        return ordered[start : start + request.limit], len(ordered)

    async def get_product(self, product_id: int) -> Product | None:
        """Get product by ID."""
        return self._products.get(product_id)

    async def add_product(self, product: Product) -> Product:
        """Store a product under the next free id."""
        created = replace(product, id=max(self._products, default=0) + 1)
        self._products[created.id] = created
        return created

    async def save_product(self, product: Product) -> Product:
        """Save a product."""
        self._products[product.id] = product
        return product

    async def list_categories(self) -> list[Category]:
        """List categories by name."""
        return sorted(self._categories.values(), key=lambda c: (c.name.lower(), c.id))

    async def get_category(self, category_id: int) -> Category | None:
        """Get category by ID."""
        return self._categories.get(category_id)

    async def save_category(self, category: Category) -> Category:
        """Save a category."""
        self._categories[category.id] = category
        return category

    async def ping(self) -> None:
        """Always reachable."""
        return None


# ============================================================================
# SQL Store
# ============================================================================


class SqlCatalogStore:
    """Catalog store backed by SQLAlchemy.

    Handles all database interactions for products including
    filtering, sorting, and pagination. Connectivity failures surface
    as StoreUnavailableError.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize store with database session.

        Args:
            session: Async SQLAlchemy session.
        """
        self.session = session

    @asynccontextmanager
    async def _guard(self, operation: str) -> AsyncIterator[None]:
        try:
            yield
        except (OperationalError, InterfaceError, OSError) as e:
            logger.error(
                "Product store unreachable",
                operation=operation,
                error=str(e),
            )
            raise StoreUnavailableError(str(e), operation=operation) from e

    def _conditions(self, request: FilterRequest) -> list:
        """Translate filter constraints into SQL conditions.

        Args:
            request: Filter request.

        Returns:
            Conditions to AND together.
        """
        conditions = [ProductRecord.active.is_(True)]

        if request.category_id is not None:
            conditions.append(ProductRecord.category_id == request.category_id)

        if request.price_min is not None:
            conditions.append(ProductRecord.price >= request.price_min)

        if request.price_max is not None:
            conditions.append(ProductRecord.price <= request.price_max)

        if request.rating_min is not None:
            conditions.append(ProductRecord.rating >= request.rating_min)

        if request.in_stock:
            conditions.append(ProductRecord.stock > 0)

        if request.search:
            conditions.append(
                func.lower(ProductRecord.name).contains(
                    request.search.lower(), autoescape=True
                )
            )

        return conditions

    async def find_products(self, request: FilterRequest) -> tuple[list[Product], int]:
        """Find products with filtering, sorting, and pagination.

        Args:
            request: Filter request, including page and sort.

        Returns:
            Products on the requested page and the total match count.
        """
        where = and_(*self._conditions(request))

        query = select(ProductRecord).where(where)
        for key in request.sort_keys:
            column = getattr(ProductRecord, key.field)
            query = query.order_by(column.desc() if key.descending else column.asc())
        query = query.limit(request.limit).offset(request.offset)

        count_query = select(func.count(ProductRecord.id)).where(where)

        async with self._guard("find_products"):
            result = await self.session.execute(query)
            records = result.scalars().all()
            total = (await self.session.execute(count_query)).scalar_one()

        return [r.to_entity() for r in records], total

    async def get_product(self, product_id: int) -> Product | None:
        """Get product by ID.

        Args:
            product_id: Product ID.

        Returns:
            Product if found, None otherwise.
        """
        async with self._guard("get_product"):
            record = await self.session.get(ProductRecord, product_id)
        return record.to_entity() if record else None

    async def add_product(self, product: Product) -> Product:
        """Insert a product and return it with its generated id.

        Args:
            product: Product to insert; its id is ignored.

        Returns:
            Stored product.
        """
        record = ProductRecord.from_entity(product)
        record.id = None
        async with self._guard("add_product"):
            self.session.add(record)
            await self.session.flush()
        return record.to_entity()

    async def save_product(self, product: Product) -> Product:
        """Save a product to database.

        Args:
            product: Product to save.

        Returns:
            Saved product.
        """
        async with self._guard("save_product"):
            record = await self.session.get(ProductRecord, product.id)
            if record is None:
                self.session.add(ProductRecord.from_entity(product))
            else:
                record.apply(product)
            await self.session.flush()
        return product

    async def list_categories(self) -> list[Category]:
        """Get categories ordered by name."""
        query = select(CategoryRecord).order_by(
            func.lower(CategoryRecord.name), CategoryRecord.id
        )
        async with self._guard("list_categories"):
            result = await self.session.execute(query)
            records = result.scalars().all()
        return [r.to_entity() for r in records]

    async def get_category(self, category_id: int) -> Category | None:
        """Get category by ID."""
        async with self._guard("get_category"):
            record = await self.session.get(CategoryRecord, category_id)
        return record.to_entity() if record else None

    async def save_category(self, category: Category) -> Category:
        """Save a category to database."""
        async with self._guard("save_category"):
            record = await self.session.get(CategoryRecord, category.id)
            if record is None:
                self.session.add(CategoryRecord.from_entity(category))
            else:
                record.name = category.name
                record.description = category.description
            await self.session.flush()
        return category

    async def ping(self) -> None:
        """Run a trivial statement against the database."""
        async with self._guard("ping"):
            await self.session.execute(text("SELECT 1"))
