"""Catalog service for product operations.

High-level service that combines store operations with the listing
rules: filter validation, the page-size ceiling, featured lists and
entity lookups that must not silently come back empty.
"""

import asyncio
from collections.abc import Awaitable
from dataclasses import replace
from decimal import Decimal
from typing import TypeVar

import structlog

from storefront.catalog.entities import Category, Product, parse_decimal
from storefront.catalog.query import (
    CatalogPage,
    FeaturedType,
    FilterRequest,
    parse_featured_type,
    validate_limit,
)
from storefront.catalog.repository import CatalogStore
from storefront.domain.exceptions import NotFoundError, StoreUnavailableError, ValidationError
from storefront.infrastructure.config import settings

logger = structlog.get_logger()

R = TypeVar("R")


class CatalogService:
    """Service for catalog operations.

    Example usage:
        service = CatalogService(InMemoryCatalogStore(products, categories))

        page = await service.filter_products(
            FilterRequest(category_id=2, price_max=Decimal("100"), sort="top-rated"),
        )
        featured = await service.featured_products("newest", limit=4)
    """

    def __init__(
        self,
        store: CatalogStore,
        max_limit: int | None = None,
        timeout: float | None = None,
    ) -> None:
        """Initialize service.

        Args:
            store: Product store to query.
            max_limit: Largest page size accepted.
            timeout: Seconds allowed per store call.
        """
        self.store = store
        self.max_limit = max_limit if max_limit is not None else settings.max_page_limit
        self.timeout = timeout if timeout is not None else settings.store_timeout_seconds

    async def _call(
        self,
        operation: str,
        call: Awaitable[R],
        timeout: float | None = None,
    ) -> R:
        """Await a store call within the timeout.

        Cancellation of the calling task propagates unchanged.

        Raises:
            StoreUnavailableError: If the call does not finish in time.
        """
        limit = self.timeout if timeout is None else timeout
        try:
            return await asyncio.wait_for(call, timeout=limit)
        except asyncio.TimeoutError:
            logger.warning("Product store timed out", operation=operation, timeout=limit)
            raise StoreUnavailableError(
                f"timed out after {limit}s", operation=operation
            ) from None

    # ========================================================================
    # Listings
    # ========================================================================

    async def filter_products(
        self,
        request: FilterRequest,
        timeout: float | None = None,
    ) -> CatalogPage[Product]:
        """List products matching every constraint of the request.

        Args:
            request: Filters, sort and page.
            timeout: Overrides the per-call store timeout.

        Returns:
            Requested page with the total match count.

        Raises:
            ValidationError: If the page size exceeds the ceiling.
            StoreUnavailableError: If the store cannot answer.
        """
        validate_limit(request.limit, self.max_limit)

        items, total = await self._call(
            "find_products", self.store.find_products(request), timeout
        )

        logger.debug(
            "Catalog query",
            category_id=request.category_id,
            sort=request.sort.value,
            page=request.page,
            limit=request.limit,
            total=total,
        )

        return CatalogPage(items=items, total=total, page=request.page, limit=request.limit)

    async def featured_products(
        self,
        filter_type: FeaturedType | str,
        limit: int | None = None,
        timeout: float | None = None,
    ) -> CatalogPage[Product]:
        """Top products of a named featured list.

        Args:
            filter_type: most-ordered, top-rated or newest.
            limit: Number of products; defaults to the configured size.
            timeout: Overrides the per-call store timeout.

        Returns:
            First page of the catalog in the list's order.
        """
        featured = parse_featured_type(filter_type)
        request = FilterRequest(
            sort=featured.sort_mode,
            limit=limit if limit is not None else settings.featured_limit,
        )
        return await self.filter_products(request, timeout)

    # ========================================================================
    # Lookups
    # ========================================================================

    async def get_product(self, product_id: int) -> Product:
        """Get an active product by ID.

        Raises:
            NotFoundError: If absent or soft-disabled.
        """
        product = await self._call("get_product", self.store.get_product(product_id))
        if product is None or not product.active:
            raise NotFoundError("Product", product_id)
        return product

    async def list_categories(self) -> list[Category]:
        """Get all categories ordered by name."""
        return await self._call("list_categories", self.store.list_categories())

    async def get_category(
        self,
        category_id: int,
        page: int = 1,
        limit: int | None = None,
    ) -> tuple[Category, CatalogPage[Product]]:
        """Get a category with a page of its products.

        Raises:
            NotFoundError: If the category does not exist.
        """
        category = await self._call("get_category", self.store.get_category(category_id))
        if category is None:
            raise NotFoundError("Category", category_id)

        products = await self.filter_products(
            FilterRequest(
                category_id=category_id,
                page=page,
                limit=limit if limit is not None else settings.default_page_limit,
            )
        )
        return category, products

    # ========================================================================
    # Updates
    # ========================================================================

    async def _get_any(self, product_id: int) -> Product:
        # Admin operations see soft-disabled products too
        product = await self._call("get_product", self.store.get_product(product_id))
        if product is None:
            raise NotFoundError("Product", product_id)
        return product

    async def _save(self, product: Product, **changes: object) -> Product:
        # replace() re-runs the entity's invariant checks
        updated = replace(product, **changes)
        await self._call("save_product", self.store.save_product(updated))
        return updated

    async def create_product(
        self,
        name: str,
        category_id: int,
        price: Decimal | float | str,
        stock: int = 0,
        description: str = "",
        image_url: str | None = None,
        active: bool = True,
    ) -> Product:
        """Add a product to the catalog.

        Args:
            name: Product name.
            category_id: Existing category the product belongs to.
            price: Unit price; must be positive.
            stock: Initial stock level.
            description: Long description.
            image_url: Primary image URL.
            active: Whether the product is listed right away.

        Returns:
            Created product with its assigned ID.

        Raises:
            ValidationError: If the category does not exist or a value
                is invalid.
        """
        category = await self._call("get_category", self.store.get_category(category_id))
        if category is None:
            raise ValidationError("category_id", "does not exist", category_id)

        amount = parse_decimal("price", price)
        if amount is None or amount <= 0:
            raise ValidationError("price", "must be positive", str(price))
        if not isinstance(active, bool):
            raise ValidationError("active", "must be a boolean", active)

        product = Product(
            id=0,
            name=name,
            category_id=category_id,
            price=amount,
            stock=stock,
            description=description or "",
            image_url=image_url,
            active=active,
        )
        created = await self._call("add_product", self.store.add_product(product))

        logger.info(
            "Product created",
            product_id=created.id,
            category_id=category_id,
            price=str(created.price),
        )
        return created

    async def update_product(
        self,
        product_id: int,
        price: Decimal | float | str | None = None,
        stock: int | None = None,
        active: bool | None = None,
    ) -> Product:
        """Change a product's price, stock and/or visibility.

        Disabled products can be updated and re-enabled here even though
        ``get_product`` no longer returns them.

        Args:
            product_id: Product to update.
            price: New price, if changing.
            stock: New stock level, if changing.
            active: False hides the product from the catalog, True lists it again.

        Returns:
            Updated product.

        Raises:
            NotFoundError: If the product does not exist.
            ValidationError: If a value is invalid.
        """
        product = await self._get_any(product_id)

        changes: dict[str, object] = {}
        if price is not None:
            changes["price"] = parse_decimal("price", price)
        if stock is not None:
            changes["stock"] = stock
        if active is not None:
            if not isinstance(active, bool):
                raise ValidationError("active", "must be a boolean", active)
            changes["active"] = active
        if not changes:
            return product

        updated = await self._save(product, **changes)
        logger.info(
            "Product updated",
            product_id=product_id,
            price=str(updated.price),
            stock=updated.stock,
            active=updated.active,
        )
        return updated

    async def adjust_stock(self, product_id: int, delta: int) -> Product:
        """Add to (or remove from) a product's stock, never below zero.

        Args:
            product_id: Product to adjust.
            delta: Units to add; negative for sales or damage.

        Returns:
            Updated product.
        """
        if isinstance(delta, bool) or not isinstance(delta, int):
            raise ValidationError("delta", "must be an integer", delta)

        product = await self._get_any(product_id)
        updated = await self._save(product, stock=max(0, product.stock + delta))

        logger.info(
            "Stock adjusted",
            product_id=product_id,
            previous_stock=product.stock,
            new_stock=updated.stock,
        )
        return updated

    async def ping(self) -> None:
        """Check the store is reachable."""
        await self._call("ping", self.store.ping())
