"""Catalog query contract.

Defines what a product listing request may ask for, how results are
ordered, and how a page of results is described. Stores translate these
into their own query language; the ordering rules live here only.
"""

from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from operator import attrgetter
from typing import Any, Generic, TypeVar

from storefront.catalog.entities import MAX_RATING, Product, parse_decimal
from storefront.domain.exceptions import ValidationError

T = TypeVar("T")

# Largest OFFSET a signed 64-bit SQL integer can carry
MAX_OFFSET = 2**63 - 1


# ============================================================================
# Sort Policy
# ============================================================================


class SortMode(str, Enum):
    """Supported listing orders."""

    DEFAULT = "default"
    MOST_ORDERED = "most-ordered"
    TOP_RATED = "top-rated"
    NEWEST = "newest"
    PRICE_ASC = "price-asc"
    PRICE_DESC = "price-desc"


@dataclass(frozen=True)
class SortKey:
    """One ordering column.

    Attributes:
        field: Product attribute to order by.
        descending: Whether larger values come first.
    """

    field: str
    descending: bool = False


# Every mode ends with a unique key so that ordering is total and
# repeated queries against an unchanged store page identically.
SORT_POLICY: dict[SortMode, tuple[SortKey, ...]] = {
    SortMode.MOST_ORDERED: (
        SortKey("order_count", descending=True),
        SortKey("created_at", descending=True),
        SortKey("id"),
    ),
    SortMode.TOP_RATED: (
        SortKey("rating", descending=True),
        SortKey("order_count", descending=True),
        SortKey("id"),
    ),
    SortMode.NEWEST: (
        SortKey("created_at", descending=True),
        SortKey("id"),
    ),
    SortMode.PRICE_ASC: (
        SortKey("price"),
        SortKey("id"),
    ),
    SortMode.PRICE_DESC: (
        SortKey("price", descending=True),
        SortKey("id"),
    ),
}
SORT_POLICY[SortMode.DEFAULT] = SORT_POLICY[SortMode.NEWEST]


def parse_sort_mode(value: SortMode | str | None) -> SortMode:
    """Resolve a sort token.

    Args:
        value: Sort mode or its token; None means default.

    Returns:
        The matching SortMode.

    Raises:
        ValidationError: If the token is not a known mode.
    """
    if value is None or value == "":
        return SortMode.DEFAULT
    try:
        return SortMode(value)
    except ValueError:
        raise ValidationError(
            "sort",
            f"must be one of {[m.value for m in SortMode]}",
            value,
        ) from None


def order_products(products: list[Product], sort: SortMode) -> list[Product]:
    """Order products according to the sort policy.

    Applies the keys least significant first; list.sort is stable, so
    each pass keeps the order established by the previous ones.

    Args:
        products: Products to order.
        sort: Sort mode.

    Returns:
        New, ordered list.
    """
    ordered = list(products)
    for key in reversed(SORT_POLICY[sort]):
        ordered.sort(key=attrgetter(key.field), reverse=key.descending)
    return ordered


# ============================================================================
# Featured Lists
# ============================================================================


class FeaturedType(str, Enum):
    """Named featured lists shown on the storefront."""

    MOST_ORDERED = "most-ordered"
    TOP_RATED = "top-rated"
    NEWEST = "newest"

    @property
    def sort_mode(self) -> SortMode:
        """Sort mode that produces this list."""
        return SortMode(self.value)


def parse_featured_type(value: FeaturedType | str | None) -> FeaturedType:
    """Resolve a featured list token.

    Raises:
        ValidationError: If the token is missing or unknown.
    """
    try:
        return FeaturedType(value)
    except ValueError:
        raise ValidationError(
            "filter_type",
            f"must be one of {[t.value for t in FeaturedType]}",
            value,
        ) from None


# ============================================================================
# Filter Request
# ============================================================================


def validate_limit(limit: Any, max_limit: int | None = None) -> int:
    """Check a page size.

    Args:
        limit: Requested page size.
        max_limit: Ceiling; larger requests are rejected, not clamped.

    Returns:
        The limit.

    Raises:
        ValidationError: If limit is not a positive integer within the ceiling.
    """
    if isinstance(limit, bool) or not isinstance(limit, int):
        raise ValidationError("limit", "must be an integer", limit)
    if limit <= 0:
        raise ValidationError("limit", "must be a positive integer", limit)
    if max_limit is not None and limit > max_limit:
        raise ValidationError("limit", f"must not exceed {max_limit}", limit)
    return limit


@dataclass
class FilterRequest:
    """Constraints narrowing a catalog listing.

    All provided constraints must hold for a product to be listed.

    Attributes:
        category_id: Only products in this category.
        price_min: Inclusive lower price bound.
        price_max: Inclusive upper price bound.
        rating_min: Minimum average rating.
        search: Case-insensitive substring of the product name.
        in_stock: When True, only products with stock left.
        sort: Listing order.
        page: Page number (1-indexed).
        limit: Items per page.
    """

    category_id: int | None = None
    price_min: Decimal | None = None
    price_max: Decimal | None = None
    rating_min: Decimal | None = None
    search: str | None = None
    in_stock: bool | None = None
    sort: SortMode = SortMode.DEFAULT
    page: int = 1
    limit: int = 12

    def __post_init__(self) -> None:
        """Normalize and validate the request."""
        self.sort = parse_sort_mode(self.sort)
        validate_limit(self.limit)
        if isinstance(self.page, bool) or not isinstance(self.page, int) or self.page < 1:
            raise ValidationError("page", "must be a positive integer", self.page)
        if self.offset > MAX_OFFSET:
            raise ValidationError("page", "is too large for the page size", str(self.page))

        self.price_min = parse_decimal("price_min", self.price_min)
        self.price_max = parse_decimal("price_max", self.price_max)
        self.rating_min = parse_decimal("rating_min", self.rating_min)

        if self.price_min is not None and self.price_min < 0:
            raise ValidationError("price_min", "must not be negative", str(self.price_min))
        if self.price_max is not None and self.price_max < 0:
            raise ValidationError("price_max", "must not be negative", str(self.price_max))
        if (
            self.price_min is not None
            and self.price_max is not None
            and self.price_min > self.price_max
        ):
            raise ValidationError(
                "price_max", "must not be below price_min", str(self.price_max)
            )
        if self.rating_min is not None and not 0 <= self.rating_min <= MAX_RATING:
            raise ValidationError(
                "rating_min", "must be between 0 and 5", str(self.rating_min)
            )

        if self.search is not None:
            self.search = self.search.strip() or None

    @property
    def offset(self) -> int:
        """Index of the first item on the requested page."""
        return (self.page - 1) * self.limit

    @property
    def sort_keys(self) -> tuple[SortKey, ...]:
        """Ordering columns for the requested sort."""
        return SORT_POLICY[self.sort]

    def matches(self, product: Product) -> bool:
        """Check whether a product satisfies every constraint.

        Inactive products never match.

        Args:
            product: Product to test.

        Returns:
            True if the product belongs in the listing.
        """
        if not product.active:
            return False
        if self.category_id is not None and product.category_id != self.category_id:
            return False
        if self.price_min is not None and product.price < self.price_min:
            return False
        if self.price_max is not None and product.price > self.price_max:
            return False
        if self.rating_min is not None and product.rating < self.rating_min:
            return False
        if self.in_stock and product.stock <= 0:
            return False
        if self.search and self.search.lower() not in product.name.lower():
            return False
        return True


# ============================================================================
# Results
# ============================================================================


@dataclass
class CatalogPage(Generic[T]):
    """One page of a catalog listing.

    Attributes:
        items: Items on this page.
        total: Number of items matching the request across all pages.
        page: Current page.
        limit: Items per page.
    """

    items: list[T] = field(default_factory=list)
    total: int = 0
    page: int = 1
    limit: int = 12

    @property
    def total_pages(self) -> int:
        """Calculate total pages."""
        return (self.total + self.limit - 1) // self.limit

    @property
    def has_more(self) -> bool:
        """Check if items remain beyond this page."""
        return self.page * self.limit < self.total
