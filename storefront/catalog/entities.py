"""Catalog entities.

Plain domain objects returned by every catalog store, independent of
how the store persists them.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any

from storefront.domain.base import Entity
from storefront.domain.exceptions import ValidationError

MAX_RATING = Decimal("5")

# Column precision of the stored price and rating
MAX_PRICE = Decimal("99999999.99")
PRICE_STEP = Decimal("0.01")
RATING_STEP = Decimal("0.1")


def utc_now() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


def parse_decimal(name: str, value: Any) -> Decimal | None:
    """Read a finite decimal, or None when the value is absent.

    Raises:
        ValidationError: If the value is not a finite number.
    """
    if value is None:
        return None
    try:
        result = Decimal(str(value))
    except InvalidOperation:
        raise ValidationError(name, "must be a number", value) from None
    if not result.is_finite():
        raise ValidationError(name, "must be a finite number", str(value))
    return result


def _require_int(name: str, value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(name, "must be an integer", value)
    return value


@dataclass(eq=False)
class Category(Entity[int]):
    """Grouping key for products.

    Attributes:
        id: Category identifier.
        name: Display name.
        description: Optional blurb.
    """

    name: str = ""
    description: str = ""

    def __post_init__(self) -> None:
        """Validate category fields."""
        if not self.name or not self.name.strip():
            raise ValidationError("name", "is required")
        self.name = self.name.strip()


@dataclass(eq=False)
class Product(Entity[int]):
    """Product entity in the catalog.

    Products are never hard-deleted; clearing ``active`` hides them
    from every catalog query.

    Attributes:
        id: Product identifier.
        name: Product name (searchable).
        category_id: Owning category.
        price: Unit price in major currency units.
        rating: Average rating, 0-5.
        order_count: How many times the product has been ordered.
        created_at: Creation timestamp.
        stock: Units available.
        description: Long description.
        image_url: Primary image URL.
        active: False once the product is soft-disabled.
    """

    name: str = ""
    category_id: int = 0
    price: Decimal = Decimal("0")
    rating: Decimal = Decimal("0")
    order_count: int = 0
    created_at: datetime = field(default_factory=utc_now)
    stock: int = 0
    description: str = ""
    image_url: str | None = None
    active: bool = True

    def __post_init__(self) -> None:
        """Normalize numeric fields and enforce invariants."""
        if not self.name or not self.name.strip():
            raise ValidationError("name", "is required")
        self.name = self.name.strip()
        for name in ("price", "rating"):
            value = parse_decimal(name, getattr(self, name))
            if value is None:
                raise ValidationError(name, "is required")
            setattr(self, name, value)
        _require_int("stock", self.stock)
        _require_int("order_count", self.order_count)
        if self.created_at.tzinfo is None:
            self.created_at = self.created_at.replace(tzinfo=timezone.utc)
        self.validate()

    def validate(self) -> None:
        """Check invariants and round to stored precision.

        Price is kept to cents and rating to one decimal place.

        Raises:
            ValidationError: If price is negative or above MAX_PRICE,
                stock or order_count is negative, or rating is outside 0-5.
        """
        if self.price < 0:
            raise ValidationError("price", "must not be negative", str(self.price))
        if self.price > MAX_PRICE:
            raise ValidationError("price", f"must not exceed {MAX_PRICE}", str(self.price))
        if self.stock < 0:
            raise ValidationError("stock", "must not be negative", self.stock)
        if self.order_count < 0:
            raise ValidationError("order_count", "must not be negative", self.order_count)
        if not 0 <= self.rating <= MAX_RATING:
            raise ValidationError("rating", "must be between 0 and 5", str(self.rating))
        # Both bounds sit on the rounding grid, so rounding cannot cross them
        self.price = self.price.quantize(PRICE_STEP, rounding=ROUND_HALF_UP)
        self.rating = self.rating.quantize(RATING_STEP, rounding=ROUND_HALF_UP)

    @property
    def in_stock(self) -> bool:
        """Whether at least one unit is available."""
        return self.stock > 0
