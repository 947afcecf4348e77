"""SQLAlchemy models for product catalog.

Defines Category and Product tables for persistent storage.
"""

from datetime import datetime, timezone
from decimal import Decimal

from sqlalchemy import Boolean, DateTime, ForeignKey, Index, Integer, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from storefront.catalog.entities import Category, Product
from storefront.infrastructure.database import Base


class CategoryRecord(Base):
    """Stored category row."""

    __tablename__ = "categories"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")

    def __repr__(self) -> str:
        """String representation."""
        return f"<CategoryRecord(id={self.id}, name={self.name})>"

    def to_entity(self) -> Category:
        """Convert to a domain Category."""
        return Category(id=self.id, name=self.name, description=self.description or "")

    @classmethod
    def from_entity(cls, category: Category) -> "CategoryRecord":
        """Build a row from a domain Category."""
        return cls(id=category.id, name=category.name, description=category.description)


class ProductRecord(Base):
    """Stored product row.

    Attributes:
        id: Product identifier.
        name: Product name.
        category_id: Owning category (not enforced as a foreign key on
            reads; unknown categories simply match nothing).
        price: Unit price, two decimal places.
        rating: Average rating (0.0-5.0).
        order_count: Times ordered.
        stock: Units available.
        active: False once soft-disabled.
        created_at: Creation timestamp.
        updated_at: Last update timestamp.
    """

    __tablename__ = "products"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")
    category_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("categories.id"),
        nullable=False,
        index=True,
    )
    price: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    rating: Mapped[Decimal] = mapped_column(Numeric(2, 1), nullable=False, default=Decimal("0.0"))
    order_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    stock: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    image_url: Mapped[str | None] = mapped_column(String(1000), nullable=True)
    active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True, index=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )

    __table_args__ = (
        Index("ix_products_order_count", "order_count"),
        Index("ix_products_rating", "rating"),
        Index("ix_products_created_at", "created_at"),
        Index("ix_products_price", "price"),
    )

    def __repr__(self) -> str:
        """String representation."""
        return f"<ProductRecord(id={self.id}, name={self.name[:30]})>"

    def to_entity(self) -> Product:
        """Convert to a domain Product.

        Returns:
            Product entity.
        """
        return Product(
            id=self.id,
            name=self.name,
            category_id=self.category_id,
            price=self.price,
            rating=self.rating,
            order_count=self.order_count,
            created_at=self.created_at,
            stock=self.stock,
            description=self.description or "",
            image_url=self.image_url,
            active=self.active,
        )

    @classmethod
    def from_entity(cls, product: Product) -> "ProductRecord":
        """Build a row from a domain Product.

        Args:
            product: Product entity.

        Returns:
            Unsaved record.
        """
        return cls(
            id=product.id,
            name=product.name,
            description=product.description,
            category_id=product.category_id,
            price=product.price,
            rating=product.rating,
            order_count=product.order_count,
            stock=product.stock,
            image_url=product.image_url,
            active=product.active,
            created_at=product.created_at,
        )

    def apply(self, product: Product) -> None:
        """Copy mutable fields from a domain Product."""
        self.name = product.name
        self.description = product.description
        self.category_id = product.category_id
        self.price = product.price
        self.rating = product.rating
        self.order_count = product.order_count
        self.stock = product.stock
        self.image_url = product.image_url
        self.active = product.active
