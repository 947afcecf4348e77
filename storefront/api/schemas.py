"""API schemas for the storefront catalog.

Pydantic models for request/response validation and serialization.
Catalog payloads use camelCase keys; error bodies keep the snake_case
envelope shared by every endpoint.
"""

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from storefront.catalog.entities import Category, Product


# ============================================================================
# Common Schemas
# ============================================================================


class ErrorDetail(BaseModel):
    """Detailed error information."""

    field: str | None = Field(default=None, description="Field that caused the error")
    message: str = Field(..., description="Error message")


class ErrorResponse(BaseModel):
    """Standard error response.

    All API errors follow this format for consistency.
    """

    error_code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error message")
    details: list[ErrorDetail] = Field(
        default_factory=list, description="Additional error details"
    )
    request_id: str | None = Field(
        default=None, description="Request ID for correlation"
    )


class CamelModel(BaseModel):
    """Base for payloads serialized with camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ============================================================================
# Catalog Schemas
# ============================================================================


class CategorySchema(CamelModel):
    """A product category."""

    id: int = Field(..., description="Category identifier")
    name: str = Field(..., description="Category name")
    description: str = Field(default="", description="Category description")

    @classmethod
    def from_entity(cls, category: Category) -> "CategorySchema":
        """Convert a Category entity."""
        return cls(id=category.id, name=category.name, description=category.description)


class ProductSchema(CamelModel):
    """A catalog product."""

    id: int = Field(..., description="Product identifier")
    name: str = Field(..., description="Product name")
    category_id: int = Field(..., description="Owning category")
    price: float = Field(..., ge=0, description="Unit price")
    rating: float = Field(..., ge=0, le=5, description="Average rating")
    order_count: int = Field(..., ge=0, description="Times ordered")
    stock: int = Field(..., ge=0, description="Units available")
    in_stock: bool = Field(..., description="Whether any units are available")
    created_at: datetime = Field(..., description="When the product was created")
    description: str = Field(default="", description="Product description")
    image_url: str | None = Field(default=None, description="Primary image URL")
    active: bool = Field(default=True, description="Whether the product is listed")

    @classmethod
    def from_entity(cls, product: Product) -> "ProductSchema":
        """Convert a Product entity."""
        return cls(
            id=product.id,
            name=product.name,
            category_id=product.category_id,
            price=float(product.price),
            rating=float(product.rating),
            order_count=product.order_count,
            stock=product.stock,
            in_stock=product.in_stock,
            created_at=product.created_at,
            description=product.description,
            image_url=product.image_url,
            active=product.active,
        )


class PaginatedResponse(CamelModel):
    """Base paginated response."""

    page: int = Field(..., description="Current page number")
    limit: int = Field(..., description="Items per page")
    total: int = Field(..., description="Total number of matching items")
    total_pages: int = Field(..., description="Number of pages")
    has_more: bool = Field(..., description="Whether there are more pages")


class ProductListResponse(PaginatedResponse):
    """One page of a catalog listing."""

    products: list[ProductSchema] = Field(..., description="Products on this page")


class FeaturedProductsResponse(CamelModel):
    """A featured product list."""

    filter_type: str = Field(..., description="Featured list that was requested")
    products: list[ProductSchema] = Field(..., description="Featured products")


class CategoryListResponse(CamelModel):
    """All categories."""

    categories: list[CategorySchema] = Field(..., description="Categories by name")


class CategoryDetailResponse(PaginatedResponse):
    """A category with a page of its products."""

    category: CategorySchema = Field(..., description="The category")
    products: list[ProductSchema] = Field(..., description="Products in the category")


class ProductCreateRequest(CamelModel):
    """New catalog product."""

    name: str = Field(..., min_length=1, description="Product name")
    category_id: int = Field(..., description="Existing category")
    price: Decimal = Field(..., description="Unit price")
    stock: int = Field(default=0, description="Initial stock level")
    description: str = Field(default="", description="Product description")
    image_url: str | None = Field(default=None, description="Primary image URL")
    active: bool = Field(default=True, description="Whether to list the product")


class ProductUpdateRequest(CamelModel):
    """Price, stock and/or visibility change for a product."""

    price: Decimal | None = Field(default=None, description="New unit price")
    stock: int | None = Field(default=None, description="New stock level")
    active: bool | None = Field(default=None, description="Enable or disable the product")
