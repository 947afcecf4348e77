"""Product API endpoints.

Provides the catalog listing, featured lists, product lookup, product
creation and price/stock/visibility updates.
"""

from decimal import Decimal
from typing import Annotated

from fastapi import APIRouter, Query, status

from storefront.api.dependencies import CatalogServiceDep
from storefront.api.schemas import (
    ErrorResponse,
    FeaturedProductsResponse,
    ProductCreateRequest,
    ProductListResponse,
    ProductSchema,
    ProductUpdateRequest,
)
from storefront.catalog.query import FilterRequest
from storefront.infrastructure.config import settings

router = APIRouter(prefix="/products", tags=["Products"])


# ============================================================================
# Endpoints
# ============================================================================


@router.get(
    "",
    response_model=ProductListResponse,
    status_code=status.HTTP_200_OK,
    responses={
        400: {"model": ErrorResponse},
        503: {"model": ErrorResponse},
    },
    summary="List products",
    description="Filter, sort and paginate the product catalog.",
)
async def list_products(
    service: CatalogServiceDep,
    category: Annotated[int | None, Query(description="Category id")] = None,
    min_price: Annotated[Decimal | None, Query(alias="minPrice")] = None,
    max_price: Annotated[Decimal | None, Query(alias="maxPrice")] = None,
    min_rating: Annotated[Decimal | None, Query(alias="minRating")] = None,
    search: Annotated[str | None, Query(description="Name contains (case-insensitive)")] = None,
    in_stock: Annotated[bool | None, Query(alias="inStock")] = None,
    sort: Annotated[str | None, Query(description="Sort mode")] = None,
    page: int = 1,
    limit: int | None = None,
) -> ProductListResponse:
    """List products matching every provided filter.

    An unknown category yields an empty page rather than an error.

    Returns:
        One page of products with pagination metadata.
    """
    request = FilterRequest(
        category_id=category,
        price_min=min_price,
        price_max=max_price,
        rating_min=min_rating,
        search=search,
        in_stock=in_stock,
        sort=sort,
        page=page,
        limit=limit if limit is not None else settings.default_page_limit,
    )
    result = await service.filter_products(request)

    return ProductListResponse(
        products=[ProductSchema.from_entity(p) for p in result.items],
        page=result.page,
        limit=result.limit,
        total=result.total,
        total_pages=result.total_pages,
        has_more=result.has_more,
    )


@router.post(
    "",
    response_model=ProductSchema,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"model": ErrorResponse},
        503: {"model": ErrorResponse},
    },
    summary="Create product",
)
async def create_product(
    body: ProductCreateRequest,
    service: CatalogServiceDep,
) -> ProductSchema:
    """Add a product to an existing category."""
    product = await service.create_product(
        name=body.name,
        category_id=body.category_id,
        price=body.price,
        stock=body.stock,
        description=body.description,
        image_url=body.image_url,
        active=body.active,
    )
    return ProductSchema.from_entity(product)

@router.get(
    "/featured",
    response_model=FeaturedProductsResponse,
    responses={
        400: {"model": ErrorResponse},
        503: {"model": ErrorResponse},
    },
    summary="Featured products",
    description="Top products of a named list: most-ordered, top-rated or newest.",
)
async def featured_products(
    service: CatalogServiceDep,
    filter_type: Annotated[str | None, Query(alias="filterType")] = None,
    limit: int | None = None,
) -> FeaturedProductsResponse:
    """Get a featured product list."""
    result = await service.featured_products(filter_type, limit=limit)

    return FeaturedProductsResponse(
        filter_type=filter_type,
        products=[ProductSchema.from_entity(p) for p in result.items],
    )


@router.get(
    "/{product_id}",
    response_model=ProductSchema,
    responses={
        404: {"model": ErrorResponse},
        503: {"model": ErrorResponse},
    },
    summary="Get product details",
)
async def get_product(product_id: int, service: CatalogServiceDep) -> ProductSchema:
    """Get a product by ID.

    Raises:
        NotFoundError: If the product does not exist or is disabled.
    """
    product = await service.get_product(product_id)
    return ProductSchema.from_entity(product)


@router.patch(
    "/{product_id}",
    response_model=ProductSchema,
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        503: {"model": ErrorResponse},
    },
    summary="Update price, stock or visibility",
)
async def update_product(
    product_id: int,
    body: ProductUpdateRequest,
    service: CatalogServiceDep,
) -> ProductSchema:
    """Change a product's price, stock level or active flag.

    Disabled products can be re-enabled here.
    """
    product = await service.update_product(
        product_id,
        price=body.price,
        stock=body.stock,
        active=body.active,
    )
    return ProductSchema.from_entity(product)
