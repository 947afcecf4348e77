"""Category API endpoints."""

from fastapi import APIRouter

from storefront.api.dependencies import CatalogServiceDep
from storefront.api.schemas import (
    CategoryDetailResponse,
    CategoryListResponse,
    CategorySchema,
    ErrorResponse,
    ProductSchema,
)

router = APIRouter(prefix="/categories", tags=["Categories"])


@router.get(
    "",
    response_model=CategoryListResponse,
    summary="List categories",
)
async def list_categories(service: CatalogServiceDep) -> CategoryListResponse:
    """List all categories ordered by name."""
    categories = await service.list_categories()
    return CategoryListResponse(
        categories=[CategorySchema.from_entity(c) for c in categories],
    )


@router.get(
    "/{category_id}",
    response_model=CategoryDetailResponse,
    responses={
        404: {"model": ErrorResponse},
    },
    summary="Get category with products",
)
async def get_category(
    category_id: int,
    service: CatalogServiceDep,
    page: int = 1,
    limit: int | None = None,
) -> CategoryDetailResponse:
    """Get a category and a page of its products.

    Unlike the product listing, an unknown category here is a 404.
    """
    category, result = await service.get_category(category_id, page=page, limit=limit)

    return CategoryDetailResponse(
        category=CategorySchema.from_entity(category),
        products=[ProductSchema.from_entity(p) for p in result.items],
        page=result.page,
        limit=result.limit,
        total=result.total,
        total_pages=result.total_pages,
        has_more=result.has_more,
    )
