"""FastAPI dependencies for the catalog routers.

The store is resolved per request so tests can swap in an in-memory
store through ``app.dependency_overrides[get_catalog_store]``.
"""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.catalog.repository import CatalogStore, SqlCatalogStore
from storefront.catalog.service import CatalogService
from storefront.infrastructure.database import get_session


def get_catalog_store(
    session: Annotated[AsyncSession, Depends(get_session)],
) -> CatalogStore:
    """Get the SQL-backed store bound to this request's session."""
    return SqlCatalogStore(session)


def get_catalog_service(
    store: Annotated[CatalogStore, Depends(get_catalog_store)],
) -> CatalogService:
    """Get catalog service for this request."""
    return CatalogService(store)


CatalogServiceDep = Annotated[CatalogService, Depends(get_catalog_service)]
