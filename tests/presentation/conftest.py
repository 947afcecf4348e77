"""Shared fixtures for presentation tests."""

from collections.abc import AsyncIterator

import httpx
import pytest_asyncio

from storefront.api.dependencies import get_catalog_store
from storefront.catalog.repository import InMemoryCatalogStore
from storefront.main import app
from storefront.presentation.client import StorefrontClient


@pytest_asyncio.fixture
async def api(store: InMemoryCatalogStore) -> AsyncIterator[StorefrontClient]:
    """Client talking to the catalog app in-process."""
    app.dependency_overrides[get_catalog_store] = lambda: store
    client = StorefrontClient(
        base_url="http://storefront.test",
        transport=httpx.ASGITransport(app=app),
    )
    yield client
    await client.close()
    app.dependency_overrides.pop(get_catalog_store, None)
