"""Shared fixtures for API tests."""

from collections.abc import Callable, Iterator

import pytest
from fastapi.testclient import TestClient

from storefront.api.dependencies import get_catalog_store
from storefront.catalog.repository import CatalogStore, InMemoryCatalogStore
from storefront.main import app


@pytest.fixture
def override_store() -> Iterator[Callable]:
    """Route the API to a given store for the duration of a test."""

    def _override(store: CatalogStore) -> None:
        app.dependency_overrides[get_catalog_store] = lambda: store

    yield _override
    app.dependency_overrides.pop(get_catalog_store, None)


@pytest.fixture
def client(store: InMemoryCatalogStore, override_store: Callable) -> TestClient:
    """Create test client backed by the in-memory example catalog."""
    override_store(store)
    return TestClient(app)
