"""Shared test fixtures."""

import pytest
from fastapi.testclient import TestClient

from product_catalog.catalog import CatalogService, ProductStore
from product_catalog.catalog.seed import seed_records


@pytest.fixture
def store() -> ProductStore:
    """Store loaded with the built-in catalog (19 products)."""
    return ProductStore(seed_records())


@pytest.fixture
def empty_store() -> ProductStore:
    """Store without any record."""
    return ProductStore()


@pytest.fixture
def service(store: ProductStore) -> CatalogService:
    """Catalog service over the seeded store."""
    return CatalogService(store)


@pytest.fixture
def client():
    """Test client; each one runs the lifespan and gets a fresh store."""
    from product_catalog.main import app

    with TestClient(app) as client:
        yield client
