"""Shared fixtures."""

import pytest

import catalog_console.application.category_service as category_service
import catalog_console.catalog.product_catalog as product_catalog
import catalog_console.domain.identifiers as identifiers
from catalog_console.catalog import ProductCatalog
from catalog_console.domain import CatalogDraft, SequentialIdGenerator


@pytest.fixture(autouse=True)
def reset_singletons():
    """Reset process-wide repositories, catalog and id generator."""
    category_service._session_repo = None
    category_service._category_repo = None
    product_catalog._product_catalog = None
    identifiers._id_generator = None
    yield
    category_service._session_repo = None
    category_service._category_repo = None
    product_catalog._product_catalog = None
    identifiers._id_generator = None


@pytest.fixture
def ids() -> SequentialIdGenerator:
    """Deterministic id generator (tab_1, service_1, C1, ...)."""
    return SequentialIdGenerator()


@pytest.fixture
def catalog() -> ProductCatalog:
    """The built-in sample catalog (P001, P002, P003)."""
    return ProductCatalog.sample()


@pytest.fixture
def empty_draft() -> CatalogDraft:
    """A freshly started draft."""
    return CatalogDraft.empty()
