"""Product Catalog.

Read-only products that a category draft may reference, either the
built-in sample list or the marketplace backend's active products.
"""

from catalog_console.catalog.backend_client import (
    BackendProductClient,
    ProductCatalogClientError,
    load_product_catalog,
)
from catalog_console.catalog.product_catalog import (
    SAMPLE_PRODUCTS,
    ProductCatalog,
    get_product_catalog,
    set_product_catalog,
)

__all__ = [
    # Catalog
    "ProductCatalog",
    "SAMPLE_PRODUCTS",
    "get_product_catalog",
    "set_product_catalog",
    # Backend
    "BackendProductClient",
    "ProductCatalogClientError",
    "load_product_catalog",
]
