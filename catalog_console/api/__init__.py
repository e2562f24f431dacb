"""API layer module.

Contains FastAPI routers and request/response schemas.
"""

from catalog_console.api.categories import router as categories_router
from catalog_console.api.drafts import router as drafts_router
from catalog_console.api.health import router as health_router
from catalog_console.api.products import router as products_router

__all__ = [
    "categories_router",
    "drafts_router",
    "health_router",
    "products_router",
]
