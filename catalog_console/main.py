"""Catalog Console API main application module.

This module initializes the FastAPI application and configures
core middleware, routers, and startup/shutdown events.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

import structlog
from fastapi import FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from catalog_console.api import (
    categories_router,
    drafts_router,
    health_router,
    products_router,
)
from catalog_console.api.middleware import setup_middleware
from catalog_console.catalog.backend_client import load_product_catalog
from catalog_console.domain.identifiers import create_id_generator, set_id_generator
from catalog_console.infrastructure.config import settings
from catalog_console.infrastructure.logging import configure_logging

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Handle application startup and shutdown events.

    Args:
        app: The FastAPI application instance.

    Yields:
        None after startup, cleanup happens after yield.
    """
    configure_logging()
    logger.info(
        "Starting Catalog Console API",
        version=settings.api_version,
        debug=settings.debug,
        id_strategy=settings.id_strategy,
    )

    set_id_generator(create_id_generator(settings.id_strategy))
    await load_product_catalog(
        settings.product_backend_url,
        timeout=settings.product_backend_timeout,
    )

    yield

    logger.info("Shutting down Catalog Console API")


app = FastAPI(
    title="Catalog Console API",
    description="Category authoring backend for the marketplace admin console",
    version=settings.api_version,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

# CORS middleware (must be added before custom middleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

setup_middleware(app)

app.include_router(health_router, tags=["Health"])
app.include_router(products_router)
app.include_router(drafts_router)
app.include_router(categories_router)


# ============================================================================
# Custom Exception Handlers
# ============================================================================


@app.exception_handler(HTTPException)
async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
    """Handle HTTP exceptions with consistent format."""
    detail = exc.detail
    if isinstance(detail, dict):
        error_code = detail.get("error_code", "ERROR")
        message = detail.get("message", str(detail))
        details = detail.get("details", [])
    else:
        error_code = "ERROR"
        message = str(detail)
        details = []

    return JSONResponse(
        status_code=exc.status_code,
        content={
            "error_code": error_code,
            "message": message,
            "details": details,
            "request_id": getattr(request.state, "request_id", None),
        },
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(Exception)
async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle uncaught exceptions with consistent format."""
    logger.exception(
        "Unhandled exception in handler",
        path=request.url.path,
        method=request.method,
        error=str(exc),
    )

    return JSONResponse(
        status_code=500,
        content={
            "error_code": "INTERNAL_ERROR",
            "message": "An internal error occurred",
            "details": [],
            "request_id": getattr(request.state, "request_id", None),
        },
    )
