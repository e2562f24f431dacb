"""API middleware for the Catalog Console.

Provides:
- Request ID correlation
- Console API key authentication
- Error handling
"""

import time
from typing import Callable
from uuid import uuid4

import structlog
from fastapi import FastAPI, Request, Response, status
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from catalog_console.infrastructure.config import settings

logger = structlog.get_logger()

# Paths that don't require authentication
PUBLIC_PATHS = {
    "/health",
    "/ready",
    "/docs",
    "/redoc",
    "/openapi.json",
}


def unauthorized(error_code: str, message: str) -> JSONResponse:
    """Build a 401 response in the standard error format."""
    return JSONResponse(
        status_code=status.HTTP_401_UNAUTHORIZED,
        content={"error_code": error_code, "message": message, "details": []},
        headers={"WWW-Authenticate": "Bearer"},
    )


# ============================================================================
# Request ID Middleware
# ============================================================================


class RequestIdMiddleware(BaseHTTPMiddleware):
    """Attach a correlation ID to the request, its logs and its response."""

    HEADER_NAME = "X-Request-ID"

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request_id = request.headers.get(self.HEADER_NAME) or str(uuid4())
        request.state.request_id = request_id
        structlog.contextvars.bind_contextvars(request_id=request_id)

        start_time = time.perf_counter()
        status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
        try:
            response = await call_next(request)
            status_code = response.status_code
        finally:
            logger.info(
                "Request completed",
                method=request.method,
                path=request.url.path,
                status_code=status_code,
                duration_ms=round((time.perf_counter() - start_time) * 1000, 2),
            )
            structlog.contextvars.unbind_contextvars("request_id")

        response.headers[self.HEADER_NAME] = request_id
        return response


# ============================================================================
# API Key Authentication Middleware
# ============================================================================


class ApiKeyMiddleware(BaseHTTPMiddleware):
    """Require "Authorization: Bearer <console_api_key>" outside PUBLIC_PATHS."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        """Validate the console API key for protected endpoints.

        Args:
            request: Incoming request.
            call_next: Next middleware/handler.

        Returns:
            Response or 401 error.
        """
        path = request.url.path.rstrip("/")
        if path in PUBLIC_PATHS or path.startswith(("/docs", "/redoc")):
            return await call_next(request)

        auth_header = request.headers.get("Authorization")
        if not auth_header:
            logger.warning("Missing authorization header", path=path, method=request.method)
            return unauthorized("UNAUTHORIZED", "Missing Authorization header")

        scheme, _, api_key = auth_header.partition(" ")
        if scheme.lower() != "bearer" or not api_key:
            logger.warning("Invalid authorization format", path=path, method=request.method)
            return unauthorized(
                "UNAUTHORIZED",
                "Invalid Authorization header format. Use 'Bearer <api_key>'",
            )

        if api_key != settings.console_api_key:
            logger.warning("Invalid API key", path=path, method=request.method)
            return unauthorized("INVALID_API_KEY", "Invalid API key")

        request.state.authenticated = True
        return await call_next(request)


# ============================================================================
# Error Handling Middleware
# ============================================================================


class ErrorHandlerMiddleware(BaseHTTPMiddleware):
    """Turn exceptions that escape the handlers into 500 responses."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        try:
            return await call_next(request)
        except Exception as e:
            logger.exception(
                "Unhandled exception",
                path=request.url.path,
                method=request.method,
                error=str(e),
            )
            return JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content={
                    "error_code": "INTERNAL_ERROR",
                    "message": "An internal error occurred",
                    "details": [],
                    "request_id": getattr(request.state, "request_id", None),
                },
            )


def setup_middleware(app: FastAPI) -> None:
    """Configure all middleware for the application.

    Middleware is added in reverse order (last added = first executed).

    Args:
        app: FastAPI application instance.
    """
    app.add_middleware(ErrorHandlerMiddleware)
    app.add_middleware(ApiKeyMiddleware)
    app.add_middleware(RequestIdMiddleware)
