"""HTTP client for the marketplace backend's product listing.

Fetches all active products and maps the backend's documents onto the
catalog's Product value object.
"""

from typing import Any

import httpx
import structlog

from catalog_console.catalog.product_catalog import (
    ProductCatalog,
    get_product_catalog,
    set_product_catalog,
)
from catalog_console.domain.value_objects import Product

logger = structlog.get_logger()

ACTIVE_PRODUCTS_PATH = "/api/public/products/all"


class ProductCatalogClientError(Exception):
    """Error from the product backend."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        self.message = message
        self.status_code = status_code
        super().__init__(message)


def product_from_backend(data: dict[str, Any]) -> Product:
    """Create a Product from a backend product document.

    Args:
        data: Document with ``_id``, ``productName``, ``serviceType``
            and ``productImage`` keys.

    Returns:
        Product instance.
    """
    return Product(
        id=str(data.get("_id") or data["id"]),
        name=data.get("productName") or data.get("name", ""),
        category=data.get("serviceType") or data.get("category", ""),
        image=data.get("productImage") or data.get("image", ""),
    )


class BackendProductClient:
    """HTTP client for the marketplace backend product API.

    Example usage:
        async with BackendProductClient("http://backend:5000") as client:
            catalog = await client.fetch_catalog()
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        request_id: str | None = None,
    ) -> None:
        """Initialize client.

        Args:
            base_url: Backend base URL.
            timeout: Request timeout in seconds.
            request_id: Optional request ID for correlation.
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.request_id = request_id
        self._client: httpx.AsyncClient | None = None

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create HTTP client."""
        if self._client is None:
            headers = {}
            if self.request_id:
                headers["X-Request-ID"] = self.request_id
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=self.timeout,
                headers=headers,
            )
        return self._client

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> "BackendProductClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()

    async def fetch_products(self) -> list[Product]:
        """Fetch all active products.

        Documents that are not objects or carry no id are skipped.

        Returns:
            Products in backend order.

        Raises:
            ProductCatalogClientError: On transport errors, non-200
                responses, bodies that are not JSON, or payloads that
                are unsuccessful or lack a data.products list.
        """
        try:
            client = await self._get_client()
            response = await client.get(ACTIVE_PRODUCTS_PATH)
        except httpx.RequestError as e:
            logger.error(
                "Product backend request failed",
                base_url=self.base_url,
                error=str(e),
            )
            raise ProductCatalogClientError(f"Request failed: {str(e)}") from e

        if response.status_code != 200:
            raise ProductCatalogClientError(
                f"Failed to list products: {response.text}",
                response.status_code,
            )

        try:
            payload = response.json()
        except ValueError as e:
            raise ProductCatalogClientError(
                "Product backend returned a non-JSON body",
                response.status_code,
            ) from e

        if not isinstance(payload, dict):
            raise ProductCatalogClientError(
                "Malformed product payload: expected an object",
                response.status_code,
            )
        if not payload.get("success", False):
            raise ProductCatalogClientError(
                payload.get("message", "Product backend reported failure"),
                response.status_code,
            )

        data = payload.get("data")
        documents = data.get("products") if isinstance(data, dict) else None
        if not isinstance(documents, list):
            raise ProductCatalogClientError(
                "Malformed product payload: missing data.products list",
                response.status_code,
            )

        products: list[Product] = []
        for document in documents:
            if not isinstance(document, dict) or not (
                document.get("_id") or document.get("id")
            ):
                logger.warning("Skipping product without id", document=document)
                continue
            products.append(product_from_backend(document))
        return products

    async def fetch_catalog(self) -> ProductCatalog:
        """Fetch all active products as a catalog.

        Returns:
            ProductCatalog instance.

        Raises:
            ProductCatalogClientError: See fetch_products.
        """
        return ProductCatalog(await self.fetch_products())


async def load_product_catalog(
    base_url: str | None,
    timeout: float = 10.0,
) -> ProductCatalog:
    """Load the catalog from the backend and install it as the singleton.

    Without a backend URL, or when the backend cannot be reached, the
    current catalog (the sample catalog by default) stays in place.

    Args:
        base_url: Backend base URL, or None.
        timeout: Request timeout in seconds.

    Returns:
        The catalog now in use.
    """
    if not base_url:
        catalog = get_product_catalog()
        logger.info("Using built-in product catalog", product_count=len(catalog))
        return catalog

    try:
        async with BackendProductClient(base_url, timeout=timeout) as client:
            catalog = await client.fetch_catalog()
    except ProductCatalogClientError as e:
        catalog = get_product_catalog()
        logger.warning(
            "Product catalog load failed, keeping current catalog",
            base_url=base_url,
            error=e.message,
            status_code=e.status_code,
            product_count=len(catalog),
        )
        return catalog

    set_product_catalog(catalog)
    logger.info(
        "Product catalog loaded",
        base_url=base_url,
        product_count=len(catalog),
    )
    return catalog
