"""Product API endpoints.

Lists the products a category draft can reference.
"""

from typing import Annotated

from fastapi import APIRouter, Query

from catalog_console.api.schemas import ErrorResponse, ProductListResponse, ProductSchema
from catalog_console.catalog.product_catalog import get_product_catalog

router = APIRouter(prefix="/products", tags=["Products"])


@router.get(
    "",
    response_model=ProductListResponse,
    responses={401: {"model": ErrorResponse}},
    summary="List products",
    description="List catalog products available for selection.",
)
async def list_products(
    category: Annotated[str | None, Query(description="Category label filter")] = None,
) -> ProductListResponse:
    """List products in catalog order.

    Args:
        category: Optional category label filter.

    Returns:
        Products available for selection.
    """
    products = get_product_catalog().list_products(category=category)

    return ProductListResponse(
        items=[
            ProductSchema(id=p.id, name=p.name, category=p.category, image=p.image)
            for p in products
        ],
        total=len(products),
    )
