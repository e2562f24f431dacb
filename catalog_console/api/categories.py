"""Category API endpoints.

Read access to categories created by finalizing drafts.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, status

from catalog_console.api.drafts import get_service, record_to_response
from catalog_console.api.schemas import (
    CategoryListResponse,
    CategoryResponse,
    ErrorResponse,
)
from catalog_console.application.category_service import CategoryDraftService

router = APIRouter(prefix="/categories", tags=["Categories"])


# ============================================================================
# Endpoints
# ============================================================================


@router.get(
    "",
    response_model=CategoryListResponse,
    responses={401: {"model": ErrorResponse}},
    summary="List categories",
    description="List finalized categories in creation order.",
)
async def list_categories(
    service: Annotated[CategoryDraftService, Depends(get_service)],
    page: Annotated[int, Query(ge=1)] = 1,
    page_size: Annotated[int, Query(ge=1, le=100)] = 20,
) -> CategoryListResponse:
    """List finalized categories.

    Args:
        service: Category draft service.
        page: Page number.
        page_size: Items per page.

    Returns:
        Paginated list of categories.
    """
    records, total = service.list_categories(page=page, page_size=page_size)

    return CategoryListResponse(
        items=[record_to_response(r) for r in records],
        total=total,
        page=page,
        page_size=page_size,
        has_more=(page * page_size) < total,
    )


@router.get(
    "/{category_id}",
    response_model=CategoryResponse,
    responses={
        401: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
    },
    summary="Get category",
)
async def get_category(
    category_id: str,
    service: Annotated[CategoryDraftService, Depends(get_service)],
) -> CategoryResponse:
    """Get a finalized category.

    Raises:
        HTTPException: If the category does not exist.
    """
    record = service.get_category(category_id)
    if record is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail={
                "error_code": "CATEGORY_NOT_FOUND",
                "message": f"Category not found: {category_id}",
            },
        )
    return record_to_response(record)
