"""Draft API endpoints.

One editing session per category being composed. Edits that name a
tab or item the draft does not contain succeed without changing
anything (``changed`` is false in the response).
"""

from typing import Annotated, NoReturn

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status

from catalog_console.api.schemas import (
    CategoryResponse,
    DraftResponse,
    ErrorResponse,
    NamePreviewResponse,
    RenameTabRequest,
    ServiceItemSchema,
    ServiceTabSchema,
    SetNameRequest,
    UpdateItemRequest,
)
from catalog_console.application.category_service import (
    CategoryDraftService,
    DraftResult,
    DraftSession,
    get_category_draft_service,
)
from catalog_console.domain.value_objects import CategoryRecord, ServiceTab

router = APIRouter(prefix="/drafts", tags=["Drafts"])

ERROR_STATUS = {
    "DRAFT_SESSION_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "PRODUCT_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "DRAFT_VALIDATION_FAILED": status.HTTP_422_UNPROCESSABLE_ENTITY,
}

ERROR_RESPONSES = {
    401: {"model": ErrorResponse},
    404: {"model": ErrorResponse},
}


# ============================================================================
# Dependencies
# ============================================================================


def get_service(request: Request) -> CategoryDraftService:
    """Get category draft service with request ID."""
    request_id = getattr(request.state, "request_id", None)
    return get_category_draft_service(request_id=request_id)


# ============================================================================
# Converters
# ============================================================================


def tab_to_schema(tab: ServiceTab) -> ServiceTabSchema:
    """Convert ServiceTab value to schema."""
    return ServiceTabSchema(
        id=tab.id,
        name=tab.name,
        services=[
            ServiceItemSchema(
                id=item.id,
                name=item.name,
                description=item.description,
                price=item.price,
                discount_price=item.discount_price,
            )
            for item in tab.services
        ],
    )


def record_to_response(record: CategoryRecord) -> CategoryResponse:
    """Convert CategoryRecord to response schema."""
    return CategoryResponse(
        id=record.id,
        name=record.name,
        product_count=record.product_count,
        image=record.image,
        selected_products=list(record.selected_products),
        service_tabs=[tab_to_schema(tab) for tab in record.service_tabs],
        service_count=record.service_count,
    )


def draft_to_response(session: DraftSession, result: DraftResult) -> DraftResponse:
    """Convert a session and its DraftResult to response schema."""
    draft = session.draft
    return DraftResponse(
        session_id=session.id,
        name=draft.name,
        selected_products=list(draft.selected_products),
        service_tabs=[tab_to_schema(tab) for tab in draft.service_tabs],
        dangling_products=result.dangling_products,
        changed=result.changed,
        created_at=session.created_at,
        updated_at=session.updated_at,
    )


def raise_for_error(
    error_code: str | None,
    error: str | None,
    default_code: str,
    details: list[dict[str, str | None]] | None = None,
) -> NoReturn:
    """Raise the HTTP error matching a failed service result."""
    code = error_code or default_code
    raise HTTPException(
        status_code=ERROR_STATUS.get(code, status.HTTP_400_BAD_REQUEST),
        detail={
            "error_code": code,
            "message": error or "Draft operation failed",
            "details": details or [],
        },
    )


def respond(result: DraftResult) -> DraftResponse:
    """Return the draft, or raise the matching HTTP error."""
    if not result.success or result.session is None:
        raise_for_error(result.error_code, result.error, "DRAFT_OPERATION_FAILED")
    return draft_to_response(result.session, result)


ServiceDep = Annotated[CategoryDraftService, Depends(get_service)]


# ============================================================================
# Session Endpoints
# ============================================================================


@router.post(
    "",
    response_model=DraftResponse,
    status_code=status.HTTP_201_CREATED,
    responses={401: {"model": ErrorResponse}},
    summary="Start draft",
    description="Start an editing session with an empty category draft.",
)
async def start_draft(service: ServiceDep) -> DraftResponse:
    """Start a new editing session.

    Returns:
        The empty draft.
    """
    return respond(service.start_session())


@router.get(
    "/{session_id}",
    response_model=DraftResponse,
    responses=ERROR_RESPONSES,
    summary="Get draft",
    description="Get the current draft of an editing session.",
)
async def get_draft(session_id: str, service: ServiceDep) -> DraftResponse:
    """Get a session's draft.

    Selected products the catalog no longer knows are listed in
    ``danglingProducts`` instead of failing the request.

    Raises:
        HTTPException: If the session does not exist.
    """
    return respond(service.get_session(session_id))


@router.delete(
    "/{session_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses=ERROR_RESPONSES,
    summary="Discard draft",
    description="Discard an editing session without creating a category.",
)
async def discard_draft(session_id: str, service: ServiceDep) -> Response:
    """Discard a session.

    Raises:
        HTTPException: If the session does not exist.
    """
    result = service.discard_session(session_id)
    if not result.success:
        raise_for_error(result.error_code, result.error, "DRAFT_OPERATION_FAILED")
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.put(
    "/{session_id}/name",
    response_model=DraftResponse,
    responses=ERROR_RESPONSES,
    summary="Set category name",
)
async def set_name(
    session_id: str, request: SetNameRequest, service: ServiceDep
) -> DraftResponse:
    """Set the category name exactly as typed."""
    return respond(service.set_name(session_id, request.name))


# ============================================================================
# Tab Endpoints
# ============================================================================


@router.post(
    "/{session_id}/tabs",
    response_model=DraftResponse,
    status_code=status.HTTP_201_CREATED,
    responses=ERROR_RESPONSES,
    summary="Add service tab",
)
async def add_tab(session_id: str, service: ServiceDep) -> DraftResponse:
    """Append a service tab named "Service Tab N"."""
    return respond(service.add_tab(session_id))


@router.patch(
    "/{session_id}/tabs/{tab_id}",
    response_model=DraftResponse,
    responses=ERROR_RESPONSES,
    summary="Rename service tab",
)
async def rename_tab(
    session_id: str, tab_id: str, request: RenameTabRequest, service: ServiceDep
) -> DraftResponse:
    """Rename a service tab."""
    return respond(service.rename_tab(session_id, tab_id, request.name))


@router.delete(
    "/{session_id}/tabs/{tab_id}",
    response_model=DraftResponse,
    responses=ERROR_RESPONSES,
    summary="Remove service tab",
)
async def remove_tab(session_id: str, tab_id: str, service: ServiceDep) -> DraftResponse:
    """Remove a service tab and all of its items."""
    return respond(service.remove_tab(session_id, tab_id))


# ============================================================================
# Item Endpoints
# ============================================================================


@router.post(
    "/{session_id}/tabs/{tab_id}/items",
    response_model=DraftResponse,
    status_code=status.HTTP_201_CREATED,
    responses=ERROR_RESPONSES,
    summary="Add service item",
)
async def add_item(session_id: str, tab_id: str, service: ServiceDep) -> DraftResponse:
    """Append an empty service item to a tab."""
    return respond(service.add_item(session_id, tab_id))


@router.patch(
    "/{session_id}/tabs/{tab_id}/items/{item_id}",
    response_model=DraftResponse,
    responses=ERROR_RESPONSES,
    summary="Update service item",
)
async def update_item(
    session_id: str,
    tab_id: str,
    item_id: str,
    request: UpdateItemRequest,
    service: ServiceDep,
) -> DraftResponse:
    """Set one field of a service item.

    Prices are stored as typed and checked when the draft is finalized.
    """
    return respond(
        service.update_item(session_id, tab_id, item_id, request.field, request.value)
    )


@router.delete(
    "/{session_id}/tabs/{tab_id}/items/{item_id}",
    response_model=DraftResponse,
    responses=ERROR_RESPONSES,
    summary="Remove service item",
)
async def remove_item(
    session_id: str, tab_id: str, item_id: str, service: ServiceDep
) -> DraftResponse:
    """Remove a service item."""
    return respond(service.remove_item(session_id, tab_id, item_id))


# ============================================================================
# Product Selection
# ============================================================================


@router.post(
    "/{session_id}/products/{product_id}/toggle",
    response_model=DraftResponse,
    responses=ERROR_RESPONSES,
    summary="Toggle product selection",
    description="Select a product if it is not selected, deselect it otherwise.",
)
async def toggle_product(
    session_id: str, product_id: str, service: ServiceDep
) -> DraftResponse:
    """Toggle a product reference.

    Raises:
        HTTPException: If the session does not exist, or the product is
            being selected and is not in the catalog.
    """
    return respond(service.toggle_product(session_id, product_id))


# ============================================================================
# Naming and Finalization
# ============================================================================


@router.get(
    "/{session_id}/name-preview",
    response_model=NamePreviewResponse,
    responses=ERROR_RESPONSES,
    summary="Preview category name",
    description="Resolve the name the category would get if finalized now.",
)
async def preview_name(session_id: str, service: ServiceDep) -> NamePreviewResponse:
    """Resolve the category name without finalizing."""
    result, name = service.preview_name(session_id)
    if name is None:
        raise_for_error(result.error_code, result.error, "DRAFT_OPERATION_FAILED")
    return NamePreviewResponse(session_id=session_id, name=name)


@router.post(
    "/{session_id}/finalize",
    response_model=CategoryResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        401: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        422: {"model": ErrorResponse},
    },
    summary="Finalize draft",
    description="Create the category from the draft and close the session.",
)
async def finalize_draft(session_id: str, service: ServiceDep) -> CategoryResponse:
    """Finalize a draft into a category.

    Raises:
        HTTPException: 404 if the session does not exist, 422 with one
            detail per problem if prices or lengths are invalid.
    """
    result = service.submit(session_id)
    if not result.success or result.record is None:
        raise_for_error(
            result.error_code,
            result.error,
            "FINALIZATION_FAILED",
            details=[
                {"field": issue.location, "message": issue.message}
                for issue in result.issues
            ],
        )
    return record_to_response(result.record)
