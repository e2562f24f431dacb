"""API schemas for the Catalog Console API.

Pydantic models for request/response validation and serialization.
Draft and category payloads use the camelCase field names the console
front end binds to.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from catalog_console.domain.value_objects import ServiceItemField


class CamelModel(BaseModel):
    """Base model serialized with camelCase aliases."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ============================================================================
# Common Schemas
# ============================================================================


class ErrorDetail(BaseModel):
    """Detailed error information."""

    field: str | None = Field(default=None, description="Field that caused the error")
    message: str = Field(..., description="Error message")


class ErrorResponse(BaseModel):
    """Standard error response.

    All API errors follow this format for consistency.
    """

    error_code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error message")
    details: list[ErrorDetail] = Field(
        default_factory=list, description="Additional error details"
    )
    request_id: str | None = Field(
        default=None, description="Request ID for correlation"
    )


class PaginatedResponse(CamelModel):
    """Base paginated response."""

    total: int = Field(..., description="Total number of items")
    page: int = Field(..., description="Current page number")
    page_size: int = Field(..., description="Items per page")
    has_more: bool = Field(..., description="Whether there are more pages")


# ============================================================================
# Product Schemas
# ============================================================================


class ProductSchema(CamelModel):
    """A product that can be referenced by a category."""

    id: str = Field(..., description="Product identifier")
    name: str = Field(..., description="Product name")
    category: str = Field(default="", description="Category label")
    image: str = Field(default="", description="Image URI")


class ProductListResponse(CamelModel):
    """Products available for selection."""

    items: list[ProductSchema] = Field(..., description="Products in catalog order")
    total: int = Field(..., description="Number of products")


# ============================================================================
# Draft Schemas
# ============================================================================


class ServiceItemSchema(CamelModel):
    """A service item inside a tab."""

    id: str = Field(..., description="Item identifier (unique within its tab)")
    name: str = Field(default="", description="Service name")
    description: str = Field(default="", description="Service description")
    price: str = Field(default="", description="Price as entered")
    discount_price: str = Field(default="", description="Discount price as entered")


class ServiceTabSchema(CamelModel):
    """A service tab and its items."""

    id: str = Field(..., description="Tab identifier")
    name: str = Field(..., description="Tab display name")
    services: list[ServiceItemSchema] = Field(
        default_factory=list, description="Service items in order"
    )


class DraftResponse(CamelModel):
    """Current state of an editing session."""

    session_id: str = Field(..., description="Editing session identifier")
    name: str = Field(..., description="Category name as typed")
    selected_products: list[str] = Field(
        default_factory=list, description="Selected product IDs in order"
    )
    service_tabs: list[ServiceTabSchema] = Field(
        default_factory=list, description="Service tabs in order"
    )
    dangling_products: list[str] = Field(
        default_factory=list,
        description="Selected product IDs no longer in the catalog",
    )
    changed: bool = Field(default=False, description="Whether the last edit changed the draft")
    created_at: datetime = Field(..., description="When the session started")
    updated_at: datetime = Field(..., description="When the draft last changed")


class SetNameRequest(CamelModel):
    """Set the category name."""

    name: str = Field(..., max_length=200, description="Category name; may be blank")


class RenameTabRequest(CamelModel):
    """Rename a service tab."""

    name: str = Field(..., description="New tab name")


class UpdateItemRequest(CamelModel):
    """Set one field of a service item."""

    field: ServiceItemField = Field(
        ..., description="One of name, description, price, discountPrice"
    )
    value: str = Field(..., description="Raw value")


class NamePreviewResponse(CamelModel):
    """Name the category would get if submitted now."""

    session_id: str = Field(..., description="Editing session identifier")
    name: str = Field(..., description="Resolved category name")


# ============================================================================
# Category Schemas
# ============================================================================


class CategoryResponse(CamelModel):
    """A finalized category."""

    id: str = Field(..., description="Category identifier")
    name: str = Field(..., description="Resolved category name")
    product_count: int = Field(..., description="Number of selected products")
    image: str = Field(..., description="Category image URI")
    selected_products: list[str] = Field(
        default_factory=list, description="Selected product IDs"
    )
    service_tabs: list[ServiceTabSchema] = Field(
        default_factory=list, description="Service tabs"
    )
    service_count: int = Field(..., description="Service items across all tabs")


class CategoryListResponse(PaginatedResponse):
    """Paginated list of finalized categories."""

    items: list[CategoryResponse] = Field(..., description="List of categories")
