"""Domain layer - the category draft tree and its operations.

This module exports the core building blocks:

- **Value Objects**: Product, ServiceItem, ServiceTab, CatalogDraft, CategoryRecord
- **Identifiers**: Scoped id generators injected into the operations
- **Mutations**: Pure draft-to-draft operations (missing ids are no-ops)
- **Naming / Finalization**: Name fallback chain and record assembly
- **Validation**: Price and length checks run before submission
- **Exceptions**: Errors raised at the session boundary

Example usage:
    from catalog_console.domain import (
        CatalogDraft,
        SequentialIdGenerator,
        add_service_tab,
        finalize,
    )

    ids = SequentialIdGenerator()
    draft = add_service_tab(CatalogDraft.empty(), ids)
    record = finalize(draft, catalog, ids)
    print(record.name)  # Service Tab 1
"""

# Base classes
from catalog_console.domain.base import ValueObject

# Exceptions
from catalog_console.domain.exceptions import (
    DomainError,
    DraftSessionNotFoundError,
    DraftValidationError,
    ProductNotInCatalogError,
)

# Finalization
from catalog_console.domain.finalization import finalize

# Identifiers
from catalog_console.domain.identifiers import (
    IdentifierGenerator,
    IdScope,
    SequentialIdGenerator,
    TimestampIdGenerator,
    create_id_generator,
    get_id_generator,
    set_id_generator,
)

# Mutations
from catalog_console.domain.mutations import (
    add_service_item,
    add_service_tab,
    prune_dangling_products,
    remove_service_item,
    remove_service_tab,
    rename_service_tab,
    set_category_name,
    toggle_product_selection,
    update_service_item_field,
)

# Naming
from catalog_console.domain.naming import resolve_category_name

# Validation
from catalog_console.domain.validation import ValidationIssue, parse_price, validate_draft

# Value Objects
from catalog_console.domain.value_objects import (
    DEFAULT_CATEGORY_IMAGE,
    DEFAULT_CATEGORY_NAME,
    CatalogDraft,
    CategoryRecord,
    Product,
    ProductLookup,
    ServiceItem,
    ServiceItemField,
    ServiceTab,
)

__all__ = [
    # Base classes
    "ValueObject",
    # Value Objects
    "CatalogDraft",
    "CategoryRecord",
    "Product",
    "ProductLookup",
    "ServiceItem",
    "ServiceItemField",
    "ServiceTab",
    "DEFAULT_CATEGORY_IMAGE",
    "DEFAULT_CATEGORY_NAME",
    # Identifiers
    "IdentifierGenerator",
    "IdScope",
    "SequentialIdGenerator",
    "TimestampIdGenerator",
    "create_id_generator",
    "get_id_generator",
    "set_id_generator",
    # Mutations
    "add_service_item",
    "add_service_tab",
    "prune_dangling_products",
    "remove_service_item",
    "remove_service_tab",
    "rename_service_tab",
    "set_category_name",
    "toggle_product_selection",
    "update_service_item_field",
    # Naming / Finalization
    "resolve_category_name",
    "finalize",
    # Validation
    "ValidationIssue",
    "parse_price",
    "validate_draft",
    # Exceptions
    "DomainError",
    "DraftSessionNotFoundError",
    "DraftValidationError",
    "ProductNotInCatalogError",
]
