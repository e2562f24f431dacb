"""Value objects for the category draft tree.

A category draft is a strictly two-level tree: the draft owns ordered
service tabs, each tab owns ordered service items. The draft also holds
an ordered list of references (ids only) into the product catalog.
Every type here is frozen and its collections are tuples, so updating
any node means building a new draft.
"""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Protocol, Self

from catalog_console.domain.base import ValueObject

DEFAULT_CATEGORY_NAME = "New Category"
DEFAULT_CATEGORY_IMAGE = "/placeholder.svg"


# ============================================================================
# Product (external, read-only)
# ============================================================================


@dataclass(frozen=True)
class Product(ValueObject):
    """A product known to the product catalog.

    Drafts never copy products; they only keep the id.

    Attributes:
        id: Unique product identifier.
        name: Display name.
        category: Category label (e.g., "IT Needs").
        image: Image URI.
    """

    id: str
    name: str
    category: str = ""
    image: str = ""

    def __post_init__(self) -> None:
        """Validate product ID."""
        if not self.id or not self.id.strip():
            raise ValueError("Product ID cannot be empty")

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "id": self.id,
            "name": self.name,
            "category": self.category,
            "image": self.image,
        }


class ProductLookup(Protocol):
    """Anything that can find a product by id (see catalog.ProductCatalog)."""

    def get(self, product_id: str) -> Product | None:
        """Return the product with this id, or None."""
        ...


# ============================================================================
# Service Items and Tabs
# ============================================================================


class ServiceItemField(str, Enum):
    """Editable fields of a service item, keyed by their wire names."""

    NAME = "name"
    DESCRIPTION = "description"
    PRICE = "price"
    DISCOUNT_PRICE = "discountPrice"

    @classmethod
    def parse(cls, value: "str | ServiceItemField") -> "ServiceItemField":
        """Resolve a field from its wire name or attribute name.

        Args:
            value: Field enum, wire name ("discountPrice") or attribute
                name ("discount_price").

        Returns:
            Matching ServiceItemField.

        Raises:
            ValueError: If the name is not an editable field.
        """
        if isinstance(value, cls):
            return value
        for member in cls:
            if value in (member.value, member.attribute):
                return member
        raise ValueError(f"Unknown service item field: {value!r}")

    @property
    def attribute(self) -> str:
        """Dataclass attribute backing this field."""
        return "discount_price" if self is ServiceItemField.DISCOUNT_PRICE else self.value


@dataclass(frozen=True)
class ServiceItem(ValueObject):
    """A single priced offering inside a service tab.

    Prices are kept as the raw text the administrator typed; numeric
    validation happens at submission (see domain.validation).

    Attributes:
        id: Identifier, unique within the owning tab.
        name: Service name.
        description: Free-text description.
        price: Price as entered.
        discount_price: Discounted price as entered; empty means no discount.
    """

    id: str
    name: str = ""
    description: str = ""
    price: str = ""
    discount_price: str = ""

    def with_field(self, item_field: ServiceItemField, value: str) -> Self:
        """Return a copy with one field replaced."""
        return replace(self, **{item_field.attribute: value})

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary with wire field names."""
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "price": self.price,
            "discountPrice": self.discount_price,
        }


@dataclass(frozen=True)
class ServiceTab(ValueObject):
    """A named group of service items.

    Attributes:
        id: Identifier, unique within the draft.
        name: Display label.
        services: Items in insertion order.
    """

    id: str
    name: str
    services: tuple[ServiceItem, ...] = ()

    def find_item(self, item_id: str) -> ServiceItem | None:
        """Find an item by ID.

        Args:
            item_id: Item identifier.

        Returns:
            The item if present, None otherwise.
        """
        for item in self.services:
            if item.id == item_id:
                return item
        return None

    @property
    def item_count(self) -> int:
        """Number of service items in this tab."""
        return len(self.services)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "id": self.id,
            "name": self.name,
            "services": [item.to_dict() for item in self.services],
        }


# ============================================================================
# Draft and Finalized Record
# ============================================================================


@dataclass(frozen=True)
class CatalogDraft(ValueObject):
    """The not-yet-persisted category being edited in one session.

    Attributes:
        name: Category name as typed; may be empty.
        selected_products: Product IDs in selection order, no duplicates.
        service_tabs: Tabs in insertion order.
    """

    name: str = ""
    selected_products: tuple[str, ...] = ()
    service_tabs: tuple[ServiceTab, ...] = ()

    @classmethod
    def empty(cls) -> Self:
        """Create the empty draft a new session starts with."""
        return cls()

    def find_tab(self, tab_id: str) -> ServiceTab | None:
        """Find a tab by ID.

        Args:
            tab_id: Tab identifier.

        Returns:
            The tab if present, None otherwise.
        """
        for tab in self.service_tabs:
            if tab.id == tab_id:
                return tab
        return None

    def is_selected(self, product_id: str) -> bool:
        """Check whether a product is referenced by the draft."""
        return product_id in self.selected_products

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "name": self.name,
            "selectedProducts": list(self.selected_products),
            "serviceTabs": [tab.to_dict() for tab in self.service_tabs],
        }


@dataclass(frozen=True)
class CategoryRecord(ValueObject):
    """A finalized category handed to the persistence collaborator.

    Attributes:
        id: Freshly generated category identifier.
        name: Resolved name, never empty.
        product_count: Number of selected products.
        selected_products: Product IDs in selection order.
        service_tabs: Copy of the draft's tree at finalization time.
        image: Placeholder image URI.
    """

    id: str
    name: str
    product_count: int
    selected_products: tuple[str, ...] = ()
    service_tabs: tuple[ServiceTab, ...] = ()
    image: str = DEFAULT_CATEGORY_IMAGE

    def __post_init__(self) -> None:
        """Validate record invariants."""
        if not self.name or not self.name.strip():
            raise ValueError("Category name cannot be empty")
        if self.product_count != len(self.selected_products):
            raise ValueError("Product count must match selected products")

    @property
    def service_count(self) -> int:
        """Total number of service items across all tabs."""
        return sum(tab.item_count for tab in self.service_tabs)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "id": self.id,
            "name": self.name,
            "productCount": self.product_count,
            "image": self.image,
            "selectedProducts": list(self.selected_products),
            "serviceTabs": [tab.to_dict() for tab in self.service_tabs],
        }
