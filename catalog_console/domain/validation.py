"""Boundary validation of a draft before it is submitted.

The mutation operations accept any text; these checks run once, when
the session is submitted, and report every problem at once instead of
stopping at the first.
"""

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from catalog_console.domain.base import ValueObject
from catalog_console.domain.value_objects import CatalogDraft, ServiceItem

MAX_TAB_NAME_LENGTH = 50
MAX_SERVICE_NAME_LENGTH = 100
MAX_DESCRIPTION_LENGTH = 500
MAX_PRICE = Decimal("1000000")


@dataclass(frozen=True)
class ValidationIssue(ValueObject):
    """A single problem found in a draft.

    Attributes:
        location: Dotted path to the field (serviceTabs[0].services[1].price).
        message: Human-readable description.
        tab_id: Tab the issue belongs to.
        item_id: Item the issue belongs to, if any.
    """

    location: str
    message: str
    tab_id: str | None = None
    item_id: str | None = None


def parse_price(text: str) -> Decimal | None:
    """Parse a price typed by the administrator.

    Args:
        text: Raw price text.

    Returns:
        Decimal value, or None if the text is blank or not a finite number.
    """
    if not text or not text.strip():
        return None
    try:
        value = Decimal(text.strip())
    except InvalidOperation:
        return None
    if not value.is_finite():
        return None
    return value


def _check_amount(value: Decimal, label: str) -> str | None:
    if value < 0:
        return f"{label} cannot be negative"
    if value > MAX_PRICE:
        return f"{label} cannot exceed 1,000,000"
    return None


def _validate_item(item: ServiceItem, location: str, tab_id: str) -> list[ValidationIssue]:
    issues: list[ValidationIssue] = []

    def issue(field_name: str, message: str) -> None:
        issues.append(
            ValidationIssue(
                location=f"{location}.{field_name}",
                message=message,
                tab_id=tab_id,
                item_id=item.id,
            )
        )

    if len(item.name) > MAX_SERVICE_NAME_LENGTH:
        issue("name", "Service name cannot exceed 100 characters")
    if len(item.description) > MAX_DESCRIPTION_LENGTH:
        issue("description", "Description cannot exceed 500 characters")

    price = parse_price(item.price)
    if item.price.strip() and price is None:
        issue("price", "Price must be a number")
    elif price is not None and (problem := _check_amount(price, "Price")):
        issue("price", problem)
        price = None

    discount = parse_price(item.discount_price)
    if item.discount_price.strip() and discount is None:
        issue("discountPrice", "Discount price must be a number")
    elif discount is not None:
        if problem := _check_amount(discount, "Discount price"):
            issue("discountPrice", problem)
        elif discount != 0 and price is not None and discount >= price:
            issue("discountPrice", "Discount price must be less than regular price")

    return issues


def validate_draft(draft: CatalogDraft) -> list[ValidationIssue]:
    """Check a draft's tabs and items.

    Blank prices are accepted; a service may be listed before it is
    priced.

    Args:
        draft: Draft to check.

    Returns:
        All issues found, in tree order. Empty if the draft is valid.
    """
    issues: list[ValidationIssue] = []
    for tab_index, tab in enumerate(draft.service_tabs):
        tab_location = f"serviceTabs[{tab_index}]"
        if len(tab.name) > MAX_TAB_NAME_LENGTH:
            issues.append(
                ValidationIssue(
                    location=f"{tab_location}.name",
                    message="Service tab name cannot exceed 50 characters",
                    tab_id=tab.id,
                )
            )
        for item_index, item in enumerate(tab.services):
            issues.extend(
                _validate_item(item, f"{tab_location}.services[{item_index}]", tab.id)
            )
    return issues
