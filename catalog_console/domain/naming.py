"""Category name resolution.

When the administrator leaves the name blank, a name is derived from
the draft's contents. Rules are tried in order and the first one that
yields a usable name wins:

1. The typed name, if it is not blank. Leading and trailing
   whitespace is stripped; inner spacing is kept.
2. The first tab's name, if not blank; otherwise the name of that
   tab's first service item, if not blank.
3. "<product name> Category" for the first selected product, if the
   catalog still knows it.
4. "New Category".
"""

from catalog_console.domain.value_objects import (
    DEFAULT_CATEGORY_NAME,
    CatalogDraft,
    ProductLookup,
)

PRODUCT_CATEGORY_NAME = "{product_name} Category"


def _is_blank(value: str | None) -> bool:
    return not value or not value.strip()


def _name_from_tabs(draft: CatalogDraft) -> str | None:
    if not draft.service_tabs:
        return None
    first_tab = draft.service_tabs[0]
    if not _is_blank(first_tab.name):
        return first_tab.name
    # Only the first tab is consulted, and only its first item.
    if first_tab.services and not _is_blank(first_tab.services[0].name):
        return first_tab.services[0].name
    return None


def _name_from_products(draft: CatalogDraft, catalog: ProductLookup) -> str | None:
    if not draft.selected_products:
        return None
    product = catalog.get(draft.selected_products[0])
    if product is None or _is_blank(product.name):
        return None
    return PRODUCT_CATEGORY_NAME.format(product_name=product.name)


def resolve_category_name(draft: CatalogDraft, catalog: ProductLookup) -> str:
    """Compute the effective category name of a draft.

    Args:
        draft: Draft being finalized.
        catalog: Product lookup used for the product-based fallback.

    Returns:
        A non-empty name.
    """
    if not _is_blank(draft.name):
        return draft.name.strip()
    return (
        _name_from_tabs(draft)
        or _name_from_products(draft, catalog)
        or DEFAULT_CATEGORY_NAME
    )
