"""Draft mutation operations.

Every function takes a draft and returns the next draft. The input is
never modified. A tab or item id that is not in the draft turns the
call into a no-op that returns the input draft itself, so callers can
compare with ``is`` to detect that nothing changed.

Example usage:
    ids = SequentialIdGenerator()
    draft = CatalogDraft.empty()
    draft = add_service_tab(draft, ids)            # "Service Tab 1"
    tab_id = draft.service_tabs[0].id
    draft = add_service_item(draft, tab_id, ids)
    item_id = draft.service_tabs[0].services[0].id
    draft = update_service_item_field(draft, tab_id, item_id, "price", "499")
"""

from dataclasses import replace

from catalog_console.domain.identifiers import IdentifierGenerator, IdScope, get_id_generator
from catalog_console.domain.value_objects import (
    CatalogDraft,
    ProductLookup,
    ServiceItem,
    ServiceItemField,
    ServiceTab,
)

DEFAULT_TAB_NAME = "Service Tab {number}"


# ============================================================================
# Internal Helpers
# ============================================================================


def _replace_tab(draft: CatalogDraft, updated: ServiceTab) -> CatalogDraft:
    """Swap in an updated tab at the position of the tab with the same id."""
    return replace(
        draft,
        service_tabs=tuple(
            updated if tab.id == updated.id else tab for tab in draft.service_tabs
        ),
    )


# ============================================================================
# Draft Name
# ============================================================================


def set_category_name(draft: CatalogDraft, name: str) -> CatalogDraft:
    """Set the category name exactly as typed.

    Args:
        draft: Current draft.
        name: New name; may be empty or whitespace.

    Returns:
        New draft.
    """
    if draft.name == name:
        return draft
    return replace(draft, name=name)


# ============================================================================
# Service Tabs
# ============================================================================


def add_service_tab(
    draft: CatalogDraft,
    ids: IdentifierGenerator | None = None,
) -> CatalogDraft:
    """Append a new, empty service tab.

    The default name numbers tabs by how many exist before the append,
    so removing a tab and adding another can repeat an earlier label.
    Ids are never repeated.

    Args:
        draft: Current draft.
        ids: Identifier generator; defaults to the process-wide one.

    Returns:
        New draft with the tab appended.
    """
    ids = ids or get_id_generator()
    tab = ServiceTab(
        id=ids.next_id(IdScope.TAB),
        name=DEFAULT_TAB_NAME.format(number=len(draft.service_tabs) + 1),
    )
    return replace(draft, service_tabs=(*draft.service_tabs, tab))


def rename_service_tab(draft: CatalogDraft, tab_id: str, new_name: str) -> CatalogDraft:
    """Rename a tab.

    Args:
        draft: Current draft.
        tab_id: Tab to rename.
        new_name: New display name.

    Returns:
        New draft, or the input draft if the tab does not exist.
    """
    tab = draft.find_tab(tab_id)
    if tab is None:
        return draft
    return _replace_tab(draft, replace(tab, name=new_name))


def remove_service_tab(draft: CatalogDraft, tab_id: str) -> CatalogDraft:
    """Remove a tab together with all of its items.

    Args:
        draft: Current draft.
        tab_id: Tab to remove.

    Returns:
        New draft, or the input draft if the tab does not exist.
    """
    if draft.find_tab(tab_id) is None:
        return draft
    return replace(
        draft,
        service_tabs=tuple(tab for tab in draft.service_tabs if tab.id != tab_id),
    )


# ============================================================================
# Service Items
# ============================================================================


def add_service_item(
    draft: CatalogDraft,
    tab_id: str,
    ids: IdentifierGenerator | None = None,
) -> CatalogDraft:
    """Append an empty service item to a tab.

    Args:
        draft: Current draft.
        tab_id: Owning tab.
        ids: Identifier generator; defaults to the process-wide one.

    Returns:
        New draft, or the input draft if the tab does not exist.
    """
    tab = draft.find_tab(tab_id)
    if tab is None:
        return draft
    ids = ids or get_id_generator()
    item = ServiceItem(id=ids.next_id(IdScope.ITEM))
    return _replace_tab(draft, replace(tab, services=(*tab.services, item)))


def update_service_item_field(
    draft: CatalogDraft,
    tab_id: str,
    item_id: str,
    field: ServiceItemField | str,
    value: str,
) -> CatalogDraft:
    """Set one field of a service item.

    Prices are stored as raw text here.

    Args:
        draft: Current draft.
        tab_id: Owning tab.
        item_id: Item to update.
        field: One of name, description, price, discountPrice.
        value: New raw value.

    Returns:
        New draft, or the input draft if the tab or item does not exist.

    Raises:
        ValueError: If ``field`` is not an editable field.
    """
    item_field = ServiceItemField.parse(field)
    tab = draft.find_tab(tab_id)
    if tab is None:
        return draft
    item = tab.find_item(item_id)
    if item is None:
        return draft
    updated = item.with_field(item_field, value)
    return _replace_tab(
        draft,
        replace(
            tab,
            services=tuple(updated if s.id == item_id else s for s in tab.services),
        ),
    )


def remove_service_item(draft: CatalogDraft, tab_id: str, item_id: str) -> CatalogDraft:
    """Remove a service item from a tab.

    Args:
        draft: Current draft.
        tab_id: Owning tab.
        item_id: Item to remove.

    Returns:
        New draft, or the input draft if the tab or item does not exist.
    """
    tab = draft.find_tab(tab_id)
    if tab is None or tab.find_item(item_id) is None:
        return draft
    return _replace_tab(
        draft,
        replace(tab, services=tuple(s for s in tab.services if s.id != item_id)),
    )


# ============================================================================
# Product References
# ============================================================================


def toggle_product_selection(draft: CatalogDraft, product_id: str) -> CatalogDraft:
    """Select a product if absent, deselect it otherwise.

    Selecting appends to the end; deselecting keeps the order of the
    remaining ids.

    Args:
        draft: Current draft.
        product_id: Product to toggle.

    Returns:
        New draft.
    """
    if draft.is_selected(product_id):
        return replace(
            draft,
            selected_products=tuple(
                pid for pid in draft.selected_products if pid != product_id
            ),
        )
    return replace(draft, selected_products=(*draft.selected_products, product_id))


def prune_dangling_products(draft: CatalogDraft, catalog: ProductLookup) -> CatalogDraft:
    """Drop selected product ids the catalog no longer knows.

    Args:
        draft: Current draft.
        catalog: Product lookup.

    Returns:
        New draft, or the input draft if every reference resolves.
    """
    known = tuple(pid for pid in draft.selected_products if catalog.get(pid) is not None)
    if len(known) == len(draft.selected_products):
        return draft
    return replace(draft, selected_products=known)
