"""Draft finalization.

Turns the draft of an editing session into the CategoryRecord that is
handed to persistence. The record shares no mutable state with the
draft: it is built from fresh tuples of frozen values.
"""

from catalog_console.domain.identifiers import IdentifierGenerator, IdScope, get_id_generator
from catalog_console.domain.mutations import prune_dangling_products
from catalog_console.domain.naming import resolve_category_name
from catalog_console.domain.value_objects import (
    DEFAULT_CATEGORY_IMAGE,
    CatalogDraft,
    CategoryRecord,
    ProductLookup,
    ServiceItem,
    ServiceTab,
)


def _copy_tab(tab: ServiceTab) -> ServiceTab:
    return ServiceTab(
        id=tab.id,
        name=tab.name,
        services=tuple(
            ServiceItem(
                id=item.id,
                name=item.name,
                description=item.description,
                price=item.price,
                discount_price=item.discount_price,
            )
            for item in tab.services
        ),
    )


def finalize(
    draft: CatalogDraft,
    catalog: ProductLookup,
    ids: IdentifierGenerator | None = None,
    image: str = DEFAULT_CATEGORY_IMAGE,
) -> CategoryRecord:
    """Build the persisted record for a draft.

    Selected products the catalog no longer knows are dropped before
    counting, so ``product_count`` always equals the number of ids the
    record carries.

    Args:
        draft: Draft to finalize.
        catalog: Product lookup for naming and pruning.
        ids: Identifier generator; defaults to the process-wide one.
        image: Placeholder image URI for the new category.

    Returns:
        The finalized CategoryRecord.
    """
    ids = ids or get_id_generator()
    name = resolve_category_name(draft, catalog)
    selected = prune_dangling_products(draft, catalog).selected_products

    return CategoryRecord(
        id=ids.next_id(IdScope.CATEGORY),
        name=name,
        product_count=len(selected),
        selected_products=tuple(selected),
        service_tabs=tuple(_copy_tab(tab) for tab in draft.service_tabs),
        image=image,
    )
