"""Tests for category name resolution."""

from catalog_console.catalog import ProductCatalog
from catalog_console.domain import (
    CatalogDraft,
    Product,
    ServiceItem,
    ServiceTab,
    resolve_category_name,
)


def tab(name: str, *item_names: str) -> ServiceTab:
    """Build a tab whose items carry the given names."""
    return ServiceTab(
        id=f"tab_{name or 'blank'}",
        name=name,
        services=tuple(ServiceItem(id=f"s{i}", name=n) for i, n in enumerate(item_names)),
    )


class TestResolveCategoryName:
    """Tests for the name fallback chain."""

    def test_typed_name_wins(self, catalog) -> None:
        """A non-blank typed name is used."""
        draft = CatalogDraft(
            name="Electronics",
            selected_products=("P001",),
            service_tabs=(tab("Repairs"),),
        )
        assert resolve_category_name(draft, catalog) == "Electronics"

    def test_typed_name_edges_stripped(self, catalog) -> None:
        """Edge whitespace is stripped; inner spacing is kept."""
        draft = CatalogDraft(name="  Home  Care ")
        assert resolve_category_name(draft, catalog) == "Home  Care"

    def test_first_tab_name(self, catalog) -> None:
        """A blank name falls back to the first tab's name."""
        draft = CatalogDraft(service_tabs=(tab("Repairs"),))
        assert resolve_category_name(draft, catalog) == "Repairs"

    def test_first_item_of_unnamed_tab(self, catalog) -> None:
        """An unnamed first tab falls back to its first item's name."""
        draft = CatalogDraft(service_tabs=(tab("", "AC Service"),))
        assert resolve_category_name(draft, catalog) == "AC Service"

    def test_first_product(self, catalog) -> None:
        """Without tabs the first selected product names the category."""
        draft = CatalogDraft(selected_products=("P001",))
        assert resolve_category_name(draft, catalog) == "iPhone 15 Pro Max Category"

    def test_default(self, catalog) -> None:
        """An empty draft resolves to the default name."""
        assert resolve_category_name(CatalogDraft.empty(), catalog) == "New Category"

    def test_whitespace_name_is_blank(self, catalog) -> None:
        """A whitespace-only name counts as blank."""
        draft = CatalogDraft(name="   ", service_tabs=(tab("Repairs"),))
        assert resolve_category_name(draft, catalog) == "Repairs"

    def test_only_first_tab_consulted(self, catalog) -> None:
        """Later tabs never name the category."""
        draft = CatalogDraft(
            selected_products=("P002",),
            service_tabs=(tab(" "), tab("Installs", "Mount")),
        )
        assert resolve_category_name(draft, catalog) == "MacBook Pro M3 Category"

    def test_only_first_item_consulted(self, catalog) -> None:
        """A blank first item falls through even if later items are named."""
        draft = CatalogDraft(service_tabs=(tab("", "", "Deep Clean"),))
        assert resolve_category_name(draft, catalog) == "New Category"

    def test_unnamed_empty_tab_falls_through_to_products(self, catalog) -> None:
        """An unnamed tab without items defers to the product rule."""
        draft = CatalogDraft(
            selected_products=("P003",),
            service_tabs=(tab(""),),
        )
        assert resolve_category_name(draft, catalog) == "Samsung Galaxy S24 Ultra Category"

    def test_dangling_first_product(self, catalog) -> None:
        """A first product missing from the catalog yields the default."""
        draft = CatalogDraft(selected_products=("GONE", "P001"))
        assert resolve_category_name(draft, catalog) == "New Category"

    def test_empty_catalog(self) -> None:
        """Resolution works against an empty catalog."""
        draft = CatalogDraft(selected_products=("P001",))
        assert resolve_category_name(draft, ProductCatalog()) == "New Category"

    def test_product_without_name(self) -> None:
        """A product with a blank name is not usable."""
        catalog = ProductCatalog([Product(id="X1", name="")])
        draft = CatalogDraft(selected_products=("X1",))
        assert resolve_category_name(draft, catalog) == "New Category"
