"""Tests for draft value objects."""

from dataclasses import FrozenInstanceError

import pytest

from catalog_console.domain import (
    DEFAULT_CATEGORY_IMAGE,
    CatalogDraft,
    CategoryRecord,
    Product,
    ServiceItem,
    ServiceItemField,
    ServiceTab,
)


class TestProduct:
    """Tests for Product value object."""

    def test_create(self) -> None:
        """Product can be created with defaults."""
        product = Product(id="P001", name="iPhone 15 Pro Max")
        assert product.category == ""
        assert product.image == ""

    def test_empty_id_raises(self) -> None:
        """Blank ids are rejected."""
        with pytest.raises(ValueError, match="Product ID cannot be empty"):
            Product(id="  ", name="Nameless")

    def test_to_dict(self) -> None:
        """Product serializes all fields."""
        product = Product(id="P1", name="Phone", category="IT Needs", image="/p.png")
        assert product.to_dict() == {
            "id": "P1",
            "name": "Phone",
            "category": "IT Needs",
            "image": "/p.png",
        }


class TestServiceItemField:
    """Tests for ServiceItemField parsing."""

    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("name", ServiceItemField.NAME),
            ("description", ServiceItemField.DESCRIPTION),
            ("price", ServiceItemField.PRICE),
            ("discountPrice", ServiceItemField.DISCOUNT_PRICE),
            ("discount_price", ServiceItemField.DISCOUNT_PRICE),
            (ServiceItemField.PRICE, ServiceItemField.PRICE),
        ],
    )
    def test_parse(self, raw, expected) -> None:
        """Wire names, attribute names and members all resolve."""
        assert ServiceItemField.parse(raw) is expected

    def test_parse_unknown_raises(self) -> None:
        """Non-editable fields are rejected."""
        with pytest.raises(ValueError, match="Unknown service item field"):
            ServiceItemField.parse("id")

    def test_attribute(self) -> None:
        """Each field maps to its dataclass attribute."""
        assert ServiceItemField.DISCOUNT_PRICE.attribute == "discount_price"
        assert ServiceItemField.NAME.attribute == "name"


class TestServiceItem:
    """Tests for ServiceItem value object."""

    def test_new_item_is_blank(self) -> None:
        """A new item has only its id."""
        item = ServiceItem(id="service_1")
        assert (item.name, item.description, item.price, item.discount_price) == (
            "",
            "",
            "",
            "",
        )

    def test_with_field_returns_copy(self) -> None:
        """with_field leaves the original untouched."""
        item = ServiceItem(id="service_1")
        updated = item.with_field(ServiceItemField.DISCOUNT_PRICE, "399")
        assert updated.discount_price == "399"
        assert item.discount_price == ""

    def test_is_frozen(self) -> None:
        """Items cannot be mutated in place."""
        item = ServiceItem(id="service_1")
        with pytest.raises(FrozenInstanceError):
            item.name = "Changed"  # type: ignore[misc]

    def test_to_dict_uses_wire_names(self) -> None:
        """Serialized items use discountPrice."""
        item = ServiceItem(id="s", price="10", discount_price="5")
        assert item.to_dict()["discountPrice"] == "5"


class TestServiceTab:
    """Tests for ServiceTab value object."""

    def test_find_item(self) -> None:
        """Items are found by id."""
        tab = ServiceTab(
            id="tab_1",
            name="Repairs",
            services=(ServiceItem(id="a"), ServiceItem(id="b")),
        )
        assert tab.find_item("b") == ServiceItem(id="b")
        assert tab.find_item("missing") is None
        assert tab.item_count == 2


class TestCatalogDraft:
    """Tests for CatalogDraft value object."""

    def test_empty(self) -> None:
        """The empty draft has no name, products or tabs."""
        draft = CatalogDraft.empty()
        assert draft.name == ""
        assert draft.selected_products == ()
        assert draft.service_tabs == ()

    def test_value_equality(self) -> None:
        """Drafts with the same content are equal."""
        assert CatalogDraft.empty() == CatalogDraft()

    def test_find_tab_and_selection(self) -> None:
        """Tabs are found by id and selection is checked by id."""
        tab = ServiceTab(id="tab_1", name="Repairs")
        draft = CatalogDraft(selected_products=("P001",), service_tabs=(tab,))
        assert draft.find_tab("tab_1") is tab
        assert draft.find_tab("tab_2") is None
        assert draft.is_selected("P001")
        assert not draft.is_selected("P002")

    def test_to_dict(self) -> None:
        """Draft serializes with camelCase keys."""
        draft = CatalogDraft(name="Phones", selected_products=("P001",))
        assert draft.to_dict() == {
            "name": "Phones",
            "selectedProducts": ["P001"],
            "serviceTabs": [],
        }


class TestCategoryRecord:
    """Tests for CategoryRecord value object."""

    def test_defaults_to_placeholder_image(self) -> None:
        """Records use the placeholder image unless given one."""
        record = CategoryRecord(id="C1", name="Phones", product_count=0)
        assert record.image == DEFAULT_CATEGORY_IMAGE

    def test_blank_name_raises(self) -> None:
        """Records always carry a name."""
        with pytest.raises(ValueError, match="Category name cannot be empty"):
            CategoryRecord(id="C1", name=" ", product_count=0)

    def test_count_must_match_selection(self) -> None:
        """product_count equals the number of selected products."""
        with pytest.raises(ValueError, match="Product count"):
            CategoryRecord(
                id="C1", name="Phones", product_count=2, selected_products=("P001",)
            )

    def test_service_count(self) -> None:
        """service_count sums items across tabs."""
        record = CategoryRecord(
            id="C1",
            name="Phones",
            product_count=0,
            service_tabs=(
                ServiceTab(id="t1", name="A", services=(ServiceItem(id="1"),)),
                ServiceTab(
                    id="t2",
                    name="B",
                    services=(ServiceItem(id="1"), ServiceItem(id="2")),
                ),
            ),
        )
        assert record.service_count == 3
        assert record.to_dict()["productCount"] == 0
