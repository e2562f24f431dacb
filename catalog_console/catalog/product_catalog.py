"""Read-only product catalog.

The catalog is supplied from outside (the marketplace backend, or the
built-in sample list) and never modified by the draft core. Drafts
only reference products by id; a refreshed catalog may no longer know
some of those ids, which callers tolerate rather than treat as errors.
"""

from typing import Any, Iterable, Iterator

from catalog_console.domain.value_objects import Product

# Products the admin console has always offered for selection when no
# backend is configured.
SAMPLE_PRODUCTS: tuple[Product, ...] = (
    Product(
        id="P001",
        name="iPhone 15 Pro Max",
        category="IT Needs",
        image="/tablet.webp",
    ),
    Product(
        id="P002",
        name="MacBook Pro M3",
        category="Home Appliance",
        image="/laptop.avif",
    ),
    Product(
        id="P003",
        name="Samsung Galaxy S24 Ultra",
        category="IT Needs",
        image="/tv.avif",
    ),
)


class ProductCatalog:
    """Ordered, id-indexed, read-only list of products.

    If the source lists the same id twice, the first occurrence wins.

    Example usage:
        catalog = ProductCatalog.sample()
        catalog.get("P001").name       # "iPhone 15 Pro Max"
        catalog.dangling(["P001", "X"]) # ["X"]
    """

    def __init__(self, products: Iterable[Product] = ()) -> None:
        """Initialize catalog.

        Args:
            products: Products in display order.
        """
        self._by_id: dict[str, Product] = {}
        for product in products:
            self._by_id.setdefault(product.id, product)
        self._products: tuple[Product, ...] = tuple(self._by_id.values())

    @classmethod
    def sample(cls) -> "ProductCatalog":
        """Create the built-in sample catalog."""
        return cls(SAMPLE_PRODUCTS)

    @classmethod
    def from_records(cls, records: Iterable[dict[str, Any]]) -> "ProductCatalog":
        """Create a catalog from plain ``{id, name, category, image}`` dicts.

        Args:
            records: Product dictionaries.

        Returns:
            ProductCatalog instance.
        """
        return cls(
            Product(
                id=str(record["id"]),
                name=record.get("name", ""),
                category=record.get("category", ""),
                image=record.get("image", ""),
            )
            for record in records
        )

    def __len__(self) -> int:
        return len(self._products)

    def __iter__(self) -> Iterator[Product]:
        return iter(self._products)

    def __contains__(self, product_id: object) -> bool:
        return product_id in self._by_id

    def get(self, product_id: str) -> Product | None:
        """Get product by ID.

        Args:
            product_id: Product identifier.

        Returns:
            Product if found, None otherwise.
        """
        return self._by_id.get(product_id)

    def list_products(self, category: str | None = None) -> list[Product]:
        """List products in catalog order.

        Args:
            category: Optional category label filter.

        Returns:
            Matching products.
        """
        if category is None:
            return list(self._products)
        return [p for p in self._products if p.category == category]

    def resolve(self, product_ids: Iterable[str]) -> list[Product]:
        """Look up products for a list of ids, skipping unknown ones.

        Args:
            product_ids: Product IDs, e.g. a draft's selection.

        Returns:
            Known products in the order of ``product_ids``.
        """
        return [p for p in (self._by_id.get(pid) for pid in product_ids) if p is not None]

    def dangling(self, product_ids: Iterable[str]) -> list[str]:
        """Return the ids the catalog does not know.

        Args:
            product_ids: Product IDs to check.

        Returns:
            Unknown ids in their original order.
        """
        return [pid for pid in product_ids if pid not in self._by_id]


# Global catalog instance
_product_catalog: ProductCatalog | None = None


def get_product_catalog() -> ProductCatalog:
    """Get the product catalog singleton.

    Returns:
        Current catalog; the sample catalog until one is loaded.
    """
    global _product_catalog
    if _product_catalog is None:
        _product_catalog = ProductCatalog.sample()
    return _product_catalog


def set_product_catalog(catalog: ProductCatalog | None) -> None:
    """Replace the product catalog singleton.

    Args:
        catalog: New catalog, or None to fall back to the sample catalog.
    """
    global _product_catalog
    _product_catalog = catalog
