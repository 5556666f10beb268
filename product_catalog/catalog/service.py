"""Catalog service for product operations.

High-level service that combines the store, the conversion layer and
the pagination engine into the operations exposed to the API.
"""

from product_catalog.catalog.conversion import to_draft, to_view
from product_catalog.catalog.pagination import Page, paginate
from product_catalog.catalog.schemas import ProductView
from product_catalog.catalog.store import ProductStore


class CatalogService:
    """Service for catalog operations.

    Example usage:
        service = CatalogService(ProductStore(seed_records()))

        created = service.create(
            ProductView(name="X", description="Y", price=Decimal("19.99"))
        )
        page = service.list_paginated(page=1, limit=5)
    """

    def __init__(self, store: ProductStore) -> None:
        """Initialize service.

        Args:
            store: Store holding the catalog's records.
        """
        self.store = store

    def create(self, view: ProductView) -> ProductView:
        """Create a product; the identifier is always server-assigned."""
        return to_view(self.store.create(to_draft(view)))

    def get_by_id(self, product_id: int) -> ProductView:
        """Get a product by identifier.

        Raises:
            ProductNotFoundError: If the product does not exist.
        """
        return to_view(self.store.get_by_id(product_id))

    def list_all(self) -> list[ProductView]:
        """List every product in insertion order."""
        return [to_view(record) for record in self.store.list_all()]

    def list_paginated(self, page: int, limit: int) -> Page[ProductView]:
        """List one page of products.

        The page is cut from a single snapshot of the store.

        Raises:
            PageOutOfRangeError: If the page starts past the last product.
        """
        return paginate(self.store.list_all(), page, limit, to_view)

    def update(self, product_id: int, view: ProductView) -> ProductView:
        """Replace a product's name, description and price.

        Raises:
            ProductNotFoundError: If the product does not exist.
        """
        return to_view(self.store.update(product_id, to_draft(view)))

    def delete(self, product_id: int) -> str:
        """Delete a product and return its name.

        Raises:
            ProductNotFoundError: If the product does not exist.
        """
        return self.store.delete(product_id)

    def stats(self) -> dict[str, int]:
        """Store statistics."""
        return {
            "product_count": self.store.count(),
            "next_id": self.store.next_id,
        }
