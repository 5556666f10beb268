"""Domain entities for the product catalog.

``ProductRecord`` is the stored form of a product: integer identifier
and price in cents. ``ProductDraft`` carries the same fields minus the
identifier, which only the store may assign.
"""

from dataclasses import dataclass, replace

from product_catalog.domain.base import Entity, ValueObject
from product_catalog.domain.value_objects import Money


@dataclass(frozen=True)
class ProductDraft(ValueObject):
    """Storage payload for a product that has no identifier yet.

    Attributes:
        name: Product name.
        description: Product description.
        price: Product price.
    """

    name: str
    description: str
    price: Money


@dataclass(frozen=True, eq=False)
class ProductRecord(Entity[int]):
    """A stored product.

    The identifier is assigned once by the store and never changes;
    equality and hashing follow the identifier only.

    Attributes:
        id: Store-assigned identifier.
        name: Product name.
        description: Product description.
        price_cents: Price in cents.
    """

    name: str
    description: str
    price_cents: int

    @classmethod
    def from_draft(cls, product_id: int, draft: ProductDraft) -> "ProductRecord":
        """Build a record from a draft and an assigned identifier."""
        return cls(
            id=product_id,
            name=draft.name,
            description=draft.description,
            price_cents=draft.price.amount_cents,
        )

    @property
    def price(self) -> Money:
        return Money(amount_cents=self.price_cents)

    def with_draft(self, draft: ProductDraft) -> "ProductRecord":
        """Return a copy carrying the draft's fields and this record's id."""
        return replace(
            self,
            name=draft.name,
            description=draft.description,
            price_cents=draft.price.amount_cents,
        )
