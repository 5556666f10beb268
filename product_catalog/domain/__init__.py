"""Domain layer - Entities, value objects and domain exceptions.

This module exports the core domain building blocks:

- **Entities**: Objects with identity (ProductRecord)
- **Value Objects**: Immutable objects compared by value (Money, ProductDraft)
- **Exceptions**: Domain-specific errors (ProductNotFoundError, PageOutOfRangeError)

Example usage:
    from product_catalog.domain import Money, ProductDraft

    draft = ProductDraft(
        name="Galaxy Z Fold6",
        description="The ultimate foldable powered by Galaxy AI",
        price=Money.from_float(1899.99),
    )
    print(draft.price)  # 1899.99
"""

from product_catalog.domain.base import Entity, ValueObject
from product_catalog.domain.entities import ProductDraft, ProductRecord
from product_catalog.domain.exceptions import (
    CatalogError,
    DomainError,
    MoneyError,
    NegativeMoneyError,
    PageOutOfRangeError,
    ProductNotFoundError,
)
from product_catalog.domain.value_objects import (
    Money,
    format_amount,
    to_decimal,
    to_minor_units,
)

__all__ = [
    # Base
    "Entity",
    "ValueObject",
    # Entities
    "ProductDraft",
    "ProductRecord",
    # Value objects
    "Money",
    "format_amount",
    "to_decimal",
    "to_minor_units",
    # Exceptions
    "CatalogError",
    "DomainError",
    "MoneyError",
    "NegativeMoneyError",
    "PageOutOfRangeError",
    "ProductNotFoundError",
]
