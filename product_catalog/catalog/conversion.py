"""Mapping between the external view and the stored record.

Both directions are pure; field content is validated before it
reaches this module.
"""

from product_catalog.catalog.schemas import ProductView
from product_catalog.domain import Money, ProductDraft, ProductRecord


def to_draft(view: ProductView) -> ProductDraft:
    """Convert an external view to a storage payload.

    Any identifier carried by the view is ignored; the store assigns
    identifiers on create and keeps the existing one on update.
    """
    return ProductDraft(
        name=view.name,
        description=view.description,
        price=Money.from_decimal(view.price),
    )


def to_view(record: ProductRecord) -> ProductView:
    """Convert a stored record to its external view."""
    return ProductView(
        id=record.id,
        name=record.name,
        description=record.description,
        price=record.price.to_decimal(),
    )
