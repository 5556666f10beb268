"""Built-in catalog data.

The store is reseeded from this list on every startup; nothing is
persisted across restarts.
"""

from product_catalog.domain import ProductRecord

FOLD_DESCRIPTION = "The ultimate foldable powered by Galaxy AI"
FLIP_DESCRIPTION = "The power of Galaxy AI right in your pocket"
ULTRA_DESCRIPTION = "The new era of AI-enhanced smartphones"
WATCH_DESCRIPTION = "Galaxy AI is here"

# (name, description, price in cents)
SEED_PRODUCTS: list[tuple[str, str, int]] = [
    ("Galaxy Z Fold6", FOLD_DESCRIPTION, 189999),
    ("Galaxy Z Flip6", FLIP_DESCRIPTION, 110000),
    ("Galaxy S24 Ultra", ULTRA_DESCRIPTION, 129900),
    ("Galaxy Watch Ultra", WATCH_DESCRIPTION, 64999),
    ("Galaxy Z Fold7", FOLD_DESCRIPTION, 189999),
    ("Galaxy Z Flip7", FLIP_DESCRIPTION, 110000),
    ("Galaxy S25 Ultra", ULTRA_DESCRIPTION, 129900),
    ("Galaxy Watch Ultra 2", WATCH_DESCRIPTION, 64999),
    ("Galaxy S26 Ultra", ULTRA_DESCRIPTION, 129900),
    ("Galaxy Watch Ultra 3", WATCH_DESCRIPTION, 64999),
    ("Galaxy Z Fold8", FOLD_DESCRIPTION, 189999),
    ("Galaxy Z Flip9", FLIP_DESCRIPTION, 110000),
    ("Galaxy S27 Ultra", ULTRA_DESCRIPTION, 129900),
    ("Galaxy Watch Ultra 4", WATCH_DESCRIPTION, 64999),
    ("Galaxy Z Fold9", FOLD_DESCRIPTION, 189999),
    ("Galaxy Z Flip9", FLIP_DESCRIPTION, 110000),
    ("Galaxy S28 Ultra", ULTRA_DESCRIPTION, 129900),
    ("Galaxy Watch Ultra 5", WATCH_DESCRIPTION, 64999),
    ("Galaxy S29 Ultra", ULTRA_DESCRIPTION, 129900),
]


def seed_records() -> list[ProductRecord]:
    """Build the seed records with identifiers 1..N in list order."""
    return [
        ProductRecord(id=i, name=name, description=description, price_cents=price)
        for i, (name, description, price) in enumerate(SEED_PRODUCTS, start=1)
    ]
