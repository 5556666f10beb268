"""In-memory product store.

Holds product records in insertion order together with the counter
used to assign identifiers. One lock guards every operation, so
request handlers running on different threads never observe or
produce a half-applied change.
"""

import threading
from collections.abc import Iterable

import structlog

from product_catalog.domain import ProductDraft, ProductNotFoundError, ProductRecord

logger = structlog.get_logger()


class ProductStore:
    """Ordered, lock-guarded collection of product records.

    Identifiers come from a counter that only moves forward: a record
    takes the current counter value, then the counter is incremented.
    Deleting a record never gives its identifier back.
    """

    def __init__(self, records: Iterable[ProductRecord] = ()) -> None:
        """Initialize product store.

        Args:
            records: Initial records, kept in the given order.
        """
        self._lock = threading.Lock()
        self._products: list[ProductRecord] = []
        self._next_id = 1
        self.reset(records)

    @property
    def next_id(self) -> int:
        """Identifier the next created record will receive."""
        with self._lock:
            return self._next_id

    def reset(self, records: Iterable[ProductRecord] = ()) -> None:
        """Replace the whole content of the store.

        The counter moves to right after the highest seeded identifier,
        but never backwards: identifiers handed out earlier stay retired.

        Args:
            records: Records to load, kept in the given order.
        """
        records = list(records)
        with self._lock:
            self._products = records
            highest = max((r.id for r in records), default=0)
            self._next_id = max(self._next_id, highest + 1)

    def count(self) -> int:
        """Number of live records."""
        with self._lock:
            return len(self._products)

    def create(self, draft: ProductDraft) -> ProductRecord:
        """Store a new record with a freshly assigned identifier.

        Args:
            draft: Fields of the new product.

        Returns:
            The stored record.
        """
        with self._lock:
            record = ProductRecord.from_draft(self._next_id, draft)
            self._next_id += 1
            self._products.append(record)

        logger.info("Product created", product_id=record.id, name=record.name)
        return record

    def get_by_id(self, product_id: int) -> ProductRecord:
        """Get record by identifier.

        Args:
            product_id: Record identifier.

        Returns:
            The first record carrying the identifier.

        Raises:
            ProductNotFoundError: If no live record has the identifier.
        """
        with self._lock:
            return self._products[self._index_of(product_id)]

    def list_all(self) -> list[ProductRecord]:
        """Snapshot of all records in insertion order."""
        with self._lock:
            return list(self._products)

    def update(self, product_id: int, draft: ProductDraft) -> ProductRecord:
        """Replace a record's fields in place.

        The record keeps its identifier and its position.

        Args:
            product_id: Record identifier.
            draft: New fields.

        Returns:
            The updated record.

        Raises:
            ProductNotFoundError: If no live record has the identifier.
        """
        with self._lock:
            index = self._index_of(product_id)
            record = self._products[index].with_draft(draft)
            self._products[index] = record

        logger.info("Product updated", product_id=record.id, name=record.name)
        return record

    def delete(self, product_id: int) -> str:
        """Remove a record.

        Args:
            product_id: Record identifier.

        Returns:
            Name of the removed record.

        Raises:
            ProductNotFoundError: If no live record has the identifier.
        """
        with self._lock:
            record = self._products.pop(self._index_of(product_id))

        logger.info("Product deleted", product_id=record.id, name=record.name)
        return record.name

    def _index_of(self, product_id: int) -> int:
        # Caller must hold the lock.
        for index, record in enumerate(self._products):
            if record.id == product_id:
                return index
        raise ProductNotFoundError(product_id)
