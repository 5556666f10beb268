"""Pagination over the catalog's enumeration order."""

import math
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Generic, TypeVar

from product_catalog.domain import PageOutOfRangeError

S = TypeVar("S")
T = TypeVar("T")


@dataclass
class Page(Generic[T]):
    """One window of a paginated listing.

    Attributes:
        page: Requested page number (1-based).
        limit: Requested page size.
        total_length: Number of records in the whole listing.
        items: Records of this window.
    """

    page: int
    limit: int
    total_length: int
    items: list[T]

    @property
    def total_returned(self) -> int:
        """Number of items in this window."""
        return len(self.items)

    @property
    def total_pages(self) -> int:
        """Number of pages needed to list every record."""
        return math.ceil(self.total_length / self.limit)


def paginate(
    records: Sequence[S],
    page: int,
    limit: int,
    convert: Callable[[S], T],
) -> Page[T]:
    """Cut one window out of ``records``.

    The window starts at ``(page - 1) * limit`` and holds
    ``min(limit, total - offset)`` items, so the last page is partial
    only when the total is not a multiple of ``limit``. A window that
    starts exactly at the end is empty; one that starts past it is an
    error.

    Args:
        records: Full listing in enumeration order.
        page: Page number (1-based, positive).
        limit: Page size (positive).
        convert: Applied to each record of the window.

    Returns:
        The requested page.

    Raises:
        PageOutOfRangeError: If the window starts past the last record.
    """
    total = len(records)
    offset = (page - 1) * limit
    if offset > total:
        raise PageOutOfRangeError(page=page, limit=limit, total=total)

    length = min(limit, total - offset)
    window = records[offset : offset + length]
    return Page(
        page=page,
        limit=limit,
        total_length=total,
        items=[convert(record) for record in window],
    )


def parse_positive_int(raw: str | None, default: int) -> int:
    """Parse a query value, falling back to ``default``.

    Missing, non-numeric and non-positive values are replaced rather
    than rejected.
    """
    if raw is None or raw == "":
        return default
    try:
        value = int(raw, 10)
    except ValueError:
        return default
    return value if value > 0 else default
