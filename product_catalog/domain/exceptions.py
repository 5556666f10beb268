"""Domain exceptions.

All domain-level errors raised by the catalog core. They are
recoverable, caller-visible conditions; the API layer maps them to
HTTP responses.
"""

from typing import Any


class DomainError(Exception):
    """Base class for all domain exceptions.

    All domain errors should inherit from this class to allow
    catching domain-specific errors at the API layer.
    """

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """Initialize domain error.

        Args:
            message: Human-readable error message.
            details: Optional dictionary with additional error context.
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}


# ============================================================================
# Catalog Errors
# ============================================================================


class CatalogError(DomainError):
    """Base class for catalog-related errors."""

    pass


class ProductNotFoundError(CatalogError):
    """Raised when no live record carries the requested identifier."""

    def __init__(self, product_id: int) -> None:
        """Initialize product not found error.

        Args:
            product_id: The identifier that was looked up.
        """
        super().__init__(
            f"Product with ID={product_id} not found",
            details={"product_id": product_id},
        )
        self.product_id = product_id


class PageOutOfRangeError(CatalogError):
    """Raised when a page starts beyond the end of the catalog."""

    def __init__(self, page: int, limit: int, total: int) -> None:
        """Initialize page out of range error.

        Args:
            page: Requested page number.
            limit: Requested page size.
            total: Number of records available.
        """
        super().__init__(
            "Invalid page",
            details={"page": page, "limit": limit, "total": total},
        )
        self.page = page
        self.limit = limit
        self.total = total


# ============================================================================
# Money Errors
# ============================================================================


class MoneyError(DomainError):
    """Base class for money-related errors."""

    pass


class NegativeMoneyError(MoneyError):
    """Raised when attempting to create money with negative amount."""

    def __init__(self, amount: int) -> None:
        """Initialize negative money error.

        Args:
            amount: The negative amount in cents.
        """
        super().__init__(
            f"Money amount cannot be negative: {amount}",
            details={"amount": amount},
        )
