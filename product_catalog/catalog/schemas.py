"""External representation of catalog products.

``ProductView`` is what callers send and receive: the price is a
decimal amount in major units, rendered with exactly two fractional
digits, and the identifier is only present on responses.
"""

from decimal import Decimal
from typing import Any

from pydantic import BaseModel, Field, field_serializer, field_validator

from product_catalog.domain import format_amount


class ProductView(BaseModel):
    """Product as exchanged with API callers."""

    id: int | None = Field(None, description="Server-assigned product ID")
    name: str = Field(..., description="Product name")
    description: str = Field(..., description="Product description")
    price: Decimal = Field(..., description="Price in major units, e.g. 1299.00")

    @field_validator("price", mode="before")
    @classmethod
    def price_from_float(cls, v: Any) -> Any:
        # JSON numbers arrive as floats; go through the shortest repr so
        # 19.99 becomes Decimal("19.99") and not its binary approximation.
        if isinstance(v, float):
            return Decimal(str(v))
        return v

    @field_serializer("price")
    def serialize_price(self, price: Decimal) -> str:
        return format_amount(price)
