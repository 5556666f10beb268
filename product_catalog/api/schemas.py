"""Pydantic schemas for the catalog API.

Request schemas carry the field-level validation rules; response
schemas define the JSON envelopes returned by the endpoints.
"""

from decimal import Decimal
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from product_catalog.catalog.schemas import ProductView

NAME_FORBIDDEN_CHARS = "<>\"'\\%&*:;?@^{}[]~$=!|,"
DESCRIPTION_FORBIDDEN_CHARS = "<>\"'\\*?@^{}[]~=!|"

# Largest price whose cents still fit in a signed 64-bit integer.
MAX_PRICE = Decimal("92233720368547758.07")


def _reject_chars(value: str, forbidden: str) -> str:
    if any(ch in forbidden for ch in value):
        raise ValueError(f"must not contain any of {forbidden}")
    return value


# ============================================================================
# Request Schemas
# ============================================================================


class ProductRequest(ProductView):
    """Body of create and update requests.

    An ``id`` may be sent but is ignored; the server owns identifiers.
    """

    name: str = Field(..., min_length=1, description="Product name")
    description: str = Field(..., min_length=1, description="Product description")
    price: Decimal = Field(
        ...,
        gt=0,
        le=MAX_PRICE,
        description="Price in major units, e.g. 1299.00",
    )

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        return _reject_chars(v, NAME_FORBIDDEN_CHARS)

    @field_validator("description")
    @classmethod
    def validate_description(cls, v: str) -> str:
        return _reject_chars(v, DESCRIPTION_FORBIDDEN_CHARS)


# ============================================================================
# Response Schemas
# ============================================================================


class MessageResponse(BaseModel):
    """Plain confirmation message."""

    message: str


class ProductMutationResponse(BaseModel):
    """Confirmation message plus the product as stored."""

    message: str
    product: ProductView


class PaginatedProductsResponse(BaseModel):
    """One page of products with listing metadata.

    Serialized with camelCase keys; the products are under
    ``productsData``.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    page: int
    total_returned_data: int
    total_length: int
    total_pages: int
    products_data: list[ProductView]


class ErrorResponse(BaseModel):
    """Error envelope shared by every error response."""

    error_code: str
    message: str
    details: list[Any] = Field(default_factory=list)
    request_id: str | None = None


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    service: str
    version: str


class StatsResponse(BaseModel):
    """Store statistics response."""

    product_count: int
    next_id: int
