"""FastAPI dependencies shared by the routers."""

import re

from fastapi import HTTPException, Request, status

from product_catalog.catalog import CatalogService

_ID_PATTERN = re.compile(r"[+-]?[0-9]+")
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1


def get_catalog(request: Request) -> CatalogService:
    """Get the catalog service owned by the running application."""
    return request.app.state.catalog


def parse_product_id(product_id: str) -> int:
    """Parse the ``product_id`` path parameter as a base-10 int64.

    Raises:
        HTTPException: 400 if the value is not a base-10 integer that
            fits in 64 bits.
    """
    if _ID_PATTERN.fullmatch(product_id):
        value = int(product_id, 10)
        if _INT64_MIN <= value <= _INT64_MAX:
            return value
    raise HTTPException(
        status_code=status.HTTP_400_BAD_REQUEST,
        detail={
            "error_code": "INVALID_PRODUCT_ID",
            "message": "Invalid Product ID",
        },
    )
