"""Product API endpoints.

Provides CRUD and listing endpoints for the catalog.
"""

from typing import Annotated

import structlog
from fastapi import APIRouter, Depends, HTTPException, Query, status

from product_catalog.api.dependencies import get_catalog, parse_product_id
from product_catalog.api.schemas import (
    ErrorResponse,
    MessageResponse,
    PaginatedProductsResponse,
    ProductMutationResponse,
    ProductRequest,
)
from product_catalog.catalog import CatalogService, ProductView, parse_positive_int
from product_catalog.domain import PageOutOfRangeError, ProductNotFoundError
from product_catalog.infrastructure.config import settings

logger = structlog.get_logger()

router = APIRouter(prefix="/api", tags=["Products"])

Catalog = Annotated[CatalogService, Depends(get_catalog)]
ProductId = Annotated[int, Depends(parse_product_id)]


def _not_found(exc: ProductNotFoundError) -> HTTPException:
    logger.warning("Product not found", product_id=exc.product_id)
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail={
            "error_code": "PRODUCT_NOT_FOUND",
            "message": exc.message,
        },
    )


def require_product(product_id: ProductId, catalog: Catalog) -> int:
    """Resolve the path ID to an existing product.

    Runs before the request body is validated, so an unknown product is
    reported as 404 even when the body is invalid.
    """
    try:
        catalog.get_by_id(product_id)
    except ProductNotFoundError as e:
        raise _not_found(e)
    return product_id


ExistingProductId = Annotated[int, Depends(require_product)]


@router.post(
    "/products",
    response_model=ProductMutationResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}},
)
async def create_product(
    request: ProductRequest,
    catalog: Catalog,
) -> ProductMutationResponse:
    """Create a product.

    The identifier is assigned by the server; an ``id`` in the body is
    ignored.
    """
    product = catalog.create(request)
    return ProductMutationResponse(
        message=f"{product.name} successfully created",
        product=product,
    )


@router.get(
    "/products/{product_id}",
    response_model=ProductView,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def get_product(product_id: ProductId, catalog: Catalog) -> ProductView:
    """Get product details by ID.

    Raises:
        HTTPException: If the ID is malformed or the product not found.
    """
    try:
        return catalog.get_by_id(product_id)
    except ProductNotFoundError as e:
        raise _not_found(e)


@router.get("/products-all", response_model=list[ProductView])
async def list_all_products(catalog: Catalog) -> list[ProductView]:
    """List every product, unpaginated, in insertion order."""
    return catalog.list_all()


@router.get(
    "/products",
    response_model=PaginatedProductsResponse,
    responses={404: {"model": ErrorResponse}},
)
async def list_products(
    catalog: Catalog,
    page: Annotated[str | None, Query()] = None,
    limit: Annotated[str | None, Query()] = None,
) -> PaginatedProductsResponse:
    """List products one page at a time.

    Missing, non-numeric or non-positive ``page`` and ``limit`` values
    fall back to the configured defaults.

    Raises:
        HTTPException: If the page starts past the last product.
    """
    page_number = parse_positive_int(page, settings.default_page)
    page_size = parse_positive_int(limit, settings.default_page_size)

    try:
        result = catalog.list_paginated(page_number, page_size)
    except PageOutOfRangeError as e:
        logger.warning("Page out of range", **e.details)
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail={
                "error_code": "INVALID_PAGE",
                "message": e.message,
            },
        )

    return PaginatedProductsResponse(
        page=result.page,
        total_returned_data=result.total_returned,
        total_length=result.total_length,
        total_pages=result.total_pages,
        products_data=result.items,
    )


@router.put(
    "/products/{product_id}",
    response_model=ProductMutationResponse,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def update_product(
    product_id: ExistingProductId,
    request: ProductRequest,
    catalog: Catalog,
) -> ProductMutationResponse:
    """Replace a product's name, description and price.

    Raises:
        HTTPException: If the ID is malformed or the product not found.
    """
    try:
        product = catalog.update(product_id, request)
    except ProductNotFoundError as e:
        raise _not_found(e)

    return ProductMutationResponse(
        message=f"{product.name} successfully updated",
        product=product,
    )


@router.delete(
    "/products/{product_id}",
    response_model=MessageResponse,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def delete_product(product_id: ProductId, catalog: Catalog) -> MessageResponse:
    """Delete a product.

    Raises:
        HTTPException: If the ID is malformed or the product not found.
    """
    try:
        name = catalog.delete(product_id)
    except ProductNotFoundError as e:
        raise _not_found(e)

    return MessageResponse(message=f"{name} successfully deleted")
