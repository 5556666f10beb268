"""Catalog core: record store, conversion layer and pagination."""

from product_catalog.catalog.pagination import Page, paginate, parse_positive_int
from product_catalog.catalog.schemas import ProductView
from product_catalog.catalog.service import CatalogService
from product_catalog.catalog.store import ProductStore

__all__ = [
    "CatalogService",
    "Page",
    "ProductStore",
    "ProductView",
    "paginate",
    "parse_positive_int",
]
