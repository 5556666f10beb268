"""Product catalog API main application module.

This module initializes the FastAPI application and configures
middleware, routers, exception handlers and startup/shutdown events.
"""

from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator

import structlog
from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from product_catalog.api.health import router as health_router
from product_catalog.api.middleware import setup_middleware
from product_catalog.api.products import router as products_router
from product_catalog.catalog import CatalogService, ProductStore
from product_catalog.catalog.seed import seed_records
from product_catalog.infrastructure.config import settings
from product_catalog.infrastructure.logging_config import configure_logging

logger = structlog.get_logger()

PARSE_ERROR_MESSAGE = "Bad request, failed to parse JSON"
FIELD_ERROR_MESSAGES = {
    "name": (
        "Bad request, 'name' field required and shouldn't contains "
        "<>\"'\\%&*:;?@^{}[]~$=!|, symbols"
    ),
    "description": (
        "Bad request, 'description' field required and shouldn't contains "
        "<>\"'\\*?@^{}[]~=!| symbols"
    ),
    "price": "Bad request, 'price' field required and should be larger than 0",
}


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Handle application startup and shutdown events.

    A fresh store is built on every startup; nothing survives a restart.

    Args:
        app: The FastAPI application instance.

    Yields:
        None after startup, cleanup happens after yield.
    """
    configure_logging(settings.log_level, settings.log_json)

    records = seed_records() if settings.seed_catalog else []
    app.state.catalog = CatalogService(ProductStore(records))

    logger.info(
        "Starting product catalog API",
        version=settings.api_version,
        debug=settings.debug,
        product_count=len(records),
    )

    yield

    logger.info("Shutting down product catalog API")


app = FastAPI(
    title="Product Catalog API",
    description="In-memory product catalog with CRUD and paginated listing",
    version=settings.api_version,
    lifespan=lifespan,
    debug=settings.debug,
)

setup_middleware(app, settings)

app.include_router(health_router)
app.include_router(products_router)


# ============================================================================
# Custom Exception Handlers
# ============================================================================


def _error_content(
    request: Request, error_code: str, message: str, details: list[Any]
) -> dict[str, Any]:
    return {
        "error_code": error_code,
        "message": message,
        "details": details,
        "request_id": getattr(request.state, "request_id", None),
    }


def _validation_message(errors: list[dict[str, Any]]) -> str:
    """Pick the message for the first field that failed validation."""
    for error in errors:
        if error.get("type") == "json_invalid":
            return PARSE_ERROR_MESSAGE
        loc = error.get("loc", ())
        if len(loc) > 1 and loc[0] == "body" and loc[1] in FIELD_ERROR_MESSAGES:
            return FIELD_ERROR_MESSAGES[loc[1]]
    return PARSE_ERROR_MESSAGE


@app.exception_handler(HTTPException)
async def http_exception_handler(request: Request, exc: HTTPException):
    """Handle HTTP exceptions with consistent format."""
    detail = exc.detail
    if isinstance(detail, dict):
        error_code = detail.get("error_code", "ERROR")
        message = detail.get("message", str(detail))
        details = detail.get("details", [])
    else:
        error_code = "ERROR"
        message = str(detail)
        details = []

    return JSONResponse(
        status_code=exc.status_code,
        content=_error_content(request, error_code, message, details),
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Report body validation failures as 400 with a per-field message."""
    errors = exc.errors()
    message = _validation_message(errors)
    logger.warning("Request validation failed", path=request.url.path, message=message)

    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=_error_content(
            request,
            "VALIDATION_ERROR",
            message,
            [
                {"loc": list(e.get("loc", ())), "msg": e.get("msg", "")}
                for e in errors
            ],
        ),
    )
