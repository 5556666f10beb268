"""Run the catalog API with uvicorn: ``python -m product_catalog``."""

import uvicorn

from product_catalog.infrastructure.config import settings


def main() -> None:
    uvicorn.run(
        "product_catalog.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
