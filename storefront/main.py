"""Storefront catalog API application.

Wires logging, middleware, exception handlers and the catalog routers
into one FastAPI app. Run it with any ASGI server, e.g.
``uvicorn storefront.main:app``.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from storefront.api.categories import router as categories_router
from storefront.api.errors import setup_exception_handlers
from storefront.api.health import router as health_router
from storefront.api.middleware import setup_middleware
from storefront.api.products import router as products_router
from storefront.infrastructure.config import settings
from storefront.infrastructure.database import engine
from storefront.infrastructure.logging import configure_logging

configure_logging(settings.log_level)

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Log startup and release pooled connections on shutdown."""
    logger.info(
        "Catalog API starting",
        version=settings.api_version,
        debug=settings.debug,
        default_page_limit=settings.default_page_limit,
        max_page_limit=settings.max_page_limit,
    )
    yield
    logger.info("Catalog API stopping")
    await engine.dispose()


app = FastAPI(
    title="Storefront Catalog API",
    description="Product catalog with filtering, sorting and pagination",
    version=settings.api_version,
    lifespan=lifespan,
)

# Read-only storefront plus the admin create and update routes
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["GET", "POST", "PATCH"],
    allow_headers=["*"],
    expose_headers=["X-Request-ID"],
)
setup_middleware(app)
setup_exception_handlers(app)

app.include_router(health_router, tags=["Health"])
app.include_router(products_router)
app.include_router(categories_router)
