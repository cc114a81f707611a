"""FastAPI application entry point.

Exposes the product registry to the surrounding service layer. Caller
identity travels in the ``X-Caller`` header.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from product_registry import __version__
from product_registry.api.errors import http_status_for
from product_registry.api.routes import authority_router, health_router, products_router
from product_registry.config import settings
from product_registry.core.errors import RegistryError
from product_registry.infra.logging import caller_context, get_logger, setup_logging
from product_registry.schemas.common import ErrorResponse
from product_registry.services.registry import get_product_registry

# Setup logging first
setup_logging()
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler.

    Startup:
    - Build the registry from settings

    Shutdown:
    - Log final product count
    """
    logger.info("Product registry service starting", environment=settings.environment)

    if getattr(app.state, "registry", None) is None:
        app.state.registry = get_product_registry()

    yield

    logger.info(
        "Product registry service shutting down",
        product_count=app.state.registry.get_product_count().value,
    )


app = FastAPI(
    title="Product Registry",
    description="Registry of immutable product records with provenance metadata",
    version=__version__,
    lifespan=lifespan,
    docs_url="/docs" if settings.environment == "dev" else None,
    redoc_url=None,
)

# CORS middleware (mainly for local development)
if settings.environment == "dev":
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )


@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log incoming requests with the caller bound to every event."""
    caller = request.headers.get("X-Caller", "")
    with caller_context(caller):
        logger.debug("Request received", method=request.method, path=request.url.path)
        return await call_next(request)


# =============================================================================
# Exception Handlers
# =============================================================================


@app.exception_handler(RegistryError)
async def registry_error_handler(request: Request, exc: RegistryError) -> JSONResponse:
    """Translate registry failures into structured error responses."""
    body = ErrorResponse(
        error=str(exc),
        error_type=exc.code.name,
        detail={"code": int(exc.code)},
    )
    return JSONResponse(status_code=http_status_for(exc.code), content=body.model_dump())


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle uncaught exceptions."""
    logger.error(
        "Unhandled exception",
        error=str(exc),
        error_type=type(exc).__name__,
        path=request.url.path,
        exc_info=True,
    )

    return JSONResponse(
        status_code=500,
        content={
            "success": False,
            "error": "Internal server error",
            "error_type": type(exc).__name__,
        },
    )


# =============================================================================
# Include Routers
# =============================================================================

app.include_router(health_router, tags=["Health"])
app.include_router(authority_router, tags=["Configuration"])
app.include_router(products_router, prefix="/products", tags=["Products"])
