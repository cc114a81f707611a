"""API routes module."""

from product_registry.api.routes.authority import router as authority_router
from product_registry.api.routes.health import router as health_router
from product_registry.api.routes.products import router as products_router

__all__ = ["authority_router", "health_router", "products_router"]
