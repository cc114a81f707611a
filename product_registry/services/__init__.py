"""Services - product registry."""

from product_registry.services.registry import (
    ProductRegistry,
    create_registry_from_settings,
    get_product_registry,
)

__all__ = ["ProductRegistry", "create_registry_from_settings", "get_product_registry"]
