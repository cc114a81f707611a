"""Domain models for the product registry."""

from product_registry.models.product import (
    CURRENCIES,
    PRODUCT_TYPES,
    Currency,
    Product,
    ProductDraft,
    ProductType,
    ProductUpdate,
)

__all__ = [
    "CURRENCIES",
    "PRODUCT_TYPES",
    "Currency",
    "Product",
    "ProductDraft",
    "ProductType",
    "ProductUpdate",
]
