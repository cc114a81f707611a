"""Pydantic schemas for request/response validation."""

from product_registry.schemas.common import ErrorResponse, HealthResponse, OperationResult
from product_registry.schemas.product import (
    AuthorityRequest,
    AuthorityVerifiedResponse,
    FeeRequest,
    ProductCountResponse,
    ProductCreatedResponse,
    ProductCreateRequest,
    ProductExistsResponse,
    ProductResponse,
    ProductUpdateRequest,
    ProductUpdateResponse,
)

__all__ = [
    "AuthorityRequest",
    "AuthorityVerifiedResponse",
    "ErrorResponse",
    "FeeRequest",
    "HealthResponse",
    "OperationResult",
    "ProductCountResponse",
    "ProductCreatedResponse",
    "ProductCreateRequest",
    "ProductExistsResponse",
    "ProductResponse",
    "ProductUpdateRequest",
    "ProductUpdateResponse",
]
