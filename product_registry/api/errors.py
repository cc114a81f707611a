"""Mapping of registry error codes to HTTP responses."""

from fastapi import status

from product_registry.core.errors import ErrorCode

_STATUS_BY_CODE: dict[ErrorCode, int] = {
    ErrorCode.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.NOT_AUTHORIZED: status.HTTP_403_FORBIDDEN,
    ErrorCode.AUTHORITY_NOT_VERIFIED: status.HTTP_403_FORBIDDEN,
    ErrorCode.PRODUCT_ALREADY_EXISTS: status.HTTP_409_CONFLICT,
    ErrorCode.AUTHORITY_ALREADY_BOUND: status.HTTP_409_CONFLICT,
    ErrorCode.MAX_PRODUCTS_EXCEEDED: status.HTTP_409_CONFLICT,
    ErrorCode.FEE_TRANSFER_FAILED: status.HTTP_402_PAYMENT_REQUIRED,
}


def http_status_for(code: ErrorCode) -> int:
    """HTTP status for a registry error; field errors map to 422."""
    return _STATUS_BY_CODE.get(code, status.HTTP_422_UNPROCESSABLE_ENTITY)
