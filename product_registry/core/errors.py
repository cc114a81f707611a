"""Error taxonomy for registry operations.

Numeric values match the error codes of the on-chain contract so results
stay comparable with transaction receipts.
"""

from enum import IntEnum


class ErrorCode(IntEnum):
    """Failure kinds reported by registry operations."""

    NOT_AUTHORIZED = 100
    INVALID_PRODUCT_NAME = 101
    INVALID_MAX_QUANTITY = 102
    INVALID_ORIGIN = 103
    INVALID_BATCH_ID = 104
    INVALID_DESCRIPTION = 105
    PRODUCT_ALREADY_EXISTS = 106
    NOT_FOUND = 107
    AUTHORITY_NOT_VERIFIED = 109
    INVALID_MIN_QUANTITY = 110
    INVALID_EXPIRY = 111
    INVALID_UPDATE_PARAM = 113
    MAX_PRODUCTS_EXCEEDED = 114
    INVALID_PRODUCT_TYPE = 115
    INVALID_CATEGORY = 116
    INVALID_LOCATION = 117
    INVALID_CURRENCY = 118
    INVALID_HASH = 120
    INVALID_WEIGHT = 121
    INVALID_DIMENSIONS = 122
    INVALID_MATERIAL = 123
    INVALID_CERTIFICATION = 124
    INVALID_AUTHORITY_IDENTITY = 125
    AUTHORITY_ALREADY_BOUND = 126
    FEE_TRANSFER_FAILED = 127

    @property
    def is_field_error(self) -> bool:
        """True for the per-field validation kinds of the create path."""
        return self.name.startswith("INVALID_") and self not in _NON_FIELD_KINDS


_NON_FIELD_KINDS = frozenset(
    {ErrorCode.INVALID_UPDATE_PARAM, ErrorCode.INVALID_AUTHORITY_IDENTITY}
)


class RegistryError(Exception):
    """Raised by ``RegistryResult.unwrap`` when an operation failed."""

    def __init__(self, code: ErrorCode, message: str | None = None) -> None:
        self.code = code
        super().__init__(message or f"{code.name} ({int(code)})")
