"""Core module - errors, results, collaborators, state and validation."""

from product_registry.core.collaborators import (
    AuthorityVerifier,
    BlockClock,
    Clock,
    FeeSettlement,
    FeeTransfer,
    RecordingSettlement,
    Resettable,
    StaticAuthorityVerifier,
    WallClock,
)
from product_registry.core.errors import ErrorCode, RegistryError
from product_registry.core.result import RegistryResult
from product_registry.core.state import RegistryState
from product_registry.core.validation import validate_draft, validate_update_params

__all__ = [
    "AuthorityVerifier",
    "BlockClock",
    "Clock",
    "ErrorCode",
    "FeeSettlement",
    "FeeTransfer",
    "RecordingSettlement",
    "RegistryError",
    "RegistryResult",
    "RegistryState",
    "Resettable",
    "StaticAuthorityVerifier",
    "WallClock",
    "validate_draft",
    "validate_update_params",
]
