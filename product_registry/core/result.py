"""Discriminated result returned by every registry operation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

from product_registry.core.errors import ErrorCode, RegistryError

T = TypeVar("T")


@dataclass(frozen=True)
class RegistryResult(Generic[T]):
    """Success carrying a value, or failure carrying an ``ErrorCode``.

    Domain failures are values, not exceptions: callers branch on ``ok``.
    """

    ok: bool
    value: T | None = None
    error: ErrorCode | None = None

    @classmethod
    def success(cls, value: T) -> RegistryResult[T]:
        return cls(ok=True, value=value)

    @classmethod
    def failure(cls, error: ErrorCode) -> RegistryResult[T]:
        return cls(ok=False, error=error)

    def unwrap(self) -> T:
        """Return the value or raise ``RegistryError`` for a failure."""
        if self.error is not None:
            raise RegistryError(self.error)
        return self.value  # type: ignore[return-value]
