"""External collaborators consumed by the registry.

The registry only depends on the protocols below. The in-process
implementations back the HTTP service and the test suite; a host that
settles fees on a ledger plugs in its own.
"""

import time
from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from product_registry.infra.logging import get_logger

logger = get_logger(__name__)


@runtime_checkable
class Clock(Protocol):
    """Source of the current logical time."""

    def now(self) -> int:
        """Return the current time. Never decreases between calls."""
        ...


@runtime_checkable
class AuthorityVerifier(Protocol):
    """Decides whether an identity may create products."""

    def is_verified(self, identity: str) -> bool:
        """Return True if the identity is a verified authority."""
        ...


@runtime_checkable
class FeeSettlement(Protocol):
    """Moves creation fees from a caller to the authority."""

    def transfer(self, amount: int, sender: str, recipient: str) -> bool:
        """Transfer ``amount``; return False if settlement failed."""
        ...


@runtime_checkable
class Resettable(Protocol):
    """Collaborator that can return to its initial state."""

    def reset(self) -> None:
        ...


class BlockClock:
    """Manually advanced block-height clock."""

    def __init__(self, height: int = 0) -> None:
        if height < 0:
            raise ValueError(f"height must be non-negative, got {height}")
        self._initial_height = height
        self._height = height

    def now(self) -> int:
        return self._height

    def advance(self, blocks: int = 1) -> int:
        """Move the clock forward and return the new height.

        Raises:
            ValueError: If blocks is negative
        """
        if blocks < 0:
            raise ValueError(f"Clock cannot move backwards, got {blocks}")
        self._height += blocks
        return self._height

    def reset(self) -> None:
        """Return to the starting height."""
        self._height = self._initial_height


class WallClock:
    """Unix time in whole seconds."""

    def now(self) -> int:
        return int(time.time())


class StaticAuthorityVerifier:
    """Verifier backed by a fixed set of identities."""

    def __init__(self, identities: list[str] | set[str] | None = None) -> None:
        self._initial: frozenset[str] = frozenset(identities or ())
        self._identities: set[str] = set(self._initial)

    def is_verified(self, identity: str) -> bool:
        return identity in self._identities

    def add(self, identity: str) -> None:
        self._identities.add(identity)
        logger.debug("Authority identity added", identity=identity)

    def remove(self, identity: str) -> None:
        self._identities.discard(identity)
        logger.debug("Authority identity removed", identity=identity)

    def reset(self) -> None:
        """Restore the identities given at construction."""
        self._identities = set(self._initial)


@dataclass(frozen=True)
class FeeTransfer:
    """A settled fee payment."""

    amount: int
    sender: str
    recipient: str


class RecordingSettlement:
    """Settlement that records transfers in memory.

    Set ``fail`` to make every subsequent transfer report failure.
    """

    def __init__(self, fail: bool = False) -> None:
        self.transfers: list[FeeTransfer] = []
        self.fail = fail
        self._initial_fail = fail

    def transfer(self, amount: int, sender: str, recipient: str) -> bool:
        if self.fail:
            logger.warning(
                "Fee transfer failed",
                amount=amount,
                sender=sender,
                recipient=recipient,
            )
            return False

        self.transfers.append(FeeTransfer(amount=amount, sender=sender, recipient=recipient))
        logger.info("Fee transferred", amount=amount, sender=sender, recipient=recipient)
        return True

    def reset(self) -> None:
        """Forget recorded transfers and restore the constructor's ``fail``."""
        self.transfers.clear()
        self.fail = self._initial_fail
