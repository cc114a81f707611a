"""Product record and its update-audit snapshot."""

from dataclasses import dataclass, replace
from enum import Enum


class ProductType(str, Enum):
    """Accepted product types."""

    ELECTRONICS = "electronics"
    FOOD = "food"
    CLOTHING = "clothing"
    MACHINERY = "machinery"


class Currency(str, Enum):
    """Accepted pricing currencies."""

    STX = "STX"
    USD = "USD"
    BTC = "BTC"


PRODUCT_TYPES = frozenset(t.value for t in ProductType)
CURRENCIES = frozenset(c.value for c in Currency)


@dataclass(frozen=True)
class Product:
    """Registered product.

    ``timestamp`` is the creation time until the first update, then the time
    of the latest update. ``creator`` never changes. ``status`` has no
    mutator yet; it is stored for a future deactivation operation.
    """

    name: str
    hash: bytes
    max_quantity: int
    origin: str
    batch_id: str
    description: str
    timestamp: int
    creator: str
    product_type: str
    category: str
    location: str
    currency: str
    min_quantity: int
    expiry: int
    weight: float
    dimensions: str = ""
    material: str = ""
    certification: str = ""
    status: bool = True

    def with_edit(
        self,
        name: str,
        max_quantity: int,
        description: str,
        timestamp: int,
    ) -> "Product":
        """Return a copy with the mutable fields replaced.

        Args:
            name: New product name
            max_quantity: New maximum quantity
            description: New description
            timestamp: Time of the edit

        Returns:
            New Product; hash, creator and the remaining fields are kept
        """
        return replace(
            self,
            name=name,
            max_quantity=max_quantity,
            description=description,
            timestamp=timestamp,
        )


@dataclass(frozen=True)
class ProductUpdate:
    """Most recent edit applied to a product (overwritten on every update)."""

    update_name: str
    update_max_quantity: int
    update_description: str
    update_timestamp: int
    updater: str


@dataclass
class ProductDraft:
    """Caller-supplied attributes for a new product.

    Everything except ``id``, ``timestamp``, ``creator`` and ``status``, which
    the registry assigns. Values are unchecked until the registry validates
    them.
    """

    name: str
    hash: bytes
    max_quantity: int
    origin: str
    batch_id: str
    description: str
    product_type: str
    category: str
    location: str
    currency: str
    min_quantity: int
    expiry: int
    weight: float
    dimensions: str = ""
    material: str = ""
    certification: str = ""
