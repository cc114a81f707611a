"""Product schemas for the registry HTTP surface.

These only shape transport. Field rules (lengths, enums, positivity) are
enforced by the registry itself so its error ordering is preserved.
"""

import string

from pydantic import BaseModel, Field

from product_registry.core.validation import HASH_LENGTH
from product_registry.models.product import Product, ProductDraft, ProductUpdate


class ProductCreateRequest(BaseModel):
    """Attributes of a product to register."""

    name: str = Field(description="Unique product name (1-100 chars)")
    hash: str = Field(description="Content fingerprint, 32 bytes as 64 hex chars")
    max_quantity: int = Field(description="Maximum quantity (> 0)")
    origin: str = Field(description="Place of origin (1-100 chars)")
    batch_id: str = Field(description="Production batch (1-50 chars)")
    description: str = Field(default="", description="Free text (<= 500 chars)")
    product_type: str = Field(description="electronics, food, clothing or machinery")
    category: str = Field(description="Category (1-50 chars)")
    location: str = Field(description="Current location (1-100 chars)")
    currency: str = Field(description="STX, USD or BTC")
    min_quantity: int = Field(description="Minimum quantity (> 0)")
    expiry: int = Field(description="Expiry time, strictly after the current time")
    weight: float = Field(description="Weight (> 0)")
    dimensions: str = Field(default="", description="Dimensions (<= 50 chars)")
    material: str = Field(default="", description="Material (<= 100 chars)")
    certification: str = Field(default="", description="Certification (<= 100 chars)")

    model_config = {"extra": "forbid"}

    def to_draft(self) -> ProductDraft:
        """Convert to a registry draft.

        Anything other than exactly 64 hex digits becomes an empty hash so the
        registry reports it as an invalid hash at its usual position in the
        check order.
        """
        raw_hash = b""
        if len(self.hash) == 2 * HASH_LENGTH and all(c in string.hexdigits for c in self.hash):
            raw_hash = bytes.fromhex(self.hash)

        return ProductDraft(
            name=self.name,
            hash=raw_hash,
            max_quantity=self.max_quantity,
            origin=self.origin,
            batch_id=self.batch_id,
            description=self.description,
            product_type=self.product_type,
            category=self.category,
            location=self.location,
            currency=self.currency,
            min_quantity=self.min_quantity,
            expiry=self.expiry,
            weight=self.weight,
            dimensions=self.dimensions,
            material=self.material,
            certification=self.certification,
        )


class ProductUpdateRequest(BaseModel):
    """Editable product fields."""

    name: str
    max_quantity: int
    description: str = ""

    model_config = {"extra": "forbid"}


class ProductResponse(BaseModel):
    """Stored product as returned by the API."""

    id: int
    name: str
    hash: str = Field(description="Hex-encoded content fingerprint")
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
    dimensions: str
    material: str
    certification: str
    status: bool

    @classmethod
    def from_product(cls, product_id: int, product: Product) -> "ProductResponse":
        return cls(
            id=product_id,
            name=product.name,
            hash=product.hash.hex(),
            max_quantity=product.max_quantity,
            origin=product.origin,
            batch_id=product.batch_id,
            description=product.description,
            timestamp=product.timestamp,
            creator=product.creator,
            product_type=product.product_type,
            category=product.category,
            location=product.location,
            currency=product.currency,
            min_quantity=product.min_quantity,
            expiry=product.expiry,
            weight=product.weight,
            dimensions=product.dimensions,
            material=product.material,
            certification=product.certification,
            status=product.status,
        )


class ProductUpdateResponse(BaseModel):
    """Latest edit of a product."""

    update_name: str
    update_max_quantity: int
    update_description: str
    update_timestamp: int
    updater: str

    @classmethod
    def from_update(cls, update: ProductUpdate) -> "ProductUpdateResponse":
        return cls(
            update_name=update.update_name,
            update_max_quantity=update.update_max_quantity,
            update_description=update.update_description,
            update_timestamp=update.update_timestamp,
            updater=update.updater,
        )


class ProductCreatedResponse(BaseModel):
    """Id assigned to a newly registered product."""

    id: int


class ProductCountResponse(BaseModel):
    count: int


class ProductExistsResponse(BaseModel):
    name: str
    exists: bool


class AuthorityRequest(BaseModel):
    """Authority identity to bind."""

    identity: str = Field(description="Identity receiving creation fees")

    model_config = {"extra": "forbid"}


class FeeRequest(BaseModel):
    """New creation fee."""

    amount: int = Field(description="Fee charged per creation")

    model_config = {"extra": "forbid"}


class AuthorityVerifiedResponse(BaseModel):
    identity: str
    verified: bool
