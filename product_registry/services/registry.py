"""Product Registry - create/update lifecycle over the product store.

Every mutating operation runs validation, authorization and uniqueness
checks before touching state, settles the creation fee, and only then
writes the primary store and both indexes. A failure at any step leaves
state exactly as it was.
"""

import threading

from product_registry.config import settings
from product_registry.core.collaborators import (
    AuthorityVerifier,
    BlockClock,
    Clock,
    FeeSettlement,
    RecordingSettlement,
    Resettable,
    StaticAuthorityVerifier,
    WallClock,
)
from product_registry.core.errors import ErrorCode
from product_registry.core.result import RegistryResult
from product_registry.core.state import RegistryState
from product_registry.core.validation import validate_draft, validate_update_params
from product_registry.infra.logging import get_logger
from product_registry.models.product import Product, ProductDraft, ProductUpdate

logger = get_logger(__name__)


class ProductRegistry:
    """Registry of immutable product records.

    Operations are serialized with a re-entrant lock, so concurrent callers
    observe only committed state.
    """

    def __init__(
        self,
        state: RegistryState | None = None,
        clock: Clock | None = None,
        verifier: AuthorityVerifier | None = None,
        settlement: FeeSettlement | None = None,
        null_identity: str | None = None,
    ) -> None:
        """Initialize the registry.

        Args:
            state: Existing state (a fresh one from settings if None)
            clock: Time source (block clock at height 0 if None)
            verifier: Authority verifier (settings.verified_authorities if None)
            settlement: Fee settlement (in-memory recorder if None)
            null_identity: Reserved identity rejected as authority
        """
        self.state = state or RegistryState(
            max_products=settings.max_products,
            creation_fee=settings.creation_fee,
        )
        self.clock = clock or BlockClock()
        self.verifier = verifier or StaticAuthorityVerifier(settings.verified_authorities)
        self.settlement = settlement or RecordingSettlement()
        self.null_identity = null_identity or settings.null_identity
        self._lock = threading.RLock()

    # =========================================================================
    # Configuration
    # =========================================================================

    def set_authority_contract(self, identity: str) -> RegistryResult[bool]:
        """Bind the authority that receives creation fees. Works once."""
        with self._lock:
            if not identity or identity == self.null_identity:
                return self._reject("set_authority_contract", ErrorCode.INVALID_AUTHORITY_IDENTITY)
            if self.state.authority_contract is not None:
                return self._reject("set_authority_contract", ErrorCode.AUTHORITY_ALREADY_BOUND)

            self.state.authority_contract = identity
            logger.info("Authority contract bound", authority=identity)
            return RegistryResult.success(True)

    def set_creation_fee(self, amount: int) -> RegistryResult[bool]:
        """Replace the creation fee. Requires a bound authority."""
        with self._lock:
            if self.state.authority_contract is None:
                return self._reject("set_creation_fee", ErrorCode.AUTHORITY_NOT_VERIFIED)

            previous = self.state.creation_fee
            self.state.creation_fee = amount
            logger.info("Creation fee changed", previous=previous, fee=amount)
            return RegistryResult.success(True)

    def is_verified_authority(self, identity: str) -> RegistryResult[bool]:
        return RegistryResult.success(self.verifier.is_verified(identity))

    # =========================================================================
    # Mutations
    # =========================================================================

    def create_product(self, draft: ProductDraft, caller: str) -> RegistryResult[int]:
        """Register a new product on behalf of ``caller``.

        Order of checks: capacity, field rules, caller verification, name
        uniqueness, hash uniqueness, bound authority. The fee is settled
        after all checks pass and before any state is written.

        Args:
            draft: Product attributes supplied by the caller
            caller: Identity performing the creation

        Returns:
            Result carrying the new product id
        """
        with self._lock:
            state = self.state
            if state.at_capacity:
                return self._reject(
                    "create_product", ErrorCode.MAX_PRODUCTS_EXCEEDED, caller=caller
                )

            now = self.clock.now()
            error = validate_draft(draft, now)
            if error is not None:
                return self._reject("create_product", error, caller=caller)

            if not self.verifier.is_verified(caller):
                return self._reject("create_product", ErrorCode.NOT_AUTHORIZED, caller=caller)

            product_hash = bytes(draft.hash)
            if draft.name in state.products_by_name:
                return self._reject(
                    "create_product",
                    ErrorCode.PRODUCT_ALREADY_EXISTS,
                    caller=caller,
                    name=draft.name,
                )
            if product_hash in state.products_by_hash:
                return self._reject(
                    "create_product",
                    ErrorCode.PRODUCT_ALREADY_EXISTS,
                    caller=caller,
                    hash=product_hash.hex(),
                )

            authority = state.authority_contract
            if authority is None:
                return self._reject(
                    "create_product", ErrorCode.AUTHORITY_NOT_VERIFIED, caller=caller
                )

            if not self.settlement.transfer(state.creation_fee, caller, authority):
                return self._reject("create_product", ErrorCode.FEE_TRANSFER_FAILED, caller=caller)

            product_id = state.next_product_id
            state.products[product_id] = Product(
                name=draft.name,
                hash=product_hash,
                max_quantity=draft.max_quantity,
                origin=draft.origin,
                batch_id=draft.batch_id,
                description=draft.description,
                timestamp=now,
                creator=caller,
                product_type=draft.product_type,
                category=draft.category,
                location=draft.location,
                currency=draft.currency,
                min_quantity=draft.min_quantity,
                expiry=draft.expiry,
                weight=draft.weight,
                dimensions=draft.dimensions,
                material=draft.material,
                certification=draft.certification,
            )
            state.products_by_name[draft.name] = product_id
            state.products_by_hash[product_hash] = product_id
            state.next_product_id += 1

            logger.info(
                "Product created",
                product_id=product_id,
                name=draft.name,
                creator=caller,
                fee=state.creation_fee,
            )
            return RegistryResult.success(product_id)

    def update_product(
        self,
        product_id: int,
        name: str,
        max_quantity: int,
        description: str,
        caller: str,
    ) -> RegistryResult[bool]:
        """Edit the name, max quantity and description of a product.

        Only the creator may edit. The latest edit is kept as the product's
        update record, replacing the previous one.
        """
        with self._lock:
            state = self.state
            product = state.products.get(product_id)
            if product is None:
                return self._reject("update_product", ErrorCode.NOT_FOUND, product_id=product_id)
            if product.creator != caller:
                return self._reject(
                    "update_product", ErrorCode.NOT_AUTHORIZED, product_id=product_id, caller=caller
                )

            error = validate_update_params(name, max_quantity, description)
            if error is not None:
                return self._reject("update_product", error, product_id=product_id)

            owner = state.products_by_name.get(name)
            if owner is not None and owner != product_id:
                return self._reject(
                    "update_product",
                    ErrorCode.PRODUCT_ALREADY_EXISTS,
                    product_id=product_id,
                    name=name,
                )

            now = self.clock.now()
            state.products[product_id] = product.with_edit(name, max_quantity, description, now)
            if name != product.name:
                del state.products_by_name[product.name]
                state.products_by_name[name] = product_id
            state.product_updates[product_id] = ProductUpdate(
                update_name=name,
                update_max_quantity=max_quantity,
                update_description=description,
                update_timestamp=now,
                updater=caller,
            )

            logger.info(
                "Product updated",
                product_id=product_id,
                name=name,
                renamed=name != product.name,
                updater=caller,
            )
            return RegistryResult.success(True)

    # =========================================================================
    # Reads
    # =========================================================================

    def get_product(self, product_id: int) -> Product | None:
        with self._lock:
            product = self.state.products.get(product_id)
        logger.debug("Product lookup", product_id=product_id, found=product is not None)
        return product

    def get_product_update(self, product_id: int) -> ProductUpdate | None:
        """Latest edit of a product, or None if it was never updated."""
        with self._lock:
            return self.state.product_updates.get(product_id)

    def get_product_count(self) -> RegistryResult[int]:
        """Number of products ever created."""
        with self._lock:
            return RegistryResult.success(self.state.next_product_id)

    def check_product_existence(self, name: str) -> RegistryResult[bool]:
        with self._lock:
            return RegistryResult.success(name in self.state.products_by_name)

    def reset(
        self,
        max_products: int | None = None,
        creation_fee: int | None = None,
        reset_collaborators: bool = False,
    ) -> None:
        """Return to an empty registry with no authority bound.

        The clock, verifier and settlement keep their state unless
        ``reset_collaborators`` is set; then every collaborator that
        implements ``reset()`` returns to its initial state as well (the
        block clock rewinds to its starting height).
        """
        with self._lock:
            self.state.reset(max_products=max_products, creation_fee=creation_fee)
            if reset_collaborators:
                for collaborator in (self.clock, self.verifier, self.settlement):
                    if isinstance(collaborator, Resettable):
                        collaborator.reset()
        logger.info(
            "Registry reset",
            max_products=self.state.max_products,
            creation_fee=self.state.creation_fee,
            collaborators_reset=reset_collaborators,
        )

    def _reject(self, operation: str, error: ErrorCode, **context: object) -> RegistryResult:
        logger.warning(
            "Registry operation rejected",
            operation=operation,
            error=error.name,
            code=int(error),
            **context,
        )
        return RegistryResult.failure(error)


def create_registry_from_settings() -> ProductRegistry:
    """Create a registry wired to the collaborators named in settings.

    Returns:
        ProductRegistry with in-process clock, verifier and settlement
    """
    clock: Clock
    if settings.clock_mode == "wall":
        clock = WallClock()
    else:
        clock = BlockClock(settings.initial_block_height)

    registry = ProductRegistry(
        clock=clock,
        verifier=StaticAuthorityVerifier(settings.verified_authorities),
        settlement=RecordingSettlement(),
    )

    logger.info(
        "Product registry created",
        max_products=registry.state.max_products,
        creation_fee=registry.state.creation_fee,
        clock_mode=settings.clock_mode,
        verified_authorities=len(settings.verified_authorities),
    )

    return registry


# Singleton registry
_registry: ProductRegistry | None = None


def get_product_registry() -> ProductRegistry:
    """Get the singleton product registry."""
    global _registry
    if _registry is None:
        _registry = create_registry_from_settings()
    return _registry
