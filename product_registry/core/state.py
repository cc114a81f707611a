"""Mutable registry state: configuration, primary store and indexes."""

from dataclasses import dataclass, field

from product_registry.models.product import Product, ProductUpdate


@dataclass
class RegistryState:
    """All state owned by one registry instance.

    Invariants kept by the registry:
    - ``products_by_name`` and ``products_by_hash`` point at existing
      products holding exactly that name/hash
    - ids are assigned from ``next_product_id`` and never reused
    - ``authority_contract`` is set at most once
    """

    max_products: int = 10000
    creation_fee: int = 500
    next_product_id: int = 0
    authority_contract: str | None = None
    products: dict[int, Product] = field(default_factory=dict)
    product_updates: dict[int, ProductUpdate] = field(default_factory=dict)
    products_by_name: dict[str, int] = field(default_factory=dict)
    products_by_hash: dict[bytes, int] = field(default_factory=dict)

    def reset(self, max_products: int | None = None, creation_fee: int | None = None) -> None:
        """Drop all products and unbind the authority.

        Args:
            max_products: New capacity (keeps the current one if None)
            creation_fee: New fee (keeps the current one if None)
        """
        if max_products is not None:
            self.max_products = max_products
        if creation_fee is not None:
            self.creation_fee = creation_fee
        self.next_product_id = 0
        self.authority_contract = None
        self.products.clear()
        self.product_updates.clear()
        self.products_by_name.clear()
        self.products_by_hash.clear()

    @property
    def at_capacity(self) -> bool:
        return self.next_product_id >= self.max_products
