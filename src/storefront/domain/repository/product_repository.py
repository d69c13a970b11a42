"""Abstract repository for the Product aggregate (the catalog store).

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations live in the infrastructure layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable

from storefront.domain.model.product import Product


class ProductRepository(ABC):

    @abstractmethod
    def get_by_id(self, product_id: int) -> Product | None:
        """Return a product by its ID, or None if not found."""

    @abstractmethod
    def get_many_by_id(self, product_ids: Iterable[int]) -> dict[int, Product]:
        """Return the products that exist among *product_ids*, keyed by ID."""

    @abstractmethod
    def get_by_name(self, name: str) -> Product | None:
        """Return a product by its exact name (case-insensitive), or None."""

    @abstractmethod
    def list_all(self) -> list[Product]:
        """Return every product in the catalog."""

    @abstractmethod
    def list_by_filter(
        self,
        category: str | None = None,
        sub_category: str | None = None,
        gender: str | None = None,
    ) -> list[Product]:
        """Return the products matching every given filter, ordered by ID.

        See ``Product.matches`` for the filter semantics.
        """

    @abstractmethod
    def list_low_stock(self, threshold: int) -> list[Product]:
        """Return products whose stock is below *threshold*, lowest first."""

    @abstractmethod
    def save(self, product: Product) -> None:
        """Persist a new or updated product, assigning an ID if needed."""

    @abstractmethod
    def decrement_stock(self, product_id: int, quantity: int) -> bool:
        """Atomically take *quantity* units out of stock.

        Succeeds only if the product exists and has at least *quantity*
        units; returns False (and changes nothing) otherwise.
        """

    @abstractmethod
    def delete(self, product_id: int) -> bool:
        """Remove a product from the catalog; False if it did not exist.

        Placed orders keep their item snapshots.
        """
