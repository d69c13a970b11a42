"""Abstract repository for the Order aggregate (the order ledger)."""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.order import Order, OrderItem, OrderStatus


class OrderRepository(ABC):

    @abstractmethod
    def add(self, order: Order) -> int:
        """Persist a new order header, assign its ID and return it.

        The order's items are written separately with ``add_items``.
        """

    @abstractmethod
    def add_items(self, order_id: int, items: list[OrderItem]) -> None:
        """Append line items to an existing order."""

    @abstractmethod
    def get_by_id(self, order_id: int) -> Order | None:
        """Return an order by its ID, or None if not found."""

    @abstractmethod
    def get_for_user(self, order_id: int, user_id: str) -> Order | None:
        """Return the order only if it belongs to *user_id*."""

    @abstractmethod
    def list_for_user(self, user_id: str) -> list[Order]:
        """Return a user's orders, newest first."""

    @abstractmethod
    def list_all(self) -> list[Order]:
        """Return every order, newest first."""

    @abstractmethod
    def update_status(self, order_id: int, status: OrderStatus) -> None:
        """Persist a status change."""
