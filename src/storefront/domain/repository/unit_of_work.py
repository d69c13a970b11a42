"""Abstract unit of work: one database transaction.

Usage::

    with uow:
        uow.orders.add(order)
        uow.products.decrement_stock(product_id, quantity)
        uow.commit()

Leaving the ``with`` block without ``commit()`` rolls everything back,
whether the block raised, returned early, or was interrupted.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.repository.order_repository import OrderRepository
from storefront.domain.repository.product_repository import ProductRepository
from storefront.domain.repository.user_repository import UserRepository


class UnitOfWork(ABC):

    products: ProductRepository
    orders: OrderRepository
    users: UserRepository

    def __enter__(self) -> UnitOfWork:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.rollback()

    @abstractmethod
    def commit(self) -> None:
        """Make every change in this unit of work durable."""

    @abstractmethod
    def rollback(self) -> None:
        """Discard uncommitted changes; harmless after a commit."""
