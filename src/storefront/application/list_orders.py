"""Application service: List Orders use cases (queries)."""

from __future__ import annotations

from storefront.application.dto import OrderDTO, order_to_dto
from storefront.domain.repository.unit_of_work import UnitOfWork


class ListOrdersHandler:
    """Order history of one user, newest first."""

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, user_id: str) -> list[OrderDTO]:
        with self._uow:
            orders = self._uow.orders.list_for_user(user_id)
        return [order_to_dto(order) for order in orders]


class ListAllOrdersHandler:
    """Back-office view of every order, newest first."""

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self) -> list[OrderDTO]:
        with self._uow:
            orders = self._uow.orders.list_all()
        return [order_to_dto(order) for order in orders]
