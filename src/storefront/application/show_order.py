"""Application service: Show Order use case (query).

Backs both the order confirmation view and the order details view.
"""

from __future__ import annotations

from storefront.application.dto import OrderDTO, order_to_dto
from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.repository.unit_of_work import UnitOfWork


class ShowOrderHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, order_id: int, user_id: str) -> OrderDTO:
        """Return the order if it belongs to *user_id*.

        Someone else's order is reported exactly like a missing one so
        its existence is never revealed.
        """
        with self._uow:
            order = self._uow.orders.get_for_user(order_id, user_id)
        if order is None:
            raise EntityNotFoundError(f"Order #{order_id} not found")
        return order_to_dto(order)
