"""Application service: Update Order Status use case (back-office)."""

from __future__ import annotations

import structlog

from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.model.order import OrderStatus
from storefront.domain.repository.unit_of_work import UnitOfWork

logger = structlog.get_logger(__name__)


class UpdateOrderStatusHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, order_id: int, status: str) -> None:
        """Move an order to one of the known statuses.

        Items and totals are untouched; status is the only mutable part
        of a placed order.
        """
        new_status = OrderStatus.parse(status)

        with self._uow:
            order = self._uow.orders.get_by_id(order_id)
            if order is None:
                raise EntityNotFoundError(f"Order #{order_id} not found")
            previous = order.status
            order.change_status(new_status)
            self._uow.orders.update_status(order_id, order.status)
            self._uow.commit()

        logger.info(
            "Order status changed",
            order_id=order_id,
            previous=previous.value,
            status=new_status.value,
        )
