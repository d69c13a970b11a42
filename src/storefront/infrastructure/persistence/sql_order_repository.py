"""SQLAlchemy implementation of OrderRepository."""

from __future__ import annotations

from datetime import timezone

from sqlalchemy import select, update
from sqlalchemy.orm import Session

from storefront.domain.model.order import Order, OrderItem, OrderStatus
from storefront.domain.model.value_objects import Money, Quantity
from storefront.domain.repository.order_repository import OrderRepository
from storefront.infrastructure.persistence.tables import OrderItemRow, OrderRow


class SqlOrderRepository(OrderRepository):

    def __init__(self, session: Session) -> None:
        self._session = session

    # --- OrderRepository interface --------------------------------------------

    def add(self, order: Order) -> int:
        row = OrderRow(
            user_id=order.user_id,
            order_date=order.order_date,
            total_amount=order.total_amount.amount,
            currency=order.total_amount.currency,
            status=order.status.value,
            shipping_address=order.shipping_address,
        )
        self._session.add(row)
        self._session.flush()
        order.id = row.id
        return row.id

    def add_items(self, order_id: int, items: list[OrderItem]) -> None:
        self._session.add_all(
            OrderItemRow(
                order_id=order_id,
                product_id=item.product_id,
                product_name=item.product_name,
                quantity=item.quantity.value,
                price=item.price.amount,
            )
            for item in items
        )
        self._session.flush()

    def get_by_id(self, order_id: int) -> Order | None:
        row = self._session.scalars(
            select(OrderRow)
            .where(OrderRow.id == order_id)
            .execution_options(populate_existing=True)
        ).first()
        return self._to_domain(row) if row is not None else None

    def get_for_user(self, order_id: int, user_id: str) -> Order | None:
        row = self._session.scalars(
            select(OrderRow)
            .where(OrderRow.id == order_id, OrderRow.user_id == user_id)
            .execution_options(populate_existing=True)
        ).first()
        return self._to_domain(row) if row is not None else None

    def list_for_user(self, user_id: str) -> list[Order]:
        rows = self._session.scalars(
            select(OrderRow)
            .where(OrderRow.user_id == user_id)
            .order_by(OrderRow.order_date.desc(), OrderRow.id.desc())
        )
        return [self._to_domain(row) for row in rows]

    def list_all(self) -> list[Order]:
        rows = self._session.scalars(
            select(OrderRow).order_by(OrderRow.order_date.desc(), OrderRow.id.desc())
        )
        return [self._to_domain(row) for row in rows]

    def update_status(self, order_id: int, status: OrderStatus) -> None:
        self._session.execute(
            update(OrderRow).where(OrderRow.id == order_id).values(status=status.value)
        )

    # --- Mapping --------------------------------------------------------------

    @staticmethod
    def _to_domain(row: OrderRow) -> Order:
        order_date = row.order_date
        if order_date.tzinfo is None:
            # SQLite drops the offset; every stored date is UTC.
            order_date = order_date.replace(tzinfo=timezone.utc)

        items = tuple(
            OrderItem(
                product_id=i.product_id,
                product_name=i.product_name,
                quantity=Quantity(i.quantity),
                price=Money(i.price, row.currency),
            )
            for i in row.items
        )
        return Order(
            id=row.id,
            user_id=row.user_id,
            items=items,
            total_amount=Money(row.total_amount, row.currency),
            shipping_address=row.shipping_address,
            status=OrderStatus(row.status),
            order_date=order_date,
        )
