"""Order aggregate.

The Order is an aggregate root that owns its line items.  Items and the
total are fixed when the order is created; afterwards only the status
moves, driven by the back-office.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.value_objects import Money, Quantity


class OrderStatus(Enum):
    PENDING = "Pending"
    PROCESSING = "Processing"
    SHIPPED = "Shipped"
    DELIVERED = "Delivered"
    CANCELLED = "Cancelled"
    COMPLETED = "Completed"

    @classmethod
    def parse(cls, raw: str) -> OrderStatus:
        for status in cls:
            if status.value.lower() == raw.strip().lower():
                return status
        raise ValidationError(f"Invalid status '{raw}'")


@dataclass(frozen=True)
class OrderItem:
    """Captures the unit price of a product at order time.

    The product may be referenced by many orders; later catalog price
    changes never reach an existing item.  ``product_id`` is None once
    the product has been deleted from the catalog; the name snapshot
    stays.
    """

    product_id: int | None
    product_name: str
    quantity: Quantity
    price: Money  # locked at order-creation time

    @property
    def line_total(self) -> Money:
        return self.price * self.quantity.value


@dataclass
class Order:
    """Aggregate root for placed orders.

    Use ``Order.create()`` for new orders.  The ``__init__`` is
    intentionally simple so the repository can reconstitute persisted
    orders without re-validating.
    """

    id: int | None
    user_id: str
    items: tuple[OrderItem, ...]
    total_amount: Money
    shipping_address: str = ""
    status: OrderStatus = OrderStatus.PENDING
    order_date: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @staticmethod
    def create(
        user_id: str,
        items: list[OrderItem],
        total_amount: Money,
        shipping_address: str = "",
    ) -> Order:
        """Create a new Pending order.

        ``total_amount`` is the cart total at the start of checkout and is
        stored as given; it must agree with the items.
        """
        if not user_id or not user_id.strip():
            raise ValidationError("Order must belong to a user")

        if not items:
            raise ValidationError("Order must contain at least one item")

        computed = Money.total(item.line_total for item in items)
        if computed.rounded() != total_amount.rounded():
            raise ValidationError(
                f"Order total {total_amount} does not match item total {computed}"
            )

        return Order(
            id=None,
            user_id=user_id,
            items=tuple(items),
            total_amount=total_amount,
            shipping_address=shipping_address.strip(),
        )

    def change_status(self, new_status: OrderStatus) -> None:
        self.status = new_status

    @property
    def item_count(self) -> int:
        return sum(item.quantity.value for item in self.items)
