"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.  Money is formatted
("$15.00") on the way out.
"""

from __future__ import annotations

from dataclasses import dataclass

from storefront.domain.model.order import Order
from storefront.domain.model.product import Product


@dataclass(frozen=True)
class CartLineDTO:
    product_id: int
    product_name: str
    product_image: str
    unit_price: str
    quantity: int
    subtotal: str
    stock: int  # live catalog stock; 0 when the product is gone


@dataclass(frozen=True)
class CartDTO:
    lines: list[CartLineDTO]
    total: str
    count: int


@dataclass(frozen=True)
class CartSummaryDTO:
    """Output of a cart mutation: enough to refresh a cart badge."""

    count: int
    total: str
    line_subtotal: str | None = None
    available_stock: int | None = None


@dataclass(frozen=True)
class OrderItemDTO:
    product_name: str
    quantity: int
    price: str
    line_total: str


@dataclass(frozen=True)
class OrderDTO:
    id: int
    user_id: str
    status: str
    items: list[OrderItemDTO]
    total: str
    shipping_address: str
    order_date: str


@dataclass(frozen=True)
class CheckoutOutcome:
    """Result of one checkout attempt.

    Exactly one message per attempt.  ``redirect`` names the view the
    client should go to next: ``"order_confirmation"`` on success,
    ``"cart"`` otherwise.
    """

    success: bool
    message: str
    redirect: str
    order_id: int | None = None


@dataclass(frozen=True)
class CheckoutPreviewDTO:
    cart: CartDTO
    full_name: str
    email: str
    shipping_address: str


@dataclass(frozen=True)
class ProductDTO:
    id: int
    name: str
    price: str
    stock: int
    image_path: str
    category: str
    sub_category: str
    description: str


@dataclass(frozen=True)
class ProductDetailsDTO:
    """One product plus a few others from the same category."""

    product: ProductDTO
    related: list[ProductDTO]


@dataclass(frozen=True)
class StockSummary:
    """Typed low-stock entry, e.g. for a back-office alert."""

    product_id: int
    product_name: str
    stock: int


def order_to_dto(order: Order) -> OrderDTO:
    return OrderDTO(
        id=order.id,  # type: ignore[arg-type]
        user_id=order.user_id,
        status=order.status.value,
        items=[
            OrderItemDTO(
                product_name=item.product_name,
                quantity=item.quantity.value,
                price=str(item.price),
                line_total=str(item.line_total),
            )
            for item in order.items
        ],
        total=str(order.total_amount),
        shipping_address=order.shipping_address,
        order_date=order.order_date.strftime("%Y-%m-%d %H:%M UTC"),
    )


def product_to_dto(product: Product) -> ProductDTO:
    return ProductDTO(
        id=product.id,  # type: ignore[arg-type]
        name=product.name,
        price=str(product.price),
        stock=product.stock,
        image_path=product.image_path,
        category=product.category,
        sub_category=product.sub_category,
        description=product.description,
    )
