"""Application service: Place Order use case (checkout).

Turns the session's cart into a persisted order in two phases:

  Pre-check: outside any transaction, read a snapshot of the catalog
              and reject carts that obviously cannot be filled (empty,
              product gone, not enough stock).  No writes happen.
  Commit:    inside one unit of work, add the order header, then for
              each cart line (in cart order) take the stock with an
              atomic conditional decrement and add the order item.  The
              decrement is the authoritative stock check; a shortage
              there rolls the whole unit of work back.

The cart is cleared only after the commit succeeded.  Saving the
shipping address onto the user profile is a secondary, best-effort step
that can never undo a placed order.

Every checkout failure is converted into a ``CheckoutOutcome`` carrying
a single user-facing message; nothing is raised to the caller.
"""

from __future__ import annotations

import structlog

from storefront.application.dto import CheckoutOutcome
from storefront.domain.exceptions import (
    AddressUpdateFailedError,
    CheckoutError,
    EmptyCartError,
    InsufficientStockError,
    PermissionDeniedError,
    ProductMissingError,
    TransactionError,
)
from storefront.domain.model.cart import Cart, CartLine
from storefront.domain.model.order import Order, OrderItem
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Quantity
from storefront.domain.repository.cart_repository import CartRepository
from storefront.domain.repository.unit_of_work import UnitOfWork

logger = structlog.get_logger(__name__)

CART_VIEW = "cart"
CONFIRMATION_VIEW = "order_confirmation"


class PlaceOrderHandler:

    def __init__(self, cart_repo: CartRepository, uow: UnitOfWork) -> None:
        self._cart_repo = cart_repo
        self._uow = uow

    def handle(
        self,
        session_id: str,
        user_id: str | None,
        shipping_address: str = "",
    ) -> CheckoutOutcome:
        cart = self._cart_repo.load(session_id)

        try:
            order_id = self._place(cart, user_id, shipping_address)
        except (CheckoutError, PermissionDeniedError) as exc:
            logger.info(
                "Checkout rejected",
                session_id=session_id,
                user_id=user_id,
                reason=type(exc).__name__,
            )
            return CheckoutOutcome(success=False, message=str(exc), redirect=CART_VIEW)

        self._remember_address(user_id, shipping_address)  # type: ignore[arg-type]
        self._cart_repo.clear(session_id)

        logger.info(
            "Order placed",
            order_id=order_id,
            user_id=user_id,
            total=str(cart.total()),
            lines=len(cart),
        )
        return CheckoutOutcome(
            success=True,
            message=f"Order placed successfully! Order ID: #{order_id}",
            redirect=CONFIRMATION_VIEW,
            order_id=order_id,
        )

    # --- Phases ---------------------------------------------------------------

    def _place(self, cart: Cart, user_id: str | None, shipping_address: str) -> int:
        with self._uow:
            self._check_principal(user_id)
            if cart.is_empty:
                raise EmptyCartError()
            lines = cart.lines()
            snapshot = self._uow.products.get_many_by_id(
                [line.product_id for line in lines]
            )

        self._pre_check(lines, snapshot)

        # Frozen here: later catalog price changes never reach this order.
        order = Order.create(
            user_id=user_id,  # type: ignore[arg-type]
            items=[self._to_item(line) for line in lines],
            total_amount=cart.total(),
            shipping_address=shipping_address,
        )
        return self._commit(order)

    def _check_principal(self, user_id: str | None) -> None:
        if not user_id:
            raise PermissionDeniedError("Please sign in to check out.")
        user = self._uow.users.get_by_id(user_id)
        if user is not None and user.is_admin:
            raise PermissionDeniedError("Admins cannot place orders.")

    @staticmethod
    def _pre_check(lines: tuple[CartLine, ...], snapshot: dict[int, Product]) -> None:
        for line in lines:
            product = snapshot.get(line.product_id)
            if product is None:
                raise ProductMissingError(line.product_name)
            if product.stock < line.quantity:
                raise InsufficientStockError(line.product_name, product.stock)

    def _commit(self, order: Order) -> int:
        try:
            with self._uow:
                order_id = self._uow.orders.add(order)
                for item in order.items:
                    taken = self._uow.products.decrement_stock(
                        item.product_id, item.quantity.value
                    )
                    if not taken:
                        raise self._shortage(item)
                    self._uow.orders.add_items(order_id, [item])
                self._uow.commit()
        except CheckoutError as exc:
            logger.warning(
                "Checkout rolled back",
                user_id=order.user_id,
                reason=type(exc).__name__,
            )
            raise
        except Exception as exc:
            logger.exception("Checkout transaction failed", user_id=order.user_id)
            raise TransactionError() from exc
        return order_id

    def _shortage(self, item: OrderItem) -> CheckoutError:
        """Explain a failed decrement using the in-transaction stock level."""
        product = self._uow.products.get_by_id(item.product_id)
        if product is None:
            return ProductMissingError(item.product_name)
        return InsufficientStockError(item.product_name, product.stock)

    # --- Secondary effects ----------------------------------------------------

    def _remember_address(self, user_id: str, shipping_address: str) -> None:
        address = shipping_address.strip()
        if not address:
            return
        try:
            self._save_address(user_id, address)
        except AddressUpdateFailedError as exc:
            logger.warning(
                "Address update failed",
                user_id=user_id,
                error=str(exc.__cause__ or exc),
            )

    def _save_address(self, user_id: str, address: str) -> None:
        try:
            with self._uow:
                self._uow.users.update_address(user_id, address)
                self._uow.commit()
        except Exception as exc:
            raise AddressUpdateFailedError(
                f"Could not save shipping address for user {user_id}"
            ) from exc

    @staticmethod
    def _to_item(line: CartLine) -> OrderItem:
        return OrderItem(
            product_id=line.product_id,
            product_name=line.product_name,
            quantity=Quantity(line.quantity),
            price=line.unit_price,
        )
