"""Integration tests for the PlaceOrder (checkout) use case.

Uses in-memory fakes; the fake unit of work restores its stores on
rollback, so a failed checkout must leave no trace.
"""

import pytest
from structlog.testing import capture_logs

from storefront.application.place_order import PlaceOrderHandler
from storefront.domain.model.product import Product
from storefront.domain.model.user import User
from storefront.domain.model.value_objects import Money
from tests.fakes import FakeCartRepository, FakeUnitOfWork

SESSION = "session-1"

FAILURE_MESSAGE = "An error occurred while processing your order. Please try again."


def _setup(
    products: list[Product] | None = None,
) -> tuple[PlaceOrderHandler, FakeCartRepository, FakeUnitOfWork]:
    if products is None:
        products = [
            Product(id=1, name="Casual Shirt", price=Money.of("15.00"), stock=10),
            Product(id=2, name="Denim Jeans", price=Money.of("20.00"), stock=4),
        ]
    users = [
        User(id="alice", email="alice@example.com", full_name="Alice"),
        User(id="admin", email="admin@example.com", is_admin=True),
    ]
    uow = FakeUnitOfWork(products, users)
    carts = FakeCartRepository()
    return PlaceOrderHandler(carts, uow), carts, uow


def _fill(carts: FakeCartRepository, uow: FakeUnitOfWork, *lines, session=SESSION):
    """Put (product_id, quantity) lines in the cart, skipping stock checks."""
    cart = carts.load(session)
    for product_id, quantity in lines:
        cart.add(uow.products.get_by_id(product_id), quantity)
    carts.save(session, cart)


class TestPlaceOrderHappyPath:

    def test_places_order(self):
        handler, carts, uow = _setup()
        _fill(carts, uow, (1, 2), (2, 1))

        outcome = handler.handle(SESSION, "alice", "1 Main St")

        assert outcome.success
        assert outcome.message == "Order placed successfully! Order ID: #1"
        assert outcome.redirect == "order_confirmation"
        assert outcome.order_id == 1

    def test_persists_order_and_items(self):
        handler, carts, uow = _setup()
        _fill(carts, uow, (1, 2), (2, 1))

        handler.handle(SESSION, "alice", "1 Main St")

        order = uow.orders.get_by_id(1)
        assert order.user_id == "alice"
        assert order.total_amount == Money.of("50.00")
        assert order.shipping_address == "1 Main St"
        assert order.status.value == "Pending"
        assert [(i.product_id, i.quantity.value, i.price) for i in order.items] == [
            (1, 2, Money.of("15.00")),
            (2, 1, Money.of("20.00")),
        ]

    def test_decrements_stock(self):
        handler, carts, uow = _setup()
        _fill(carts, uow, (1, 2), (2, 1))

        handler.handle(SESSION, "alice")

        assert uow.products.stock_of(1) == 8
        assert uow.products.stock_of(2) == 3

    def test_clears_cart(self):
        handler, carts, uow = _setup()
        _fill(carts, uow, (1, 2))

        handler.handle(SESSION, "alice")

        assert carts.load(SESSION).is_empty

    def test_remembers_shipping_address(self):
        handler, carts, uow = _setup()
        _fill(carts, uow, (1, 1))

        handler.handle(SESSION, "alice", "  1 Main St  ")

        assert uow.users.get_by_id("alice").address == "1 Main St"

    def test_blank_address_keeps_profile(self):
        handler, carts, uow = _setup()
        uow.users.update_address("alice", "Old Road 5")
        _fill(carts, uow, (1, 1))

        handler.handle(SESSION, "alice", "   ")

        assert uow.users.get_by_id("alice").address == "Old Road 5"

    def test_takes_last_unit(self):
        handler, carts, uow = _setup()
        _fill(carts, uow, (2, 4))

        outcome = handler.handle(SESSION, "alice")

        assert outcome.success
        assert uow.products.stock_of(2) == 0


class TestPlaceOrderPriceLock:

    def test_uses_price_captured_by_cart(self):
        handler, carts, uow = _setup()
        _fill(carts, uow, (1, 1))

        shirt = uow.products.get_by_id(1)
        shirt.update_price(Money.of("99.00"))
        uow.products.save(shirt)

        handler.handle(SESSION, "alice")

        order = uow.orders.get_by_id(1)
        assert order.items[0].price == Money.of("15.00")
        assert order.total_amount == Money.of("15.00")

    def test_later_price_change_does_not_touch_order(self):
        handler, carts, uow = _setup()
        _fill(carts, uow, (1, 2))
        handler.handle(SESSION, "alice")

        shirt = uow.products.get_by_id(1)
        shirt.update_price(Money.of("1.00"))
        uow.products.save(shirt)

        assert str(uow.orders.get_by_id(1).total_amount) == "$30.00"


class TestPlaceOrderPreCheck:

    def test_empty_cart(self):
        handler, _, uow = _setup()

        outcome = handler.handle(SESSION, "alice")

        assert not outcome.success
        assert outcome.message == "Your cart is empty."
        assert outcome.redirect == "cart"
        assert uow.orders.count() == 0

    def test_insufficient_stock(self):
        handler, carts, uow = _setup()
        _fill(carts, uow, (1, 1), (2, 5))

        outcome = handler.handle(SESSION, "alice")

        assert not outcome.success
        assert outcome.message == "Insufficient stock for Denim Jeans. Only 4 available."
        assert outcome.redirect == "cart"
        assert outcome.order_id is None

    def test_insufficient_stock_leaves_everything_untouched(self):
        handler, carts, uow = _setup()
        _fill(carts, uow, (1, 1), (2, 5))
        before = carts.load(SESSION)

        handler.handle(SESSION, "alice")

        assert uow.orders.count() == 0
        assert uow.products.stock_of(1) == 10
        assert uow.products.stock_of(2) == 4
        assert carts.load(SESSION) == before
        assert uow.commits == 0

    def test_product_missing(self):
        handler, carts, uow = _setup()
        _fill(carts, uow, (1, 1), (2, 1))
        uow.products.delete(1)

        outcome = handler.handle(SESSION, "alice")

        assert not outcome.success
        assert outcome.message == "Product Casual Shirt is no longer available."
        assert uow.orders.count() == 0
        assert uow.products.stock_of(2) == 4

    def test_earlier_short_line_reported_before_later_missing_one(self):
        handler, carts, uow = _setup()
        _fill(carts, uow, (2, 9), (1, 1))
        uow.products.delete(1)

        outcome = handler.handle(SESSION, "alice")

        assert outcome.message == "Insufficient stock for Denim Jeans. Only 4 available."

    def test_earlier_missing_line_reported_before_later_short_one(self):
        handler, carts, uow = _setup()
        _fill(carts, uow, (1, 1), (2, 9))
        uow.products.delete(1)

        outcome = handler.handle(SESSION, "alice")

        assert outcome.message == "Product Casual Shirt is no longer available."

    def test_first_short_line_is_reported(self):
        handler, carts, uow = _setup()
        _fill(carts, uow, (2, 9), (1, 11))

        outcome = handler.handle(SESSION, "alice")

        assert outcome.message == "Insufficient stock for Denim Jeans. Only 4 available."


class TestPlaceOrderPrincipal:

    def test_anonymous_refused(self):
        handler, carts, uow = _setup()
        _fill(carts, uow, (1, 1))

        outcome = handler.handle(SESSION, None)

        assert not outcome.success
        assert outcome.message == "Please sign in to check out."
        assert not carts.load(SESSION).is_empty

    def test_admin_refused(self):
        handler, carts, uow = _setup()
        _fill(carts, uow, (1, 1))

        outcome = handler.handle(SESSION, "admin")

        assert not outcome.success
        assert outcome.message == "Admins cannot place orders."
        assert uow.orders.count() == 0


class TestPlaceOrderConcurrency:

    def test_stock_taken_between_check_and_commit(self):
        handler, carts, uow = _setup()
        _fill(carts, uow, (1, 2), (2, 3))

        def other_checkout():
            uow.products.decrement_stock(2, 3)

        uow.between[2] = other_checkout

        outcome = handler.handle(SESSION, "alice")

        assert not outcome.success
        assert outcome.message == "Insufficient stock for Denim Jeans. Only 1 available."
        assert outcome.redirect == "cart"

    def test_shortage_in_transaction_rolls_back_earlier_lines(self):
        handler, carts, uow = _setup()
        _fill(carts, uow, (1, 2), (2, 3))

        def other_checkout():
            uow.products.decrement_stock(2, 3)

        uow.between[2] = other_checkout

        handler.handle(SESSION, "alice")

        assert uow.products.stock_of(1) == 10
        assert uow.products.stock_of(2) == 1
        assert uow.orders.count() == 0
        assert not carts.load(SESSION).is_empty

    def test_product_deleted_between_check_and_commit(self):
        handler, carts, uow = _setup()
        _fill(carts, uow, (1, 1))

        uow.between[2] = lambda: uow.products.delete(1)

        outcome = handler.handle(SESSION, "alice")

        assert outcome.message == "Product Casual Shirt is no longer available."
        assert uow.orders.count() == 0

    def test_two_carts_competing_for_the_same_units(self):
        handler, carts, uow = _setup()
        _fill(carts, uow, (2, 3), session="first")
        _fill(carts, uow, (2, 3), session="second")

        first = handler.handle("first", "alice")
        second = handler.handle("second", "alice")

        assert first.success
        assert not second.success
        assert second.message == "Insufficient stock for Denim Jeans. Only 1 available."
        assert uow.products.stock_of(2) == 1
        assert uow.orders.count() == 1


class TestPlaceOrderFailures:

    def test_unexpected_error_becomes_generic_message(self):
        handler, carts, uow = _setup()
        _fill(carts, uow, (1, 2), (2, 1))
        uow.orders.fail_on_add_items = RuntimeError("disk full")

        with capture_logs() as logs:
            outcome = handler.handle(SESSION, "alice")

        assert not outcome.success
        assert outcome.message == FAILURE_MESSAGE
        assert outcome.redirect == "cart"
        assert any(
            e["event"] == "Checkout transaction failed" and e["log_level"] == "error"
            for e in logs
        )

    def test_unexpected_error_rolls_back(self):
        handler, carts, uow = _setup()
        _fill(carts, uow, (1, 2), (2, 1))
        uow.orders.fail_on_add_items = RuntimeError("disk full")

        handler.handle(SESSION, "alice")

        assert uow.orders.count() == 0
        assert uow.products.stock_of(1) == 10
        assert uow.products.stock_of(2) == 4
        assert not carts.load(SESSION).is_empty


class TestPlaceOrderAddressUpdate:

    def test_address_failure_does_not_undo_order(self):
        handler, carts, uow = _setup()
        _fill(carts, uow, (1, 1))
        uow.users.fail_on_update_address = RuntimeError("profile store offline")

        with capture_logs() as logs:
            outcome = handler.handle(SESSION, "alice", "1 Main St")

        assert outcome.success
        assert uow.orders.count() == 1
        assert uow.products.stock_of(1) == 9
        assert carts.load(SESSION).is_empty
        warning = next(e for e in logs if e["event"] == "Address update failed")
        assert warning["log_level"] == "warning"
        assert warning["user_id"] == "alice"
        assert warning["error"] == "profile store offline"

    def test_unknown_profile_still_places_order(self):
        handler, carts, uow = _setup()
        _fill(carts, uow, (1, 1))

        with capture_logs() as logs:
            outcome = handler.handle(SESSION, "bob", "1 Main St")

        assert outcome.success
        assert uow.orders.get_by_id(1).user_id == "bob"
        assert any(e["event"] == "Address update failed" for e in logs)


@pytest.mark.parametrize("quantity", [1, 3, 4])
def test_stock_never_negative(quantity):
    handler, carts, uow = _setup()
    _fill(carts, uow, (2, quantity), session="a")
    _fill(carts, uow, (2, quantity), session="b")

    handler.handle("a", "alice")
    handler.handle("b", "alice")

    assert uow.products.stock_of(2) >= 0
    sold = sum(i.quantity.value for o in uow.orders.list_all() for i in o.items)
    assert sold + uow.products.stock_of(2) == 4
