"""In-memory fakes for testing.

These implement the same abstract interfaces as the SQL and session-file
implementations but keep everything in dicts. No I/O, no side effects.

Reads hand out copies, the way a database would, so a test only sees a
change once it has been saved.
"""

from __future__ import annotations

import copy
from collections.abc import Callable, Iterable
from dataclasses import replace

from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.model.cart import Cart
from storefront.domain.model.order import Order, OrderItem, OrderStatus
from storefront.domain.model.product import Product
from storefront.domain.model.user import User
from storefront.domain.repository.cart_repository import CartRepository
from storefront.domain.repository.order_repository import OrderRepository
from storefront.domain.repository.product_repository import ProductRepository
from storefront.domain.repository.session_store import SessionStore
from storefront.domain.repository.unit_of_work import UnitOfWork
from storefront.domain.repository.user_repository import UserRepository


class FakeProductRepository(ProductRepository):

    def __init__(self, products: list[Product] | None = None) -> None:
        self._store: dict[int, Product] = {}
        for p in products or []:
            self._store[p.id] = copy.deepcopy(p)

    def get_by_id(self, product_id: int) -> Product | None:
        return copy.deepcopy(self._store.get(product_id))

    def get_many_by_id(self, product_ids: Iterable[int]) -> dict[int, Product]:
        return {
            pid: copy.deepcopy(self._store[pid])
            for pid in product_ids
            if pid in self._store
        }

    def get_by_name(self, name: str) -> Product | None:
        for p in self._store.values():
            if p.name.lower() == name.strip().lower():
                return copy.deepcopy(p)
        return None

    def list_all(self) -> list[Product]:
        return [copy.deepcopy(p) for p in self._store.values()]

    def list_by_filter(self, category=None, sub_category=None, gender=None) -> list[Product]:
        return [
            p for p in sorted(self.list_all(), key=lambda p: p.id)
            if p.matches(category, sub_category, gender)
        ]

    def list_low_stock(self, threshold: int) -> list[Product]:
        low = [p for p in self._store.values() if p.stock < threshold]
        return [copy.deepcopy(p) for p in sorted(low, key=lambda p: (p.stock, p.id))]

    def save(self, product: Product) -> None:
        if product.id is None:
            product.id = max(self._store, default=0) + 1
        self._store[product.id] = copy.deepcopy(product)

    def decrement_stock(self, product_id: int, quantity: int) -> bool:
        product = self._store.get(product_id)
        if product is None or product.stock < quantity:
            return False
        product.stock -= quantity
        return True

    def stock_of(self, product_id: int) -> int:
        return self._store[product_id].stock

    def delete(self, product_id: int) -> bool:
        return self._store.pop(product_id, None) is not None


class FakeOrderRepository(OrderRepository):

    def __init__(self) -> None:
        self._store: dict[int, Order] = {}
        self._next_id = 1
        self.fail_on_add_items: Exception | None = None

    def add(self, order: Order) -> int:
        order.id = self._next_id
        self._next_id += 1
        self._store[order.id] = replace(copy.deepcopy(order), items=())
        return order.id

    def add_items(self, order_id: int, items: list[OrderItem]) -> None:
        if self.fail_on_add_items is not None:
            raise self.fail_on_add_items
        order = self._store[order_id]
        self._store[order_id] = replace(order, items=order.items + tuple(items))

    def get_by_id(self, order_id: int) -> Order | None:
        return copy.deepcopy(self._store.get(order_id))

    def get_for_user(self, order_id: int, user_id: str) -> Order | None:
        order = self._store.get(order_id)
        if order is None or order.user_id != user_id:
            return None
        return copy.deepcopy(order)

    def list_for_user(self, user_id: str) -> list[Order]:
        return [o for o in self.list_all() if o.user_id == user_id]

    def list_all(self) -> list[Order]:
        orders = sorted(
            self._store.values(), key=lambda o: (o.order_date, o.id), reverse=True
        )
        return [copy.deepcopy(o) for o in orders]

    def update_status(self, order_id: int, status: OrderStatus) -> None:
        self._store[order_id].status = status

    def count(self) -> int:
        return len(self._store)


class FakeUserRepository(UserRepository):

    def __init__(self, users: list[User] | None = None) -> None:
        self._store: dict[str, User] = {}
        for u in users or []:
            self._store[u.id] = copy.deepcopy(u)
        self.fail_on_update_address: Exception | None = None

    def get_by_id(self, user_id: str) -> User | None:
        return copy.deepcopy(self._store.get(user_id))

    def save(self, user: User) -> None:
        self._store[user.id] = copy.deepcopy(user)

    def update_address(self, user_id: str, address: str) -> None:
        if self.fail_on_update_address is not None:
            raise self.fail_on_update_address
        user = self._store.get(user_id)
        if user is None:
            raise EntityNotFoundError(f"User '{user_id}' not found")
        user.address = address


class FakeUnitOfWork(UnitOfWork):
    """Unit of work over the fake repositories.

    Entering takes a snapshot of every store; ``rollback()`` restores
    it and ``commit()`` moves it forward, so uncommitted writes vanish
    exactly as they would in a database.

    ``between`` lets a test play another client: the callable registered
    for the N-th ``with`` block runs (and is committed) just before that
    block starts.
    """

    def __init__(
        self,
        products: list[Product] | None = None,
        users: list[User] | None = None,
    ) -> None:
        self.products = FakeProductRepository(products)
        self.orders = FakeOrderRepository()
        self.users = FakeUserRepository(users)
        self.commits = 0
        self.entered = 0
        self.between: dict[int, Callable[[], None]] = {}
        self._snapshot: tuple | None = None

    def __enter__(self) -> FakeUnitOfWork:
        self.entered += 1
        interleaved = self.between.pop(self.entered, None)
        if interleaved is not None:
            interleaved()
        self._snapshot = self._take_snapshot()
        return self

    def commit(self) -> None:
        self.commits += 1
        self._snapshot = self._take_snapshot()

    def rollback(self) -> None:
        if self._snapshot is None:
            return
        products, orders, next_id, users = copy.deepcopy(self._snapshot)
        self.products._store = products
        self.orders._store = orders
        self.orders._next_id = next_id
        self.users._store = users

    def _take_snapshot(self) -> tuple:
        return copy.deepcopy(
            (
                self.products._store,
                self.orders._store,
                self.orders._next_id,
                self.users._store,
            )
        )


class FakeSessionStore(SessionStore):

    def __init__(self) -> None:
        self.values: dict[str, str] = {}

    def get(self, key: str) -> str | None:
        return self.values.get(key)

    def set(self, key: str, value: str) -> None:
        self.values[key] = value

    def remove(self, key: str) -> None:
        self.values.pop(key, None)


class FakeCartRepository(CartRepository):

    def __init__(self) -> None:
        self._store: dict[str, Cart] = {}
        self.saves = 0

    def load(self, session_id: str) -> Cart:
        cart = self._store.get(session_id)
        return copy.deepcopy(cart) if cart is not None else Cart()

    def save(self, session_id: str, cart: Cart) -> None:
        self.saves += 1
        self._store[session_id] = copy.deepcopy(cart)

    def clear(self, session_id: str) -> None:
        self._store.pop(session_id, None)
