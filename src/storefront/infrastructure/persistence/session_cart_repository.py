"""CartRepository that keeps each cart as a JSON blob in its session."""

from __future__ import annotations

import json
from collections.abc import Callable
from decimal import Decimal

from storefront.domain.model.cart import Cart, CartLine
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.cart_repository import CartRepository
from storefront.domain.repository.session_store import SessionStore

CART_SESSION_KEY = "Cart"


class SessionCartRepository(CartRepository):

    def __init__(self, store_for: Callable[[str], SessionStore]) -> None:
        self._store_for = store_for

    # --- CartRepository interface ---------------------------------------------

    def load(self, session_id: str) -> Cart:
        blob = self._store_for(session_id).get(CART_SESSION_KEY)
        if not blob:
            return Cart()
        return Cart([self._to_domain(raw) for raw in json.loads(blob)])

    def save(self, session_id: str, cart: Cart) -> None:
        blob = json.dumps([self._to_raw(line) for line in cart.lines()])
        self._store_for(session_id).set(CART_SESSION_KEY, blob)

    def clear(self, session_id: str) -> None:
        self._store_for(session_id).remove(CART_SESSION_KEY)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(line: CartLine) -> dict:
        return {
            "product_id": line.product_id,
            "product_name": line.product_name,
            "product_image": line.product_image,
            "price": str(line.unit_price.amount),
            "currency": line.unit_price.currency,
            "quantity": line.quantity,
        }

    @staticmethod
    def _to_domain(raw: dict) -> CartLine:
        return CartLine(
            product_id=raw["product_id"],
            product_name=raw["product_name"],
            product_image=raw.get("product_image", ""),
            unit_price=Money(Decimal(raw["price"]), raw.get("currency", "USD")),
            quantity=raw["quantity"],
        )
