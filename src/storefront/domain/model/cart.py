"""Shopping cart: the client's pending purchase selection.

The cart is a plain value owned by whoever handles the request: it is
loaded from the session, mutated, and saved back.  Nothing here touches
storage, so every rule can be exercised without a session.
"""

from __future__ import annotations

from dataclasses import dataclass, replace

from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money


@dataclass
class CartLine:
    """One product entry in the cart.

    Name, image and unit price are snapshots taken when the product was
    first added; they are not refreshed from the catalog afterwards.
    """

    product_id: int
    product_name: str
    product_image: str
    unit_price: Money
    quantity: int

    @property
    def subtotal(self) -> Money:
        return self.unit_price * self.quantity


class Cart:
    """Ordered mapping of product ID to cart line.

    Invariant: every stored line has ``quantity >= 1``.  Lines keep the
    order in which products were first added.
    """

    def __init__(self, lines: list[CartLine] | None = None) -> None:
        self._lines: dict[int, CartLine] = {}
        for line in lines or []:
            if line.quantity > 0:
                self._lines[line.product_id] = line

    # --- Mutations ------------------------------------------------------------

    def add(self, product: Product, quantity: int = 1) -> None:
        """Add *quantity* units of *product*.

        Repeated adds accumulate on the existing line and keep its original
        snapshot.  Callers reject ``quantity <= 0`` and check stock first.
        """
        existing = self._lines.get(product.id)
        if existing is not None:
            existing.quantity += quantity
            return

        self._lines[product.id] = CartLine(
            product_id=product.id,
            product_name=product.name,
            product_image=product.image_path,
            unit_price=product.price,
            quantity=quantity,
        )

    def update_quantity(self, product_id: int, quantity: int) -> None:
        """Set a line's quantity; zero or less removes the line."""
        line = self._lines.get(product_id)
        if line is None:
            return
        if quantity <= 0:
            del self._lines[product_id]
        else:
            line.quantity = quantity

    def remove(self, product_id: int) -> None:
        self._lines.pop(product_id, None)

    def clear(self) -> None:
        self._lines.clear()

    # --- Queries --------------------------------------------------------------

    def lines(self) -> tuple[CartLine, ...]:
        """Snapshot of the current lines, in insertion order."""
        return tuple(replace(line) for line in self._lines.values())

    def get(self, product_id: int) -> CartLine | None:
        line = self._lines.get(product_id)
        return replace(line) if line is not None else None

    def total(self) -> Money:
        return Money.total(line.subtotal for line in self._lines.values())

    def count(self) -> int:
        return sum(line.quantity for line in self._lines.values())

    @property
    def is_empty(self) -> bool:
        return not self._lines

    def __len__(self) -> int:
        return len(self._lines)

    def __contains__(self, product_id: object) -> bool:
        return product_id in self._lines

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Cart):
            return NotImplemented
        return list(self._lines.values()) == list(other._lines.values())
