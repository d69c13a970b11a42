"""Product aggregate.

Products live independently of carts and orders. They have their own
lifecycle: prices change, stock is received and sold, products are added
and removed from the catalog.
"""

from __future__ import annotations

from dataclasses import dataclass

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.value_objects import Money

MENS = "MENS"
WOMENS = "WOMENS"
DRESS = "DRESS"
GENDERS = (MENS, WOMENS)


@dataclass
class Product:
    """A product in the catalog.

    Invariants:
    - ``stock`` is never negative
    - ``price`` is always greater than zero
    """

    id: int | None
    name: str
    price: Money
    stock: int = 0
    image_path: str = ""
    category: str = ""
    sub_category: str = ""
    description: str = ""

    def __post_init__(self) -> None:
        if self.stock < 0:
            raise ValidationError("Product stock cannot be negative")
        if not self.price.is_positive:
            raise ValidationError("Product price must be greater than zero")

    @property
    def in_stock(self) -> bool:
        return self.stock > 0

    def update_price(self, new_price: Money) -> None:
        """Change the product price.

        This does NOT affect any existing carts or orders because both
        capture a price snapshot.
        """
        if not new_price.is_positive:
            raise ValidationError("Product price must be greater than zero")
        self.price = new_price

    def set_stock(self, new_stock: int) -> None:
        """Set an absolute stock level, clamped at zero."""
        self.stock = max(0, new_stock)

    def adjust_stock(self, change: int) -> None:
        """Apply a relative stock change, clamped at zero."""
        self.stock = max(0, self.stock + change)

    def matches(
        self,
        category: str | None = None,
        sub_category: str | None = None,
        gender: str | None = None,
    ) -> bool:
        """Catalog browsing filter; every given criterion must hold.

        Men's wear is the MENS sub-category only.  Women's wear is the
        WOMENS sub-category plus every dress, whatever its sub-category.
        """
        if category and self.category != category:
            return False
        if sub_category and self.sub_category != sub_category:
            return False
        if gender == MENS:
            return self.sub_category == MENS
        if gender == WOMENS:
            return self.sub_category == WOMENS or self.category == DRESS
        return True
