"""Demo catalog and accounts for a fresh database."""

from __future__ import annotations

from decimal import Decimal

import structlog

from storefront.domain.model.product import Product
from storefront.domain.model.user import User
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.unit_of_work import UnitOfWork

logger = structlog.get_logger(__name__)

# (category, sub-category, label, base price, price step, stock)
_LINES = [
    ("SHIRTS", "MENS", "Men's Shirt", "29.99", 5, 50),
    ("SHIRTS", "WOMENS", "Women's Shirt", "24.99", 5, 50),
    ("PANTS", "MENS", "Men's Pants", "49.99", 5, 40),
    ("PANTS", "WOMENS", "Women's Pants", "44.99", 5, 40),
    ("SHOES", "MENS", "Men's Shoes", "79.99", 10, 30),
    ("SHOES", "WOMENS", "Women's Shoes", "69.99", 10, 30),
]
PRODUCTS_PER_LINE = 5

# Dresses carry no gender sub-category; the WOMENS filter picks them up.
# (sub-category, price, stock, colours)
_DRESSES = [
    ("MAXI DRESS", "59.99", 25, ["Black", "Blue", "Floral", "Pink", "White", "Yellow"]),
    ("MIDI DRESS", "54.99", 25, ["Black", "Brown", "Blue Tube", "Green", "Red", "White"]),
    ("MINI DRESS", "49.99", 25, ["Baby Pink", "Black", "Blue", "Brown Leather", "Denim", "Red"]),
]

DEMO_USERS = [
    User(id="admin", email="admin@example.com", full_name="Admin User", is_admin=True),
    User(id="user", email="user@example.com", full_name="Test User"),
]


def seed(uow: UnitOfWork) -> int:
    """Fill an empty catalog; returns the number of products added."""
    with uow:
        if uow.products.list_all():
            logger.info("Catalog already populated, skipping seed")
            return 0

        added = 0
        for category, sub_category, label, base, step, stock in _LINES:
            for i in range(1, PRODUCTS_PER_LINE + 1):
                uow.products.save(
                    Product(
                        id=None,
                        name=f"{label} {i}",
                        price=Money(Decimal(base) + step * i),
                        stock=stock,
                        image_path=f"/images/{category}/{sub_category}/{i}.PNG",
                        category=category,
                        sub_category=sub_category,
                        description=f"{label} #{i}",
                    )
                )
                added += 1

        for sub_category, price, stock, colours in _DRESSES:
            style = sub_category.title()
            for colour in colours:
                uow.products.save(
                    Product(
                        id=None,
                        name=f"{colour} {style}",
                        price=Money(Decimal(price)),
                        stock=stock,
                        image_path=f"/images/DRESS/{sub_category}/{colour.upper()}.PNG",
                        category="DRESS",
                        sub_category=sub_category,
                        description=f"{style} in {colour.lower()}",
                    )
                )
                added += 1

        for user in DEMO_USERS:
            if uow.users.get_by_id(user.id) is None:
                uow.users.save(user)

        uow.commit()

    logger.info("Seeded catalog", products=added)
    return added
