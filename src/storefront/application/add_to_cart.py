"""Application service: Add To Cart use case.

Stock is checked here against the live catalog before the cart is
touched, and checked again at checkout.
"""

from __future__ import annotations

import structlog

from storefront.application.dto import CartSummaryDTO
from storefront.domain.exceptions import (
    EntityNotFoundError,
    PermissionDeniedError,
    ValidationError,
)
from storefront.domain.repository.cart_repository import CartRepository
from storefront.domain.repository.unit_of_work import UnitOfWork

logger = structlog.get_logger(__name__)


class AddToCartHandler:

    def __init__(self, cart_repo: CartRepository, uow: UnitOfWork) -> None:
        self._cart_repo = cart_repo
        self._uow = uow

    def handle(
        self,
        session_id: str,
        product_id: int,
        quantity: int = 1,
        user_id: str | None = None,
    ) -> CartSummaryDTO:
        """Add a product to the session's cart.

        A non-positive quantity is treated as 1.  Administrators manage
        the catalog and cannot shop.
        """
        if quantity <= 0:
            quantity = 1

        with self._uow:
            if user_id is not None:
                user = self._uow.users.get_by_id(user_id)
                if user is not None and user.is_admin:
                    raise PermissionDeniedError("Admins cannot add items to cart")

            product = self._uow.products.get_by_id(product_id)

        if product is None:
            raise EntityNotFoundError("Product not found")
        if not product.in_stock:
            raise ValidationError("This product is out of stock")
        if product.stock < quantity:
            raise ValidationError(f"Only {product.stock} item(s) available in stock")

        cart = self._cart_repo.load(session_id)
        cart.add(product, quantity)
        self._cart_repo.save(session_id, cart)

        logger.debug(
            "Added to cart",
            session_id=session_id,
            product_id=product_id,
            quantity=quantity,
        )
        return CartSummaryDTO(
            count=cart.count(),
            total=str(cart.total()),
            available_stock=product.stock - quantity,
        )
