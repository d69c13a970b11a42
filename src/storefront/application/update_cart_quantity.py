"""Application service: Update Cart Quantity use case."""

from __future__ import annotations

import structlog

from storefront.application.dto import CartSummaryDTO
from storefront.domain.exceptions import EntityNotFoundError, ValidationError
from storefront.domain.repository.cart_repository import CartRepository
from storefront.domain.repository.unit_of_work import UnitOfWork

logger = structlog.get_logger(__name__)


class UpdateCartQuantityHandler:

    def __init__(self, cart_repo: CartRepository, uow: UnitOfWork) -> None:
        self._cart_repo = cart_repo
        self._uow = uow

    def handle(self, session_id: str, product_id: int, quantity: int) -> CartSummaryDTO:
        """Set the quantity of a cart line.

        Zero or less removes the line.  A positive quantity must be
        covered by the product's current stock.
        """
        if quantity > 0:
            with self._uow:
                product = self._uow.products.get_by_id(product_id)
            if product is None:
                raise EntityNotFoundError("Product not found")
            if product.stock < quantity:
                raise ValidationError(f"Only {product.stock} items available in stock")

        cart = self._cart_repo.load(session_id)
        cart.update_quantity(product_id, quantity)
        self._cart_repo.save(session_id, cart)

        logger.debug(
            "Updated cart quantity",
            session_id=session_id,
            product_id=product_id,
            quantity=quantity,
        )
        line = cart.get(product_id)
        return CartSummaryDTO(
            count=cart.count(),
            total=str(cart.total()),
            line_subtotal=str(line.subtotal) if line is not None else "$0.00",
        )
