"""Application service: Checkout Preview use case (query).

Pre-fills the checkout form from the cart and the user's profile.
"""

from __future__ import annotations

from storefront.application.dto import CheckoutPreviewDTO
from storefront.application.show_cart import cart_to_dto
from storefront.domain.exceptions import EmptyCartError
from storefront.domain.repository.cart_repository import CartRepository
from storefront.domain.repository.unit_of_work import UnitOfWork


class CheckoutPreviewHandler:

    def __init__(self, cart_repo: CartRepository, uow: UnitOfWork) -> None:
        self._cart_repo = cart_repo
        self._uow = uow

    def handle(self, session_id: str, user_id: str) -> CheckoutPreviewDTO:
        cart = self._cart_repo.load(session_id)
        if cart.is_empty:
            raise EmptyCartError()

        with self._uow:
            user = self._uow.users.get_by_id(user_id)
            products = self._uow.products.get_many_by_id(
                [line.product_id for line in cart.lines()]
            )

        return CheckoutPreviewDTO(
            cart=cart_to_dto(cart, products),
            full_name=user.full_name if user is not None else "",
            email=user.email if user is not None else "",
            shipping_address=user.address if user is not None else "",
        )
