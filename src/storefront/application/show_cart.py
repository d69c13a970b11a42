"""Application service: Show Cart use case (query)."""

from __future__ import annotations

from storefront.application.dto import CartDTO, CartLineDTO
from storefront.domain.model.cart import Cart
from storefront.domain.model.product import Product
from storefront.domain.repository.cart_repository import CartRepository
from storefront.domain.repository.unit_of_work import UnitOfWork


class ShowCartHandler:

    def __init__(self, cart_repo: CartRepository, uow: UnitOfWork) -> None:
        self._cart_repo = cart_repo
        self._uow = uow

    def handle(self, session_id: str) -> CartDTO:
        """Return the cart with each line's live stock attached."""
        cart = self._cart_repo.load(session_id)
        with self._uow:
            products = self._uow.products.get_many_by_id(
                [line.product_id for line in cart.lines()]
            )
        return cart_to_dto(cart, products)


def cart_to_dto(cart: Cart, products: dict[int, Product]) -> CartDTO:
    lines = []
    for line in cart.lines():
        product = products.get(line.product_id)
        lines.append(
            CartLineDTO(
                product_id=line.product_id,
                product_name=line.product_name,
                product_image=line.product_image,
                unit_price=str(line.unit_price),
                quantity=line.quantity,
                subtotal=str(line.subtotal),
                stock=product.stock if product is not None else 0,
            )
        )
    return CartDTO(lines=lines, total=str(cart.total()), count=cart.count())
