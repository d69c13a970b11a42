"""CLI commands for a session's cart."""

from __future__ import annotations

import click

from storefront.application.add_to_cart import AddToCartHandler
from storefront.application.clear_cart import ClearCartHandler
from storefront.application.dto import CartDTO
from storefront.application.remove_from_cart import RemoveFromCartHandler
from storefront.application.show_cart import ShowCartHandler
from storefront.application.update_cart_quantity import UpdateCartQuantityHandler
from storefront.domain.exceptions import DomainException
from storefront.infrastructure.bootstrap import cart_repository, unit_of_work

session_option = click.option(
    "--session", "session_id", required=True, help="Client session ID."
)


def display_cart(dto: CartDTO) -> None:
    """Shared formatting for displaying a cart."""
    if not dto.lines:
        click.echo("Your cart is empty.")
        return

    click.echo(f"  {'ID':<5} {'Product':<24} {'Qty':>5} {'Price':>10} {'Subtotal':>10} {'Stock':>6}")
    click.echo(f"  {'-'*65}")
    for line in dto.lines:
        click.echo(
            f"  {line.product_id:<5} {line.product_name:<24} {line.quantity:>5} "
            f"{line.unit_price:>10} {line.subtotal:>10} {line.stock:>6}"
        )
    click.echo(f"  {'-'*65}")
    click.echo(f"  {'Items':<30} {dto.count:>5}")
    click.echo(f"  {'Cart Total':<30} {dto.total:>27}")


@click.command("show")
@session_option
def cart_show(session_id: str) -> None:
    """Show the cart."""
    handler = ShowCartHandler(cart_repo=cart_repository(), uow=unit_of_work())

    try:
        dto = handler.handle(session_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    display_cart(dto)


@click.command("add")
@session_option
@click.option("--product", "product_id", required=True, type=int, help="Product ID.")
@click.option("--quantity", default=1, type=int, show_default=True, help="Units to add.")
@click.option("--user", "user_id", default=None, help="Signed-in user ID, if any.")
def cart_add(session_id: str, product_id: int, quantity: int, user_id: str | None) -> None:
    """Add a product to the cart."""
    handler = AddToCartHandler(cart_repo=cart_repository(), uow=unit_of_work())

    try:
        summary = handler.handle(session_id, product_id, quantity, user_id=user_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product added to cart! ({summary.count} items, {summary.total})")


@click.command("update")
@session_option
@click.option("--product", "product_id", required=True, type=int, help="Product ID.")
@click.option("--quantity", required=True, type=int, help="New quantity; 0 removes the line.")
def cart_update(session_id: str, product_id: int, quantity: int) -> None:
    """Change the quantity of a cart line."""
    handler = UpdateCartQuantityHandler(cart_repo=cart_repository(), uow=unit_of_work())

    try:
        summary = handler.handle(session_id, product_id, quantity)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Cart updated ({summary.count} items, {summary.total})")


@click.command("remove")
@session_option
@click.option("--product", "product_id", required=True, type=int, help="Product ID.")
def cart_remove(session_id: str, product_id: int) -> None:
    """Remove a product from the cart."""
    handler = RemoveFromCartHandler(cart_repo=cart_repository())

    try:
        summary = handler.handle(session_id, product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Item removed from cart ({summary.count} items, {summary.total})")


@click.command("clear")
@session_option
def cart_clear(session_id: str) -> None:
    """Empty the cart."""
    try:
        ClearCartHandler(cart_repo=cart_repository()).handle(session_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo("Cart cleared.")
