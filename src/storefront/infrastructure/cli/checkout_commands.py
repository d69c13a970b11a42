"""CLI commands for checkout."""

from __future__ import annotations

import click

from storefront.application.checkout_preview import CheckoutPreviewHandler
from storefront.application.place_order import PlaceOrderHandler
from storefront.application.show_order import ShowOrderHandler
from storefront.domain.exceptions import DomainException
from storefront.infrastructure.bootstrap import cart_repository, unit_of_work
from storefront.infrastructure.cli.cart_commands import display_cart, session_option
from storefront.infrastructure.cli.order_commands import display_order


@click.command("preview")
@session_option
@click.option("--user", "user_id", required=True, help="Signed-in user ID.")
def checkout_preview(session_id: str, user_id: str) -> None:
    """Show what would be ordered and where it would ship."""
    handler = CheckoutPreviewHandler(cart_repo=cart_repository(), uow=unit_of_work())

    try:
        dto = handler.handle(session_id, user_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    display_cart(dto.cart)
    click.echo()
    click.echo(f"Name:    {dto.full_name}")
    click.echo(f"Email:   {dto.email}")
    click.echo(f"Ship to: {dto.shipping_address or '-'}")


@click.command("place")
@session_option
@click.option("--user", "user_id", required=True, help="Signed-in user ID.")
@click.option("--address", "shipping_address", default="", help="Shipping address.")
def checkout_place(session_id: str, user_id: str, shipping_address: str) -> None:
    """Place an order for everything in the cart."""
    handler = PlaceOrderHandler(cart_repo=cart_repository(), uow=unit_of_work())

    try:
        outcome = handler.handle(session_id, user_id, shipping_address)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not outcome.success:
        raise click.ClickException(outcome.message)

    click.echo(outcome.message)
    click.echo()
    try:
        dto = ShowOrderHandler(uow=unit_of_work()).handle(outcome.order_id, user_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))
    display_order(dto)
