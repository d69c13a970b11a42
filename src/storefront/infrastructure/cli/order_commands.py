"""CLI commands for the Order aggregate."""

from __future__ import annotations

import click

from storefront.application.dto import OrderDTO
from storefront.application.list_orders import ListAllOrdersHandler, ListOrdersHandler
from storefront.application.show_order import ShowOrderHandler
from storefront.application.update_order_status import UpdateOrderStatusHandler
from storefront.domain.exceptions import DomainException
from storefront.domain.model.order import OrderStatus
from storefront.infrastructure.bootstrap import unit_of_work


def display_order(dto: OrderDTO) -> None:
    """Shared formatting for displaying an order."""
    click.echo(f"Order #{dto.id}  (status={dto.status})")
    click.echo(f"User:     {dto.user_id}")
    click.echo(f"Placed:   {dto.order_date}")
    click.echo(f"Ship to:  {dto.shipping_address or '-'}")
    click.echo()
    click.echo(f"  {'Product':<24} {'Qty':>5} {'Price':>10} {'Total':>10}")
    click.echo(f"  {'-'*51}")
    for item in dto.items:
        click.echo(
            f"  {item.product_name:<24} {item.quantity:>5} {item.price:>10} {item.line_total:>10}"
        )
    click.echo(f"  {'-'*51}")
    click.echo(f"  {'Order Total':<31} {dto.total:>20}")


def _display_summary(orders: list[OrderDTO]) -> None:
    if not orders:
        click.echo("No orders found.")
        return

    click.echo(f"{'ID':<6} {'Placed':<22} {'User':<12} {'Status':<12} {'Total':>10}")
    click.echo("-" * 66)
    for o in orders:
        click.echo(f"{o.id:<6} {o.order_date:<22} {o.user_id:<12} {o.status:<12} {o.total:>10}")


@click.command("show")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to display.")
@click.option("--user", "user_id", required=True, help="Signed-in user ID.")
def order_show(order_id: int, user_id: str) -> None:
    """Show one of the user's orders."""
    handler = ShowOrderHandler(uow=unit_of_work())

    try:
        dto = handler.handle(order_id, user_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    display_order(dto)


@click.command("list")
@click.option("--user", "user_id", required=True, help="Signed-in user ID.")
def order_list(user_id: str) -> None:
    """List the user's orders, newest first."""
    _display_summary(ListOrdersHandler(uow=unit_of_work()).handle(user_id))


@click.command("all")
def order_all() -> None:
    """List every order (back-office)."""
    _display_summary(ListAllOrdersHandler(uow=unit_of_work()).handle())


@click.command("status")
@click.option("--id", "order_id", required=True, type=int, help="Order ID.")
@click.option(
    "--status",
    required=True,
    type=click.Choice([s.value for s in OrderStatus], case_sensitive=False),
    help="New status.",
)
def order_status(order_id: int, status: str) -> None:
    """Change an order's status (back-office)."""
    handler = UpdateOrderStatusHandler(uow=unit_of_work())

    try:
        handler.handle(order_id, status)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order #{order_id} status updated to {OrderStatus.parse(status).value}")
