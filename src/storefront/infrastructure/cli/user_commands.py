"""CLI commands for user profiles."""

from __future__ import annotations

import click

from storefront.application.add_user import AddUserHandler
from storefront.domain.exceptions import DomainException
from storefront.infrastructure.bootstrap import unit_of_work


@click.command("add")
@click.option("--id", "user_id", required=True, help="Principal ID from the identity provider.")
@click.option("--email", required=True, help="Email address.")
@click.option("--name", "full_name", default="", help="Full name.")
@click.option("--admin", "is_admin", is_flag=True, default=False, help="Grant back-office role.")
def user_add(user_id: str, email: str, full_name: str, is_admin: bool) -> None:
    """Register a user profile."""
    handler = AddUserHandler(uow=unit_of_work())

    try:
        user = handler.handle(user_id, email, full_name=full_name, is_admin=is_admin)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    role = "admin" if user.is_admin else "customer"
    click.echo(f"User '{user.id}' added ({role}).")
