import click

from storefront.infrastructure import bootstrap
from storefront.infrastructure.cli.cart_commands import (
    cart_add,
    cart_clear,
    cart_remove,
    cart_show,
    cart_update,
)
from storefront.infrastructure.cli.checkout_commands import checkout_place, checkout_preview
from storefront.infrastructure.cli.db_commands import db_init
from storefront.infrastructure.cli.order_commands import (
    order_all,
    order_list,
    order_show,
    order_status,
)
from storefront.infrastructure.cli.product_commands import (
    product_add,
    product_delete,
    product_list,
    product_low_stock,
    product_show,
    product_stock,
    product_update,
)
from storefront.infrastructure.cli.user_commands import user_add
from storefront.utils.logging import configure_logging


@click.group()
@click.option(
    "--database-url",
    envvar="SHOP_DATABASE_URL",
    default=None,
    help="SQLAlchemy database URL (default: SQLite file under data/).",
)
@click.option(
    "--session-dir",
    envvar="SHOP_SESSION_DIR",
    default=None,
    type=click.Path(file_okay=False),
    help="Directory holding per-session cart files.",
)
@click.option("-v", "--verbose", is_flag=True, default=False, help="Show debug logs.")
def cli(database_url: str | None, session_dir: str | None, verbose: bool) -> None:
    """Storefront command line."""
    configure_logging(verbose)
    bootstrap.configure(database_url=database_url, session_dir=session_dir)


@cli.group()
def db() -> None:
    """Manage the database."""


@cli.group()
def product() -> None:
    """Manage the catalog."""


@cli.group()
def cart() -> None:
    """Manage a session's cart."""


@cli.group()
def checkout() -> None:
    """Check out a session's cart."""


@cli.group()
def order() -> None:
    """Browse and manage orders."""


@cli.group()
def user() -> None:
    """Manage user profiles."""


# Register subcommands
db.add_command(db_init)
product.add_command(product_add)
product.add_command(product_delete)
product.add_command(product_list)
product.add_command(product_low_stock)
product.add_command(product_show)
product.add_command(product_stock)
product.add_command(product_update)
cart.add_command(cart_add)
cart.add_command(cart_clear)
cart.add_command(cart_remove)
cart.add_command(cart_show)
cart.add_command(cart_update)
checkout.add_command(checkout_place)
checkout.add_command(checkout_preview)
order.add_command(order_all)
order.add_command(order_list)
order.add_command(order_show)
order.add_command(order_status)
user.add_command(user_add)
