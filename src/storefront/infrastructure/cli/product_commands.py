"""CLI commands for the Product aggregate."""

from __future__ import annotations

import click

from storefront.application.add_product import AddProductHandler
from storefront.application.browse_catalog import BrowseCatalogHandler
from storefront.application.delete_product import DeleteProductHandler
from storefront.application.low_stock import LOW_STOCK_THRESHOLD, LowStockHandler
from storefront.application.show_product import ShowProductHandler
from storefront.application.update_product import UpdateProductHandler, UpdateStockHandler
from storefront.domain.exceptions import DomainException
from storefront.domain.model.product import GENDERS
from storefront.domain.model.value_objects import Money
from storefront.infrastructure.bootstrap import unit_of_work


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--price", required=True, help="Price (e.g. 15.00).")
@click.option("--stock", default=0, type=int, show_default=True, help="Units in stock.")
@click.option("--category", default="", help="Category, e.g. SHIRTS.")
@click.option("--sub-category", default="", help="Sub-category, e.g. MENS.")
@click.option("--image", "image_path", default="", help="Image path.")
@click.option("--description", default="", help="Description.")
def product_add(
    name: str,
    price: str,
    stock: int,
    category: str,
    sub_category: str,
    image_path: str,
    description: str,
) -> None:
    """Add a new product to the catalog."""
    handler = AddProductHandler(uow=unit_of_work())

    try:
        product = handler.handle(
            name=name,
            price=price,
            stock=stock,
            image_path=image_path,
            category=category,
            sub_category=sub_category,
            description=description,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product.id} '{product.name}' added at {product.price}")


@click.command("list")
@click.option("--category", default=None, help="Only this category, e.g. SHIRTS.")
@click.option("--sub-category", default=None, help="Only this sub-category, e.g. MENS.")
@click.option(
    "--gender",
    type=click.Choice(GENDERS, case_sensitive=False),
    default=None,
    help="Men's or women's wear; women's includes all dresses.",
)
def product_list(category: str | None, sub_category: str | None, gender: str | None) -> None:
    """List catalog products, optionally filtered."""
    handler = BrowseCatalogHandler(uow=unit_of_work())

    try:
        products = handler.handle(category, sub_category, gender)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<6} {'Name':<24} {'Price':>10} {'Stock':>7}")
    click.echo("-" * 50)
    for p in products:
        click.echo(f"{p.id:<6} {p.name:<24} {p.price:>10} {p.stock:>7}")


@click.command("show")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
def product_show(product_id: int) -> None:
    """Show one product and related products from its category."""
    handler = ShowProductHandler(uow=unit_of_work())

    try:
        details = handler.handle(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    p = details.product
    click.echo(f"Product #{p.id}: {p.name}")
    click.echo(f"  Price:    {p.price}")
    click.echo(f"  Stock:    {p.stock if p.stock else 'Out of stock'}")
    click.echo(f"  Category: {p.category or '-'} / {p.sub_category or '-'}")
    if p.description:
        click.echo(f"  {p.description}")

    if details.related:
        click.echo("Related products:")
        for r in details.related:
            click.echo(f"  #{r.id:<5} {r.name:<24} {r.price:>10}")


@click.command("delete")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.confirmation_option(prompt="Delete this product from the catalog?")
def product_delete(product_id: int) -> None:
    """Remove a product; existing orders keep their item details."""
    handler = DeleteProductHandler(uow=unit_of_work())

    try:
        handler.handle(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product_id} deleted")


@click.command("update")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.option("--price", required=True, help="New price (e.g. 29.99).")
def product_update(product_id: int, price: str) -> None:
    """Update a product's price."""
    handler = UpdateProductHandler(uow=unit_of_work())

    try:
        handler.handle(product_id=product_id, new_price=price)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product_id} price updated to {Money.of(price)}")


@click.command("stock")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.option("--set", "new_stock", type=int, default=None, help="Absolute stock level.")
@click.option("--change", "stock_change", type=int, default=None, help="Relative change, e.g. -3.")
def product_stock(product_id: int, new_stock: int | None, stock_change: int | None) -> None:
    """Set or adjust a product's stock (never below 0)."""
    handler = UpdateStockHandler(uow=unit_of_work())

    try:
        stock = handler.handle(product_id, new_stock=new_stock, stock_change=stock_change)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product_id} stock is now {stock}")


@click.command("low-stock")
@click.option(
    "--threshold",
    default=LOW_STOCK_THRESHOLD,
    type=int,
    show_default=True,
    help="Report products with less stock than this.",
)
def product_low_stock(threshold: int) -> None:
    """List products that are running low."""
    summaries = LowStockHandler(uow=unit_of_work()).handle(threshold)

    if not summaries:
        click.echo("No products are low in stock.")
        return

    click.echo(f"{len(summaries)} products are low in stock")
    for s in summaries:
        click.echo(f"  #{s.product_id:<5} {s.product_name:<24} {s.stock:>5}")
