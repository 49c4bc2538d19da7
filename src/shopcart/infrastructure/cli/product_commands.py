"""CLI commands for the Product aggregate."""

from __future__ import annotations

import json

import click

from shopcart.application.add_product import AddProductHandler
from shopcart.application.list_products import ListProductsHandler
from shopcart.application.update_product import UpdateProductHandler
from shopcart.domain.exceptions import DomainException
from shopcart.infrastructure.bootstrap import id_generator, product_repository


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--price", required=True, help="Price (e.g. 15.00).")
@click.option("--stock", default=0, type=int, show_default=True, help="Units in stock.")
@click.pass_obj
def product_add(obj: dict, name: str, price: str, stock: int) -> None:
    """Add a new product to the catalog."""
    settings = obj["settings"]
    handler = AddProductHandler(
        product_repo=product_repository(settings),
        id_generator=id_generator(),
        currency=settings.currency,
    )

    try:
        dto = handler.handle(name=name, price=price, stock=stock)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if obj["json"]:
        click.echo(json.dumps(dto.to_dict(), indent=2))
    else:
        click.echo(f"Product {dto.product_id} '{dto.name}' added at {dto.price} {dto.currency}")


@click.command("list")
@click.option("--in-stock", is_flag=True, default=False, help="Only products with stock.")
@click.pass_obj
def product_list(obj: dict, in_stock: bool) -> None:
    """List products in the catalog."""
    handler = ListProductsHandler(product_repo=product_repository(obj["settings"]))
    products = handler.handle(in_stock_only=in_stock)

    if obj["json"]:
        click.echo(json.dumps([p.to_dict() for p in products], indent=2))
        return

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<38} {'Name':<20} {'Price':>10} {'Stock':>6}")
    click.echo("-" * 77)
    for p in products:
        click.echo(f"{p.product_id:<38} {p.name:<20} {p.price:>10} {p.stock:>6}")


@click.command("update")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--price", default=None, help="New price (e.g. 29.99).")
@click.option("--stock", default=None, type=int, help="New stock level.")
@click.pass_obj
def product_update(obj: dict, product_id: str, price: str | None, stock: int | None) -> None:
    """Update a product's price and/or stock."""
    if price is None and stock is None:
        raise click.UsageError("Pass --price and/or --stock.")

    handler = UpdateProductHandler(product_repo=product_repository(obj["settings"]))

    try:
        dto = handler.handle(product_id=product_id, new_price=price, new_stock=stock)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product {dto.product_id} now {dto.price} {dto.currency}, {dto.stock} in stock")
