from pathlib import Path

import click

from shopcart.domain.model.value_objects import DEFAULT_CURRENCY
from shopcart.infrastructure.cli.cart_commands import (
    cart_add,
    cart_checkout,
    cart_create,
    cart_remove,
    cart_show,
    cart_update,
)
from shopcart.infrastructure.cli.order_commands import order_list, order_show
from shopcart.infrastructure.cli.product_commands import (
    product_add,
    product_list,
    product_update,
)
from shopcart.infrastructure.config import DEFAULT_DATA_DIR, Settings
from shopcart.infrastructure.logging import configure_logging


@click.group()
@click.option(
    "--data-dir",
    envvar="SHOPCART_DATA_DIR",
    type=click.Path(file_okay=False, path_type=Path),
    default=DEFAULT_DATA_DIR,
    show_default=True,
    help="Directory holding the JSON data files.",
)
@click.option(
    "--log-level",
    envvar="SHOPCART_LOG_LEVEL",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default="WARNING",
    show_default=True,
)
@click.option(
    "--currency",
    envvar="SHOPCART_CURRENCY",
    default=DEFAULT_CURRENCY,
    show_default=True,
    help="Currency for new carts and products.",
)
@click.option("--json", "as_json", is_flag=True, default=False, help="Print results as JSON.")
@click.pass_context
def cli(ctx: click.Context, data_dir: Path, log_level: str, currency: str, as_json: bool) -> None:
    """shopcart — shopping carts and checkout"""
    configure_logging(log_level)
    ctx.ensure_object(dict)
    ctx.obj["settings"] = Settings(
        data_dir=data_dir, log_level=log_level.upper(), currency=currency.upper()
    )
    ctx.obj["json"] = as_json


@cli.group()
def cart() -> None:
    """Manage shopping carts."""


@cli.group()
def order() -> None:
    """Inspect placed orders."""


@cli.group()
def product() -> None:
    """Manage the product catalog."""


# Register subcommands
cart.add_command(cart_add)
cart.add_command(cart_checkout)
cart.add_command(cart_create)
cart.add_command(cart_remove)
cart.add_command(cart_show)
cart.add_command(cart_update)
order.add_command(order_list)
order.add_command(order_show)
product.add_command(product_add)
product.add_command(product_list)
product.add_command(product_update)
