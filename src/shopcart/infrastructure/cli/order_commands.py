"""CLI commands for the Order aggregate."""

from __future__ import annotations

import json

import click

from shopcart.application.commands import GetOrder, ListOrders
from shopcart.application.dto import OrderDTO
from shopcart.application.get_order import GetOrderHandler, ListOrdersHandler
from shopcart.domain.exceptions import DomainException
from shopcart.infrastructure.bootstrap import order_repository


def _display_order(dto: OrderDTO) -> None:
    """Shared formatting for displaying an order."""
    click.echo(f"Order {dto.order_id}  (status={dto.status})")
    customer = f"{dto.customer_name} <{dto.customer_email}>" if dto.customer_name else dto.customer_email
    click.echo(f"Customer: {customer}")
    click.echo(f"Created:  {dto.created_at}")
    click.echo()
    click.echo(f"  {'Product':<20} {'Qty':>5} {'Price':>10} {'Subtotal':>10}")
    click.echo(f"  {'-'*47}")
    for item in dto.items:
        click.echo(
            f"  {item.product_name:<20} {item.quantity:>5} {item.unit_price:>10} {item.subtotal:>10}"
        )
    click.echo(f"  {'-'*47}")
    click.echo(f"  {'Order Total':<27} {dto.total_amount + ' ' + dto.currency:>20}")


@click.command("show")
@click.option("--id", "order_id", required=True, help="Order ID to display.")
@click.pass_obj
def order_show(obj: dict, order_id: str) -> None:
    """Show details of a placed order."""
    handler = GetOrderHandler(order_repo=order_repository(obj["settings"]))

    try:
        dto = handler.handle(GetOrder(order_id))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if obj["json"]:
        click.echo(json.dumps(dto.to_dict(), indent=2))
    else:
        _display_order(dto)


@click.command("list")
@click.option("--email", default=None, help="Only orders placed with this email.")
@click.option("--status", default=None, help="Only orders in this status.")
@click.pass_obj
def order_list(obj: dict, email: str | None, status: str | None) -> None:
    """List placed orders."""
    handler = ListOrdersHandler(order_repo=order_repository(obj["settings"]))
    dtos = handler.handle(ListOrders(customer_email=email, status=status))

    if obj["json"]:
        click.echo(json.dumps([dto.to_dict() for dto in dtos], indent=2))
        return

    if not dtos:
        click.echo("No orders found.")
        return

    click.echo(f"{'Order':<38} {'Status':<10} {'Customer':<30} {'Total':>10}")
    click.echo("-" * 91)
    for dto in dtos:
        click.echo(
            f"{dto.order_id:<38} {dto.status:<10} {dto.customer_email:<30} {dto.total_amount:>10}"
        )
