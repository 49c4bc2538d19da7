"""CLI commands for the Cart aggregate."""

from __future__ import annotations

import json

import click

from shopcart.application.add_item_to_cart import AddItemToCartHandler
from shopcart.application.checkout_cart import CheckoutCartHandler
from shopcart.application.commands import (
    AddItemToCart,
    CheckoutCart,
    CreateCart,
    GetCart,
    GetCartBySession,
    RemoveItemFromCart,
    UpdateCartItemQuantity,
)
from shopcart.application.create_cart import CreateCartHandler
from shopcart.application.dto import CartDTO
from shopcart.application.get_cart import GetCartBySessionHandler, GetCartHandler
from shopcart.application.remove_item_from_cart import RemoveItemFromCartHandler
from shopcart.application.update_cart_item_quantity import (
    UpdateCartItemQuantityHandler,
)
from shopcart.domain.exceptions import DomainException
from shopcart.infrastructure.bootstrap import (
    cart_repository,
    id_generator,
    order_repository,
    product_repository,
    unit_of_work,
)


def _display_cart(dto: CartDTO, as_json: bool) -> None:
    """Shared formatting for displaying a cart."""
    if as_json:
        click.echo(json.dumps(dto.to_dict(), indent=2))
        return

    click.echo(f"Cart {dto.cart_id}")
    if dto.session_id:
        click.echo(f"Session: {dto.session_id}")
    click.echo()

    if not dto.items:
        click.echo("  (empty)")
    else:
        click.echo(f"  {'Product':<20} {'Qty':>5} {'Price':>10} {'Subtotal':>10}")
        click.echo(f"  {'-'*47}")
        for item in dto.items:
            click.echo(
                f"  {item.product_name:<20} {item.quantity:>5} {item.unit_price:>10} {item.subtotal:>10}"
            )
        click.echo(f"  {'-'*47}")
    click.echo(f"  {'Cart Total':<27} {dto.total_price:>20}")


def _show_updated_cart(settings, cart_id: str, as_json: bool) -> None:
    dto = GetCartHandler(cart_repository(settings)).handle(GetCart(cart_id))
    if dto is not None:
        _display_cart(dto, as_json)


@click.command("create")
@click.option("--session", "session_id", default=None, help="Session ID to bind the cart to.")
@click.pass_obj
def cart_create(obj: dict, session_id: str | None) -> None:
    """Create a new, empty cart."""
    settings = obj["settings"]
    handler = CreateCartHandler(
        cart_repo=cart_repository(settings),
        id_generator=id_generator(),
        currency=settings.currency,
    )

    try:
        dto = handler.handle(CreateCart(session_id=session_id))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_cart(dto, obj["json"])


@click.command("show")
@click.option("--id", "cart_id", default=None, help="Cart ID to display.")
@click.option("--session", "session_id", default=None, help="Look the cart up by session ID.")
@click.pass_obj
def cart_show(obj: dict, cart_id: str | None, session_id: str | None) -> None:
    """Show the contents of a cart."""
    if (cart_id is None) == (session_id is None):
        raise click.UsageError("Pass exactly one of --id or --session.")

    repo = cart_repository(obj["settings"])
    try:
        if cart_id is not None:
            dto = GetCartHandler(repo).handle(GetCart(cart_id))
        else:
            dto = GetCartBySessionHandler(repo).handle(GetCartBySession(session_id))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if dto is None:
        raise click.ClickException(f"Cart {cart_id or session_id} not found")

    _display_cart(dto, obj["json"])


@click.command("add")
@click.option("--id", "cart_id", required=True, help="Cart ID.")
@click.option("--product", "product_id", required=True, help="Product ID.")
@click.option("--quantity", required=True, type=int, help="Units to add.")
@click.pass_obj
def cart_add(obj: dict, cart_id: str, product_id: str, quantity: int) -> None:
    """Add a product to a cart (quantities accumulate)."""
    settings = obj["settings"]
    handler = AddItemToCartHandler(
        cart_repo=cart_repository(settings),
        product_repo=product_repository(settings),
    )

    try:
        handler.handle(AddItemToCart(cart_id, product_id, quantity))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _show_updated_cart(settings, cart_id, obj["json"])


@click.command("update")
@click.option("--id", "cart_id", required=True, help="Cart ID.")
@click.option("--product", "product_id", required=True, help="Product ID.")
@click.option("--quantity", required=True, type=int, help="New quantity.")
@click.pass_obj
def cart_update(obj: dict, cart_id: str, product_id: str, quantity: int) -> None:
    """Set the quantity of a product already in the cart."""
    settings = obj["settings"]
    handler = UpdateCartItemQuantityHandler(
        cart_repo=cart_repository(settings),
        product_repo=product_repository(settings),
    )

    try:
        handler.handle(UpdateCartItemQuantity(cart_id, product_id, quantity))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _show_updated_cart(settings, cart_id, obj["json"])


@click.command("remove")
@click.option("--id", "cart_id", required=True, help="Cart ID.")
@click.option("--product", "product_id", required=True, help="Product ID.")
@click.pass_obj
def cart_remove(obj: dict, cart_id: str, product_id: str) -> None:
    """Remove a product from a cart."""
    settings = obj["settings"]
    handler = RemoveItemFromCartHandler(
        cart_repo=cart_repository(settings),
        product_repo=product_repository(settings),
    )

    try:
        handler.handle(RemoveItemFromCart(cart_id, product_id))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _show_updated_cart(settings, cart_id, obj["json"])


@click.command("checkout")
@click.option("--id", "cart_id", required=True, help="Cart ID to check out.")
@click.option("--email", required=True, help="Customer email.")
@click.option("--name", default=None, help="Customer name.")
@click.pass_obj
def cart_checkout(obj: dict, cart_id: str, email: str, name: str | None) -> None:
    """Place an order for the cart's contents and empty the cart."""
    settings = obj["settings"]
    cart_repo = cart_repository(settings)
    order_repo = order_repository(settings)
    handler = CheckoutCartHandler(
        cart_repo=cart_repo,
        order_repo=order_repo,
        unit_of_work=unit_of_work(cart_repo, order_repo),
        id_generator=id_generator(),
    )

    try:
        order_id = handler.handle(
            CheckoutCart(cart_id=cart_id, customer_email=email, customer_name=name)
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if obj["json"]:
        click.echo(json.dumps({"order_id": str(order_id)}))
    else:
        click.echo(f"Order {order_id} placed  (status=pending)")
