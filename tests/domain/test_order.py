"""Unit tests for the Order aggregate (checkout snapshot)."""

import dataclasses

import pytest

from shopcart.domain.exceptions import EmptyCartError, InvalidArgumentError
from shopcart.domain.model.cart import Cart
from shopcart.domain.model.order import Order, OrderStatus
from shopcart.domain.model.product import Product
from shopcart.domain.model.value_objects import CartId, Money, OrderId, ProductId

ORDER_ID = OrderId("00000000-0000-0000-0000-0000000000a1")


def _cart_with_items() -> tuple[Cart, Product]:
    widget = Product(
        id=ProductId("00000000-0000-0000-0000-000000000001"),
        name="Widget",
        price=Money.of("10.00"),
        stock=100,
    )
    gadget = Product(
        id=ProductId("00000000-0000-0000-0000-000000000002"),
        name="Gadget",
        price=Money.of("15.00"),
        stock=100,
    )
    cart = Cart.create(CartId("00000000-0000-0000-0000-0000000000c1"))
    cart.add_item(widget, 3)
    cart.add_item(gadget, 1)
    return cart, widget


class TestOrderFromCart:

    def test_happy_path(self):
        cart, _ = _cart_with_items()
        order = Order.from_cart(ORDER_ID, cart, "alice@example.com", "Alice")

        assert order.id == ORDER_ID
        assert order.status == OrderStatus.PENDING
        assert order.customer_email == "alice@example.com"
        assert order.customer_name == "Alice"
        assert order.total_amount == cart.total_price == Money.of("45.00")
        assert order.item_count == 2

    def test_items_are_snapshots(self):
        cart, widget = _cart_with_items()
        order = Order.from_cart(ORDER_ID, cart, "alice@example.com")

        first = order.items[0]
        assert first.product_id == widget.id
        assert first.product_name == "Widget"
        assert first.quantity.value == 3
        assert first.unit_price == Money.of("10.00")
        assert first.subtotal == Money.of("30.00")

    def test_later_changes_do_not_reach_order(self):
        cart, widget = _cart_with_items()
        order = Order.from_cart(ORDER_ID, cart, "alice@example.com")

        widget.name = "Renamed"
        widget.update_price(Money.of("99.00"))
        cart.clear()

        assert order.items[0].product_name == "Widget"
        assert order.items[0].unit_price == Money.of("10.00")
        assert order.total_amount == Money.of("45.00")
        assert order.item_count == 2

    def test_order_items_are_frozen(self):
        cart, _ = _cart_with_items()
        order = Order.from_cart(ORDER_ID, cart, "alice@example.com")
        with pytest.raises(dataclasses.FrozenInstanceError):
            order.items[0].product_name = "Changed"

    def test_name_is_optional(self):
        cart, _ = _cart_with_items()
        order = Order.from_cart(ORDER_ID, cart, "alice@example.com")
        assert order.customer_name is None

    def test_order_number_is_order_id_text(self):
        cart, _ = _cart_with_items()
        order = Order.from_cart(ORDER_ID, cart, "alice@example.com")
        assert order.order_number == str(ORDER_ID)


class TestOrderValidation:

    def test_empty_cart_rejected(self):
        cart = Cart.create(CartId("00000000-0000-0000-0000-0000000000c2"))
        with pytest.raises(EmptyCartError, match="empty cart"):
            Order.from_cart(ORDER_ID, cart, "alice@example.com")

    @pytest.mark.parametrize("email", ["", "   "])
    def test_blank_email_rejected(self, email):
        cart, _ = _cart_with_items()
        with pytest.raises(InvalidArgumentError, match="email is required"):
            Order.from_cart(ORDER_ID, cart, email)
