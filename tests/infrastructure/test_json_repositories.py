"""Tests for the JSON-file repositories and unit of work (tmp_path only)."""

import json

import pytest

from shopcart.domain.exceptions import ConcurrencyError
from shopcart.domain.model.cart import Cart
from shopcart.domain.model.order import Order, OrderStatus
from shopcart.domain.model.product import Product
from shopcart.domain.model.value_objects import CartId, Money, OrderId, ProductId
from shopcart.infrastructure.persistence.json_cart_repository import JsonCartRepository
from shopcart.infrastructure.persistence.json_order_repository import (
    JsonOrderRepository,
)
from shopcart.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)
from shopcart.infrastructure.persistence.json_unit_of_work import JsonUnitOfWork

CART_ID = CartId("00000000-0000-0000-0000-0000000000c1")
ORDER_ID = OrderId("00000000-0000-0000-0000-0000000000a1")
P1 = ProductId("00000000-0000-0000-0000-000000000001")
P2 = ProductId("00000000-0000-0000-0000-000000000002")


@pytest.fixture
def repos(tmp_path):
    products = JsonProductRepository(tmp_path / "products.json")
    products.save(Product(id=P1, name="Widget", price=Money.of("10.00"), stock=10))
    products.save(Product(id=P2, name="Gadget", price=Money.of("15.00"), stock=0))
    carts = JsonCartRepository(tmp_path / "carts.json", product_repo=products)
    orders = JsonOrderRepository(tmp_path / "orders.json")
    return products, carts, orders


class TestJsonProductRepository:

    def test_round_trip(self, repos):
        products, _, _ = repos
        widget = products.get_by_id(P1)
        assert widget.name == "Widget"
        assert widget.price == Money.of("10.00")
        assert widget.stock == 10

    def test_queries(self, repos):
        products, _, _ = repos
        assert products.get_by_name("GADGET").id == P2
        assert [p.id for p in products.get_by_ids([P2, ProductId("00000000-0000-0000-0000-0000000000ff"), P1])] == [P2, P1]
        assert [p.id for p in products.list_in_stock()] == [P1]

    def test_remove(self, repos):
        products, _, _ = repos
        products.remove(products.get_by_id(P2))
        assert products.get_by_id(P2) is None
        assert len(products.list_all()) == 1


class TestJsonCartRepository:

    def test_round_trip_resolves_products(self, repos):
        products, carts, _ = repos
        cart = Cart.create(CART_ID, session_id="session_1")
        cart.add_item(products.get_by_id(P1), 3)
        carts.save(cart)

        loaded = carts.get_by_id(CART_ID)
        assert loaded.session_id == "session_1"
        assert loaded.items[0].product.name == "Widget"
        assert loaded.items[0].quantity.value == 3
        assert loaded.total_price == Money.of("30.00")
        assert carts.get_by_session_id("session_1").id == CART_ID

    def test_unit_price_snapshot_survives_price_change(self, repos):
        products, carts, _ = repos
        cart = Cart.create(CART_ID)
        cart.add_item(products.get_by_id(P1), 1)
        carts.save(cart)

        widget = products.get_by_id(P1)
        widget.update_price(Money.of("99.00"))
        products.save(widget)

        loaded = carts.get_by_id(CART_ID)
        assert loaded.items[0].unit_price == Money.of("10.00")
        assert loaded.items[0].product.price == Money.of("99.00")

    def test_line_for_deleted_product_dropped(self, repos):
        products, carts, _ = repos
        cart = Cart.create(CART_ID)
        cart.add_item(products.get_by_id(P1), 2)
        carts.save(cart)

        products.remove(products.get_by_id(P1))

        loaded = carts.get_by_id(CART_ID)
        assert loaded.is_empty()
        assert loaded.total_price.is_zero()

    def test_save_bumps_version(self, repos):
        _, carts, _ = repos
        cart = Cart.create(CART_ID)
        carts.save(cart)
        carts.save(cart)
        assert cart.version == 2
        assert carts.get_by_id(CART_ID).version == 2

    def test_stale_save_rejected(self, repos):
        products, carts, _ = repos
        carts.save(Cart.create(CART_ID))

        first = carts.get_by_id(CART_ID)
        second = carts.get_by_id(CART_ID)
        first.add_item(products.get_by_id(P1), 1)
        carts.save(first)

        second.add_item(products.get_by_id(P1), 5)
        with pytest.raises(ConcurrencyError, match="modified concurrently"):
            carts.save(second)

        assert carts.get_by_id(CART_ID).items[0].quantity.value == 1

    def test_remove_and_list(self, repos):
        _, carts, _ = repos
        cart = Cart.create(CART_ID)
        carts.save(cart)
        assert len(carts.list_all()) == 1
        carts.remove(cart)
        assert carts.get_by_id(CART_ID) is None


class TestJsonOrderRepository:

    def _order(self, products) -> Order:
        cart = Cart.create(CART_ID)
        cart.add_item(products.get_by_id(P1), 2)
        return Order.from_cart(ORDER_ID, cart, "Alice@Example.com", "Alice")

    def test_round_trip(self, repos):
        products, _, orders = repos
        orders.save(self._order(products))

        loaded = orders.get_by_id(ORDER_ID)
        assert loaded.status == OrderStatus.PENDING
        assert loaded.customer_name == "Alice"
        assert loaded.total_amount == Money.of("20.00")
        assert loaded.items[0].product_name == "Widget"
        assert loaded.items[0].subtotal == Money.of("20.00")

    def test_queries(self, repos):
        products, _, orders = repos
        orders.save(self._order(products))

        assert orders.get_by_order_number(str(ORDER_ID)).id == ORDER_ID
        assert len(orders.list_by_customer_email("alice@example.com")) == 1
        assert len(orders.list_by_status(OrderStatus.PENDING)) == 1
        assert orders.list_by_status("shipped") == []

    def test_save_is_upsert(self, repos):
        products, _, orders = repos
        order = self._order(products)
        orders.save(order)
        orders.save(order)
        assert len(orders.list_all()) == 1

        orders.remove(order)
        assert orders.list_all() == []


class TestJsonUnitOfWork:

    def test_rollback_restores_files(self, repos):
        products, carts, orders = repos
        cart = Cart.create(CART_ID)
        cart.add_item(products.get_by_id(P1), 2)
        carts.save(cart)
        before = json.loads(carts.file_path.read_text(encoding="utf-8"))

        uow = JsonUnitOfWork([carts.file_path, orders.file_path])
        with pytest.raises(RuntimeError):
            with uow:
                orders.save(Order.from_cart(ORDER_ID, cart, "a@example.com"))
                cart.clear()
                carts.save(cart)
                raise RuntimeError("boom")

        assert orders.list_all() == []
        assert json.loads(carts.file_path.read_text(encoding="utf-8")) == before

    def test_exit_without_commit_rolls_back(self, repos):
        products, _, orders = repos
        cart = Cart.create(CART_ID)
        cart.add_item(products.get_by_id(P1), 1)

        with JsonUnitOfWork([orders.file_path]):
            orders.save(Order.from_cart(ORDER_ID, cart, "a@example.com"))

        assert orders.list_all() == []

    def test_commit_keeps_writes(self, repos):
        products, _, orders = repos
        cart = Cart.create(CART_ID)
        cart.add_item(products.get_by_id(P1), 1)

        with JsonUnitOfWork([orders.file_path]) as uow:
            orders.save(Order.from_cart(ORDER_ID, cart, "a@example.com"))
            uow.commit()

        assert orders.get_by_id(ORDER_ID) is not None
