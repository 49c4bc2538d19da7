"""Tests for cart creation and the cart read model."""

from shopcart.application.add_item_to_cart import AddItemToCartHandler
from shopcart.application.commands import (
    AddItemToCart,
    CreateCart,
    GetCart,
    GetCartBySession,
)
from shopcart.application.create_cart import CreateCartHandler
from shopcart.application.get_cart import GetCartBySessionHandler, GetCartHandler
from shopcart.domain.model.product import Product
from shopcart.domain.model.value_objects import Money, ProductId
from tests.fakes import (
    FakeCartRepository,
    FakeProductRepository,
    SequentialIdentityGenerator,
)

P1 = "00000000-0000-0000-0000-0000000000b1"


def _setup():
    cart_repo = FakeCartRepository()
    product_repo = FakeProductRepository(
        [Product(id=ProductId(P1), name="Widget", price=Money.of("10.00"), stock=10)]
    )
    create = CreateCartHandler(cart_repo, SequentialIdentityGenerator())
    return cart_repo, product_repo, create


class TestCreateCart:

    def test_creates_empty_cart(self):
        cart_repo, _, create = _setup()
        dto = create.handle(CreateCart(session_id="session_1"))

        assert dto.cart_id == "00000000-0000-0000-0000-000000000001"
        assert dto.session_id == "session_1"
        assert dto.items == []
        assert dto.total_price == "0.00"
        assert dto.item_count == 0
        assert len(cart_repo.list_all()) == 1

    def test_generates_session_id_when_missing(self):
        _, _, create = _setup()
        dto = create.handle(CreateCart())
        assert dto.session_id == "session_00000000-0000-0000-0000-000000000001"
        assert dto.cart_id == "00000000-0000-0000-0000-000000000002"

    def test_carts_get_distinct_ids(self):
        _, _, create = _setup()
        assert create.handle(CreateCart()).cart_id != create.handle(CreateCart()).cart_id


class TestGetCart:

    def test_maps_cart_to_read_model(self):
        cart_repo, product_repo, create = _setup()
        cart_id = create.handle(CreateCart()).cart_id
        AddItemToCartHandler(cart_repo, product_repo).handle(
            AddItemToCart(cart_id, P1, 3)
        )

        dto = GetCartHandler(cart_repo).handle(GetCart(cart_id))

        assert dto.total_price == "30.00"
        assert dto.item_count == 1
        item = dto.items[0]
        assert item.product_id == P1
        assert item.product_name == "Widget"
        assert item.unit_price == "10.00"
        assert item.quantity == 3
        assert item.subtotal == "30.00"

    def test_missing_cart_returns_none(self):
        cart_repo, _, _ = _setup()
        dto = GetCartHandler(cart_repo).handle(
            GetCart("00000000-0000-0000-0000-0000000000ff")
        )
        assert dto is None

    def test_lookup_by_session(self):
        cart_repo, _, create = _setup()
        created = create.handle(CreateCart(session_id="session_xyz"))

        dto = GetCartBySessionHandler(cart_repo).handle(GetCartBySession("session_xyz"))
        assert dto.cart_id == created.cart_id
        assert GetCartBySessionHandler(cart_repo).handle(GetCartBySession("nope")) is None

    def test_to_dict_is_json_ready(self):
        cart_repo, product_repo, create = _setup()
        cart_id = create.handle(CreateCart()).cart_id
        AddItemToCartHandler(cart_repo, product_repo).handle(
            AddItemToCart(cart_id, P1, 1)
        )

        data = GetCartHandler(cart_repo).handle(GetCart(cart_id)).to_dict()
        assert data["total_price"] == "10.00"
        assert data["items"][0]["product_name"] == "Widget"
