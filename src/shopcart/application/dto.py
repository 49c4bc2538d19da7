"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the transport and application layers without
exposing domain internals to the outside world.  Money is rendered as a
decimal string (``"30.00"``); converting to minor units is left to the
consumer.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass

from shopcart.domain.model.cart import Cart
from shopcart.domain.model.order import Order
from shopcart.domain.model.product import Product


@dataclass(frozen=True)
class CartItemDTO:
    product_id: str
    product_name: str
    unit_price: str
    quantity: int
    subtotal: str


@dataclass(frozen=True)
class CartDTO:
    """Read model of a cart, flattened for serialization."""

    cart_id: str
    session_id: str | None
    items: list[CartItemDTO]
    total_price: str
    item_count: int

    @staticmethod
    def from_cart(cart: Cart) -> CartDTO:
        return CartDTO(
            cart_id=str(cart.id),
            session_id=cart.session_id,
            items=[
                CartItemDTO(
                    product_id=str(item.product_id),
                    product_name=item.product.name,
                    unit_price=item.unit_price.formatted,
                    quantity=item.quantity.value,
                    subtotal=item.subtotal.formatted,
                )
                for item in cart.items
            ],
            total_price=cart.total_price.formatted,
            item_count=cart.item_count,
        )

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class OrderItemDTO:
    product_id: str
    product_name: str
    unit_price: str
    quantity: int
    subtotal: str


@dataclass(frozen=True)
class OrderDTO:
    order_id: str
    customer_email: str
    customer_name: str | None
    status: str
    items: list[OrderItemDTO]
    total_amount: str
    currency: str
    created_at: str

    @staticmethod
    def from_order(order: Order) -> OrderDTO:
        return OrderDTO(
            order_id=str(order.id),
            customer_email=order.customer_email,
            customer_name=order.customer_name,
            status=order.status.value,
            items=[
                OrderItemDTO(
                    product_id=str(item.product_id),
                    product_name=item.product_name,
                    unit_price=item.unit_price.formatted,
                    quantity=item.quantity.value,
                    subtotal=item.subtotal.formatted,
                )
                for item in order.items
            ],
            total_amount=order.total_amount.formatted,
            currency=order.total_amount.currency,
            created_at=order.created_at.strftime("%Y-%m-%d %H:%M UTC"),
        )

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class ProductDTO:
    product_id: str
    name: str
    price: str
    currency: str
    stock: int

    @staticmethod
    def from_product(product: Product) -> ProductDTO:
        return ProductDTO(
            product_id=str(product.id),
            name=product.name,
            price=product.price.formatted,
            currency=product.price.currency,
            stock=product.stock,
        )

    def to_dict(self) -> dict:
        return asdict(self)
