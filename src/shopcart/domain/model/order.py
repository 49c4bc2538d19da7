"""Order aggregate — an immutable snapshot of a cart taken at checkout.

The Order owns its OrderItems.  Nothing about an order changes once it is
placed except its status, and the status lifecycle beyond ``PENDING``
belongs to order management downstream of checkout.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from shopcart.domain.exceptions import EmptyCartError, InvalidArgumentError
from shopcart.domain.model.cart import Cart, CartItem
from shopcart.domain.model.value_objects import Money, OrderId, ProductId, Quantity


class OrderStatus(Enum):
    PENDING = "pending"


@dataclass(frozen=True)
class OrderItem:
    """Captures product name and prices at checkout time.

    Holds the product by identity only, so later catalog changes
    (renames, price updates, removal) never reach a placed order.
    """

    product_id: ProductId
    product_name: str
    quantity: Quantity
    unit_price: Money
    subtotal: Money

    @staticmethod
    def snapshot(item: CartItem) -> OrderItem:
        return OrderItem(
            product_id=item.product_id,
            product_name=item.product.name,
            quantity=item.quantity,
            unit_price=item.unit_price,
            subtotal=item.subtotal,
        )


@dataclass
class Order:
    """Aggregate root for placed orders.

    Use the ``Order.from_cart()`` factory at checkout; it enforces the
    checkout preconditions.  The ``__init__`` is intentionally simple so
    the repository can reconstitute persisted orders without re-validating.
    """

    id: OrderId
    customer_email: str
    items: tuple[OrderItem, ...]
    total_amount: Money
    customer_name: str | None = None
    status: OrderStatus = OrderStatus.PENDING
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    # --- Factory (used at checkout only) --------------------------------------

    @staticmethod
    def from_cart(
        order_id: OrderId,
        cart: Cart,
        customer_email: str,
        customer_name: str | None = None,
    ) -> Order:
        if not customer_email or not customer_email.strip():
            raise InvalidArgumentError("Customer email is required")
        if cart.is_empty():
            raise EmptyCartError(f"Cannot checkout empty cart {cart.id}")

        if customer_name is not None:
            customer_name = customer_name.strip() or None

        now = datetime.now(timezone.utc)
        return Order(
            id=order_id,
            customer_email=customer_email.strip(),
            customer_name=customer_name,
            items=tuple(OrderItem.snapshot(item) for item in cart.items),
            total_amount=cart.total_price,
            status=OrderStatus.PENDING,
            created_at=now,
            updated_at=now,
        )

    # --- Computed properties --------------------------------------------------

    @property
    def order_number(self) -> str:
        return str(self.id)

    @property
    def item_count(self) -> int:
        return len(self.items)
