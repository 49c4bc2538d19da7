"""Commands and queries — the inbound contract of the application layer.

They carry primitives exactly as a transport decodes them; handlers turn
the raw identifiers into value objects.
"""

from __future__ import annotations

from dataclasses import dataclass

from shopcart.domain.exceptions import InvalidArgumentError


@dataclass(frozen=True)
class CreateCart:
    session_id: str | None = None


@dataclass(frozen=True)
class AddItemToCart:
    cart_id: str
    product_id: str
    quantity: int

    def __post_init__(self) -> None:
        if (
            isinstance(self.quantity, bool)
            or not isinstance(self.quantity, int)
            or self.quantity <= 0
        ):
            raise InvalidArgumentError(
                f"Quantity must be a positive integer, got {self.quantity!r}"
            )


@dataclass(frozen=True)
class UpdateCartItemQuantity:
    cart_id: str
    product_id: str
    quantity: int


@dataclass(frozen=True)
class RemoveItemFromCart:
    cart_id: str
    product_id: str


@dataclass(frozen=True)
class CheckoutCart:
    cart_id: str
    customer_email: str
    customer_name: str | None = None


@dataclass(frozen=True)
class GetCart:
    cart_id: str


@dataclass(frozen=True)
class GetCartBySession:
    session_id: str


@dataclass(frozen=True)
class GetOrder:
    order_id: str


@dataclass(frozen=True)
class ListOrders:
    """Filter orders; with neither field set, every order is returned."""

    customer_email: str | None = None
    status: str | None = None
