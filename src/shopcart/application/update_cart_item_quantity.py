"""Application service: Update Cart Item Quantity use case."""

from __future__ import annotations

import structlog

from shopcart.application.commands import UpdateCartItemQuantity
from shopcart.domain.exceptions import CartNotFoundError, ProductNotFoundError
from shopcart.domain.model.value_objects import CartId, ProductId
from shopcart.domain.repository.cart_repository import CartRepository
from shopcart.domain.repository.product_repository import ProductRepository

logger = structlog.get_logger(__name__)


class UpdateCartItemQuantityHandler:

    def __init__(
        self,
        cart_repo: CartRepository,
        product_repo: ProductRepository,
    ) -> None:
        self._cart_repo = cart_repo
        self._product_repo = product_repo

    def handle(self, command: UpdateCartItemQuantity) -> None:
        """Set the quantity of a line already in the cart.

        The quantity is absolute and is checked against the product's
        current stock.
        """
        cart_id = CartId.from_string(command.cart_id)
        product_id = ProductId.from_string(command.product_id)

        cart = self._cart_repo.get_by_id(cart_id)
        if cart is None:
            raise CartNotFoundError(f"Cart {cart_id} not found")

        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise ProductNotFoundError(f"Product {product_id} not found")

        cart.update_item_quantity(product, command.quantity)
        self._cart_repo.save(cart)

        logger.info(
            "Cart item quantity updated",
            cart_id=str(cart_id),
            product_id=str(product_id),
            quantity=command.quantity,
            total=cart.total_price.formatted,
        )
