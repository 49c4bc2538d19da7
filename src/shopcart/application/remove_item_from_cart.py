"""Application service: Remove Item From Cart use case."""

from __future__ import annotations

import structlog

from shopcart.application.commands import RemoveItemFromCart
from shopcart.domain.exceptions import CartNotFoundError, ProductNotFoundError
from shopcart.domain.model.value_objects import CartId, ProductId
from shopcart.domain.repository.cart_repository import CartRepository
from shopcart.domain.repository.product_repository import ProductRepository

logger = structlog.get_logger(__name__)


class RemoveItemFromCartHandler:

    def __init__(
        self,
        cart_repo: CartRepository,
        product_repo: ProductRepository,
    ) -> None:
        self._cart_repo = cart_repo
        self._product_repo = product_repo

    def handle(self, command: RemoveItemFromCart) -> None:
        cart_id = CartId.from_string(command.cart_id)
        product_id = ProductId.from_string(command.product_id)

        cart = self._cart_repo.get_by_id(cart_id)
        if cart is None:
            raise CartNotFoundError(f"Cart {cart_id} not found")

        if self._product_repo.get_by_id(product_id) is None:
            raise ProductNotFoundError(f"Product {product_id} not found")

        cart.remove_item(product_id)
        self._cart_repo.save(cart)

        logger.info(
            "Item removed from cart",
            cart_id=str(cart_id),
            product_id=str(product_id),
            total=cart.total_price.formatted,
        )
