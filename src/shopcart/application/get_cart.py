"""Application service: Get Cart query.

A missing cart is not an error here: the handlers return None and the
transport decides how to report it.
"""

from __future__ import annotations

from shopcart.application.commands import GetCart, GetCartBySession
from shopcart.application.dto import CartDTO
from shopcart.domain.model.value_objects import CartId
from shopcart.domain.repository.cart_repository import CartRepository


class GetCartHandler:

    def __init__(self, cart_repo: CartRepository) -> None:
        self._cart_repo = cart_repo

    def handle(self, query: GetCart) -> CartDTO | None:
        cart = self._cart_repo.get_by_id(CartId.from_string(query.cart_id))
        if cart is None:
            return None
        return CartDTO.from_cart(cart)


class GetCartBySessionHandler:

    def __init__(self, cart_repo: CartRepository) -> None:
        self._cart_repo = cart_repo

    def handle(self, query: GetCartBySession) -> CartDTO | None:
        cart = self._cart_repo.get_by_session_id(query.session_id)
        if cart is None:
            return None
        return CartDTO.from_cart(cart)
