"""Application service: Create Cart use case."""

from __future__ import annotations

import structlog

from shopcart.application.commands import CreateCart
from shopcart.application.dto import CartDTO
from shopcart.domain.model.cart import Cart
from shopcart.domain.model.value_objects import DEFAULT_CURRENCY
from shopcart.domain.repository.cart_repository import CartRepository
from shopcart.domain.service.identity import IdentityGenerator

logger = structlog.get_logger(__name__)


class CreateCartHandler:

    def __init__(
        self,
        cart_repo: CartRepository,
        id_generator: IdentityGenerator,
        currency: str = DEFAULT_CURRENCY,
    ) -> None:
        self._cart_repo = cart_repo
        self._id_generator = id_generator
        self._currency = currency

    def handle(self, command: CreateCart) -> CartDTO:
        """Create an empty cart, bound to a session when one is given."""
        session_id = command.session_id or self._id_generator.next_session_id()

        cart = Cart.create(
            cart_id=self._id_generator.next_cart_id(),
            session_id=session_id,
            currency=self._currency,
        )
        self._cart_repo.save(cart)

        logger.info("Cart created", cart_id=str(cart.id), session_id=session_id)
        return CartDTO.from_cart(cart)
