"""Application service: Checkout Cart use case.

Turns a cart into a PENDING order and empties the cart.  The two writes
(new order, emptied cart) happen inside one unit of work so either both
are stored or neither is.

Product stock is only consulted while the cart is being filled; checkout
does not decrement it.
"""

from __future__ import annotations

import structlog

from shopcart.application.commands import CheckoutCart
from shopcart.domain.exceptions import CartNotFoundError, EmptyCartError
from shopcart.domain.model.order import Order
from shopcart.domain.model.value_objects import CartId, OrderId
from shopcart.domain.repository.cart_repository import CartRepository
from shopcart.domain.repository.order_repository import OrderRepository
from shopcart.domain.repository.unit_of_work import UnitOfWork
from shopcart.domain.service.identity import IdentityGenerator

logger = structlog.get_logger(__name__)


class CheckoutCartHandler:

    def __init__(
        self,
        cart_repo: CartRepository,
        order_repo: OrderRepository,
        unit_of_work: UnitOfWork,
        id_generator: IdentityGenerator,
    ) -> None:
        self._cart_repo = cart_repo
        self._order_repo = order_repo
        self._uow = unit_of_work
        self._id_generator = id_generator

    def handle(self, command: CheckoutCart) -> OrderId:
        """Place an order for the cart's current contents.

        Steps:
        1. Load the cart (fail if not found).
        2. Fail if the cart is empty.
        3. Let ``Order.from_cart()`` snapshot every line under a new ID.
        4. Save the order, then clear and save the cart, in one unit of work.
        5. Return the new order's ID.
        """
        cart_id = CartId.from_string(command.cart_id)
        cart = self._cart_repo.get_by_id(cart_id)
        if cart is None:
            raise CartNotFoundError(f"Cart {cart_id} not found")
        if cart.is_empty():
            raise EmptyCartError(f"Cannot checkout empty cart {cart_id}")

        order = Order.from_cart(
            order_id=self._id_generator.next_order_id(),
            cart=cart,
            customer_email=command.customer_email,
            customer_name=command.customer_name,
        )

        try:
            with self._uow:
                self._order_repo.save(order)
                cart.clear()
                self._cart_repo.save(cart)
                self._uow.commit()
        except Exception:
            logger.warning(
                "Checkout rolled back",
                cart_id=str(cart_id),
                order_id=str(order.id),
            )
            raise

        logger.info(
            "Cart checked out",
            cart_id=str(cart_id),
            order_id=str(order.id),
            item_count=order.item_count,
            total=order.total_amount.formatted,
        )
        return order.id
