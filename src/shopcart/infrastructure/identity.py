"""UUID-backed implementation of IdentityGenerator."""

from __future__ import annotations

import uuid

from shopcart.domain.model.value_objects import CartId, OrderId, ProductId
from shopcart.domain.service.identity import IdentityGenerator


class UuidIdentityGenerator(IdentityGenerator):
    """Random version-4 UUIDs; collisions are treated as impossible."""

    def next_cart_id(self) -> CartId:
        return CartId(str(uuid.uuid4()))

    def next_product_id(self) -> ProductId:
        return ProductId(str(uuid.uuid4()))

    def next_order_id(self) -> OrderId:
        return OrderId(str(uuid.uuid4()))

    def next_session_id(self) -> str:
        return f"session_{uuid.uuid4().hex}"
