"""Domain service contract: identity generation for new aggregates.

Handlers never invent identifiers themselves; they ask an injected
IdentityGenerator.  Implementations must never hand out the same value
twice for the lifetime of the stored data.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from shopcart.domain.model.value_objects import CartId, OrderId, ProductId


class IdentityGenerator(ABC):

    @abstractmethod
    def next_cart_id(self) -> CartId:
        """Return a fresh, never-used cart ID."""

    @abstractmethod
    def next_product_id(self) -> ProductId:
        """Return a fresh, never-used product ID."""

    @abstractmethod
    def next_order_id(self) -> OrderId:
        """Return a fresh, never-used order ID."""

    @abstractmethod
    def next_session_id(self) -> str:
        """Return a fresh session key for a cart created without one."""
