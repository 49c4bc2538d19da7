"""Abstract repository for Cart aggregate.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (JSON, SQL, in-memory)
live in the infrastructure layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from shopcart.domain.model.cart import Cart
from shopcart.domain.model.value_objects import CartId


class CartRepository(ABC):

    @abstractmethod
    def get_by_id(self, cart_id: CartId) -> Cart | None:
        """Return a cart by its ID, or None if not found."""

    @abstractmethod
    def get_by_session_id(self, session_id: str) -> Cart | None:
        """Return the cart bound to a session, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Cart]:
        """Return every cart."""

    @abstractmethod
    def save(self, cart: Cart) -> None:
        """Persist a new or updated cart.

        Implementations that track ``cart.version`` raise
        ConcurrencyError when the stored cart changed since it was loaded.
        """

    @abstractmethod
    def remove(self, cart: Cart) -> None:
        """Delete a cart. Removing an unknown cart is a no-op."""
