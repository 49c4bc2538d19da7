"""Abstract repository for Order aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from shopcart.domain.model.order import Order, OrderStatus
from shopcart.domain.model.value_objects import OrderId


class OrderRepository(ABC):

    @abstractmethod
    def get_by_id(self, order_id: OrderId) -> Order | None:
        """Return an order by its ID, or None if not found."""

    @abstractmethod
    def get_by_order_number(self, order_number: str) -> Order | None:
        """Return an order by its customer-facing number, or None."""

    @abstractmethod
    def list_by_customer_email(self, email: str) -> list[Order]:
        """Return every order placed with ``email`` (case-insensitive)."""

    @abstractmethod
    def list_by_status(self, status: OrderStatus | str) -> list[Order]:
        """Return every order currently in ``status``."""

    @abstractmethod
    def list_all(self) -> list[Order]:
        """Return every order."""

    @abstractmethod
    def save(self, order: Order) -> None:
        """Persist a new or updated order."""

    @abstractmethod
    def remove(self, order: Order) -> None:
        """Delete an order."""
