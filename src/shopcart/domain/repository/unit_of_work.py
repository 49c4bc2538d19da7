"""Transaction boundary spanning several repositories.

Checkout writes two aggregates (the new Order and the emptied Cart).
Wrapping both writes in one unit of work makes them succeed or fail
together:

    with uow:
        order_repo.save(order)
        cart_repo.save(cart)
        uow.commit()

Leaving the block without ``commit()`` (normally because one of the
writes raised) rolls every participating repository back to the state
it had when the block was entered.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class UnitOfWork(ABC):

    def __enter__(self) -> UnitOfWork:
        self._committed = False
        self.begin()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if not self._committed:
            self.rollback()

    def commit(self) -> None:
        self._do_commit()
        self._committed = True

    @abstractmethod
    def begin(self) -> None:
        """Record the state to return to on rollback."""

    @abstractmethod
    def _do_commit(self) -> None:
        """Make the writes performed since ``begin()`` durable."""

    @abstractmethod
    def rollback(self) -> None:
        """Undo every write performed since ``begin()``."""
