"""Product aggregate.

Products live independently of carts and orders. They have their own
lifecycle: prices change, stock levels change, products are added and
removed from the catalog.
"""

from __future__ import annotations

from dataclasses import dataclass

from shopcart.domain.exceptions import InvalidArgumentError, ValidationError
from shopcart.domain.model.value_objects import Money, ProductId


@dataclass
class Product:
    """A product in the catalog.

    Use ``Product.create()`` for new products; the plain ``__init__`` is
    what repositories use to reconstitute persisted products.

    From the cart's point of view a product is read-only: stock is
    consulted for sufficiency checks but never decremented by a checkout.
    """

    id: ProductId
    name: str
    price: Money
    stock: int = 0

    @staticmethod
    def create(id: ProductId, name: str, price: Money, stock: int = 0) -> Product:
        if not name or not name.strip():
            raise InvalidArgumentError("Product name is required")
        _check_stock(stock)
        return Product(id=id, name=name.strip(), price=price, stock=stock)

    def has_stock(self, quantity: int) -> bool:
        """True iff ``quantity`` units could be taken from current stock."""
        return 1 <= quantity <= self.stock

    def update_price(self, new_price: Money) -> None:
        """Change the product price.

        This does NOT affect existing cart lines or orders because both
        capture a price snapshot.
        """
        if new_price.is_zero():
            raise ValidationError("Product price must be greater than zero")
        self.price = new_price

    def update_stock(self, quantity: int) -> None:
        _check_stock(quantity)
        self.stock = quantity


def _check_stock(stock: int) -> None:
    if isinstance(stock, bool) or not isinstance(stock, int):
        raise InvalidArgumentError(f"Stock must be an integer, got {stock!r}")
    if stock < 0:
        raise InvalidArgumentError(f"Stock cannot be negative, got {stock}")
