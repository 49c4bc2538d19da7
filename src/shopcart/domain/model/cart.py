"""Cart aggregate — accumulates line items against the catalog.

The Cart is an aggregate root that owns its CartItems.  It is the only
place allowed to add, change or remove lines, and every such mutation
leaves ``total_price`` equal to the sum of the line subtotals.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from shopcart.domain.exceptions import (
    CurrencyMismatchError,
    InsufficientStockError,
    InvalidQuantityError,
    ItemNotFoundError,
)
from shopcart.domain.model.product import Product
from shopcart.domain.model.value_objects import (
    DEFAULT_CURRENCY,
    CartId,
    Money,
    ProductId,
    Quantity,
)


def _now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class CartItem:
    """A product in the cart with the price it had when first added."""

    product: Product
    quantity: Quantity
    unit_price: Money  # snapshot taken at add time

    @property
    def product_id(self) -> ProductId:
        return self.product.id

    @property
    def subtotal(self) -> Money:
        return self.unit_price * self.quantity.value


@dataclass
class Cart:
    """Aggregate root for shopping carts.

    ``total_price`` is a cached value.  It is recomputed by every mutating
    method; code that touches ``items`` directly must call
    ``calculate_total_price()`` itself.

    ``version`` is bumped by the repository on every save and is used
    for optimistic concurrency checks.
    """

    id: CartId
    session_id: str | None = None
    items: list[CartItem] = field(default_factory=list)
    total_price: Money = field(default_factory=Money.zero)
    created_at: datetime = field(default_factory=_now)
    updated_at: datetime = field(default_factory=_now)
    version: int = 0

    # --- Factory --------------------------------------------------------------

    @staticmethod
    def create(
        cart_id: CartId,
        session_id: str | None = None,
        currency: str = DEFAULT_CURRENCY,
    ) -> Cart:
        now = _now()
        return Cart(
            id=cart_id,
            session_id=session_id,
            total_price=Money.zero(currency),
            created_at=now,
            updated_at=now,
        )

    # --- Item management ------------------------------------------------------

    def add_item(self, product: Product, quantity: int) -> CartItem:
        """Add ``quantity`` units of ``product``.

        An existing line for the same product is increased, not replaced,
        and the resulting quantity must still fit the product's stock.
        """
        _require_positive(quantity)
        if product.price.currency != self.currency:
            raise CurrencyMismatchError(
                f"Cannot add {product.name} priced in {product.price.currency} "
                f"to a cart in {self.currency}"
            )

        item = self.find_item(product.id)
        if item is not None:
            new_quantity = item.quantity.value + quantity
            if not product.has_stock(new_quantity):
                raise InsufficientStockError(product.name, new_quantity, product.stock)
            item.product = product
            item.quantity = Quantity(new_quantity)
        else:
            if not product.has_stock(quantity):
                raise InsufficientStockError(product.name, quantity, product.stock)
            item = CartItem(
                product=product,
                quantity=Quantity(quantity),
                unit_price=product.price,
            )
            self.items.append(item)

        self._changed()
        return item

    def update_item_quantity(self, product: Product, new_quantity: int) -> CartItem:
        """Replace the quantity of the line for ``product`` (absolute, not incremental).

        Stock is checked against the ``product`` passed in, which the caller
        has just read from the catalog, not the copy held by the line.
        """
        _require_positive(new_quantity)
        item = self._get_item(product.id)
        if not product.has_stock(new_quantity):
            raise InsufficientStockError(product.name, new_quantity, product.stock)
        item.product = product
        item.quantity = Quantity(new_quantity)
        self._changed()
        return item

    def remove_item(self, product_id: ProductId) -> CartItem:
        item = self._get_item(product_id)
        self.items.remove(item)
        self._changed()
        return item

    def clear(self) -> None:
        """Drop every line; used after a successful checkout."""
        self.items.clear()
        self._changed()

    # --- Computed properties --------------------------------------------------

    def calculate_total_price(self) -> Money:
        total = Money.zero(self.currency)
        for item in self.items:
            total = total + item.subtotal
        self.total_price = total
        return total

    def is_empty(self) -> bool:
        return not self.items

    @property
    def item_count(self) -> int:
        return len(self.items)

    @property
    def currency(self) -> str:
        return self.total_price.currency

    def find_item(self, product_id: ProductId) -> CartItem | None:
        for item in self.items:
            if item.product_id == product_id:
                return item
        return None

    # --- Internal helpers -----------------------------------------------------

    def _get_item(self, product_id: ProductId) -> CartItem:
        item = self.find_item(product_id)
        if item is None:
            raise ItemNotFoundError(f"Product '{product_id}' is not in cart {self.id}")
        return item

    def _changed(self) -> None:
        self.calculate_total_price()
        self.updated_at = _now()


def _require_positive(quantity: int) -> None:
    if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity < 1:
        raise InvalidQuantityError(
            f"Invalid quantity {quantity!r}: quantity must be a positive integer"
        )
