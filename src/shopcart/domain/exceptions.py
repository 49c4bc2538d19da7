"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class InvalidArgumentError(ValidationError):
    """Malformed input such as an unparseable identifier."""


class InvalidQuantityError(ValidationError):
    """A quantity is not a positive integer."""


class InsufficientStockError(InvalidQuantityError):
    """The requested (or resulting) quantity exceeds the product stock."""

    def __init__(self, product_name: str, requested: int, available: int) -> None:
        super().__init__(
            f"Insufficient stock for {product_name} "
            f"(requested {requested}, {available} in stock)"
        )
        self.requested = requested
        self.available = available


class EmptyCartError(ValidationError):
    """Checkout was attempted on a cart without items."""


class MoneyError(ValidationError):
    """Base class for Money construction and arithmetic failures."""


class InvalidAmountError(MoneyError):
    pass


class InvalidCurrencyError(MoneyError):
    pass


class CurrencyMismatchError(MoneyError):
    pass


class NegativeResultError(MoneyError):
    pass


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class CartNotFoundError(EntityNotFoundError):
    pass


class ProductNotFoundError(EntityNotFoundError):
    pass


class ItemNotFoundError(EntityNotFoundError):
    """A cart mutation targets a product that is not in the cart."""


class OrderNotFoundError(EntityNotFoundError):
    pass


class ConcurrencyError(DomainException):
    """The aggregate was modified by someone else since it was loaded."""
