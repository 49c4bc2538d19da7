"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from decimal import (
    MAX_EMAX,
    MAX_PREC,
    MIN_EMIN,
    ROUND_HALF_UP,
    Context,
    Decimal,
    InvalidOperation,
    localcontext,
)

from shopcart.domain.exceptions import (
    CurrencyMismatchError,
    InvalidAmountError,
    InvalidArgumentError,
    InvalidCurrencyError,
    InvalidQuantityError,
    NegativeResultError,
)

DEFAULT_CURRENCY = "EUR"

_CENTS = Decimal("0.01")

# Sums and integer multiples of cent amounts are exact under this context.
_EXACT = Context(prec=MAX_PREC, Emax=MAX_EMAX, Emin=MIN_EMIN, rounding=ROUND_HALF_UP)

# Upper bound on digits before the decimal point.
_MAX_INTEGER_DIGITS = 1000


@dataclass(frozen=True)
class Money:
    """Monetary amount with currency.

    Uses Decimal to avoid floating-point rounding errors that would be
    unacceptable in financial calculations.  The amount is always held with
    exactly two fraction digits: construction and every arithmetic result
    are rounded half-up to cents.
    """

    amount: Decimal
    currency: str = DEFAULT_CURRENCY

    def __post_init__(self) -> None:
        object.__setattr__(self, "amount", self._normalize_amount(self.amount))
        object.__setattr__(self, "currency", self._normalize_currency(self.currency))

    # --- Factories ------------------------------------------------------------

    @staticmethod
    def of(amount: str | float | int | Decimal, currency: str = DEFAULT_CURRENCY) -> Money:
        return Money(amount, currency)  # type: ignore[arg-type]

    @staticmethod
    def zero(currency: str = DEFAULT_CURRENCY) -> Money:
        return Money(Decimal("0.00"), currency)

    # --- Arithmetic -----------------------------------------------------------

    def add(self, other: Money) -> Money:
        self._assert_same_currency(other)
        with localcontext(_EXACT):
            total = self.amount + other.amount
        return Money(total, self.currency)

    def subtract(self, other: Money) -> Money:
        self._assert_same_currency(other)
        with localcontext(_EXACT):
            result = self.amount - other.amount
        if result < Decimal("0"):
            raise NegativeResultError(
                f"Subtracting {other} from {self} would result in a negative amount"
            )
        return Money(result, self.currency)

    def multiply(self, factor: int) -> Money:
        if isinstance(factor, bool) or not isinstance(factor, int):
            raise TypeError(f"Can only multiply Money by int, got {type(factor).__name__}")
        if factor < 0:
            raise InvalidAmountError(f"Multiplier must not be negative, got {factor}")
        with localcontext(_EXACT):
            product = self.amount * factor
        return Money(product, self.currency)

    __add__ = add
    __sub__ = subtract
    __mul__ = multiply

    # --- Comparison -----------------------------------------------------------

    def equals(self, other: Money) -> bool:
        return self == other

    def greater_than(self, other: Money) -> bool:
        self._assert_same_currency(other)
        return self.amount > other.amount

    def less_than(self, other: Money) -> bool:
        self._assert_same_currency(other)
        return self.amount < other.amount

    def is_zero(self) -> bool:
        return self.amount == Decimal("0")

    __gt__ = greater_than
    __lt__ = less_than

    def __le__(self, other: Money) -> bool:
        return not self.greater_than(other)

    def __ge__(self, other: Money) -> bool:
        return not self.less_than(other)

    # --- Display --------------------------------------------------------------

    @property
    def formatted(self) -> str:
        """The amount as a plain decimal string, e.g. ``"15.75"``."""
        return str(self.amount)

    def __str__(self) -> str:
        return f"{self.formatted} {self.currency}"

    # --- Internal helpers -----------------------------------------------------

    def _assert_same_currency(self, other: Money) -> None:
        if self.currency != other.currency:
            raise CurrencyMismatchError(
                f"Cannot combine {self.currency} with {other.currency}"
            )

    @staticmethod
    def _normalize_amount(raw: object) -> Decimal:
        if isinstance(raw, bool):
            raise InvalidAmountError(f"Invalid money amount: {raw!r}")
        if isinstance(raw, Decimal):
            value = raw
        elif isinstance(raw, (str, int, float)):
            try:
                value = Decimal(str(raw).strip())
            except InvalidOperation as exc:
                raise InvalidAmountError(f"Invalid money amount: {raw!r}") from exc
        else:
            raise InvalidAmountError(
                f"Money amount must be numeric, got {type(raw).__name__}"
            )
        if not value.is_finite():
            raise InvalidAmountError(f"Invalid money amount: {raw!r}")
        if value < Decimal("0"):
            raise InvalidAmountError(f"Money amount cannot be negative, got {raw}")
        if value.adjusted() >= _MAX_INTEGER_DIGITS:
            raise InvalidAmountError(
                f"Money amount exceeds {_MAX_INTEGER_DIGITS} integer digits"
            )
        try:
            with localcontext(_EXACT):
                # copy_abs drops the sign of a negative zero.
                return value.quantize(_CENTS, rounding=ROUND_HALF_UP).copy_abs()
        except InvalidOperation as exc:
            raise InvalidAmountError(f"Invalid money amount: {raw!r}") from exc

    @staticmethod
    def _normalize_currency(raw: object) -> str:
        if not isinstance(raw, str) or len(raw) != 3 or not raw.isalpha() or not raw.isascii():
            raise InvalidCurrencyError(
                f"Currency must be a 3-letter ISO code, got {raw!r}"
            )
        return raw.upper()


@dataclass(frozen=True)
class Quantity:
    """A positive integer quantity.

    Enforces the invariant that a cart or order line can never hold zero
    or negative items.
    """

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise InvalidArgumentError(
                f"Quantity must be an integer, got {type(self.value).__name__}"
            )
        if self.value <= 0:
            raise InvalidQuantityError(
                f"Invalid quantity {self.value}: quantity must be positive"
            )

    def __add__(self, other: int) -> Quantity:
        return Quantity(self.value + other)

    def __str__(self) -> str:
        return str(self.value)


# ---------------------------------------------------------------------------
# Identifiers
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class _EntityId:
    """UUID-backed identity, stored as canonical lower-case text."""

    value: str

    def __post_init__(self) -> None:
        if isinstance(self.value, uuid.UUID):
            canonical = str(self.value)
        elif isinstance(self.value, str):
            try:
                canonical = str(uuid.UUID(self.value))
            except ValueError as exc:
                raise InvalidArgumentError(
                    f"{type(self).__name__} must be a valid UUID, got {self.value!r}"
                ) from exc
        else:
            raise InvalidArgumentError(
                f"{type(self).__name__} must be a UUID string, "
                f"got {type(self.value).__name__}"
            )
        object.__setattr__(self, "value", canonical)

    @classmethod
    def from_string(cls, raw: str):
        if not isinstance(raw, str):
            raise InvalidArgumentError(f"{cls.__name__} must be a string, got {raw!r}")
        return cls(raw.strip())

    def __str__(self) -> str:
        return self.value


class CartId(_EntityId):
    pass


class ProductId(_EntityId):
    pass


class OrderId(_EntityId):
    pass
