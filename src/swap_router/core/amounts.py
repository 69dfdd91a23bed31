"""
CurrencyAmount: an exact quantity of base units of a specific currency.

- Values are exact `Fraction`s of raw base units (token decimals already applied).
  Integer-only callers use `from_raw_amount`; products with prices and percents
  may be fractional until `quotient` truncates them.
- Non-negative domain: negative values are rejected at construction.
- Upper bound: the integer part must fit in uint256.
- Arithmetic between amounts requires identical currencies (native != wrapped).
"""

from __future__ import annotations

from dataclasses import dataclass
from fractions import Fraction

from .constants import MAX_UINT256
from .currency import Currency
from .exc import AmountDomainError, CurrencyMismatchError, InvariantViolation

# Debug printing control
DEBUG_AMOUNTS = False

def _dbg(msg: str) -> None:
    if DEBUG_AMOUNTS:
        print(msg)


def _as_fraction(x) -> Fraction:
    """Coerce int / Fraction / Percent-like (anything with `as_fraction()`) to Fraction."""
    if isinstance(x, bool):
        raise AmountDomainError("bool is not a valid scalar")
    if isinstance(x, (int, Fraction)):
        return Fraction(x)
    as_fraction = getattr(x, "as_fraction", None)
    if callable(as_fraction):
        return as_fraction()
    raise AmountDomainError(f"unsupported scalar type: {type(x).__name__}")


@dataclass(frozen=True)
class CurrencyAmount:
    """Exact non-negative amount of `currency` in raw base units."""

    currency: Currency
    value: Fraction

    def __post_init__(self):
        if not isinstance(self.value, Fraction):
            raise AmountDomainError("CurrencyAmount value must be a Fraction")
        if self.value < 0:
            raise AmountDomainError(f"CurrencyAmount must be >= 0, got {self.value}")
        if self.value.numerator // self.value.denominator > MAX_UINT256:
            raise AmountDomainError("CurrencyAmount exceeds uint256")

    # ------------- constructors -------------

    @classmethod
    def from_raw_amount(cls, currency: Currency, raw: int) -> "CurrencyAmount":
        if isinstance(raw, bool) or not isinstance(raw, int):
            raise AmountDomainError(f"raw amount must be int, got {type(raw).__name__}")
        return cls(currency, Fraction(raw))

    @classmethod
    def from_fractional_amount(cls, currency: Currency, numerator: int, denominator: int) -> "CurrencyAmount":
        if denominator == 0:
            raise AmountDomainError("fractional amount with zero denominator")
        return cls(currency, Fraction(numerator, denominator))

    @classmethod
    def zero(cls, currency: Currency) -> "CurrencyAmount":
        return cls(currency, Fraction(0))

    # ------------- views -------------

    @property
    def quotient(self) -> int:
        """Truncated integer number of base units."""
        return self.value.numerator // self.value.denominator

    @property
    def remainder(self) -> Fraction:
        return self.value - self.quotient

    @property
    def wrapped(self) -> "CurrencyAmount":
        """Same value denominated in the wrapped token."""
        if not self.currency.is_native:
            return self
        return CurrencyAmount(self.currency.wrapped, self.value)

    def as_fraction(self) -> Fraction:
        return self.value

    def is_zero(self) -> bool:
        return self.value == 0

    # ------------- arithmetic (exact) -------------

    def _require_same_currency(self, other: "CurrencyAmount", op: str) -> None:
        if not isinstance(other, CurrencyAmount):
            raise AmountDomainError(f"CurrencyAmount {op} requires CurrencyAmount operands")
        if self.currency != other.currency:
            raise CurrencyMismatchError(self.currency, other.currency, op=op)

    def __add__(self, other: "CurrencyAmount") -> "CurrencyAmount":
        self._require_same_currency(other, "add")
        return CurrencyAmount(self.currency, self.value + other.value)

    def __sub__(self, other: "CurrencyAmount") -> "CurrencyAmount":
        self._require_same_currency(other, "subtract")
        if self.value < other.value:
            raise InvariantViolation("subtraction underflow would produce negative amount")
        return CurrencyAmount(self.currency, self.value - other.value)

    def multiply(self, k) -> "CurrencyAmount":
        """Multiply by int, Fraction or Percent; exact, non-negative result required."""
        f = _as_fraction(k)
        if f < 0:
            raise AmountDomainError(f"negative scalar not allowed: k={f}")
        return CurrencyAmount(self.currency, self.value * f)

    def divide(self, k) -> "CurrencyAmount":
        """Divide by int, Fraction or Percent; exact (no truncation)."""
        f = _as_fraction(k)
        if f == 0:
            raise ZeroDivisionError("division by zero scalar")
        if f < 0:
            raise AmountDomainError(f"negative scalar not allowed: k={f}")
        _dbg(f"divide: value={self.value}, k={f}")
        return CurrencyAmount(self.currency, self.value / f)

    # ------------- comparisons (same currency) -------------

    def __lt__(self, other: "CurrencyAmount") -> bool:
        self._require_same_currency(other, "compare")
        return self.value < other.value

    def __le__(self, other: "CurrencyAmount") -> bool:
        self._require_same_currency(other, "compare")
        return self.value <= other.value

    def __gt__(self, other: "CurrencyAmount") -> bool:
        self._require_same_currency(other, "compare")
        return self.value > other.value

    def __ge__(self, other: "CurrencyAmount") -> bool:
        self._require_same_currency(other, "compare")
        return self.value >= other.value


__all__ = [
    "CurrencyAmount",
]
