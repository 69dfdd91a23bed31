"""
Exact ratios: Percent (a proportion) and Price (quote units per base unit).

Alignment notes:
- Prices are raw ratios of base units: numerator/denominator are kept exactly
  as supplied (unreduced), so a price built from two amounts still exposes
  those amounts' integers.
- `Price.quote` multiplies exactly; no truncation happens until a caller
  asks an amount for its `quotient`.
- No Decimal or float is used here; see `fmt.py` for display views.
"""

from __future__ import annotations

from dataclasses import dataclass
from fractions import Fraction

from .amounts import CurrencyAmount
from .constants import BPS_DENOMINATOR
from .currency import Currency
from .exc import AmountDomainError, CurrencyMismatchError


def _ten_pow(n: int) -> int:
    if n < 0:
        raise ValueError("_ten_pow expects non-negative exponent")
    return 10 ** n


# ---------------------------------------------------------------------------
# Percent
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Percent:
    """A proportion held as an exact Fraction (0.5 == 50%). May be negative."""

    value: Fraction

    def __post_init__(self):
        if isinstance(self.value, bool) or not isinstance(self.value, (int, Fraction)):
            raise AmountDomainError(f"Percent requires int or Fraction, got {type(self.value).__name__}")
        if not isinstance(self.value, Fraction):
            object.__setattr__(self, "value", Fraction(self.value))

    @classmethod
    def from_ratio(cls, numerator: int, denominator: int = 1) -> "Percent":
        if denominator == 0:
            raise AmountDomainError("Percent with zero denominator")
        return cls(Fraction(numerator, denominator))

    @classmethod
    def from_bps(cls, bps: int) -> "Percent":
        return cls(Fraction(bps, BPS_DENOMINATOR))

    def as_fraction(self) -> Fraction:
        return self.value

    def is_negative(self) -> bool:
        return self.value < 0

    def is_zero(self) -> bool:
        return self.value == 0

    def __lt__(self, other: "Percent") -> bool:
        return self.value < other.value

    def __le__(self, other: "Percent") -> bool:
        return self.value <= other.value

    def __gt__(self, other: "Percent") -> bool:
        return self.value > other.value

    def __ge__(self, other: "Percent") -> bool:
        return self.value >= other.value


ZERO_PERCENT = Percent(Fraction(0))
ONE_HUNDRED_PERCENT = Percent(Fraction(1))


# ---------------------------------------------------------------------------
# Price
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Price:
    """Raw price of `base_currency` in `quote_currency` units: numerator / denominator.

    `denominator` counts base units and `numerator` quote units, so
    `quote(base_amount)` returns `base_amount * numerator / denominator`.
    """

    base_currency: Currency
    quote_currency: Currency
    denominator: int
    numerator: int

    def __post_init__(self):
        if self.denominator == 0:
            raise AmountDomainError("Price with zero denominator")
        if self.numerator < 0 or self.denominator < 0:
            raise AmountDomainError("Price must be non-negative")

    @classmethod
    def from_amounts(cls, amount_out: CurrencyAmount, amount_in: CurrencyAmount) -> "Price":
        """Build price as amount_out / amount_in from the amounts' integer quotients."""
        return cls(amount_in.currency, amount_out.currency, amount_in.quotient, amount_out.quotient)

    def as_fraction(self) -> Fraction:
        """Raw ratio (quote base units per base base unit)."""
        return Fraction(self.numerator, self.denominator)

    @property
    def scalar(self) -> Fraction:
        """Decimal shift between raw and human units."""
        return Fraction(_ten_pow(self.base_currency.decimals), _ten_pow(self.quote_currency.decimals))

    def adjusted_for_decimals(self) -> Fraction:
        """Human ratio: whole quote tokens per whole base token."""
        return self.as_fraction() * self.scalar

    def invert(self) -> "Price":
        return Price(self.quote_currency, self.base_currency, self.numerator, self.denominator)

    def multiply(self, other: "Price") -> "Price":
        """Chain two prices: (A->B) * (B->C) = (A->C)."""
        if self.quote_currency != other.base_currency:
            raise CurrencyMismatchError(self.quote_currency, other.base_currency, op="price multiply")
        return Price(
            self.base_currency,
            other.quote_currency,
            self.denominator * other.denominator,
            self.numerator * other.numerator,
        )

    def quote(self, amount: CurrencyAmount) -> CurrencyAmount:
        """Exact `amount * price`, denominated in `quote_currency`."""
        if amount.currency != self.base_currency:
            raise CurrencyMismatchError(self.base_currency, amount.currency, op="quote")
        return CurrencyAmount(self.quote_currency, amount.value * self.as_fraction())


__all__ = [
    "Percent",
    "Price",
    "ZERO_PERCENT",
    "ONE_HUNDRED_PERCENT",
]
