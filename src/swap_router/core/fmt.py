"""
Formatting helpers (non-core arithmetic).

Core arithmetic uses integer/rational types. Decimal here is only for
formatting and convenience (e.g., tests, logs, display).
"""

from decimal import Decimal, getcontext
from fractions import Fraction

from .amounts import CurrencyAmount
from .exc import AmountDomainError
from .ratios import Percent, Price

# Debug printing control (formatting layer)
DEBUG_FMT = False

def _dbg(msg: str) -> None:
    if DEBUG_FMT:
        print(msg)


# ---------------------------------------------------------------------------
# Global Decimal precision (formatting only)
# ---------------------------------------------------------------------------

#: Default global precision (number of significant digits) for Decimal-based
#: formatting. This does not affect core arithmetic which uses Fractions.
DEFAULT_DECIMAL_PRECISION: int = 28
getcontext().prec = DEFAULT_DECIMAL_PRECISION


def fmt_dec(x: Decimal, places: int = 18) -> str:
    """Format a Decimal in scientific notation with fixed fractional digits.

    The output is stable for logs and tests, e.g.:
      Decimal('1')        -> '1.000000000000000000E+0'
      Decimal('123456')   -> '1.234560000000000000E+5'
    """
    return format(x, f".{places}E")


def _fraction_to_decimal(f: Fraction) -> Decimal:
    _dbg(f"fraction_to_decimal: {f.numerator}/{f.denominator}")
    return Decimal(f.numerator) / Decimal(f.denominator)


# ---------------------------------------------------------------------------
# Logging/display conversion helpers
# ---------------------------------------------------------------------------

def amount_to_decimal(a: CurrencyAmount) -> Decimal:
    """Whole-token Decimal view of an amount (raw / 10^decimals), for display only."""
    if a is None:
        raise AmountDomainError("amount_to_decimal(): received None")
    if not isinstance(a, CurrencyAmount):
        raise AmountDomainError("amount_to_decimal(): unsupported amount type")
    if a.is_zero():
        return Decimal(0)
    return _fraction_to_decimal(a.value / (10 ** a.currency.decimals))


def price_to_decimal(p: Price) -> Decimal:
    """Decimal-adjusted price (whole quote tokens per whole base token)."""
    if not isinstance(p, Price):
        raise AmountDomainError("price_to_decimal(): expected Price")
    return _fraction_to_decimal(p.adjusted_for_decimals())


def percent_to_decimal(p: Percent) -> Decimal:
    """Percent as a Decimal number of percentage points (Fraction(1, 2) -> 50)."""
    if not isinstance(p, Percent):
        raise AmountDomainError("percent_to_decimal(): expected Percent")
    return _fraction_to_decimal(p.value * 100)


__all__ = [
    "DEFAULT_DECIMAL_PRECISION",
    "fmt_dec",
    "amount_to_decimal",
    "price_to_decimal",
    "percent_to_decimal",
]
