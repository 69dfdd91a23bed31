"""
Core datatypes used by the trade layer.

These datatypes are intentionally minimal and immutable so that aggregation
and pricing logic can remain deterministic and testable.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Any, NamedTuple

from .amounts import CurrencyAmount


class TradeType(IntEnum):
    """Which side of each swap was the originally fixed quantity."""

    EXACT_INPUT = 0
    EXACT_OUTPUT = 1


class QuotedRoute(NamedTuple):
    """A protocol-native route with the amounts a quoter realised on it.

    A plain (route, input_amount, output_amount) tuple is accepted wherever
    a QuotedRoute is.
    """

    route: Any
    input_amount: CurrencyAmount
    output_amount: CurrencyAmount


@dataclass(frozen=True)
class Swap:
    """One route's contribution to a trade (route is the adapted IRoute)."""

    route: Any
    input_amount: CurrencyAmount
    output_amount: CurrencyAmount


__all__ = [
    "TradeType",
    "QuotedRoute",
    "Swap",
]
