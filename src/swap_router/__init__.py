# Top-level API for swap_router (exact-arithmetic domain).
"""
Top-level API for swap_router.

This module exposes the stable interface for pricing multi-route swaps:
  - Trade: validates a set of quoted routes and derives amounts, execution
    price, transfer taxes, price impact and slippage bounds
  - RouteV3 / wrap_route: protocol-native route adapters
  - quote_routes: async glue to quote routes before building a Trade

Core data types (currencies, amounts, percents, prices, pools) live in
`swap_router.core` and are fully integer/Fraction based.
"""

from __future__ import annotations

from .trade import Trade
from .route import RouteProtocol, IRoute, RouteV3, wrap_route
from .quoting import RouteQuoter, quote_routes

from .core import (
    Token,
    NativeCurrency,
    CurrencyAmount,
    Percent,
    Price,
    Pool,
    FeeAmount,
    V3Route,
    TradeType,
    QuotedRoute,
    Swap,
    ZERO_PERCENT,
    ONE_HUNDRED_PERCENT,
    TradeError,
    NoRoutesError,
    InputCurrencyMismatchError,
    OutputCurrencyMismatchError,
    DuplicatePoolError,
    InvalidRouteTypeError,
    NegativeSlippageToleranceError,
)

__all__ = [
    # trade layer
    "Trade",
    "RouteProtocol",
    "IRoute",
    "RouteV3",
    "wrap_route",
    "RouteQuoter",
    "quote_routes",
    # core types
    "Token",
    "NativeCurrency",
    "CurrencyAmount",
    "Percent",
    "Price",
    "Pool",
    "FeeAmount",
    "V3Route",
    "TradeType",
    "QuotedRoute",
    "Swap",
    "ZERO_PERCENT",
    "ONE_HUNDRED_PERCENT",
    # errors
    "TradeError",
    "NoRoutesError",
    "InputCurrencyMismatchError",
    "OutputCurrencyMismatchError",
    "DuplicatePoolError",
    "InvalidRouteTypeError",
    "NegativeSlippageToleranceError",
]
