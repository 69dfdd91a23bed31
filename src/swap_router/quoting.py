"""Async quoting glue: turn (route, amount) pairs into QuotedRoutes.

The quoter is a caller-supplied black box (an on-chain quoter contract, a
local pool simulator, a pricing service). It is asked once per route and
the calls run concurrently; results come back in input order whatever the
completion order. The first quoter error propagates unchanged after the
remaining quotes are cancelled.
"""
from __future__ import annotations

import asyncio
import typing
from typing import List, Sequence, Tuple

from .core import CurrencyAmount, InvalidRouteTypeError, QuotedRoute, TradeType, V3Route


class RouteQuoter(typing.Protocol):
    """Quote `amount` through `route`; return realised (input_amount, output_amount).

    For EXACT_INPUT `amount` is the input; for EXACT_OUTPUT it is the output.
    Implementations raise (e.g. InsufficientLiquidityError) when the route
    cannot fill the amount.
    """

    async def __call__(self, route: V3Route, amount: CurrencyAmount,
                       trade_type: TradeType) -> Tuple[CurrencyAmount, CurrencyAmount]:
        ...


async def quote_routes(routes_and_amounts: Sequence[Tuple[object, CurrencyAmount]],
                       trade_type: TradeType,
                       quoter: RouteQuoter) -> List[QuotedRoute]:
    """Quote all routes concurrently and return QuotedRoutes in input order."""
    pairs = list(routes_and_amounts)
    for route, _ in pairs:
        if not isinstance(route, V3Route):
            raise InvalidRouteTypeError(f"Invalid route type: {type(route).__name__}")

    tasks = [asyncio.ensure_future(quoter(route, amount, trade_type)) for route, amount in pairs]
    try:
        results = await asyncio.gather(*tasks)
    except BaseException:
        # No sibling quote may outlive a failed one.
        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)
        raise
    return [
        QuotedRoute(route, input_amount, output_amount)
        for (route, _), (input_amount, output_amount) in zip(pairs, results)
    ]


__all__ = [
    "RouteQuoter",
    "quote_routes",
]
