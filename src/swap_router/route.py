"""Route adapter: normalise protocol-native routes into one read-only shape.

The trade layer depends only on the `IRoute` capability set (protocol, pools,
path, mid_price, input, output). Each supported protocol contributes one
adapter class; `wrap_route` is the single place that looks at the concrete
type of a native route and rejects unknown variants.
"""
from __future__ import annotations

import typing
from enum import Enum
from typing import Tuple

from .core import Currency, InvalidRouteTypeError, Pool, Price, Token, V3Route


class RouteProtocol(str, Enum):
    """Liquidity protocol a route executes on."""

    V3 = "V3"


class IRoute(typing.Protocol):
    protocol: RouteProtocol
    pools: Tuple[Pool, ...]
    path: Tuple[Token, ...]
    mid_price: Price
    input: Currency
    output: Currency


class RouteV3:
    """Read-only view of a V3Route. Copies references; never re-validates."""

    protocol = RouteProtocol.V3

    __slots__ = ("pools", "path", "mid_price", "input", "output", "native")

    def __init__(self, native: V3Route):
        self.native = native
        self.pools = native.pools
        self.path = native.token_path
        self.mid_price = native.mid_price
        self.input = native.input
        self.output = native.output

    def __repr__(self) -> str:
        return f"RouteV3({self.native!r})"


def wrap_route(native) -> IRoute:
    """Adapt a protocol-native route, raising InvalidRouteTypeError for unknown variants."""
    if isinstance(native, V3Route):
        return RouteV3(native)
    raise InvalidRouteTypeError(f"Invalid route type: {type(native).__name__}")


__all__ = [
    "RouteProtocol",
    "IRoute",
    "RouteV3",
    "wrap_route",
]
