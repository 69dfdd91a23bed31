"""
Protocol-native V3 route: an ordered chain of pools from `input` to `output`.

This is the object a pathfinder hands over. It validates that the pools
connect, derives the token path and exposes the spot (mid) price of the whole
route as the product of each hop's pool price.
"""

from __future__ import annotations

from functools import cached_property
from typing import List, Sequence, Tuple

from .currency import Currency, Token
from .exc import InvariantViolation
from .pool import Pool
from .ratios import Price


class V3Route:
    """Ordered V3 pools connecting `input` to `output`."""

    def __init__(self, pools: Sequence[Pool], input: Currency, output: Currency):
        pools = tuple(pools)
        if not pools:
            raise InvariantViolation("V3Route requires at least one pool")
        chain_id = pools[0].chain_id
        if any(p.chain_id != chain_id for p in pools):
            raise InvariantViolation("V3Route pools must share one chain")
        if not pools[0].involves_token(input.wrapped):
            raise InvariantViolation("V3Route input is not in the first pool")
        if not pools[-1].involves_token(output.wrapped):
            raise InvariantViolation("V3Route output is not in the last pool")

        path: List[Token] = [input.wrapped]
        for i, pool in enumerate(pools):
            current = path[i]
            if not pool.involves_token(current):
                raise InvariantViolation(f"V3Route pool {i} does not connect to {current!r}")
            path.append(pool.token1 if current == pool.token0 else pool.token0)
        if path[-1] != output.wrapped:
            raise InvariantViolation("V3Route path does not end at output")

        self._pools: Tuple[Pool, ...] = pools
        self._token_path: Tuple[Token, ...] = tuple(path)
        self._input = input
        self._output = output

    @property
    def pools(self) -> Tuple[Pool, ...]:
        return self._pools

    @property
    def token_path(self) -> Tuple[Token, ...]:
        return self._token_path

    @property
    def input(self) -> Currency:
        return self._input

    @property
    def output(self) -> Currency:
        return self._output

    @property
    def chain_id(self) -> int:
        return self._pools[0].chain_id

    @cached_property
    def mid_price(self) -> Price:
        """Spot price of the route (output per input), product of hop prices."""
        price = self._pools[0].price_of(self._token_path[0])
        for hop, pool in enumerate(self._pools[1:], start=1):
            price = price.multiply(pool.price_of(self._token_path[hop]))
        # Re-express over the route's own currencies (native stays native).
        return Price(self._input, self._output, price.denominator, price.numerator)

    def __repr__(self) -> str:
        hops = " -> ".join(t.symbol or t.address for t in self._token_path)
        return f"V3Route({hops})"


__all__ = [
    "V3Route",
]
