from __future__ import annotations
import asyncio
from typing import Callable, Dict, Tuple

import pytest

# Import project primitives
from swap_router.core import (
    Q96,
    CurrencyAmount,
    FeeAmount,
    InsufficientLiquidityError,
    NativeCurrency,
    Pool,
    Token,
    TradeType,
    V3Route,
)


# -----------------------------
# Test helpers (pure functions)
# -----------------------------

CHAIN_ID = 1


def make_token(n: int, decimals: int = 18, **fees) -> Token:
    """Synthetic token at address 0x00..0n (digits only, so already checksummed)."""
    return Token(CHAIN_ID, "0x" + f"{n:040x}", decimals, symbol=f"T{n}", **fees)


def make_pool(a: Token, b: Token, fee: int = FeeAmount.MEDIUM, sqrt_price_x96: int = Q96) -> Pool:
    """Pool with default 1:1 price (sqrtP = 2^96)."""
    return Pool.from_tokens(a, b, fee, sqrt_price_x96, liquidity=10 ** 24, tick_current=0)


def raw(currency, n: int) -> CurrencyAmount:
    return CurrencyAmount.from_raw_amount(currency, n)


class FakeQuoter:
    """Async quoter stub: fixed output/input multiplier per route, optional delay and failure.

    - rate: output units per input unit (Fraction-free integer ratio num/den).
    - delays: per-route sleep in seconds, to shuffle completion order.
    - fail_on: routes for which InsufficientLiquidityError is raised.
    """

    def __init__(self, num: int = 1, den: int = 1, delays: Dict[int, float] | None = None, fail_on=()):
        self.num = num
        self.den = den
        self.delays = delays or {}
        self.fail_on = list(fail_on)
        self.calls = []

    async def __call__(self, route: V3Route, amount: CurrencyAmount, trade_type: TradeType) -> Tuple[CurrencyAmount, CurrencyAmount]:
        self.calls.append(route)
        await asyncio.sleep(self.delays.get(id(route), 0))
        if any(route is r for r in self.fail_on):
            raise InsufficientLiquidityError(route, amount)
        if trade_type == TradeType.EXACT_INPUT:
            out = amount.quotient * self.num // self.den
            return amount, raw(route.output, out)
        inn = -(-amount.quotient * self.den // self.num)
        return raw(route.input, inn), amount


# -----------------------------
# Pytest fixtures
# -----------------------------

@pytest.fixture()
def tokens() -> Tuple[Token, Token, Token, Token]:
    return make_token(1), make_token(2), make_token(3), make_token(4)


@pytest.fixture()
def weth() -> Token:
    return Token(CHAIN_ID, "0xC02aaA39b223FE8D0A0e5C4F27eAD9083C756Cc2", 18, symbol="WETH")


@pytest.fixture()
def usdc() -> Token:
    return Token(CHAIN_ID, "0xA0b86991c6218b36c1d19D4a2e9Eb0cE3606eB48", 6, symbol="USDC")


@pytest.fixture()
def ether(weth) -> NativeCurrency:
    return NativeCurrency(CHAIN_ID, weth)


@pytest.fixture()
def two_route_factory(tokens) -> Callable[..., Tuple[V3Route, V3Route]]:
    """Two single-hop routes T1 -> T2 on distinct fee tiers (distinct pools)."""
    t1, t2, _, _ = tokens

    def build(input_token: Token = t1, output_token: Token = t2) -> Tuple[V3Route, V3Route]:
        r_a = V3Route([make_pool(input_token, output_token, FeeAmount.LOW)], input_token, output_token)
        r_b = V3Route([make_pool(input_token, output_token, FeeAmount.MEDIUM)], input_token, output_token)
        return r_a, r_b

    return build
