"""
swap_router Core Constants (integer domain)
===========================================

Only integer/rational constants live here. Decimal formatting helpers live
in `fmt.py`.
"""

# NOTE: All amounts are raw base units (scaled by token decimals); never floats.

from fractions import Fraction

# ---------------------------------------------------------------------------
# Rational identities
# ---------------------------------------------------------------------------

ZERO: Fraction = Fraction(0)
ONE: Fraction = Fraction(1)

#: Basis points per unit (1 bp = 1/10000).
BPS_DENOMINATOR: int = 10_000

#: Largest raw amount representable on-chain.
MAX_UINT256: int = 2 ** 256 - 1


# ---------------------------------------------------------------------------
# Uniswap V3-style fixed point and pool bounds
# ---------------------------------------------------------------------------

Q96: int = 2 ** 96
Q192: int = Q96 ** 2

#: sqrt(1.0001^-887272) * 2^96 and sqrt(1.0001^887272) * 2^96.
MIN_SQRT_RATIO: int = 4295128739
MAX_SQRT_RATIO: int = 1461446703485210103287273052203988822378723970342


# ---------------------------------------------------------------------------
# Canonical deployment (CREATE2 inputs for pool addresses)
# ---------------------------------------------------------------------------

V3_FACTORY_ADDRESS: str = "0x1F98431c8aD98523631AE4a59f267346ea31F984"
POOL_INIT_CODE_HASH: str = "0xe34f199b19b2b4f47f68442619d555527d244f78a3297ea89325f843f87b8b54"


__all__ = [
    "ZERO",
    "ONE",
    "BPS_DENOMINATOR",
    "MAX_UINT256",
    "Q96",
    "Q192",
    "MIN_SQRT_RATIO",
    "MAX_SQRT_RATIO",
    "V3_FACTORY_ADDRESS",
    "POOL_INIT_CODE_HASH",
]
