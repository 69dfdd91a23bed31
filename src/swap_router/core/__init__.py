"""
swap_router Core
================

Unified exports for exact-arithmetic primitives and utilities.
All arithmetic is performed on ints and `fractions.Fraction`; amounts are raw
base units scaled by token decimals. Decimal helpers are provided *only* for
display formatting.
"""

# NOTE:
#   The `core` package defines the primitives the trade layer treats as a
#   trusted arithmetic library: currencies, amounts, percents, prices, pools
#   and the protocol-native V3 route. No floating point is used anywhere.

# Integer/rational constants
from .constants import (
    ZERO,
    ONE,
    BPS_DENOMINATOR,
    MAX_UINT256,
    Q96,
    Q192,
    MIN_SQRT_RATIO,
    MAX_SQRT_RATIO,
    V3_FACTORY_ADDRESS,
    POOL_INIT_CODE_HASH,
)

# Currencies and amounts
from .currency import Token, NativeCurrency, Currency, same_canonical
from .amounts import CurrencyAmount

# Exact ratios
from .ratios import Percent, Price, ZERO_PERCENT, ONE_HUNDRED_PERCENT

# Decimal formatting helpers (non-core arithmetic)
from .fmt import (
    DEFAULT_DECIMAL_PRECISION,
    fmt_dec,
    amount_to_decimal,
    price_to_decimal,
    percent_to_decimal,
)

# Pools and native routes
from .pool import (
    FeeAmount,
    TICK_SPACINGS,
    PoolDeployment,
    DEFAULT_DEPLOYMENT,
    compute_pool_address,
    Pool,
)
from .v3_route import V3Route

# Core datatypes for trade aggregation
from .datatypes import TradeType, QuotedRoute, Swap

# Core exceptions
from .exc import (
    AmountDomainError,
    CurrencyMismatchError,
    InvariantViolation,
    InsufficientLiquidityError,
    TradeError,
    NoRoutesError,
    InputCurrencyMismatchError,
    OutputCurrencyMismatchError,
    DuplicatePoolError,
    InvalidRouteTypeError,
    NegativeSlippageToleranceError,
)

__all__ = [
    # constants
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
    # currencies / amounts
    "Token",
    "NativeCurrency",
    "Currency",
    "same_canonical",
    "CurrencyAmount",
    # ratios
    "Percent",
    "Price",
    "ZERO_PERCENT",
    "ONE_HUNDRED_PERCENT",
    # fmt
    "DEFAULT_DECIMAL_PRECISION",
    "fmt_dec",
    "amount_to_decimal",
    "price_to_decimal",
    "percent_to_decimal",
    # pools / routes
    "FeeAmount",
    "TICK_SPACINGS",
    "PoolDeployment",
    "DEFAULT_DEPLOYMENT",
    "compute_pool_address",
    "Pool",
    "V3Route",
    # datatypes
    "TradeType",
    "QuotedRoute",
    "Swap",
    # exceptions
    "AmountDomainError",
    "CurrencyMismatchError",
    "InvariantViolation",
    "InsufficientLiquidityError",
    "TradeError",
    "NoRoutesError",
    "InputCurrencyMismatchError",
    "OutputCurrencyMismatchError",
    "DuplicatePoolError",
    "InvalidRouteTypeError",
    "NegativeSlippageToleranceError",
]
