"""
Core exception types for swap_router.

These are dependency-free and may be imported by all modules.
"""

__all__ = [
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


class AmountDomainError(Exception):
    """Raised when inputs violate the non-negative domain or basic preconditions."""
    pass


class CurrencyMismatchError(AmountDomainError):
    """Raised when amounts or prices of different currencies are combined."""

    def __init__(self, expected, actual, *, op: str = "arithmetic"):
        super().__init__(f"{op} requires currency {expected!r}, got {actual!r}")
        self.expected = expected
        self.actual = actual


class InvariantViolation(Exception):
    """Raised when arithmetic or structural checks would break core invariants."""
    pass


class InsufficientLiquidityError(Exception):
    """Raised by a quoter when a route cannot fill the requested amount.

    Attributes
    ----------
    route : Any
        The route that was being quoted.
    requested : Any
        The requested amount (input for EXACT_INPUT, output for EXACT_OUTPUT).
    """

    def __init__(self, route, requested):
        super().__init__(f"Insufficient liquidity on route {route!r} for {requested!r}")
        self.route = route
        self.requested = requested


# ---------------------------------------------------------------------------
# Trade contract errors
# ---------------------------------------------------------------------------

class TradeError(Exception):
    """Base class for trade construction and bounding errors."""
    pass


class NoRoutesError(TradeError):
    """Raised when a trade is constructed from an empty route set."""

    def __init__(self):
        super().__init__("No routes provided when constructing trade")


class InputCurrencyMismatchError(TradeError):
    """Raised when swaps disagree on the (wrapped) input currency."""

    def __init__(self, expected, actual):
        super().__init__(f"Input currency mismatch: expected {expected!r}, got {actual!r}")
        self.expected = expected
        self.actual = actual


class OutputCurrencyMismatchError(TradeError):
    """Raised when swaps disagree on the (wrapped) output currency."""

    def __init__(self, expected, actual):
        super().__init__(f"Output currency mismatch: expected {expected!r}, got {actual!r}")
        self.expected = expected
        self.actual = actual


class DuplicatePoolError(TradeError):
    """Raised when the same pool is used more than once across a trade's routes."""

    def __init__(self, duplicates):
        dup = sorted(duplicates)
        super().__init__(f"Pools used more than once in trade: {', '.join(dup)}")
        self.duplicates = dup


class InvalidRouteTypeError(TradeError):
    """Raised when a route (or pool) of an unsupported protocol is supplied."""
    pass


class NegativeSlippageToleranceError(TradeError):
    """Raised when a negative slippage tolerance is passed to a bounding function."""

    def __init__(self, tolerance):
        super().__init__(f"Slippage tolerance must be >= 0, got {tolerance!r}")
        self.tolerance = tolerance
