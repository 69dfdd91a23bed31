"""Trade aggregator: validate a set of quoted routes and price them as one trade.

A Trade is built from pre-quoted (route, input_amount, output_amount) triples
and a TradeType. Construction checks the cross-route invariants (non-empty,
shared wrapped input/output currency, no pool used twice) and nothing else;
every economic field is derived on first access and memoised for the life of
the instance. No field is ever recomputed or invalidated.

Price impact is measured against the routes' mid prices with transfer taxes
factored out: the spot side uses post-tax input, the realised side pre-tax
output, so the result reflects pool-curve slippage only.
"""
from __future__ import annotations

from fractions import Fraction
from functools import cached_property
from typing import Iterable, Optional, Sequence, Set, Tuple

from .core import (
    ONE,
    ONE_HUNDRED_PERCENT,
    ZERO_PERCENT,
    CurrencyAmount,
    DuplicatePoolError,
    InputCurrencyMismatchError,
    InvalidRouteTypeError,
    NegativeSlippageToleranceError,
    NoRoutesError,
    OutputCurrencyMismatchError,
    Percent,
    Pool,
    Price,
    QuotedRoute,
    Swap,
    TradeType,
    same_canonical,
)
from .quoting import RouteQuoter, quote_routes
from .route import IRoute, wrap_route

# Debug printing control
DEBUG_TRADE = False

def _dbg(msg: str) -> None:
    if DEBUG_TRADE:
        print(msg)


def _currency_tax(currency, fee_attr: str) -> Percent:
    """Transfer tax of `currency` from its wrapped token's `fee_attr` (bps)."""
    if currency.is_native:
        return ZERO_PERCENT
    bps = getattr(currency.wrapped, fee_attr)
    if not bps:
        return ZERO_PERCENT
    return Percent.from_bps(bps)


class Trade:
    """Validated aggregate of one or more swaps sharing currencies and direction."""

    def __init__(self, quoted_routes: Iterable[QuotedRoute], trade_type: TradeType):
        swaps = []
        for native, input_amount, output_amount in quoted_routes:
            swaps.append(Swap(wrap_route(native), input_amount, output_amount))

        if not swaps:
            raise NoRoutesError()

        self._swaps: Tuple[Swap, ...] = tuple(swaps)
        self._trade_type = TradeType(trade_type)

        # Every route must share the first swap's wrapped input/output currency.
        input_currency = swaps[0].input_amount.currency.wrapped
        output_currency = swaps[0].output_amount.currency.wrapped
        for s in swaps:
            if not same_canonical(s.route.input, input_currency):
                raise InputCurrencyMismatchError(input_currency, s.route.input.wrapped)
        for s in swaps:
            if not same_canonical(s.route.output, output_currency):
                raise OutputCurrencyMismatchError(output_currency, s.route.output.wrapped)

        # A trade must not route twice through the same pool.
        num_pools = sum(len(s.route.pools) for s in swaps)
        seen: Set[str] = set()
        duplicates: Set[str] = set()
        for s in swaps:
            for pool in s.route.pools:
                if not isinstance(pool, Pool):
                    raise InvalidRouteTypeError(
                        f"Unexpected pool type in route: {type(pool).__name__}"
                    )
                address = pool.address
                if address in seen:
                    duplicates.add(address)
                seen.add(address)
        if len(seen) != num_pools:
            raise DuplicatePoolError(duplicates)

        _dbg(f"Trade: {len(swaps)} swaps, {num_pools} pools, type={self._trade_type.name}")

    # ------------------------------------------------------------------
    # Structure
    # ------------------------------------------------------------------

    @property
    def swaps(self) -> Tuple[Swap, ...]:
        return self._swaps

    @property
    def routes(self) -> Tuple[IRoute, ...]:
        return tuple(s.route for s in self._swaps)

    @property
    def trade_type(self) -> TradeType:
        return self._trade_type

    # ------------------------------------------------------------------
    # Aggregate amounts and execution price
    # ------------------------------------------------------------------

    @cached_property
    def input_amount(self) -> CurrencyAmount:
        total = CurrencyAmount.zero(self._swaps[0].input_amount.currency)
        for s in self._swaps:
            total = total + s.input_amount
        return total

    @cached_property
    def output_amount(self) -> CurrencyAmount:
        total = CurrencyAmount.zero(self._swaps[0].output_amount.currency)
        for s in self._swaps:
            total = total + s.output_amount
        return total

    @cached_property
    def execution_price(self) -> Price:
        """The price expressed in terms of output amount / input amount."""
        return Price(
            self.input_amount.currency,
            self.output_amount.currency,
            self.input_amount.quotient,
            self.output_amount.quotient,
        )

    # ------------------------------------------------------------------
    # Transfer taxes
    # ------------------------------------------------------------------

    @property
    def input_tax(self) -> Percent:
        """Sell tax of the input token (0% for native or untaxed tokens)."""
        return _currency_tax(self.input_amount.currency, "sell_fee_bps")

    @property
    def output_tax(self) -> Percent:
        """Buy tax of the output token (0% for native or untaxed tokens)."""
        return _currency_tax(self.output_amount.currency, "buy_fee_bps")

    # ------------------------------------------------------------------
    # Price impact
    # ------------------------------------------------------------------

    @cached_property
    def price_impact(self) -> Percent:
        """Percent difference between the routes' mid price and the execution price.

        The spot side quotes post-tax input through each route's mid price;
        the realised side is the pre-tax output. Two cases return exactly 0%:
        a 100% output tax (the pre-tax output cannot be recovered) and a zero
        spot output (the swap moves no pool).
        """
        output_tax = self.output_tax
        if output_tax == ONE_HUNDRED_PERCENT:
            return ZERO_PERCENT

        post_tax_factor = ONE - self.input_tax.as_fraction()
        spot_output = Fraction(0)
        for s in self._swaps:
            post_tax_input = s.input_amount.multiply(post_tax_factor)
            # Quote on the wrapped form; native and wrapped legs share one pool price.
            mid = s.route.mid_price
            canonical_mid = Price(mid.base_currency.wrapped, mid.quote_currency.wrapped,
                                  mid.denominator, mid.numerator)
            spot_output += canonical_mid.quote(post_tax_input.wrapped).as_fraction()
        spot_output_amount = CurrencyAmount(self.output_amount.currency, spot_output)
        _dbg(f"price_impact: spot_output={spot_output}")

        if spot_output_amount.is_zero():
            return ZERO_PERCENT

        pre_tax_output = self.output_amount.divide(ONE - output_tax.as_fraction())
        impact = (spot_output - pre_tax_output.as_fraction()) / spot_output
        _dbg(f"price_impact: pre_tax_output={pre_tax_output.value}, impact={impact}")
        return Percent.from_ratio(impact.numerator, impact.denominator)

    # ------------------------------------------------------------------
    # Slippage bounds
    # ------------------------------------------------------------------

    def minimum_amount_out(self, slippage_tolerance: Percent,
                           amount_out: Optional[CurrencyAmount] = None) -> CurrencyAmount:
        """Minimum amount received for the given slippage tolerance.

        EXACT_OUTPUT trades return `amount_out` unchanged; otherwise
        `floor(amount_out.quotient / (1 + tolerance))`.
        """
        if slippage_tolerance.is_negative():
            raise NegativeSlippageToleranceError(slippage_tolerance)
        if amount_out is None:
            amount_out = self.output_amount
        if self._trade_type == TradeType.EXACT_OUTPUT:
            return amount_out
        adjusted = Fraction(amount_out.quotient) / (ONE + slippage_tolerance.as_fraction())
        return CurrencyAmount.from_raw_amount(amount_out.currency, adjusted.numerator // adjusted.denominator)

    def maximum_amount_in(self, slippage_tolerance: Percent,
                          amount_in: Optional[CurrencyAmount] = None) -> CurrencyAmount:
        """Maximum amount spent for the given slippage tolerance.

        EXACT_INPUT trades return `amount_in` unchanged; otherwise
        `floor(amount_in.quotient * (1 + tolerance))`.
        """
        if slippage_tolerance.is_negative():
            raise NegativeSlippageToleranceError(slippage_tolerance)
        if amount_in is None:
            amount_in = self.input_amount
        if self._trade_type == TradeType.EXACT_INPUT:
            return amount_in
        adjusted = Fraction(amount_in.quotient) * (ONE + slippage_tolerance.as_fraction())
        return CurrencyAmount.from_raw_amount(amount_in.currency, adjusted.numerator // adjusted.denominator)

    def worst_execution_price(self, slippage_tolerance: Percent) -> Price:
        """Least favourable execution price consistent with the tolerance."""
        return Price(
            self.input_amount.currency,
            self.output_amount.currency,
            self.maximum_amount_in(slippage_tolerance).quotient,
            self.minimum_amount_out(slippage_tolerance).quotient,
        )

    # ------------------------------------------------------------------
    # Construction from un-quoted routes
    # ------------------------------------------------------------------

    @classmethod
    async def from_routes(cls, routes_and_amounts: Sequence[Tuple[object, CurrencyAmount]],
                          trade_type: TradeType, quoter: RouteQuoter) -> "Trade":
        """Quote every (route, amount) pair, then build the trade.

        Quoter failures propagate unchanged and no trade is built.
        """
        quoted = await quote_routes(routes_and_amounts, trade_type, quoter)
        return cls(quoted, trade_type)

    @classmethod
    async def from_route(cls, route, amount: CurrencyAmount,
                         trade_type: TradeType, quoter: RouteQuoter) -> "Trade":
        return await cls.from_routes([(route, amount)], trade_type, quoter)

    def __repr__(self) -> str:
        return f"Trade({self._trade_type.name}, swaps={len(self._swaps)})"


__all__ = [
    "Trade",
]
