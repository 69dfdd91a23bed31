import pytest
from fractions import Fraction

from swap_router import (
    DuplicatePoolError,
    InputCurrencyMismatchError,
    InvalidRouteTypeError,
    NoRoutesError,
    OutputCurrencyMismatchError,
    QuotedRoute,
    Trade,
    TradeType,
    V3Route,
)
from swap_router.core import FeeAmount

from conftest import make_pool, raw


# -----------------------------
# Construction invariants
# -----------------------------

def test_empty_route_set_raises():
    print("[trade-empty] no routes -> expect NoRoutesError")
    with pytest.raises(NoRoutesError):
        Trade([], TradeType.EXACT_INPUT)


def test_unknown_route_type_raises(tokens):
    t1, t2, _, _ = tokens
    with pytest.raises(InvalidRouteTypeError):
        Trade([(object(), raw(t1, 1), raw(t2, 1))], TradeType.EXACT_INPUT)


def test_unknown_pool_type_raises(tokens):
    print("[trade-pool-type] route carrying a non-Pool pool -> expect InvalidRouteTypeError")
    t1, t2, _, _ = tokens
    route = V3Route([make_pool(t1, t2)], t1, t2)
    route.mid_price  # memoise before swapping the pool out
    route._pools = ("not-a-pool",)
    with pytest.raises(InvalidRouteTypeError):
        Trade([(route, raw(t1, 1), raw(t2, 1))], TradeType.EXACT_INPUT)


def test_duplicate_pool_across_swaps_raises(tokens):
    print("[trade-duplicate] two routes through the same T1/T2 3000 pool -> expect DuplicatePoolError")
    t1, t2, _, _ = tokens
    r_a = V3Route([make_pool(t1, t2, FeeAmount.MEDIUM)], t1, t2)
    # Separate Pool object, same pair and fee tier (different state): still the same venue.
    r_b = V3Route([make_pool(t2, t1, FeeAmount.MEDIUM, sqrt_price_x96=2 ** 97)], t1, t2)
    with pytest.raises(DuplicatePoolError) as ei:
        Trade([(r_a, raw(t1, 10), raw(t2, 10)), (r_b, raw(t1, 10), raw(t2, 10))], TradeType.EXACT_INPUT)
    assert ei.value.duplicates == [r_a.pools[0].address]


def test_duplicate_pool_within_multi_hop_routes_raises(tokens):
    t1, t2, t3, _ = tokens
    r_a = V3Route([make_pool(t1, t2), make_pool(t2, t3)], t1, t3)
    r_b = V3Route([make_pool(t1, t2, FeeAmount.LOW), make_pool(t2, t3)], t1, t3)
    with pytest.raises(DuplicatePoolError):
        Trade([(r_a, raw(t1, 1), raw(t3, 1)), (r_b, raw(t1, 1), raw(t3, 1))], TradeType.EXACT_INPUT)


def test_output_currency_mismatch_raises(tokens):
    print("[trade-output-mismatch] A: T1->T2, B: T1->T3 -> expect OutputCurrencyMismatchError")
    t1, t2, t3, _ = tokens
    r_a = V3Route([make_pool(t1, t2)], t1, t2)
    r_b = V3Route([make_pool(t1, t3)], t1, t3)
    with pytest.raises(OutputCurrencyMismatchError):
        Trade([(r_a, raw(t1, 1), raw(t2, 1)), (r_b, raw(t1, 1), raw(t3, 1))], TradeType.EXACT_INPUT)


def test_input_currency_mismatch_raises(tokens):
    t1, t2, t3, _ = tokens
    r_a = V3Route([make_pool(t1, t2)], t1, t2)
    r_b = V3Route([make_pool(t3, t2)], t3, t2)
    with pytest.raises(InputCurrencyMismatchError):
        Trade([(r_a, raw(t1, 1), raw(t2, 1)), (r_b, raw(t3, 1), raw(t2, 1))], TradeType.EXACT_INPUT)


def test_native_and_wrapped_routes_share_canonical_input(ether, weth, tokens):
    print("[trade-canonical] ETH route and WETH route -> same canonical input, construction succeeds")
    t1 = tokens[0]
    r_native = V3Route([make_pool(weth, t1, FeeAmount.LOW)], ether, t1)
    r_wrapped = V3Route([make_pool(weth, t1, FeeAmount.HIGH)], weth, t1)
    trade = Trade([(r_native, raw(ether, 5), raw(t1, 5)), (r_wrapped, raw(ether, 5), raw(t1, 5))],
                  TradeType.EXACT_INPUT)
    assert len(trade.routes) == 2
    # Both pools quote 1:1; pricing runs on the wrapped form for both legs.
    assert trade.price_impact.as_fraction() == Fraction(0)


def test_native_amounts_priced_through_wrapped_route(ether, weth, tokens):
    print("[trade-canonical-impact] WETH route, ETH amounts in=5 out=4 -> impact 1/5")
    t1 = tokens[0]
    r_wrapped = V3Route([make_pool(weth, t1)], weth, t1)
    trade = Trade([(r_wrapped, raw(ether, 5), raw(t1, 4))], TradeType.EXACT_INPUT)
    assert trade.input_amount.currency == ether
    assert trade.price_impact.as_fraction() == Fraction(1, 5)


# -----------------------------
# Aggregates
# -----------------------------

def test_input_and_output_are_exact_sums(two_route_factory, tokens):
    print("[trade-sums] swaps 1000+2000 in, 1990+3970 out")
    t1, t2, _, _ = tokens
    r_a, r_b = two_route_factory()
    trade = Trade([QuotedRoute(r_a, raw(t1, 1000), raw(t2, 1990)),
                   QuotedRoute(r_b, raw(t1, 2000), raw(t2, 3970))], TradeType.EXACT_INPUT)
    assert trade.input_amount.quotient == 3000
    assert trade.output_amount.quotient == 5960
    assert trade.input_amount.currency == t1
    assert trade.output_amount.currency == t2
    assert [s.input_amount.quotient for s in trade.swaps] == [1000, 2000]
    assert trade.trade_type == TradeType.EXACT_INPUT


def test_execution_price_is_exact_ratio(two_route_factory, tokens):
    t1, t2, _, _ = tokens
    r_a, r_b = two_route_factory()
    trade = Trade([(r_a, raw(t1, 1000), raw(t2, 2001)), (r_b, raw(t1, 2000), raw(t2, 4000))],
                  TradeType.EXACT_INPUT)
    p = trade.execution_price
    print("execution_price ->", p.numerator, "/", p.denominator)
    assert (p.numerator, p.denominator) == (6001, 3000)
    assert p.as_fraction() == Fraction(6001, 3000)
    assert p.quote(trade.input_amount) == trade.output_amount


def test_derived_fields_are_memoised(two_route_factory, tokens):
    t1, t2, _, _ = tokens
    r_a, r_b = two_route_factory()
    trade = Trade([(r_a, raw(t1, 10), raw(t2, 9)), (r_b, raw(t1, 10), raw(t2, 9))], TradeType.EXACT_INPUT)
    assert trade.input_amount is trade.input_amount
    assert trade.output_amount is trade.output_amount
    assert trade.execution_price is trade.execution_price
    assert trade.price_impact is trade.price_impact
