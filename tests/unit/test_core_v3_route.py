import pytest
from fractions import Fraction

from swap_router.core import Q96, CurrencyAmount, FeeAmount, InvariantViolation, V3Route

from conftest import make_pool, make_token


def test_single_hop_path_and_mid_price(tokens):
    t1, t2, _, _ = tokens
    route = V3Route([make_pool(t1, t2, sqrt_price_x96=2 * Q96)], t1, t2)
    assert route.token_path == (t1, t2)
    assert route.mid_price.as_fraction() == Fraction(4)
    # Reverse direction uses token1 price
    back = V3Route([make_pool(t1, t2, sqrt_price_x96=2 * Q96)], t2, t1)
    assert back.mid_price.as_fraction() == Fraction(1, 4)


def test_two_hop_mid_price_is_product_of_hops(tokens):
    print("[v3-route] T1 -(1:1)-> T2 -(1:4)-> T3 -> mid price 4; reverse 1/4")
    t1, t2, t3, _ = tokens
    p12 = make_pool(t1, t2, sqrt_price_x96=Q96)
    p23 = make_pool(t2, t3, sqrt_price_x96=2 * Q96)
    fwd = V3Route([p12, p23], t1, t3)
    assert fwd.token_path == (t1, t2, t3)
    assert fwd.mid_price.base_currency == t1
    assert fwd.mid_price.quote_currency == t3
    assert fwd.mid_price.as_fraction() == Fraction(4)

    rev = V3Route([p23, p12], t3, t1)
    assert rev.token_path == (t3, t2, t1)
    assert rev.mid_price.as_fraction() == Fraction(1, 4)


def test_native_input_path_starts_at_wrapped(ether, weth, tokens):
    t1 = tokens[0]
    route = V3Route([make_pool(weth, t1)], ether, t1)
    assert route.input == ether
    assert route.token_path[0] == weth
    assert route.mid_price.base_currency == ether
    q = route.mid_price.quote(CurrencyAmount.from_raw_amount(ether, 10))
    assert q.currency == t1


@pytest.mark.parametrize(
    "build,why",
    [
        (lambda t: ([], t[0], t[1]), "no pools"),
        (lambda t: ([make_pool(t[1], t[2])], t[0], t[2]), "input not in first pool"),
        (lambda t: ([make_pool(t[0], t[1])], t[0], t[2]), "output not in last pool"),
        (lambda t: ([make_pool(t[0], t[1]), make_pool(t[2], t[3])], t[0], t[3]), "pools do not connect"),
        (lambda t: ([make_pool(t[0], t[1]), make_pool(t[0], t[1], FeeAmount.LOW)], t[0], t[1]),
         "path ends back at input"),
    ],
)
def test_invalid_routes_rejected(tokens, build, why):
    print(f"[v3-route-invalid] {why} -> expect InvariantViolation")
    pools, inp, out = build(tokens)
    with pytest.raises(InvariantViolation):
        V3Route(pools, inp, out)
