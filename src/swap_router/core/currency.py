"""
Currency identities: contract tokens and chain-native assets.

- Token identity is (chain_id, address); addresses are stored checksummed.
- Transfer taxes (buy/sell fee in bps) ride on the token but never take part
  in identity.
- Canonical comparison across native/wrapped forms is `a.wrapped == b.wrapped`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

from web3 import Web3

from .constants import BPS_DENOMINATOR
from .exc import AmountDomainError, InvariantViolation


def _check_decimals(decimals: int) -> None:
    if not isinstance(decimals, int) or decimals < 0 or decimals >= 255:
        raise AmountDomainError(f"decimals must be an int in [0, 255), got {decimals!r}")


def _check_fee_bps(name: str, bps: Optional[int]) -> None:
    if bps is None:
        return
    if not isinstance(bps, int) or bps < 0 or bps > BPS_DENOMINATOR:
        raise AmountDomainError(f"{name} must be an int in [0, {BPS_DENOMINATOR}], got {bps!r}")


@dataclass(frozen=True, eq=False)
class Token:
    """ERC20-style token on a given chain."""

    chain_id: int
    address: str
    decimals: int
    symbol: Optional[str] = None
    name: Optional[str] = None
    buy_fee_bps: Optional[int] = None
    sell_fee_bps: Optional[int] = None

    def __post_init__(self):
        if not Web3.is_address(self.address):
            raise AmountDomainError(f"invalid token address: {self.address!r}")
        object.__setattr__(self, "address", Web3.to_checksum_address(self.address))
        _check_decimals(self.decimals)
        _check_fee_bps("buy_fee_bps", self.buy_fee_bps)
        _check_fee_bps("sell_fee_bps", self.sell_fee_bps)

    is_native = False

    @property
    def wrapped(self) -> "Token":
        return self

    def sorts_before(self, other: "Token") -> bool:
        """Return True if this token's address sorts before `other`'s (pool token0 rule)."""
        if self.chain_id != other.chain_id:
            raise InvariantViolation("sorts_before(): tokens are on different chains")
        if self.address == other.address:
            raise InvariantViolation("sorts_before(): tokens have the same address")
        return self.address.lower() < other.address.lower()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Token):
            return NotImplemented
        return self.chain_id == other.chain_id and self.address == other.address

    def __hash__(self) -> int:
        return hash((self.chain_id, self.address))

    def __repr__(self) -> str:
        return f"Token({self.symbol or self.address}, chain={self.chain_id})"


@dataclass(frozen=True, eq=False)
class NativeCurrency:
    """Chain-native asset (e.g. ETH); always wraps to a contract token."""

    chain_id: int
    wrapped_token: Token
    decimals: int = 18
    symbol: Optional[str] = "ETH"
    name: Optional[str] = "Ether"

    def __post_init__(self):
        _check_decimals(self.decimals)
        if self.wrapped_token.chain_id != self.chain_id:
            raise InvariantViolation("wrapped token must live on the native currency's chain")

    is_native = True

    # Native assets cannot carry transfer taxes.
    buy_fee_bps = None
    sell_fee_bps = None

    @property
    def wrapped(self) -> Token:
        return self.wrapped_token

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NativeCurrency):
            return NotImplemented
        return self.chain_id == other.chain_id

    def __hash__(self) -> int:
        return hash(("native", self.chain_id))

    def __repr__(self) -> str:
        return f"NativeCurrency({self.symbol}, chain={self.chain_id})"


Currency = Union[NativeCurrency, Token]


def same_canonical(a: Currency, b: Currency) -> bool:
    """Compare two currencies on their wrapped (canonical) form."""
    return a.wrapped == b.wrapped


__all__ = [
    "Token",
    "NativeCurrency",
    "Currency",
    "same_canonical",
]
