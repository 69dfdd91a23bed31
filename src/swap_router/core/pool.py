"""
Concentrated-liquidity pool (V3-style) and its canonical address.

A pool is identified by (token0, token1, fee): the address is the CREATE2
address the factory deploys that triple to, so two pool objects describe the
same venue iff their addresses match, whatever state they carry.

Only the state needed for pricing is kept (sqrt price, liquidity, tick).
Tick-level swap simulation is not part of this module.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from functools import cached_property

from eth_abi import encode
from web3 import Web3

from .constants import (
    MAX_SQRT_RATIO,
    MIN_SQRT_RATIO,
    POOL_INIT_CODE_HASH,
    Q192,
    V3_FACTORY_ADDRESS,
)
from .currency import Token
from .exc import AmountDomainError, InvariantViolation
from .ratios import Price

# Debug printing control
DEBUG_POOL = False

def _dbg(msg: str) -> None:
    if DEBUG_POOL:
        print(msg)


class FeeAmount(IntEnum):
    """Pool fee tiers in hundredths of a basis point (3000 = 0.30%)."""

    LOWEST = 100
    LOW = 500
    MEDIUM = 3000
    HIGH = 10000


TICK_SPACINGS = {
    FeeAmount.LOWEST: 1,
    FeeAmount.LOW: 10,
    FeeAmount.MEDIUM: 60,
    FeeAmount.HIGH: 200,
}


@dataclass(frozen=True)
class PoolDeployment:
    """CREATE2 inputs used to derive pool addresses.

    factory_address: the pool factory (deployer) contract.
    init_code_hash: keccak256 of the pool contract creation code.
    """
    factory_address: str = V3_FACTORY_ADDRESS
    init_code_hash: str = POOL_INIT_CODE_HASH


DEFAULT_DEPLOYMENT = PoolDeployment()


def _hex_to_bytes(h: str) -> bytes:
    return bytes.fromhex(h[2:] if h.startswith("0x") else h)


def compute_pool_address(
    token_a: Token,
    token_b: Token,
    fee: int,
    deployment: PoolDeployment = DEFAULT_DEPLOYMENT,
) -> str:
    """Return the checksummed CREATE2 address of the (token_a, token_b, fee) pool.

    Token order does not matter; tokens are sorted as the factory sorts them.
    """
    token0, token1 = (token_a, token_b) if token_a.sorts_before(token_b) else (token_b, token_a)
    salt = Web3.keccak(encode(["address", "address", "uint24"], [token0.address, token1.address, int(fee)]))
    digest = Web3.keccak(
        b"\xff"
        + _hex_to_bytes(deployment.factory_address)
        + bytes(salt)
        + _hex_to_bytes(deployment.init_code_hash)
    )
    address = Web3.to_checksum_address("0x" + bytes(digest)[12:].hex())
    _dbg(f"compute_pool_address: {token0.address}/{token1.address}/{int(fee)} -> {address}")
    return address


@dataclass(frozen=True)
class Pool:
    """V3-style pool between token0 and token1 (token0 sorts first)."""

    token0: Token
    token1: Token
    fee: FeeAmount
    sqrt_price_x96: int
    liquidity: int
    tick_current: int
    deployment: PoolDeployment = DEFAULT_DEPLOYMENT

    def __post_init__(self):
        if not self.token0.sorts_before(self.token1):
            raise InvariantViolation("pool tokens must be sorted (token0 < token1)")
        try:
            object.__setattr__(self, "fee", FeeAmount(self.fee))
        except ValueError:
            raise AmountDomainError(f"unsupported fee tier: {self.fee!r}") from None
        if not (MIN_SQRT_RATIO <= self.sqrt_price_x96 < MAX_SQRT_RATIO):
            raise AmountDomainError(f"sqrt_price_x96 out of bounds: {self.sqrt_price_x96}")
        if self.liquidity < 0:
            raise AmountDomainError("pool liquidity must be >= 0")

    @classmethod
    def from_tokens(cls, token_a: Token, token_b: Token, fee: int, sqrt_price_x96: int,
                    liquidity: int, tick_current: int,
                    deployment: PoolDeployment = DEFAULT_DEPLOYMENT) -> "Pool":
        """Build a pool from an unordered token pair."""
        if token_a.sorts_before(token_b):
            return cls(token_a, token_b, fee, sqrt_price_x96, liquidity, tick_current, deployment)
        return cls(token_b, token_a, fee, sqrt_price_x96, liquidity, tick_current, deployment)

    @property
    def chain_id(self) -> int:
        return self.token0.chain_id

    @property
    def tick_spacing(self) -> int:
        return TICK_SPACINGS[self.fee]

    @cached_property
    def address(self) -> str:
        return compute_pool_address(self.token0, self.token1, self.fee, self.deployment)

    def involves_token(self, token: Token) -> bool:
        return token == self.token0 or token == self.token1

    @cached_property
    def token0_price(self) -> Price:
        """Current price of token0 in token1 (raw units): sqrtP^2 / 2^192."""
        return Price(self.token0, self.token1, Q192, self.sqrt_price_x96 * self.sqrt_price_x96)

    @cached_property
    def token1_price(self) -> Price:
        return self.token0_price.invert()

    def price_of(self, token: Token) -> Price:
        """Price of `token` in terms of the pool's other token."""
        if token == self.token0:
            return self.token0_price
        if token == self.token1:
            return self.token1_price
        raise InvariantViolation(f"token {token!r} is not in pool {self.address}")


__all__ = [
    "FeeAmount",
    "TICK_SPACINGS",
    "PoolDeployment",
    "DEFAULT_DEPLOYMENT",
    "compute_pool_address",
    "Pool",
]
