"""
Bonding-curve AMM for pump-style token launches.

Integer-exact buy/sell pricing and reserve bookkeeping that matches the launch
program's on-chain settlement math.
"""

from .core import (
    AMM,
    BondingCurveSnapshot,
    DomainError,
    GlobalConfig,
    ReserveState,
    TradeResult,
    with_slippage_buy,
    with_slippage_sell,
)

__version__ = "0.1.0"

__all__ = [
    "AMM",
    "BondingCurveSnapshot",
    "DomainError",
    "GlobalConfig",
    "ReserveState",
    "TradeResult",
    "with_slippage_buy",
    "with_slippage_sell",
]
