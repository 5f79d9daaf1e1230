"""
Core bonding-curve algorithms
"""

from .errors import DomainError
from ..state.reserves import ReserveState
from ..state.accounts import BondingCurveSnapshot, GlobalConfig
from ..kernels.python.bonding_curve_v1 import TradeResult
from .amm import AMM
from .slippage import DEFAULT_SLIPPAGE_BPS, with_slippage_buy, with_slippage_sell
from .curve import (
    buy_out_price,
    final_market_cap_sol,
    market_cap_sol,
    sell_quote_with_fee,
    tokens_for_sol,
)
from .config import NetworkConfig, default_global_config, load_global_config, load_network_config

__all__ = [
    "DomainError",
    "ReserveState",
    "BondingCurveSnapshot",
    "GlobalConfig",
    "TradeResult",
    "AMM",
    "DEFAULT_SLIPPAGE_BPS",
    "with_slippage_buy",
    "with_slippage_sell",
    "buy_out_price",
    "final_market_cap_sol",
    "market_cap_sol",
    "sell_quote_with_fee",
    "tokens_for_sol",
    "NetworkConfig",
    "default_global_config",
    "load_global_config",
    "load_network_config",
]
