"""
Curve state records.
"""

from .reserves import ReserveState, reserve_state_from_dict, reserve_state_to_dict
from .accounts import BondingCurveSnapshot, GlobalConfig

__all__ = [
    "ReserveState",
    "reserve_state_from_dict",
    "reserve_state_to_dict",
    "BondingCurveSnapshot",
    "GlobalConfig",
]
