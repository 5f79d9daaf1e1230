"""
Slippage bounds for trade submission (deterministic, integer-only).

A buyer authorizes up to `amount * (1 + bps/10_000)` SOL; a seller accepts no
less than `amount * (1 - bps/10_000)`. Both adjustments use floor rounding on
the tolerance term.
"""

from __future__ import annotations


BPS_DENOM = 10_000
DEFAULT_SLIPPAGE_BPS = 500


def _check(amount: int, slippage_bps: int) -> None:
    for name, v in (("amount", amount), ("slippage_bps", slippage_bps)):
        if not isinstance(v, int) or isinstance(v, bool):
            raise TypeError(f"{name} must be an int")
        if v < 0:
            raise ValueError(f"{name} must be non-negative: {v}")


def with_slippage_buy(amount: int, slippage_bps: int = DEFAULT_SLIPPAGE_BPS) -> int:
    """Max SOL cost: `amount + floor(amount * slippage_bps / 10_000)`."""
    _check(amount, slippage_bps)
    return amount + (amount * slippage_bps) // BPS_DENOM


def with_slippage_sell(amount: int, slippage_bps: int = DEFAULT_SLIPPAGE_BPS) -> int:
    """
    Min SOL proceeds: `amount - floor(amount * slippage_bps / 10_000)`.

    Tolerances of 100% or more would go negative; the bound is clamped at 0.
    """
    _check(amount, slippage_bps)
    return max(amount - (amount * slippage_bps) // BPS_DENOM, 0)
