"""
Quotes computed directly on an observed bonding-curve snapshot.

These are the helpers a client uses before it has an `AMM` instance: sizing a
buy from a SOL budget, estimating fee-adjusted sell proceeds, and reporting
market cap. Formulas follow the launch program's client SDK, including its
rounding.
"""

from __future__ import annotations

from .errors import DomainError
from ..state.accounts import BondingCurveSnapshot


BPS_DENOM = 10_000


def _require_int(name: str, value: int) -> None:
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"{name} must be an int")


def _require_open(snapshot: BondingCurveSnapshot) -> None:
    if snapshot.complete:
        raise DomainError("bonding curve is complete")


def _require_fee_bps(fee_basis_points: int) -> None:
    _require_int("fee_basis_points", fee_basis_points)
    if not (0 <= fee_basis_points <= BPS_DENOM):
        raise DomainError(f"fee_basis_points must be in [0, {BPS_DENOM}]: {fee_basis_points}")


def tokens_for_sol(snapshot: BondingCurveSnapshot, sol_amount: int) -> int:
    """
    Tokens received for spending `sol_amount` lamports.

        new_vt = floor(vs * vt / (vs + sol_amount)) + 1
        tokens = min(vt - new_vt, real_token_reserves)
    """
    _require_int("sol_amount", sol_amount)
    _require_open(snapshot)
    if sol_amount <= 0:
        return 0
    vs = snapshot.virtual_sol_reserves
    vt = snapshot.virtual_token_reserves
    new_vt = (vs * vt) // (vs + sol_amount) + 1
    tokens = max(vt - new_vt, 0)
    return min(tokens, snapshot.real_token_reserves)


def sell_quote_with_fee(snapshot: BondingCurveSnapshot, token_amount: int, fee_basis_points: int) -> int:
    """Constant-product sell output net of the protocol fee (fee rounds down)."""
    _require_int("token_amount", token_amount)
    _require_fee_bps(fee_basis_points)
    _require_open(snapshot)
    if token_amount <= 0:
        return 0
    sol_out = (token_amount * snapshot.virtual_sol_reserves) // (snapshot.virtual_token_reserves + token_amount)
    fee = (sol_out * fee_basis_points) // BPS_DENOM
    return sol_out - fee


def market_cap_sol(snapshot: BondingCurveSnapshot) -> int:
    """Total supply valued at the current virtual price, in lamports."""
    if snapshot.virtual_token_reserves == 0:
        return 0
    return (snapshot.token_total_supply * snapshot.virtual_sol_reserves) // snapshot.virtual_token_reserves


def buy_out_price(snapshot: BondingCurveSnapshot, amount: int, fee_basis_points: int) -> int:
    """
    SOL (fee included) to buy `amount` tokens off the curve.

    `amount` is raised to at least `real_sol_reserves` before pricing, matching
    the client SDK.
    """
    _require_int("amount", amount)
    _require_fee_bps(fee_basis_points)
    sol_tokens = max(amount, snapshot.real_sol_reserves)
    denominator = snapshot.virtual_token_reserves - sol_tokens
    if denominator <= 0:
        raise DomainError(
            f"amount ({sol_tokens}) must be below virtual_token_reserves ({snapshot.virtual_token_reserves})"
        )
    total_sell_value = (sol_tokens * snapshot.virtual_sol_reserves) // denominator + 1
    fee = (total_sell_value * fee_basis_points) // BPS_DENOM
    return total_sell_value + fee


def final_market_cap_sol(snapshot: BondingCurveSnapshot, fee_basis_points: int) -> int:
    """Market cap once every remaining real token has been bought."""
    total_virtual_tokens = snapshot.virtual_token_reserves - snapshot.real_token_reserves
    if total_virtual_tokens == 0:
        return 0
    total_sell_value = buy_out_price(snapshot, snapshot.real_token_reserves, fee_basis_points)
    total_virtual_value = snapshot.virtual_sol_reserves + total_sell_value
    return (snapshot.token_total_supply * total_virtual_value) // total_virtual_tokens
