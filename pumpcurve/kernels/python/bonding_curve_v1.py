"""
Bonding-curve AMM kernel (v1 semantics).

Integer-only pricing for a pump-style launch curve:
- Buys price off the constant product `virtual_sol * virtual_token` with a `+1`
  bias on the new SOL reserve, so the quoted cost never undershoots the curve.
- Sells are linear in trade size: the sold amount is expressed as a share of the
  current virtual token depth (scaled by the genesis constant) and paid out of
  virtual SOL, capped by real SOL.
- All division is floor division on Python ints (no overflow, no floats).

Every function is pure; results carry the post-trade `ReserveState`.
"""

from __future__ import annotations

from dataclasses import dataclass

from ...core.errors import DomainError
from ...state.reserves import ReserveState


def _require_int(name: str, value: int) -> None:
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"{name} must be an int")


def _require_nonneg_amount(name: str, value: int) -> None:
    _require_int(name, value)
    if value < 0:
        raise DomainError(f"{name} must be non-negative: {value}")


@dataclass(frozen=True)
class TradeResult:
    token_amount: int
    sol_amount: int

    def __iter__(self):
        # Unpacks as (token_amount, sol_amount).
        return iter((self.token_amount, self.sol_amount))


@dataclass(frozen=True)
class BuyResult:
    token_amount: int
    sol_amount: int
    requested_token_amount: int
    clamped: bool
    new_state: ReserveState
    k_before: int
    k_after: int


@dataclass(frozen=True)
class SellResult:
    token_amount: int
    sol_amount: int
    gross_sol_amount: int
    clamped: bool
    new_state: ReserveState


def buy_quote(state: ReserveState, token_amount: int) -> int:
    """
    SOL needed to buy `token_amount` tokens at the current reserves.

        product  = vs * vt
        new_vt   = vt - token_amount
        new_vs   = floor(product / new_vt) + 1
        needed   = max(new_vs - vs, 0)

    A zero-token buy costs nothing. Raises DomainError when `token_amount` is
    negative or would empty the virtual token side.
    """
    _require_nonneg_amount("token_amount", token_amount)
    if token_amount == 0:
        return 0

    vs = state.virtual_sol_reserves
    vt = state.virtual_token_reserves
    new_vt = vt - token_amount
    if new_vt <= 0:
        raise DomainError(
            f"token_amount ({token_amount}) must be below virtual_token_reserves ({vt})"
        )

    product = vs * vt
    new_vs = product // new_vt + 1
    return max(new_vs - vs, 0)


def sell_quote_unclamped(state: ReserveState, token_amount: int) -> int:
    """Linear sell payout before the real-SOL cap."""
    _require_nonneg_amount("token_amount", token_amount)
    vt = state.virtual_token_reserves
    if vt <= 0:
        raise DomainError("cannot price a sell against empty virtual_token_reserves")

    scale = state.initial_virtual_token_reserves
    token_sell_proportion = (token_amount * scale) // vt
    return (state.virtual_sol_reserves * token_sell_proportion) // scale


def sell_quote(state: ReserveState, token_amount: int) -> int:
    """
    SOL paid for `token_amount` tokens, priced on the reserves as given.

        proportion = floor(token_amount * ivt / vt)
        received   = floor(vs * proportion / ivt)
        payout     = min(received, real_sol)

    Note `apply_sell` calls this on the reserves *after* the sold tokens are
    added back, which is how the settlement program orders it.
    """
    return min(sell_quote_unclamped(state, token_amount), state.real_sol_reserves)


def apply_buy(state: ReserveState, token_amount: int) -> BuyResult:
    """
    Buy up to `token_amount` tokens.

    The request is clamped to `real_token_reserves`; the price is taken on the
    pre-trade reserves, then token sides are debited and SOL sides credited.
    """
    _require_nonneg_amount("token_amount", token_amount)

    final_amount = min(token_amount, state.real_token_reserves)
    sol_amount = buy_quote(state, final_amount)

    new_state = ReserveState(
        virtual_sol_reserves=state.virtual_sol_reserves + sol_amount,
        virtual_token_reserves=state.virtual_token_reserves - final_amount,
        real_sol_reserves=state.real_sol_reserves + sol_amount,
        real_token_reserves=state.real_token_reserves - final_amount,
        initial_virtual_token_reserves=state.initial_virtual_token_reserves,
    )
    return BuyResult(
        token_amount=final_amount,
        sol_amount=sol_amount,
        requested_token_amount=token_amount,
        clamped=final_amount < token_amount,
        new_state=new_state,
        k_before=state.product,
        k_after=new_state.product,
    )


def apply_sell(state: ReserveState, token_amount: int) -> SellResult:
    """
    Sell `token_amount` tokens back into the curve.

    Tokens are credited to both token sides first and the payout is priced on
    that bumped state; the payout is then debited from both SOL sides. The
    token amount itself is never clamped.
    """
    _require_nonneg_amount("token_amount", token_amount)

    bumped = ReserveState(
        virtual_sol_reserves=state.virtual_sol_reserves,
        virtual_token_reserves=state.virtual_token_reserves + token_amount,
        real_sol_reserves=state.real_sol_reserves,
        real_token_reserves=state.real_token_reserves + token_amount,
        initial_virtual_token_reserves=state.initial_virtual_token_reserves,
    )
    gross = sell_quote_unclamped(bumped, token_amount)
    # proportion <= ivt because token_amount <= bumped vt, so gross <= vs.
    sol_amount = min(gross, bumped.real_sol_reserves)

    new_state = ReserveState(
        virtual_sol_reserves=bumped.virtual_sol_reserves - sol_amount,
        virtual_token_reserves=bumped.virtual_token_reserves,
        real_sol_reserves=bumped.real_sol_reserves - sol_amount,
        real_token_reserves=bumped.real_token_reserves,
        initial_virtual_token_reserves=bumped.initial_virtual_token_reserves,
    )
    return SellResult(
        token_amount=token_amount,
        sol_amount=sol_amount,
        gross_sol_amount=gross,
        clamped=sol_amount < gross,
        new_state=new_state,
    )
