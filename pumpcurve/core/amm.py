"""
Bonding-curve AMM engine.

`AMM` owns one `ReserveState` and applies trades to it under single-writer
discipline: the host serializes calls per curve and re-syncs from the
authoritative program after each confirmed trade. The math itself lives in
`pumpcurve.kernels.python.bonding_curve_v1`; this class only tracks state.

Each mutating call computes the full post-state before assigning it, so a call
that raises `DomainError` leaves the engine exactly as it was.
"""

from __future__ import annotations

import logging

from ..kernels.python import bonding_curve_v1 as _kernel
from ..kernels.python.bonding_curve_v1 import TradeResult
from ..state.accounts import BondingCurveSnapshot, GlobalConfig
from ..state.reserves import ReserveState

logger = logging.getLogger(__name__)


class AMM:
    def __init__(
        self,
        virtual_sol_reserves: int,
        virtual_token_reserves: int,
        real_sol_reserves: int,
        real_token_reserves: int,
        initial_virtual_token_reserves: int,
    ) -> None:
        self._state = ReserveState(
            virtual_sol_reserves=virtual_sol_reserves,
            virtual_token_reserves=virtual_token_reserves,
            real_sol_reserves=real_sol_reserves,
            real_token_reserves=real_token_reserves,
            initial_virtual_token_reserves=initial_virtual_token_reserves,
        )

    @classmethod
    def from_state(cls, state: ReserveState) -> "AMM":
        amm = cls.__new__(cls)
        amm._state = state
        return amm

    @classmethod
    def from_global_config(cls, cfg: GlobalConfig) -> "AMM":
        """Fresh curve at genesis: no real SOL yet, all real tokens for sale."""
        return cls(
            cfg.initial_virtual_sol_reserves,
            cfg.initial_virtual_token_reserves,
            0,
            cfg.initial_real_token_reserves,
            cfg.initial_virtual_token_reserves,
        )

    @classmethod
    def from_bonding_curve(
        cls, snapshot: BondingCurveSnapshot, initial_virtual_token_reserves: int
    ) -> "AMM":
        """
        Mid-life curve from an observed snapshot.

        The scaling constant is the network's genesis value, not the snapshot's
        current virtual token reserves.
        """
        return cls(
            snapshot.virtual_sol_reserves,
            snapshot.virtual_token_reserves,
            snapshot.real_sol_reserves,
            snapshot.real_token_reserves,
            initial_virtual_token_reserves,
        )

    @property
    def state(self) -> ReserveState:
        return self._state

    @property
    def virtual_sol_reserves(self) -> int:
        return self._state.virtual_sol_reserves

    @property
    def virtual_token_reserves(self) -> int:
        return self._state.virtual_token_reserves

    @property
    def real_sol_reserves(self) -> int:
        return self._state.real_sol_reserves

    @property
    def real_token_reserves(self) -> int:
        return self._state.real_token_reserves

    @property
    def initial_virtual_token_reserves(self) -> int:
        return self._state.initial_virtual_token_reserves

    def get_buy_price(self, token_amount: int) -> int:
        return _kernel.buy_quote(self._state, token_amount)

    def get_sell_price(self, token_amount: int) -> int:
        return _kernel.sell_quote(self._state, token_amount)

    def apply_buy(self, token_amount: int) -> TradeResult:
        res = _kernel.apply_buy(self._state, token_amount)
        if res.clamped:
            logger.info(
                "buy clamped to real token reserves: requested=%d filled=%d",
                res.requested_token_amount,
                res.token_amount,
            )
        self._state = res.new_state
        logger.debug("apply_buy tokens=%d sol=%d state=%s", res.token_amount, res.sol_amount, self._state)
        return TradeResult(token_amount=res.token_amount, sol_amount=res.sol_amount)

    def apply_sell(self, token_amount: int) -> TradeResult:
        res = _kernel.apply_sell(self._state, token_amount)
        if res.clamped:
            logger.info(
                "sell payout clamped to real SOL reserves: quoted=%d paid=%d",
                res.gross_sol_amount,
                res.sol_amount,
            )
        self._state = res.new_state
        logger.debug("apply_sell tokens=%d sol=%d state=%s", res.token_amount, res.sol_amount, self._state)
        return TradeResult(token_amount=res.token_amount, sol_amount=res.sol_amount)

    def sync(self, snapshot: BondingCurveSnapshot) -> None:
        """Replace the reserves with a freshly observed snapshot; the scaling constant is kept."""
        self._state = ReserveState(
            virtual_sol_reserves=snapshot.virtual_sol_reserves,
            virtual_token_reserves=snapshot.virtual_token_reserves,
            real_sol_reserves=snapshot.real_sol_reserves,
            real_token_reserves=snapshot.real_token_reserves,
            initial_virtual_token_reserves=self._state.initial_virtual_token_reserves,
        )
        logger.debug("synced reserves from snapshot: %s", self._state)

    def __repr__(self) -> str:
        s = self._state
        return (
            f"AMM(virtual_sol_reserves={s.virtual_sol_reserves}, "
            f"virtual_token_reserves={s.virtual_token_reserves}, "
            f"real_sol_reserves={s.real_sol_reserves}, "
            f"real_token_reserves={s.real_token_reserves}, "
            f"initial_virtual_token_reserves={s.initial_virtual_token_reserves})"
        )
