# [TESTER] v1

from __future__ import annotations

import pytest

from pumpcurve.core.curve import (
    buy_out_price,
    final_market_cap_sol,
    market_cap_sol,
    sell_quote_with_fee,
    tokens_for_sol,
)
from pumpcurve.core.errors import DomainError
from pumpcurve.state.accounts import BondingCurveSnapshot, GlobalConfig


def _fresh(**overrides) -> BondingCurveSnapshot:
    kwargs = dict(
        virtual_sol_reserves=30_000_000_000,
        virtual_token_reserves=1_073_000_000_000_000,
        real_sol_reserves=0,
        real_token_reserves=793_100_000_000_000,
        token_total_supply=1_000_000_000_000_000,
    )
    kwargs.update(overrides)
    return BondingCurveSnapshot(**kwargs)


def _small(**overrides) -> BondingCurveSnapshot:
    kwargs = dict(
        virtual_sol_reserves=100,
        virtual_token_reserves=1000,
        real_sol_reserves=0,
        real_token_reserves=500,
        token_total_supply=1000,
    )
    kwargs.update(overrides)
    return BondingCurveSnapshot(**kwargs)


def test_tokens_for_one_sol_on_fresh_curve() -> None:
    assert tokens_for_sol(_fresh(), 1_000_000_000) == 34_612_903_225_806


def test_tokens_for_sol_matches_initial_buy_price_on_genesis() -> None:
    cfg = GlobalConfig(
        initial_virtual_sol_reserves=30_000_000_000,
        initial_virtual_token_reserves=1_073_000_000_000_000,
        initial_real_token_reserves=793_100_000_000_000,
        token_total_supply=1_000_000_000_000_000,
    )
    for sol in (1, 1_000_000, 1_000_000_000, 50_000_000_000):
        assert tokens_for_sol(_fresh(), sol) == cfg.get_initial_buy_price(sol)


def test_tokens_for_sol_caps_at_real_tokens() -> None:
    assert tokens_for_sol(_fresh(), 10**15) == 793_100_000_000_000


def test_tokens_for_sol_zero_and_negative() -> None:
    assert tokens_for_sol(_fresh(), 0) == 0
    assert tokens_for_sol(_fresh(), -5) == 0


def test_sell_quote_with_fee() -> None:
    # gross = 1e9 * 30e9 // (1.073e15 + 1e9) = 27_958 ; fee = 279
    assert sell_quote_with_fee(_fresh(), 1_000_000_000, 100) == 27_679
    assert sell_quote_with_fee(_fresh(), 1_000_000_000, 0) == 27_958
    assert sell_quote_with_fee(_fresh(), 0, 100) == 0


def test_completed_curve_refuses_quotes() -> None:
    done = _fresh(complete=True)
    with pytest.raises(DomainError, match="complete"):
        tokens_for_sol(done, 1_000_000_000)
    with pytest.raises(DomainError, match="complete"):
        sell_quote_with_fee(done, 1_000_000_000, 100)


def test_market_cap() -> None:
    assert market_cap_sol(_fresh()) == 27_958_993_476
    assert market_cap_sol(_small(virtual_token_reserves=0, real_token_reserves=0)) == 0


def test_buy_out_price() -> None:
    # 100 * 100 // 900 + 1 = 12
    assert buy_out_price(_small(), 100, 0) == 12
    assert buy_out_price(_small(), 100, 1000) == 13


def test_buy_out_price_floors_amount_at_real_sol() -> None:
    assert buy_out_price(_small(real_sol_reserves=100), 1, 0) == buy_out_price(_small(), 100, 0)


def test_buy_out_price_rejects_draining_virtual_tokens() -> None:
    with pytest.raises(DomainError):
        buy_out_price(_small(), 1000, 0)


def test_final_market_cap() -> None:
    # buy-out of 500 tokens = 500 * 100 // 500 + 1 = 101 ; (100 + 101) * 1000 // 500
    assert final_market_cap_sol(_small(), 0) == 402
    assert final_market_cap_sol(_small(real_token_reserves=1000), 0) == 0


def test_fee_bps_is_validated() -> None:
    with pytest.raises(DomainError, match="fee_basis_points"):
        sell_quote_with_fee(_fresh(), 1, 10_001)
