"""Tests for pumpcurve/state/accounts.py: global config and curve snapshot records."""

import pytest

from pumpcurve.core.errors import DomainError
from pumpcurve.state.accounts import BondingCurveSnapshot, GlobalConfig


def _cfg(**overrides) -> GlobalConfig:
    kwargs = dict(
        initial_virtual_sol_reserves=30_000_000_000,
        initial_virtual_token_reserves=1_073_000_000_000_000,
        initial_real_token_reserves=793_100_000_000_000,
        token_total_supply=1_000_000_000_000_000,
        fee_basis_points=100,
    )
    kwargs.update(overrides)
    return GlobalConfig(**kwargs)


class TestGlobalConfig:
    def test_only_initial_reserves_required(self):
        cfg = GlobalConfig.from_dict(
            {
                "initialVirtualSolReserves": 30_000_000_000,
                "initialVirtualTokenReserves": 1_073_000_000_000_000,
                "initialRealTokenReserves": 793_100_000_000_000,
            }
        )
        assert cfg.token_total_supply == 0
        assert cfg.fee_basis_points == 0
        assert GlobalConfig(1, 2, 1).token_total_supply == 0

    def test_optional_field_type_checked(self):
        with pytest.raises(TypeError, match="token_total_supply"):
            GlobalConfig.from_dict(
                {
                    "initial_virtual_sol_reserves": 1,
                    "initial_virtual_token_reserves": 2,
                    "initial_real_token_reserves": 1,
                    "token_total_supply": 1.5,
                }
            )

    def test_round_trip(self):
        cfg = _cfg()
        assert GlobalConfig.from_dict(cfg.to_dict()) == cfg

    def test_fee_bounds(self):
        with pytest.raises(DomainError, match="fee_basis_points"):
            _cfg(fee_basis_points=10_001)

    def test_zero_virtual_tokens(self):
        with pytest.raises(DomainError):
            _cfg(initial_virtual_token_reserves=0)

    def test_initial_buy_price(self):
        assert _cfg().get_initial_buy_price(1_000_000_000) == 34_612_903_225_806
        assert _cfg().get_initial_buy_price(0) == 0
        assert _cfg().get_initial_buy_price(-1) == 0

    def test_initial_buy_price_capped(self):
        assert _cfg().get_initial_buy_price(10**18) == 793_100_000_000_000


class TestBondingCurveSnapshot:
    def test_from_camel_case(self):
        snap = BondingCurveSnapshot.from_dict(
            {
                "virtualTokenReserves": 1_000,
                "virtualSolReserves": 100,
                "realTokenReserves": 700,
                "realSolReserves": 5,
                "tokenTotalSupply": 900,
                "complete": True,
            }
        )
        assert snap == BondingCurveSnapshot(100, 1_000, 5, 700, 900, True)

    def test_optional_fields(self):
        snap = BondingCurveSnapshot.from_dict(
            {
                "virtual_sol_reserves": 1,
                "virtual_token_reserves": 2,
                "real_sol_reserves": 0,
                "real_token_reserves": 1,
            }
        )
        assert snap.token_total_supply == 0
        assert snap.complete is False

    def test_missing_reserve(self):
        with pytest.raises(KeyError):
            BondingCurveSnapshot.from_dict({"virtual_sol_reserves": 1})

    def test_complete_must_be_bool(self):
        with pytest.raises(TypeError):
            BondingCurveSnapshot(1, 2, 0, 1, 0, 1)  # type: ignore[arg-type]
