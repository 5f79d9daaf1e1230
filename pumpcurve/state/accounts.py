"""
Records handed to the engine by the account-decoding layer.

- `GlobalConfig`: network-wide genesis parameters shared by every curve.
- `BondingCurveSnapshot`: one observed curve at some point in its life.

Decoding account bytes happens elsewhere; these records accept already-decoded
mappings. Keys may be snake_case or the camelCase used by the JS SDK.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from ..core.errors import DomainError


BPS_DENOM = 10_000


def _snake_to_camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.title() for part in rest)


def _lookup(d: Mapping[str, Any], name: str) -> Any:
    if name in d:
        return d[name]
    camel = _snake_to_camel(name)
    if camel in d:
        return d[camel]
    raise KeyError(name)


def _int_field(d: Mapping[str, Any], name: str) -> int:
    val = _lookup(d, name)
    if not isinstance(val, int) or isinstance(val, bool):
        raise TypeError(f"{name!r} must be int, got {type(val).__name__}")
    return int(val)


def _validate_nonneg(record: object, names: tuple[str, ...]) -> None:
    for name in names:
        v = getattr(record, name)
        if not isinstance(v, int) or isinstance(v, bool):
            raise TypeError(f"{name} must be an int")
        if v < 0:
            raise DomainError(f"{name} must be non-negative: {v}")


@dataclass(frozen=True)
class GlobalConfig:
    initial_virtual_sol_reserves: int
    initial_virtual_token_reserves: int
    initial_real_token_reserves: int
    token_total_supply: int = 0
    fee_basis_points: int = 0

    def __post_init__(self) -> None:
        _validate_nonneg(self, GLOBAL_FIELD_NAMES)
        if self.initial_virtual_token_reserves == 0:
            raise DomainError("initial_virtual_token_reserves must be positive")
        if self.fee_basis_points > BPS_DENOM:
            raise DomainError(f"fee_basis_points must be in [0, {BPS_DENOM}]: {self.fee_basis_points}")

    @classmethod
    def from_dict(cls, d: Mapping[str, Any]) -> "GlobalConfig":
        kwargs = {name: _int_field(d, name) for name in GLOBAL_FIELD_NAMES if name not in GLOBAL_OPTIONAL_NAMES}
        for name in GLOBAL_OPTIONAL_NAMES:
            if name in d or _snake_to_camel(name) in d:
                kwargs[name] = _int_field(d, name)
        return cls(**kwargs)

    def to_dict(self) -> dict[str, int]:
        return {name: getattr(self, name) for name in GLOBAL_FIELD_NAMES}

    def get_initial_buy_price(self, sol_amount: int) -> int:
        """
        Tokens a first buyer receives on a fresh curve for `sol_amount` lamports.

            k      = ivs * ivt
            new_vt = floor(k / (ivs + sol_amount)) + 1
            tokens = min(ivt - new_vt, initial_real_token_reserves)
        """
        if not isinstance(sol_amount, int) or isinstance(sol_amount, bool):
            raise TypeError("sol_amount must be an int")
        if sol_amount <= 0:
            return 0
        ivs = self.initial_virtual_sol_reserves
        ivt = self.initial_virtual_token_reserves
        new_vt = (ivs * ivt) // (ivs + sol_amount) + 1
        tokens = ivt - new_vt
        return min(max(tokens, 0), self.initial_real_token_reserves)


GLOBAL_FIELD_NAMES: tuple[str, ...] = (
    "initial_virtual_sol_reserves",
    "initial_virtual_token_reserves",
    "initial_real_token_reserves",
    "token_total_supply",
    "fee_basis_points",
)
GLOBAL_OPTIONAL_NAMES: tuple[str, ...] = ("token_total_supply", "fee_basis_points")


@dataclass(frozen=True)
class BondingCurveSnapshot:
    virtual_sol_reserves: int
    virtual_token_reserves: int
    real_sol_reserves: int
    real_token_reserves: int
    token_total_supply: int = 0
    complete: bool = False

    def __post_init__(self) -> None:
        _validate_nonneg(self, SNAPSHOT_RESERVE_NAMES + ("token_total_supply",))
        if not isinstance(self.complete, bool):
            raise TypeError("complete must be a bool")

    @classmethod
    def from_dict(cls, d: Mapping[str, Any]) -> "BondingCurveSnapshot":
        kwargs: dict[str, Any] = {name: _int_field(d, name) for name in SNAPSHOT_RESERVE_NAMES}
        try:
            kwargs["token_total_supply"] = _int_field(d, "token_total_supply")
        except KeyError:
            pass
        complete = d.get("complete", False)
        if not isinstance(complete, bool):
            raise TypeError(f"'complete' must be bool, got {type(complete).__name__}")
        kwargs["complete"] = complete
        return cls(**kwargs)


SNAPSHOT_RESERVE_NAMES: tuple[str, ...] = (
    "virtual_sol_reserves",
    "virtual_token_reserves",
    "real_sol_reserves",
    "real_token_reserves",
)
