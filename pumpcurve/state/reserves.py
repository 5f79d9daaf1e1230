"""
Reserve state for a single bonding curve.

`ReserveState` is an immutable value: trades produce a new state rather than
mutating the old one. Round-trip property (tested):
`reserve_state_from_dict(reserve_state_to_dict(s)) == s`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from ..core.errors import DomainError


def _require_int(name: str, value: int) -> None:
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"{name} must be an int")


@dataclass(frozen=True)
class ReserveState:
    """Virtual/real reserves of one SOL/token curve plus the genesis scaling constant."""

    virtual_sol_reserves: int
    virtual_token_reserves: int
    real_sol_reserves: int
    real_token_reserves: int
    initial_virtual_token_reserves: int

    def __post_init__(self) -> None:
        for name in RESERVE_FIELD_NAMES:
            v = getattr(self, name)
            _require_int(name, v)
            if v < 0:
                raise DomainError(f"{name} must be non-negative: {v}")
        if self.initial_virtual_token_reserves == 0:
            raise DomainError("initial_virtual_token_reserves must be positive")

    @property
    def product(self) -> int:
        """Constant-product value `virtual_sol_reserves * virtual_token_reserves`."""
        return self.virtual_sol_reserves * self.virtual_token_reserves


RESERVE_FIELD_NAMES: tuple[str, ...] = (
    "virtual_sol_reserves",
    "virtual_token_reserves",
    "real_sol_reserves",
    "real_token_reserves",
    "initial_virtual_token_reserves",
)


def reserve_state_to_dict(state: ReserveState) -> dict[str, int]:
    return {name: getattr(state, name) for name in RESERVE_FIELD_NAMES}


def reserve_state_from_dict(d: Mapping[str, Any]) -> ReserveState:
    """Deserialize a dict to a ReserveState. Raises KeyError on missing fields."""
    kwargs: dict[str, int] = {}
    for name in RESERVE_FIELD_NAMES:
        val = d[name]
        if not isinstance(val, int) or isinstance(val, bool):
            raise TypeError(f"{name!r} must be int, got {type(val).__name__}")
        kwargs[name] = int(val)
    return ReserveState(**kwargs)
