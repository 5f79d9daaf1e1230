"""
Network configuration loading.

Genesis parameters are kept in YAML (`pumpcurve/config/global_defaults.yaml`)
so a different cluster can be targeted without code changes. Set
`PUMPCURVE_GLOBAL_CONFIG` to point at an alternate file.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Mapping, Optional

import yaml

from ..state.accounts import GlobalConfig
from .slippage import DEFAULT_SLIPPAGE_BPS

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "PUMPCURVE_GLOBAL_CONFIG"


@dataclass(frozen=True)
class NetworkConfig:
    global_config: GlobalConfig
    token_decimals: int = 6
    default_slippage_bps: int = DEFAULT_SLIPPAGE_BPS


def default_config_path() -> Path:
    # pumpcurve/core/config.py -> pumpcurve/ -> config/global_defaults.yaml
    return Path(__file__).resolve().parents[1] / "config" / "global_defaults.yaml"


def _resolve_path(path: Optional[Path | str]) -> Path:
    if path is not None:
        return Path(path)
    env = os.environ.get(CONFIG_ENV_VAR)
    if env:
        return Path(env)
    return default_config_path()


def _optional_int(obj: Mapping, name: str, default: int) -> int:
    val = obj.get(name, default)
    if not isinstance(val, int) or isinstance(val, bool):
        raise TypeError(f"{name!r} must be int, got {type(val).__name__}")
    if val < 0:
        raise ValueError(f"{name} must be non-negative: {val}")
    return val


def load_network_config(path: Optional[Path | str] = None) -> NetworkConfig:
    """Load a NetworkConfig from YAML. Raises TypeError/KeyError on malformed documents."""
    resolved = _resolve_path(path)
    obj = yaml.safe_load(resolved.read_text(encoding="utf-8"))
    if not isinstance(obj, Mapping):
        raise TypeError("config YAML must be a mapping")
    global_obj = obj["global"]
    if not isinstance(global_obj, Mapping):
        raise TypeError("config 'global' table must be a mapping")

    cfg = NetworkConfig(
        global_config=GlobalConfig.from_dict(global_obj),
        token_decimals=_optional_int(obj, "token_decimals", 6),
        default_slippage_bps=_optional_int(obj, "default_slippage_bps", DEFAULT_SLIPPAGE_BPS),
    )
    logger.debug("loaded network config from %s", resolved)
    return cfg


def load_global_config(path: Optional[Path | str] = None) -> GlobalConfig:
    return load_network_config(path).global_config


@lru_cache(maxsize=1)
def default_global_config() -> GlobalConfig:
    """The packaged genesis parameters (cached; ignores the env override)."""
    return load_global_config(default_config_path())
