"""
config.py
Load configuration from TOML (Python 3.11+ tomllib).
Search order:
  1) $ZREPLACE_CONFIG (must exist when set)
  2) DEFAULT_CONFIG_PATH, 'zreplace.toml' in a source checkout (none when installed)
  3) /etc/zreplace.toml
No file at all means built-in defaults; the tool takes no flags, so it has
to run with zero configuration.
"""

from __future__ import annotations
import os
import tomllib
from pathlib import Path
from typing import Any, Dict
from .types import Config
from .bundle import DEFAULT_CONFIG_PATH

ENV_VAR = "ZREPLACE_CONFIG"
ETC_CONFIG_PATH = "/etc/zreplace.toml"


def _gv(d: Dict[str, Any], path: list[str], default=None):
    cur = d
    for k in path:
        if not isinstance(cur, dict) or k not in cur:
            return default
        cur = cur[k]
    return cur


def _load_toml(path: Path) -> Dict[str, Any]:
    with open(path, "rb") as f:
        return tomllib.load(f)


def _str_list(value, key: str) -> list[str]:
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ValueError(f"{key} must be a list of strings")
    return list(value)


def find_config(env_value: str | None = None) -> Path | None:
    """Pick the config path from the environment or the default locations."""
    if env_value is None:
        env_value = os.environ.get(ENV_VAR)
    if env_value:
        # explicitly requested - it must exist
        p = Path(env_value)
        if not p.exists():
            raise FileNotFoundError(f"{ENV_VAR} points to a missing file: {env_value}")
        return p

    for candidate in (DEFAULT_CONFIG_PATH, ETC_CONFIG_PATH):
        if not candidate:
            continue
        p = Path(candidate)
        if p.exists():
            return p
    return None


def load_config(path: Path | None) -> Config:
    defaults = Config()
    if path is None:
        return defaults
    cfg = _load_toml(path)

    def gv(keys, default=None):
        return _gv(cfg, keys, default)

    return Config(
        zpool_bin=str(gv(["zpool", "bin"], defaults.zpool_bin)),
        healthy_state=str(gv(["zpool", "healthy_state"], defaults.healthy_state)),
        missing_states=_str_list(
            gv(["zpool", "missing_states"], defaults.missing_states), "zpool.missing_states"
        ),
        resilver_markers=_str_list(
            gv(["zpool", "resilver_markers"], defaults.resilver_markers), "zpool.resilver_markers"
        ),
        byid_dir=Path(gv(["catalog", "byid_dir"], str(defaults.byid_dir))),
        id_prefixes=_str_list(gv(["catalog", "id_prefixes"], defaults.id_prefixes), "catalog.id_prefixes"),
        smartctl_bin=str(gv(["describe", "smartctl"], defaults.smartctl_bin)),
        lsblk_bin=str(gv(["describe", "lsblk"], defaults.lsblk_bin)),
        require_root=bool(gv(["runtime", "require_root"], defaults.require_root)),
        dry_run=bool(gv(["runtime", "dry_run"], defaults.dry_run)),
    )
