from __future__ import annotations

import os
from typing import Iterable, Mapping, Optional


def env_str(name: str, default: Optional[str] = None, env: Optional[Mapping[str, str]] = None) -> Optional[str]:
    source = os.environ if env is None else env
    v = source.get(name)
    if v is None:
        return default
    v = v.strip()
    return v if v else default


def env_bool(name: str, default: bool = False, env: Optional[Mapping[str, str]] = None) -> bool:
    source = os.environ if env is None else env
    v = source.get(name)
    if v is None:
        return default
    s = v.strip().lower()
    if s in ("1", "true", "yes", "on"):
        return True
    if s in ("0", "false", "no", "off"):
        return False
    return default


def env_float(name: str, default: float, env: Optional[Mapping[str, str]] = None) -> float:
    source = os.environ if env is None else env
    v = source.get(name)
    if not v:
        return default
    try:
        return float(v)
    except ValueError:
        return default


def env_choice(name: str, choices: Iterable[str], default: str, env: Optional[Mapping[str, str]] = None) -> str:
    source = os.environ if env is None else env
    v = source.get(name)
    if not v:
        return default
    key = v.strip().lower()
    table = {c.lower(): c for c in choices}
    return table.get(key, default)


def coerce_float(value: object, default: float) -> float:
    """Float from a JSON/config value; booleans and unparsable text give *default*."""

    if value is None or isinstance(value, bool):
        return float(default)
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        try:
            return float(value.strip())
        except ValueError:
            return float(default)
    return float(default)
