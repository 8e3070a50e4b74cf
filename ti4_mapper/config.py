from __future__ import annotations
from typing import Any, Dict, Iterable, Optional
import os, json

import yaml

from .movement import MovementOptions

ENV_PREFIX = "TI4_MAPPER__"

def _deep_merge(a: Dict[str, Any], b: Dict[str, Any]) -> Dict[str, Any]:
    out = dict(a)
    for k, v in (b or {}).items():
        if isinstance(v, dict) and isinstance(out.get(k), dict):
            out[k] = _deep_merge(out[k], v)
        else:
            out[k] = v
    return out

def _load_one(path: str) -> Dict[str, Any]:
    with open(path, "r", encoding="utf-8") as f:
        text = f.read()
    if path.lower().endswith(".json"):
        d = json.loads(text)
    else:
        d = yaml.safe_load(text)
    if d is None:
        return {}
    if not isinstance(d, dict):
        raise ValueError(f"Config file {path} must contain a mapping at the top level")
    return d

def load_configs(paths: Iterable[str] | None) -> Dict[str, Any]:
    cfg: Dict[str, Any] = {}
    for p in (paths or []):
        cfg = _deep_merge(cfg, _load_one(p))
    return cfg

def env_overrides(prefix: str = ENV_PREFIX) -> Dict[str, Any]:
    # Nested via double underscores: TI4_MAPPER__MOVEMENT__USE_RIFT=false
    out: Dict[str, Any] = {}
    for k, v in os.environ.items():
        if not k.startswith(prefix):
            continue
        parts = k[len(prefix):].split("__")
        cur = out
        for i, part in enumerate(parts):
            key = part.lower()
            if i == len(parts) - 1:
                cur[key] = _coerce(v)
            else:
                cur = cur.setdefault(key, {})
    return out

def _coerce(s: str) -> Any:
    t = s.strip().lower()
    if t in ("true", "false"):
        return t == "true"
    try:
        if "." in t:
            return float(t)
        return int(t)
    except ValueError:
        return s

def apply_cli_overrides(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    return _deep_merge(base, overrides or {})

def load_movement_options(paths: Optional[Iterable[str]] = None, env_prefix: Optional[str] = ENV_PREFIX) -> MovementOptions:
    """Build movement options from config files, then environment overrides.

    Only the ``movement`` section is read; pass ``env_prefix=None`` to ignore
    the environment.
    """
    cfg = load_configs(paths)
    if env_prefix:
        cfg = apply_cli_overrides(cfg, env_overrides(env_prefix))
    section = cfg.get("movement") or {}
    if not isinstance(section, dict):
        raise ValueError("Config section 'movement' must be a mapping")
    return MovementOptions.from_mapping(section)

__all__ = ["load_configs", "env_overrides", "apply_cli_overrides", "load_movement_options", "_deep_merge"]
