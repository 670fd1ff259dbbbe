# passgen/config.py
"""
Simple settings persistence for passgen.
Settings saved as JSON in %APPDATA%/passgen/config.json (Windows) or ~/.passgen/config.json (fallback),
or wherever $PASSGEN_CONFIG points.
"""

import os
import json
import logging
from typing import Dict, Any

from .errors import ConfigError
from .generator import GenerationRequest

logger = logging.getLogger(__name__)

DEFAULTS: Dict[str, Any] = {
    "length": 16,
    "include_uppercase": True,
    "include_lowercase": True,
    "include_digits": True,
    "include_symbols": True,
    "copies": 1,
}

_TRUE = {"true", "yes", "1", "on"}
_FALSE = {"false", "no", "0", "off"}


def config_path() -> str:
    """
    $PASSGEN_CONFIG if set, else config.json under %APPDATA%/passgen or
    ~/.passgen. Nothing is created until save_config() runs.
    """
    explicit = os.getenv("PASSGEN_CONFIG")
    if explicit:
        return explicit
    appdata = os.getenv("APPDATA")
    if appdata:
        d = os.path.join(appdata, "passgen")
    else:
        d = os.path.join(os.path.expanduser("~"), ".passgen")
    return os.path.join(d, "config.json")


def _checked(key: str, value: Any) -> Any:
    """Return `value` in the type DEFAULTS[key] has, or raise ConfigError."""
    if isinstance(value, str):
        return _parse(key, value)
    if isinstance(DEFAULTS[key], bool):
        if not isinstance(value, bool):
            raise ConfigError(f"{key} expects true/false, got {value!r}")
        return value
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigError(f"{key} expects an integer, got {value!r}")
    if value < 1:
        raise ConfigError(f"{key} must be at least 1")
    return value


def load_config() -> Dict[str, Any]:
    p = config_path()
    if not os.path.exists(p):
        return DEFAULTS.copy()
    try:
        with open(p, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.warning("Ignoring unreadable config %s: %s", p, e)
        return DEFAULTS.copy()
    if not isinstance(data, dict):
        logger.warning("Ignoring config %s: expected a JSON object", p)
        return DEFAULTS.copy()
    # merge over defaults; unknown keys and bad values are dropped
    out = DEFAULTS.copy()
    for key, value in data.items():
        if key not in DEFAULTS:
            continue
        try:
            out[key] = _checked(key, value)
        except ConfigError as e:
            logger.warning("Ignoring %s in config %s: %s", key, p, e)
    return out


def save_config(cfg: Dict[str, Any]) -> None:
    """Write through a temp file and os.replace so a crash never leaves half a file."""
    p = config_path()
    d = os.path.dirname(p)
    if d:
        os.makedirs(d, exist_ok=True)
    tmp = p + ".tmp"
    with open(tmp, "w", encoding="utf-8") as f:
        json.dump(cfg, f, ensure_ascii=False, indent=2)
        f.flush()
        os.fsync(f.fileno())
    os.replace(tmp, p)


def _parse(key: str, raw: str) -> Any:
    if isinstance(DEFAULTS[key], bool):
        v = raw.strip().lower()
        if v in _TRUE:
            return True
        if v in _FALSE:
            return False
        raise ConfigError(f"{key} expects true/false, got {raw!r}")
    try:
        value = int(raw)
    except ValueError:
        raise ConfigError(f"{key} expects an integer, got {raw!r}") from None
    if value < 1:
        raise ConfigError(f"{key} must be at least 1")
    return value


def set_value(cfg: Dict[str, Any], key: str, raw: str) -> Dict[str, Any]:
    """Return a copy of cfg with `key` set from its string form."""
    if key not in DEFAULTS:
        raise ConfigError(f"unknown setting {key!r} (known: {', '.join(DEFAULTS)})")
    out = dict(cfg)
    out[key] = _parse(key, raw)
    return out


def request_from_config(cfg: Dict[str, Any], **overrides: Any) -> GenerationRequest:
    """
    Build a GenerationRequest with every field set explicitly; `overrides`
    whose value is None fall back to the config.
    """
    fields = ("length", "include_uppercase", "include_lowercase", "include_digits", "include_symbols")
    values = {}
    for name in fields:
        v = overrides.get(name)
        values[name] = cfg.get(name, DEFAULTS[name]) if v is None else v
    return GenerationRequest(**values)
