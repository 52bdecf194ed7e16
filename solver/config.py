"""
PolySolver — runtime settings.

Defaults live in ``DEFAULT_SETTINGS``.  They can be overridden by a JSON
file (path taken from ``POLYSOLVER_CONFIG``) and then by environment
variables named ``POLYSOLVER_<SETTING>`` (e.g. ``POLYSOLVER_LOG_LEVEL``).
"""

import json
import logging
import os
from typing import Optional

logger = logging.getLogger(__name__)

ENV_PREFIX = "POLYSOLVER_"
CONFIG_ENV = ENV_PREFIX + "CONFIG"

DEFAULT_SETTINGS = {
    "log_level": "WARNING",
    "max_decimals": None,      # None = shortest exact rendering
    "verify_roots": True,
    "graph_points": 400,
}


def _to_bool(raw: str) -> bool:
    return raw.strip().lower() in ("1", "true", "yes", "on")


def _to_optional_int(raw: str) -> Optional[int]:
    raw = raw.strip().lower()
    if raw in ("", "none", "null"):
        return None
    return int(raw)


def _to_points(raw) -> int:
    points = int(raw)
    if points < 2:
        raise ValueError("graph_points must be at least 2")
    return points


_PARSERS = {
    "log_level": lambda raw: raw.strip().upper(),
    "max_decimals": _to_optional_int,
    "verify_roots": _to_bool,
    "graph_points": _to_points,
}

# JSON types accepted as-is from the settings file; strings go through _PARSERS.
_TYPES = {
    "log_level": (),
    "max_decimals": (int, type(None)),
    "verify_roots": (bool,),
    "graph_points": (int,),
}


def _coerce(key: str, value):
    """Validate a settings-file value, raising ValueError when unusable."""
    if isinstance(value, str):
        return _PARSERS[key](value)
    # bool is an int subclass; only verify_roots takes one
    if isinstance(value, bool) and bool not in _TYPES[key]:
        raise ValueError(f"expected {key} to be a number, not a boolean")
    if not isinstance(value, _TYPES[key]):
        raise ValueError(f"unexpected type {type(value).__name__}")
    if key == "graph_points":
        return _to_points(value)
    return value


def _load_file(path: str) -> dict:
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (json.JSONDecodeError, OSError) as e:
        logger.warning("Ignoring config file %s: %s", path, e)
        return {}
    if not isinstance(data, dict):
        logger.warning("Ignoring config file %s: expected a JSON object", path)
        return {}
    settings = {}
    for key, value in data.items():
        if key not in DEFAULT_SETTINGS:
            continue
        try:
            settings[key] = _coerce(key, value)
        except ValueError as e:
            logger.warning("Ignoring %r in %s: %s", key, path, e)
    return settings


def get_settings(environ=None) -> dict:
    """Return the merged settings: defaults, then file, then environment."""
    environ = os.environ if environ is None else environ
    settings = dict(DEFAULT_SETTINGS)

    path = environ.get(CONFIG_ENV)
    if path:
        settings.update(_load_file(path))

    for key, parse in _PARSERS.items():
        raw = environ.get(ENV_PREFIX + key.upper())
        if raw is None:
            continue
        try:
            settings[key] = parse(raw)
        except ValueError:
            logger.warning("Ignoring %s%s=%r: not a valid value", ENV_PREFIX, key.upper(), raw)
    return settings
