from __future__ import annotations

"""
Run Configuration.

Defaults for a CLI run, loading of JSON configuration files and the validation
pass that coerces untrusted values into the expected types.
"""

import json
import logging
import os
from typing import Any, Dict, List, Optional, Tuple

from podproject.domain import constants as const

logger = logging.getLogger(__name__)


def get_default_config() -> Dict[str, Any]:
    """
    Return the default run configuration.

    Returns:
        Dict[str, Any]: Fresh dictionary, safe to mutate.
    """
    return {
        # Pod registration
        "pod_name": "",
        "development": False,
        "absolute": False,
        "reflect_file_system_structure": False,

        # Project
        "project_dir": "",
        "symroot": const.LEGACY_BUILD_ROOT,
        "podfile_path": "",
        "configurations": {},

        # Walker
        "exclude_patterns": list(const.DEFAULT_EXCLUDE_PATTERNS),
    }


def load_config(path: Optional[str]) -> Dict[str, Any]:
    """
    Load a JSON configuration file and merge its known keys over the defaults.

    A missing or malformed file falls back to the defaults with a warning.
    """
    config = get_default_config()
    if not path:
        return config

    if not os.path.exists(path):
        logger.warning(f"Config file not found: {path}. Using defaults.")
        return config

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        logger.warning(f"Failed to read config file '{path}': {e}. Using defaults.")
        return config

    if not isinstance(data, dict):
        logger.warning(f"Config file '{path}' must contain a JSON object. Using defaults.")
        return config

    for key in config:
        if key in data:
            config[key] = data[key]
    return config


def validate_config(config: Any) -> Tuple[Dict[str, Any], List[str]]:
    """
    Normalize a raw configuration dictionary.

    Unknown keys are dropped, wrong types are replaced by defaults and
    configuration kinds outside debug/release are discarded.

    Returns:
        Tuple[Dict[str, Any], List[str]]: Normalized configuration and warnings.
    """
    warnings: List[str] = []
    defaults = get_default_config()

    if not isinstance(config, dict):
        warnings.append(f"Invalid config type: expected dict, received {type(config).__name__}.")
        return defaults, warnings

    out: Dict[str, Any] = dict(defaults)

    for key in ("development", "absolute", "reflect_file_system_structure"):
        if key in config:
            out[key] = _coerce_bool(config[key], key, warnings)

    for key in ("pod_name", "project_dir", "symroot", "podfile_path"):
        value = config.get(key, defaults[key])
        if value is None:
            value = ""
        if not isinstance(value, str):
            warnings.append(f"'{key}' must be a string; got {type(value).__name__}.")
            value = defaults[key]
        out[key] = value.strip()

    out["symroot"] = out["symroot"] or const.LEGACY_BUILD_ROOT

    patterns = config.get("exclude_patterns", defaults["exclude_patterns"])
    if isinstance(patterns, str):
        patterns = [p.strip() for p in patterns.split(",") if p.strip()]
    if not isinstance(patterns, list) or not all(isinstance(p, str) for p in patterns):
        warnings.append("'exclude_patterns' must be a list of strings.")
        patterns = defaults["exclude_patterns"]
    out["exclude_patterns"] = patterns

    out["configurations"] = _normalize_configurations(config.get("configurations", {}), warnings)

    for w in warnings:
        logger.warning(w)
    return out, warnings


# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _coerce_bool(value: Any, key: str, warnings: List[str]) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str) and value.strip().lower() in ("1", "true", "yes", "on"):
        return True
    if isinstance(value, str) and value.strip().lower() in ("0", "false", "no", "off", ""):
        return False
    if isinstance(value, int):
        return bool(value)
    warnings.append(f"'{key}' must be a boolean; got {value!r}.")
    return False


def _normalize_configurations(raw: Any, warnings: List[str]) -> Dict[str, str]:
    if not isinstance(raw, dict):
        warnings.append("'configurations' must map names to 'debug' or 'release'.")
        return {}

    out: Dict[str, str] = {}
    for name, kind in raw.items():
        key = str(kind).strip().lower()
        if key not in const.BUILD_CONFIGURATION_KINDS:
            warnings.append(f"Ignoring configuration '{name}': unknown type '{kind}'.")
            continue
        out[str(name)] = key
    return out
