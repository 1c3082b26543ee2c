"""
Configuration loader for handreplay with defaults and environment overrides
"""
import copy
import hashlib
import logging
import os
from typing import Any, Dict, Optional

import yaml

logger = logging.getLogger(__name__)

DEFAULT_CFG = os.path.join(os.path.dirname(os.path.abspath(__file__)), "config.yml")

DEFAULTS: Dict[str, Any] = {
    "splitter": {
        "min_hand_length": 50,
    },
    "equity": {
        "default_iterations": 10000,
        "max_iterations": 200000,
        "batch_size": 2500,
        "workers": 4,
        "executor": "thread",
        "deadline_seconds": 10.0,
    },
    "logging": {
        "level": "INFO",
        "format": "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        "datefmt": "%Y-%m-%d %H:%M:%S",
    },
}

# env var -> (section, key, cast)
ENV_OVERRIDES = {
    "HANDREPLAY_EQUITY_WORKERS": ("equity", "workers", int),
    "HANDREPLAY_EQUITY_MAX_ITERATIONS": ("equity", "max_iterations", int),
    "HANDREPLAY_LOG_LEVEL": ("logging", "level", str),
}

_cached: Optional[Dict[str, Any]] = None


def _deep_merge(base: dict, override: dict) -> dict:
    merged = copy.deepcopy(base)
    for key, value in (override or {}).items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def _apply_env(cfg: dict) -> dict:
    for var, (section, key, cast) in ENV_OVERRIDES.items():
        raw = os.environ.get(var)
        if raw is None or raw == "":
            continue
        try:
            cfg[section][key] = cast(raw)
        except ValueError:
            logger.warning(f"Ignoring {var}={raw!r}: expected {cast.__name__}")
    return cfg


def _validate(cfg: dict) -> dict:
    eq = cfg["equity"]
    if eq["executor"] not in ("thread", "process"):
        raise ValueError(f"equity.executor must be 'thread' or 'process', got {eq['executor']!r}")
    for key in ("default_iterations", "max_iterations", "batch_size", "workers"):
        if int(eq[key]) <= 0:
            raise ValueError(f"equity.{key} must be positive, got {eq[key]!r}")
    if eq["default_iterations"] > eq["max_iterations"]:
        logger.warning(
            f"equity.default_iterations={eq['default_iterations']} exceeds "
            f"max_iterations={eq['max_iterations']}; it will be capped"
        )
    return cfg


def load_config(path: Optional[str] = None) -> dict:
    """
    Load configuration from YAML, merged over the built-in defaults

    Args:
        path: Path to configuration file. Falls back to $HANDREPLAY_CONFIG,
            then the packaged config.yml.

    Returns:
        Validated configuration dictionary
    """
    path = path or os.environ.get("HANDREPLAY_CONFIG") or DEFAULT_CFG

    with open(path, "r", encoding="utf-8") as f:
        loaded = yaml.safe_load(f) or {}

    if not isinstance(loaded, dict):
        raise ValueError(f"Config file {path} must contain a mapping at the top level")

    cfg = _validate(_apply_env(_deep_merge(DEFAULTS, loaded)))
    logger.debug(f"Loaded config from {path}")
    return cfg


def get_config(reset: bool = False) -> dict:
    """Get or load the default configuration."""
    global _cached
    if reset:
        _cached = None
    if _cached is None:
        _cached = load_config()
    return _cached


def config_hash(cfg: dict) -> str:
    """
    Generate SHA1 hash of configuration

    Args:
        cfg: Configuration dictionary

    Returns:
        SHA1 hash string
    """
    blob = yaml.safe_dump(cfg, sort_keys=True, allow_unicode=True)
    return hashlib.sha1(blob.encode("utf-8")).hexdigest()
