# streamhub/utils/config.py
"""
Minimal config loader with caching and gentle fallbacks.

- Reads ./streamhub.yaml if present.
- Merges environment overrides (see `streamhub.schemas.settings.Settings`).
- Returns a plain dict with every known section filled in, so callers can do
  .get(...) safely.
- Exposes reload_config() for tests.
"""

from __future__ import annotations

import copy
import logging
from pathlib import Path
from typing import Any, Dict

import yaml

from streamhub.schemas.settings import Settings

# setup_logger depends on this module, so use a plain logger here.
logger = logging.getLogger(__name__)

CONFIG_FILE = "streamhub.yaml"

DEFAULT_CONFIG: Dict[str, Any] = {
    "logging": {"level": "info"},
    "preferences": {"path": "preferences.json"},
    "selection": {"default_service": "YouTube"},
}

_CONFIG_CACHE: Dict[str, Any] | None = None


def _read_yaml(path: Path) -> Dict[str, Any]:
    if not path.exists():
        return {}
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
        if not isinstance(data, dict):
            logger.warning("Ignoring %s: top level is not a mapping", path)
            return {}
        return data
    except yaml.YAMLError as e:
        logger.error("Failed to parse %s: %s", path, e)
        return {}


def _merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    merged = copy.deepcopy(base)
    for section, values in override.items():
        if isinstance(values, dict) and isinstance(merged.get(section), dict):
            merged[section].update(values)
        elif section in merged:
            logger.warning("Ignoring config section '%s': expected a mapping", section)
        else:
            merged[section] = values
    return merged


def _apply_env_overrides(cfg: Dict[str, Any]) -> Dict[str, Any]:
    settings = Settings()
    if settings.STREAMHUB_LOG_LEVEL:
        cfg["logging"]["level"] = settings.STREAMHUB_LOG_LEVEL
    if settings.STREAMHUB_PREFERENCES_PATH:
        cfg["preferences"]["path"] = settings.STREAMHUB_PREFERENCES_PATH
    if settings.STREAMHUB_DEFAULT_SERVICE:
        cfg["selection"]["default_service"] = settings.STREAMHUB_DEFAULT_SERVICE
    return cfg


def get_config() -> Dict[str, Any]:
    global _CONFIG_CACHE
    if _CONFIG_CACHE is not None:
        return _CONFIG_CACHE

    cfg = _merge(DEFAULT_CONFIG, _read_yaml(Path(CONFIG_FILE)))
    cfg = _apply_env_overrides(cfg)
    _CONFIG_CACHE = cfg
    return _CONFIG_CACHE


def reload_config() -> Dict[str, Any]:
    """Clear cache and reload (primarily for tests)."""
    global _CONFIG_CACHE
    _CONFIG_CACHE = None
    return get_config()
