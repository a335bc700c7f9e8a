"""Logic for loading output configuration files."""

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from output_paths.errors import ConfigurationError

logger = logging.getLogger(__name__)

SOURCE_MAP_MODES = ("separate", "inline")

DEFAULT_CONFIG: dict[str, Any] = {
    "output": None,
    "source_map": False,
    "source_map_mode": "separate",
    "source_map_file_name": None,
    "derived_file_suffix": "",
}


def load_config(path: str | None = None) -> dict[str, Any]:
    """Load configuration from a YAML file and merge it over the defaults."""
    config = DEFAULT_CONFIG.copy()
    if not path:
        return config

    p = Path(path)
    if not p.exists():
        logger.warning("Config file %s not found. Using defaults.", p)
        return config

    user_config = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
    if not isinstance(user_config, dict):
        kind = type(user_config).__name__
        msg = f"Config file {p} must contain a mapping, got {kind}"
        raise ConfigurationError(msg)

    unknown = sorted(set(user_config) - set(DEFAULT_CONFIG))
    if unknown:
        logger.warning("Ignoring unknown config keys in %s: %s", p, ", ".join(unknown))
    config.update({k: v for k, v in user_config.items() if k in DEFAULT_CONFIG})
    validate_config(config)
    logger.info("Loaded config from %s", p)
    return config


def apply_overrides(config: dict[str, Any], **overrides: Any) -> dict[str, Any]:
    """Return a copy of ``config`` with every override that is not ``None``."""
    result = config.copy()
    result.update({k: v for k, v in overrides.items() if v is not None})
    validate_config(result)
    return result


def validate_config(config: Mapping[str, Any]) -> None:
    """Reject option values no run could use."""
    mode = config.get("source_map_mode", "separate")
    if mode not in SOURCE_MAP_MODES:
        msg = f"Unknown source_map_mode {mode!r}, expected one of {SOURCE_MAP_MODES}"
        raise ConfigurationError(msg)
