# docchunk/config/loader.py
"""
Layered configuration loading.

Merge strategy:
    1. Package defaults (docchunk/config/defaults.yaml) - always loaded
    2. User config file (optional) - overrides defaults

The result is a complete, validated DocChunkConfig where every value exists.

Usage:
    from docchunk.config import load_config

    config = load_config()                      # defaults only
    config = load_config(Path("chunking.yaml"))  # defaults + overrides
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import ValidationError

from docchunk.config.schema import DocChunkConfig
from docchunk.exceptions import ConfigurationError
from docchunk.logging.logger import get_logger
from docchunk.logging.tags import CONFIG

logger = get_logger(__name__)

DEFAULTS_PATH = Path(__file__).parent / "defaults.yaml"


def deep_merge(base: dict, override: dict) -> dict:
    """
    Deep merge two dictionaries.

    Values from `override` take precedence. Nested dicts are merged
    recursively; lists are replaced entirely.

    Examples:
        >>> deep_merge({"a": 1, "b": {"c": 2, "d": 3}}, {"b": {"c": 10}})
        {'a': 1, 'b': {'c': 10, 'd': 3}}
    """
    result = base.copy()

    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value

    return result


def _read_yaml(path: Path) -> dict[str, Any]:
    try:
        with path.open("r", encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise ConfigurationError(f"Could not read config file {path}: {e}") from e

    if not isinstance(raw, dict):
        raise ConfigurationError(f"Config file {path} must contain a mapping at top level")
    return raw


def load_defaults() -> dict[str, Any]:
    """Load the package defaults as a plain dict."""
    return _read_yaml(DEFAULTS_PATH)


def load_config(path: Optional[Path] = None) -> DocChunkConfig:
    """
    Load configuration: package defaults merged with an optional user file.

    Args:
        path: Optional YAML file with overrides.

    Returns:
        Validated DocChunkConfig.

    Raises:
        ConfigurationError: If a file is unreadable or the merged config is invalid.
    """
    merged = load_defaults()

    if path is not None:
        path = Path(path)
        if not path.exists():
            raise ConfigurationError(f"Config file not found: {path}")
        merged = deep_merge(merged, _read_yaml(path))
        logger.debug(f"{CONFIG} Applied user config from {path}")

    try:
        return DocChunkConfig.model_validate(merged)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid configuration: {e}") from e


__all__ = ["deep_merge", "load_config", "load_defaults", "DEFAULTS_PATH"]
