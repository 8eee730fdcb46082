"""YAML configuration loading and validation for pipeline constants."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from spritecast.errors import ConfigError
from spritecast.logging import get_logger
from spritecast.models import TranslationConfig

logger = get_logger("config")

SECTION = "translation"


def validate_config_path(path: str | Path) -> Path:
    """Resolve and validate that a config file path exists.

    Raises:
        FileNotFoundError: If the file does not exist.
    """
    resolved = Path(path)
    if not resolved.is_file():
        raise FileNotFoundError(f"Config file not found: {resolved}")
    return resolved


def _parse_yaml(path: Path) -> dict[str, Any]:
    """Read a YAML file that must contain a mapping (an empty file is ``{}``)."""
    with open(path, "r", encoding="utf-8") as fh:
        try:
            data = yaml.safe_load(fh)
        except yaml.YAMLError as exc:
            raise ConfigError(f"Malformed YAML in {path}: {exc}") from exc

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(
            f"Expected a YAML mapping at top level, got {type(data).__name__}"
        )
    return data


def config_from_mapping(data: dict[str, Any]) -> TranslationConfig:
    """Build a :class:`TranslationConfig` from a plain mapping.

    The constants may sit at the top level or under a ``translation:`` key.

    Raises:
        ConfigError: If the section has the wrong shape or fails validation.
    """
    if SECTION in data:
        section = data[SECTION]
        if section is None:
            section = {}
        if not isinstance(section, dict):
            raise ConfigError(
                f"'{SECTION}' section must be a YAML mapping, "
                f"got {type(section).__name__}"
            )
        extra = sorted(k for k in data if k != SECTION)
        if extra:
            raise ConfigError(f"Unexpected top-level keys next to '{SECTION}': {extra}")
        data = section

    try:
        return TranslationConfig(**data)
    except ValidationError as exc:
        raise ConfigError(f"Invalid translation config: {exc}") from exc


def load_config(path: str | Path) -> TranslationConfig:
    """Load and validate pipeline constants from a YAML file.

    Example::

        translation:
          max_colors: 8
          background_tolerance: 32
          strict_hue_guard: true

    Raises:
        FileNotFoundError: If the YAML file doesn't exist.
        ConfigError: If the YAML is malformed or fails validation.
    """
    resolved = validate_config_path(path)
    config = config_from_mapping(_parse_yaml(resolved))
    logger.info(
        "Loaded config from %s (max_colors=%d, canvas=%dpx)",
        resolved,
        config.max_colors,
        config.canvas_size,
    )
    return config


def dump_config(config: TranslationConfig) -> str:
    """Serialize *config* as YAML under the ``translation:`` key."""
    return yaml.safe_dump({SECTION: config.model_dump()}, sort_keys=False)
