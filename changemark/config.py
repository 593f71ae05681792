"""Configuration utilities for changemark.

Contains functions for:
- Loading ChangelogConfig from a configuration dictionary
- Loading ChangelogConfig from a YAML file
- Converting ChangelogConfig to a dictionary for saving

Config file layout:

    changelog:
      github: owner/repo
      from: "v1.0.0"   # quote versions; YAML reads 1.10 as 1.1
      to: "v1.1.0"
      types:
        feat:
          title: "🚀 Enhancements"
        fix: "🩹 Fixes"     # shorthand for {title: ...}
        chore: false        # disables the section
"""

import logging
from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import ValidationError

from changemark.constants import DEFAULT_TYPES
from changemark.exceptions import ConfigError
from changemark.models import ChangelogConfig, TypeConfig

logger = logging.getLogger(__name__)


def _load_types(raw_types: Optional[dict]) -> dict[str, TypeConfig]:
    """Build the ordered type table, falling back to DEFAULT_TYPES."""
    if raw_types is None:
        raw_types = DEFAULT_TYPES.copy()

    if not isinstance(raw_types, dict):
        raise ConfigError("'changelog.types' must be a mapping of type to title")

    types = {}
    for type_key, value in raw_types.items():
        if value is None or value is False:
            continue
        if isinstance(value, str):
            title = value
        elif isinstance(value, dict):
            title = value.get("title")
            if title is None:
                title = type_key
        else:
            raise ConfigError(
                f"Invalid entry for type '{type_key}': expected a title or a mapping"
            )
        types[str(type_key)] = TypeConfig(title=str(title))
    return types


def _optional_str(section: dict, key: str) -> Optional[str]:
    """Read a string value, rejecting scalars YAML did not keep as text."""
    value = section.get(key)
    if value is None or isinstance(value, str):
        return value
    # YAML reads unquoted 1.10 as the float 1.1, so the original text is lost
    raise ConfigError(
        f"'changelog.{key}' must be a string, got {value!r}; "
        f"quote it in the config file (e.g. {key}: \"{value}\")"
    )


def load_changelog_config_from_dict(config_dict: dict) -> ChangelogConfig:
    """Load ChangelogConfig from a configuration dictionary.

    Args:
        config_dict: Dictionary with a "changelog" section.

    Returns:
        ChangelogConfig instance.

    Raises:
        ConfigError: If the section is malformed.
    """
    section = config_dict.get("changelog") or {}
    if not isinstance(section, dict):
        raise ConfigError("'changelog' section must be a mapping")

    types = _load_types(section.get("types"))

    try:
        return ChangelogConfig(
            types=types,
            from_=_optional_str(section, "from") or "",
            to=_optional_str(section, "to") or "",
            github=_optional_str(section, "github"),
        )
    except ValidationError as e:
        raise ConfigError(f"Invalid changelog configuration: {e}")


def changelog_config_to_dict(config: ChangelogConfig) -> dict:
    """Convert ChangelogConfig to a dictionary for saving.

    Args:
        config: ChangelogConfig instance.

    Returns:
        Dictionary representation.
    """
    section: dict[str, Any] = {
        "types": {key: {"title": value.title} for key, value in config.types.items()},
        "from": config.from_,
        "to": config.to,
    }
    if config.github is not None:
        section["github"] = config.github
    return {"changelog": section}


def load_changelog_config(config_file: Optional[Path]) -> ChangelogConfig:
    """Load ChangelogConfig from a YAML file.

    Args:
        config_file: Path to the YAML file. None or a missing file yields
            the default configuration.

    Returns:
        ChangelogConfig instance.

    Raises:
        ConfigError: If the file cannot be read or is invalid.
    """
    if config_file is None or not config_file.exists():
        logger.info("No changelog config file found, using defaults")
        return load_changelog_config_from_dict({})

    try:
        with open(config_file, "r", encoding="utf-8") as f:
            config_dict = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(f"Failed to load config from {config_file}: {e}")

    if not isinstance(config_dict, dict):
        raise ConfigError(f"Config file {config_file} must contain a mapping")

    logger.info(f"Loaded changelog config from {config_file}")
    return load_changelog_config_from_dict(config_dict)
