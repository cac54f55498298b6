"""Configuration loader for structure recovery settings.

Settings are resolved in three layers, later layers winning:

1. Built-in defaults (``STRUCTURE_DEFAULTS``)
2. An optional YAML file, either a bare mapping or one nested under a
   top-level ``structure:`` key
3. ``PDFTOOL_*`` environment variables
"""

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError as PydanticValidationError

from pdftool.config.defaults import STRUCTURE_DEFAULTS, STRUCTURE_ENV_VARS
from pdftool.config.validator import flatten_pydantic_errors
from pdftool.lib.errors import ConfigError
from pdftool.lib.logging_config import get_logger
from pdftool.models.config import StructureConfig

logger = get_logger(__name__)

_STRING_FIELDS = frozenset({"heading_marker"})


def _parse_env_value(field_name: str, value: str) -> Any:
    """Parse environment variable value to appropriate type.

    Args:
        field_name: Name of the field (used to determine type)
        value: String value from environment variable

    Returns:
        Parsed value in correct type (int or str)

    Raises:
        ValueError: If value cannot be parsed
    """
    if field_name in _STRING_FIELDS:
        return value
    return int(value.strip())


def _env_overrides(env_vars: Mapping[str, str]) -> dict[str, Any]:
    """Collect configuration overrides from environment variables.

    Unparseable values are skipped with a warning rather than failing the
    whole load.

    Args:
        env_vars: Environment variables mapping

    Returns:
        Mapping of field name to parsed override value
    """
    overrides: dict[str, Any] = {}
    for field_name, env_var_name in STRUCTURE_ENV_VARS.items():
        if env_var_name not in env_vars:
            continue
        try:
            overrides[field_name] = _parse_env_value(field_name, env_vars[env_var_name])
        except ValueError:
            logger.warning(
                "Ignoring %s=%r: expected an integer",
                env_var_name,
                env_vars[env_var_name],
            )
    return overrides


def _read_yaml(path: Path) -> dict[str, Any]:
    """Read structure settings from a YAML file.

    Args:
        path: Path to YAML file

    Returns:
        Settings mapping (empty if the file is empty)

    Raises:
        ConfigError: If the file is missing, unreadable or not a mapping
    """
    if not path.exists():
        raise ConfigError("path", f"Configuration file not found: {path}")

    try:
        content = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise ConfigError("path", f"Failed to parse YAML file {path}: {e}") from e
    except OSError as e:
        raise ConfigError("path", f"Failed to read {path}: {e}") from e

    if content is None:
        return {}
    if not isinstance(content, dict):
        raise ConfigError("structure", "Configuration must be a YAML mapping")

    if "structure" in content:
        section = content["structure"]
        if section is None:
            return {}
        if not isinstance(section, dict):
            raise ConfigError("structure", "'structure' section must be a mapping")
        return dict(section)
    return content


def load_structure_config(
    path: Path | str | None = None,
    env: Mapping[str, str] | None = None,
) -> StructureConfig:
    """Load structure recovery settings.

    Args:
        path: Optional YAML file with overrides
        env: Environment mapping, defaults to ``os.environ``

    Returns:
        Validated StructureConfig

    Raises:
        ConfigError: If the file cannot be read or the merged values are invalid
    """
    merged: dict[str, Any] = dict(STRUCTURE_DEFAULTS)

    if path is not None:
        file_values = _read_yaml(Path(path))
        logger.debug("Loaded structure settings from %s: %s", path, file_values)
        merged.update(file_values)

    merged.update(_env_overrides(os.environ if env is None else env))

    try:
        return StructureConfig(**merged)
    except PydanticValidationError as e:
        messages = flatten_pydantic_errors(e)
        raise ConfigError("structure", "\n".join(messages)) from e
