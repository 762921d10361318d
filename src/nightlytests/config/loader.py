"""Configuration file loading.

Handles loading a project's local scope from YAML files with:
- Per-directory config (.nightlytests.yml)
- Environment variable expansion (${VAR})
- Flattening of nested mappings into dotted property keys
"""

from __future__ import annotations

import os
import re
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from nightlytests.config.models import PROJECT_CONFIG_NAMES
from nightlytests.config.validation import validate_config
from nightlytests.core.logging import get_logger

LOGGER = get_logger(__name__)

# Environment variable pattern: ${VAR} or ${VAR:-default}
ENV_VAR_PATTERN = re.compile(r"\$\{([^}:]+)(?::-([^}]*))?\}")


class ConfigError(Exception):
    """Configuration loading or parsing error."""

    pass


def find_project_config(directory: Path) -> Optional[Path]:
    """Find the config file of a project directory.

    Searches for .nightlytests.yml, .nightlytests.yaml, nightlytests.yml,
    nightlytests.yaml in the directory.

    Args:
        directory: Directory to search in.

    Returns:
        Path to config file if found, None otherwise.
    """
    for name in PROJECT_CONFIG_NAMES:
        config_path = directory / name
        if config_path.is_file():
            return config_path
    return None


def load_project_properties(directory: Path) -> Dict[str, Any]:
    """Load the flattened properties of a project directory.

    Args:
        directory: Project directory.

    Returns:
        Dotted-key property mapping; empty if the directory has no config file.

    Raises:
        ConfigError: If the config file cannot be read or parsed.
    """
    config_path = find_project_config(directory)
    if config_path is None:
        LOGGER.debug(f"No config file in {directory}")
        return {}

    try:
        data = load_yaml_file(config_path)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {config_path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Cannot read {config_path}: {e}") from e
    except UnicodeDecodeError as e:
        raise ConfigError(f"Config file {config_path} is not valid UTF-8: {e}") from e

    properties = flatten_properties(data)
    validate_config(properties, source=str(config_path))
    LOGGER.debug(f"Loaded {len(properties)} propert(ies) from {config_path}")
    return properties


def load_yaml_file(path: Path) -> Dict[str, Any]:
    """Load and parse a YAML config file.

    Performs environment variable expansion on string values.

    Args:
        path: Path to YAML file.

    Returns:
        Parsed dictionary.

    Raises:
        yaml.YAMLError: If YAML parsing fails.
        ConfigError: If the document is not a mapping.
    """
    with open(path, "r", encoding="utf-8") as f:
        content = f.read()

    data = yaml.safe_load(content)

    if data is None:
        return {}

    if not isinstance(data, dict):
        raise ConfigError(f"Config file must be a YAML mapping, got {type(data).__name__}")

    return expand_env_vars(data)


def expand_env_vars(data: Any) -> Any:
    """Recursively expand environment variables in config values.

    Supports ${VAR} and ${VAR:-default} syntax.

    Args:
        data: Config data (dict, list, or scalar).

    Returns:
        Data with environment variables expanded.
    """
    if isinstance(data, dict):
        return {k: expand_env_vars(v) for k, v in data.items()}
    elif isinstance(data, list):
        return [expand_env_vars(item) for item in data]
    elif isinstance(data, str):
        return ENV_VAR_PATTERN.sub(_env_var_replacer, data)
    else:
        return data


def _env_var_replacer(match: re.Match[str]) -> str:
    """Replace environment variable reference with its value."""
    var_name = match.group(1)
    default_value = match.group(2)

    value = os.environ.get(var_name)
    if value is not None:
        return value
    if default_value is not None:
        return default_value

    LOGGER.warning(f"Environment variable ${var_name} is not set and has no default")
    return ""


def flatten_properties(data: Dict[str, Any], prefix: str = "") -> Dict[str, Any]:
    """Flatten nested mappings into dotted keys.

    ``{"plugins": {"nightlytests": {"listOfTests": "A"}}}`` becomes
    ``{"plugins.nightlytests.listOfTests": "A"}``. Keys that already contain
    dots are kept as they are. Lists and scalars are leaves.

    Args:
        data: Parsed config mapping.
        prefix: Key prefix for recursion.

    Returns:
        Flat property mapping.
    """
    result: Dict[str, Any] = {}
    for key, value in data.items():
        full_key = f"{prefix}.{key}" if prefix else str(key)
        if isinstance(value, dict) and value:
            result.update(flatten_properties(value, full_key))
        else:
            result[full_key] = value
    return result
