"""Configuration validation for nightlytests.

Only keys inside the plugin namespace are checked; everything else in a
config file may belong to other tooling and is ignored.
Does not raise exceptions - returns warnings instead.
"""

from __future__ import annotations

from dataclasses import dataclass
from difflib import get_close_matches
from typing import Any, Dict, List, Optional, Set

from nightlytests.config.models import PLUGIN_NAMESPACE, VALID_PLUGIN_KEYS
from nightlytests.core.logging import get_logger

LOGGER = get_logger(__name__)


@dataclass
class ConfigValidationWarning:
    """A validation warning for configuration."""

    message: str
    source: str
    key: Optional[str] = None
    suggestion: Optional[str] = None


def validate_config(
    properties: Dict[str, Any],
    source: str,
) -> List[ConfigValidationWarning]:
    """Validate flattened configuration properties.

    Args:
        properties: Dotted-key property mapping.
        source: Source file path for warning messages.

    Returns:
        List of validation warnings.
    """
    warnings: List[ConfigValidationWarning] = []
    prefix = PLUGIN_NAMESPACE + "."

    for key, value in properties.items():
        if not key.startswith(prefix):
            continue

        name = key[len(prefix):]
        if name not in VALID_PLUGIN_KEYS:
            warning = ConfigValidationWarning(
                message=f"Unknown key '{key}'",
                source=source,
                key=key,
                suggestion=_suggest_key(name, VALID_PLUGIN_KEYS),
            )
            warnings.append(warning)
            _log_warning(warning)
            continue

        if not _is_list_value(value):
            warning = ConfigValidationWarning(
                message=f"'{key}' must be a string or a list of strings, got {type(value).__name__}",
                source=source,
                key=key,
            )
            warnings.append(warning)
            _log_warning(warning)

    return warnings


def _is_list_value(value: Any) -> bool:
    if value is None or isinstance(value, str):
        return True
    if isinstance(value, list):
        return all(isinstance(item, str) for item in value)
    return False


def _suggest_key(invalid_key: str, valid_keys: Set[str]) -> Optional[str]:
    """Suggest a valid key for a potential typo.

    Args:
        invalid_key: The invalid key entered.
        valid_keys: Set of valid keys.

    Returns:
        Closest matching valid key, or None if no good match.
    """
    matches = get_close_matches(invalid_key, list(valid_keys), n=1, cutoff=0.6)
    return matches[0] if matches else None


def _log_warning(warning: ConfigValidationWarning) -> None:
    """Log a validation warning."""
    msg = f"{warning.message} in {warning.source}"
    if warning.suggestion:
        msg += f" (did you mean '{warning.suggestion}'?)"
    LOGGER.warning(msg)
