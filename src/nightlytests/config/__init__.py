"""Configuration module for nightlytests.

Provides:
- Property lookup across local and enclosing project scopes
- Config file loading (.nightlytests.yml) with environment variable expansion
- Validation of plugin-specific keys
"""

from nightlytests.config.models import (
    ENV_BUILDSERVER,
    KEY_LIST_OF_TESTS,
    NIGHTLY_MARKER,
    ResolvedProperty,
    Scope,
)
from nightlytests.config.loader import (
    ConfigError,
    find_project_config,
    load_project_properties,
)
from nightlytests.config.resolver import resolve_property, resolve_with_source, scope_chain
from nightlytests.config.validation import ConfigValidationWarning, validate_config

__all__ = [
    "ENV_BUILDSERVER",
    "KEY_LIST_OF_TESTS",
    "NIGHTLY_MARKER",
    "ResolvedProperty",
    "Scope",
    "ConfigError",
    "find_project_config",
    "load_project_properties",
    "resolve_property",
    "resolve_with_source",
    "scope_chain",
    "ConfigValidationWarning",
    "validate_config",
]
