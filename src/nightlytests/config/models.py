"""Configuration constants and scope model for nightlytests."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

# Property holding the comma separated list of nightly-only tests
KEY_LIST_OF_TESTS = "plugins.nightlytests.listOfTests"

# Namespace of all plugin properties (used for validation)
PLUGIN_NAMESPACE = "plugins.nightlytests"

# Keys valid inside the plugin namespace
VALID_PLUGIN_KEYS = {"listOfTests"}

# Environment variable marking the build server / build type
ENV_BUILDSERVER = "BUILDSERVER"

# Case-insensitive marker inside ENV_BUILDSERVER for nightly builds
NIGHTLY_MARKER = "nightly"

LIST_DELIMITER = ","

# Config file names (first match wins)
PROJECT_CONFIG_NAMES = [
    ".nightlytests.yml",
    ".nightlytests.yaml",
    "nightlytests.yml",
    "nightlytests.yaml",
]


@dataclass(frozen=True)
class Scope:
    """A named, read-only key-value configuration source."""

    name: str
    properties: Mapping[str, Any] = field(default_factory=dict)

    def __contains__(self, key: str) -> bool:
        return key in self.properties

    def get(self, key: str) -> Any:
        return self.properties.get(key)


@dataclass(frozen=True)
class ResolvedProperty:
    """A property value together with the scope that supplied it."""

    key: str
    value: Any
    source: str
