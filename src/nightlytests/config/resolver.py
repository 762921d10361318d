"""Property lookup across the local and enclosing project scopes."""

from __future__ import annotations

from typing import Any, List, Optional, Sequence

from nightlytests.config.models import ResolvedProperty, Scope
from nightlytests.core.logging import get_logger
from nightlytests.core.models import Project

LOGGER = get_logger(__name__)


def scope_chain(project: Project) -> List[Scope]:
    """Build the ordered lookup chain for a project.

    The project's own properties come first, followed by each enclosing
    project up to the root.

    Args:
        project: Project the plugin is applied to.

    Returns:
        Scopes in lookup order.
    """
    scopes: List[Scope] = []
    current: Optional[Project] = project
    while current is not None:
        scopes.append(Scope(name=current.name, properties=current.properties))
        current = current.parent
    return scopes


def resolve_with_source(scopes: Sequence[Scope], key: str) -> Optional[ResolvedProperty]:
    """Find the first scope containing ``key``.

    A key that is present wins even if its value is empty, so a local
    setting always shadows the enclosing one.

    Args:
        scopes: Scopes in lookup order.
        key: Property name.

    Returns:
        ResolvedProperty, or None if no scope contains the key.
    """
    for scope in scopes:
        if key in scope:
            LOGGER.debug(f"Resolved '{key}' from scope '{scope.name}'")
            return ResolvedProperty(key=key, value=scope.get(key), source=scope.name)
    LOGGER.debug(f"Property '{key}' not found in {len(scopes)} scope(s)")
    return None


def resolve_property(scopes: Sequence[Scope], key: str) -> Optional[Any]:
    """Return the raw value of ``key`` from the first scope containing it."""
    resolved = resolve_with_source(scopes, key)
    return resolved.value if resolved is not None else None
