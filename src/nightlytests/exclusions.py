"""Parsing and applying the list of nightly-only tests."""

from __future__ import annotations

from typing import Any, Iterable, List, Sequence

from nightlytests.config.models import LIST_DELIMITER
from nightlytests.core.logging import get_logger
from nightlytests.core.models import TestTask

LOGGER = get_logger(__name__)


def parse_exclude_list(raw: str) -> List[str]:
    """Split a comma separated list into unique patterns.

    Patterns are kept byte for byte (no trimming) and in order of first
    occurrence. An empty string yields ``[""]``; judging validity is up to
    the caller.

    Args:
        raw: Property value, e.g. ``"com.example.SlowTest,com.example.FlakyTest"``.

    Returns:
        Unique patterns in first-seen order.
    """
    return list(dict.fromkeys(raw.split(LIST_DELIMITER)))


def coerce_raw_value(value: Any) -> str:
    """Turn a resolved property value into the string form to parse.

    Lists (from YAML config files) are joined with the delimiter, ``None``
    becomes the empty string and other scalars are converted with ``str()``.
    """
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, (list, tuple)):
        return LIST_DELIMITER.join("" if item is None else str(item) for item in value)
    return str(value)


def is_valid_exclude_list(patterns: Sequence[str]) -> bool:
    """A list is usable if at least one pattern is not blank."""
    return any(pattern.strip() for pattern in patterns)


def drop_blank_patterns(patterns: Sequence[str]) -> List[str]:
    """Remove blank entries left by stray delimiters (``"A,"``, ``"A,,B"``)."""
    return [pattern for pattern in patterns if pattern.strip()]


def apply_exclusions(patterns: Sequence[str], tasks: Iterable[TestTask]) -> None:
    """Register every pattern on every task.

    Tasks are visited in discovery order, patterns in parsed order.

    Args:
        patterns: Parsed exclusion patterns.
        tasks: Test tasks to configure.
    """
    for task in tasks:
        for pattern in patterns:
            task.exclude_tests_matching(pattern)
        LOGGER.debug(f"Excluded {len(patterns)} pattern(s) from task '{task.name}'")
