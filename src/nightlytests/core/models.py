"""Host capability interfaces.

The plugin never talks to a concrete build system. It needs a project that
exposes its configuration scope, its enclosing project and its test tasks,
and test tasks that accept exclusion patterns. Hosts (pytest, the
filesystem, in-memory fakes) implement these interfaces.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from fnmatch import fnmatchcase
from typing import Any, List, Mapping, Optional


class TestTask(ABC):
    """One configurable unit of test execution in the host build."""

    __test__ = False  # not a pytest test class

    @property
    @abstractmethod
    def name(self) -> str:
        """Task identifier (e.g., 'pytest', 'test')."""

    @abstractmethod
    def exclude_tests_matching(self, pattern: str) -> None:
        """Register a pattern; tests whose name matches it are not run.

        Args:
            pattern: Test name pattern, '*' matches any run of characters.
        """


class RecordingTestTask(TestTask):
    """Test task that records registered patterns and can match test ids.

    Used by hosts that enforce the exclusions themselves (or only report
    them), and by tests as an in-memory task handle.
    """

    def __init__(self, name: str) -> None:
        self._name = name
        self.excluded_patterns: List[str] = []

    @property
    def name(self) -> str:
        return self._name

    def exclude_tests_matching(self, pattern: str) -> None:
        self.excluded_patterns.append(pattern)

    def matches(self, test_id: str) -> bool:
        """Check whether a test identifier is excluded by any pattern.

        A pattern matches the identifier itself, or any identifier nested
        below it ('pkg.SlowTest' also excludes 'pkg.SlowTest.test_one').
        """
        for pattern in self.excluded_patterns:
            if not pattern:
                continue
            if fnmatchcase(test_id, pattern) or fnmatchcase(test_id, pattern + ".*"):
                return True
        return False

    def __repr__(self) -> str:
        return f"RecordingTestTask(name={self._name!r}, excluded_patterns={self.excluded_patterns!r})"


class Project(ABC):
    """A (sub-)project the plugin is applied to."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Human readable project identifier."""

    @property
    @abstractmethod
    def properties(self) -> Mapping[str, Any]:
        """Read-only local configuration scope."""

    @property
    def parent(self) -> Optional["Project"]:
        """Enclosing project, or None for a root project."""
        return None

    @property
    def root_project(self) -> "Project":
        """Top-most enclosing project (self for a root project)."""
        project: Project = self
        while project.parent is not None:
            project = project.parent
        return project

    @abstractmethod
    def test_tasks(self) -> List[TestTask]:
        """All test tasks belonging to this project, in discovery order."""
