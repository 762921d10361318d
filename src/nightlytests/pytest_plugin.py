"""pytest integration.

Registered through the ``pytest11`` entry point and activated with
``--nightly-tests`` or ``nightlytests_enabled = true`` in the ini file.
The pytest session is the project's only test task; collected items
matching a configured pattern are deselected.

Patterns are matched against the node id
(``tests/test_api.py::TestSlow::test_sync``) and its dotted form
(``tests.test_api.TestSlow.test_sync``). A pattern naming a module or a
class also excludes everything inside it.
"""

from __future__ import annotations

from fnmatch import fnmatchcase
from typing import Any, Dict, List, Mapping, Optional

import pytest

from nightlytests.config.loader import ConfigError
from nightlytests.config.models import KEY_LIST_OF_TESTS
from nightlytests.core.logging import get_logger
from nightlytests.core.models import Project, TestTask
from nightlytests.errors import NightlyTestsError
from nightlytests.host.filesystem import discover_project
from nightlytests.plugin import NightlyTestsPlugin

LOGGER = get_logger(__name__)

SESSION_TASK_KEY = pytest.StashKey["PytestSessionTask"]()


def dotted_test_id(nodeid: str) -> str:
    """Convert a pytest node id into a dotted, class-name-like identifier."""
    path, _, rest = nodeid.partition("::")
    if path.endswith(".py"):
        path = path[:-3]
    dotted = path.replace("\\", ".").replace("/", ".")
    if rest:
        dotted = f"{dotted}.{rest.replace('::', '.')}"
    return dotted


def matches_pattern(pattern: str, nodeid: str) -> bool:
    """Check whether a collected test is excluded by a pattern."""
    if not pattern:
        return False
    dotted = dotted_test_id(nodeid)
    return (
        fnmatchcase(nodeid, pattern)
        or fnmatchcase(nodeid, pattern + "::*")
        or fnmatchcase(dotted, pattern)
        or fnmatchcase(dotted, pattern + ".*")
    )


class PytestSessionTask(TestTask):
    """The pytest session seen as a single test task."""

    def __init__(self, name: str = "pytest") -> None:
        self._name = name
        self.excluded_patterns: List[str] = []

    @property
    def name(self) -> str:
        return self._name

    def exclude_tests_matching(self, pattern: str) -> None:
        self.excluded_patterns.append(pattern)

    def is_excluded(self, nodeid: str) -> bool:
        return any(matches_pattern(pattern, nodeid) for pattern in self.excluded_patterns)

    def deselect(self, config: pytest.Config, items: List[pytest.Item]) -> None:
        """Remove excluded items in place and report them as deselected."""
        if not self.excluded_patterns:
            return

        kept: List[pytest.Item] = []
        deselected: List[pytest.Item] = []
        for item in items:
            if self.is_excluded(item.nodeid):
                deselected.append(item)
            else:
                kept.append(item)

        if deselected:
            LOGGER.info(f"Deselected {len(deselected)} nightly-only test(s)")
            config.hook.pytest_deselected(items=deselected)
            items[:] = kept


class PytestProject(Project):
    """Project view of a pytest run.

    The local scope holds the test list given on the command line or in the
    ini file; the enclosing project is the rootdir on disk.
    """

    def __init__(self, config: pytest.Config, parent: Optional[Project] = None) -> None:
        self._config = config
        self._parent = parent
        self._task = PytestSessionTask()

    @property
    def name(self) -> str:
        return f"pytest:{self._config.rootpath}"

    @property
    def properties(self) -> Mapping[str, Any]:
        properties: Dict[str, Any] = {}
        value = self._config.getoption("nightlytests_list", default=None)
        if value is None:
            value = self._config.getini("nightlytests_list_of_tests") or None
        if value is not None:
            properties[KEY_LIST_OF_TESTS] = value
        return properties

    @property
    def parent(self) -> Optional[Project]:
        return self._parent

    @property
    def session_task(self) -> PytestSessionTask:
        return self._task

    def test_tasks(self) -> List[TestTask]:
        return [self._task]


def _is_enabled(config: pytest.Config) -> bool:
    return bool(config.getoption("nightlytests_enabled", default=False)) or bool(
        config.getini("nightlytests_enabled")
    )


def pytest_addoption(parser: pytest.Parser) -> None:
    group = parser.getgroup("nightlytests", "nightly-only tests")
    group.addoption(
        "--nightly-tests",
        action="store_true",
        default=False,
        dest="nightlytests_enabled",
        help="Skip nightly-only tests unless BUILDSERVER marks a nightly build.",
    )
    group.addoption(
        "--nightly-tests-list",
        action="store",
        default=None,
        dest="nightlytests_list",
        metavar="PATTERNS",
        help=f"Comma separated nightly-only test patterns (overrides '{KEY_LIST_OF_TESTS}').",
    )
    parser.addini(
        "nightlytests_enabled",
        type="bool",
        default=False,
        help="Enable the nightlytests plugin.",
    )
    parser.addini(
        "nightlytests_list_of_tests",
        default="",
        help="Comma separated nightly-only test patterns.",
    )


def pytest_configure(config: pytest.Config) -> None:
    if not _is_enabled(config):
        return

    project = PytestProject(config, parent=discover_project(config.rootpath))
    try:
        NightlyTestsPlugin().apply(project)
    except NightlyTestsError as e:
        raise pytest.UsageError(f"nightlytests: {e.message}") from e
    except ConfigError as e:
        raise pytest.UsageError(f"nightlytests: {e}") from e

    config.stash[SESSION_TASK_KEY] = project.session_task


def pytest_collection_modifyitems(config: pytest.Config, items: List[pytest.Item]) -> None:
    task = config.stash.get(SESSION_TASK_KEY, None)
    if task is not None:
        task.deselect(config, items)
