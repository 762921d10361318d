"""NightlyTestsPlugin: keep nightly-only tests out of ordinary builds.

Applying the plugin to a project:
1. does nothing at all if BUILDSERVER marks a nightly build,
2. resolves ``plugins.nightlytests.listOfTests`` from the project or one of
   its enclosing projects,
3. parses it into a list of unique test patterns,
4. excludes these patterns from every test task of the project.

Configuration problems raise NightlyTestsError; nothing is applied then.
"""

from __future__ import annotations

from typing import List, Mapping, Optional

from nightlytests.config.models import KEY_LIST_OF_TESTS
from nightlytests.config.resolver import resolve_with_source, scope_chain
from nightlytests.core.logging import get_logger
from nightlytests.core.models import Project, TestTask
from nightlytests.detection.nightly import is_nightly_build
from nightlytests.errors import NightlyTestsError
from nightlytests.exclusions import (
    apply_exclusions,
    coerce_raw_value,
    drop_blank_patterns,
    is_valid_exclude_list,
    parse_exclude_list,
)

LOGGER = get_logger(__name__)


class NightlyTestsPlugin:
    """Configures test tasks so that nightly-only tests are skipped."""

    def __init__(self, environ: Optional[Mapping[str, str]] = None) -> None:
        """Initialize the plugin.

        Args:
            environ: Environment store used for nightly detection;
                defaults to ``os.environ`` at apply time.
        """
        self._environ = environ

    def apply(self, project: Project) -> None:
        """Apply the plugin to a project.

        Args:
            project: Project whose test tasks should be configured.

        Raises:
            NightlyTestsError: If the configuration is missing or empty, or
                the project has no test tasks.
        """
        if is_nightly_build(self._environ):
            LOGGER.info(f"Nightly build detected, running all tests of {project.name}")
            return

        patterns = self.read_exclude_list(project)
        tasks = self.find_test_tasks(project)

        apply_exclusions(patterns, tasks)
        LOGGER.info(
            f"Excluded {len(patterns)} nightly-only test pattern(s) from "
            f"{len(tasks)} test task(s) of {project.name}"
        )

    def read_exclude_list(self, project: Project) -> List[str]:
        """Resolve and validate the list of nightly-only tests.

        Args:
            project: Project to read the configuration from.

        Returns:
            Unique, parsed test patterns.

        Raises:
            NightlyTestsError: MISSING_CONFIGURATION or INVALID_CONFIGURATION.
        """
        resolved = resolve_with_source(scope_chain(project), KEY_LIST_OF_TESTS)
        if resolved is None:
            raise NightlyTestsError.missing_configuration(
                f"Plugin property '{KEY_LIST_OF_TESTS}' missing in the properties "
                f"of {project.name} and its enclosing projects!"
            )

        patterns = parse_exclude_list(coerce_raw_value(resolved.value))
        if not is_valid_exclude_list(patterns):
            raise NightlyTestsError.invalid_configuration(
                f"Plugin property '{KEY_LIST_OF_TESTS}' empty or not correctly set "
                f"(from {resolved.source})!"
            )

        patterns = drop_blank_patterns(patterns)
        LOGGER.debug(f"Read {len(patterns)} test pattern(s) from {resolved.source}")
        return patterns

    def find_test_tasks(self, project: Project) -> List[TestTask]:
        """Locate the test tasks of a project.

        Raises:
            NightlyTestsError: NO_TEST_TASKS_FOUND if there are none.
        """
        tasks = project.test_tasks()
        if not tasks:
            raise NightlyTestsError.no_test_tasks_found(
                f"No test tasks found in {project.name}, therefore applying this plugin is not necessary!"
            )
        return tasks
