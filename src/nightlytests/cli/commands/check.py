"""Check command implementation."""

from __future__ import annotations

import json
from argparse import Namespace
from typing import Any, Dict, List, Optional

from nightlytests.cli.commands import Command
from nightlytests.cli.exit_codes import EXIT_CODES_BY_KIND, EXIT_INVALID_USAGE, EXIT_SUCCESS
from nightlytests.config.loader import ConfigError
from nightlytests.config.models import KEY_LIST_OF_TESTS
from nightlytests.config.resolver import resolve_with_source, scope_chain
from nightlytests.core.logging import get_logger
from nightlytests.core.models import Project, RecordingTestTask
from nightlytests.detection.nightly import is_nightly_build
from nightlytests.errors import NightlyTestsError
from nightlytests.host.filesystem import discover_project
from nightlytests.plugin import NightlyTestsPlugin

LOGGER = get_logger(__name__)


class CheckCommand(Command):
    """Applies the plugin to a project directory and reports the outcome."""

    @property
    def name(self) -> str:
        """Command identifier."""
        return "check"

    def execute(self, args: Namespace) -> int:
        """Execute the check command.

        Args:
            args: Parsed command-line arguments (path, root, format).

        Returns:
            Exit code: 0 on success, the error kind's code otherwise.
        """
        output_format = getattr(args, "format", "text")
        path = args.path.resolve()
        if not path.is_dir():
            LOGGER.error(f"Project directory does not exist: {path}")
            return EXIT_INVALID_USAGE

        root = getattr(args, "root", None)
        if root is not None and not root.is_dir():
            LOGGER.error(f"Root directory does not exist: {root}")
            return EXIT_INVALID_USAGE

        project = discover_project(path, root=root)

        if is_nightly_build():
            self._report(output_format, project, nightly=True)
            return EXIT_SUCCESS

        try:
            NightlyTestsPlugin().apply(project)
        except NightlyTestsError as e:
            LOGGER.error(e.message)
            if output_format == "json":
                print(json.dumps({"project": project.name, "error": e.kind.value, "message": e.message}, indent=2))
            return EXIT_CODES_BY_KIND[e.kind]
        except ConfigError as e:
            LOGGER.error(str(e))
            return EXIT_INVALID_USAGE

        resolved = resolve_with_source(scope_chain(project), KEY_LIST_OF_TESTS)
        self._report(
            output_format,
            project,
            nightly=False,
            source=resolved.source if resolved else None,
        )
        return EXIT_SUCCESS

    def _report(
        self,
        output_format: str,
        project: Project,
        nightly: bool,
        source: Optional[str] = None,
    ) -> None:
        tasks: Dict[str, List[str]] = {}
        if not nightly:
            for task in project.test_tasks():
                tasks[task.name] = list(task.excluded_patterns) if isinstance(task, RecordingTestTask) else []

        if output_format == "json":
            data: Dict[str, Any] = {
                "project": project.name,
                "nightly": nightly,
                "source": source,
                "tasks": tasks,
            }
            print(json.dumps(data, indent=2))
            return

        print(f"Project: {project.name}")
        if nightly:
            print("Nightly build: yes (all tests run)")
            return

        print("Nightly build: no")
        print(f"Configuration: {KEY_LIST_OF_TESTS} (from {source})")
        print("Excluded tests:")
        for task_name, patterns in tasks.items():
            print(f"  {task_name}:")
            for pattern in patterns:
                print(f"    {pattern}")
