"""nightlytests CLI package.

This package provides the command-line interface for nightlytests.
"""

from __future__ import annotations

from typing import Iterable, Optional

from nightlytests.cli.arguments import build_parser
from nightlytests.cli.exit_codes import (
    EXIT_INVALID_CONFIGURATION,
    EXIT_INVALID_USAGE,
    EXIT_MISSING_CONFIGURATION,
    EXIT_NO_TEST_TASKS,
    EXIT_SUCCESS,
)
from nightlytests.cli.runner import CLIRunner, get_version


def main(argv: Optional[Iterable[str]] = None) -> int:
    """CLI entrypoint.

    Returns an exit code suitable for use as a console script.

    Args:
        argv: Command-line arguments (defaults to sys.argv).

    Returns:
        Exit code.
    """
    runner = CLIRunner()
    return runner.run(argv)


__all__ = [
    "main",
    "build_parser",
    "get_version",
    "CLIRunner",
    "EXIT_SUCCESS",
    "EXIT_MISSING_CONFIGURATION",
    "EXIT_INVALID_CONFIGURATION",
    "EXIT_NO_TEST_TASKS",
    "EXIT_INVALID_USAGE",
]

