"""CLI runner dispatching to command implementations."""

from __future__ import annotations

from typing import Dict, Iterable, Optional

from importlib.metadata import PackageNotFoundError, version

from nightlytests.cli.arguments import build_parser
from nightlytests.cli.commands import Command
from nightlytests.cli.commands.check import CheckCommand
from nightlytests.cli.exit_codes import EXIT_SUCCESS
from nightlytests.core.logging import configure_logging, get_logger

LOGGER = get_logger(__name__)


def get_version() -> str:
    try:
        return version("nightlytests")
    except PackageNotFoundError:
        # Fallback for editable installs that have not yet built metadata.
        from nightlytests import __version__

        return __version__


class CLIRunner:
    """Parses arguments, configures logging and runs a command."""

    def __init__(self) -> None:
        self.parser = build_parser()
        self.commands: Dict[str, Command] = {
            "check": CheckCommand(),
        }

    def run(self, argv: Optional[Iterable[str]] = None) -> int:
        """Run the CLI.

        Args:
            argv: Command-line arguments (defaults to sys.argv).

        Returns:
            Exit code.
        """
        argv_list = list(argv) if argv is not None else None
        args = self.parser.parse_args(argv_list)

        # Configure logging as early as possible.
        configure_logging(debug=args.debug, verbose=args.verbose, quiet=args.quiet)

        if args.version:
            print(get_version())
            return EXIT_SUCCESS

        command = self.commands.get(args.command or "")
        if command is None:
            self.parser.print_help()
            return EXIT_SUCCESS

        LOGGER.debug(f"Running command '{command.name}'")
        return command.execute(args)
