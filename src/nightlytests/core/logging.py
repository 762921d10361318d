"""Logging helpers for nightlytests.

Every module obtains its logger through :func:`get_logger`; the CLI calls
:func:`configure_logging` once, as early as possible.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

ROOT_LOGGER_NAME = "nightlytests"
LOG_FORMAT = "%(levelname)s [%(name)s] %(message)s"


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a logger inside the ``nightlytests`` namespace.

    Args:
        name: Module name (usually ``__name__``).

    Returns:
        Logger instance.
    """
    if not name or name == ROOT_LOGGER_NAME:
        return logging.getLogger(ROOT_LOGGER_NAME)
    if not name.startswith(ROOT_LOGGER_NAME + "."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


def configure_logging(
    debug: bool = False,
    verbose: bool = False,
    quiet: bool = False,
) -> None:
    """Configure the package logger for command-line use.

    Precedence: debug > verbose > quiet > default (warnings).

    Args:
        debug: Log everything down to DEBUG.
        verbose: Log INFO and above.
        quiet: Log errors only.
    """
    if debug:
        level = logging.DEBUG
    elif verbose:
        level = logging.INFO
    elif quiet:
        level = logging.ERROR
    else:
        level = logging.WARNING

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(level)

    # Replace our own handler on reconfiguration, leave foreign handlers alone
    for handler in list(logger.handlers):
        if getattr(handler, "_nightlytests_handler", False):
            logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler._nightlytests_handler = True  # type: ignore[attr-defined]
    logger.addHandler(handler)
    logger.propagate = False
