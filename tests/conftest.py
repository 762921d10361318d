"""Shared fixtures for the nightlytests test suite."""

from __future__ import annotations

import logging

import pytest

pytest_plugins = ["pytester"]


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Undo configure_logging() calls made by CLI tests."""
    logger = logging.getLogger("nightlytests")
    yield
    for handler in list(logger.handlers):
        if getattr(handler, "_nightlytests_handler", False):
            logger.removeHandler(handler)
    logger.propagate = True
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def no_buildserver(monkeypatch: pytest.MonkeyPatch) -> None:
    """Make sure the test run itself is not treated as a nightly build."""
    monkeypatch.delenv("BUILDSERVER", raising=False)
