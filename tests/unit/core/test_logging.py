"""Tests for nightlytests.core.logging."""

from __future__ import annotations

import logging

from nightlytests.core.logging import configure_logging, get_logger


class TestGetLogger:
    """Tests for get_logger function."""

    def test_module_logger_is_in_namespace(self) -> None:
        assert get_logger("nightlytests.plugin").name == "nightlytests.plugin"

    def test_foreign_name_is_prefixed(self) -> None:
        assert get_logger("helpers").name == "nightlytests.helpers"

    def test_root_logger(self) -> None:
        assert get_logger().name == "nightlytests"


class TestConfigureLogging:
    """Tests for configure_logging function."""

    def _level(self) -> int:
        return logging.getLogger("nightlytests").level

    def test_default_level_is_warning(self) -> None:
        configure_logging()
        assert self._level() == logging.WARNING

    def test_debug_wins(self) -> None:
        configure_logging(debug=True, verbose=True, quiet=True)
        assert self._level() == logging.DEBUG

    def test_verbose(self) -> None:
        configure_logging(verbose=True)
        assert self._level() == logging.INFO

    def test_quiet(self) -> None:
        configure_logging(quiet=True)
        assert self._level() == logging.ERROR

    def test_reconfiguring_does_not_stack_handlers(self) -> None:
        configure_logging()
        configure_logging(debug=True)
        logger = logging.getLogger("nightlytests")
        ours = [h for h in logger.handlers if getattr(h, "_nightlytests_handler", False)]
        assert len(ours) == 1
