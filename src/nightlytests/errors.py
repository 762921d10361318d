"""Error type raised when the plugin cannot be applied to a project."""

from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    """Reasons why applying the plugin failed."""

    MISSING_CONFIGURATION = "missing_configuration"
    INVALID_CONFIGURATION = "invalid_configuration"
    NO_TEST_TASKS_FOUND = "no_test_tasks_found"


class NightlyTestsError(Exception):
    """Fatal configuration error for a single apply invocation.

    There is one error type; callers branch on ``kind``.
    """

    def __init__(self, kind: ErrorKind, message: str) -> None:
        super().__init__(message)
        self.kind = kind
        self.message = message

    def __repr__(self) -> str:
        return f"NightlyTestsError(kind={self.kind.value!r}, message={self.message!r})"

    @classmethod
    def missing_configuration(cls, message: str) -> "NightlyTestsError":
        return cls(ErrorKind.MISSING_CONFIGURATION, message)

    @classmethod
    def invalid_configuration(cls, message: str) -> "NightlyTestsError":
        return cls(ErrorKind.INVALID_CONFIGURATION, message)

    @classmethod
    def no_test_tasks_found(cls, message: str) -> "NightlyTestsError":
        return cls(ErrorKind.NO_TEST_TASKS_FOUND, message)
