"""Exit codes for the nightlytests CLI.

- 0: Success (exclusions applied, or nightly build detected)
- 1: Missing configuration
- 2: Invalid configuration
- 3: No test tasks found
- 4: Invalid usage (bad arguments, unreadable config file)
"""

from __future__ import annotations

from nightlytests.errors import ErrorKind

EXIT_SUCCESS = 0
EXIT_MISSING_CONFIGURATION = 1
EXIT_INVALID_CONFIGURATION = 2
EXIT_NO_TEST_TASKS = 3
EXIT_INVALID_USAGE = 4

EXIT_CODES_BY_KIND = {
    ErrorKind.MISSING_CONFIGURATION: EXIT_MISSING_CONFIGURATION,
    ErrorKind.INVALID_CONFIGURATION: EXIT_INVALID_CONFIGURATION,
    ErrorKind.NO_TEST_TASKS_FOUND: EXIT_NO_TEST_TASKS,
}
