"""nightlytests - keep nightly-only tests out of ordinary builds.

Test patterns listed under ``plugins.nightlytests.listOfTests`` are excluded
from every test task of a project unless the ``BUILDSERVER`` environment
variable marks the build as a nightly build.
"""

from __future__ import annotations

from nightlytests.errors import ErrorKind, NightlyTestsError
from nightlytests.plugin import NightlyTestsPlugin

__version__ = "1.0.0"

__all__ = [
    "ErrorKind",
    "NightlyTestsError",
    "NightlyTestsPlugin",
    "__version__",
]
