"""Detection of the build type and of a project's test frameworks."""

from nightlytests.detection.frameworks import detect_test_frameworks
from nightlytests.detection.nightly import is_nightly_build

__all__ = [
    "detect_test_frameworks",
    "is_nightly_build",
]
