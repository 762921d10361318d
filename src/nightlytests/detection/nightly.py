"""Nightly build detection."""

from __future__ import annotations

import os
from typing import Mapping, Optional

from nightlytests.config.models import ENV_BUILDSERVER, NIGHTLY_MARKER


def is_nightly_build(environ: Optional[Mapping[str, str]] = None) -> bool:
    """Check whether the current build is a nightly build.

    Args:
        environ: Environment store to read; defaults to ``os.environ``.

    Returns:
        True if BUILDSERVER is set and contains "nightly" in any casing.
    """
    store = os.environ if environ is None else environ
    value = store.get(ENV_BUILDSERVER)
    if value is None:
        return False
    return NIGHTLY_MARKER in str(value).lower()
