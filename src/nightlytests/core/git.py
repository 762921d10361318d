"""Git helpers for locating the root project of a checkout."""

from __future__ import annotations

import subprocess
from pathlib import Path
from typing import Optional

from nightlytests.core.logging import get_logger

LOGGER = get_logger(__name__)


def get_git_root(path: Path) -> Optional[Path]:
    """Get the root directory of the git repository.

    Args:
        path: Path inside the repository.

    Returns:
        Path to git root, or None if not a git repository.
    """
    try:
        result = subprocess.run(
            ["git", "rev-parse", "--show-toplevel"],
            cwd=path,
            capture_output=True,
            text=True,
            timeout=5,
        )
    except (subprocess.SubprocessError, FileNotFoundError, OSError) as e:
        LOGGER.debug(f"git not usable in {path}: {e}")
        return None

    if result.returncode != 0:
        return None
    return Path(result.stdout.strip())
