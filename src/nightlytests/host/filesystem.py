"""Filesystem project host.

A directory is a project: its ``.nightlytests.yml`` is the local scope and
every test framework detected in it is one test task. The enclosing project
is the repository root.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Optional

from nightlytests.config.loader import load_project_properties
from nightlytests.core.git import get_git_root
from nightlytests.core.logging import get_logger
from nightlytests.core.models import Project, RecordingTestTask, TestTask
from nightlytests.detection.frameworks import detect_test_frameworks

LOGGER = get_logger(__name__)


class DirectoryProject(Project):
    """Project backed by a directory on disk."""

    def __init__(self, path: Path, parent: Optional[Project] = None) -> None:
        self._path = path
        self._parent = parent
        self._properties: Optional[Dict[str, Any]] = None
        self._tasks: Optional[List[TestTask]] = None

    @property
    def path(self) -> Path:
        return self._path

    @property
    def name(self) -> str:
        return str(self._path)

    @property
    def properties(self) -> Dict[str, Any]:
        # Loaded lazily so a root project is only read when a lookup falls through
        if self._properties is None:
            self._properties = load_project_properties(self._path)
        return self._properties

    @property
    def parent(self) -> Optional[Project]:
        return self._parent

    def test_tasks(self) -> List[TestTask]:
        if self._tasks is None:
            self._tasks = [RecordingTestTask(name) for name in detect_test_frameworks(self._path)]
        return list(self._tasks)


def discover_project(path: Path, root: Optional[Path] = None) -> DirectoryProject:
    """Create the project for a directory together with its root project.

    Args:
        path: Project directory.
        root: Root project directory; defaults to the git toplevel.

    Returns:
        DirectoryProject whose parent is the root project when the root
        differs from ``path``.
    """
    path = path.resolve()
    root_path = root.resolve() if root is not None else get_git_root(path)

    parent: Optional[Project] = None
    if root_path is not None and root_path.resolve() != path:
        parent = DirectoryProject(root_path.resolve())
        LOGGER.debug(f"Root project for {path}: {root_path}")

    return DirectoryProject(path, parent=parent)
