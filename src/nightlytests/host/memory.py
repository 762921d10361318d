"""In-memory project host."""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional, Sequence

from nightlytests.core.models import Project, TestTask


class InMemoryProject(Project):
    """Project whose scope and tasks are supplied by the caller."""

    def __init__(
        self,
        name: str = "project",
        properties: Optional[Mapping[str, Any]] = None,
        parent: Optional[Project] = None,
        tasks: Optional[Sequence[TestTask]] = None,
    ) -> None:
        self._name = name
        self._properties: Dict[str, Any] = dict(properties or {})
        self._parent = parent
        self._tasks: List[TestTask] = list(tasks or [])

    @property
    def name(self) -> str:
        return self._name

    @property
    def properties(self) -> Mapping[str, Any]:
        return self._properties

    @property
    def parent(self) -> Optional[Project]:
        return self._parent

    def add_task(self, task: TestTask) -> None:
        self._tasks.append(task)

    def test_tasks(self) -> List[TestTask]:
        return list(self._tasks)

    def __repr__(self) -> str:
        return f"InMemoryProject(name={self._name!r})"
