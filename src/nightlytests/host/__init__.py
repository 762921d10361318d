"""Project hosts the plugin can be applied to.

- ``memory``: in-memory projects built from plain dictionaries.
- ``filesystem``: directories configured through ``.nightlytests.yml``.

The pytest host lives in ``nightlytests.pytest_plugin``.
"""

from nightlytests.host.filesystem import DirectoryProject, discover_project
from nightlytests.host.memory import InMemoryProject

__all__ = [
    "DirectoryProject",
    "InMemoryProject",
    "discover_project",
]
