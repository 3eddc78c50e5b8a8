# src/tusk/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the CLI.

The CLI depends on Protocols instead of concrete implementations.
This keeps storage swappable and makes testing easier.
"""

from typing import Protocol

from ..tasks.task_store import TaskStore


class StateRepo(Protocol):
    """
    Durable home of the whole TaskStore.

    load() returns an empty store when nothing was saved yet.
    Both methods raise CorruptState / PersistenceError on failure.
    """

    def load(self) -> TaskStore: ...

    def save(self, store: TaskStore) -> None: ...
