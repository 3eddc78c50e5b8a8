# src/tusk/tasks/errors.py

"""
Tagged errors raised by the task store and the persistence layer.

Only the CLI entrypoint catches these; it maps each kind to a message and an exit code.
"""

from __future__ import annotations

from pathlib import Path


class TuskError(Exception):
    """Base class for every failure the CLI knows how to report."""


class InvalidInput(TuskError, ValueError):
    pass


class AccountNotFound(TuskError, LookupError):
    def __init__(self, account: str) -> None:
        super().__init__(f"account not found: {account!r}")
        self.account = account


class TaskNotFound(TuskError, LookupError):
    def __init__(self, account: str, task_id: int) -> None:
        super().__init__(f"task {task_id} not found in account {account!r}")
        self.account = account
        self.task_id = task_id


class CorruptState(TuskError):
    """The task data file exists but does not decode into a valid store."""

    def __init__(self, path: str | Path, reason: str) -> None:
        super().__init__(f"corrupt task data in {path}: {reason}")
        self.path = Path(path)
        self.reason = reason


class PersistenceError(TuskError):
    """Reading or writing the task data file failed at the OS level."""

    def __init__(self, path: str | Path, reason: str) -> None:
        super().__init__(f"cannot access task data {path}: {reason}")
        self.path = Path(path)
        self.reason = reason
