# src/tusk/tasks/persistence.py

"""
JSON file persistence for the task store.

The whole store is read once at startup and written back in full after a mutation.

File format (version 1):
    {"version": 1,
     "accounts": [{"name": ..., "next_id": ..., "tasks": [{"id", "description", "completed"}]}]}

Files written by the original tusk (a bare {name: {"name", "tasks", "subaccounts"}} object
without ids; an account may be named "version") are migrated on load: ids 1..n in
stored order, next_id = n + 1.

Writes are atomic (temp file + fsync + os.replace), so an interrupted save leaves the
previous file intact.

NOTE: there is no file locking. Two tusk processes racing on the same file can lose
an update; run one invocation at a time.
"""

from __future__ import annotations

import contextlib
import json
import logging
import os
from pathlib import Path
from typing import Any

from .errors import CorruptState, PersistenceError
from .task_models import Account, Task
from .task_store import TaskStore

logger = logging.getLogger(__name__)

FORMAT_VERSION = 1


class JsonStateFile:
    """Load/save a TaskStore as a single JSON document."""

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> TaskStore:
        try:
            raw = self._path.read_bytes()
        except FileNotFoundError:
            logger.debug("No task data at %s; starting with an empty store.", self._path)
            return TaskStore()
        except OSError as e:
            raise PersistenceError(self._path, e.strerror or str(e)) from e

        try:
            data = json.loads(raw.decode("utf-8"))
        except UnicodeDecodeError as e:
            raise CorruptState(self._path, "file is not valid UTF-8") from e
        except json.JSONDecodeError as e:
            raise CorruptState(self._path, f"invalid JSON ({e.msg} at line {e.lineno})") from e

        try:
            accounts = decode_state(data)
        except ValueError as e:
            raise CorruptState(self._path, str(e)) from e

        store = TaskStore(accounts)
        logger.info("Loaded task data: %d accounts from %s", len(accounts), self._path)
        return store

    def save(self, store: TaskStore) -> None:
        payload = json.dumps(encode_state(store), ensure_ascii=False, indent=2) + "\n"
        tmp = self._path.with_name(self._path.name + ".tmp")
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            with open(tmp, "w", encoding="utf-8") as f:
                f.write(payload)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp, self._path)
        except OSError as e:
            with contextlib.suppress(OSError):
                tmp.unlink()
            raise PersistenceError(self._path, e.strerror or str(e)) from e

        logger.debug("Saved task data: %d accounts to %s", len(store.accounts), self._path)


# ---- encoding ----


def encode_state(store: TaskStore) -> dict[str, Any]:
    return {
        "version": FORMAT_VERSION,
        "accounts": [
            {
                "name": acc.name,
                "next_id": acc.next_id,
                "tasks": [
                    {"id": t.id, "description": t.description, "completed": t.completed}
                    for t in acc.tasks
                ],
            }
            for acc in store.accounts.values()
        ],
    }


def decode_state(data: Any) -> list[Account]:
    """
    Turn a parsed JSON document into validated accounts.

    Raises ValueError describing the first problem found.
    """
    if not isinstance(data, dict):
        raise ValueError("top-level value must be an object")

    # Legacy files are keyed by account name, so "version" may be an account there.
    version = data.get("version")
    if isinstance(version, bool) or not isinstance(version, int) or "accounts" not in data:
        return _decode_legacy(data)

    if version != FORMAT_VERSION:
        raise ValueError(f"unsupported format version {version!r}")

    raw_accounts = data.get("accounts")
    if not isinstance(raw_accounts, list):
        raise ValueError("'accounts' must be a list")

    accounts: list[Account] = []
    seen: set[str] = set()
    for raw in raw_accounts:
        acc = _decode_account(raw)
        if acc.name in seen:
            raise ValueError(f"duplicate account {acc.name!r}")
        seen.add(acc.name)
        accounts.append(acc)
    return accounts


def _decode_account(raw: Any) -> Account:
    if not isinstance(raw, dict):
        raise ValueError("account entry must be an object")

    name = _account_name(raw.get("name"))
    next_id = raw.get("next_id")
    if not _is_positive_int(next_id):
        raise ValueError(f"account {name!r}: next_id must be a positive integer")

    raw_tasks = raw.get("tasks")
    if not isinstance(raw_tasks, list):
        raise ValueError(f"account {name!r}: 'tasks' must be a list")

    tasks: list[Task] = []
    ids: set[int] = set()
    for raw_task in raw_tasks:
        if not isinstance(raw_task, dict):
            raise ValueError(f"account {name!r}: task entry must be an object")
        task_id = raw_task.get("id")
        if not _is_positive_int(task_id):
            raise ValueError(f"account {name!r}: task id must be a positive integer")
        if task_id in ids:
            raise ValueError(f"account {name!r}: duplicate task id {task_id}")
        if task_id >= next_id:
            raise ValueError(f"account {name!r}: task id {task_id} is not below next_id {next_id}")
        ids.add(task_id)
        tasks.append(_decode_task(name, raw_task, task_id))

    return Account(name=name, tasks=tasks, next_id=next_id)


def _decode_legacy(data: dict[str, Any]) -> list[Account]:
    accounts: list[Account] = []
    for key, raw in data.items():
        if not isinstance(raw, dict):
            raise ValueError(f"legacy account {key!r} must be an object")
        name = _account_name(raw.get("name", key))
        if name != key:
            raise ValueError(f"legacy account key {key!r} does not match name {name!r}")
        raw_tasks = raw.get("tasks", [])
        if not isinstance(raw_tasks, list):
            raise ValueError(f"legacy account {name!r}: 'tasks' must be a list")

        tasks: list[Task] = []
        for task_id, raw_task in enumerate(raw_tasks, start=1):
            if not isinstance(raw_task, dict):
                raise ValueError(f"legacy account {name!r}: task entry must be an object")
            tasks.append(_decode_task(name, raw_task, task_id))
        accounts.append(Account(name=name, tasks=tasks, next_id=len(tasks) + 1))

    logger.info("Migrating legacy task data (%d accounts) to format v%d", len(accounts), FORMAT_VERSION)
    return accounts


def _decode_task(account: str, raw: dict[str, Any], task_id: int) -> Task:
    description = raw.get("description")
    if not isinstance(description, str) or not description.strip():
        raise ValueError(f"account {account!r}: task {task_id} has no description")
    completed = raw.get("completed", False)
    if not isinstance(completed, bool):
        raise ValueError(f"account {account!r}: task {task_id} 'completed' must be a boolean")
    return Task(id=task_id, description=description, completed=completed)


def _account_name(value: Any) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValueError("account name must be a non-empty string")
    return value


def _is_positive_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value > 0
