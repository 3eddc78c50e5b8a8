# src/tusk/tasks/task_store.py

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import replace
from types import MappingProxyType

from .errors import AccountNotFound, InvalidInput, TaskNotFound
from .task_models import Account, Task


class TaskStore:
    """
    In-memory task store for one invocation.

    Accounts are keyed by exact, case-sensitive name and kept in insertion order.

    Account creation is asymmetric on purpose:
    - add_task creates a missing account
    - every other operation raises AccountNotFound for a missing account
      (auto-creating on list/clear would hide typos in account names)

    The store does no I/O and no logging: failures are raised to the caller.
    """

    def __init__(self, accounts: Iterable[Account] = ()) -> None:
        self._accounts: dict[str, Account] = {}
        for account in accounts:
            self._accounts[account.name] = account

    @property
    def accounts(self) -> Mapping[str, Account]:
        """Live accounts, for serialization only. Mutate through the operations below."""
        return MappingProxyType(self._accounts)

    def account_names(self) -> list[str]:
        return list(self._accounts)

    def has_account(self, name: str) -> bool:
        return name in self._accounts

    def get_account(self, name: str) -> Account:
        """Detached copy of an account; changing it does not affect the store."""
        acc = self._require_account(name)
        return Account(name=acc.name, tasks=[replace(t) for t in acc.tasks], next_id=acc.next_id)

    # ---- operations ----

    def add_task(self, account: str, description: str) -> Task:
        _check_account_name(account)
        if not isinstance(description, str) or not description.strip():
            raise InvalidInput("description is required")

        acc = self._accounts.get(account)
        if acc is None:
            acc = self._accounts[account] = Account(name=account)

        task = Task(id=acc.issue_id(), description=description.strip())
        acc.tasks.append(task)
        return replace(task)

    def delete_task(self, account: str, task_id: int) -> None:
        acc = self._require_account(account)
        task = self._require_task(acc, task_id)
        acc.tasks.remove(task)

    def complete_task(self, account: str, task_id: int) -> bool:
        """Mark a task done. Returns False if it already was (no-op)."""
        return self._set_completed(account, task_id, True)

    def uncomplete_task(self, account: str, task_id: int) -> bool:
        """Mark a task not done. Returns False if it already was (no-op)."""
        return self._set_completed(account, task_id, False)

    def list_tasks(self, account: str) -> list[Task]:
        acc = self._require_account(account)
        return [replace(t) for t in acc.tasks]

    def clear_tasks(self, account: str) -> None:
        # next_id is left alone so cleared ids are never reissued.
        self._require_account(account).tasks.clear()

    # ---- helpers ----

    def _set_completed(self, account: str, task_id: int, completed: bool) -> bool:
        acc = self._require_account(account)
        task = self._require_task(acc, task_id)
        if task.completed == completed:
            return False
        task.completed = completed
        return True

    def _require_account(self, name: str) -> Account:
        _check_account_name(name)
        acc = self._accounts.get(name)
        if acc is None:
            raise AccountNotFound(name)
        return acc

    @staticmethod
    def _require_task(acc: Account, task_id: int) -> Task:
        _check_task_id(task_id)
        task = acc.find_task(task_id)
        if task is None:
            raise TaskNotFound(acc.name, task_id)
        return task


def _check_account_name(name: str) -> None:
    if not isinstance(name, str) or not name.strip():
        raise InvalidInput("account name is required")


def _check_task_id(task_id: int) -> None:
    # bool is an int subclass; True must not pass as task #1.
    if isinstance(task_id, bool) or not isinstance(task_id, int) or task_id < 1:
        raise InvalidInput(f"task id must be a positive integer, got {task_id!r}")
