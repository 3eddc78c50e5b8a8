# src/tusk/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(slots=True)
class Task:
    id: int
    description: str
    completed: bool = False


@dataclass(slots=True)
class Account:
    """
    Named bucket of tasks.

    Notes:
    - tasks keep insertion order (that is the display order)
    - next_id only ever grows; ids of deleted/cleared tasks are never reissued
    """

    name: str
    tasks: list[Task] = field(default_factory=list)
    next_id: int = 1

    def find_task(self, task_id: int) -> Task | None:
        for task in self.tasks:
            if task.id == task_id:
                return task
        return None

    def issue_id(self) -> int:
        task_id = self.next_id
        self.next_id += 1
        return task_id
