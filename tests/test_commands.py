# tests/test_commands.py

from __future__ import annotations

import pytest

from tusk.cli.commands import (
    AddCommand,
    ClearCommand,
    CommandResult,
    CompleteCommand,
    DeleteCommand,
    ListCommand,
    UncompleteCommand,
    execute,
    parse_command,
    render_tasks,
)
from tusk.tasks.errors import AccountNotFound, TaskNotFound
from tusk.tasks.task_models import Task
from tusk.tasks.task_store import TaskStore


@pytest.mark.parametrize(
    ("argv", "expected"),
    [
        (["add", "work", "Book", "flight"], AddCommand("work", "Book flight")),
        (["add", "work", "Prepare presentation slides"], AddCommand("work", "Prepare presentation slides")),
        (["delete", "work", "2"], DeleteCommand("work", 2)),
        (["complete", "work", "1"], CompleteCommand("work", 1)),
        (["uncomplete", "work", "1"], UncompleteCommand("work", 1)),
        (["incomplete", "work", "1"], UncompleteCommand("work", 1)),
        (["list", "Work"], ListCommand("Work")),
        (["clear", "work"], ClearCommand("work")),
    ],
)
def test_parse_command(argv, expected) -> None:
    assert parse_command(argv) == expected


def test_parse_without_subcommand_returns_none() -> None:
    assert parse_command([]) is None


@pytest.mark.parametrize(
    "argv",
    [
        ["delete", "work", "abc"],
        ["complete", "work", "0"],
        ["complete", "work", "-3"],
        ["add", "work"],
        ["list"],
        ["rename", "work"],
    ],
)
def test_parse_rejects_bad_usage(argv, capsys) -> None:
    with pytest.raises(SystemExit) as exc:
        parse_command(argv)
    assert exc.value.code == 2
    assert "usage:" in capsys.readouterr().err


def test_execute_add_and_list() -> None:
    store = TaskStore()
    res = execute(store, AddCommand("work", "Book flight"))
    assert res.mutated is True
    assert res.message == "Task #1 added to account 'work'!"

    res = execute(store, ListCommand("work"))
    assert res.mutated is False
    assert res.message == "Tasks for account 'work':\n1. [ ] Book flight"


def test_execute_complete_reports_listing_and_change() -> None:
    store = TaskStore()
    store.add_task("work", "Prepare presentation slides")
    store.add_task("work", "Book flight")

    res = execute(store, CompleteCommand("work", 1))
    assert res.mutated is True
    assert res.message == (
        "Tasks for account 'work':\n"
        "1. [X] Prepare presentation slides\n"
        "2. [ ] Book flight"
    )

    again = execute(store, CompleteCommand("work", 1))
    assert again.mutated is False
    assert again.message == res.message

    assert execute(store, UncompleteCommand("work", 1)).mutated is True
    assert execute(store, UncompleteCommand("work", 1)).mutated is False


def test_execute_delete_and_clear() -> None:
    store = TaskStore()
    store.add_task("work", "a")
    store.add_task("work", "b")

    res = execute(store, DeleteCommand("work", 1))
    assert res == CommandResult("Task #1 deleted from account 'work'!", mutated=True)

    res = execute(store, ClearCommand("work"))
    assert res.message == "Cleared the account 'work'!"
    assert res.mutated is True
    assert execute(store, ListCommand("work")).message == "No tasks available for account 'work'!"


def test_execute_propagates_store_errors() -> None:
    store = TaskStore()
    with pytest.raises(AccountNotFound):
        execute(store, ListCommand("nope"))
    store.add_task("work", "x")
    with pytest.raises(TaskNotFound):
        execute(store, CompleteCommand("work", 42))


def test_execute_rejects_unknown_command_object() -> None:
    with pytest.raises(AssertionError):
        execute(TaskStore(), object())  # type: ignore[arg-type]


def test_render_tasks() -> None:
    assert render_tasks("a", []) == "No tasks available for account 'a'!"
    assert render_tasks("a", [Task(3, "x", True), Task(5, "y")]) == (
        "Tasks for account 'a':\n3. [X] x\n5. [ ] y"
    )
