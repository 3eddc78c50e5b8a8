# src/tusk/cli/commands.py

"""
Command decoding and execution.

argv is decoded once into one of a closed set of command dataclasses;
execute() handles each case exactly once and returns what to print and whether
the store changed (and therefore needs saving).
"""

from __future__ import annotations

import argparse
import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import assert_never

from ..tasks.task_models import Task
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)

WELCOME = """\
Welcome to TUSK!

This CLI app helps you manage your tasks across different accounts.
An account is created by adding its first task; every other command
needs an existing account (names are case-sensitive).
"""

EPILOG = """\
examples:
  tusk add work "Prepare presentation slides"
  tusk complete work 1
  tusk list work
  tusk clear work

Task ids are never reused within an account, even after delete or clear.
Run one tusk at a time: concurrent invocations can overwrite each other.

Enjoy managing your tasks efficiently with TUSK :)!
"""


@dataclass(frozen=True, slots=True)
class AddCommand:
    account: str
    description: str


@dataclass(frozen=True, slots=True)
class DeleteCommand:
    account: str
    task_id: int


@dataclass(frozen=True, slots=True)
class CompleteCommand:
    account: str
    task_id: int


@dataclass(frozen=True, slots=True)
class UncompleteCommand:
    account: str
    task_id: int


@dataclass(frozen=True, slots=True)
class ListCommand:
    account: str


@dataclass(frozen=True, slots=True)
class ClearCommand:
    account: str


Command = (
    AddCommand | DeleteCommand | CompleteCommand | UncompleteCommand | ListCommand | ClearCommand
)


@dataclass(frozen=True, slots=True)
class CommandResult:
    message: str
    mutated: bool


# ---- decoding ----


def _task_id(raw: str) -> int:
    try:
        value = int(raw)
    except ValueError:
        raise argparse.ArgumentTypeError(f"task id must be a number, got {raw!r}") from None
    if value < 1:
        raise argparse.ArgumentTypeError(f"task id must be positive, got {value}")
    return value


def build_parser(prog: str = "tusk") -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=prog,
        description=WELCOME,
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    sub = parser.add_subparsers(dest="command", metavar="SUBCOMMAND")

    p = sub.add_parser("add", help="Add a new task to an account (creates the account)")
    p.add_argument("account")
    p.add_argument("description", nargs="+", help="task text; several words are joined")

    p = sub.add_parser("delete", help="Delete a task from an account")
    p.add_argument("account")
    p.add_argument("task_id", type=_task_id, metavar="id")

    p = sub.add_parser("complete", help="Mark a task as completed")
    p.add_argument("account")
    p.add_argument("task_id", type=_task_id, metavar="id")

    p = sub.add_parser(
        "uncomplete", aliases=["incomplete"], help="Mark a completed task as incomplete"
    )
    p.add_argument("account")
    p.add_argument("task_id", type=_task_id, metavar="id")

    p = sub.add_parser("list", help="List all tasks for an account")
    p.add_argument("account")

    p = sub.add_parser("clear", help="Clear all tasks for an account")
    p.add_argument("account")

    return parser


def parse_command(argv: Sequence[str], parser: argparse.ArgumentParser | None = None) -> Command | None:
    """
    Decode argv into a Command.

    Returns None when no subcommand was given (caller prints help).
    Usage errors exit via argparse (SystemExit, code 2).
    """
    parser = parser or build_parser()
    ns = parser.parse_args(list(argv))

    match ns.command:
        case None:
            return None
        case "add":
            return AddCommand(ns.account, " ".join(ns.description))
        case "delete":
            return DeleteCommand(ns.account, ns.task_id)
        case "complete":
            return CompleteCommand(ns.account, ns.task_id)
        case "uncomplete" | "incomplete":
            return UncompleteCommand(ns.account, ns.task_id)
        case "list":
            return ListCommand(ns.account)
        case "clear":
            return ClearCommand(ns.account)
        case other:
            raise AssertionError(f"unhandled subcommand {other!r}")


# ---- execution ----


def execute(store: TaskStore, command: Command) -> CommandResult:
    """Run one command against the store. Store errors propagate unchanged."""
    logger.debug("Executing %r", command)

    match command:
        case AddCommand(account, description):
            task = store.add_task(account, description)
            return CommandResult(f"Task #{task.id} added to account '{account}'!", mutated=True)

        case DeleteCommand(account, task_id):
            store.delete_task(account, task_id)
            return CommandResult(f"Task #{task_id} deleted from account '{account}'!", mutated=True)

        case CompleteCommand(account, task_id):
            changed = store.complete_task(account, task_id)
            return CommandResult(render_tasks(account, store.list_tasks(account)), mutated=changed)

        case UncompleteCommand(account, task_id):
            changed = store.uncomplete_task(account, task_id)
            return CommandResult(render_tasks(account, store.list_tasks(account)), mutated=changed)

        case ListCommand(account):
            return CommandResult(render_tasks(account, store.list_tasks(account)), mutated=False)

        case ClearCommand(account):
            store.clear_tasks(account)
            return CommandResult(f"Cleared the account '{account}'!", mutated=True)

        case _:
            assert_never(command)


def render_tasks(account: str, tasks: Sequence[Task]) -> str:
    if not tasks:
        return f"No tasks available for account '{account}'!"
    lines = [f"Tasks for account '{account}':"]
    for t in tasks:
        lines.append(f"{t.id}. [{'X' if t.completed else ' '}] {t.description}")
    return "\n".join(lines)
