# src/tusk/cli/main.py

"""
CLI entrypoint.

One invocation = one command:
load the store -> execute the command -> save if it changed -> print -> exit code.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Sequence

from ..config import get_settings
from ..core.ports import StateRepo
from ..tasks.errors import (
    AccountNotFound,
    CorruptState,
    InvalidInput,
    PersistenceError,
    TaskNotFound,
    TuskError,
)
from .bootstrap import configure_logging, create_state_repo
from .commands import build_parser, execute, parse_command

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_INVALID_INPUT = 2
EXIT_ACCOUNT_NOT_FOUND = 3
EXIT_TASK_NOT_FOUND = 4
EXIT_CORRUPT_STATE = 5
EXIT_PERSISTENCE_ERROR = 6


def describe_error(err: TuskError) -> tuple[str, int]:
    """Map a store/persistence error to a user-facing message and an exit code."""
    if isinstance(err, InvalidInput):
        return f"Invalid input: {err}", EXIT_INVALID_INPUT
    if isinstance(err, AccountNotFound):
        return (
            f"Account '{err.account}' not found. Add a task to create it first.",
            EXIT_ACCOUNT_NOT_FOUND,
        )
    if isinstance(err, TaskNotFound):
        return f"No such task #{err.task_id} in account '{err.account}'.", EXIT_TASK_NOT_FOUND
    if isinstance(err, CorruptState):
        return (
            f"Task data file {err.path} is unreadable: {err.reason}.\n"
            "Please inspect or move the file aside; it was left untouched.",
            EXIT_CORRUPT_STATE,
        )
    if isinstance(err, PersistenceError):
        return (
            f"Could not access task data file {err.path}: {err.reason}.\n"
            "The command was NOT saved.",
            EXIT_PERSISTENCE_ERROR,
        )
    return f"Error: {err}", 1


def main(argv: Sequence[str] | None = None, *, settings=None, repo: StateRepo | None = None) -> int:
    if settings is None:
        settings = get_settings()
    if argv is None:
        argv = sys.argv[1:]

    configure_logging(settings)

    parser = build_parser(prog=getattr(settings, "app_name", "tusk"))
    command = parse_command(argv, parser)
    if command is None:
        parser.print_help()
        return EXIT_OK

    if repo is None:
        repo = create_state_repo(settings=settings)

    try:
        store = repo.load()
        result = execute(store, command)
        if result.mutated:
            repo.save(store)
        else:
            logger.debug("Store unchanged; skipping save.")
    except TuskError as e:
        logger.debug("Command %r failed", command, exc_info=True)
        message, code = describe_error(e)
        print(message, file=sys.stderr)
        return code

    print(result.message)
    return EXIT_OK


def run() -> None:
    """Console-script entrypoint."""
    sys.exit(main())


if __name__ == "__main__":
    run()
