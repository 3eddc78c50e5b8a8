# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from tusk.tasks.persistence import JsonStateFile
from tusk.tasks.task_store import TaskStore


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with the CLI.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated and deterministic.
    """
    data_dir = tmp_path / "data"
    return SimpleNamespace(
        app_name="tusk",
        log_level="WARNING",
        log_to_file=False,
        data_dir=data_dir,
        store_path=data_dir / "task_data.json",
    )


@pytest.fixture()
def store() -> TaskStore:
    return TaskStore()


@pytest.fixture()
def state_file(settings: SimpleNamespace) -> JsonStateFile:
    return JsonStateFile(settings.store_path)
