# src/tusk/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- resolves settings (injected or from the environment),
- configures logging from them,
- wires the concrete persistence implementation behind the StateRepo port.
"""

from __future__ import annotations

import logging

from ..config import Settings, get_settings
from ..core.ports import StateRepo
from ..logging_setup import setup_logging
from ..tasks.persistence import JsonStateFile

logger = logging.getLogger(__name__)


def configure_logging(settings) -> None:
    level_name = str(getattr(settings, "log_level", "WARNING")).upper()
    console_level = getattr(logging, level_name, logging.WARNING)
    if not isinstance(console_level, int):
        console_level = logging.WARNING

    log_dir = settings.data_dir if getattr(settings, "log_to_file", False) else None
    setup_logging(log_dir=log_dir, console_level=console_level)


def create_state_repo(*, settings: Settings | None = None) -> StateRepo:
    """
    Build the StateRepo for the configured store path.

    Keeping settings injectable makes the CLI easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    repo = JsonStateFile(settings.store_path)
    logger.debug("Task data file: %s", repo.path)
    return repo
