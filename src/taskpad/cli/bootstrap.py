# src/taskpad/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures the local data directory exists (the store itself never creates it),
- wires the file store into AppState and loads the saved task list.
"""

from __future__ import annotations

import logging
import sys

from ..config import get_settings
from ..core.state import AppState, SessionState
from ..tasks.errors import StorageError
from ..tasks.task_list import TaskList
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    settings.tasks_path.parent.mkdir(parents=True, exist_ok=True)


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().

    A task file that cannot be read is reported and the session starts empty.
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    store = TaskStore(settings.tasks_path)
    try:
        tasks = TaskList(store.load())
    except StorageError as e:
        logger.exception("Failed to load tasks from %s", store.path)
        print(str(e), file=sys.stderr)
        tasks = TaskList()

    return AppState(settings=settings, store=store, session=SessionState(tasks=tasks))
