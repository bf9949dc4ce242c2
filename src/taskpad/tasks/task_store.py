# src/taskpad/tasks/task_store.py

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from .errors import MalformedRecordError, StorageError
from .task_models import Task

logger = logging.getLogger(__name__)


class TaskStore:
    """
    Flat text task store: one record per line (see Task.to_line).

    Loading is lenient:
    - a missing file means "no tasks yet"
    - blank lines are ignored
    - malformed lines are skipped and logged with their line number

    Saving rewrites the whole file in place. There is no temp-file swap, so a
    crash mid-write can lose data. The parent directory must already exist.
    """

    def __init__(self, path: str | Path = "data/tasks.txt") -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> list[Task]:
        if not self._path.exists():
            logger.info("No task file at %s; starting empty.", self._path)
            return []

        try:
            raw = self._path.read_text("utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise StorageError(f"Could not read tasks from {self._path}: {e}") from e

        tasks: list[Task] = []
        skipped = 0
        for lineno, line in enumerate(raw.splitlines(), start=1):
            if not line.strip():
                continue
            try:
                tasks.append(Task.from_line(line))
            except MalformedRecordError as e:
                skipped += 1
                logger.warning("Skipping malformed line %s in %s: %s", lineno, self._path, e)

        logger.info("Loaded %d tasks from %s (skipped=%d)", len(tasks), self._path, skipped)
        return tasks

    def save(self, tasks: Iterable[Task]) -> None:
        lines = [t.to_line() for t in tasks]
        body = "".join(f"{line}\n" for line in lines)
        try:
            self._path.write_text(body, "utf-8")
        except OSError as e:
            raise StorageError(f"Could not save tasks to {self._path}: {e}") from e
        logger.info("Saved %d tasks to %s", len(lines), self._path)
