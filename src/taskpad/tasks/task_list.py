# src/taskpad/tasks/task_list.py

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from dataclasses import replace

from .errors import TaskIndexError
from .task_models import Task

logger = logging.getLogger(__name__)


class TaskList:
    """
    Ordered, mutable task collection.

    All index arguments are 1-based (the numbers the user sees). Indices are
    checked before anything is touched, so a failing call leaves the list as it was.
    """

    def __init__(self, tasks: Iterable[Task] = ()) -> None:
        self._tasks: list[Task] = list(tasks)

    def _check(self, index: int) -> int:
        if index < 1 or index > len(self._tasks):
            raise TaskIndexError(index, len(self._tasks))
        return index - 1

    def add(self, task: Task) -> None:
        self._tasks.append(task)
        logger.debug("Task added pos=%s kind=%s", len(self._tasks), task.kind.value)

    def get(self, index: int) -> Task:
        return self._tasks[self._check(index)]

    def delete(self, index: int) -> Task:
        task = self._tasks.pop(self._check(index))
        logger.debug("Task deleted pos=%s remaining=%s", index, len(self._tasks))
        return task

    def mark_done(self, index: int) -> Task:
        task = self.get(index)
        task.mark_done()
        return task

    def find(self, keyword: str) -> TaskList:
        return TaskList(t for t in self._tasks if t.matches(keyword))

    def size(self) -> int:
        return len(self._tasks)

    def as_sequence(self) -> tuple[Task, ...]:
        return tuple(self._tasks)

    def copy(self) -> TaskList:
        """Independent copy: mutating the copy or its tasks never touches this list."""
        return TaskList(replace(t) for t in self._tasks)

    def holds(self, task: Task) -> bool:
        """Identity membership (equal-looking duplicates are distinct tasks)."""
        return any(t is task for t in self._tasks)

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self._tasks)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TaskList):
            return NotImplemented
        return self._tasks == other._tasks

    def __repr__(self) -> str:
        return f"TaskList({self._tasks!r})"
