# src/taskpad/core/state.py

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from ..tasks.task_list import TaskList
from .ports import TaskRepo


@dataclass(frozen=True, slots=True)
class SessionState:
    """
    Everything a command can change.

    Treated as a value: dispatch() returns a new SessionState instead of
    mutating the one it was given.
    """

    tasks: TaskList = field(default_factory=TaskList)
    running: bool = True


@dataclass
class AppState:
    # Settings object (config.Settings or any object with the same attributes).
    settings: Any

    store: TaskRepo
    session: SessionState = field(default_factory=SessionState)

    def save(self) -> None:
        """Persist the current task list (raises StorageError)."""
        self.store.save(self.session.tasks.as_sequence())
