# src/taskpad/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the front-ends.

Connectors depend on this Protocol instead of the concrete file store, which
keeps storage swappable and makes testing easier.
"""

from collections.abc import Iterable
from typing import Protocol

from ..tasks.task_models import Task


class TaskRepo(Protocol):
    """Whole-list task persistence: load everything at start, save everything at exit."""

    def load(self) -> list[Task]: ...

    def save(self, tasks: Iterable[Task]) -> None: ...
