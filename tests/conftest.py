# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from taskpad.core.state import AppState
from taskpad.tasks.task_store import TaskStore

from .fakes import FakeTaskStore


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the bootstrap.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated and deterministic.
    """
    data_dir = tmp_path / "data"
    return SimpleNamespace(
        app_name="taskpad",
        log_level="WARNING",
        log_to_file=False,
        data_dir=data_dir,
        tasks_path=data_dir / "tasks.txt",
        log_dir=data_dir / "logs",
    )


@pytest.fixture()
def store(tmp_path: Path) -> TaskStore:
    """Real file store in a per-test directory."""
    return TaskStore(tmp_path / "tasks.txt")


@pytest.fixture()
def fake_store() -> FakeTaskStore:
    return FakeTaskStore()


@pytest.fixture()
def state(settings: SimpleNamespace, fake_store: FakeTaskStore) -> AppState:
    """AppState with an empty session and an in-memory store."""
    return AppState(settings=settings, store=fake_store)
