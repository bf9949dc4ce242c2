# tests/test_task_store.py

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from taskpad.tasks.errors import StorageError
from taskpad.tasks.task_models import Task
from taskpad.tasks.task_store import TaskStore


def test_missing_file_loads_empty(store: TaskStore) -> None:
    assert not store.path.exists()
    assert store.load() == []


def test_save_then_load_reproduces_tasks(store: TaskStore) -> None:
    done = Task.deadline("submit report", "2024-01-01")
    done.mark_done()
    tasks = [Task.todo("buy milk"), done, Task.event("team offsite", "Mon 2-4pm")]

    store.save(tasks)
    assert store.path.read_text("utf-8") == (
        "T | 0 | buy milk\nD | 1 | submit report | 2024-01-01\nE | 0 | team offsite | Mon 2-4pm\n"
    )
    assert store.load() == tasks


def test_save_overwrites_whole_file(store: TaskStore) -> None:
    store.save([Task.todo("a"), Task.todo("b")])
    store.save([Task.todo("c")])
    assert store.load() == [Task.todo("c")]

    store.save([])
    assert store.load() == []


def test_malformed_lines_are_skipped(store: TaskStore, caplog: pytest.LogCaptureFixture) -> None:
    store.path.write_text(
        "T | 0 | keep me\n"
        "garbage\n"
        "\n"
        "Q | 1 | unknown kind\n"
        "D | 1 | keep deadline | 2024-01-01\n",
        "utf-8",
    )
    with caplog.at_level(logging.WARNING, logger="taskpad.tasks.task_store"):
        tasks = store.load()

    assert [t.description for t in tasks] == ["keep me", "keep deadline"]
    assert tasks[1].done
    skipped = [r for r in caplog.records if "Skipping malformed line" in r.getMessage()]
    assert len(skipped) == 2
    assert "line 2" in skipped[0].getMessage()


def test_save_into_missing_directory_fails(tmp_path: Path) -> None:
    store = TaskStore(tmp_path / "nope" / "tasks.txt")
    with pytest.raises(StorageError):
        store.save([Task.todo("a")])
    assert not (tmp_path / "nope").exists()


def test_unreadable_path_fails_load(tmp_path: Path) -> None:
    # A directory where the file should be.
    (tmp_path / "tasks.txt").mkdir()
    with pytest.raises(StorageError):
        TaskStore(tmp_path / "tasks.txt").load()


def test_undecodable_file_fails_load(store: TaskStore) -> None:
    store.path.write_bytes(b"T | 0 | ok\nT | 0 | caf\xe9\n")
    with pytest.raises(StorageError):
        store.load()
