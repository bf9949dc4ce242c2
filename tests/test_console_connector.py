# tests/test_console_connector.py

from __future__ import annotations

from collections.abc import Iterator

import pytest

from taskpad.connectors.console_connector import run_console_loop
from taskpad.core.state import AppState

from .fakes import FakeTaskStore


def _feed(monkeypatch: pytest.MonkeyPatch, lines: list[str]) -> None:
    it: Iterator[str] = iter(lines)

    def fake_input(prompt: str = "") -> str:
        try:
            return next(it)
        except StopIteration:
            raise EOFError from None

    monkeypatch.setattr("builtins.input", fake_input)


def test_loop_runs_until_bye_and_saves(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
    state: AppState,
    fake_store: FakeTaskStore,
) -> None:
    _feed(monkeypatch, ["todo buy milk", "deadline submit report /by 2024-01-01", "list", "bye", "todo never"])
    run_console_loop(state)

    out = capsys.readouterr().out
    assert "Hello! I'm taskpad." in out
    assert "1.[T][ ] buy milk\n2.[D][ ] submit report (by: Jan 01 2024)" in out
    assert "Bye. Hope to see you again soon!" in out
    assert fake_store.saves == [["T | 0 | buy milk", "D | 0 | submit report | 2024-01-01"]]
    assert state.session.running is False


def test_errors_go_to_stderr_and_loop_continues(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
    state: AppState,
) -> None:
    _feed(monkeypatch, ["todo", "nonsense", "todo a", "bye"])
    run_console_loop(state)

    captured = capsys.readouterr()
    assert "The description of a todo cannot be empty." in captured.err
    assert "I don't know what that means" in captured.err
    assert "Got it. I've added this task:" in captured.out
    assert state.session.tasks.size() == 1


def test_eof_exits_without_saving(
    monkeypatch: pytest.MonkeyPatch,
    state: AppState,
    fake_store: FakeTaskStore,
) -> None:
    _feed(monkeypatch, ["todo a"])
    run_console_loop(state)
    assert fake_store.saves == []
    assert state.session.tasks.size() == 1


def test_save_failure_is_printed(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
    settings,
) -> None:
    state = AppState(settings=settings, store=FakeTaskStore(fail_save=True))
    _feed(monkeypatch, ["todo a", "bye"])
    run_console_loop(state)
    assert "Could not save tasks" in capsys.readouterr().err
