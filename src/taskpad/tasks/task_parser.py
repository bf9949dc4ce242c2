# src/taskpad/tasks/task_parser.py

"""
Command-line parsing for task commands.

Every function takes the raw input line (command word included) and either
returns a value or raises a TaskError subclass. Functions that receive a
TaskList validate their input before touching it.
"""

from __future__ import annotations

import re

from .errors import EmptyDescriptionError, MalformedCommandError
from .task_list import TaskList
from .task_models import Task, TaskKind

BY_SEPARATOR = "/by"
AT_SEPARATOR = "/at"


def split_command(line: str) -> tuple[str, str]:
    """Return (command word, rest of line). Blank input gives ("", "")."""
    parts = line.strip().split(maxsplit=1)
    if not parts:
        return "", ""
    word = parts[0]
    rest = parts[1].strip() if len(parts) > 1 else ""
    return word, rest


def _split_on(rest: str, separator: str, kind: TaskKind) -> tuple[str, str]:
    # Separator must be a token of its own: "/by" matches, "/bye" and "a/by" do not.
    pattern = rf"(?:^|\s){re.escape(separator)}(?:\s|$)"
    pieces = re.split(pattern, rest, maxsplit=1)
    usage = f"Usage: {kind.label} <description> {separator} <date>"
    if len(pieces) != 2:
        raise MalformedCommandError(f"OOPS!!! A {kind.label} needs '{separator}'. {usage}")

    description, when = pieces[0].strip(), pieces[1].strip()
    if not description:
        raise MalformedCommandError(
            f"OOPS!!! The description of a {kind.label} cannot be empty. {usage}"
        )
    if not when:
        raise MalformedCommandError(f"OOPS!!! The date of a {kind.label} cannot be empty. {usage}")
    return description, when


def parse_add_todo(line: str) -> Task:
    _, rest = split_command(line)
    if not rest:
        raise EmptyDescriptionError("OOPS!!! The description of a todo cannot be empty.")
    return Task.todo(rest)


def parse_add_deadline(line: str) -> Task:
    _, rest = split_command(line)
    description, by = _split_on(rest, BY_SEPARATOR, TaskKind.DEADLINE)
    return Task.deadline(description, by)


def parse_add_event(line: str) -> Task:
    _, rest = split_command(line)
    description, at = _split_on(rest, AT_SEPARATOR, TaskKind.EVENT)
    return Task.event(description, at)


def parse_index(line: str) -> int:
    word, rest = split_command(line)
    if not rest:
        raise MalformedCommandError(f"OOPS!!! Tell me which task: {word} <task number>")
    try:
        return int(rest)
    except ValueError:
        raise MalformedCommandError(
            f"OOPS!!! '{rest}' is not a task number. Usage: {word} <task number>"
        ) from None


def parse_delete_command(line: str, tasks: TaskList) -> Task:
    """Remove the numbered task and return it."""
    return tasks.delete(parse_index(line))


def parse_done_command(line: str, tasks: TaskList) -> Task:
    """Mark the numbered task as done (idempotent) and return it."""
    return tasks.mark_done(parse_index(line))


def parse_find_command(line: str, tasks: TaskList) -> TaskList:
    """
    Tasks whose description contains the keyword.

    The keyword is everything after the command word and the one whitespace
    character separating them, kept verbatim: "find  milk" searches for " milk".
    """
    text = line.lstrip()
    word, _ = split_command(text)
    keyword = text[len(word) :]
    if keyword[:1].isspace():
        keyword = keyword[1:]
    return tasks.find(keyword)
