# src/taskpad/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import StrEnum

from .errors import EmptyDescriptionError, MalformedCommandError, MalformedRecordError

FIELD_SEP = " | "
RESERVED_CHAR = "|"
# Everything str.splitlines() breaks on; one task must stay one line on disk.
LINE_BREAKS = frozenset("\n\r\x0b\x0c\x1c\x1d\x1e\x85\u2028\u2029")

DONE_FLAG = "1"
NOT_DONE_FLAG = "0"


class TaskKind(StrEnum):
    """
    Task kind. The value doubles as the marker shown on screen and stored on disk.
    """

    TODO = "T"
    DEADLINE = "D"
    EVENT = "E"

    @property
    def label(self) -> str:
        return self.name.lower()


def _format_when(kind: TaskKind, when: str) -> str:
    if kind is TaskKind.DEADLINE:
        try:
            return date.fromisoformat(when).strftime("%b %d %Y")
        except ValueError:
            return when
    return when


@dataclass(slots=True)
class Task:
    kind: TaskKind
    description: str
    done: bool = False

    # None for todos; due text for deadlines; date-range text for events.
    when: str | None = None

    def __post_init__(self) -> None:
        self.kind = TaskKind(self.kind)
        self.description = (self.description or "").strip()
        if not self.description:
            raise EmptyDescriptionError(
                f"OOPS!!! The description of a {self.kind.label} cannot be empty."
            )

        if self.kind is TaskKind.TODO:
            if self.when is not None:
                raise MalformedCommandError("OOPS!!! A todo cannot have a date.")
        else:
            self.when = (self.when or "").strip()
            if not self.when:
                raise MalformedCommandError(
                    f"OOPS!!! The date of a {self.kind.label} cannot be empty."
                )

        for text in (self.description, self.when or ""):
            if RESERVED_CHAR in text:
                raise MalformedCommandError(
                    f"OOPS!!! '{RESERVED_CHAR}' is reserved and cannot be used in a task."
                )
            if any(ch in LINE_BREAKS for ch in text):
                raise MalformedCommandError("OOPS!!! A task must fit on a single line.")

    @classmethod
    def todo(cls, description: str) -> Task:
        return cls(TaskKind.TODO, description)

    @classmethod
    def deadline(cls, description: str, by: str) -> Task:
        return cls(TaskKind.DEADLINE, description, when=by)

    @classmethod
    def event(cls, description: str, at: str) -> Task:
        return cls(TaskKind.EVENT, description, when=at)

    def mark_done(self) -> None:
        self.done = True

    def matches(self, keyword: str) -> bool:
        return keyword in self.description

    @property
    def done_marker(self) -> str:
        return "X" if self.done else " "

    def display(self) -> str:
        text = f"[{self.kind.value}][{self.done_marker}] {self.description}"
        if self.kind is TaskKind.DEADLINE:
            text += f" (by: {_format_when(self.kind, self.when or '')})"
        elif self.kind is TaskKind.EVENT:
            text += f" (at: {_format_when(self.kind, self.when or '')})"
        return text

    def __str__(self) -> str:
        return self.display()

    # ---- persisted record ----

    def to_line(self) -> str:
        fields = [self.kind.value, DONE_FLAG if self.done else NOT_DONE_FLAG, self.description]
        if self.when is not None:
            fields.append(self.when)
        return FIELD_SEP.join(fields)

    @classmethod
    def from_line(cls, line: str) -> Task:
        """
        Decode one persisted record, e.g. ``D | 1 | submit report | 2024-01-01``.

        Raises MalformedRecordError for anything that would not have been
        produced by to_line().
        """
        parts = [p.strip() for p in line.rstrip("\r\n").split(RESERVED_CHAR)]
        if len(parts) < 3:
            raise MalformedRecordError(f"expected at least 3 fields, got {len(parts)}: {line!r}")

        raw_kind, raw_done = parts[0], parts[1]
        try:
            kind = TaskKind(raw_kind)
        except ValueError:
            raise MalformedRecordError(f"unknown task kind {raw_kind!r}") from None

        if raw_done not in (DONE_FLAG, NOT_DONE_FLAG):
            raise MalformedRecordError(f"bad done flag {raw_done!r}")

        expected = 3 if kind is TaskKind.TODO else 4
        if len(parts) != expected:
            raise MalformedRecordError(
                f"{kind.label} record needs {expected} fields, got {len(parts)}: {line!r}"
            )

        when = parts[3] if kind is not TaskKind.TODO else None
        try:
            return cls(kind, parts[2], done=raw_done == DONE_FLAG, when=when)
        except (EmptyDescriptionError, MalformedCommandError) as e:
            raise MalformedRecordError(e.message) from e
