# src/taskpad/tasks/errors.py

from __future__ import annotations


class TaskError(Exception):
    """
    Base class for user-input errors.

    These are never fatal: the dispatcher catches them and shows `message`
    to the user as a single line.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class EmptyDescriptionError(TaskError):
    pass


class MalformedCommandError(TaskError):
    """Missing/bad separator, missing or non-integer task number, reserved characters."""


class TaskIndexError(TaskError, IndexError):
    def __init__(self, index: int, size: int) -> None:
        if size == 0:
            detail = "your list is empty"
        else:
            detail = f"pick a number from 1 to {size}"
        super().__init__(f"OOPS!!! There is no task number {index} ({detail}).")
        self.index = index
        self.size = size


class UnknownCommandError(TaskError):
    def __init__(self, word: str) -> None:
        super().__init__("OOPS!!! I'm sorry, but I don't know what that means :-(")
        self.word = word


class MalformedRecordError(ValueError):
    """A persisted line that cannot be decoded into a Task."""


class StorageError(Exception):
    """Reading or writing the task file failed."""
