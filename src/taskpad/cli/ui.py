# src/taskpad/cli/ui.py

"""
User-facing text.

Every string the user reads (apart from error messages, which live with the
errors) is built here, so the console loop and the responder render the
exact same replies.
"""

from __future__ import annotations

from collections.abc import Iterable

from ..tasks.task_list import TaskList
from ..tasks.task_models import Task

HORIZONTAL_RULE = "_" * 60
INDENT = "  "


def _plural(n: int) -> str:
    return f"{n} task" if n == 1 else f"{n} tasks"


def _numbered(tasks: Iterable[Task]) -> list[str]:
    return [f"{i}.{task.display()}" for i, task in enumerate(tasks, start=1)]


def greeting(app_name: str, help_text: str) -> str:
    return f"Hello! I'm {app_name}.\nWhat can I do for you?\n\n{help_text}"


def farewell() -> str:
    return "Bye. Hope to see you again soon!"


def task_list(tasks: TaskList) -> str:
    if not len(tasks):
        return "You have no tasks in your list."
    return "\n".join(["Here are the tasks in your list:", *_numbered(tasks)])


def added_task(task: Task, tasks: TaskList) -> str:
    return (
        "Got it. I've added this task:\n"
        f"{INDENT}{task.display()}\n"
        f"Now you have {_plural(len(tasks))} in the list."
    )


def deleted_task(task: Task, tasks: TaskList) -> str:
    return (
        "Noted. I've removed this task:\n"
        f"{INDENT}{task.display()}\n"
        f"Now you have {_plural(len(tasks))} in the list."
    )


def done_task(task: Task) -> str:
    return f"Nice! I've marked this task as done:\n{INDENT}{task.display()}"


def found_tasks(found: TaskList) -> str:
    if not len(found):
        return "No matching tasks in your list."
    return "\n".join(["Here are the matching tasks in your list:", *_numbered(found)])


def storage_failure(message: str) -> str:
    return f"OOPS!!! {message}"
