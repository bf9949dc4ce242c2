# src/taskpad/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, replace

from ..core.state import SessionState
from ..tasks import task_parser
from ..tasks.errors import TaskError, UnknownCommandError
from ..tasks.task_list import TaskList
from ..tasks.task_models import Task
from . import ui

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Reply:
    """
    Result of one command: either a rendered success or a tagged user error.

    - text: what to show the user (the error message on failure)
    - error: the TaskError that rejected the command, else None
    - task: the task added / removed / marked by the command, if any
    - exit: the command asked to persist and stop
    """

    text: str
    error: TaskError | None = None
    task: Task | None = None
    exit: bool = False

    @property
    def ok(self) -> bool:
        return self.error is None


CommandHandler = Callable[[TaskList, str], Reply]


class CommandRegistry:
    """Command-word registry shared by every front-end (todo, list, bye, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}
        self._exits: set[str] = set()

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        *,
        exits: bool = False,
    ) -> None:
        self._handlers[name] = handler
        self._help[name] = help_text
        if exits:
            self._exits.add(name)

    def names(self) -> list[str]:
        return list(self._handlers)

    def handle(self, session: SessionState, line: str) -> tuple[SessionState, Reply]:
        """
        Run one command line against `session`.

        Pure with respect to `session`: the handler works on a copy of the
        task list, and only a successful command produces a new state. On a
        TaskError the untouched session comes back with an error Reply.
        """
        word, _ = task_parser.split_command(line)
        handler = self._handlers.get(word)

        try:
            if handler is None:
                raise UnknownCommandError(word)
            working = session.tasks.copy()
            reply = handler(working, line)
        except TaskError as e:
            logger.debug("Command rejected word=%r: %s", word, e.message)
            return session, Reply(text=e.message, error=e)

        if word in self._exits:
            reply = replace(reply, exit=True)
        new_session = replace(session, tasks=working, running=not reply.exit)
        return new_session, reply

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  {name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def dispatch(session: SessionState, line: str) -> tuple[SessionState, Reply]:
    """(state, command) -> (new state, reply) using the default registry."""
    return registry.handle(session, line)


def cmd_list(tasks: TaskList, line: str) -> Reply:
    return Reply(text=ui.task_list(tasks))


def _add(tasks: TaskList, task: Task) -> Reply:
    tasks.add(task)
    return Reply(text=ui.added_task(task, tasks), task=task)


def cmd_todo(tasks: TaskList, line: str) -> Reply:
    return _add(tasks, task_parser.parse_add_todo(line))


def cmd_deadline(tasks: TaskList, line: str) -> Reply:
    return _add(tasks, task_parser.parse_add_deadline(line))


def cmd_event(tasks: TaskList, line: str) -> Reply:
    return _add(tasks, task_parser.parse_add_event(line))


def cmd_done(tasks: TaskList, line: str) -> Reply:
    task = task_parser.parse_done_command(line, tasks)
    return Reply(text=ui.done_task(task), task=task)


def cmd_delete(tasks: TaskList, line: str) -> Reply:
    task = task_parser.parse_delete_command(line, tasks)
    return Reply(text=ui.deleted_task(task, tasks), task=task)


def cmd_find(tasks: TaskList, line: str) -> Reply:
    return Reply(text=ui.found_tasks(task_parser.parse_find_command(line, tasks)))


def cmd_bye(tasks: TaskList, line: str) -> Reply:
    return Reply(text=ui.farewell())


registry.register("list", cmd_list, help_text="Show all tasks.")
registry.register("todo", cmd_todo, help_text="Add a todo: todo <description>.")
registry.register(
    "deadline", cmd_deadline, help_text="Add a deadline: deadline <description> /by <date>."
)
registry.register("event", cmd_event, help_text="Add an event: event <description> /at <when>.")
registry.register("done", cmd_done, help_text="Mark a task as done: done <n>.")
registry.register("delete", cmd_delete, help_text="Remove a task: delete <n>.")
registry.register("find", cmd_find, help_text="Show tasks containing a keyword: find <keyword>.")
registry.register("bye", cmd_bye, help_text="Save and quit.", exits=True)
