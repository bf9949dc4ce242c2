# src/taskpad/connectors/responder.py

from __future__ import annotations

import logging
from dataclasses import replace

from ..cli import ui
from ..cli.commands import registry as command_registry
from ..core.state import AppState
from ..tasks.errors import StorageError
from ..tasks.task_parser import split_command

logger = logging.getLogger(__name__)

_ADD_COMMANDS = frozenset({"todo", "deadline", "event"})


class Responder:
    """
    Single-shot front-end for embedding in another UI: one command in, one reply out.

    `bye` saves but does not stop the responder; the host decides when to
    close. Not safe for concurrent calls: the host must serialize them.
    """

    def __init__(self, state: AppState) -> None:
        self._state = state

    @property
    def state(self) -> AppState:
        return self._state

    def respond(self, command: str) -> str:
        state = self._state
        new_session, reply = command_registry.handle(state.session, command)

        if reply.ok and reply.task is not None:
            word, _ = split_command(command)
            if word in _ADD_COMMANDS:
                assert new_session.tasks.holds(reply.task), "added task should be in the list"
            elif word == "delete":
                assert not new_session.tasks.holds(reply.task), "deleted task should be gone"

        # Keep running=True: the responder keeps answering after `bye`.
        state.session = replace(new_session, running=True)

        if reply.exit:
            try:
                state.save()
            except StorageError as e:
                logger.exception("Failed to save tasks.")
                return ui.storage_failure(str(e))

        return reply.text
