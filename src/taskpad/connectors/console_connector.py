# src/taskpad/connectors/console_connector.py

from __future__ import annotations

import logging
import sys

from ..cli import ui
from ..cli.commands import registry as command_registry
from ..core.state import AppState
from ..tasks.errors import StorageError

logger = logging.getLogger(__name__)

PROMPT = "> "


def _print_reply(text: str, *, error: bool = False) -> None:
    print(ui.HORIZONTAL_RULE)
    print(text, file=sys.stderr if error else sys.stdout, flush=True)
    print(ui.HORIZONTAL_RULE)


def run_console_loop(state: AppState) -> None:
    """
    Interactive loop: Running until `bye`, then Exited.

    `bye` saves the list before the loop ends. EOF / Ctrl+C leave without
    saving.
    """
    app_name = str(getattr(state.settings, "app_name", "taskpad"))
    logger.info("Console started (tasks=%d).", len(state.session.tasks))
    _print_reply(ui.greeting(app_name, command_registry.build_help()))

    while state.session.running:
        try:
            line = input(PROMPT)
        except EOFError:
            logger.warning("Console EOF received, exiting without saving.")
            break
        except KeyboardInterrupt:
            logger.warning("Console KeyboardInterrupt, exiting without saving.")
            print()
            break

        state.session, reply = command_registry.handle(state.session, line)
        _print_reply(reply.text, error=not reply.ok)

        if reply.exit:
            try:
                state.save()
            except StorageError as e:
                logger.exception("Failed to save tasks.")
                print(ui.storage_failure(str(e)), file=sys.stderr)

    logger.info("Console finished.")
