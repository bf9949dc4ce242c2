# src/taskpad/logging_setup.py

from __future__ import annotations

import logging
import sys
from pathlib import Path

LOG_FILE_NAME = "taskpad.log"


class _TaskpadOnlyFilter(logging.Filter):
    """Pass taskpad records at the handler's level; everything else only at ERROR+."""

    def filter(self, record: logging.LogRecord) -> bool:
        if record.name.startswith("taskpad."):
            return True
        return record.levelno >= logging.ERROR


def setup_logging(
    *,
    log_dir: str | Path | None = "data/logs",
    console_level: int = logging.WARNING,
    file_level: int = logging.DEBUG,
) -> None:
    """
    Route log records to stderr and, unless log_dir is None, to <log_dir>/taskpad.log.

    Task replies go to stdout; the stderr handler defaults to WARNING so
    routine records stay in the file. Calling it again replaces the handlers
    installed by the previous call.
    """
    root = logging.getLogger()
    root.setLevel(logging.DEBUG)

    for h in list(root.handlers):
        root.removeHandler(h)

    fmt = logging.Formatter(
        fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    stderr_handler = logging.StreamHandler(sys.stderr)
    stderr_handler.setLevel(console_level)
    stderr_handler.setFormatter(fmt)
    stderr_handler.addFilter(_TaskpadOnlyFilter())
    root.addHandler(stderr_handler)

    if log_dir is not None:
        log_dir = Path(log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(str(log_dir / LOG_FILE_NAME), encoding="utf-8")
        file_handler.setLevel(file_level)
        file_handler.setFormatter(fmt)
        root.addHandler(file_handler)

    # warnings.warn() lands in the log as 'py.warnings'.
    logging.captureWarnings(True)
