# src/taskpad/logging_setup.py

from __future__ import annotations

import logging
import sys
from pathlib import Path

LOG_FORMAT = "%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"
LOG_FILENAME = "taskpad.log"


class _ConsoleNoiseFilter(logging.Filter):
    """
    Keep the to-do prompt readable.

    Records from the taskpad package pass at the handler level. Everything
    else, captured warnings included, only reaches stderr at ERROR. The log
    file still receives all of it.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if record.name == "taskpad" or record.name.startswith("taskpad."):
            return True
        return record.levelno >= logging.ERROR


def _handler(handler: logging.Handler, level: int, fmt: logging.Formatter) -> logging.Handler:
    handler.setLevel(level)
    handler.setFormatter(fmt)
    return handler


def setup_logging(
    *,
    log_dir: str | Path = ".local/taskpad",
    console_level: int = logging.INFO,
    file_level: int = logging.DEBUG,
) -> Path:
    """
    Route logs to stderr (console_level, filtered) and to
    <log_dir>/taskpad.log (file_level, unfiltered). Returns the log file path.

    Replaces any handlers already on the root logger, so calling it again
    does not duplicate output. main() calls it before building the store.
    """
    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / LOG_FILENAME

    root = logging.getLogger()
    root.setLevel(min(console_level, file_level))
    for h in list(root.handlers):
        root.removeHandler(h)

    fmt = logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATEFMT)

    console = _handler(logging.StreamHandler(sys.stderr), console_level, fmt)
    console.addFilter(_ConsoleNoiseFilter())
    root.addHandler(console)
    root.addHandler(_handler(logging.FileHandler(str(log_file), encoding="utf-8"), file_level, fmt))

    # warnings.warn(...) -> 'py.warnings' logger
    logging.captureWarnings(True)
    return log_file
