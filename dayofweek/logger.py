"""Key-value logging for the calculator.

Events are short dotted names (``date.parsed``, ``weekday.computed``) with
``key=value`` fields appended. Console output goes to stderr; stdout is
reserved for the answer.
"""

import logging
import os
import sys
from datetime import datetime
from pathlib import Path

LOGGER_NAME = "dayofweek"
CONSOLE_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"
FILE_FORMAT = "%(asctime)s [%(levelname)s] %(name)s - %(message)s"


class StructuredLogger:
    """Logs ``event key=value ...`` lines through a stdlib logger"""

    def __init__(self, logger: logging.Logger):
        self._logger = logger

    @staticmethod
    def format_event(event: str, **fields) -> str:
        if not fields:
            return event
        return event + " " + " ".join(f"{k}={v}" for k, v in fields.items())

    def log(self, level: int, event: str, exc_info: bool = False, **fields) -> None:
        if self._logger.isEnabledFor(level):
            # stacklevel=3 attributes the record to the caller of debug()/info()/...
            self._logger.log(level, self.format_event(event, **fields),
                             exc_info=exc_info, stacklevel=3)

    def debug(self, event: str, **fields) -> None:
        self.log(logging.DEBUG, event, **fields)

    def info(self, event: str, **fields) -> None:
        self.log(logging.INFO, event, **fields)

    def warning(self, event: str, **fields) -> None:
        self.log(logging.WARNING, event, **fields)

    def error(self, event: str, **fields) -> None:
        self.log(logging.ERROR, event, **fields)

    def exception(self, event: str, **fields) -> None:
        self.log(logging.ERROR, event, exc_info=True, **fields)


def _level(name: str) -> int:
    level = logging.getLevelName(name.strip().upper())
    return level if isinstance(level, int) else logging.WARNING


def setup_logger(level: str = "WARNING", log_file: bool = False,
                 log_dir: str | Path = "logs", stream=None) -> StructuredLogger:
    """
    (Re)configure the package logger

    Args:
        level: Console log level name; unknown names fall back to WARNING
        log_file: Also write every record (DEBUG and up) to
            ``<log_dir>/dayofweek_YYYYMMDD.log``
        log_dir: Directory for the log file, created on demand
        stream: Console stream (default: sys.stderr at call time)

    Returns:
        StructuredLogger wrapping the ``dayofweek`` logger
    """
    console_level = _level(level)

    base_logger = logging.getLogger(LOGGER_NAME)
    for handler in list(base_logger.handlers):
        base_logger.removeHandler(handler)
        handler.close()

    console_handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    console_handler.setLevel(console_level)
    console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT, datefmt="%H:%M:%S"))
    base_logger.addHandler(console_handler)

    log_path = None
    if log_file:
        log_path = Path(log_dir) / f"dayofweek_{datetime.now():%Y%m%d}.log"
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        base_logger.addHandler(file_handler)

    base_logger.setLevel(logging.DEBUG if log_file else console_level)

    structured = StructuredLogger(base_logger)
    if log_path is not None:
        structured.debug("logging.file", path=log_path)
    return structured


logger = setup_logger(level=os.environ.get("DAYOFWEEK_LOG_LEVEL", "WARNING"))
