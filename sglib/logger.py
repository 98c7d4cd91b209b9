"""Process-wide logger writing to standard output and to a per-prefix log file."""

from __future__ import annotations

import logging
import sys
import threading
from typing import ClassVar, Optional

TRACE = 5
logging.addLevelName(TRACE, "TRACE")

_CONSOLE_PATTERN = (
    "[{name}][%(asctime)s.%(msecs)03d --%(levelname).1s] %(message)s "
    "{{%(filename)s::%(funcName)s #%(lineno)d}}"
)
_FILE_PATTERN = "[{name}][%(levelname).1s][%(asctime)s.%(msecs)03d] %(message)s"
_TIME_FORMAT = "%H:%M:%S"

_CONSTRUCT_KEY = object()


class Logger:
    """Single shared logger; obtain it with Logger.get().

    The prefix set with set_log_prefix() before the first call to get()
    names the logger and its log file, "<prefix>.log", which is truncated.
    """

    _prefix: ClassVar[str] = ""
    _instance: ClassVar[Optional["Logger"]] = None
    _lock: ClassVar[threading.Lock] = threading.Lock()

    def __init__(self, *, _key: object = None) -> None:
        if _key is not _CONSTRUCT_KEY:
            raise TypeError("Logger is a singleton; use Logger.get()")
        prefix = type(self)._prefix
        name = prefix.replace("%", "%%")
        logger = logging.getLogger(f"sglib.{prefix}" if prefix else "sglib")
        _drop_handlers(logger)

        console = logging.StreamHandler(sys.stdout)
        console.setFormatter(logging.Formatter(_CONSOLE_PATTERN.format(name=name), _TIME_FORMAT))
        log_file = logging.FileHandler(f"{prefix}.log", mode="w", encoding="utf-8")
        log_file.setFormatter(logging.Formatter(_FILE_PATTERN.format(name=name), _TIME_FORMAT))

        logger.addHandler(console)
        logger.addHandler(log_file)
        logger.setLevel(TRACE)
        logger.propagate = False
        self._logger = logger

    @classmethod
    def get(cls) -> "Logger":
        """Return the shared instance, creating it on first use."""
        with cls._lock:
            if cls._instance is None:
                cls._instance = cls(_key=_CONSTRUCT_KEY)
            return cls._instance

    @classmethod
    def set_log_prefix(cls, prefix: str) -> None:
        """Set the name used when the shared instance is created."""
        cls._prefix = str(prefix)

    def get_logger(self) -> logging.Logger:
        """Return the underlying logging.Logger."""
        return self._logger

    @classmethod
    def _reset(cls) -> None:
        with cls._lock:
            if cls._instance is not None:
                _drop_handlers(cls._instance._logger)
            cls._instance = None
            cls._prefix = ""


def _drop_handlers(logger: logging.Logger) -> None:
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


def get_logger() -> logging.Logger:
    """Return the shared logging.Logger."""
    return Logger.get().get_logger()