# SPDX-FileCopyrightText: AISEC Pentesting Team
#
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import atexit
import datetime
import logging
import os
import sys
from enum import IntEnum, unique
from logging.handlers import QueueHandler, QueueListener
from queue import Queue
from typing import Any, TextIO, cast

logging.addLevelName(5, "TRACE")


@unique
class Loglevel(IntEnum):
    CRITICAL = logging.CRITICAL
    ERROR = logging.ERROR
    WARNING = logging.WARNING
    INFO = logging.INFO
    DEBUG = logging.DEBUG
    #: Per-token matching details of the parser.
    TRACE = 5

    @classmethod
    def from_env(cls) -> Loglevel:
        """Reads ``MICROFLAG_LOGLEVEL``, a case insensitive level name
        such as ``debug``, defaulting to ``WARNING``. Raises
        :class:`ValueError` on anything else.
        """
        if (raw := os.getenv("MICROFLAG_LOGLEVEL")) is None:
            return cls.WARNING
        try:
            return cls[raw.upper()]
        except KeyError:
            raise ValueError(f"MICROFLAG_LOGLEVEL: {raw!r} is not a loglevel") from None


def use_colors(stream: TextIO) -> bool:
    if sys.platform == "win32" or os.getenv("NO_COLOR") is not None:
        return False
    return stream.isatty()


_queue_listener: QueueListener | None = None


def _stop_queue_listener() -> None:
    global _queue_listener

    if _queue_listener is not None:
        _queue_listener.stop()
        _queue_listener = None


def setup_logging(level: Loglevel = Loglevel.WARNING, logger_name: str = "microflag") -> None:
    """Sends the records of ``logger_name`` through a queue to stderr.
    The library never calls this; applications do. Calling it again
    replaces the previous handler and its listener thread.
    """
    global _queue_listener

    logger = logging.getLogger(logger_name)
    # LogLevel cannot be 0 (NOTSET), because only the root logger sends it to its handlers then
    logger.setLevel(1)

    if _queue_listener is None:
        atexit.register(_stop_queue_listener)
    else:
        _queue_listener.stop()
    while len(logger.handlers) > 0:
        logger.handlers[0].close()
        logger.removeHandler(logger.handlers[0])

    queue: Queue[Any] = Queue()
    logger.addHandler(QueueHandler(queue))

    stderr_handler = logging.StreamHandler(sys.stderr)
    stderr_handler.setLevel(level)
    console_formatter = _ConsoleFormatter()
    console_formatter.colored = use_colors(sys.stderr)
    stderr_handler.setFormatter(console_formatter)

    _queue_listener = QueueListener(queue, stderr_handler, respect_handler_level=True)
    _queue_listener.start()


_RESET = "\033[0m"
_STYLES = {
    Loglevel.TRACE: "\033[0;38;5;245m",
    Loglevel.DEBUG: "\033[0;38;5;245m",
    Loglevel.WARNING: "\033[33m",
    Loglevel.ERROR: "\033[31m",
    Loglevel.CRITICAL: "\033[31m\033[1m",
}


def _format_record(dt: datetime.datetime, name: str, data: str, levelno: int, colored: bool = False) -> str:
    msg = f"{dt.strftime('%b %d %H:%M:%S.%f')[:-3]} {name}: "
    if colored and (style := _STYLES.get(levelno)) is not None:
        return f"{msg}{style}{data}{_RESET}"
    return msg + data


class _ConsoleFormatter(logging.Formatter):
    colored: bool = False

    def format(self, record: logging.LogRecord) -> str:
        msg = _format_record(
            dt=datetime.datetime.fromtimestamp(record.created),
            name=record.name,
            data=record.getMessage(),
            levelno=record.levelno,
            colored=self.colored,
        )
        if record.exc_info:
            msg += "\n" + self.formatException(record.exc_info)
        return msg


class Logger(logging.Logger):
    def trace(self, msg: Any, *args: Any, **kwargs: Any) -> None:
        if self.isEnabledFor(Loglevel.TRACE):
            self._log(Loglevel.TRACE, msg, args, **kwargs)


logging.setLoggerClass(Logger)


def get_logger(name: str) -> Logger:
    return cast(Logger, logging.getLogger(name))
