"""Module-scoped loggers that route messages to a single registered listener."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import IntFlag
from typing import ClassVar


class LogLevel(IntFlag):
    """Log levels. They can be combined to select what a listener receives."""

    LOG_ERROR = 0x01
    LOG_WARNING = 0x02
    LOG_INFO_0 = 0x04
    LOG_INFO_1 = 0x08
    LOG_INFO_2 = 0x10
    LOG_INFO_3 = 0x20


class LogListener(ABC):
    """Receiver of log messages, e.g. writing them to a stream or a file."""

    @abstractmethod
    def log_msg(self, msg: str, level: LogLevel) -> None:
        """Output a single message of the given level."""


class Logger:
    """Logger for one module.

    All loggers share one listener. A message is passed on only if its level
    is among the levels the listener was registered with.
    """

    _listener: ClassVar[LogListener | None] = None
    _listener_level: ClassVar[LogLevel] = LogLevel(0)

    def __init__(self, module_name: str) -> None:
        self.module_name = module_name

    @classmethod
    def set_log_listener(cls, listener: LogListener | None, level: LogLevel) -> None:
        """Register the listener for all loggers, receiving the given levels."""
        cls._listener = listener
        cls._listener_level = LogLevel(level)

    def print(self, level: LogLevel, message: str) -> None:
        """Pass the message to the listener if it accepts the given level."""
        listener = type(self)._listener
        if listener is None:
            return
        if not (level & type(self)._listener_level):
            return
        listener.log_msg(f"{self.module_name}: {message}", level)