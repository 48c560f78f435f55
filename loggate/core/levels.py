"""Log levels and event identities."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Any

from loggate.core.exceptions import ConfigurationError


class LogLevel(IntEnum):
    """Ordered severity levels; ``NONE`` disables logging."""

    TRACE = 0
    DEBUG = 1
    INFORMATION = 2
    WARNING = 3
    ERROR = 4
    CRITICAL = 5
    NONE = 6

    @property
    def loguru_name(self) -> str | None:
        """Name of the matching loguru level, ``None`` for ``NONE``."""
        return _LOGURU_NAMES.get(self)

    @classmethod
    def parse(cls, value: str | int | LogLevel) -> LogLevel:
        """Resolve a level from a name, a loguru alias or an integer."""
        if isinstance(value, LogLevel):
            return value
        if isinstance(value, int):
            try:
                return cls(value)
            except ValueError as exc:
                raise ConfigurationError(f"Unknown log level: {value}", setting="level") from exc

        normalized = value.strip().upper()
        level = _ALIASES.get(normalized)
        if level is None:
            raise ConfigurationError(f"Unknown log level: {value}", setting="level")
        return level


_LOGURU_NAMES: dict[LogLevel, str] = {
    LogLevel.TRACE: "TRACE",
    LogLevel.DEBUG: "DEBUG",
    LogLevel.INFORMATION: "INFO",
    LogLevel.WARNING: "WARNING",
    LogLevel.ERROR: "ERROR",
    LogLevel.CRITICAL: "CRITICAL",
}

_ALIASES: dict[str, LogLevel] = {
    **{level.name: level for level in LogLevel},
    "INFO": LogLevel.INFORMATION,
    "WARN": LogLevel.WARNING,
    "FATAL": LogLevel.CRITICAL,
}


@dataclass(frozen=True, slots=True)
class EventId:
    """Stable identity of a log event, independent of level and payload.

    Symbolic ids (strings, non-integer enum members) have no number.
    """

    id: int | None
    name: str | None = None

    def __str__(self) -> str:
        return self.name or str(self.id)

    @classmethod
    def of(cls, value: Any) -> EventId:
        """Coerce ints, strings, enum members and event ids into an :class:`EventId`."""
        if isinstance(value, EventId):
            return value
        if isinstance(value, Enum):
            number = value.value
            if isinstance(number, int) and not isinstance(number, bool):
                return cls(number, value.name)
            return cls(None, value.name)
        if isinstance(value, int) and not isinstance(value, bool):
            return cls(value)
        if isinstance(value, str):
            return cls(None, value)
        raise TypeError(f"Cannot build an EventId from {type(value).__name__}")
