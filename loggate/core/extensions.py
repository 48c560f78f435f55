"""Convenience helpers for logging catalog events through an intercepting logger."""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum

from loggate.core.intercepting import InterceptingLogger
from loggate.core.levels import LogLevel

Message = str | Callable[[], str]

REDACTED = "?"


def _log(
    logger: InterceptingLogger,
    level: LogLevel,
    event: Enum,
    message: Message,
    error: BaseException | None,
) -> None:
    # the event is both the identity and the state, so policies key on it
    if callable(message):
        factory = message
        logger.log(level, event, event, error, lambda _, __: factory())
    else:
        text = message
        logger.log(level, event, event, error, lambda _, __: text)


def log_trace(logger: InterceptingLogger, event: Enum, message: Message, *, error: BaseException | None = None) -> None:
    _log(logger, LogLevel.TRACE, event, message, error)


def log_debug(logger: InterceptingLogger, event: Enum, message: Message, *, error: BaseException | None = None) -> None:
    _log(logger, LogLevel.DEBUG, event, message, error)


def log_information(
    logger: InterceptingLogger, event: Enum, message: Message, *, error: BaseException | None = None
) -> None:
    _log(logger, LogLevel.INFORMATION, event, message, error)


def log_warning(logger: InterceptingLogger, event: Enum, message: Message, *, error: BaseException | None = None) -> None:
    """Log ``event`` as a warning; subject to the warning policy."""
    _log(logger, LogLevel.WARNING, event, message, error)


def log_error(logger: InterceptingLogger, event: Enum, message: Message, *, error: BaseException | None = None) -> None:
    _log(logger, LogLevel.ERROR, event, message, error)


def log_critical(
    logger: InterceptingLogger, event: Enum, message: Message, *, error: BaseException | None = None
) -> None:
    _log(logger, LogLevel.CRITICAL, event, message, error)


def redact(logger: InterceptingLogger, value: object) -> object:
    """Return ``value`` only when sensitive data logging is enabled."""
    if logger.is_sensitive_data_enabled():
        return value
    return REDACTED
