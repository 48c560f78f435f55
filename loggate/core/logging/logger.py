"""Structured loguru sink with scopes and trace propagation."""

from __future__ import annotations

import json
import os
import sys
from collections.abc import Callable
from contextlib import contextmanager
from contextvars import ContextVar, Token
from datetime import datetime, timezone
from typing import IO, Any, Iterator, Protocol
from uuid import uuid4

from loguru import logger

from loggate.core.levels import EventId, LogLevel
from loggate.core.logging.config import LogConfig

Formatter = Callable[[Any, BaseException | None], str]

_TRACE_ID_VAR: ContextVar[str | None] = ContextVar("loggate_trace_id", default=None)
_SCOPES_VAR: ContextVar[tuple[Any, ...]] = ContextVar("loggate_scopes", default=())


def _ensure_trace_id() -> str:
    trace_id = _TRACE_ID_VAR.get()
    if trace_id is None:
        trace_id = uuid4().hex
        _TRACE_ID_VAR.set(trace_id)
    return trace_id


def _patch_record(record: dict[str, Any]) -> None:
    extra = record.setdefault("extra", {})
    trace_id = extra.get("trace_id")
    if trace_id:
        _TRACE_ID_VAR.set(trace_id)
    else:
        extra["trace_id"] = _ensure_trace_id()

    scopes = _SCOPES_VAR.get()
    if scopes:
        extra.setdefault("scopes", list(scopes))

    extra.setdefault("category", None)
    extra.setdefault("event_id", None)
    extra.setdefault("event_name", None)


def _json_default(value: Any) -> Any:
    if isinstance(value, (datetime,)):
        return value.isoformat()
    return str(value)


_RESERVED = {"trace_id", "category", "event_id", "event_name", "scopes"}


def _format_payload(record: dict[str, Any]) -> dict[str, Any]:
    extra = record.get("extra", {})
    context = {k: v for k, v in extra.items() if k not in _RESERVED}
    level_value = record.get("level")
    if isinstance(level_value, dict):
        level_name = level_value.get("name")
    elif hasattr(level_value, "name"):
        level_name = getattr(level_value, "name")
    elif level_value is None:
        level_name = "INFO"
    else:
        level_name = str(level_value)
    payload: dict[str, Any] = {
        "timestamp": record["time"].isoformat() if "time" in record else datetime.now(timezone.utc).isoformat(),
        "level": level_name,
        "message": record.get("message"),
        "category": extra.get("category"),
        "event_id": extra.get("event_id"),
        "event_name": extra.get("event_name"),
        "trace_id": extra.get("trace_id"),
    }
    if extra.get("scopes"):
        payload["scopes"] = extra["scopes"]
    if context:
        payload["context"] = context
    exception = record.get("exception")
    if exception:
        payload["exception"] = f"{exception.type.__name__}: {exception.value}" if exception.type else str(exception)
    return payload


class _StreamJsonSink:
    """Sink writing structured JSON payloads to a text stream."""

    def __init__(self, stream: IO[str]) -> None:
        self._stream = stream

    def __call__(self, message: Any) -> None:
        payload = _format_payload(message.record)
        self._stream.write(json.dumps(payload, default=_json_default))
        self._stream.write("\n")
        self._stream.flush()


class _FileJsonSink:
    """Sink persisting JSON lines to a file path."""

    def __init__(self, path: str) -> None:
        directory = os.path.dirname(path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        self._path = path

    def __call__(self, message: Any) -> None:
        payload = _format_payload(message.record)
        with open(self._path, "a", encoding="utf-8") as file:
            file.write(json.dumps(payload, default=_json_default))
            file.write("\n")


def _configure_from_config(config: LogConfig) -> None:
    # level gating happens in LoguruSink.is_enabled, handlers accept everything
    handlers: list[dict[str, Any]] = []
    if config.console_output:
        stream = config.console_stream or sys.stdout
        handlers.append({"sink": _StreamJsonSink(stream), "level": "TRACE"})
    if config.file_output and config.file_path:
        handlers.append({"sink": _FileJsonSink(config.file_path), "level": "TRACE"})

    configure_kwargs: dict[str, Any] = {"handlers": handlers, "patcher": _patch_record}
    if config.extra:
        configure_kwargs["extra"] = config.extra
    logger.configure(**configure_kwargs)


def configure_logging(level: str = "INFO", **kwargs: Any) -> LogConfig:
    """Configure structured logging with the provided level and options."""

    config = LogConfig(level=level, **kwargs)
    _configure_from_config(config)
    return config


class LogScope:
    """Logical scope pushed by ``begin_scope``; active until closed."""

    def __init__(self, state: Any) -> None:
        self.state = state
        self._token: Token[tuple[Any, ...]] | None = _SCOPES_VAR.set((*_SCOPES_VAR.get(), state))

    @property
    def closed(self) -> bool:
        return self._token is None

    def close(self) -> None:
        if self._token is None:
            return
        token, self._token = self._token, None
        _SCOPES_VAR.reset(token)

    def __enter__(self) -> LogScope:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


def current_scopes() -> tuple[Any, ...]:
    """Scope states active in the current context, outermost first."""

    return _SCOPES_VAR.get()


class LoggerSink(Protocol):
    """Contract of the logger wrapped by the intercepting logger."""

    def log(
        self,
        level: LogLevel,
        event_id: Any,
        state: Any,
        error: BaseException | None,
        formatter: Formatter,
    ) -> None: ...

    def is_enabled(self, level: LogLevel) -> bool: ...

    def begin_scope(self, state: Any) -> LogScope: ...


class LoguruSink:
    """Loguru-backed sink bound to one logger category."""

    def __init__(self, category: str, minimum_level: LogLevel) -> None:
        self.category = category
        self.minimum_level = minimum_level
        self._logger = logger.bind(category=category)

    def is_enabled(self, level: LogLevel) -> bool:
        return level != LogLevel.NONE and level >= self.minimum_level

    def log(
        self,
        level: LogLevel,
        event_id: Any,
        state: Any,
        error: BaseException | None,
        formatter: Formatter,
    ) -> None:
        if not self.is_enabled(level):
            return
        event = EventId.of(event_id) if event_id is not None else None
        message = formatter(state, error)
        bound = self._logger.bind(
            event_id=event.id if event else None,
            event_name=event.name if event else None,
        )
        bound.opt(exception=error).log(level.loguru_name, message)

    def begin_scope(self, state: Any) -> LogScope:
        return LogScope(state)


class LoggerFactory:
    """Configures loguru and hands out category-bound sinks.

    Loguru handlers are process-wide: creating a factory replaces the handlers
    of any earlier one, so sinks from an earlier factory write to the outputs
    of the latest. Each factory's sinks keep their own level thresholds.
    """

    def __init__(self, config: LogConfig | None = None) -> None:
        self.config = config or LogConfig()
        _configure_from_config(self.config)

    def minimum_level(self, category: str) -> LogLevel:
        """Most specific configured level for ``category``."""
        match: str | None = None
        for prefix in self.config.category_levels:
            if category == prefix or category.startswith(prefix + "."):
                if match is None or len(prefix) > len(match):
                    match = prefix
        if match is not None:
            return LogLevel.parse(self.config.category_levels[match])
        return LogLevel.parse(self.config.level)

    def create_logger(self, category: str) -> LoguruSink:
        return LoguruSink(category, self.minimum_level(category))


@contextmanager
def log_context(*, trace_id: str | None = None) -> Iterator[str]:
    """Context manager that propagates a trace id to nested records."""

    active_trace = trace_id or uuid4().hex
    trace_token = _TRACE_ID_VAR.set(active_trace)
    try:
        yield active_trace
    finally:
        _TRACE_ID_VAR.reset(trace_token)


def current_trace_id() -> str:
    """Return the currently active trace id, generating one if required."""

    return _ensure_trace_id()


__all__ = [
    "Formatter",
    "LogScope",
    "LoggerFactory",
    "LoggerSink",
    "LoguruSink",
    "configure_logging",
    "current_scopes",
    "current_trace_id",
    "log_context",
    "logger",
]
