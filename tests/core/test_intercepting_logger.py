"""Tests for the intercepting logger warning policy."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

import pytest

from loggate.core import (
    CoreEventId,
    InterceptingLogger,
    LoggingOptions,
    LogLevel,
    PolicyEscalationError,
    Query,
    WarningBehavior,
    WarningsConfiguration,
)
from loggate.core.logging import LogScope


class SampleEvent(Enum):
    TYPE_A = 1
    TYPE_B = 2
    TYPE_C = 3


@dataclass
class RecordingSink:
    enabled: bool = True
    calls: list[dict[str, Any]] = field(default_factory=list)
    scopes: list[Any] = field(default_factory=list)

    def log(self, level, event_id, state, error, formatter) -> None:
        self.calls.append(
            {
                "level": level,
                "event_id": event_id,
                "state": state,
                "error": error,
                "formatter": formatter,
                "message": formatter(state, error),
            }
        )

    def is_enabled(self, level: LogLevel) -> bool:
        return self.enabled

    def begin_scope(self, state: Any) -> LogScope:
        self.scopes.append(state)
        return LogScope(state)


class StubFactory:
    def __init__(self, sink: RecordingSink) -> None:
        self.sink = sink
        self.categories: list[str] = []

    def create_logger(self, category: str) -> RecordingSink:
        self.categories.append(category)
        return self.sink


def _formatter(state: Any, error: BaseException | None) -> str:
    return f"message for {state}"


def _policy(**behaviors: WarningBehavior) -> LoggingOptions:
    configuration = WarningsConfiguration()
    for name, behavior in behaviors.items():
        configuration = configuration.with_explicit([SampleEvent[name]], behavior)
    return LoggingOptions(warnings_configuration=configuration)


def _logger(sink: RecordingSink, options: LoggingOptions | None = None) -> InterceptingLogger:
    return InterceptingLogger(StubFactory(sink), options)


class TestForwarding:
    @pytest.mark.parametrize("level", [LogLevel.TRACE, LogLevel.DEBUG, LogLevel.INFORMATION, LogLevel.ERROR, LogLevel.CRITICAL])
    @pytest.mark.parametrize("enabled", [True, False])
    def test_non_warning_levels_forward_iff_enabled(self, level: LogLevel, enabled: bool) -> None:
        sink = RecordingSink(enabled=enabled)
        logger = _logger(sink, _policy(TYPE_A=WarningBehavior.THROW))
        error = ValueError("boom")

        logger.log(level, 7, SampleEvent.TYPE_A, error, _formatter)

        if enabled:
            assert len(sink.calls) == 1
            call = sink.calls[0]
            assert call["level"] is level
            assert call["event_id"] == 7
            assert call["state"] is SampleEvent.TYPE_A
            assert call["error"] is error
            assert call["formatter"] is _formatter
        else:
            assert sink.calls == []

    @pytest.mark.parametrize("state", [None, "", 0, [], {}])
    def test_default_state_warning_bypasses_policy(self, state: Any) -> None:
        sink = RecordingSink()
        options = LoggingOptions(
            warnings_configuration=WarningsConfiguration(default_behavior=WarningBehavior.THROW)
        )
        logger = _logger(sink, options)

        logger.log(LogLevel.WARNING, 1, state, None, _formatter)

        assert len(sink.calls) == 1
        assert sink.calls[0]["formatter"] is _formatter

    def test_warning_without_options_forwards_verbatim(self) -> None:
        sink = RecordingSink()
        logger = _logger(sink)

        logger.log(LogLevel.WARNING, 1, SampleEvent.TYPE_A, None, _formatter)

        assert sink.calls[0]["formatter"] is _formatter

    def test_warning_without_policy_table_forwards_verbatim(self) -> None:
        sink = RecordingSink()
        logger = _logger(sink, LoggingOptions(warnings_configuration=None))

        logger.log(LogLevel.WARNING, 1, SampleEvent.TYPE_A, None, _formatter)

        assert sink.calls[0]["message"] == "message for SampleEvent.TYPE_A"

    def test_category_name_resolved_once(self) -> None:
        factory = StubFactory(RecordingSink())
        logger = InterceptingLogger(factory, None, Query)

        logger.log(LogLevel.INFORMATION, 1, "x", None, _formatter)
        logger.log(LogLevel.INFORMATION, 2, "y", None, _formatter)

        assert factory.categories == ["loggate.Query"]
        assert logger.category is Query


class TestWarningPolicy:
    @pytest.mark.parametrize("enabled", [True, False])
    def test_ignore_never_reaches_sink(self, enabled: bool) -> None:
        sink = RecordingSink(enabled=enabled)
        logger = _logger(sink, _policy(TYPE_B=WarningBehavior.IGNORE))

        logger.log(LogLevel.WARNING, 2, SampleEvent.TYPE_B, None, _formatter)

        assert sink.calls == []

    @pytest.mark.parametrize("enabled", [True, False])
    def test_throw_raises_even_when_sink_disabled(self, enabled: bool) -> None:
        sink = RecordingSink(enabled=enabled)
        logger = _logger(sink, _policy(TYPE_A=WarningBehavior.THROW))

        with pytest.raises(PolicyEscalationError) as excinfo:
            logger.log(LogLevel.WARNING, 1, SampleEvent.TYPE_A, None, _formatter)

        assert sink.calls == []
        error = excinfo.value
        assert error.state_name == "SampleEvent.TYPE_A"
        assert error.event_id == 1
        assert error.formatted_message == "message for SampleEvent.TYPE_A"
        assert "SampleEvent.TYPE_A" in str(error)
        assert "message for SampleEvent.TYPE_A" in str(error)
        assert error.error_code == "WARNING_AS_ERROR"

    def test_log_wraps_message_with_state_name(self) -> None:
        sink = RecordingSink()
        logger = _logger(sink, _policy(TYPE_C=WarningBehavior.LOG))

        logger.log(LogLevel.WARNING, 3, SampleEvent.TYPE_C, None, _formatter)

        assert len(sink.calls) == 1
        call = sink.calls[0]
        assert call["level"] is LogLevel.WARNING
        assert call["event_id"] == 3
        assert call["state"] is SampleEvent.TYPE_C
        assert call["formatter"] is not _formatter
        assert "message for SampleEvent.TYPE_C" in call["message"]
        assert "SampleEvent.TYPE_C" in call["message"].replace("message for SampleEvent.TYPE_C", "")

    def test_log_is_noop_when_sink_disabled(self) -> None:
        sink = RecordingSink(enabled=False)
        logger = _logger(sink, _policy(TYPE_C=WarningBehavior.LOG))

        logger.log(LogLevel.WARNING, 3, SampleEvent.TYPE_C, None, _formatter)

        assert sink.calls == []

    def test_mixed_policy_table(self) -> None:
        sink = RecordingSink()
        logger = _logger(sink, _policy(TYPE_A=WarningBehavior.THROW, TYPE_B=WarningBehavior.IGNORE))

        with pytest.raises(PolicyEscalationError):
            logger.log(LogLevel.WARNING, 1, SampleEvent.TYPE_A, None, _formatter)
        assert sink.calls == []

        logger.log(LogLevel.WARNING, 2, SampleEvent.TYPE_B, None, _formatter)
        assert sink.calls == []

        logger.log(LogLevel.WARNING, 3, SampleEvent.TYPE_C, None, _formatter)
        assert len(sink.calls) == 1
        assert sink.calls[0]["level"] is LogLevel.WARNING

    def test_default_behavior_applies_to_unregistered_events(self) -> None:
        sink = RecordingSink()
        options = LoggingOptions(
            warnings_configuration=WarningsConfiguration(default_behavior=WarningBehavior.IGNORE)
        )
        logger = _logger(sink, options)

        logger.log(LogLevel.WARNING, 3, SampleEvent.TYPE_C, None, _formatter)

        assert sink.calls == []

    def test_formatter_called_once_on_throw(self) -> None:
        calls: list[Any] = []

        def counting(state: Any, error: BaseException | None) -> str:
            calls.append(state)
            return "counted"

        logger = _logger(RecordingSink(), _policy(TYPE_A=WarningBehavior.THROW))

        with pytest.raises(PolicyEscalationError):
            logger.log(LogLevel.WARNING, 1, SampleEvent.TYPE_A, None, counting)

        assert calls == [SampleEvent.TYPE_A]

    def test_formatter_failure_propagates(self) -> None:
        def broken(state: Any, error: BaseException | None) -> str:
            raise RuntimeError("formatter failed")

        logger = _logger(RecordingSink(), _policy(TYPE_A=WarningBehavior.THROW))

        with pytest.raises(RuntimeError, match="formatter failed"):
            logger.log(LogLevel.WARNING, 1, SampleEvent.TYPE_A, None, broken)


class TestSensitiveData:
    def test_absent_options_returns_false(self) -> None:
        sink = RecordingSink()
        assert _logger(sink).is_sensitive_data_enabled() is False
        assert sink.calls == []

    def test_warns_once(self) -> None:
        sink = RecordingSink()
        options = LoggingOptions(
            warnings_configuration=WarningsConfiguration(),
            sensitive_data_logging_enabled=True,
        )
        logger = _logger(sink, options)

        assert logger.is_sensitive_data_enabled() is True
        assert logger.is_sensitive_data_enabled() is True

        assert len(sink.calls) == 1
        call = sink.calls[0]
        assert call["level"] is LogLevel.WARNING
        assert call["event_id"] is CoreEventId.SENSITIVE_DATA_LOGGING_ENABLED_WARNING
        assert "Sensitive data logging is enabled" in call["message"]
        assert options.sensitive_data_logging_warned is True

    def test_warning_shared_across_loggers_with_same_options(self) -> None:
        sink = RecordingSink()
        options = LoggingOptions(sensitive_data_logging_enabled=True)

        assert _logger(sink, options).is_sensitive_data_enabled() is True
        assert _logger(sink, options).is_sensitive_data_enabled() is True

        assert len(sink.calls) == 1

    @pytest.mark.parametrize("warned", [True, False])
    def test_disabled_never_warns(self, warned: bool) -> None:
        sink = RecordingSink()
        options = LoggingOptions(sensitive_data_logging_enabled=False, sensitive_data_logging_warned=warned)

        assert _logger(sink, options).is_sensitive_data_enabled() is False
        assert sink.calls == []
        assert options.sensitive_data_logging_warned is warned

    def test_already_warned_does_not_emit(self) -> None:
        sink = RecordingSink()
        options = LoggingOptions(sensitive_data_logging_enabled=True, sensitive_data_logging_warned=True)

        assert _logger(sink, options).is_sensitive_data_enabled() is True
        assert sink.calls == []

    def test_throw_policy_on_sensitive_warning_raises_and_keeps_flag(self) -> None:
        configuration = WarningsConfiguration().with_explicit(
            [CoreEventId.SENSITIVE_DATA_LOGGING_ENABLED_WARNING], WarningBehavior.THROW
        )
        options = LoggingOptions(warnings_configuration=configuration, sensitive_data_logging_enabled=True)
        logger = _logger(RecordingSink(), options)

        with pytest.raises(PolicyEscalationError):
            logger.is_sensitive_data_enabled()

        assert options.sensitive_data_logging_warned is False


class TestPassThrough:
    @pytest.mark.parametrize("enabled", [True, False])
    def test_is_enabled(self, enabled: bool) -> None:
        logger = _logger(RecordingSink(enabled=enabled), _policy(TYPE_A=WarningBehavior.THROW))
        assert logger.is_enabled(LogLevel.WARNING) is enabled

    def test_begin_scope(self) -> None:
        sink = RecordingSink()
        logger = _logger(sink)

        with logger.begin_scope({"request": "r-1"}) as scope:
            assert not scope.closed

        assert scope.closed
        assert sink.scopes == [{"request": "r-1"}]
