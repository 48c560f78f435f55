"""Intercepting logger applying the warning policy before delegating to a sink."""

from __future__ import annotations

from typing import Any, Protocol

from loggate.core.categories import Infrastructure, LoggerCategory
from loggate.core.events import CoreEventId, is_default_state, state_discriminator
from loggate.core.exceptions import PolicyEscalationError
from loggate.core.levels import LogLevel
from loggate.core.logging import Formatter, LoggerSink, LogScope
from loggate.core.options import LoggingOptions
from loggate.core.strings import LogMessageTemplate
from loggate.core.warnings import WarningBehavior


class SinkFactory(Protocol):
    def create_logger(self, category: str) -> LoggerSink: ...


class InterceptingLogger:
    """Logger wrapper that can drop, forward or escalate warnings.

    Warnings carrying a non-default state are looked up in the warning policy of
    ``options``. ``THROW`` raises :class:`PolicyEscalationError` even when the
    sink has warnings disabled, ``IGNORE`` drops the event and ``LOG`` forwards
    it with a note naming the state. Every other call is forwarded unchanged
    when the sink has the level enabled.

    Args:
        factory: Creates the underlying sink for the category.
        options: Warning policy and sensitive data flags; ``None`` disables both.
        category: Logger category whose fixed name selects the sink.
    """

    def __init__(
        self,
        factory: SinkFactory,
        options: LoggingOptions | None = None,
        category: type[LoggerCategory] = Infrastructure,
    ) -> None:
        self._category = category
        self._logger = factory.create_logger(category.name)
        self._options = options

    @property
    def options(self) -> LoggingOptions | None:
        return self._options

    @property
    def category(self) -> type[LoggerCategory]:
        return self._category

    def log(
        self,
        level: LogLevel,
        event_id: Any,
        state: Any,
        error: BaseException | None,
        formatter: Formatter,
    ) -> None:
        options = self._options
        if (
            level == LogLevel.WARNING
            and not is_default_state(state)
            and options is not None
            and options.warnings_configuration is not None
        ):
            behavior = options.warnings_configuration.get_behavior(state)
            state_name = state_discriminator(state)

            if behavior == WarningBehavior.THROW:
                message = formatter(state, error)
                raise PolicyEscalationError(
                    LogMessageTemplate.warning_as_error(state_name, message),
                    state_name,
                    event_id=event_id,
                    formatted_message=message,
                )

            if behavior == WarningBehavior.LOG and self.is_enabled(level):

                def _warning_formatter(s: Any, e: BaseException | None) -> str:
                    return LogMessageTemplate.warning_logged(formatter(s, e), state_name)

                self._logger.log(level, event_id, state, error, _warning_formatter)
        elif self.is_enabled(level):
            self._logger.log(level, event_id, state, error, formatter)

    def is_sensitive_data_enabled(self) -> bool:
        """Whether sensitive data may be logged; warns the first time it is.

        The warned flag is a plain check-then-set, so concurrent first calls may
        each emit the warning.
        """
        options = self._options
        if options is None:
            return False

        if options.sensitive_data_logging_enabled and not options.sensitive_data_logging_warned:
            event = CoreEventId.SENSITIVE_DATA_LOGGING_ENABLED_WARNING
            self.log(
                LogLevel.WARNING,
                event,
                event,
                None,
                lambda _, __: LogMessageTemplate.SENSITIVE_DATA_LOGGING_ENABLED,
            )
            options.sensitive_data_logging_warned = True

        return options.sensitive_data_logging_enabled

    def is_enabled(self, level: LogLevel) -> bool:
        return self._logger.is_enabled(level)

    def begin_scope(self, state: Any) -> LogScope:
        return self._logger.begin_scope(state)
