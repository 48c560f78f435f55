"""Logging options consumed by the intercepting logger."""

from __future__ import annotations

from collections.abc import Callable

from pydantic import BaseModel

from loggate.core.warnings import WarningsConfiguration, WarningsConfigurationBuilder


class LoggingOptions(BaseModel):
    """Warning policy and sensitive data flags.

    ``sensitive_data_logging_warned`` is flipped by the intercepting logger the
    first time the sensitive data flag is read while enabled.
    """

    warnings_configuration: WarningsConfiguration | None = None
    sensitive_data_logging_enabled: bool = False
    sensitive_data_logging_warned: bool = False


class LoggingOptionsBuilder:
    """Builds :class:`LoggingOptions` step by step."""

    def __init__(self) -> None:
        self._warnings: WarningsConfiguration | None = None
        self._sensitive = False

    def enable_sensitive_data_logging(self, enabled: bool = True) -> LoggingOptionsBuilder:
        self._sensitive = enabled
        return self

    def configure_warnings(
        self, configure: Callable[[WarningsConfigurationBuilder], object]
    ) -> LoggingOptionsBuilder:
        builder = WarningsConfigurationBuilder(self._warnings)
        configure(builder)
        self._warnings = builder.build()
        return self

    def build(self) -> LoggingOptions:
        return LoggingOptions(
            warnings_configuration=self._warnings or WarningsConfiguration(),
            sensitive_data_logging_enabled=self._sensitive,
        )
