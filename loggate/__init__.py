"""loggate - policy-driven interception for structured logging.

Wraps a loguru-backed sink so warning events can be logged, ignored or turned
into errors from configuration, without touching call sites.
"""

from pathlib import Path

from loggate.core import (
    CoreEventId,
    EventId,
    InterceptingLogger,
    LoggingOptions,
    LogLevel,
    PolicyEscalationError,
    WarningBehavior,
    WarningsConfiguration,
)
from loggate.core.categories import Infrastructure, LoggerCategory
from loggate.core.config import load_config
from loggate.core.logging import LogConfig, LoggerFactory

__version__ = "0.1.0"


def create_logger(
    category: type[LoggerCategory] = Infrastructure,
    config_path: Path | None = None,
) -> InterceptingLogger:
    """Build an intercepting logger from the config file and environment."""
    config = load_config(config_path)
    factory = LoggerFactory(config.to_log_config())
    return InterceptingLogger(factory, config.to_logging_options(), category)


__all__ = [
    "CoreEventId",
    "EventId",
    "InterceptingLogger",
    "LogConfig",
    "LogLevel",
    "LoggerFactory",
    "LoggingOptions",
    "PolicyEscalationError",
    "WarningBehavior",
    "WarningsConfiguration",
    "create_logger",
]
