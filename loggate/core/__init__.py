"""Core interception layer, policy table and structured sink."""

from loggate.core.categories import Database, Infrastructure, LoggerCategory, Model, Query, Update, category_name
from loggate.core.events import CoreEventId, is_default_state, state_discriminator
from loggate.core.exceptions import ConfigurationError, ErrorCode, LoggateError, PolicyEscalationError
from loggate.core.intercepting import InterceptingLogger
from loggate.core.levels import EventId, LogLevel
from loggate.core.options import LoggingOptions, LoggingOptionsBuilder
from loggate.core.strings import LogMessageTemplate
from loggate.core.warnings import WarningBehavior, WarningsConfiguration, WarningsConfigurationBuilder

__all__ = [
    "ConfigurationError",
    "CoreEventId",
    "Database",
    "ErrorCode",
    "EventId",
    "Infrastructure",
    "InterceptingLogger",
    "LogLevel",
    "LogMessageTemplate",
    "LoggateError",
    "LoggerCategory",
    "LoggingOptions",
    "LoggingOptionsBuilder",
    "Model",
    "PolicyEscalationError",
    "Query",
    "Update",
    "WarningBehavior",
    "WarningsConfiguration",
    "WarningsConfigurationBuilder",
    "category_name",
    "is_default_state",
    "state_discriminator",
]
