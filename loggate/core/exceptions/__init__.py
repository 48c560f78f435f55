"""Exception handling module."""

from loggate.core.exceptions.base import ConfigurationError, LoggateError, PolicyEscalationError
from loggate.core.exceptions.codes import ErrorCode

__all__ = [
    "LoggateError",
    "PolicyEscalationError",
    "ConfigurationError",
    "ErrorCode",
]
