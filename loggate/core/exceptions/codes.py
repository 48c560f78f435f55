"""Error codes raised by loggate."""

from enum import Enum


class ErrorCode(str, Enum):
    """错误代码枚举."""

    GENERAL_ERROR = "GENERAL_ERROR"
    WARNING_AS_ERROR = "WARNING_AS_ERROR"
    CONFIGURATION_ERROR = "CONFIGURATION_ERROR"
