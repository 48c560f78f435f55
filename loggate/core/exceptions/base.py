"""loggate核心异常类."""

from typing import Any

from loggate.core.exceptions.codes import ErrorCode


class LoggateError(Exception):
    """loggate基础异常类."""

    def __init__(
        self,
        message: str,
        error_code: str = ErrorCode.GENERAL_ERROR.value,
        details: dict[str, Any] | None = None,
    ):
        """初始化异常.

        Args:
            message: 错误消息
            error_code: 错误代码
            details: 额外详情
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}


class PolicyEscalationError(LoggateError):
    """A warning configured to throw was logged."""

    def __init__(
        self,
        message: str,
        state_name: str,
        event_id: Any = None,
        formatted_message: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super_details = details or {}
        super_details["state"] = state_name
        if event_id is not None:
            super_details["event_id"] = str(event_id)
        super().__init__(message, ErrorCode.WARNING_AS_ERROR.value, super_details)
        self.state_name = state_name
        self.event_id = event_id
        self.formatted_message = formatted_message


class ConfigurationError(LoggateError):
    """配置错误."""

    def __init__(
        self,
        message: str,
        setting: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super_details = details or {}
        if setting:
            super_details["setting"] = setting
        super().__init__(message, ErrorCode.CONFIGURATION_ERROR.value, super_details)
        self.setting = setting
