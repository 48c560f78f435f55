"""Message templates used by the interception layer."""

from typing import Any


class LogMessageTemplate:
    """Resource strings for loggate messages."""

    SENSITIVE_DATA_LOGGING_ENABLED = (
        "Sensitive data logging is enabled. Log entries and exception messages may include "
        "sensitive application data, this mode should only be enabled during development."
    )

    _templates: dict[str, str] = {
        "warning_as_error": (
            "An error was generated for warning '{event_name}': {message} This exception can be "
            "suppressed or logged by changing the behavior of '{event_name}' in the warnings configuration."
        ),
        "warning_logged": (
            "{message} This warning was logged because '{event_name}' is configured to be logged; "
            "it can be turned into an error or ignored in the warnings configuration."
        ),
    }

    @classmethod
    def get_message(cls, key: str, **kwargs: Any) -> str:
        """获取格式化后的消息.

        Args:
            key: 模板名称
            **kwargs: 模板变量

        Returns:
            格式化后的消息
        """
        return cls._templates[key].format(**kwargs)

    @classmethod
    def warning_as_error(cls, event_name: str, message: str) -> str:
        return cls.get_message("warning_as_error", event_name=event_name, message=message)

    @classmethod
    def warning_logged(cls, message: str, event_name: str) -> str:
        return cls.get_message("warning_logged", event_name=event_name, message=message)
