"""Configuration management module."""

from loggate.core.config.settings import (
    ConfigManager,
    LoggateConfig,
    LoggingSection,
    WarningsSection,
    load_config,
    load_config_from_env,
)

__all__ = [
    "ConfigManager",
    "LoggateConfig",
    "LoggingSection",
    "WarningsSection",
    "load_config",
    "load_config_from_env",
]
