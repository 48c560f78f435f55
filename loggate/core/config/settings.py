"""配置管理模块 - 加载日志与警告策略配置"""

import os
import tomllib
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any

from loguru import logger

from loggate.core.exceptions import ConfigurationError
from loggate.core.levels import LogLevel
from loggate.core.logging.config import LogConfig
from loggate.core.options import LoggingOptions
from loggate.core.warnings import WarningBehavior, WarningsConfiguration

_TRUE_VALUES = ("1", "true", "yes", "on")
_FALSE_VALUES = ("0", "false", "no", "off")


def parse_flag(value: Any, setting: str) -> bool:
    """解析布尔开关, 只接受布尔值或明确的字符串"""
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        normalized = value.strip().lower()
        if normalized in _TRUE_VALUES:
            return True
        if normalized in _FALSE_VALUES:
            return False
    raise ConfigurationError(f"Invalid boolean for {setting}: {value!r}", setting=setting)


@dataclass
class LoggingSection:
    """日志配置"""

    level: str = "INFO"
    console: bool = True
    file: str | None = None
    category_levels: dict[str, str] = field(default_factory=dict)


@dataclass
class WarningsSection:
    """警告策略配置"""

    default: str = WarningBehavior.LOG.value
    throw: list[str] = field(default_factory=list)
    log: list[str] = field(default_factory=list)
    ignore: list[str] = field(default_factory=list)


@dataclass
class LoggateConfig:
    """loggate主配置"""

    logging: LoggingSection = field(default_factory=LoggingSection)
    warnings: WarningsSection = field(default_factory=WarningsSection)
    sensitive_data_logging: bool = False

    def __post_init__(self) -> None:
        LogLevel.parse(self.logging.level)
        for level in self.logging.category_levels.values():
            LogLevel.parse(level)
        WarningBehavior.parse(self.warnings.default)
        for name in ("throw", "log", "ignore"):
            entries = getattr(self.warnings, name)
            if not isinstance(entries, list) or not all(isinstance(e, str) and e.strip() for e in entries):
                raise ConfigurationError(
                    f"warnings.{name} must be a list of event names, got {entries!r}",
                    setting=f"warnings.{name}",
                )
        if not isinstance(self.sensitive_data_logging, bool):
            raise ConfigurationError(
                f"Invalid boolean for sensitive_data_logging: {self.sensitive_data_logging!r}",
                setting="sensitive_data_logging",
            )

    @classmethod
    def from_dict(cls, config_dict: dict[str, Any]) -> "LoggateConfig":
        """从字典创建配置"""
        try:
            logging_section = LoggingSection(**config_dict.get("logging", {}))
            warnings_section = WarningsSection(**config_dict.get("warnings", {}))
        except TypeError as exc:
            raise ConfigurationError(f"Invalid configuration: {exc}") from exc

        return cls(
            logging=logging_section,
            warnings=warnings_section,
            sensitive_data_logging=parse_flag(
                config_dict.get("sensitive_data_logging", False), "sensitive_data_logging"
            ),
        )

    def to_dict(self) -> dict[str, Any]:
        """转换为字典"""
        logging_dict = {k: v for k, v in asdict(self.logging).items() if v is not None}
        return {
            "logging": logging_dict,
            "warnings": asdict(self.warnings),
            "sensitive_data_logging": self.sensitive_data_logging,
        }

    def to_warnings_configuration(self) -> WarningsConfiguration:
        configuration = WarningsConfiguration(default_behavior=WarningBehavior.parse(self.warnings.default))
        # later entries win: ignore < log < throw
        configuration = configuration.with_explicit(self.warnings.ignore, WarningBehavior.IGNORE)
        configuration = configuration.with_explicit(self.warnings.log, WarningBehavior.LOG)
        return configuration.with_explicit(self.warnings.throw, WarningBehavior.THROW)

    def to_logging_options(self) -> LoggingOptions:
        return LoggingOptions(
            warnings_configuration=self.to_warnings_configuration(),
            sensitive_data_logging_enabled=self.sensitive_data_logging,
        )

    def to_log_config(self, **overrides: Any) -> LogConfig:
        values: dict[str, Any] = {
            "level": self.logging.level,
            "category_levels": dict(self.logging.category_levels),
            "console_output": self.logging.console,
            "file_output": self.logging.file is not None,
            "file_path": self.logging.file,
        }
        values.update(overrides)
        return LogConfig(**values)


class ConfigManager:
    """配置管理器"""

    def __init__(self, config_path: Path | None = None):
        """初始化配置管理器

        Args:
            config_path: 配置文件路径，如果为None则使用默认路径
        """
        self.config_path = config_path or Path.home() / ".loggate" / "config.toml"
        self.config = self._load_config()

    def _load_config(self) -> LoggateConfig:
        """加载配置"""
        if not self.config_path.exists():
            logger.debug("No config file at {path}, using defaults", path=str(self.config_path))
            return LoggateConfig()

        try:
            with open(self.config_path, "rb") as f:
                config_dict = tomllib.load(f)
        except (OSError, tomllib.TOMLDecodeError) as exc:
            raise ConfigurationError(
                f"Failed to load config from {self.config_path}: {exc}",
                details={"path": str(self.config_path)},
            ) from exc

        config = LoggateConfig.from_dict(config_dict)
        logger.debug("Loaded config from {path}", path=str(self.config_path))
        return config

    def get_config(self) -> LoggateConfig:
        """获取当前配置"""
        return self.config

    def update_config(self, **updates: Any) -> None:
        """更新配置"""
        config_dict = self.config.to_dict()

        def deep_update(d: dict[str, Any], u: dict[str, Any]) -> dict[str, Any]:
            """深度更新字典"""
            for k, v in u.items():
                if isinstance(v, dict):
                    d[k] = deep_update(d.get(k, {}), v)
                else:
                    d[k] = v
            return d

        deep_update(config_dict, updates)
        self.config = LoggateConfig.from_dict(config_dict)

    def save_config(self) -> None:
        """保存配置到文件"""
        import tomli_w

        self.config_path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.config_path, "wb") as f:
            tomli_w.dump(self.config.to_dict(), f)


def load_config_from_env() -> dict[str, Any]:
    """从环境变量加载配置"""
    config: dict[str, Any] = {}

    # 日志配置
    logging_config: dict[str, Any] = {}
    loggate_logging_level = os.getenv("LOGGATE_LOGGING_LEVEL")
    if loggate_logging_level is not None:
        logging_config["level"] = loggate_logging_level
    loggate_logging_file = os.getenv("LOGGATE_LOGGING_FILE")
    if loggate_logging_file is not None:
        logging_config["file"] = loggate_logging_file

    if logging_config:
        config["logging"] = logging_config

    # 警告策略
    loggate_warnings_default = os.getenv("LOGGATE_WARNINGS_DEFAULT")
    if loggate_warnings_default is not None:
        config["warnings"] = {"default": loggate_warnings_default}

    loggate_sensitive = os.getenv("LOGGATE_SENSITIVE_DATA_LOGGING")
    if loggate_sensitive is not None:
        config["sensitive_data_logging"] = parse_flag(loggate_sensitive, "LOGGATE_SENSITIVE_DATA_LOGGING")

    return config


def load_config(config_path: Path | None = None) -> LoggateConfig:
    """Load the config file and apply environment overrides."""
    manager = ConfigManager(config_path)
    overrides = load_config_from_env()
    if overrides:
        manager.update_config(**overrides)
    return manager.get_config()
