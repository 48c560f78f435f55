"""Structured logging sink backed by loguru."""

from loggate.core.logging.config import LogConfig
from loggate.core.logging.logger import (
    Formatter,
    LogScope,
    LoggerFactory,
    LoggerSink,
    LoguruSink,
    configure_logging,
    current_scopes,
    current_trace_id,
    log_context,
    logger,
)

__all__ = [
    "Formatter",
    "LogConfig",
    "LogScope",
    "LoggerFactory",
    "LoggerSink",
    "LoguruSink",
    "configure_logging",
    "current_scopes",
    "current_trace_id",
    "log_context",
    "logger",
]
