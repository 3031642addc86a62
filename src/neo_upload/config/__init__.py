"""Configuration for neo-upload: logging and upload settings."""

from .logging_config import (
    LoggingConfig,
    LogFormat,
    LogLevel,
    LogVerbosity,
    get_logger,
    setup_logging,
)
from .settings import UploadSettings, get_settings

__all__ = [
    "LoggingConfig",
    "LogFormat",
    "LogLevel",
    "LogVerbosity",
    "get_logger",
    "setup_logging",
    "UploadSettings",
    "get_settings",
]
