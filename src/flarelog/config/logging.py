"""
Logging Configuration.
"""

from enum import Enum

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class LogLevel(str, Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LogFormat(str, Enum):
    CONSOLE = "console"
    JSON = "json"


class LogStream(str, Enum):
    STDOUT = "stdout"
    STDERR = "stderr"


class LoggingSettings(BaseSettings):
    """Local console sink configuration."""

    model_config = SettingsConfigDict(
        env_prefix="FLARELOG_LOG_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    level: LogLevel = Field(default=LogLevel.INFO, description="Log level")
    format: LogFormat = Field(default=LogFormat.CONSOLE, description="Output format")
    stream: LogStream = Field(default=LogStream.STDOUT, description="Output stream for the console sink")
    console_timestamp_format: str = Field(
        default="%Y-%m-%d %H:%M:%S",
        description="Console timestamp format",
    )
    console_logger_width: int = Field(default=24, description="Console logger column width")
    console_separator: str = Field(default=" | ", description="Console column separator")
