"""
flarelog Configuration Module.

Nested settings, one class per concern, each with its own environment
variable prefix.

Multi-Environment Support:
    Set `FLARELOG_ENV` to one of: development, testing, staging, production
    The .env files are loaded in this order (later overrides earlier):
    1. .env
    2. .env.local
    3. .env.{environment}
    4. .env.{environment}.local

Usage:
    from flarelog.config import settings

    settings.logflare.application
    settings.logging.level
"""

from functools import cached_property
import os

from pydantic_settings import BaseSettings, SettingsConfigDict

from .environment import EnvironmentSettings, env_files_for
from .logflare import DEFAULT_ENDPOINT, FlareLogSettings
from .logging import LogFormat, LoggingSettings, LogLevel, LogStream


def _get_env_files() -> tuple[str, ...]:
    return env_files_for(os.getenv("FLARELOG_ENV", "development"))


class Settings(BaseSettings):
    """Composite settings aggregating the configuration domains."""

    model_config = SettingsConfigDict(
        env_file=_get_env_files(),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @cached_property
    def environment(self) -> EnvironmentSettings:
        return EnvironmentSettings()

    @cached_property
    def logflare(self) -> FlareLogSettings:
        return FlareLogSettings(_env_file=self.environment.env_files)

    @cached_property
    def logging(self) -> LoggingSettings:
        return LoggingSettings(_env_file=self.environment.env_files)


# Singleton instance
settings = Settings()

__all__ = [
    "DEFAULT_ENDPOINT",
    "EnvironmentSettings",
    "FlareLogSettings",
    "LogFormat",
    "LogLevel",
    "LogStream",
    "LoggingSettings",
    "Settings",
    "settings",
]
