"""
Environment Configuration.

The environment is determined by the `FLARELOG_ENV` environment variable and
controls which .env files are loaded.
"""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


Environment = Literal["development", "testing", "staging", "production"]


def env_files_for(env: str) -> tuple[str, ...]:
    """.env files for ``env``, later entries overriding earlier ones."""
    return (
        ".env",
        ".env.local",
        f".env.{env}",
        f".env.{env}.local",
    )


class EnvironmentSettings(BaseSettings):
    """Environment detection."""

    model_config = SettingsConfigDict(
        env_prefix="FLARELOG_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    env: Environment = Field(
        default="development",
        description="Current environment (development, testing, staging, production)",
    )

    @property
    def env_files(self) -> tuple[str, ...]:
        return env_files_for(self.env)
