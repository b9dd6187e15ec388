"""
Logflare Configuration.

Identity values default to ``None`` so that a partially configured environment
is reported by the factory as a ``ConfigurationError`` instead of a pydantic
validation failure at import time.
"""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_ENDPOINT = "https://api.logflare.app/logs"


class FlareLogSettings(BaseSettings):
    """Logflare identity and transport configuration."""

    model_config = SettingsConfigDict(
        env_prefix="FLARELOG_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    application: Optional[str] = Field(default=None, description="Application name sent as metadata")
    key: Optional[str] = Field(default=None, description="Logflare API key")
    mode: Optional[str] = Field(default=None, description="Run mode sent as metadata (e.g. production)")
    source: Optional[str] = Field(default=None, description="Logflare source identifier")

    endpoint: str = Field(default=DEFAULT_ENDPOINT, description="Logflare ingestion endpoint")
    timeout: float = Field(default=10.0, gt=0, description="HTTP timeout for the default sender (seconds)")

    def identity(self) -> dict[str, Optional[str]]:
        return {
            "application": self.application,
            "key": self.key,
            "mode": self.mode,
            "source": self.source,
        }
