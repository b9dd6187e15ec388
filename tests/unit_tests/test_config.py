from __future__ import annotations

import pytest

from flarelog import ConfigurationError, HttpxSender, configure_from_settings
from flarelog.config import DEFAULT_ENDPOINT, FlareLogSettings, LogFormat, LoggingSettings, LogLevel, LogStream

IDENTITY_VARS = ("FLARELOG_APPLICATION", "FLARELOG_KEY", "FLARELOG_MODE", "FLARELOG_SOURCE")


@pytest.fixture
def clean_env(monkeypatch):
    for name in (*IDENTITY_VARS, "FLARELOG_ENDPOINT", "FLARELOG_TIMEOUT"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


@pytest.fixture
def identity_env(clean_env):
    clean_env.setenv("FLARELOG_APPLICATION", "env-app")
    clean_env.setenv("FLARELOG_KEY", "env-key")
    clean_env.setenv("FLARELOG_MODE", "testing")
    clean_env.setenv("FLARELOG_SOURCE", "env-source")
    return clean_env


def test_settings_defaults(clean_env) -> None:
    settings = FlareLogSettings(_env_file=None)

    assert settings.endpoint == DEFAULT_ENDPOINT
    assert settings.timeout == 10.0
    assert settings.identity() == {"application": None, "key": None, "mode": None, "source": None}


def test_settings_read_environment(identity_env) -> None:
    identity_env.setenv("FLARELOG_TIMEOUT", "2.5")

    settings = FlareLogSettings(_env_file=None)

    assert settings.application == "env-app"
    assert settings.source == "env-source"
    assert settings.timeout == 2.5


def test_logging_settings_read_environment(monkeypatch) -> None:
    monkeypatch.setenv("FLARELOG_LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("FLARELOG_LOG_FORMAT", "json")
    monkeypatch.setenv("FLARELOG_LOG_STREAM", "stderr")

    settings = LoggingSettings(_env_file=None)

    assert settings.level is LogLevel.DEBUG
    assert settings.format is LogFormat.JSON
    assert settings.stream is LogStream.STDERR


def test_configure_from_settings(identity_env, console, send, sent_body) -> None:
    create_logger = configure_from_settings(FlareLogSettings(_env_file=None), send=send, console=console)

    create_logger("name")("message")

    assert create_logger.config.url == "https://api.logflare.app/logs?api_key=env-key&source=env-source"
    assert sent_body(send)["metadata"] == {"application": "env-app", "level": "info", "mode": "testing"}


def test_configure_from_settings_uses_configured_timeout(identity_env, console) -> None:
    identity_env.setenv("FLARELOG_TIMEOUT", "3")

    create_logger = configure_from_settings(FlareLogSettings(_env_file=None), console=console)

    assert isinstance(create_logger.config.send, HttpxSender)
    assert create_logger.config.send.timeout == 3.0


def test_configure_from_settings_overrides_win(identity_env, console, send) -> None:
    create_logger = configure_from_settings(
        FlareLogSettings(_env_file=None), mode="production", send=send, console=console
    )

    assert create_logger.config.mode == "production"


def test_configure_from_settings_without_identity_raises(clean_env) -> None:
    clean_env.setenv("FLARELOG_APPLICATION", "env-app")

    with pytest.raises(ConfigurationError) as exc_info:
        configure_from_settings(FlareLogSettings(_env_file=None))

    assert exc_info.value.details["missing"] == ["key", "mode", "source"]


def test_env_file_chain_is_shared(monkeypatch) -> None:
    from flarelog.config import EnvironmentSettings
    from flarelog.config.environment import env_files_for

    monkeypatch.setenv("FLARELOG_ENV", "staging")

    assert env_files_for("staging") == (".env", ".env.local", ".env.staging", ".env.staging.local")
    assert EnvironmentSettings(_env_file=None).env_files == env_files_for("staging")
