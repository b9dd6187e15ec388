from __future__ import annotations

import pytest

from flarelog import (
    ConfigurationError,
    HttpxSender,
    LoggerConfig,
    LoggerNameError,
    NamedLogger,
    configure_logger,
)
from flarelog.logging import StructlogConsole


class TestConfigureLogger:
    @pytest.mark.parametrize("missing", ["application", "key", "mode", "source"])
    def test_missing_required_property_raises(self, options, missing) -> None:
        invalid = {k: v for k, v in options.items() if k != missing}

        with pytest.raises(ConfigurationError, match="required properties") as exc_info:
            configure_logger(invalid)

        assert exc_info.value.details["missing"] == [missing]
        assert exc_info.value.code == "configuration_error"

    @pytest.mark.parametrize("missing", ["application", "key", "mode", "source"])
    def test_falsy_required_property_raises(self, options, missing) -> None:
        with pytest.raises(ConfigurationError):
            configure_logger({**options, missing: ""})

    def test_returns_create_logger_function(self, options) -> None:
        create_logger = configure_logger(options)

        assert callable(create_logger)
        assert isinstance(create_logger.config, LoggerConfig)

    def test_keyword_overrides_take_precedence(self, options) -> None:
        create_logger = configure_logger(options, application="other-app")

        assert create_logger.config.application == "other-app"

    def test_accepts_logger_config(self, console, send) -> None:
        config = LoggerConfig(application="a", key="k", mode="m", source="s", send=send, console=console)

        create_logger = configure_logger(config)

        assert create_logger.config is config

    def test_unknown_options_are_ignored(self, options) -> None:
        create_logger = configure_logger({**options, "fetch": object()})

        assert create_logger.config.key == "string"

    def test_defaults_collaborators(self) -> None:
        create_logger = configure_logger(application="a", key="k", mode="m", source="s")

        assert isinstance(create_logger.config.send, HttpxSender)
        assert isinstance(create_logger.config.console, StructlogConsole)


class TestLoggerConfig:
    def test_direct_construction_validates(self) -> None:
        with pytest.raises(ConfigurationError) as exc_info:
            LoggerConfig(application="a", key="", mode="m", source="")

        assert exc_info.value.details["missing"] == ["key", "source"]

    def test_is_immutable(self, options) -> None:
        config = configure_logger(options).config

        with pytest.raises(AttributeError):
            config.key = "changed"  # type: ignore[misc]

    def test_url_uses_key_and_source_verbatim(self) -> None:
        config = LoggerConfig(application="a", key="k&y", mode="m", source="s rc")

        assert config.url == "https://api.logflare.app/logs?api_key=k&y&source=s rc"


class TestCreateLogger:
    @pytest.mark.parametrize("name", [None, ""])
    def test_without_name_raises(self, options, name) -> None:
        create_logger = configure_logger(options)

        with pytest.raises(LoggerNameError, match="name"):
            create_logger(name)

    def test_returns_named_logger(self, options) -> None:
        log = configure_logger(options)("name")

        assert isinstance(log, NamedLogger)
        assert callable(log)
        assert log.name == "name"
        assert log.display_name == "[name]"

    def test_compound_name_renders_each_segment(self, options) -> None:
        log = configure_logger(options)("one+two")

        assert log.display_name == "[one] [two]"


def test_injected_console_leaves_logging_unconfigured(options, monkeypatch) -> None:
    from flarelog.logging import core

    monkeypatch.setattr(core, "_configured", False)

    configure_logger(options)("name")("message")

    assert core._configured is False
