"""Tests for settings loading and logging setup."""

import logging
from pathlib import Path

import pytest

from warden_oauth2.config import Config, LoggingConfig, ProviderConfig, configure_logging
from warden_oauth2.domain.shared.error import ConfigurationError
from warden_oauth2.domain.strategy.model import OAuth2Config


class TestProviderConfig:
    def test_is_configured_requires_both_credentials(self) -> None:
        assert ProviderConfig(consumer_key="a", consumer_secret="b").is_configured
        assert not ProviderConfig(consumer_key="a").is_configured
        assert not ProviderConfig().is_configured

    def test_to_oauth2_config(self) -> None:
        provider = ProviderConfig(consumer_key="a", consumer_secret="b", options={"x": 1})

        assert provider.to_oauth2_config() == OAuth2Config(
            consumer_key="a", consumer_secret="b", options={"x": 1}
        )


class TestConfig:
    def test_defaults(self) -> None:
        config = Config()

        assert config.providers == {}
        assert config.logging.level == "INFO"

    def test_nested_env_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("WARDEN_OAUTH2_LOGGING__LEVEL", "DEBUG")

        assert Config().logging.level == "DEBUG"

    def test_env_overrides_yaml(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        config_file = tmp_path / "warden.yaml"
        config_file.write_text("logging:\n  level: WARNING\n")
        monkeypatch.setenv("WARDEN_OAUTH2_CONFIG_FILE", str(config_file))

        assert Config().logging.level == "WARNING"

        monkeypatch.setenv("WARDEN_OAUTH2_LOGGING__LEVEL", "ERROR")

        assert Config().logging.level == "ERROR"

    def test_missing_yaml_file_is_ignored(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("WARDEN_OAUTH2_CONFIG_FILE", str(tmp_path / "missing.yaml"))

        assert Config().providers == {}

    def test_empty_yaml_file_is_ignored(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        config_file = tmp_path / "warden.yaml"
        config_file.write_text("")
        monkeypatch.setenv("WARDEN_OAUTH2_CONFIG_FILE", str(config_file))

        assert Config().providers == {}

    def test_non_mapping_yaml_raises_configuration_error(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        config_file = tmp_path / "warden.yaml"
        config_file.write_text("- github\n- twitter\n")
        monkeypatch.setenv("WARDEN_OAUTH2_CONFIG_FILE", str(config_file))

        with pytest.raises(ConfigurationError):
            Config()

    def test_malformed_yaml_raises_configuration_error(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        config_file = tmp_path / "warden.yaml"
        config_file.write_text("providers: [unclosed\n")
        monkeypatch.setenv("WARDEN_OAUTH2_CONFIG_FILE", str(config_file))

        with pytest.raises(ConfigurationError):
            Config()


@pytest.mark.usefixtures("restore_root_logger")
class TestConfigureLogging:
    def test_stream_handler_by_default(self) -> None:
        configure_logging(LoggingConfig(level="WARNING"))

        root = logging.getLogger()
        assert root.level == logging.WARNING
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0], logging.StreamHandler)

    def test_file_handler_when_log_file_set(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        log_file = tmp_path / "logs" / "warden.log"
        monkeypatch.setenv("WARDEN_OAUTH2_LOG_FILE", str(log_file))

        configure_logging(LoggingConfig())
        logging.getLogger("warden_oauth2.test").info("hello")

        root = logging.getLogger()
        assert isinstance(root.handlers[0], logging.FileHandler)
        root.handlers[0].flush()
        assert "hello" in log_file.read_text()
