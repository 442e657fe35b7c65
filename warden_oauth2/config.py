import logging
import os
import sys
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from warden_oauth2.domain.shared.error import ConfigurationError
from warden_oauth2.domain.strategy.model.value import OAuth2Config

CONFIG_FILE_ENV = "WARDEN_OAUTH2_CONFIG_FILE"
LOG_FILE_ENV = "WARDEN_OAUTH2_LOG_FILE"


# =============================================================================
# Provider Configuration
# =============================================================================


class ProviderConfig(BaseModel):
    """OAuth2 service configuration (one entry of Config.providers).

    Credentials default to empty so a provider can be declared in YAML and
    filled in from the environment, e.g. WARDEN_OAUTH2_PROVIDERS__GITHUB__CONSUMER_KEY.
    """

    consumer_key: str = ""
    consumer_secret: str = ""
    options: dict[str, Any] = {}

    @property
    def is_configured(self) -> bool:
        """Both credentials are present."""
        return bool(self.consumer_key and self.consumer_secret)

    def to_oauth2_config(self) -> OAuth2Config:
        return OAuth2Config(
            consumer_key=self.consumer_key,
            consumer_secret=self.consumer_secret,
            options=self.options,
        )


# =============================================================================
# Application Configuration
# =============================================================================


class YamlConfigSettingsSource(PydanticBaseSettingsSource):
    """Settings from the YAML file named by WARDEN_OAUTH2_CONFIG_FILE.

    The file is read once per source. A missing file contributes nothing;
    a file whose top level is not a mapping is a ConfigurationError.
    """

    def __init__(self, settings_cls: type[BaseSettings]) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] | None = None

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        return self._yaml_data().get(field_name), field_name, False

    def __call__(self) -> dict[str, Any]:
        return self._yaml_data()

    def _yaml_data(self) -> dict[str, Any]:
        if self._data is None:
            self._data = _read_yaml_file(os.environ.get(CONFIG_FILE_ENV))
        return self._data


def _read_yaml_file(config_file: str | None) -> dict[str, Any]:
    if not config_file:
        return {}
    path = Path(config_file).expanduser()
    if not path.exists():
        return {}

    try:
        data = yaml.safe_load(path.read_text())
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigurationError(f"Expected a mapping at the top of {path}")
    return data


class LoggingConfig(BaseModel):
    """Logging configuration (nested in Config, uses env_nested_delimiter)."""

    level: str = "INFO"
    format: str = "%(asctime)s %(levelname)-8s [%(name)s] %(message)s"
    date_format: str = "%Y-%m-%d %H:%M:%S"

    @property
    def file(self) -> str | None:
        """Get log file path from WARDEN_OAUTH2_LOG_FILE env var."""
        return os.environ.get(LOG_FILE_ENV)


class Config(BaseSettings):
    logging: LoggingConfig = LoggingConfig()
    providers: dict[str, ProviderConfig] = {}  # provider keyword -> settings

    model_config = {
        "env_prefix": "WARDEN_OAUTH2_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "env_nested_delimiter": "__",  # Allows WARDEN_OAUTH2_LOGGING__LEVEL override
    }

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Customize settings sources to include YAML config.

        Priority (highest to lowest):
        1. init_settings - values passed to Config()
        2. env_settings - environment variables
        3. dotenv_settings - .env file
        4. yaml_settings - WARDEN_OAUTH2_CONFIG_FILE yaml
        5. file_secret_settings - secrets from files
        """
        return (
            init_settings,
            env_settings,
            dotenv_settings,
            YamlConfigSettingsSource(settings_cls),
            file_secret_settings,
        )


def configure_logging(config: LoggingConfig) -> None:
    """Configure Python logging based on config.

    Call once at process start, before providers are built, so registration
    messages reach the configured handler.
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(config.level)

    # Remove existing handlers to avoid duplicates
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    formatter = logging.Formatter(config.format, datefmt=config.date_format)

    handler: logging.Handler
    if config.file:
        log_path = Path(config.file).expanduser()
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(log_path)
    else:
        handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(config.level)
    handler.setFormatter(formatter)
    root_logger.addHandler(handler)

    logging.debug("Logging configured: level=%s, file=%s", config.level, config.file)
