# snibbets/config/settings.py
"""
Snibbets Configuration Settings

Manages configuration using Pydantic Settings with YAML file support.

The settings file is looked up in this order:
- the file named by SNIBBETS_CONFIG
- ~/.snibbets/settings.yaml
- ~/.config/snibbets/settings.yaml

A missing file is not an error; defaults are used.
"""

import os
from functools import lru_cache
from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, Field
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

from snibbets.core.constants import SearchBackendType

DEFAULT_SNIPPETS_PATH = "~/Dropbox/notes/snippets"
CONFIG_ENV_VAR = "SNIBBETS_CONFIG"


class FileLoggingConfig(BaseModel):
    """File logging configuration."""

    enabled: bool = False
    path: str = "~/.snibbets/logs/snibbets.log"
    rotation: str = "10 MB"
    retention: str = "1 week"


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = "WARNING"
    file: FileLoggingConfig = Field(default_factory=FileLoggingConfig)


class Settings(BaseSettings):
    """
    Main settings class for Snibbets.

    Loads configuration from:
    1. Environment variables (highest priority), e.g. SNIBBETS_PATH
    2. YAML configuration file
    3. Default values (lowest priority)
    """

    model_config = SettingsConfigDict(
        env_prefix="SNIBBETS_",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    # Folder holding the snippet files
    path: str = DEFAULT_SNIPPETS_PATH
    backend: SearchBackendType = SearchBackendType.FIND
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        # Environment wins over values read from the YAML file
        return env_settings, init_settings, dotenv_settings, file_secret_settings

    @classmethod
    def from_yaml(cls, path: Optional[Path | str]) -> "Settings":
        """
        Load settings from a YAML file.

        Args:
            path: Path to the YAML configuration file

        Returns:
            Settings instance with values from the file
        """
        if path is None or not Path(path).exists():
            return cls()

        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}

        return cls(**data)

    def source_folder(self) -> Path:
        """Absolute snippets folder with ~ expanded."""
        return Path(self.path).expanduser().absolute()

    def log_file(self) -> Optional[str]:
        """Log file path when file logging is enabled."""
        if not self.logging.file.enabled:
            return None
        return str(Path(self.logging.file.path).expanduser())


def get_config_path() -> Optional[Path]:
    """
    Return the path to the active settings.yaml file.

    Returns:
        The first existing candidate, or None when there is none
    """
    explicit = os.environ.get(CONFIG_ENV_VAR)
    if explicit:
        return Path(explicit).expanduser()

    candidates = [
        Path.home() / ".snibbets" / "settings.yaml",
        Path.home() / ".config" / "snibbets" / "settings.yaml",
    ]
    for path in candidates:
        if path.exists():
            return path
    return None


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Returns:
        Settings instance loaded from configuration
    """
    return Settings.from_yaml(get_config_path())


def reload_settings() -> Settings:
    """
    Reload settings from configuration file.

    Returns:
        Fresh Settings instance
    """
    get_settings.cache_clear()
    return get_settings()
