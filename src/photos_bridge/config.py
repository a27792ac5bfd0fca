"""
Configuration management with YAML loading and environment variable support.
"""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

import yaml

from .constants import CONFIG_ERROR, DEFAULT_URL_SCHEME, VERIFY_ATTEMPTS, VERIFY_DELAY_SECONDS


class ConfigError(Exception):
    """Config file is unreadable or holds a value of the wrong kind."""

    code = CONFIG_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


def _env_str(env_var: str, default: str | None = None) -> str | None:
    """Get string from environment variable or return default."""
    if value := os.environ.get(env_var):
        return value
    return default


@dataclass
class LibraryConfig:
    # "module:attribute" of the asset library factory
    backend: str | None = field(default_factory=lambda: _env_str("PHB_LIBRARY_BACKEND"))


@dataclass
class ImportingConfig:
    verify_attempts: int = VERIFY_ATTEMPTS
    verify_delay: float = VERIFY_DELAY_SECONDS


@dataclass
class LinksConfig:
    scheme: str = DEFAULT_URL_SCHEME


@dataclass
class LoggingConfig:
    level: str = "WARNING"


SECTIONS = ["library", "importing", "links", "logging"]


@dataclass
class AppConfig:
    library: LibraryConfig = field(default_factory=LibraryConfig)
    importing: ImportingConfig = field(default_factory=ImportingConfig)
    links: LinksConfig = field(default_factory=LinksConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def from_yaml(cls, path: Path) -> "AppConfig":
        """Load configuration from YAML file."""
        if not path.exists():
            return cls()

        try:
            with open(path) as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {path}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigError(f"Config file {path} must contain a mapping")

        return cls._from_dict(data)

    @classmethod
    def _from_dict(cls, data: dict) -> "AppConfig":
        """Create config from dictionary, ignoring unknown sections and keys."""
        config = cls()

        for section_name in SECTIONS:
            values = data.get(section_name)
            if not isinstance(values, dict):
                continue
            section = getattr(config, section_name)
            for key, value in values.items():
                if hasattr(section, key):
                    setattr(section, key, value)

        # Environment wins over the file for the backend
        if env_backend := _env_str("PHB_LIBRARY_BACKEND"):
            config.library.backend = env_backend

        config.validate()
        return config

    def validate(self) -> None:
        """
        Normalize value types in place.

        Raises:
            ConfigError: If a value cannot be used
        """
        importing = self.importing
        try:
            importing.verify_attempts = int(importing.verify_attempts)
            importing.verify_delay = float(importing.verify_delay)
        except (TypeError, ValueError) as e:
            raise ConfigError(f"Invalid importing setting: {e}") from e
        if importing.verify_attempts < 1:
            raise ConfigError("importing.verify_attempts must be at least 1")
        if importing.verify_delay < 0:
            raise ConfigError("importing.verify_delay must not be negative")

        level = self.logging.level
        if not isinstance(level, str) or not isinstance(logging.getLevelName(level.upper()), int):
            raise ConfigError(f"Unknown logging level: {level!r}")
        self.logging.level = level.upper()

        if not isinstance(self.links.scheme, str) or not self.links.scheme:
            raise ConfigError("links.scheme must be a non-empty string")

        backend = self.library.backend
        if backend is not None and not isinstance(backend, str):
            raise ConfigError("library.backend must be a 'module:attribute' string")

    def _to_dict(self) -> dict:
        """Convert config to dictionary."""
        return {section_name: dict(vars(getattr(self, section_name))) for section_name in SECTIONS}


def _get_default_config_dir() -> Path:
    """Get default config directory."""
    # Check environment variable first
    if config_dir := os.environ.get("PHB_CONFIG_DIR"):
        return Path(config_dir)

    # Check XDG config home
    if xdg_config := os.environ.get("XDG_CONFIG_HOME"):
        return Path(xdg_config) / "photos-bridge"

    # Fall back to ~/.config
    return Path.home() / ".config" / "photos-bridge"


def load_config(config_path: Path | None = None, config_dir: Path | None = None) -> AppConfig:
    """
    Load configuration.

    Args:
        config_path: Path to config file (default: searches standard locations)
        config_dir: Config directory to search

    Returns:
        AppConfig (defaults if no file is found)
    """
    if config_dir is None:
        config_dir = _get_default_config_dir()

    if config_path is None:
        search_paths = [
            config_dir / "config.yaml",
            Path.cwd() / "phb.yaml",
        ]
        for path in search_paths:
            if path.exists():
                config_path = path
                break

    return AppConfig.from_yaml(config_path) if config_path else AppConfig()
