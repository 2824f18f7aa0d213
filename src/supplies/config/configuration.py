"""Configuration module for Mission Supplies.

Loads settings from environment-specific config files:
- APP_ENV=dev  → config_dev.yaml (local data directory, verbose logging)
- APP_ENV=test → config_test.yaml (no initial load, throwaway data file)
- Default      → config.yaml

Overrides such as the data directory are loaded from the .env file.
Fails fast with clear error messages if configuration is missing or invalid.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import yaml
from dotenv import load_dotenv


class ConfigurationError(Exception):
    """Raised when required configuration is missing or invalid."""
    pass


def _get_project_root() -> Path:
    """Get the project root directory (where config.yaml lives)."""
    # Navigate from src/supplies/config/ up to project root
    return Path(__file__).parent.parent.parent.parent


def _get_config_filename() -> str:
    """Get config filename based on APP_ENV environment variable.

    Returns:
        Config filename:
        - APP_ENV=dev  → config_dev.yaml
        - APP_ENV=test → config_test.yaml
        - Default      → config.yaml
    """
    app_env = os.environ.get("APP_ENV", "").lower()

    if app_env == "dev":
        return "config_dev.yaml"
    elif app_env == "test":
        return "config_test.yaml"
    else:
        return "config.yaml"


def _load_yaml_config() -> dict:
    """Load configuration from environment-specific config file."""
    config_filename = _get_config_filename()
    config_path = _get_project_root() / config_filename

    if not config_path.exists():
        raise ConfigurationError(
            f"Configuration file not found: {config_path}. "
            f"Set APP_ENV to 'dev' or 'test', or create {config_filename}."
        )

    with open(config_path, "r") as f:
        return yaml.safe_load(f) or {}


def _get_optional_env(key: str, default: Optional[str] = None) -> Optional[str]:
    """Get optional environment variable with default."""
    return os.environ.get(key, default)


def _get_positive_int(section: dict, key: str, default: int) -> int:
    """Read a positive integer setting or raise ConfigurationError."""
    value = section.get(key, default)
    if not isinstance(value, int) or isinstance(value, bool) or value <= 0:
        raise ConfigurationError(
            f"Setting '{key}' must be a positive integer, got {value!r}."
        )
    return value


@dataclass(frozen=True)
class StorageConfig:
    """Data file location."""
    directory: str
    filename: str
    load_on_start: bool


@dataclass(frozen=True)
class StoreConfig:
    """Record store sizing."""
    initial_capacity: int
    growth_increment: int
    fresh_slot_count: int  # Slots handed out when no data file exists yet


@dataclass(frozen=True)
class LoggingConfig:
    """Logging configuration."""
    level: str


@dataclass(frozen=True)
class AppConfig:
    """Main application configuration container."""
    storage: StorageConfig
    store: StoreConfig
    logging: LoggingConfig


def load_config() -> AppConfig:
    """
    Load and validate all application configuration.

    Loads from config.yaml for regular settings and .env for overrides.
    Fails fast if configuration is missing or invalid.

    Returns:
        AppConfig: Validated application configuration.

    Raises:
        ConfigurationError: If configuration is missing or invalid.
    """
    # Load environment variables from .env file
    load_dotenv()

    # Load YAML configuration
    yaml_config = _load_yaml_config()

    # Build Storage config
    storage_section = yaml_config.get("storage", {})

    storage_config = StorageConfig(
        directory=_get_optional_env(
            "SUPPLIES_DATA_DIR", storage_section.get("directory", ".")
        ),
        filename=storage_section.get("filename", "products.json"),
        load_on_start=bool(storage_section.get("load_on_start", True)),
    )

    # Build Store config
    store_section = yaml_config.get("store", {})

    store_config = StoreConfig(
        initial_capacity=_get_positive_int(store_section, "initial_capacity", 5),
        growth_increment=_get_positive_int(store_section, "growth_increment", 5),
        fresh_slot_count=_get_positive_int(store_section, "fresh_slot_count", 10),
    )

    # Build Logging config
    logging_section = yaml_config.get("logging", {})

    logging_config = LoggingConfig(
        level=logging_section.get("level", "INFO"),
    )

    return AppConfig(
        storage=storage_config,
        store=store_config,
        logging=logging_config,
    )


# Module-level singleton for convenience
_config: Optional[AppConfig] = None


def get_config() -> AppConfig:
    """
    Get the application configuration singleton.

    Lazy-loads configuration on first access.
    Config file is selected based on APP_ENV environment variable.

    Returns:
        AppConfig: Application configuration.

    Raises:
        ConfigurationError: If configuration is missing or invalid.
    """
    global _config
    if _config is None:
        _config = load_config()
    return _config


def get_environment() -> str:
    """Get current environment name.

    Returns:
        'dev', 'test', or 'default' based on APP_ENV.
    """
    app_env = os.environ.get("APP_ENV", "").lower()
    return app_env if app_env in ("dev", "test") else "default"


def reset_config() -> None:
    """Reset the config singleton. Useful for testing."""
    global _config
    _config = None
