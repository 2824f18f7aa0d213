"""Configuration module."""

from src.supplies.config.configuration import (
    AppConfig,
    ConfigurationError,
    LoggingConfig,
    StorageConfig,
    StoreConfig,
    get_config,
    get_environment,
    load_config,
    reset_config,
)

__all__ = [
    "AppConfig",
    "ConfigurationError",
    "LoggingConfig",
    "StorageConfig",
    "StoreConfig",
    "get_config",
    "get_environment",
    "load_config",
    "reset_config",
]
