"""Configuration management for ExiFrame."""

from exiframe.config.manager import ConfigManager, ConfigError
from exiframe.config.defaults import DEFAULT_CONFIG

__all__ = ["ConfigManager", "ConfigError", "DEFAULT_CONFIG"]
