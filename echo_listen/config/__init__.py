"""Configuration management for EchoListen."""

from .config import EchoListenConfig
from .config_manager import ConfigManager
from .defaults import create_default_config

__all__ = ["EchoListenConfig", "ConfigManager", "create_default_config"]
