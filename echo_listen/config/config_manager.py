"""Configuration persistence manager."""

import json
import logging
from dataclasses import asdict, fields
from pathlib import Path
from typing import Any

from echo_listen.utils.file_utils import ensure_directory

from .config import EchoListenConfig
from .defaults import create_default_config

logger = logging.getLogger(__name__)


class ConfigManager:
    """Manager for configuration persistence.

    Saves and loads user settings to/from a JSON file in the user's home
    directory. Falls back to the default configuration when the file does
    not exist or cannot be understood.
    """

    CONFIG_FILE = Path.home() / ".echo_listen" / "config.json"

    @classmethod
    def save_config(cls, config: EchoListenConfig) -> None:
        """Save configuration to JSON file.

        Args:
            config: Configuration to save

        Raises:
            OSError: If unable to create directory or write file
        """
        ensure_directory(cls.CONFIG_FILE.parent)

        config_dict = cls._to_json_types(asdict(config))

        with cls.CONFIG_FILE.open("w", encoding="utf-8") as f:
            json.dump(config_dict, f, indent=2, ensure_ascii=False)

    @classmethod
    def load_config(cls) -> EchoListenConfig:
        """Load configuration from JSON file.

        Returns:
            Loaded configuration, or default configuration if file doesn't exist

        Note:
            Unknown keys (e.g. from an older version) are ignored. If the file
            is invalid, falls back to defaults and logs a warning.
        """
        if not cls.CONFIG_FILE.exists():
            return create_default_config()

        try:
            with cls.CONFIG_FILE.open("r", encoding="utf-8") as f:
                config_dict = json.load(f)

            known = {f.name for f in fields(EchoListenConfig)}
            config_dict = {k: v for k, v in config_dict.items() if k in known}
            return EchoListenConfig(**config_dict)

        except (json.JSONDecodeError, TypeError, ValueError, AttributeError) as e:
            logger.warning(f"Invalid config file, using defaults: {e}")
            return create_default_config()

    @classmethod
    def update_config(cls, **changes) -> EchoListenConfig:
        """Load the stored configuration, apply changes and save it back.

        Args:
            **changes: Field values to replace

        Returns:
            The updated configuration
        """
        current = asdict(cls.load_config())
        current.update(changes)
        config = EchoListenConfig(**current)
        cls.save_config(config)
        return config

    @classmethod
    def config_exists(cls) -> bool:
        """Check if configuration file exists."""
        return cls.CONFIG_FILE.exists()

    @classmethod
    def delete_config(cls) -> None:
        """Delete the configuration file so defaults are used on next load."""
        if cls.CONFIG_FILE.exists():
            cls.CONFIG_FILE.unlink()

    @staticmethod
    def _to_json_types(data: dict[str, Any]) -> dict[str, Any]:
        """Convert Path and tuple values into JSON-friendly types."""
        result: dict[str, Any] = {}
        for key, value in data.items():
            if isinstance(value, Path):
                result[key] = str(value)
            elif isinstance(value, tuple):
                result[key] = list(value)
            else:
                result[key] = value
        return result
