"""
SAFEFAO - Configuration Management

Handles package configuration from environment variables and files.
"""

import codecs
import json
import logging
import os
from dataclasses import dataclass, replace
from typing import Optional

import yaml

from safefao.core.errors import ConfigurationError

logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class AppConfig:
    """Main configuration."""

    default_encoding: str = "utf-8"  # Used when a read omits the encoding
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "AppConfig":
        """
        Load configuration from environment variables.

        Environment variables:
        - SAFEFAO_ENCODING: Default text encoding for reads
        - SAFEFAO_LOG_LEVEL: Log level for the safefao logger
        """
        return cls(
            default_encoding=os.environ.get("SAFEFAO_ENCODING", cls.default_encoding),
            log_level=os.environ.get("SAFEFAO_LOG_LEVEL", cls.log_level),
        )

    @classmethod
    def from_file(cls, path: str) -> "AppConfig":
        """
        Load configuration from YAML or JSON file.

        Args:
            path: Path to configuration file (.yaml, .yml, or .json)

        Returns:
            AppConfig instance

        Raises:
            FileNotFoundError: If config file doesn't exist
            ValueError: If config file format is invalid
        """
        return cls(**_read_config_data(path))

    @classmethod
    def load(cls, config_file: Optional[str] = None) -> "AppConfig":
        """
        Load configuration with priority: file > env > defaults.

        Args:
            config_file: Optional path to configuration file

        Returns:
            AppConfig instance

        Raises:
            TypeError: If the file contains an unknown key
        """
        config = cls.from_env()

        if config_file and os.path.exists(config_file):
            # Merge: file config takes precedence, unknown keys raise TypeError
            config = replace(config, **_read_config_data(config_file))

        return config

    def validate(self) -> None:
        """
        Validate configuration values.

        Raises:
            ConfigurationError: If configuration is invalid
        """
        try:
            codecs.lookup(self.default_encoding)
        except LookupError as e:
            raise ConfigurationError(f"Unknown encoding: {self.default_encoding}") from e

        if not isinstance(self.log_level, str) or self.log_level.upper() not in LOG_LEVELS:
            raise ConfigurationError(f"Unknown log level: {self.log_level}")


def _read_config_data(path: str) -> dict:
    if not os.path.exists(path):
        raise FileNotFoundError(f"Configuration file not found: {path}")

    with open(path, "r") as f:
        if path.endswith((".yaml", ".yml")):
            data = yaml.safe_load(f)
        elif path.endswith(".json"):
            data = json.load(f)
        else:
            raise ValueError(f"Unsupported config file format: {path}")

    logger.debug(f"Loaded configuration from {path}")
    return data or {}
