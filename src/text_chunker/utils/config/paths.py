"""
Configuration file paths and constants for text-chunker.

This module provides the ConfigPaths dataclass containing default paths
and constants used throughout the configuration system.
"""

from dataclasses import dataclass
from pathlib import Path


@dataclass
class ConfigPaths:
    """Configuration file paths and constants."""

    DEFAULT_CONFIG_FILE: str = "textchunker.config.json"
    SCHEMA_DIR: str = str(Path(__file__).parent / "schema")
    ENV_FILE: str = ".env"
    DEFAULT_CONFIG_SCHEMA: str = "config_schema.json"
