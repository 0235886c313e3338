"""
Main configuration manager for text-chunker.

This module provides the ConfigManager class that orchestrates loading,
default merging, environment overrides and schema validation of the
``textchunker.config.json`` file.
"""

import logging
import os
from copy import deepcopy
from pathlib import Path
from typing import Any, Dict, Optional, Union

from ...exceptions.config_exceptions import ConfigurationError, ConfigurationFileNotFoundError
from .environment import EnvironmentHandler
from .file_operations import FileOperations
from .paths import ConfigPaths
from .schema_validation import SchemaValidator


logger = logging.getLogger(__name__)

# Splitter sections stay empty so the config classes supply their own defaults.
DEFAULT_CONFIG: Dict[str, Any] = {
    "version": "1.0.0",
    "logging": {"level": "INFO"},
    "text_splitter": {},
    "paragraph_splitter": {},
}


def merge_configs(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Deep-merge ``override`` into a copy of ``base``; nested dicts are merged key by key."""
    result = deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(result.get(key), dict):
            result[key] = merge_configs(result[key], value)
        else:
            result[key] = deepcopy(value)
    return result


class ConfigManager:
    """
    Configuration manager for text-chunker.

    Handles loading, validation, and merging of configuration from multiple sources:
    - Built-in defaults
    - The JSON configuration file
    - Environment variables (TEXT_CHUNKER_*)

    Example:
        >>> manager = ConfigManager(project_root="/path/to/project")
        >>> manager.get("text_splitter.max_size", 1024)
    """

    def __init__(
        self,
        config_file: Optional[str] = None,
        project_root: Optional[Union[str, Path]] = None,
        load_env: bool = True,
    ) -> None:
        """
        Initialize the ConfigManager.

        Args:
            config_file: Path to main configuration file (default: textchunker.config.json); an explicit
                path must exist, the default may be absent
            project_root: Project root directory (default: current working directory)
            load_env: Whether to load environment variables from .env file
        """
        self.project_root = Path(project_root or os.getcwd()).resolve()
        self.config_file = config_file or ConfigPaths.DEFAULT_CONFIG_FILE
        self.config_file_explicit = config_file is not None
        self.paths = ConfigPaths()

        self._config: Dict[str, Any] = {}
        self._loaded = False

        self.logger = logger

        self.file_ops = FileOperations(self.project_root, self.paths.ENV_FILE)
        self.schema_validator = SchemaValidator(self.file_ops, self.paths)
        self.env_handler = EnvironmentHandler()

        if load_env:
            self.file_ops.load_environment_variables()

    @property
    def config(self) -> Dict[str, Any]:
        """Get the current configuration. Loads if not already loaded."""
        if not self._loaded:
            self.load_config()
        return deepcopy(self._config)

    @property
    def is_loaded(self) -> bool:
        return self._loaded

    def load_config(
        self,
        force_reload: bool = False,
        validate: bool = True
    ) -> Dict[str, Any]:
        """
        Load configuration from all sources.

        Args:
            force_reload: Force reloading even if already loaded
            validate: Whether to validate configuration against schema

        Returns:
            Loaded configuration dictionary

        Raises:
            ConfigurationFileNotFoundError: If the configuration file is missing
            ConfigurationValidationError: If validation fails
            ConfigurationError: If loading fails for any other reason
        """
        if self._loaded and not force_reload:
            self.logger.debug("Configuration already loaded, returning cached version")
            return deepcopy(self._config)

        self.logger.info(f"Loading configuration from {self.config_file}")

        try:
            raw_config = self.file_ops.load_json_file(self.config_file)
            self._config = self._finalize(raw_config, validate)
        except ConfigurationFileNotFoundError:
            self._loaded = False
            raise
        except ConfigurationError as e:
            self.logger.error(f"Configuration loading failed: {e.args[0] if e.args else e}")
            self._loaded = False
            raise

        self._loaded = True
        self.logger.info("Configuration loaded successfully")
        return deepcopy(self._config)

    def load_defaults(self, validate: bool = True) -> Dict[str, Any]:
        """
        Load built-in defaults with environment overrides, without reading a file.

        Used when no configuration file exists; the result becomes the
        current configuration.
        """
        self.logger.debug("Loading default configuration")
        self._config = self._finalize({}, validate)
        self._loaded = True
        return deepcopy(self._config)

    def _finalize(self, raw_config: Dict[str, Any], validate: bool) -> Dict[str, Any]:
        self.logger.debug("Merging with default configuration")
        merged_config = merge_configs(DEFAULT_CONFIG, raw_config)

        self.logger.debug("Applying environment variable overrides")
        config = self.env_handler.apply_environment_overrides(merged_config)

        if validate:
            self.schema_validator.validate_config_against_schema(
                config,
                config_file=str(self.config_file)
            )
        return config

    def reload_config(self) -> Dict[str, Any]:
        """
        Force reload configuration from all sources.

        Returns:
            Reloaded configuration dictionary
        """
        return self.load_config(force_reload=True)

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a configuration value by key using dot notation.

        Args:
            key: Configuration key (supports dot notation like 'text_splitter.max_size')
            default: Default value if key not found

        Returns:
            Configuration value or default
        """
        config = self.config
        keys = key.split('.')

        try:
            for k in keys:
                config = config[k]
            return config
        except (KeyError, TypeError):
            return default

    def reset(self) -> None:
        """Reset configuration state, forcing reload on next access."""
        self._config = {}
        self._loaded = False

    def __repr__(self) -> str:
        return f"ConfigManager(config_file={self.config_file!r}, project_root={str(self.project_root)!r}, loaded={self._loaded})"


