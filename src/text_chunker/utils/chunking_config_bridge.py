"""
Configuration Bridge for Text Splitting

This module provides the ChunkingConfigBridge class that maps the sections of
the loaded configuration onto the immutable splitter configurations, with
runtime overrides and a fallback to defaults when the default configuration
file does not exist. A file passed explicitly must exist.
"""

import logging
from typing import Any, Dict, Optional

from ..core.text_splitter import ParagraphSplitterConfig, SplitterConfig
from ..exceptions.config_exceptions import ConfigurationFileNotFoundError
from .config import ConfigManager

logger = logging.getLogger(__name__)


class ChunkingConfigBridge:
    """
    Bridge between ConfigManager and the splitter configuration classes.

    Maps ``text_splitter`` to SplitterConfig and ``paragraph_splitter`` to
    ParagraphSplitterConfig.

    Example:
        >>> bridge = ChunkingConfigBridge(ConfigManager())
        >>> config = bridge.get_splitter_config({"max_size": 200, "overlap_size": 20})
        >>> splitter = SentenceSplitter(config)
    """

    def __init__(self, config_manager: ConfigManager) -> None:
        """
        Initialize the configuration bridge.

        Args:
            config_manager: ConfigManager instance for loading configuration

        Raises:
            TypeError: If config_manager is not a ConfigManager instance
        """
        if not isinstance(config_manager, ConfigManager):
            raise TypeError(f"config_manager must be ConfigManager, got: {type(config_manager)}")

        self.config_manager = config_manager
        logger.debug("ChunkingConfigBridge initialized")

    def get_splitter_config(self, overrides: Optional[Dict[str, Any]] = None) -> SplitterConfig:
        """
        Get a SplitterConfig from the ``text_splitter`` section.

        Args:
            overrides: Optional runtime overrides; ``None`` values are ignored

        Returns:
            SplitterConfig built from configuration and overrides

        Raises:
            ConfigurationError: If the configuration or overrides are invalid
        """
        section = self._section("text_splitter", overrides)
        config = SplitterConfig.from_dict(section)
        logger.debug(f"Generated SplitterConfig: {config!r}")
        return config

    def get_paragraph_config(self, overrides: Optional[Dict[str, Any]] = None) -> ParagraphSplitterConfig:
        """
        Get a ParagraphSplitterConfig from the ``paragraph_splitter`` section.

        Args:
            overrides: Optional runtime overrides; ``None`` values are ignored

        Raises:
            ConfigurationError: If the configuration or overrides are invalid
        """
        section = self._section("paragraph_splitter", overrides)
        return ParagraphSplitterConfig.from_dict(section)

    def get_logging_config(self) -> Dict[str, Any]:
        """Get the ``logging`` section, e.g. ``{"level": "INFO"}``."""
        return self._section("logging", None)

    def reload_config(self) -> None:
        """Reload configuration from source files."""
        logger.info("Reloading configuration")
        self.config_manager.reload_config()

    def _section(self, name: str, overrides: Optional[Dict[str, Any]]) -> Dict[str, Any]:
        try:
            config = self.config_manager.config
        except ConfigurationFileNotFoundError as e:
            if self.config_manager.config_file_explicit:
                raise
            logger.warning(f"Failed to load configuration file, using defaults: {e.args[0]}")
            config = self.config_manager.load_defaults()

        section = dict(config.get(name) or {})
        if overrides:
            applied = {key: value for key, value in overrides.items() if value is not None}
            section.update(applied)
            logger.debug(f"Applied configuration overrides: {list(applied.keys())}")
        return section
