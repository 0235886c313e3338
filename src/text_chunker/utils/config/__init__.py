"""Configuration management package.

This package provides a modular configuration system with support for:
- JSON schema validation
- Environment variable overrides
- Default value resolution
- Path management and file operations

Usage:
    from text_chunker.utils.config import ConfigManager

    config = ConfigManager()
    max_size = config.get("text_splitter.max_size", 1024)
"""

from .manager import ConfigManager, DEFAULT_CONFIG, merge_configs
from .paths import ConfigPaths
from .file_operations import FileOperations
from .schema_validation import SchemaValidator
from .environment import EnvironmentHandler

__all__ = [
    'ConfigManager',
    'ConfigPaths',
    'FileOperations',
    'SchemaValidator',
    'EnvironmentHandler',
    'DEFAULT_CONFIG',
    'merge_configs',
]
