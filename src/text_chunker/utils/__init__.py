"""
Utilities package for text-chunker.

This package contains the configuration system and the bridge that turns
loaded configuration into splitter configurations.
"""

from .config import ConfigManager, ConfigPaths
from .chunking_config_bridge import ChunkingConfigBridge

__all__ = [
    "ConfigManager",
    "ConfigPaths",
    "ChunkingConfigBridge",
]
