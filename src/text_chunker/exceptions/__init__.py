"""
Exceptions package for text-chunker.

This package contains custom exception classes for configuration and
chunking error scenarios.
"""

from .config_exceptions import (
    TextChunkerError,
    ConfigurationError,
    ConfigurationFileNotFoundError,
    ConfigurationValidationError,
    ConfigurationSchemaError,
    EnvironmentVariableError,
)

from .chunking_exceptions import (
    ChunkingError,
    ChunkingInvariantError,
)

__all__ = [
    "TextChunkerError",
    # Configuration exceptions
    "ConfigurationError",
    "ConfigurationFileNotFoundError",
    "ConfigurationValidationError",
    "ConfigurationSchemaError",
    "EnvironmentVariableError",
    # Chunking exceptions
    "ChunkingError",
    "ChunkingInvariantError",
]
