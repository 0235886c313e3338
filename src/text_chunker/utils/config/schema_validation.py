"""
Schema validation for configuration management.

This module provides JSON schema loading, validation, and error handling
capabilities for the text-chunker configuration system.
"""

import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

import jsonschema

from ...exceptions.config_exceptions import (
    ConfigurationError,
    ConfigurationSchemaError,
    ConfigurationValidationError,
)
from .file_operations import FileOperations
from .paths import ConfigPaths


logger = logging.getLogger(__name__)


class SchemaValidator:
    """
    Schema validation for configuration management.

    Handles JSON schema loading, validation, and error reporting.
    """

    def __init__(self, file_ops: FileOperations, paths: ConfigPaths) -> None:
        self.file_ops = file_ops
        self.paths = paths
        self.logger = logger

    def load_schema(self, schema_file: Optional[Union[str, Path]] = None) -> Dict[str, Any]:
        """
        Load JSON schema for configuration validation.

        Args:
            schema_file: Path to schema file (default: bundled config_schema.json)

        Returns:
            Loaded JSON schema

        Raises:
            ConfigurationSchemaError: If schema loading fails
        """
        if not schema_file:
            schema_file = Path(self.paths.SCHEMA_DIR) / self.paths.DEFAULT_CONFIG_SCHEMA
        schema_path = self.file_ops.resolve_path(schema_file)

        try:
            return self.file_ops.load_json_file(schema_path)
        except ConfigurationError as e:
            raise ConfigurationSchemaError(
                f"Cannot load configuration schema {schema_path}: {e.args[0]}",
                str(schema_path)
            ) from e

    def validate_config_against_schema(
        self,
        config: Dict[str, Any],
        schema: Optional[Dict[str, Any]] = None,
        config_file: str = "unknown"
    ) -> None:
        """
        Validate configuration against JSON schema.

        Args:
            config: Configuration dictionary to validate
            schema: JSON schema (loads the bundled schema if not provided)
            config_file: Configuration file name for error reporting

        Raises:
            ConfigurationValidationError: If validation fails
            ConfigurationSchemaError: If the schema itself is invalid
        """
        if schema is None:
            schema = self.load_schema()

        try:
            jsonschema.validate(config, schema)
        except jsonschema.ValidationError as e:
            validation_errors = [e.message]
            invalid_fields = []

            if e.absolute_path:
                invalid_fields.append(".".join(str(p) for p in e.absolute_path))

            for ctx_error in getattr(e, 'context', None) or []:
                validation_errors.append(ctx_error.message)
                if ctx_error.absolute_path:
                    invalid_fields.append(".".join(str(p) for p in ctx_error.absolute_path))

            raise ConfigurationValidationError(
                f"Configuration validation failed: {e.message}",
                config_file,
                validation_errors,
                invalid_fields
            ) from e
        except jsonschema.SchemaError as e:
            raise ConfigurationSchemaError(
                f"Invalid JSON schema: {e.message}",
                schema_errors=[e.message]
            ) from e

        self.logger.debug(f"Configuration {config_file} passed schema validation")
