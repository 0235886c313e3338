"""
Environment variable handling for configuration management.

This module maps TEXT_CHUNKER_* environment variables onto configuration
keys and converts their string values to the types the schema expects.
"""

import logging
import os
from copy import deepcopy
from typing import Any, Dict, Tuple

from ...exceptions.config_exceptions import EnvironmentVariableError


logger = logging.getLogger(__name__)


class EnvironmentHandler:
    """
    Environment variable handling for configuration management.

    Handles environment variable overrides and type conversion.
    """

    def __init__(self) -> None:
        self.logger = logger

    def get_env_mapping(self) -> Dict[str, Tuple[str, str]]:
        """
        Get mapping of environment variable names to configuration keys.

        Returns:
            Dictionary mapping env var names to (config key, target type)
        """
        return {
            'TEXT_CHUNKER_MAX_SIZE': ('text_splitter.max_size', 'integer'),
            'TEXT_CHUNKER_OVERLAP_SIZE': ('text_splitter.overlap_size', 'integer'),
            'TEXT_CHUNKER_SIZE_MEASURE': ('text_splitter.size_measure', 'string'),
            'TEXT_CHUNKER_TOKENIZER_MODEL': ('text_splitter.tokenizer_model', 'string'),
            'TEXT_CHUNKER_BOUNDARY_STRATEGY': ('text_splitter.boundary_strategy', 'string'),
            'TEXT_CHUNKER_PARAGRAPH_MAX_SIZE': ('paragraph_splitter.max_chunk_size', 'integer'),
            'TEXT_CHUNKER_LOG_LEVEL': ('logging.level', 'string'),
        }

    def convert_env_value(self, value: str, target_type: str = 'string', variable_name: str = '') -> Any:
        """
        Convert environment variable string to appropriate Python type.

        Args:
            value: Environment variable value (always string)
            target_type: Target type ('string' or 'integer')
            variable_name: Variable name for error reporting

        Returns:
            Converted value

        Raises:
            EnvironmentVariableError: If conversion fails
        """
        if target_type == 'integer':
            try:
                return int(value.strip())
            except ValueError as e:
                raise EnvironmentVariableError(
                    f"Environment variable {variable_name or value!r} must be an integer, got '{value}'",
                    variable_name
                ) from e
        return value

    def apply_environment_overrides(self, config: Dict[str, Any]) -> Dict[str, Any]:
        """
        Apply environment variable overrides to configuration.

        Args:
            config: Base configuration dictionary

        Returns:
            Configuration with environment overrides applied

        Raises:
            EnvironmentVariableError: If a set variable cannot be converted
        """
        result = deepcopy(config)

        for env_var, (config_key, target_type) in self.get_env_mapping().items():
            env_value = os.getenv(env_var)
            if env_value is None or env_value == '':
                continue

            converted_value = self.convert_env_value(env_value, target_type, env_var)
            self._set_nested_value(result, config_key, converted_value)
            self.logger.debug(f"Applied environment override: {env_var} -> {config_key}")

        return result

    def _set_nested_value(self, config: Dict[str, Any], key_path: str, value: Any) -> None:
        keys = key_path.split('.')
        current = config

        for key in keys[:-1]:
            if not isinstance(current.get(key), dict):
                current[key] = {}
            current = current[key]

        current[keys[-1]] = value
