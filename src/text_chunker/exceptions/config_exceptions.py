"""
Configuration-related exceptions for text-chunker.

Custom exception classes for configuration loading, validation, tokenizer
selection and environment variable errors with user-friendly messages.
"""

from typing import List, Optional


class TextChunkerError(Exception):
    """Root exception for every error raised by text-chunker."""
    pass


class ConfigurationError(TextChunkerError):
    """Base exception for configuration-related errors."""

    def __init__(
        self,
        message: str,
        config_file: Optional[str] = None,
        suggestions: Optional[List[str]] = None
    ) -> None:
        """
        Initialize configuration error.

        Args:
            message: Error description
            config_file: Configuration file path that caused the error
            suggestions: List of suggested fixes
        """
        super().__init__(message)
        self.config_file = config_file
        self.suggestions = suggestions or []

    def __str__(self) -> str:
        """Return formatted error message with suggestions."""
        msg = super().__str__()

        if self.config_file:
            msg = f"{msg}\nConfig file: {self.config_file}"

        if self.suggestions:
            msg += "\n\nSuggestions:"
            for i, suggestion in enumerate(self.suggestions, 1):
                msg += f"\n  {i}. {suggestion}"

        return msg


class ConfigurationFileNotFoundError(ConfigurationError):
    """Exception raised when a configuration file is not found."""

    def __init__(
        self,
        message: str,
        config_file: Optional[str] = None,
        searched_paths: Optional[List[str]] = None
    ) -> None:
        suggestions = [
            "Check if the configuration file exists at the specified path",
            "Use absolute path if relative path is not working",
        ]

        if searched_paths:
            suggestions.append(f"Searched in: {', '.join(searched_paths)}")

        super().__init__(message, config_file, suggestions)
        self.searched_paths = searched_paths or []


class ConfigurationValidationError(ConfigurationError):
    """Exception raised when configuration validation fails."""

    def __init__(
        self,
        message: str,
        config_file: Optional[str] = None,
        validation_errors: Optional[List[str]] = None,
        invalid_fields: Optional[List[str]] = None
    ) -> None:
        """
        Initialize validation error.

        Args:
            message: Error description
            config_file: Configuration file with validation errors
            validation_errors: List of specific validation error messages
            invalid_fields: List of field names that failed validation
        """
        suggestions = []
        if invalid_fields:
            suggestions.append(f"Fix these fields: {', '.join(invalid_fields)}")

        super().__init__(message, config_file, suggestions)
        self.validation_errors = validation_errors or []
        self.invalid_fields = invalid_fields or []

    def __str__(self) -> str:
        """Return formatted validation error with details."""
        msg = super().__str__()

        if self.validation_errors:
            msg += "\n\nValidation errors:"
            for i, error in enumerate(self.validation_errors, 1):
                msg += f"\n  {i}. {error}"

        return msg


class ConfigurationSchemaError(ConfigurationError):
    """Exception raised when the configuration schema is invalid or missing."""

    def __init__(
        self,
        message: str,
        schema_file: Optional[str] = None,
        schema_errors: Optional[List[str]] = None
    ) -> None:
        suggestions = [
            "Ensure the schema file exists and is valid JSON",
            "Check schema syntax against JSON Schema specification",
        ]

        super().__init__(message, schema_file, suggestions)
        self.schema_errors = schema_errors or []


class EnvironmentVariableError(ConfigurationError):
    """Exception raised when environment variable handling fails."""

    def __init__(
        self,
        message: str,
        variable_name: Optional[str] = None
    ) -> None:
        suggestions = [
            "Verify environment variable names are correct",
            "Ensure no extra spaces in variable definitions",
        ]

        if variable_name:
            suggestions.append(f"Check the value of {variable_name} in .env file or environment")

        super().__init__(message, None, suggestions)
        self.variable_name = variable_name
