"""
Text Splitter Configuration Module

Contains the immutable configuration classes for the sentence-aware splitter
and the paragraph splitter. Provides validation at construction, dictionary
and JSON serialization, and copies with overrides.

Components:
- SplitterConfig: Configuration of the recursive sentence splitter
- ParagraphSplitterConfig: Configuration of the byte-based paragraph splitter
"""

import json
import logging
import re
from dataclasses import dataclass, field, fields, replace
from typing import Any, Dict, Optional

from ...exceptions import ConfigurationValidationError
from .boundary import BoundaryStrategy, RegexBoundaryStrategy, create_boundary_strategy
from .tokenizer import SizeMeasure, WhitespaceSizeMeasure, create_size_measure

logger = logging.getLogger(__name__)

DEFAULT_CHUNK_SIZE = 1024
DEFAULT_CHUNK_OVERLAP = 200
DEFAULT_WORD_SEPARATOR = " "
DEFAULT_PARAGRAPH_SEPARATOR = "\n\n\n"
DEFAULT_SECONDARY_BOUNDARY_PATTERN = r"[^,.;。？！]+[,.;。？！]?|[,.;。？！]"
DEFAULT_PARAGRAPH_LINE_SEPARATOR = "\n"

# Serialized names of the pluggable components
_COMPONENT_KEYS = ("tokenizer_model", "sentence_pattern")


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass(frozen=True)
class SplitterConfig:
    """
    Configuration for the recursive sentence splitter.

    Constructed once per splitter and never mutated afterwards, which makes a
    configured splitter safe to share between threads.

    Attributes:
        max_size: Upper bound on chunk size, in size measure units (> 0)
        overlap_size: Desired shared content between consecutive chunks,
            same units (0 to max_size - 1)
        word_separator: Fallback split delimiter
        paragraph_separator: Primary split delimiter
        secondary_boundary_pattern: Fallback regex for sub-sentence splitting
        size_measure: Pluggable size measure (whitespace or tiktoken)
        boundary_strategy: Pluggable sentence boundary strategy (regex or punkt)

    Example:
        >>> config = SplitterConfig(max_size=200, overlap_size=20)
        >>> config.copy(size_measure="tiktoken", tokenizer_model="gpt-4o")
    """

    max_size: int = DEFAULT_CHUNK_SIZE
    overlap_size: int = DEFAULT_CHUNK_OVERLAP
    word_separator: str = DEFAULT_WORD_SEPARATOR
    paragraph_separator: str = DEFAULT_PARAGRAPH_SEPARATOR
    secondary_boundary_pattern: str = DEFAULT_SECONDARY_BOUNDARY_PATTERN
    size_measure: SizeMeasure = field(default_factory=WhitespaceSizeMeasure)
    boundary_strategy: BoundaryStrategy = field(default_factory=RegexBoundaryStrategy)

    def __post_init__(self) -> None:
        """
        Validate configuration parameters.

        Raises:
            ConfigurationValidationError: If any parameter is invalid
        """
        errors = []
        invalid_fields = []

        def reject(field_name: str, message: str) -> None:
            invalid_fields.append(field_name)
            errors.append(message)

        if not _is_int(self.max_size) or self.max_size <= 0:
            reject("max_size", f"max_size must be positive integer, got: {self.max_size!r}")

        if not _is_int(self.overlap_size) or self.overlap_size < 0:
            reject("overlap_size", f"overlap_size must be non-negative integer, got: {self.overlap_size!r}")
        elif _is_int(self.max_size) and self.overlap_size >= self.max_size:
            reject(
                "overlap_size",
                f"overlap_size ({self.overlap_size}) must be less than max_size ({self.max_size})"
            )

        for name in ("word_separator", "paragraph_separator"):
            value = getattr(self, name)
            if not isinstance(value, str) or not value:
                reject(name, f"{name} must be a non-empty string, got: {value!r}")

        try:
            re.compile(self.secondary_boundary_pattern)
        except (re.error, TypeError) as e:
            reject("secondary_boundary_pattern", f"secondary_boundary_pattern does not compile: {e}")

        if not isinstance(self.size_measure, SizeMeasure):
            reject("size_measure", f"size_measure must implement measure(text), got: {type(self.size_measure)}")

        if not isinstance(self.boundary_strategy, BoundaryStrategy):
            reject(
                "boundary_strategy",
                f"boundary_strategy must implement segment(text), got: {type(self.boundary_strategy)}"
            )

        if errors:
            raise ConfigurationValidationError(
                f"Invalid splitter configuration: {errors[0]}",
                validation_errors=errors,
                invalid_fields=invalid_fields
            )

        if self.overlap_size > self.max_size * 0.5:
            logger.warning(
                f"Large overlap ratio ({self.overlap_size/self.max_size:.1%}) may cause excessive duplication"
            )

        logger.debug(f"SplitterConfig validated: {self!r}")

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert configuration to a dictionary for serialization.

        Pluggable components are stored by name and rebuilt by ``from_dict``.
        """
        data = {
            "max_size": self.max_size,
            "overlap_size": self.overlap_size,
            "word_separator": self.word_separator,
            "paragraph_separator": self.paragraph_separator,
            "secondary_boundary_pattern": self.secondary_boundary_pattern,
        }
        data.update(_component_dict(self.size_measure, "size_measure", "tokenizer_model"))
        data.update(_component_dict(self.boundary_strategy, "boundary_strategy", "sentence_pattern"))
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SplitterConfig":
        """
        Create configuration from a dictionary.

        Args:
            data: Dictionary with configuration parameters; ``size_measure`` and
                ``boundary_strategy`` may be names or instances

        Raises:
            ConfigurationValidationError: If a key is unknown or a value is invalid
            ConfigurationError: If a named component cannot be created
        """
        known = {f.name for f in fields(cls)} | set(_COMPONENT_KEYS)
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigurationValidationError(
                f"Unknown splitter configuration keys: {', '.join(unknown)}",
                invalid_fields=unknown
            )

        return cls(**_resolve_components(dict(data)))

    def to_json(self, indent: Optional[int] = None) -> str:
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False)

    @classmethod
    def from_json(cls, json_str: str) -> "SplitterConfig":
        return cls.from_dict(json.loads(json_str))

    def copy(self, **overrides) -> "SplitterConfig":
        """
        Create a copy of this configuration with optional overrides.

        Components not mentioned in ``overrides`` are shared with the original,
        so custom strategies survive the copy.
        """
        unknown = sorted(set(overrides) - ({f.name for f in fields(self)} | set(_COMPONENT_KEYS)))
        if unknown:
            raise ConfigurationValidationError(
                f"Unknown splitter configuration keys: {', '.join(unknown)}",
                invalid_fields=unknown
            )
        return replace(self, **_resolve_components(dict(overrides)))

    def __repr__(self) -> str:
        return (
            f"SplitterConfig(max_size={self.max_size}, overlap_size={self.overlap_size}, "
            f"size_measure={self.size_measure!r}, boundary_strategy={self.boundary_strategy!r})"
        )


@dataclass(frozen=True)
class ParagraphSplitterConfig:
    """
    Configuration for the byte-based paragraph splitter.

    Attributes:
        max_chunk_size: Maximum chunk size in UTF-8 bytes; values <= 0 fall
            back to the default of 1024
        separator: Line separator paragraphs are split on and joined with
    """

    max_chunk_size: int = DEFAULT_CHUNK_SIZE
    separator: str = DEFAULT_PARAGRAPH_LINE_SEPARATOR

    def __post_init__(self) -> None:
        if not _is_int(self.max_chunk_size):
            raise ConfigurationValidationError(
                f"max_chunk_size must be an integer, got: {self.max_chunk_size!r}",
                invalid_fields=["max_chunk_size"]
            )
        if self.max_chunk_size <= 0:
            logger.debug(f"max_chunk_size={self.max_chunk_size} is not positive, using {DEFAULT_CHUNK_SIZE}")
            object.__setattr__(self, "max_chunk_size", DEFAULT_CHUNK_SIZE)

        if not isinstance(self.separator, str) or not self.separator:
            raise ConfigurationValidationError(
                f"separator must be a non-empty string, got: {self.separator!r}",
                invalid_fields=["separator"]
            )

    def to_dict(self) -> Dict[str, Any]:
        return {"max_chunk_size": self.max_chunk_size, "separator": self.separator}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ParagraphSplitterConfig":
        unknown = sorted(set(data) - {"max_chunk_size", "separator"})
        if unknown:
            raise ConfigurationValidationError(
                f"Unknown paragraph splitter configuration keys: {', '.join(unknown)}",
                invalid_fields=unknown
            )
        return cls(**data)


def _component_dict(component: Any, name_key: str, option_key: str) -> Dict[str, Any]:
    if hasattr(component, "to_dict"):
        return component.to_dict()
    return {name_key: getattr(component, "name", type(component).__name__), option_key: None}


def _resolve_components(data: Dict[str, Any]) -> Dict[str, Any]:
    """Replace component names (and their options) by component instances."""
    tokenizer_model = data.pop("tokenizer_model", None)
    measure = data.get("size_measure")
    if isinstance(measure, str):
        data["size_measure"] = create_size_measure(measure, tokenizer_model)
    elif measure is None and tokenizer_model:
        data["size_measure"] = create_size_measure("tiktoken", tokenizer_model)
    elif measure is None:
        data.pop("size_measure", None)

    sentence_pattern = data.pop("sentence_pattern", None)
    strategy = data.get("boundary_strategy")
    if isinstance(strategy, str):
        data["boundary_strategy"] = create_boundary_strategy(strategy, sentence_pattern)
    elif strategy is None and sentence_pattern:
        data["boundary_strategy"] = create_boundary_strategy("regex", sentence_pattern)
    elif strategy is None:
        data.pop("boundary_strategy", None)

    return data
