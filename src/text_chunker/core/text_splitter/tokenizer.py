"""
Size Measure Module

Converts text fragments into a count of size units. The chunking engine only
relies on ``measure(text) -> int``; measures are deterministic and pure but
are not required to be additive (BPE tokenizers merge across boundaries).

Components:
- SizeMeasure: Protocol implemented by every measure
- WhitespaceSizeMeasure: Coarse measure counting whitespace-delimited words
- TikTokenSizeMeasure: Precise measure counting BPE tokens for a named model
- create_size_measure: Factory resolving a measure by name
"""

import logging
from typing import Dict, Optional, Protocol, runtime_checkable

import tiktoken

from ...exceptions import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_TOKENIZER_MODEL = "gpt-3.5-turbo"


@runtime_checkable
class SizeMeasure(Protocol):
    """Protocol for size measures used by the splitters."""

    name: str

    def measure(self, text: str) -> int:
        """Return the size of ``text`` in this measure's units."""
        ...


class WhitespaceSizeMeasure:
    """
    Coarse size measure: the number of whitespace-delimited words.

    Cheap and dependency free, used as the default. A long run of characters
    without whitespace counts as a single unit.
    """

    name = "whitespace"

    def measure(self, text: str) -> int:
        return len(text.split())

    def to_dict(self) -> Dict[str, Optional[str]]:
        return {"size_measure": self.name, "tokenizer_model": None}

    def __repr__(self) -> str:
        return "WhitespaceSizeMeasure()"


class TikTokenSizeMeasure:
    """
    Precise size measure: the number of BPE tokens produced by the encoder
    of a named model.

    Example:
        >>> measure = TikTokenSizeMeasure("gpt-4")
        >>> measure.measure("Hello world")
        2
    """

    name = "tiktoken"

    def __init__(self, model: Optional[str] = None) -> None:
        """
        Initialize the measure for a model.

        Args:
            model: Model name understood by ``tiktoken.encoding_for_model``
                (default: gpt-3.5-turbo)

        Raises:
            ConfigurationError: If the model name is not recognized
                or its encoding cannot be loaded
        """
        self.model = model or DEFAULT_TOKENIZER_MODEL

        try:
            self._encoding = tiktoken.encoding_for_model(self.model)
        except KeyError as e:
            raise ConfigurationError(
                f"Unknown tokenizer model '{self.model}'",
                suggestions=[
                    "Use a model name known to tiktoken, e.g. 'gpt-4o' or 'gpt-3.5-turbo'",
                    "Use the 'whitespace' size measure when no tokenizer is needed",
                ]
            ) from e
        except OSError as e:
            # tiktoken fetches BPE files on first use
            raise ConfigurationError(
                f"Tokenizer encoding for '{self.model}' is unavailable: {e}",
                suggestions=["Check network access or set TIKTOKEN_CACHE_DIR to a populated cache"]
            ) from e

        logger.debug(f"TikTokenSizeMeasure initialized: model={self.model}, encoding={self._encoding.name}")

    def measure(self, text: str) -> int:
        # Special-token markers in the input are counted as plain text.
        return len(self._encoding.encode(text, disallowed_special=()))

    def to_dict(self) -> Dict[str, Optional[str]]:
        return {"size_measure": self.name, "tokenizer_model": self.model}

    def __repr__(self) -> str:
        return f"TikTokenSizeMeasure(model={self.model!r})"


def create_size_measure(name: str = "whitespace", model: Optional[str] = None) -> SizeMeasure:
    """
    Create a size measure by name.

    Args:
        name: "whitespace" or "tiktoken"
        model: Tokenizer model, only used by the tiktoken measure

    Returns:
        SizeMeasure instance

    Raises:
        ConfigurationError: If the name or the model is not recognized
    """
    if name == WhitespaceSizeMeasure.name:
        return WhitespaceSizeMeasure()
    if name == TikTokenSizeMeasure.name:
        return TikTokenSizeMeasure(model)

    raise ConfigurationError(
        f"Unknown size measure '{name}'",
        suggestions=[f"Use one of: {WhitespaceSizeMeasure.name}, {TikTokenSizeMeasure.name}"]
    )
