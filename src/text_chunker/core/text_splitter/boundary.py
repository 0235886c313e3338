"""
Boundary Strategy Module

Sentence-level boundary detection for the recursive splitter. Every strategy
is lossless: concatenating the returned fragments reproduces the input.

Components:
- BoundaryStrategy: Protocol implemented by every strategy
- RegexBoundaryStrategy: Cuts after sentence-ending punctuation matched by a regex
- PunktBoundaryStrategy: Rule-based sentence segmentation driven by language data
- create_boundary_strategy: Factory resolving a strategy by name
"""

import json
import logging
import re
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Protocol, Union, runtime_checkable

from nltk.tokenize.punkt import PunktParameters, PunktSentenceTokenizer

from ...exceptions import ConfigurationError

logger = logging.getLogger(__name__)

# Latin terminators need trailing whitespace so that decimals and dotted
# tokens ("3.14", "example.com") stay intact; CJK text has no spaces.
DEFAULT_SENTENCE_BOUNDARY_PATTERN = r"[.!?]+[\"'’”)\]]*\s+|[。？！]+[”」』）]*\s*"

DATA_DIR = Path(__file__).parent / "data"
DEFAULT_LANGUAGE_DATA = DATA_DIR / "english.json"


@runtime_checkable
class BoundaryStrategy(Protocol):
    """Protocol for sentence boundary strategies."""

    name: str

    def segment(self, text: str) -> List[str]:
        """Split ``text`` into ordered sub-fragments (at least one)."""
        ...


class RegexBoundaryStrategy:
    """
    Regex-driven punctuation splitter.

    The pattern matches a boundary (terminator run plus the whitespace that
    follows it). The text is cut right after every match so the punctuation
    stays with the sentence it ends.

    Example:
        >>> RegexBoundaryStrategy().segment("One. Two! Three")
        ['One. ', 'Two! ', 'Three']
    """

    name = "regex"

    def __init__(self, pattern: str = DEFAULT_SENTENCE_BOUNDARY_PATTERN) -> None:
        """
        Args:
            pattern: Regular expression matching a sentence boundary

        Raises:
            ConfigurationError: If the pattern does not compile
        """
        try:
            self._compiled = re.compile(pattern)
        except re.error as e:
            raise ConfigurationError(
                f"Invalid sentence boundary pattern {pattern!r}: {e}"
            ) from e
        self.pattern = pattern

    def segment(self, text: str) -> List[str]:
        fragments = []
        start = 0

        for match in self._compiled.finditer(text):
            end = match.end()
            if end > start:
                fragments.append(text[start:end])
                start = end

        if start < len(text):
            fragments.append(text[start:])

        return fragments or [text]

    def to_dict(self) -> Dict[str, Any]:
        return {"boundary_strategy": self.name, "sentence_pattern": self.pattern}

    def __repr__(self) -> str:
        return f"RegexBoundaryStrategy(pattern={self.pattern!r})"


class PunktBoundaryStrategy:
    """
    Rule-based sentence segmenter built on NLTK's Punkt algorithm.

    Instead of a trained model downloaded at runtime, the tokenizer is seeded
    from plain language data (abbreviations, collocations and frequent
    sentence starters), so abbreviations such as "Dr." or "U.S." do not end
    a sentence. The English dataset ships with the package; other languages
    are plugged in with ``from_file`` or by passing a mapping.

    Attributes:
        language: Name of the loaded dataset
        language_data: The mapping the tokenizer was built from
    """

    name = "punkt"

    def __init__(self, language_data: Optional[Mapping[str, Any]] = None) -> None:
        """
        Initialize the strategy.

        Args:
            language_data: Mapping with "abbreviations", optional "collocations"
                and "sentence_starters" (default: embedded English data)

        Raises:
            ConfigurationError: If the language data is malformed
        """
        if language_data is None:
            language_data = _load_language_file(DEFAULT_LANGUAGE_DATA)

        self.language_data = dict(language_data)
        self.language = self.language_data.get("language", "custom")
        self._tokenizer = PunktSentenceTokenizer(self._build_parameters(self.language_data))

        logger.debug(
            f"PunktBoundaryStrategy initialized: language={self.language}, "
            f"abbreviations={len(self.language_data.get('abbreviations', []))}"
        )

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "PunktBoundaryStrategy":
        """Create a strategy from a JSON language data file."""
        return cls(_load_language_file(Path(path)))

    @staticmethod
    def _build_parameters(data: Mapping[str, Any]) -> PunktParameters:
        abbreviations = data.get("abbreviations")
        if not isinstance(abbreviations, list):
            raise ConfigurationError(
                "Sentence boundary data must contain an 'abbreviations' list",
                suggestions=["See text_chunker/core/text_splitter/data/english.json for the expected layout"]
            )

        params = PunktParameters()
        params.abbrev_types = {str(abbr).lower().rstrip(".") for abbr in abbreviations}
        params.sent_starters = {str(word).lower() for word in data.get("sentence_starters", [])}

        try:
            params.collocations = {
                (str(first).lower(), str(second).lower())
                for first, second in data.get("collocations", [])
            }
        except (TypeError, ValueError) as e:
            raise ConfigurationError(
                f"Sentence boundary collocations must be pairs of words: {e}"
            ) from e

        return params

    def segment(self, text: str) -> List[str]:
        starts = [start for start, _ in self._tokenizer.span_tokenize(text)]
        if len(starts) <= 1:
            return [text]

        # Cut at the start of every sentence after the first so that leading
        # and inter-sentence whitespace is kept with the preceding fragment.
        cuts = [0] + starts[1:] + [len(text)]
        return [text[cuts[i]:cuts[i + 1]] for i in range(len(cuts) - 1)]

    def to_dict(self) -> Dict[str, Any]:
        return {"boundary_strategy": self.name, "sentence_pattern": None}

    def __repr__(self) -> str:
        return f"PunktBoundaryStrategy(language={self.language!r})"


def _load_language_file(path: Path) -> Dict[str, Any]:
    try:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
    except FileNotFoundError as e:
        raise ConfigurationError(
            f"Sentence boundary data file not found: {path}",
            config_file=str(path)
        ) from e
    except json.JSONDecodeError as e:
        raise ConfigurationError(
            f"Invalid JSON in sentence boundary data file {path}: {e}",
            config_file=str(path)
        ) from e


def create_boundary_strategy(name: str = "regex", pattern: Optional[str] = None) -> BoundaryStrategy:
    """
    Create a boundary strategy by name.

    Args:
        name: "regex" or "punkt"
        pattern: Boundary pattern, only used by the regex strategy

    Raises:
        ConfigurationError: If the name is not recognized
    """
    if name == RegexBoundaryStrategy.name:
        return RegexBoundaryStrategy(pattern or DEFAULT_SENTENCE_BOUNDARY_PATTERN)
    if name == PunktBoundaryStrategy.name:
        return PunktBoundaryStrategy()

    raise ConfigurationError(
        f"Unknown boundary strategy '{name}'",
        suggestions=[f"Use one of: {RegexBoundaryStrategy.name}, {PunktBoundaryStrategy.name}"]
    )
