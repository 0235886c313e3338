"""
Recursive Splitter Module

Contains the RecursiveSplitter class which decomposes a fragment into leaf
fragments small enough to fit the configured maximum size, trying a fixed
priority chain of segmenters:

    paragraph separator -> sentence boundary strategy      (natural boundaries)
    secondary regex -> word separator -> single character  (fallbacks)
"""

import logging
from typing import List, Optional, Sequence, Tuple

from ...exceptions import ChunkingInvariantError
from .config import SplitterConfig
from .fragment import Fragment
from .split_functions import (
    CharacterSegmenter,
    RegexSegmenter,
    Segmenter,
    SeparatorSegmenter,
    StrategySegmenter,
)

logger = logging.getLogger(__name__)


class RecursiveSplitter:
    """
    Recursive decomposition of text into size-bounded leaf fragments.

    The splitter keeps no per-call state: every ``decompose`` call builds its
    own leaf list, so one instance can serve concurrent callers.

    Attributes:
        config: SplitterConfig with the size measure and separators
        primary_chain: Segmenters whose pieces are natural boundaries
        fallback_chain: Segmenters tried when no natural boundary exists

    Example:
        >>> splitter = RecursiveSplitter(SplitterConfig(max_size=5, overlap_size=1))
        >>> [f.text for f in splitter.decompose("One two three. Four five six seven.")]
        ['One two three. ', 'Four five six seven.']
    """

    def __init__(self, config: SplitterConfig) -> None:
        if not isinstance(config, SplitterConfig):
            raise TypeError(f"Config must be SplitterConfig, got: {type(config)}")

        self.config = config
        self.primary_chain: Tuple[Segmenter, ...] = (
            SeparatorSegmenter(config.paragraph_separator),
            StrategySegmenter(config.boundary_strategy),
        )
        self.fallback_chain: Tuple[Segmenter, ...] = (
            RegexSegmenter(config.secondary_boundary_pattern),
            SeparatorSegmenter(config.word_separator),
            CharacterSegmenter(),
        )

        logger.debug(f"RecursiveSplitter initialized with max_size={config.max_size}")

    def measure(self, text: str) -> int:
        return self.config.size_measure.measure(text)

    def decompose(self, text: str, max_size: Optional[int] = None) -> List[Fragment]:
        """
        Decompose text into leaf fragments that each fit ``max_size``.

        Concatenating the texts of the returned fragments reproduces the input
        exactly.

        Args:
            text: Text to decompose
            max_size: Size limit (default: config.max_size)

        Returns:
            Ordered list of Fragment leaves

        Raises:
            ChunkingInvariantError: If a single character still exceeds max_size
        """
        if max_size is None:
            max_size = self.config.max_size

        size = self.measure(text)
        if size <= max_size:
            return [Fragment(text=text, size=size, is_natural_boundary=True)]

        candidates, is_natural = self._segment(text)
        if len(candidates) <= 1:
            raise ChunkingInvariantError(text, size, max_size)

        leaves: List[Fragment] = []
        for candidate in candidates:
            candidate_size = self.measure(candidate)
            if candidate_size <= max_size:
                leaves.append(Fragment(candidate, candidate_size, is_natural))
            else:
                leaves.extend(self.decompose(candidate, max_size))

        return leaves

    def _segment(self, text: str) -> Tuple[List[str], bool]:
        """Apply the first segmenter that yields more than one candidate."""
        pieces = self._first_split(self.primary_chain, text)
        if pieces is not None:
            return pieces, True

        pieces = self._first_split(self.fallback_chain, text)
        if pieces is not None:
            return pieces, False

        return [text], False

    @staticmethod
    def _first_split(chain: Sequence[Segmenter], text: str) -> Optional[List[str]]:
        for segmenter in chain:
            pieces = segmenter(text)
            if len(pieces) > 1:
                logger.debug(f"{segmenter!r} produced {len(pieces)} candidates")
                return pieces
        return None

    def __repr__(self) -> str:
        return f"RecursiveSplitter(max_size={self.config.max_size}, measure={self.config.size_measure!r})"
