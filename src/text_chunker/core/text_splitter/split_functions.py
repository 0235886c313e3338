"""
Segmenters used by the recursive splitter's decomposition chains.

Each segmenter is a small callable object splitting a fragment into ordered,
non-empty pieces whose concatenation is the original fragment.
"""

import re
from typing import List, Protocol

from .boundary import BoundaryStrategy


class Segmenter(Protocol):
    """A single step of a decomposition chain."""

    def __call__(self, text: str) -> List[str]:
        ...


class SeparatorSegmenter:
    """Split on a literal separator, keeping it at the start of the next piece."""

    def __init__(self, separator: str) -> None:
        if not separator:
            raise ValueError("separator must be a non-empty string")
        self.separator = separator

    def __call__(self, text: str) -> List[str]:
        parts = text.split(self.separator)
        pieces = [parts[0]] + [self.separator + part for part in parts[1:]]
        return [piece for piece in pieces if piece]

    def __repr__(self) -> str:
        return f"SeparatorSegmenter({self.separator!r})"


class RegexSegmenter:
    """
    Split into the matches of a pattern.

    Text not covered by any match is attached to the following piece (or to
    the last one), so the split stays lossless whatever the pattern.
    """

    def __init__(self, pattern: str) -> None:
        self.pattern = pattern
        self._compiled = re.compile(pattern)

    def __call__(self, text: str) -> List[str]:
        pieces = []
        start = 0

        for match in self._compiled.finditer(text):
            if match.end() == match.start():
                continue
            pieces.append(text[start:match.end()])
            start = match.end()

        if start < len(text):
            if pieces:
                pieces[-1] += text[start:]
            else:
                pieces.append(text[start:])

        return pieces

    def __repr__(self) -> str:
        return f"RegexSegmenter({self.pattern!r})"


class CharacterSegmenter:
    """Split into single code points."""

    def __call__(self, text: str) -> List[str]:
        return list(text)

    def __repr__(self) -> str:
        return "CharacterSegmenter()"


class StrategySegmenter:
    """Adapt a BoundaryStrategy to the segmenter interface."""

    def __init__(self, strategy: BoundaryStrategy) -> None:
        self.strategy = strategy

    def __call__(self, text: str) -> List[str]:
        return [piece for piece in self.strategy.segment(text) if piece]

    def __repr__(self) -> str:
        return f"StrategySegmenter({self.strategy!r})"
