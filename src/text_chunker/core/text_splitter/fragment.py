"""Intermediate text unit produced by the recursive splitter."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Fragment:
    """
    A leaf of the recursive decomposition.

    Attributes:
        text: The text slice, exactly as it appears in the source
        size: Size of ``text`` under the active size measure
        is_natural_boundary: True if produced by the paragraph/sentence chain,
            False if produced by a regex, word or character fallback
    """

    text: str
    size: int
    is_natural_boundary: bool = True
