"""
Greedy Merger Module

Packs the leaf fragments produced by the recursive splitter into chunks in a
single left-to-right pass, enforcing the maximum size and carrying trailing
overlap from each closed chunk into the next one.
"""

import logging
from dataclasses import dataclass, field
from typing import Iterable, List, Tuple

from ...exceptions import ChunkingInvariantError
from .fragment import Fragment

logger = logging.getLogger(__name__)


@dataclass
class ChunkBuffer:
    """
    Accumulator for the chunk being built.

    Attributes:
        items: Ordered (text, size) pairs of the leaves in the chunk
        size: Running size of the chunk
        is_new: True from opening until the first leaf is appended
    """

    items: List[Tuple[str, int]] = field(default_factory=list)
    size: int = 0
    is_new: bool = True

    def append(self, fragment: Fragment) -> None:
        self.items.append((fragment.text, fragment.size))
        self.size += fragment.size
        self.is_new = False

    def evict_front(self) -> None:
        _, size = self.items.pop(0)
        self.size -= size

    def text(self) -> str:
        return "".join(text for text, _ in self.items)

    def carry_overlap(self, overlap_size: int) -> "ChunkBuffer":
        """
        Open the next buffer seeded with the trailing leaves of this one.

        Leaves are taken from the end while their cumulative size stays within
        ``overlap_size``; the first leaf that would exceed it stops the walk.
        """
        seeded = ChunkBuffer()
        for text, size in reversed(self.items):
            if seeded.size + size > overlap_size:
                break
            seeded.items.insert(0, (text, size))
            seeded.size += size
        return seeded


class GreedyMerger:
    """
    Single-pass greedy packing of fragments into overlapping chunks.

    Example:
        >>> merger = GreedyMerger(max_size=4, overlap_size=2)
        >>> merger.merge([Fragment("a b ", 2), Fragment("c d ", 2), Fragment("e f", 2)])
        ['a b c d ', 'c d e f']
    """

    def __init__(self, max_size: int, overlap_size: int) -> None:
        self.max_size = max_size
        self.overlap_size = overlap_size

    def merge(self, leaves: Iterable[Fragment]) -> List[str]:
        """
        Merge leaves into chunk strings.

        Args:
            leaves: Ordered fragments, each at most ``max_size`` units

        Returns:
            Chunk strings before post-processing

        Raises:
            ChunkingInvariantError: If a leaf exceeds max_size on its own
        """
        chunks: List[str] = []
        buffer = ChunkBuffer()

        for leaf in leaves:
            if leaf.size > self.max_size:
                raise ChunkingInvariantError(leaf.text, leaf.size, self.max_size)

            if buffer.size + leaf.size > self.max_size and not buffer.is_new:
                chunks.append(buffer.text())
                buffer = buffer.carry_overlap(self.overlap_size)

            if buffer.is_new:
                # Drop inherited overlap until the leaf fits.
                while buffer.items and buffer.size + leaf.size > self.max_size:
                    buffer.evict_front()

            # The leaf now fits or the buffer is empty.
            buffer.append(leaf)

        if not buffer.is_new:
            chunks.append(buffer.text())

        logger.debug(f"Merged leaves into {len(chunks)} chunks")
        return chunks


def postprocess_chunks(chunks: Iterable[str]) -> List[str]:
    """Strip every chunk and drop the ones left empty."""
    return [chunk.strip() for chunk in chunks if chunk.strip()]
