"""
Chunking exceptions for text-chunker.

Raised by the recursive splitter and the greedy merger when the size
contract of a chunk cannot be honoured.
"""

from .config_exceptions import TextChunkerError


class ChunkingError(TextChunkerError):
    """
    Base exception for chunking operations.

    This is the parent class for all errors raised while splitting text.
    """
    pass


class ChunkingInvariantError(ChunkingError):
    """
    Raised when a fragment cannot be reduced below the maximum chunk size.

    Only reachable when the size measure assigns more than ``max_size`` units
    to a single character, which means the size measure and the chunk size
    are mismatched. The offending fragment is attached for debugging.
    """

    def __init__(self, fragment: str, size: int, max_size: int) -> None:
        super().__init__(
            f"Fragment {fragment!r} measures {size} units, which exceeds "
            f"max_size={max_size} and cannot be split any further"
        )
        self.fragment = fragment
        self.size = size
        self.max_size = max_size
