"""
text-chunker: deterministic, sentence-aware text chunking.

Usage:
    from text_chunker import SentenceSplitter, SplitterConfig

    splitter = SentenceSplitter(SplitterConfig(max_size=200, overlap_size=20))
    chunks = splitter.split_text(text)
"""

from .core.text_splitter import (
    SplitterConfig,
    ParagraphSplitterConfig,
    SentenceSplitter,
    ParagraphSplitter,
    TextSplitter,
    split_text,
)
from .exceptions import (
    TextChunkerError,
    ConfigurationError,
    ChunkingInvariantError,
)

__version__ = "0.1.0"

__all__ = [
    "SplitterConfig",
    "ParagraphSplitterConfig",
    "SentenceSplitter",
    "ParagraphSplitter",
    "TextSplitter",
    "split_text",
    "TextChunkerError",
    "ConfigurationError",
    "ChunkingInvariantError",
    "__version__",
]
