"""
Text Splitter Package - Size-bounded, boundary-aware text chunking

This package splits documents into ordered chunks that never exceed a
configured size, prefer paragraph and sentence boundaries over arbitrary
cuts, and share a bounded overlap between consecutive chunks.

Components:
- SizeMeasure: Protocol for size measures (WhitespaceSizeMeasure, TikTokenSizeMeasure)
- BoundaryStrategy: Protocol for sentence boundary strategies (RegexBoundaryStrategy, PunktBoundaryStrategy)
- SplitterConfig: Immutable configuration of the sentence splitter
- Fragment: Leaf produced by the recursive decomposition
- RecursiveSplitter: Recursive decomposition into size-bounded leaves
- GreedyMerger: Greedy packing of leaves into overlapping chunks
- SentenceSplitter: Complete sentence-aware splitter
- ParagraphSplitter: Byte-based paragraph splitter
- split_text: One-off splitting with a configuration
"""

from .tokenizer import (
    SizeMeasure,
    WhitespaceSizeMeasure,
    TikTokenSizeMeasure,
    create_size_measure,
)

from .boundary import (
    BoundaryStrategy,
    RegexBoundaryStrategy,
    PunktBoundaryStrategy,
    create_boundary_strategy,
)

from .config import SplitterConfig, ParagraphSplitterConfig

from .fragment import Fragment

from .splitter import RecursiveSplitter

from .merger import GreedyMerger, postprocess_chunks

from .sentence_splitter import TextSplitter, SentenceSplitter, split_text

from .paragraph_splitter import ParagraphSplitter

__all__ = [
    "SizeMeasure",
    "WhitespaceSizeMeasure",
    "TikTokenSizeMeasure",
    "create_size_measure",
    "BoundaryStrategy",
    "RegexBoundaryStrategy",
    "PunktBoundaryStrategy",
    "create_boundary_strategy",
    "SplitterConfig",
    "ParagraphSplitterConfig",
    "Fragment",
    "RecursiveSplitter",
    "GreedyMerger",
    "postprocess_chunks",
    "TextSplitter",
    "SentenceSplitter",
    "ParagraphSplitter",
    "split_text",
]
