"""
Sentence Splitter Module

Contains the SentenceSplitter class, the chunking engine built on the
recursive splitter and the greedy merger. Also defines the TextSplitter
interface shared by every splitter and the ``split_text`` function used by
ingestion pipelines.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, Iterable, List, Mapping, Optional, Union

from .config import SplitterConfig
from .merger import GreedyMerger, postprocess_chunks
from .splitter import RecursiveSplitter

logger = logging.getLogger(__name__)


class TextSplitter(ABC):
    """Interface of every text splitter: text in, ordered chunks out."""

    @abstractmethod
    def split_text(self, text: str) -> List[str]:
        """Split text into an ordered list of chunks."""

    def split_texts(self, texts: Iterable[str]) -> List[List[str]]:
        """Split several documents, one chunk list per document."""
        return [self.split_text(text) for text in texts]


class SentenceSplitter(TextSplitter):
    """
    Sentence-aware text splitter with size-bounded, overlapping chunks.

    Chunk boundaries prefer paragraphs, then sentences, and only fall back
    to sub-sentence punctuation, words and single characters when a sentence
    alone exceeds the maximum size.

    Attributes:
        config: SplitterConfig instance with chunking preferences
        splitter: RecursiveSplitter producing the leaf fragments
        merger: GreedyMerger packing leaves into chunks

    Example:
        >>> splitter = SentenceSplitter(max_size=200, overlap_size=20)
        >>> chunks = splitter.split_text(document_text)
        >>> stats = splitter.get_statistics(chunks)
    """

    def __init__(self, config: Optional[SplitterConfig] = None, **overrides: Any) -> None:
        """
        Initialize the splitter.

        Args:
            config: SplitterConfig instance (default: SplitterConfig())
            **overrides: Configuration fields overriding ``config``

        Raises:
            TypeError: If config is not a SplitterConfig instance
            ConfigurationError: If the overrides are invalid
        """
        if config is None:
            config = SplitterConfig()
        if not isinstance(config, SplitterConfig):
            raise TypeError(f"Config must be SplitterConfig, got: {type(config)}")
        if overrides:
            config = config.copy(**overrides)

        self.config = config
        self.splitter = RecursiveSplitter(config)
        self.merger = GreedyMerger(config.max_size, config.overlap_size)

        logger.debug(
            f"SentenceSplitter initialized with max_size={config.max_size}, overlap={config.overlap_size}"
        )

    def split_text(self, text: str) -> List[str]:
        """
        Split text into chunks.

        Args:
            text: Text content to chunk

        Returns:
            Ordered list of non-empty, stripped chunks. An empty string input
            returns ``[""]`` for compatibility with existing consumers.

        Raises:
            TypeError: If text is not a string
            ChunkingInvariantError: If the size measure cannot fit a single
                character into max_size
        """
        if not isinstance(text, str):
            raise TypeError(f"Text must be string, got: {type(text)}")

        if text == "":
            return [text]

        leaves = self.splitter.decompose(text, self.config.max_size)
        chunks = postprocess_chunks(self.merger.merge(leaves))

        logger.info(f"Chunking complete: {len(chunks)} chunks created from {len(text)} characters")
        return chunks

    def measure(self, text: str) -> int:
        return self.splitter.measure(text)

    def get_statistics(self, chunks: List[str]) -> Dict[str, Any]:
        """
        Summarize chunk sizes for diagnostics.

        Args:
            chunks: Chunks returned by ``split_text``

        Returns:
            Dictionary with chunk count and size statistics
        """
        sizes = [self.measure(chunk) for chunk in chunks]
        return {
            "chunk_count": len(chunks),
            "chunk_sizes": sizes,
            "chunk_lengths": [len(chunk) for chunk in chunks],
            "min_size": min(sizes) if sizes else 0,
            "max_size": max(sizes) if sizes else 0,
            "average_size": sum(sizes) / len(sizes) if sizes else 0,
            "size_measure": self.config.size_measure.name,
        }

    def __repr__(self) -> str:
        return (
            f"SentenceSplitter(max_size={self.config.max_size}, "
            f"overlap_size={self.config.overlap_size}, "
            f"measure={self.config.size_measure.name}, "
            f"strategy={self.config.boundary_strategy.name})"
        )


def split_text(
    configuration: Union[SplitterConfig, Mapping[str, Any], None],
    text: str
) -> List[str]:
    """
    Split text with a one-off splitter.

    Args:
        configuration: SplitterConfig, a mapping of configuration options
            (names allowed for size_measure and boundary_strategy), or None
            for defaults
        text: Text content to chunk

    Returns:
        Ordered list of chunks
    """
    if configuration is None:
        config = SplitterConfig()
    elif isinstance(configuration, SplitterConfig):
        config = configuration
    else:
        config = SplitterConfig.from_dict(dict(configuration))

    return SentenceSplitter(config).split_text(text)
