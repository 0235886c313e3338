"""
Paragraph Splitter Module

A simpler alternative to the sentence splitter: chunks are built from whole
paragraphs and bounded by their UTF-8 byte length. Each chunk after the first
starts with the last paragraph of the previous chunk.
"""

import logging
from typing import List, Optional

from .config import ParagraphSplitterConfig
from .sentence_splitter import TextSplitter

logger = logging.getLogger(__name__)


def byte_length(text: str) -> int:
    return len(text.encode("utf-8"))


class ParagraphSplitter(TextSplitter):
    """
    Byte-bounded paragraph chunker with one paragraph of overlap.

    Example:
        >>> ParagraphSplitter(max_chunk_size=12).split_text("Para1\\n\\nPara2\\n\\nPara3")
        ['Para1\\nPara2', 'Para2\\nPara3']
    """

    def __init__(
        self,
        config: Optional[ParagraphSplitterConfig] = None,
        max_chunk_size: Optional[int] = None,
        separator: Optional[str] = None,
    ) -> None:
        """
        Initialize the paragraph splitter.

        Args:
            config: ParagraphSplitterConfig instance
            max_chunk_size: Shortcut overriding config.max_chunk_size
            separator: Shortcut overriding config.separator
        """
        config = config or ParagraphSplitterConfig()
        if max_chunk_size is not None or separator is not None:
            config = ParagraphSplitterConfig(
                max_chunk_size=config.max_chunk_size if max_chunk_size is None else max_chunk_size,
                separator=config.separator if separator is None else separator,
            )
        self.config = config

    @property
    def max_chunk_size(self) -> int:
        return self.config.max_chunk_size

    @property
    def separator(self) -> str:
        return self.config.separator

    def split_text(self, text: str) -> List[str]:
        """
        Split text into paragraph chunks.

        Args:
            text: Text content to chunk

        Returns:
            Ordered list of chunks, empty for empty or blank input
        """
        if not isinstance(text, str):
            raise TypeError(f"Text must be string, got: {type(text)}")

        paragraphs = []
        for raw in text.split(self.separator):
            paragraph = raw.strip()
            if not paragraph:
                continue
            if byte_length(paragraph) > self.max_chunk_size:
                paragraphs.extend(self.split_oversized_paragraph(paragraph))
            else:
                paragraphs.append(paragraph)

        if not paragraphs:
            return []

        chunks = self._pack(paragraphs)
        logger.info(f"Paragraph chunking complete: {len(chunks)} chunks from {len(paragraphs)} paragraphs")
        return chunks

    def _pack(self, paragraphs: List[str]) -> List[str]:
        separator_size = byte_length(self.separator)
        chunks: List[str] = []
        current: List[str] = []
        current_size = 0

        for paragraph in paragraphs:
            size = byte_length(paragraph)
            added = size + separator_size if current else size

            if current and current_size + added > self.max_chunk_size:
                chunks.append(self.separator.join(current))

                last = current[-1]
                overlap_size = byte_length(last) + separator_size + size
                if overlap_size > self.max_chunk_size:
                    current, current_size = [paragraph], size
                else:
                    current, current_size = [last, paragraph], overlap_size
            else:
                current.append(paragraph)
                current_size += added

        if current:
            chunks.append(self.separator.join(current))

        return chunks

    def split_oversized_paragraph(self, paragraph: str) -> List[str]:
        """
        Hard-split a paragraph into maximal pieces of at most max_chunk_size
        bytes, never cutting inside a code point.

        A code point wider than max_chunk_size is emitted as its own piece.
        """
        pieces = []
        current: List[str] = []
        current_size = 0

        for char in paragraph:
            size = byte_length(char)
            if current and current_size + size > self.max_chunk_size:
                pieces.append("".join(current))
                current, current_size = [], 0
            current.append(char)
            current_size += size

        if current:
            pieces.append("".join(current))

        logger.debug(f"Split oversized paragraph of {byte_length(paragraph)} bytes into {len(pieces)} pieces")
        return pieces

    def __repr__(self) -> str:
        return f"ParagraphSplitter(max_chunk_size={self.max_chunk_size}, separator={self.separator!r})"
