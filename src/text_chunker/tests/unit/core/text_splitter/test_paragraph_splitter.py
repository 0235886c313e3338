"""Tests for ParagraphSplitter - byte-bounded paragraph chunks."""

import pytest

from text_chunker.core.text_splitter import ParagraphSplitter, ParagraphSplitterConfig, TextSplitter
from text_chunker.core.text_splitter.paragraph_splitter import byte_length


class TestParagraphSplitter:
    """Tests for paragraph packing and overlap."""

    def test_paragraph_overlap(self):
        splitter = ParagraphSplitter(max_chunk_size=12)
        assert splitter.split_text("Para1\nPara2\nPara3") == ["Para1\nPara2", "Para2\nPara3"]

    def test_blank_lines_are_ignored(self):
        splitter = ParagraphSplitter(max_chunk_size=12)
        assert splitter.split_text("Para1\n\n  \nPara2\n\nPara3\n") == ["Para1\nPara2", "Para2\nPara3"]

    def test_everything_fits_in_one_chunk(self):
        assert ParagraphSplitter().split_text("Para1\nPara2") == ["Para1\nPara2"]

    def test_oversized_paragraph_is_hard_split(self):
        splitter = ParagraphSplitter(max_chunk_size=5)
        assert splitter.split_text("1234567890") == ["12345", "67890"]

    def test_overlap_dropped_when_it_would_overflow(self):
        splitter = ParagraphSplitter(max_chunk_size=10)
        assert splitter.split_text("aaaa\nbbbb\ncccccccc") == ["aaaa\nbbbb", "cccccccc"]

    def test_multibyte_text_is_not_cut_inside_code_points(self):
        splitter = ParagraphSplitter(max_chunk_size=4)
        chunks = splitter.split_text("ééé")

        assert chunks == ["éé", "é"]
        assert all(byte_length(chunk) <= 4 for chunk in chunks)

    def test_chunks_respect_byte_limit(self):
        text = "\n".join(f"Paragraph {i} about chunking déjà vu." for i in range(20))
        splitter = ParagraphSplitter(max_chunk_size=80)

        chunks = splitter.split_text(text)
        assert len(chunks) > 1
        assert all(byte_length(chunk) <= 80 for chunk in chunks)

    @pytest.mark.parametrize("text", ["", "\n\n", "   "])
    def test_empty_or_blank_input(self, text):
        assert ParagraphSplitter().split_text(text) == []

    def test_custom_separator(self):
        splitter = ParagraphSplitter(max_chunk_size=100, separator="||")
        assert splitter.split_text("a|| b ||c") == ["a||b||c"]

    def test_non_positive_size_uses_default(self):
        assert ParagraphSplitter(max_chunk_size=0).max_chunk_size == 1024

    def test_config_and_shortcuts(self):
        splitter = ParagraphSplitter(ParagraphSplitterConfig(max_chunk_size=64, separator="\n\n"), max_chunk_size=32)
        assert splitter.max_chunk_size == 32
        assert splitter.separator == "\n\n"
        assert isinstance(splitter, TextSplitter)

    def test_rejects_non_string_text(self):
        with pytest.raises(TypeError):
            ParagraphSplitter().split_text(None)
