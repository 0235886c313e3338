"""Tests for GreedyMerger - packing leaves into overlapping chunks."""

import pytest

from text_chunker.core.text_splitter import Fragment, GreedyMerger, postprocess_chunks
from text_chunker.core.text_splitter.merger import ChunkBuffer
from text_chunker.exceptions import ChunkingInvariantError


class TestChunkBuffer:
    """Tests for the chunk accumulator."""

    def test_append_tracks_size_and_clears_new_flag(self):
        buffer = ChunkBuffer()
        assert buffer.is_new

        buffer.append(Fragment("a b ", 2))
        assert buffer.size == 2
        assert not buffer.is_new
        assert buffer.text() == "a b "

    def test_carry_overlap_takes_trailing_leaves(self):
        buffer = ChunkBuffer()
        for text, size in [("a ", 1), ("b c ", 2), ("d ", 1)]:
            buffer.append(Fragment(text, size))

        seeded = buffer.carry_overlap(3)
        assert seeded.text() == "b c d "
        assert seeded.size == 3
        assert seeded.is_new

    def test_carry_overlap_stops_at_first_overflowing_leaf(self):
        """Test that a smaller leaf behind an overflowing one is not carried."""
        buffer = ChunkBuffer()
        for text, size in [("a ", 1), ("b c d ", 3), ("e ", 1)]:
            buffer.append(Fragment(text, size))

        assert buffer.carry_overlap(2).text() == "e "

    def test_zero_overlap_carries_nothing(self):
        buffer = ChunkBuffer()
        buffer.append(Fragment("a ", 1))
        assert buffer.carry_overlap(0).items == []


class TestGreedyMerger:
    """Tests for greedy packing."""

    def test_packs_and_overlaps(self):
        merger = GreedyMerger(max_size=4, overlap_size=2)
        leaves = [Fragment("a b ", 2), Fragment("c d ", 2), Fragment("e f", 2)]
        assert merger.merge(leaves) == ["a b c d ", "c d e f"]

    def test_overlap_evicted_until_leaf_fits(self):
        """Test that carried overlap is dropped from the front for a large leaf."""
        merger = GreedyMerger(max_size=4, overlap_size=3)
        leaves = [Fragment("a ", 1), Fragment("b c ", 2), Fragment("d e f g", 4)]
        assert merger.merge(leaves) == ["a b c ", "d e f g"]

    def test_zero_overlap(self):
        merger = GreedyMerger(max_size=2, overlap_size=0)
        leaves = [Fragment(word, 1) for word in ["one", " two", " three", " four"]]
        assert merger.merge(leaves) == ["one two", " three four"]

    def test_chunks_never_exceed_max_size(self):
        merger = GreedyMerger(max_size=5, overlap_size=2)
        leaves = [Fragment(f"w{i} ", 1 + i % 3) for i in range(30)]
        sizes = {leaf.text: leaf.size for leaf in leaves}

        for chunk in merger.merge(leaves):
            assert sum(sizes[f"{word} "] for word in chunk.split()) <= 5

    def test_empty_input(self):
        assert GreedyMerger(max_size=4, overlap_size=1).merge([]) == []

    def test_oversized_leaf_raises(self):
        with pytest.raises(ChunkingInvariantError):
            GreedyMerger(max_size=2, overlap_size=0).merge([Fragment("x y z", 3)])


class TestPostprocessChunks:
    def test_strips_and_drops_empty_chunks(self):
        assert postprocess_chunks(["  a ", " \n ", "b\n"]) == ["a", "b"]
