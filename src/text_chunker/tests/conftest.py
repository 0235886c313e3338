"""Shared test fixtures and configuration for text-chunker tests."""

import json
from pathlib import Path
from typing import Any, Callable, Dict

import pytest

from text_chunker.utils.config import EnvironmentHandler


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Remove TEXT_CHUNKER_* overrides so the host environment cannot leak into tests."""
    for env_var in EnvironmentHandler().get_env_mapping():
        monkeypatch.delenv(env_var, raising=False)


@pytest.fixture
def long_paragraph() -> str:
    """A single paragraph of forty seven-word sentences (280 words)."""
    return " ".join(
        f"Sentence number {i} has exactly seven words." for i in range(1, 41)
    )


@pytest.fixture
def sample_document() -> str:
    """A small multi-paragraph document."""
    return (
        "Text chunking splits documents for retrieval. Chunks should respect sentences.\n\n\n"
        "Dr. Smith reviewed the results. He approved the release on Monday.\n\n\n"
        "Overlap keeps context between neighbouring chunks, which helps search quality."
    )


@pytest.fixture
def write_config(tmp_path) -> Callable[..., Path]:
    """Write a configuration file into a temporary project root."""

    def _write(data: Dict[str, Any], name: str = "textchunker.config.json") -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(data), encoding="utf-8")
        return path

    return _write


class DoubleCharMeasure:
    """Size measure counting two units per character."""

    name = "double"

    def measure(self, text: str) -> int:
        return 2 * len(text)


@pytest.fixture
def double_char_measure() -> DoubleCharMeasure:
    return DoubleCharMeasure()
