"""Tests for ChunkingConfigBridge - configuration to splitter configs."""

import logging

import pytest

from text_chunker.core.text_splitter import (
    ParagraphSplitterConfig,
    PunktBoundaryStrategy,
    SentenceSplitter,
    SplitterConfig,
)
from text_chunker.exceptions import ConfigurationFileNotFoundError, ConfigurationValidationError
from text_chunker.utils import ChunkingConfigBridge, ConfigManager


@pytest.fixture
def make_bridge(tmp_path):
    def _make() -> ChunkingConfigBridge:
        return ChunkingConfigBridge(ConfigManager(project_root=tmp_path, load_env=False))
    return _make


class TestChunkingConfigBridge:
    """Tests for mapping configuration sections onto splitter configurations."""

    def test_requires_config_manager(self):
        with pytest.raises(TypeError):
            ChunkingConfigBridge({"text_splitter": {}})

    def test_splitter_config_from_file(self, write_config, make_bridge):
        write_config({"text_splitter": {"max_size": 300, "overlap_size": 30, "boundary_strategy": "punkt"}})
        config = make_bridge().get_splitter_config()

        assert isinstance(config, SplitterConfig)
        assert config.max_size == 300
        assert config.overlap_size == 30
        assert isinstance(config.boundary_strategy, PunktBoundaryStrategy)

    def test_overrides_take_precedence_and_none_is_ignored(self, write_config, make_bridge):
        write_config({"text_splitter": {"max_size": 300, "overlap_size": 30}})
        config = make_bridge().get_splitter_config({"max_size": 100, "overlap_size": None})

        assert config.max_size == 100
        assert config.overlap_size == 30

    def test_missing_file_falls_back_to_defaults(self, make_bridge, caplog):
        with caplog.at_level(logging.WARNING, logger="text_chunker.utils.chunking_config_bridge"):
            config = make_bridge().get_splitter_config()

        assert config.max_size == 1024
        assert config.overlap_size == 200
        assert "using defaults" in caplog.text

    def test_explicit_missing_file_raises(self, tmp_path):
        manager = ConfigManager(config_file="nope.json", project_root=tmp_path, load_env=False)

        with pytest.raises(ConfigurationFileNotFoundError):
            ChunkingConfigBridge(manager).get_splitter_config()

    def test_logging_config(self, write_config, make_bridge):
        assert make_bridge().get_logging_config() == {"level": "INFO"}

        write_config({"logging": {"level": "ERROR"}})
        assert make_bridge().get_logging_config() == {"level": "ERROR"}

    def test_env_overrides_survive_fallback(self, make_bridge, monkeypatch):
        monkeypatch.setenv("TEXT_CHUNKER_MAX_SIZE", "64")
        monkeypatch.setenv("TEXT_CHUNKER_OVERLAP_SIZE", "8")

        config = make_bridge().get_splitter_config()
        assert (config.max_size, config.overlap_size) == (64, 8)

    def test_invalid_values_propagate(self, write_config, make_bridge):
        write_config({"text_splitter": {"max_size": 10, "overlap_size": 10}})

        with pytest.raises(ConfigurationValidationError):
            make_bridge().get_splitter_config()

    def test_paragraph_config(self, write_config, make_bridge):
        write_config({"paragraph_splitter": {"max_chunk_size": 64, "separator": "\n\n"}})
        bridge = make_bridge()

        assert bridge.get_paragraph_config() == ParagraphSplitterConfig(max_chunk_size=64, separator="\n\n")
        assert bridge.get_paragraph_config({"max_chunk_size": 12}).max_chunk_size == 12

    def test_reload_config(self, write_config, make_bridge):
        write_config({"text_splitter": {"max_size": 300, "overlap_size": 0}})
        bridge = make_bridge()
        assert bridge.get_splitter_config().max_size == 300

        write_config({"text_splitter": {"max_size": 400, "overlap_size": 0}})
        bridge.reload_config()
        assert bridge.get_splitter_config().max_size == 400

    def test_config_drives_splitter(self, write_config, make_bridge):
        write_config({"text_splitter": {"max_size": 2, "overlap_size": 0}})
        splitter = SentenceSplitter(make_bridge().get_splitter_config())
        assert splitter.split_text("one two three") == ["one two", "three"]
