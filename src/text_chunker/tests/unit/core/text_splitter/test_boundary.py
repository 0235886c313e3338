"""Tests for sentence boundary strategies - regex and Punkt."""

import json

import pytest

from text_chunker.core.text_splitter import (
    BoundaryStrategy,
    PunktBoundaryStrategy,
    RegexBoundaryStrategy,
    create_boundary_strategy,
)
from text_chunker.exceptions import ConfigurationError


class TestRegexBoundaryStrategy:
    """Tests for the punctuation-driven regex strategy."""

    def test_cuts_after_terminators(self):
        """Test that punctuation and following whitespace stay with the sentence."""
        strategy = RegexBoundaryStrategy()
        assert strategy.segment("One. Two! Three") == ["One. ", "Two! ", "Three"]

    def test_keeps_closing_quotes_with_sentence(self):
        strategy = RegexBoundaryStrategy()
        assert strategy.segment('He said "Stop." Then left.') == ['He said "Stop." ', "Then left."]

    def test_cjk_terminators_need_no_whitespace(self):
        strategy = RegexBoundaryStrategy()
        assert strategy.segment("你好。世界！") == ["你好。", "世界！"]

    def test_segmentation_is_lossless(self):
        text = "First?! Second... third. Fourth"
        assert "".join(RegexBoundaryStrategy().segment(text)) == text

    def test_text_without_boundary_is_single_fragment(self):
        assert RegexBoundaryStrategy().segment("no boundary here") == ["no boundary here"]

    def test_custom_pattern(self):
        strategy = RegexBoundaryStrategy(r";\s*")
        assert strategy.segment("a; b; c") == ["a; ", "b; ", "c"]

    def test_invalid_pattern_raises_configuration_error(self):
        with pytest.raises(ConfigurationError, match="Invalid sentence boundary pattern"):
            RegexBoundaryStrategy("[unclosed")

    def test_implements_protocol_and_serializes(self):
        strategy = RegexBoundaryStrategy(r"\.\s+")
        assert isinstance(strategy, BoundaryStrategy)
        assert strategy.to_dict() == {"boundary_strategy": "regex", "sentence_pattern": r"\.\s+"}


class TestPunktBoundaryStrategy:
    """Tests for the Punkt strategy seeded from language data."""

    def test_abbreviation_does_not_end_sentence(self):
        """Test that 'Dr.' is treated as an abbreviation from the bundled English data."""
        strategy = PunktBoundaryStrategy()
        fragments = strategy.segment("Dr. Smith went to Washington. He arrived at noon.")

        assert len(fragments) == 2
        assert fragments[0].strip() == "Dr. Smith went to Washington."
        assert fragments[1].strip() == "He arrived at noon."

    def test_dotted_abbreviation_does_not_end_sentence(self):
        fragments = PunktBoundaryStrategy().segment("The U.S. economy grew. Markets rallied.")
        assert [fragment.strip() for fragment in fragments] == ["The U.S. economy grew.", "Markets rallied."]

    def test_segmentation_is_lossless(self):
        text = "  Mr. Jones left early.  The meeting continued without him. "
        assert "".join(PunktBoundaryStrategy().segment(text)) == text

    def test_single_sentence(self):
        assert PunktBoundaryStrategy().segment("Just one sentence") == ["Just one sentence"]

    def test_bundled_language(self):
        strategy = PunktBoundaryStrategy()
        assert strategy.language == "english"
        assert "dr" in strategy.language_data["abbreviations"]

    def test_custom_language_data(self):
        """Test that a custom abbreviation list changes segmentation."""
        strategy = PunktBoundaryStrategy({"language": "custom", "abbreviations": ["approx"]})
        fragments = strategy.segment("It costs approx. Ten dollars were paid.")
        assert len(fragments) == 1

    def test_from_file(self, tmp_path):
        data_file = tmp_path / "lang.json"
        data_file.write_text(json.dumps({"language": "test", "abbreviations": ["dr"]}), encoding="utf-8")

        strategy = PunktBoundaryStrategy.from_file(data_file)
        assert strategy.language == "test"

    def test_missing_file_raises(self, tmp_path):
        with pytest.raises(ConfigurationError, match="not found"):
            PunktBoundaryStrategy.from_file(tmp_path / "missing.json")

    def test_malformed_file_raises(self, tmp_path):
        data_file = tmp_path / "broken.json"
        data_file.write_text("{not json", encoding="utf-8")

        with pytest.raises(ConfigurationError, match="Invalid JSON"):
            PunktBoundaryStrategy.from_file(data_file)

    def test_missing_abbreviations_raises(self):
        with pytest.raises(ConfigurationError, match="abbreviations"):
            PunktBoundaryStrategy({"language": "empty"})

    def test_bad_collocations_raise(self):
        with pytest.raises(ConfigurationError, match="collocations"):
            PunktBoundaryStrategy({"abbreviations": [], "collocations": [["only-one"]]})


class TestCreateBoundaryStrategy:
    """Tests for the boundary strategy factory."""

    def test_default_is_regex(self):
        assert isinstance(create_boundary_strategy(), RegexBoundaryStrategy)

    def test_regex_with_pattern(self):
        strategy = create_boundary_strategy("regex", r"!\s*")
        assert strategy.pattern == r"!\s*"

    def test_punkt(self):
        assert isinstance(create_boundary_strategy("punkt"), PunktBoundaryStrategy)

    def test_unknown_name_raises(self):
        with pytest.raises(ConfigurationError, match="Unknown boundary strategy"):
            create_boundary_strategy("spacy")
