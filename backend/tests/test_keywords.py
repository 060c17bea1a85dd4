"""Unit tests for theme keyword extraction."""

import pytest

from app.services.discovery.config import KEYWORDS
from app.services.discovery.keywords import extract_keywords


class TestExtractKeywords:
    """Tests for extract_keywords."""

    def test_roman_engineering_theme(self):
        """Should drop stop words and keep the first five terms in order."""
        result = extract_keywords("The Wonders of Ancient Rome and Roman Engineering")
        assert result == ["wonders", "ancient", "rome", "roman", "engineering"]

    def test_truncates_to_five(self):
        result = extract_keywords("alpha bravo charlie delta echoes foxtrot golf")
        assert result == ["alpha", "bravo", "charlie", "delta", "echoes"]

    def test_short_tokens_dropped(self):
        """Tokens of length three or less never survive."""
        assert extract_keywords("sun sea sky ocean") == ["ocean"]

    def test_empty_input(self):
        assert extract_keywords("") == []
        assert extract_keywords("   ") == []

    def test_lowercases(self):
        assert extract_keywords("VOLCANOES Erupting") == ["volcanoes", "erupting"]

    def test_splits_on_any_whitespace(self):
        assert extract_keywords("space\tflight\nrockets") == ["space", "flight", "rockets"]

    @pytest.mark.parametrize("theme", [
        "The Wonders of Ancient Rome and Roman Engineering",
        "a an the of in to and",
        "Plants, Pollinators & the Garden Food Web",
        "x",
    ])
    def test_properties_hold(self, theme):
        """At most five lowercase, non-stop, longer-than-three terms in source order."""
        result = extract_keywords(theme)
        assert len(result) <= KEYWORDS.max_keywords
        for word in result:
            assert word == word.lower()
            assert len(word) > 3
            assert word not in KEYWORDS.stop_words
        tokens = theme.lower().split()
        positions = [tokens.index(w) for w in result]
        assert positions == sorted(positions)
