"""Tests for pattern types and the find-pattern picker."""

from __future__ import annotations

import pytest

from alchemist.core.grammar import (
    FIND_PATTERN_CHOICES,
    LiteralPattern,
    PhrasePattern,
    WordPattern,
    pattern_from_choice,
)
from alchemist.core.vocabulary import PhraseType, WordType


class TestAbbreviations:
    def test_word_and_phrase(self):
        assert WordPattern(word=WordType.NOUN_MODIFIER).abbreviation == "NM"
        assert PhrasePattern(phrase=PhraseType.ARGUMENT).abbreviation == "Arg"

    def test_literal_is_quoted(self):
        assert LiteralPattern().abbreviation == '"word"'
        assert LiteralPattern(text="the").abbreviation == '"the"'

    def test_pattern_types_are_hashable_values(self):
        """Equal patterns compare and hash equal."""
        assert WordPattern(word=WordType.VERB) == WordPattern(word=WordType.VERB)
        assert len({LiteralPattern(text="a"), LiteralPattern(text="a")}) == 1


class TestPicker:
    def test_menu_order(self):
        names = [name for name, _ in FIND_PATTERN_CHOICES]
        assert names[:4] == ["Action Phrase", "Argument Phrase", "Clause Phrase", "Relation Phrase"]
        assert names[4] == "Adposition"
        assert names[-1] == "Exact Word"
        assert len(names) == len(PhraseType) + len(WordType) + 1

    def test_pattern_from_choice(self):
        assert pattern_from_choice("Noun Modifier") == WordPattern(word=WordType.NOUN_MODIFIER)
        assert pattern_from_choice("Clause Phrase") == PhrasePattern(phrase=PhraseType.CLAUSE)
        assert pattern_from_choice("Exact Word") == LiteralPattern(text="word")

    def test_unknown_choice(self):
        with pytest.raises(KeyError):
            pattern_from_choice("Adjective")
