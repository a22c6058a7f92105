"""Tests for deterministic find-pattern labels."""

from __future__ import annotations

from alchemist.core.grammar import (
    GrammarRule,
    LiteralPattern,
    PhrasePattern,
    WordPattern,
    modifier_suffix,
)
from alchemist.core.vocabulary import PhraseType, WordType

NOUN = WordPattern(word=WordType.NOUN)
VERB = WordPattern(word=WordType.VERB)
ARG = PhrasePattern(phrase=PhraseType.ARGUMENT)


def _short_labels(rule: GrammarRule) -> list[str]:
    return [node.short_label for node in rule.iter_patterns()]


class TestModifierSuffix:
    def test_suffixes(self):
        assert modifier_suffix(False, False) == ""
        assert modifier_suffix(True, False) == "+"
        assert modifier_suffix(False, True) == "?"
        assert modifier_suffix(True, True) == "*"


class TestLabels:
    """Label numbering and rendering."""

    def test_unique_identities_get_no_numbers(self):
        rule = GrammarRule()
        rule.insert_find_pattern(NOUN)
        rule.insert_find_pattern(VERB)
        assert _short_labels(rule) == ["Noun", "Verb"]

    def test_duplicates_numbered_in_order(self):
        rule = GrammarRule()
        rule.insert_find_pattern(NOUN)
        rule.insert_find_pattern(VERB)
        rule.insert_find_pattern(NOUN)
        assert _short_labels(rule) == ["Noun 1", "Verb", "Noun 2"]

    def test_modifiers_split_identity_classes(self):
        rule = GrammarRule()
        first = rule.insert_find_pattern(NOUN)
        rule.insert_find_pattern(NOUN)
        rule.set_modifiers(first, multimatch=True, optional=True)
        assert _short_labels(rule) == ["Noun*", "Noun"]

    def test_numbering_spans_nested_children(self):
        """Pre-order over the whole forest: parent, its children, next root."""
        rule = GrammarRule()
        arg = rule.insert_find_pattern(ARG)
        rule.add_deep_match(arg, NOUN)
        rule.add_deep_match(arg, NOUN)
        rule.insert_find_pattern(NOUN)
        assert _short_labels(rule) == ["Arg", "Noun 1", "Noun 2", "Noun 3"]
        assert [node.label for node in rule.find_patterns] == ["Arg { Noun 1 Noun 2 }", "Noun 3"]

    def test_full_label_nests(self):
        rule = GrammarRule()
        arg = rule.insert_find_pattern(ARG)
        inner = rule.add_deep_match(arg, ARG)
        rule.add_deep_match(inner, VERB)
        rule.toggle_optional(inner)
        assert rule.find_patterns[0].label == "Arg { Arg? { Verb } }"

    def test_literals_number_by_text(self):
        rule = GrammarRule()
        rule.insert_find_pattern(LiteralPattern())
        rule.insert_find_pattern(LiteralPattern())
        rule.insert_find_pattern(LiteralPattern(text="the"))
        assert _short_labels(rule) == ['"word" 1', '"word" 2', '"the"']

    def test_labels_are_deterministic(self):
        """Recomputing without structural change yields identical labels."""
        rule = GrammarRule()
        arg = rule.insert_find_pattern(ARG)
        rule.add_deep_match(arg, NOUN)
        rule.insert_find_pattern(NOUN)
        before = [(n.short_label, n.label) for n in rule.iter_patterns()]
        rule.recompute_labels()
        rule.recompute_labels()
        assert [(n.short_label, n.label) for n in rule.iter_patterns()] == before

    def test_short_labels_unique_within_rule(self):
        rule = GrammarRule()
        for pattern in (NOUN, NOUN, VERB, NOUN, ARG, ARG):
            rule.insert_find_pattern(pattern)
        labels = _short_labels(rule)
        assert len(labels) == len(set(labels))

    def test_labels_follow_reorder(self):
        rule = GrammarRule()
        rule.insert_find_pattern(NOUN)
        second = rule.insert_find_pattern(NOUN)
        rule.move_find_pattern(second, 0)
        assert rule.get(second).short_label == "Noun 1"

    def test_labels_follow_literal_edit(self):
        rule = GrammarRule()
        first = rule.insert_find_pattern(LiteralPattern())
        rule.insert_find_pattern(LiteralPattern())
        rule.set_literal_text(first, "a")
        assert _short_labels(rule) == ['"a"', '"word"']
