"""Tests for Leaf/And/Or syllable rule models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from alchemist.core.graphemes import GraphemeList, GraphemeSet
from alchemist.core.synthesis import (
    LEAF_RULE_CHOICES,
    AndRule,
    BlankLeaf,
    OrRule,
    SequenceLeaf,
    SetLeaf,
    UninitializedLeaf,
    VariableLeaf,
    leaf_from_choice,
)


class TestDefaults:
    """New rules hold a single placeholder."""

    def test_new_or_rule_is_uninitialized(self):
        rule = OrRule()
        assert len(rule) == 1
        assert len(rule.head) == 1
        assert isinstance(rule.head.head, UninitializedLeaf)
        assert not rule.is_initialized

    def test_empty_lists_rejected(self):
        """Both levels must stay non-empty."""
        with pytest.raises(ValidationError):
            OrRule(alternatives=[])
        with pytest.raises(ValidationError):
            AndRule(leaves=[])


class TestEditing:
    """Tests for leaf and alternative editing."""

    def test_replace_placeholder_initializes(self):
        rule = OrRule()
        rule.head.replace(0, BlankLeaf())
        assert rule.is_initialized

    def test_add_alternative(self):
        rule = OrRule.of(BlankLeaf())
        rule.add_alternative(VariableLeaf(name="V"))
        assert len(rule) == 2
        assert rule.describe() == "blank OR V"

    def test_remove_leaf_drops_empty_alternative(self):
        rule = OrRule.of(BlankLeaf())
        rule.add_alternative(VariableLeaf(name="V"))
        assert rule.remove_leaf(0, 0)
        assert len(rule) == 1
        assert isinstance(rule.head.head, VariableLeaf)

    def test_remove_last_leaf_resets_to_placeholder(self):
        rule = OrRule.of(BlankLeaf())
        assert rule.remove_leaf(0, 0)
        assert len(rule) == 1
        assert not rule.is_initialized

    def test_placeholder_cannot_be_removed(self):
        rule = OrRule()
        assert not rule.remove_leaf(0, 0)
        assert len(rule.head) == 1

    def test_iter_leaves_spans_alternatives(self):
        rule = OrRule.of(BlankLeaf(), VariableLeaf(name="A"))
        rule.add_alternative(VariableLeaf(name="B"))
        assert [leaf.kind for leaf in rule.iter_leaves()] == ["blank", "variable", "variable"]


class TestLeafChoices:
    """Tests for the leaf menu."""

    def test_menu_order(self):
        assert [name for name, _ in LEAF_RULE_CHOICES] == ["String", "Random", "Variable", "Blank"]

    def test_leaf_from_choice(self):
        assert isinstance(leaf_from_choice("String"), SequenceLeaf)
        assert isinstance(leaf_from_choice("Random"), SetLeaf)
        assert isinstance(leaf_from_choice("Variable"), VariableLeaf)
        assert isinstance(leaf_from_choice("Blank"), BlankLeaf)

    def test_unknown_choice(self):
        with pytest.raises(KeyError):
            leaf_from_choice("Nope")


class TestSerialization:
    """Leaves persist with a ``kind`` tag."""

    def test_round_trip_through_dict(self):
        rule = OrRule.of(
            SequenceLeaf(graphemes=GraphemeList(["k", "a"])),
            SetLeaf(graphemes=GraphemeSet(["i", "e"])),
            VariableLeaf(name="Coda"),
        )
        data = rule.model_dump(mode="json")
        assert data["alternatives"][0]["leaves"][1] == {"kind": "set", "graphemes": ["e", "i"]}
        assert OrRule.model_validate(data) == rule
