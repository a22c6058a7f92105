"""Tests for grapheme containers and input parsing."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from alchemist.core.graphemes import (
    EMPTY_INVENTORY_ERROR,
    GraphemeList,
    GraphemeSet,
    GraphemeStorage,
    consume_input,
    invalid_graphemes,
    inventory_errors,
    is_linked_valid,
)


class TestGraphemeSet:
    """Tests for the ordered-unique container."""

    def test_constructor_sorts_and_dedupes(self):
        """Input order and duplicates do not survive construction."""
        inventory = GraphemeSet(["sh", "a", "k", "a"])
        assert list(inventory) == ["a", "k", "sh"]

    def test_add_is_idempotent(self):
        """Adding an existing grapheme changes nothing."""
        inventory = GraphemeSet(["a"])
        inventory.add("b")
        inventory.add("a")
        inventory.add("b")
        assert list(inventory) == ["a", "b"]
        assert len(inventory) == 2

    def test_add_keeps_sorted_order(self):
        """New graphemes are inserted at their sorted position."""
        inventory = GraphemeSet(["a", "t"])
        inventory.add("k")
        assert list(inventory) == ["a", "k", "t"]

    def test_contains(self):
        """Membership works through both the method and the operator."""
        inventory = GraphemeSet.of(["ch", "a"])
        assert inventory.contains("ch")
        assert "a" in inventory
        assert "c" not in inventory
        assert 3 not in inventory

    def test_retain_if(self):
        """Entries failing the predicate are removed."""
        inventory = GraphemeSet(["a", "b", "c"])
        inventory.retain_if(lambda g: g != "b")
        assert list(inventory) == ["a", "c"]

    def test_str(self):
        """Sets render in braces."""
        assert str(GraphemeSet(["b", "a"])) == "{ a b }"
        assert str(GraphemeSet()) == "{ }"

    def test_serializes_as_plain_list(self):
        """The persisted form is a JSON array."""
        assert GraphemeSet(["b", "a"]).model_dump() == ["a", "b"]

    def test_rejects_whitespace_graphemes(self):
        """Graphemes cannot contain whitespace or be empty."""
        with pytest.raises(ValidationError):
            GraphemeSet(["a b"])
        with pytest.raises(ValidationError):
            GraphemeSet([""])

    def test_add_rejects_what_the_constructor_rejects(self):
        inventory = GraphemeSet(["a"])
        with pytest.raises(ValidationError):
            inventory.add("a b")
        with pytest.raises(ValidationError):
            inventory.add("")
        assert list(inventory) == ["a"]


class TestGraphemeList:
    """Tests for the ordered append-list."""

    def test_keeps_duplicates_in_order(self):
        """Literal strings may repeat graphemes."""
        word = GraphemeList(["p", "a"])
        word.add("p")
        word.add("a")
        assert list(word) == ["p", "a", "p", "a"]

    def test_add_validates_graphemes(self):
        word = GraphemeList(["k"])
        with pytest.raises(ValidationError):
            word.add(" ")
        assert list(word) == ["k"]

    def test_is_empty(self):
        assert GraphemeList().is_empty()
        assert not GraphemeList(["a"]).is_empty()

    def test_str(self):
        assert str(GraphemeList(["k", "a"])) == "k a"

    def test_satisfies_storage_protocol(self):
        """Both containers implement the storage interface."""
        assert isinstance(GraphemeList(), GraphemeStorage)
        assert isinstance(GraphemeSet(), GraphemeStorage)


class TestConsumeInput:
    """Tests for whitespace-terminated grapheme entry."""

    def test_terminated_tokens_are_consumed(self):
        """Each whitespace-terminated token is added; the tail stays buffered."""
        inventory = GraphemeSet()
        remainder = consume_input(inventory, "a sh  k")
        assert list(inventory) == ["a", "sh"]
        assert remainder == "k"

    def test_trailing_space_consumes_everything(self):
        inventory = GraphemeSet()
        assert consume_input(inventory, "a b ") == ""
        assert list(inventory) == ["a", "b"]

    def test_whitespace_runs_make_no_empty_graphemes(self):
        """Spaces, tabs and newlines never produce empty entries."""
        word = GraphemeList()
        consume_input(word, "  \t a \n\n b  ")
        assert list(word) == ["a", "b"]

    def test_commit_flushes_tail(self):
        """Losing focus adds the partial token as well."""
        word = GraphemeList()
        assert consume_input(word, "k a t", commit=True) == ""
        assert list(word) == ["k", "a", "t"]

    def test_empty_buffer(self):
        word = GraphemeList()
        assert consume_input(word, "") == ""
        assert consume_input(word, "", commit=True) == ""
        assert word.is_empty()


class TestInventoryLinking:
    """Tests for validity relative to the master inventory."""

    def test_is_linked_valid(self):
        master = GraphemeSet(["a"])
        assert is_linked_valid("a", master)
        assert not is_linked_valid("b", master)
        assert is_linked_valid("b", None)

    def test_invalid_graphemes_are_reported_not_removed(self):
        master = GraphemeSet(["a", "k"])
        word = GraphemeList(["k", "x", "a", "x"])
        assert invalid_graphemes(word, master) == ["x", "x"]
        assert list(word) == ["k", "x", "a", "x"]

    def test_inventory_errors(self):
        assert inventory_errors(GraphemeSet()) == [EMPTY_INVENTORY_ERROR]
        assert inventory_errors(GraphemeSet(["a"])) == []
