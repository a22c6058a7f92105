"""Tests for word-length weight vectors."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from alchemist.core.synthesis import MAX_SYLLABLES, WordLengthWeights, verify_weights
from alchemist.core.vocabulary import WordClass


class TestVerifyWeights:
    """Only an exact sum of 100 is valid."""

    @pytest.mark.parametrize(
        ("weights", "expected"),
        [
            ([100], True),
            ([40, 30, 30], True),
            ([0, 0, 100], True),
            ([40, 30, 20], False),
            ([60, 50], False),
            ([0], False),
            ([], False),
        ],
    )
    def test_sum(self, weights, expected):
        assert verify_weights(weights) is expected


class TestWordLengthWeights:
    """Tests for per-class weight editing and validation."""

    def test_defaults_are_invalid(self):
        """A fresh language cannot generate until weights are set."""
        weights = WordLengthWeights()
        assert weights.function == [0]
        assert weights.content == [0]
        assert not weights.is_valid()

    def test_validation_errors_name_columns(self):
        weights = WordLengthWeights(function=[100], content=[40, 20])
        assert weights.validation_errors() == [
            "Each column should add up to 100%",
            'The column "Content Words" adds up to 60%',
        ]

    def test_no_errors_when_valid(self):
        weights = WordLengthWeights(function=[100], content=[50, 50])
        assert weights.is_valid()
        assert weights.validation_errors() == []

    def test_resize_grows_with_zeros_and_truncates(self):
        weights = WordLengthWeights(function=[100], content=[50, 50])
        weights.resize(WordClass.CONTENT, 4)
        assert weights.content == [50, 50, 0, 0]
        weights.resize(WordClass.CONTENT, 1)
        assert weights.content == [50]
        assert weights.max_syllables(WordClass.CONTENT) == 1

    def test_resize_bounds(self):
        weights = WordLengthWeights()
        with pytest.raises(ValueError):
            weights.resize(WordClass.FUNCTION, 0)
        with pytest.raises(ValueError):
            weights.resize(WordClass.FUNCTION, MAX_SYLLABLES + 1)

    def test_set_weight(self):
        weights = WordLengthWeights(function=[0, 0])
        weights.set_weight(WordClass.FUNCTION, 2, 100)
        assert weights.function == [0, 100]
        assert weights.total(WordClass.FUNCTION) == 100

    def test_set_weight_errors(self):
        weights = WordLengthWeights(function=[0, 0])
        with pytest.raises(IndexError):
            weights.set_weight(WordClass.FUNCTION, 3, 10)
        with pytest.raises(ValueError):
            weights.set_weight(WordClass.FUNCTION, 1, 101)

    def test_percent_range_is_validated(self):
        with pytest.raises(ValidationError):
            WordLengthWeights(function=[120])
