"""Word-length distributions.

Word length is measured in syllables. Each word class has its own weight
vector where entry ``i`` is the percentage chance of generating a word
with ``i + 1`` syllables. A vector is usable for generation only when it
sums to exactly 100.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field

from alchemist.core.vocabulary import WordClass

MAX_SYLLABLES = 100

Percent = Annotated[int, Field(ge=0, le=100)]


def verify_weights(weights: Sequence[int]) -> bool:
    """Return True if the weights sum to exactly 100.

    Example:
        >>> verify_weights([40, 30, 30])
        True
        >>> verify_weights([40, 30, 20])
        False
    """
    return sum(weights) == 100


class WordLengthWeights(BaseModel):
    """Syllable-count weights for function words and content words.

    The vector length is the maximum syllable count for that class.
    """

    model_config = ConfigDict(extra="forbid")

    function: list[Percent] = Field(default_factory=lambda: [0], min_length=1, max_length=MAX_SYLLABLES)
    content: list[Percent] = Field(default_factory=lambda: [0], min_length=1, max_length=MAX_SYLLABLES)

    def for_class(self, word_class: WordClass) -> list[int]:
        return self.function if word_class is WordClass.FUNCTION else self.content

    def max_syllables(self, word_class: WordClass) -> int:
        return len(self.for_class(word_class))

    def resize(self, word_class: WordClass, max_syllables: int) -> None:
        """Grow with zero weights or truncate to ``max_syllables`` entries.

        Raises:
            ValueError: If ``max_syllables`` is outside 1-100
        """
        if not 1 <= max_syllables <= MAX_SYLLABLES:
            raise ValueError(f"max_syllables must be 1-{MAX_SYLLABLES}, got {max_syllables}")
        weights = self.for_class(word_class)
        del weights[max_syllables:]
        weights.extend([0] * (max_syllables - len(weights)))

    def set_weight(self, word_class: WordClass, syllables: int, percent: int) -> None:
        """Set the weight for words of ``syllables`` syllables.

        Raises:
            IndexError: If ``syllables`` exceeds the current maximum
            ValueError: If ``percent`` is outside 0-100
        """
        if not 0 <= percent <= 100:
            raise ValueError(f"Weight must be 0-100, got {percent}")
        weights = self.for_class(word_class)
        if not 1 <= syllables <= len(weights):
            raise IndexError(f"No weight for {syllables} syllables (max {len(weights)})")
        weights[syllables - 1] = percent

    def total(self, word_class: WordClass) -> int:
        return sum(self.for_class(word_class))

    def is_valid(self) -> bool:
        """True iff both vectors individually sum to 100."""
        return verify_weights(self.function) and verify_weights(self.content)

    def validation_errors(self) -> list[str]:
        """Human-readable messages for every column that does not sum to 100."""
        errors = [
            f'The column "{word_class.column_name}" adds up to {self.total(word_class)}%'
            for word_class in WordClass
            if not verify_weights(self.for_class(word_class))
        ]
        if errors:
            errors.insert(0, "Each column should add up to 100%")
        return errors


__all__ = [
    "MAX_SYLLABLES",
    "WordLengthWeights",
    "verify_weights",
]
