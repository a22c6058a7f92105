"""Pattern types for grammar rule elements.

A pattern type classifies one element of a find pattern: a phrase of some
PhraseType, a word of some WordType, or an exact literal word. Pattern
types are frozen value objects so they can take part in the structural
identity used for label disambiguation.
"""

from __future__ import annotations

from collections.abc import Callable
from functools import partial
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field

from alchemist.core.vocabulary import PhraseType, WordType

DEFAULT_LITERAL = "word"
EXACT_WORD = "Exact Word"


class PhrasePattern(BaseModel):
    """Matches a phrase constituent."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    kind: Literal["phrase"] = "phrase"
    phrase: PhraseType

    @property
    def abbreviation(self) -> str:
        return self.phrase.short_name

    @property
    def full_name(self) -> str:
        return self.phrase.full_name


class WordPattern(BaseModel):
    """Matches a word constituent."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    kind: Literal["word"] = "word"
    word: WordType

    @property
    def abbreviation(self) -> str:
        return self.word.short_name

    @property
    def full_name(self) -> str:
        return self.word.full_name


class LiteralPattern(BaseModel):
    """Matches one exact word."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    kind: Literal["literal"] = "literal"
    text: str = DEFAULT_LITERAL

    @property
    def abbreviation(self) -> str:
        return f'"{self.text}"'

    @property
    def full_name(self) -> str:
        return EXACT_WORD


PatternType = Annotated[
    PhrasePattern | WordPattern | LiteralPattern,
    Field(discriminator="kind"),
]


def _build_choices() -> tuple[tuple[str, Callable[[], PatternType]], ...]:
    phrases = [(p.full_name, partial(PhrasePattern, phrase=p)) for p in PhraseType]
    words = [(w.full_name, partial(WordPattern, word=w)) for w in WordType]
    return (*phrases, *words, (EXACT_WORD, LiteralPattern))


# Find-pattern picker: phrase types, then word types, then an exact word.
FIND_PATTERN_CHOICES = _build_choices()


def pattern_from_choice(name: str) -> PatternType:
    """Construct a pattern type from its picker name.

    Raises:
        KeyError: If ``name`` is not a picker entry
    """
    for choice, factory in FIND_PATTERN_CHOICES:
        if choice == name:
            return factory()
    raise KeyError(f"Unknown pattern choice: {name!r}")


__all__ = [
    "DEFAULT_LITERAL",
    "EXACT_WORD",
    "FIND_PATTERN_CHOICES",
    "LiteralPattern",
    "PatternType",
    "PhrasePattern",
    "WordPattern",
    "pattern_from_choice",
]
