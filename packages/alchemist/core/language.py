"""A constructed language: inventory, word synthesis, lexicon and grammar."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from alchemist.core.grammar import Grammar
from alchemist.core.lexicon import Lexicon
from alchemist.core.synthesis import SynthesisConfig

DEFAULT_LANGUAGE_NAME = "New Language"


class Language(BaseModel):
    """One language in the workspace.

    Attributes:
        name: Display name.
        lexicon: Native to conlang word mapping.
        synthesis: Graphemes, syllable rules and word-length weights.
        grammar: Ordered rewrite rules.
    """

    model_config = ConfigDict(extra="forbid")

    name: str = DEFAULT_LANGUAGE_NAME
    lexicon: Lexicon = Field(default_factory=Lexicon)
    synthesis: SynthesisConfig = Field(default_factory=SynthesisConfig)
    grammar: Grammar = Field(default_factory=Grammar)

    def validation_errors(self) -> list[str]:
        """Every visible problem with the language, synthesis first."""
        errors = self.synthesis.validation_errors()
        errors.extend(self.grammar.validation_errors())
        return errors

    def is_valid(self) -> bool:
        return not self.validation_errors()


__all__ = [
    "DEFAULT_LANGUAGE_NAME",
    "Language",
]
