"""Synthesis configuration for one language.

Bundles the graphemic inventory, the syllable grammar and the word-length
distributions, and gates generation on the weights being valid.
"""

from __future__ import annotations

import logging

import numpy as np
from pydantic import BaseModel, ConfigDict, Field

from alchemist.core.graphemes import (
    NOT_IN_INVENTORY,
    MasterGraphemeStorage,
    invalid_graphemes,
    inventory_errors,
)
from alchemist.core.synthesis.generator import DEFAULT_MAX_EXPANSION_DEPTH, synthesize_morpheme
from alchemist.core.synthesis.reachability import UNREACHABLE_WARNING
from alchemist.core.synthesis.rules import SequenceLeaf, SetLeaf
from alchemist.core.synthesis.variables import SyllableVars
from alchemist.core.synthesis.weights import WordLengthWeights, verify_weights
from alchemist.core.vocabulary import WordClass

logger = logging.getLogger(__name__)

BLANK_WORD = "(blank)"
INVALID_WEIGHTS_ERROR = "The word length probabilities do not add up to 100%"


class SynthesisConfigError(ValueError):
    """Raised when generation is requested from an invalid configuration."""


class SynthesisConfig(BaseModel):
    """Everything needed to mint new words for a language.

    Attributes:
        graphemes: Master graphemic inventory.
        syllable_vars: Root rules and named variables.
        word_lengths: Syllable-count weights per word class.
    """

    model_config = ConfigDict(extra="forbid")

    graphemes: MasterGraphemeStorage = Field(default_factory=MasterGraphemeStorage)
    syllable_vars: SyllableVars = Field(default_factory=SyllableVars)
    word_lengths: WordLengthWeights = Field(default_factory=WordLengthWeights)

    def can_generate(self, word_class: WordClass) -> bool:
        return verify_weights(self.word_lengths.for_class(word_class))

    def synthesize(
        self,
        word_class: WordClass = WordClass.CONTENT,
        rng: np.random.Generator | None = None,
        max_depth: int = DEFAULT_MAX_EXPANSION_DEPTH,
    ) -> str:
        """Mint one morpheme, refusing if the class weights are invalid.

        Raises:
            SynthesisConfigError: If the weights for ``word_class`` do not sum to 100
        """
        if not self.can_generate(word_class):
            raise SynthesisConfigError(INVALID_WEIGHTS_ERROR)
        return synthesize_morpheme(
            self.syllable_vars, self.word_lengths.for_class(word_class), rng, max_depth
        )

    def generate_samples(
        self,
        word_class: WordClass,
        count: int = 24,
        rng: np.random.Generator | None = None,
        max_depth: int = DEFAULT_MAX_EXPANSION_DEPTH,
    ) -> list[str]:
        """Generate sample words; empty words are shown as ``(blank)``.

        Raises:
            SynthesisConfigError: If the weights for ``word_class`` do not sum to 100
        """
        rng = rng if rng is not None else np.random.default_rng()
        samples = [self.synthesize(word_class, rng, max_depth) or BLANK_WORD for _ in range(count)]
        logger.debug("Generated %d %s word samples", count, word_class.value)
        return samples

    def unknown_graphemes(self) -> list[str]:
        """Graphemes used in rule leaves that are missing from the inventory."""
        unknown: list[str] = []
        for _, rule in self.syllable_vars.all_rules():
            for leaf in rule.iter_leaves():
                if isinstance(leaf, SequenceLeaf | SetLeaf):
                    for grapheme in invalid_graphemes(leaf.graphemes, self.graphemes):
                        if grapheme not in unknown:
                            unknown.append(grapheme)
        return unknown

    def validation_errors(self) -> list[str]:
        """Visible validity problems. Only weight errors block generation."""
        self.syllable_vars.refresh()
        errors = inventory_errors(self.graphemes)
        errors.extend(f"{grapheme}: {NOT_IN_INVENTORY}" for grapheme in self.unknown_graphemes())
        errors.extend(self.word_lengths.validation_errors())
        errors.extend(
            f"{name}: {UNREACHABLE_WARNING}" for name in self.syllable_vars.unreachable()
        )
        return errors


def is_config_valid(config: SynthesisConfig) -> bool:
    """Return True if both word-length vectors sum to 100."""
    return config.word_lengths.is_valid()


__all__ = [
    "BLANK_WORD",
    "INVALID_WEIGHTS_ERROR",
    "SynthesisConfig",
    "SynthesisConfigError",
    "is_config_valid",
]
