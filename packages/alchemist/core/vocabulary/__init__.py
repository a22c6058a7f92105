"""Alchemist vocabulary - controlled enums for the grammar rule system."""

from alchemist.core.vocabulary.constituents import PhraseType, WordType
from alchemist.core.vocabulary.word_class import WordClass

__all__ = [
    "PhraseType",
    "WordClass",
    "WordType",
]
