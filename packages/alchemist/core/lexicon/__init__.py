"""Lexicon - native phrase to conlang phrase mapping."""

from alchemist.core.lexicon.models import EntryExistsError, Lexicon, SearchMode

__all__ = [
    "EntryExistsError",
    "Lexicon",
    "SearchMode",
]
