"""Word class vocabulary for word-length distributions."""

from enum import Enum


class WordClass(str, Enum):
    """Broad word class selecting a word-length distribution.

    Function words (conjunctions, determiners, etc.) are usually shorter
    than content words, so each class has its own syllable-count weights.

    Attributes:
        FUNCTION: Closed-class grammatical words.
        CONTENT: Open-class lexical words.
    """

    FUNCTION = "function"
    CONTENT = "content"

    @property
    def column_name(self) -> str:
        """Column heading used in validation messages."""
        return f"{self.value.capitalize()} Words"


__all__ = ["WordClass"]
