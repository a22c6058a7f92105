"""Constituent vocabulary - word and phrase taxonomies for grammar rules.

Provides closed enums for the constituent types a grammar rule can match:

- **WordType**: Simplified parts of speech that work for arbitrary languages.
- **PhraseType**: Constituent types built from words and other phrases.

Each member carries a canonical full name (used in pickers) and a short
name (used in compact pattern labels such as ``"NM+ 2"``).
"""

from enum import Enum


class WordType(str, Enum):
    """A word type, roughly analogous to a part of speech.

    Attributes:
        ADPOSITION: Prepositions and postpositions.
        CONJUNCTION: Coordinating and subordinating conjunctions.
        DETERMINER: Articles, demonstratives, quantifiers.
        NOUN: Nouns.
        NOUN_MODIFIER: Adjectives and other noun modifiers.
        PRONOUN: Pronouns.
        VERB: Verbs.
        VERB_MODIFIER: Adverbs and other verb modifiers.
    """

    ADPOSITION = "Adposition"
    CONJUNCTION = "Conjunction"
    DETERMINER = "Determiner"
    NOUN = "Noun"
    NOUN_MODIFIER = "NounModifier"
    PRONOUN = "Pronoun"
    VERB = "Verb"
    VERB_MODIFIER = "VerbModifier"

    @property
    def full_name(self) -> str:
        """Human-readable name, e.g. ``"Noun Modifier"``."""
        return _WORD_FULL_NAMES[self]

    @property
    def short_name(self) -> str:
        """Abbreviated name used in pattern labels, e.g. ``"NM"``."""
        return _WORD_SHORT_NAMES[self]


class PhraseType(str, Enum):
    """A phrase type, roughly analogous to a constituent type in syntax.

    Attributes:
        ACTION: Verb-headed phrase.
        ARGUMENT: Noun-headed phrase filling an argument slot.
        CLAUSE: Complete clause.
        RELATION: Adposition-headed phrase.
    """

    ACTION = "Action"
    ARGUMENT = "Argument"
    CLAUSE = "Clause"
    RELATION = "Relation"

    @property
    def full_name(self) -> str:
        """Human-readable name, e.g. ``"Argument Phrase"``."""
        return f"{self.value} Phrase"

    @property
    def short_name(self) -> str:
        """Abbreviated name used in pattern labels, e.g. ``"Arg"``."""
        return _PHRASE_SHORT_NAMES[self]


_WORD_FULL_NAMES: dict[WordType, str] = {
    WordType.ADPOSITION: "Adposition",
    WordType.CONJUNCTION: "Conjunction",
    WordType.DETERMINER: "Determiner",
    WordType.NOUN: "Noun",
    WordType.NOUN_MODIFIER: "Noun Modifier",
    WordType.PRONOUN: "Pronoun",
    WordType.VERB: "Verb",
    WordType.VERB_MODIFIER: "Verb Modifier",
}

_WORD_SHORT_NAMES: dict[WordType, str] = {
    WordType.ADPOSITION: "Adp",
    WordType.CONJUNCTION: "Conj",
    WordType.DETERMINER: "Det",
    WordType.NOUN: "Noun",
    WordType.NOUN_MODIFIER: "NM",
    WordType.PRONOUN: "Pro",
    WordType.VERB: "Verb",
    WordType.VERB_MODIFIER: "VM",
}

_PHRASE_SHORT_NAMES: dict[PhraseType, str] = {
    PhraseType.ACTION: "Action",
    PhraseType.ARGUMENT: "Arg",
    PhraseType.CLAUSE: "Clause",
    PhraseType.RELATION: "Rel",
}


__all__ = [
    "PhraseType",
    "WordType",
]
