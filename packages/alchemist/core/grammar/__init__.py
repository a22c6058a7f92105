"""Grammar rules - find/replace patterns over sentence constituents."""

from alchemist.core.grammar.arena import PatternArena, PatternHandle
from alchemist.core.grammar.book import Grammar
from alchemist.core.grammar.labels import LabelCounter, count_identities, modifier_suffix, recompute_labels
from alchemist.core.grammar.models import (
    NOT_SET,
    CaptureReplace,
    FindPattern,
    GrammarRule,
    LiteralReplace,
    PatternIdentity,
    PatternNotFoundError,
    ReplacePattern,
)
from alchemist.core.grammar.patterns import (
    DEFAULT_LITERAL,
    EXACT_WORD,
    FIND_PATTERN_CHOICES,
    LiteralPattern,
    PatternType,
    PhrasePattern,
    WordPattern,
    pattern_from_choice,
)
from alchemist.core.grammar.serialization import prepare_for_save, resolve_after_load

__all__ = [
    # Pattern types
    "DEFAULT_LITERAL",
    "EXACT_WORD",
    "FIND_PATTERN_CHOICES",
    "LiteralPattern",
    "PatternType",
    "PhrasePattern",
    "WordPattern",
    "pattern_from_choice",
    # Rules
    "NOT_SET",
    "CaptureReplace",
    "FindPattern",
    "Grammar",
    "GrammarRule",
    "LiteralReplace",
    "PatternIdentity",
    "PatternNotFoundError",
    "ReplacePattern",
    # References and labels
    "LabelCounter",
    "PatternArena",
    "PatternHandle",
    "count_identities",
    "modifier_suffix",
    "recompute_labels",
    # Persistence
    "prepare_for_save",
    "resolve_after_load",
]
