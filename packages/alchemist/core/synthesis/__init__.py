"""Syllable synthesis - generative grammar over graphemes.

Example:
    >>> from alchemist.core.synthesis import OrRule, SequenceLeaf, SyllableVars
    >>> from alchemist.core.graphemes import GraphemeList
    >>> vars = SyllableVars()
    >>> vars.roots.single = OrRule.of(SequenceLeaf(graphemes=GraphemeList(["k", "a", "t"])))
    >>> synthesize_morpheme(vars, [100])
    'kat'
"""

from alchemist.core.synthesis.generator import (
    DEFAULT_MAX_EXPANSION_DEPTH,
    DEFAULT_MAX_EXPANSIONS,
    ExpansionBudget,
    synthesize_morpheme,
    synthesize_syllable,
)
from alchemist.core.synthesis.models import (
    BLANK_WORD,
    INVALID_WEIGHTS_ERROR,
    SynthesisConfig,
    SynthesisConfigError,
    is_config_valid,
)
from alchemist.core.synthesis.reachability import (
    UNREACHABLE_WARNING,
    flag_reachable_vars,
    prune_unreachable_vars,
)
from alchemist.core.synthesis.rules import (
    LEAF_RULE_CHOICES,
    AndRule,
    BlankLeaf,
    LeafRule,
    OrRule,
    SequenceLeaf,
    SetLeaf,
    UninitializedLeaf,
    VariableLeaf,
    leaf_from_choice,
)
from alchemist.core.synthesis.variables import ROOT_NAMES, SyllableRoots, SyllableVars
from alchemist.core.synthesis.weights import MAX_SYLLABLES, WordLengthWeights, verify_weights

__all__ = [
    # Rules
    "LEAF_RULE_CHOICES",
    "AndRule",
    "BlankLeaf",
    "LeafRule",
    "OrRule",
    "SequenceLeaf",
    "SetLeaf",
    "UninitializedLeaf",
    "VariableLeaf",
    "leaf_from_choice",
    # Variables
    "ROOT_NAMES",
    "SyllableRoots",
    "SyllableVars",
    # Reachability
    "UNREACHABLE_WARNING",
    "flag_reachable_vars",
    "prune_unreachable_vars",
    # Weights
    "MAX_SYLLABLES",
    "WordLengthWeights",
    "verify_weights",
    # Generation
    "DEFAULT_MAX_EXPANSION_DEPTH",
    "DEFAULT_MAX_EXPANSIONS",
    "ExpansionBudget",
    "synthesize_morpheme",
    "synthesize_syllable",
    # Configuration
    "BLANK_WORD",
    "INVALID_WEIGHTS_ERROR",
    "SynthesisConfig",
    "SynthesisConfigError",
    "is_config_valid",
]
