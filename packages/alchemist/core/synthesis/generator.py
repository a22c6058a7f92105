"""Stochastic word synthesis from the syllable grammar.

Generation never fails on a malformed grammar: undefined variables,
empty sets, blanks and placeholders contribute nothing, so half-written
grammars stay explorable. The one precondition is the word-length weight
vector, which callers validate with :func:`verify_weights` first.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

import numpy as np

from alchemist.core.synthesis.rules import OrRule, SequenceLeaf, SetLeaf, VariableLeaf
from alchemist.core.synthesis.variables import SyllableVars

logger = logging.getLogger(__name__)

DEFAULT_MAX_EXPANSION_DEPTH = 64
DEFAULT_MAX_EXPANSIONS = 4096


@dataclass
class ExpansionBudget:
    """Variable expansions left for one morpheme.

    Shared across every syllable of the word so branching self-references
    (``X -> a X X``) stay bounded in total, not just in depth.
    """

    remaining: int = DEFAULT_MAX_EXPANSIONS
    exhausted: bool = False

    def take(self, name: str) -> bool:
        """Spend one expansion; False (warning once) when none are left."""
        if self.remaining > 0:
            self.remaining -= 1
            return True
        if not self.exhausted:
            self.exhausted = True
            logger.warning("Expansion budget exhausted at variable %r; emitting nothing more", name)
        return False


def synthesize_morpheme(
    vars: SyllableVars,
    weights: Sequence[int],
    rng: np.random.Generator | None = None,
    max_depth: int = DEFAULT_MAX_EXPANSION_DEPTH,
    max_expansions: int = DEFAULT_MAX_EXPANSIONS,
) -> str:
    """Generate a new morpheme.

    The syllable count ``n`` is drawn from ``weights`` (index ``i`` is the
    percentage for ``i + 1`` syllables). One syllable comes from the single
    root; otherwise initial, ``n - 2`` middles, then terminal.

    Args:
        vars: Syllable grammar
        weights: Word-length percentages; must sum to 100
        rng: Random generator. A freshly seeded one is used per call when
             omitted, so concurrent callers never share state.
        max_depth: Variable expansion depth beyond which nothing is emitted
        max_expansions: Total variable expansions allowed for the whole word

    Returns:
        The generated word (possibly empty)

    Raises:
        ValueError: If ``weights`` is empty or does not sum to 100
    """
    rng = rng if rng is not None else np.random.default_rng()
    probabilities = np.asarray(weights, dtype=float) / 100.0
    num_syllables = 1 + int(rng.choice(len(probabilities), p=probabilities))

    output: list[str] = []
    budget = ExpansionBudget(remaining=max_expansions)
    roots = vars.roots
    if num_syllables == 1:
        synthesize_syllable(roots.single, vars, output, rng, max_depth=max_depth, budget=budget)
    else:
        synthesize_syllable(roots.initial, vars, output, rng, max_depth=max_depth, budget=budget)
        for _ in range(num_syllables - 2):
            synthesize_syllable(roots.middle, vars, output, rng, max_depth=max_depth, budget=budget)
        synthesize_syllable(roots.terminal, vars, output, rng, max_depth=max_depth, budget=budget)
    return "".join(output)


def synthesize_syllable(
    rule: OrRule,
    vars: SyllableVars,
    output: list[str],
    rng: np.random.Generator,
    *,
    depth: int = 0,
    max_depth: int = DEFAULT_MAX_EXPANSION_DEPTH,
    budget: ExpansionBudget | None = None,
) -> None:
    """Expand ``rule`` once and append the graphemes to ``output``."""
    budget = budget if budget is not None else ExpansionBudget()
    alternatives = rule.alternatives
    and_rule = alternatives[int(rng.integers(len(alternatives)))]
    for leaf in and_rule.leaves:
        if isinstance(leaf, SequenceLeaf):
            output.extend(leaf.graphemes)
        elif isinstance(leaf, SetLeaf):
            if not leaf.graphemes.is_empty():
                output.append(leaf.graphemes[int(rng.integers(len(leaf.graphemes)))])
        elif isinstance(leaf, VariableLeaf):
            target = vars.get(leaf.name)
            if target is None:
                continue
            if depth >= max_depth:
                logger.warning(
                    "Variable %r exceeds expansion depth %d; emitting nothing", leaf.name, max_depth
                )
                continue
            if not budget.take(leaf.name):
                return
            synthesize_syllable(
                target, vars, output, rng, depth=depth + 1, max_depth=max_depth, budget=budget
            )


__all__ = [
    "DEFAULT_MAX_EXPANSIONS",
    "DEFAULT_MAX_EXPANSION_DEPTH",
    "ExpansionBudget",
    "synthesize_morpheme",
    "synthesize_syllable",
]
