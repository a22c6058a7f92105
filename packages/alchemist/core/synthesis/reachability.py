"""Reachability analysis for syllable rule variables.

A variable is reachable when some chain of Variable leaves leads to it
from one of the four root rules. Unreachable variables are flagged to the
user; unreachable variables that were never given content are pruned so
abandoned names do not clutter the namespace.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from alchemist.core.synthesis.rules import OrRule, VariableLeaf

if TYPE_CHECKING:
    from alchemist.core.synthesis.variables import SyllableVars

logger = logging.getLogger(__name__)

UNREACHABLE_WARNING = "Not reachable from a start variable"


def flag_reachable_vars(vars: SyllableVars) -> set[str]:
    """Recompute ``vars.reachable`` with a DFS from every root rule.

    Each Variable leaf whose name is newly inserted into the reachable set
    pushes the named variable's rule onto the stack. Root names are never
    pushed since the roots are visited directly; undefined names are
    recorded but expand to nothing.

    Args:
        vars: Syllable grammar to analyse (mutated in place)

    Returns:
        The recomputed reachable set
    """
    reachable = vars.reachable
    reachable.clear()
    stack: list[OrRule] = list(vars.roots.rules())
    while stack:
        rule = stack.pop()
        for leaf in rule.iter_leaves():
            if not isinstance(leaf, VariableLeaf) or not leaf.name or leaf.name in reachable:
                continue
            reachable.add(leaf.name)
            if vars.is_root(leaf.name):
                continue
            target = vars.variables.get(leaf.name)
            if target is not None:
                stack.append(target)
    return reachable


def prune_unreachable_vars(vars: SyllableVars) -> list[str]:
    """Remove variables that are unreachable and still uninitialized.

    Must run after :func:`flag_reachable_vars`. Unreachable variables with
    real content are kept.

    Returns:
        Names of the removed variables
    """
    removed = [
        name
        for name, rule in vars.variables.items()
        if name not in vars.reachable and not rule.is_initialized
    ]
    for name in removed:
        del vars.variables[name]
    if removed:
        logger.debug("Pruned empty unreachable variables: %s", ", ".join(removed))
    return removed


__all__ = [
    "UNREACHABLE_WARNING",
    "flag_reachable_vars",
    "prune_unreachable_vars",
]
