"""Deterministic label computation for find-pattern forests.

Labels are computed in two passes over a rule's whole forest (roots and
every nested child, depth-first pre-order):

1. Count how many nodes share each structural identity
   ``(pattern type, multimatch, optional)``.
2. Label each node. A class with more than one member gets numeric
   suffixes ``1..k`` in traversal order, e.g. ``Noun 1`` and ``Noun 2``.

The count must be complete before any single label can decide whether to
show a number, hence the separate pre-pass.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from alchemist.core.grammar.models import FindPattern, PatternIdentity

logger = logging.getLogger(__name__)


@dataclass
class LabelCounter:
    """Per-identity disambiguation state."""

    seen: int = 0
    total: int = 0

    def next_number(self) -> int | None:
        """Consume the next sequence number, or None if the class is unique."""
        if self.total <= 1 or self.seen >= self.total:
            return None
        self.seen += 1
        return self.seen


def modifier_suffix(multimatch: bool, optional: bool) -> str:
    """Return ``*`` for both modifiers, ``+`` multimatch, ``?`` optional."""
    if multimatch and optional:
        return "*"
    if multimatch:
        return "+"
    if optional:
        return "?"
    return ""


def walk_forest(forest: Iterable[FindPattern]) -> Iterator[FindPattern]:
    """Yield every node of the forest, depth-first pre-order."""
    for root in forest:
        yield from root.walk()


def count_identities(forest: Iterable[FindPattern]) -> dict[PatternIdentity, LabelCounter]:
    """Pre-pass: total members of each structural identity class."""
    counter: dict[PatternIdentity, LabelCounter] = {}
    for node in walk_forest(forest):
        counter.setdefault(node.identity, LabelCounter()).total += 1
    return counter


def recompute_labels(forest: list[FindPattern]) -> None:
    """Recompute ``label`` and ``short_label`` for every node in the forest."""
    counter = count_identities(forest)
    for root in forest:
        root.compute_label(counter)
    logger.debug("Recomputed labels for %d pattern(s)", sum(c.total for c in counter.values()))


__all__ = [
    "LabelCounter",
    "count_identities",
    "modifier_suffix",
    "recompute_labels",
    "walk_forest",
]
