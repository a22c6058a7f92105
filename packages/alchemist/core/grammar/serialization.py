"""Persistence bridge for capture references.

Captures point at find patterns through arena handles, which only live in
memory. Before saving, each capture records its target's short label;
after loading, labels are resolved back into handles.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from alchemist.core.grammar.models import GrammarRule

logger = logging.getLogger(__name__)


def prepare_for_save(rules: Iterable[GrammarRule]) -> None:
    """Write current capture target labels into every capture."""
    count = 0
    for rule in rules:
        rule.prepare_for_save()
        count += 1
    logger.debug("Prepared %d grammar rule(s) for save", count)


def resolve_after_load(rules: Iterable[GrammarRule]) -> int:
    """Rebind every capture from its persisted label.

    Labels that no longer exist in their rule leave the capture
    unresolved.

    Returns:
        Total number of unresolved captures
    """
    misses = 0
    for index, rule in enumerate(rules):
        rule.recompute_labels()
        rule_misses = rule.resolve_after_load()
        if rule_misses:
            logger.warning("Rule %d has %d unresolved capture(s) after load", index, rule_misses)
        misses += rule_misses
    return misses


__all__ = [
    "prepare_for_save",
    "resolve_after_load",
]
