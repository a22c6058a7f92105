"""Ordered, user-reorderable list of grammar rules."""

from __future__ import annotations

import logging

from pydantic import BaseModel, ConfigDict, Field

from alchemist.core.grammar.models import GrammarRule
from alchemist.core.grammar.serialization import prepare_for_save, resolve_after_load

logger = logging.getLogger(__name__)


class Grammar(BaseModel):
    """A language's grammar: rules applied in list order."""

    model_config = ConfigDict(extra="forbid")

    rules: list[GrammarRule] = Field(default_factory=list)

    def add_rule(self, rule: GrammarRule | None = None, index: int | None = None) -> GrammarRule:
        """Insert a rule (a new, unset rule by default) and return it.

        Raises:
            IndexError: If ``index`` is out of range
        """
        rule = rule if rule is not None else GrammarRule()
        if index is None:
            index = len(self.rules)
        if not 0 <= index <= len(self.rules):
            raise IndexError(f"Rule index {index} out of range 0-{len(self.rules)}")
        self.rules.insert(index, rule)
        logger.debug("Added grammar rule at %d", index)
        return rule

    def remove_rule(self, index: int) -> GrammarRule:
        rule = self.rules.pop(index)
        logger.debug("Removed grammar rule %d", index)
        return rule

    def move_rule(self, index: int, new_index: int) -> None:
        """Move the rule at ``index`` so it ends up at ``new_index``.

        Raises:
            IndexError: If either index is out of range
        """
        if not 0 <= index < len(self.rules) or not 0 <= new_index < len(self.rules):
            raise IndexError(f"Cannot move rule {index} to {new_index}")
        self.rules.insert(new_index, self.rules.pop(index))

    def prepare_for_save(self) -> None:
        prepare_for_save(self.rules)

    def resolve_after_load(self) -> int:
        return resolve_after_load(self.rules)

    def validation_errors(self) -> list[str]:
        """Report incomplete rules and unresolved captures, numbered from 1."""
        errors: list[str] = []
        for number, rule in enumerate(self.rules, start=1):
            if not rule.is_complete:
                errors.append(f"Rule {number} is incomplete: {rule.describe()}")
            unresolved = rule.unresolved_captures()
            if unresolved:
                errors.append(f"Rule {number} has {len(unresolved)} capture(s) of deleted patterns")
        return errors

    def __len__(self) -> int:
        return len(self.rules)

    def __getitem__(self, index: int) -> GrammarRule:
        return self.rules[index]


__all__ = [
    "Grammar",
]
