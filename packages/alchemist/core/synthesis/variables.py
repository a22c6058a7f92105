"""Syllable grammar: root rules plus user-defined named variables."""

from __future__ import annotations

import logging
from collections.abc import Iterator

from pydantic import BaseModel, ConfigDict, Field, field_validator

from alchemist.core.synthesis.reachability import flag_reachable_vars, prune_unreachable_vars
from alchemist.core.synthesis.rules import OrRule, VariableLeaf

logger = logging.getLogger(__name__)

# Root rule names mapped to their SyllableRoots fields.
ROOT_NAMES: dict[str, str] = {
    "InitialSyllable": "initial",
    "MiddleSyllable": "middle",
    "TerminalSyllable": "terminal",
    "SingleSyllable": "single",
}


class SyllableRoots(BaseModel):
    """The four root rules of the syllable synthesis grammar.

    Attributes:
        initial: First syllable of a multi-syllable word.
        middle: Every syllable between the first and the last.
        terminal: Last syllable of a multi-syllable word.
        single: The only syllable of a one-syllable word.
    """

    model_config = ConfigDict(extra="forbid")

    initial: OrRule = Field(default_factory=OrRule)
    middle: OrRule = Field(default_factory=OrRule)
    terminal: OrRule = Field(default_factory=OrRule)
    single: OrRule = Field(default_factory=OrRule)

    def rules(self) -> Iterator[OrRule]:
        yield self.initial
        yield self.middle
        yield self.terminal
        yield self.single

    def named(self) -> Iterator[tuple[str, OrRule]]:
        """Yield ``(root name, rule)`` pairs in display order."""
        for name, field in ROOT_NAMES.items():
            yield name, getattr(self, field)


class SyllableVars(BaseModel):
    """A mapping of syllable rule variable names to their rules.

    ``reachable`` is derived state: it is excluded from persistence and
    recomputed by :meth:`refresh` on construction and after edits.
    """

    model_config = ConfigDict(extra="forbid")

    roots: SyllableRoots = Field(default_factory=SyllableRoots)
    variables: dict[str, OrRule] = Field(default_factory=dict)
    reachable: set[str] = Field(default_factory=set, exclude=True)

    @field_validator("variables")
    @classmethod
    def _sort_variables(cls, v: dict[str, OrRule]) -> dict[str, OrRule]:
        return dict(sorted(v.items()))

    def model_post_init(self, __context: object) -> None:
        self.refresh()

    @staticmethod
    def is_root(name: str) -> bool:
        return name in ROOT_NAMES

    def get(self, name: str) -> OrRule | None:
        """Return the rule for a root or variable name, or None if undefined."""
        field = ROOT_NAMES.get(name)
        if field is not None:
            return getattr(self.roots, field)
        return self.variables.get(name)

    def set_root(self, name: str, rule: OrRule) -> list[str]:
        """Replace a root rule and refresh reachability.

        Raises:
            KeyError: If ``name`` is not a root name

        Returns:
            Names of variables pruned by the refresh
        """
        setattr(self.roots, ROOT_NAMES[name], rule)
        return self.refresh()

    def all_rules(self) -> Iterator[tuple[str, OrRule]]:
        """Yield roots first, then variables in name order."""
        yield from self.roots.named()
        yield from self.variables.items()

    def declare_variable(self, name: str) -> bool:
        """Create an empty variable unless the name is a root or already defined.

        Returns:
            True if a new variable was created
        """
        if not name or self.is_root(name) or name in self.variables:
            return False
        self.variables[name] = OrRule()
        self.variables = dict(sorted(self.variables.items()))
        logger.debug("Declared syllable variable %r", name)
        return True

    def assign_variable(self, leaf: VariableLeaf, name: str) -> str:
        """Point a Variable leaf at ``name``, declaring it on first use.

        Whitespace is stripped from the name, and reachability is refreshed.

        Returns:
            The normalized variable name
        """
        name = "".join(name.split())
        leaf.name = name
        self.declare_variable(name)
        self.refresh()
        return name

    def refresh(self) -> list[str]:
        """Recompute reachability and prune empty unreachable variables.

        Returns:
            Names of pruned variables
        """
        flag_reachable_vars(self)
        return prune_unreachable_vars(self)

    def unreachable(self) -> list[str]:
        """Variables kept despite being unreachable (they have content).

        Reachability is recomputed first.
        """
        flag_reachable_vars(self)
        return [name for name in self.variables if name not in self.reachable]

    def undefined_references(self) -> list[str]:
        """Reachable names that resolve to no rule; they expand to nothing."""
        flag_reachable_vars(self)
        return sorted(name for name in self.reachable if self.get(name) is None)


__all__ = [
    "ROOT_NAMES",
    "SyllableRoots",
    "SyllableVars",
]
