"""Syllable grammar rule models.

Syllable rules are stored in sum-of-products form:

- OrRule: non-empty list of AndRule alternatives; one is chosen at random.
- AndRule: non-empty sequence of leaves, concatenated in order.
- LeafRule: a terminal node (literal string, random choice set, variable
  reference, blank) or an uninitialized placeholder.

The editing helpers keep the non-empty invariants the way the rule editor
expects: removing the last leaf of an alternative removes the alternative,
and an OrRule left with no alternatives resets to a single placeholder.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field

from alchemist.core.graphemes import GraphemeList, GraphemeSet


class UninitializedLeaf(BaseModel):
    """Placeholder leaf that the user has not set yet."""

    model_config = ConfigDict(extra="forbid")

    kind: Literal["uninitialized"] = "uninitialized"

    @property
    def initialized(self) -> bool:
        return False

    def describe(self) -> str:
        return "(not set)"


class SequenceLeaf(BaseModel):
    """Deterministic literal: graphemes emitted verbatim, in order."""

    model_config = ConfigDict(extra="forbid")

    kind: Literal["sequence"] = "sequence"
    graphemes: GraphemeList = Field(default_factory=GraphemeList)

    @property
    def initialized(self) -> bool:
        return True

    def describe(self) -> str:
        return str(self.graphemes)


class SetLeaf(BaseModel):
    """Random choice: one member emitted uniformly at random."""

    model_config = ConfigDict(extra="forbid")

    kind: Literal["set"] = "set"
    graphemes: GraphemeSet = Field(default_factory=GraphemeSet)

    @property
    def initialized(self) -> bool:
        return True

    def describe(self) -> str:
        return str(self.graphemes)


class VariableLeaf(BaseModel):
    """Reference to a root rule or a named variable."""

    model_config = ConfigDict(extra="forbid")

    kind: Literal["variable"] = "variable"
    name: str = ""

    @property
    def initialized(self) -> bool:
        return True

    def describe(self) -> str:
        return self.name or "(no variable given)"


class BlankLeaf(BaseModel):
    """Empty production."""

    model_config = ConfigDict(extra="forbid")

    kind: Literal["blank"] = "blank"

    @property
    def initialized(self) -> bool:
        return True

    def describe(self) -> str:
        return "blank"


LeafRule = Annotated[
    UninitializedLeaf | SequenceLeaf | SetLeaf | VariableLeaf | BlankLeaf,
    Field(discriminator="kind"),
]

# Menu of leaf node types in (display name, constructor) form.
LEAF_RULE_CHOICES: tuple[tuple[str, Callable[[], LeafRule]], ...] = (
    ("String", SequenceLeaf),
    ("Random", SetLeaf),
    ("Variable", VariableLeaf),
    ("Blank", BlankLeaf),
)


def leaf_from_choice(name: str) -> LeafRule:
    """Construct a default leaf from its menu name.

    Raises:
        KeyError: If ``name`` is not a menu entry
    """
    for choice, factory in LEAF_RULE_CHOICES:
        if choice == name:
            return factory()
    raise KeyError(f"Unknown leaf rule choice: {name!r}")


class AndRule(BaseModel):
    """An AND node: leaves concatenated in order."""

    model_config = ConfigDict(extra="forbid")

    leaves: list[LeafRule] = Field(default_factory=lambda: [UninitializedLeaf()], min_length=1)

    @property
    def head(self) -> LeafRule:
        return self.leaves[0]

    @property
    def is_initialized(self) -> bool:
        return self.head.initialized

    def prepend(self, leaf: LeafRule) -> None:
        self.leaves.insert(0, leaf)

    def insert(self, index: int, leaf: LeafRule) -> None:
        self.leaves.insert(index, leaf)

    def append(self, leaf: LeafRule) -> None:
        self.leaves.append(leaf)

    def replace(self, index: int, leaf: LeafRule) -> None:
        """Set the leaf at ``index``, e.g. when a placeholder is clicked."""
        self.leaves[index] = leaf

    def __iter__(self) -> Iterator[LeafRule]:  # type: ignore[override]
        return iter(self.leaves)

    def __len__(self) -> int:
        return len(self.leaves)

    def describe(self) -> str:
        return " + ".join(leaf.describe() for leaf in self.leaves)


class OrRule(BaseModel):
    """An OR node: one alternative chosen at random when generating."""

    model_config = ConfigDict(extra="forbid")

    alternatives: list[AndRule] = Field(default_factory=lambda: [AndRule()], min_length=1)

    @classmethod
    def of(cls, *leaves: LeafRule) -> OrRule:
        """Build a single-alternative rule from leaves."""
        return cls(alternatives=[AndRule(leaves=list(leaves))])

    @property
    def head(self) -> AndRule:
        return self.alternatives[0]

    @property
    def is_initialized(self) -> bool:
        """True once the first leaf of the first alternative has been set."""
        return self.head.is_initialized

    def add_alternative(self, leaf: LeafRule) -> AndRule:
        """Append a new ``OR`` clause starting with ``leaf``."""
        and_rule = AndRule(leaves=[leaf])
        self.alternatives.append(and_rule)
        return and_rule

    def remove_leaf(self, alternative: int, index: int) -> bool:
        """Delete one leaf.

        Placeholders are not deletable. An alternative left empty is
        removed; if no alternatives remain the rule resets to a single
        placeholder.

        Returns:
            True if a leaf was removed
        """
        and_rule = self.alternatives[alternative]
        if not and_rule.leaves[index].initialized:
            return False
        del and_rule.leaves[index]
        if not and_rule.leaves:
            del self.alternatives[alternative]
        if not self.alternatives:
            self.alternatives.append(AndRule())
        return True

    def iter_leaves(self) -> Iterator[LeafRule]:
        for and_rule in self.alternatives:
            yield from and_rule.leaves

    def __iter__(self) -> Iterator[AndRule]:  # type: ignore[override]
        return iter(self.alternatives)

    def __len__(self) -> int:
        return len(self.alternatives)

    def describe(self) -> str:
        return " OR ".join(and_rule.describe() for and_rule in self.alternatives)


__all__ = [
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
]
