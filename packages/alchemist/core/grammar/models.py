"""Grammar rule models: find patterns, replace patterns and rules.

A grammar rule maps a forest of find patterns to a list of replace
patterns, analogous to a production in a context-sensitive grammar.
Replace patterns either echo a matched find pattern (a capture) or insert
a literal word.

Every structural edit goes through :class:`GrammarRule`, which keeps the
pattern arena and the derived labels consistent.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr

from alchemist.core.grammar.arena import PatternArena, PatternHandle
from alchemist.core.grammar.labels import LabelCounter, modifier_suffix, recompute_labels, walk_forest
from alchemist.core.grammar.patterns import DEFAULT_LITERAL, EXACT_WORD, LiteralPattern, PatternType

logger = logging.getLogger(__name__)

NOT_SET = "(not set)"

# The structural identity of a find pattern, used for label disambiguation.
PatternIdentity = tuple[Any, bool, bool]


class PatternNotFoundError(KeyError):
    """Raised when a handle does not name a live find pattern in the rule."""


class FindPattern(BaseModel):
    """One element of a find pattern.

    Attributes:
        pattern: Constituent type to match.
        multimatch: Also match all adjacent constituents of the same type.
        optional: Match even if the constituent is absent.
        children: Deep-match patterns; this node only matches if they match
            its own sub-constituents.
    """

    model_config = ConfigDict(extra="forbid")

    pattern: PatternType
    multimatch: bool = False
    optional: bool = False
    children: list[FindPattern] = Field(default_factory=list)

    _label: str = PrivateAttr(default="")
    _short_label: str = PrivateAttr(default="")
    _handle: PatternHandle | None = PrivateAttr(default=None)

    @property
    def identity(self) -> PatternIdentity:
        return (self.pattern, self.multimatch, self.optional)

    @property
    def is_literal(self) -> bool:
        return isinstance(self.pattern, LiteralPattern)

    @property
    def label(self) -> str:
        """Full label: short label plus bracketed deep-match labels."""
        return self._label

    @property
    def short_label(self) -> str:
        """Label of this node alone, used by capture pickers and persistence."""
        return self._short_label

    @property
    def handle(self) -> PatternHandle | None:
        return self._handle

    def walk(self) -> Iterator[FindPattern]:
        """Yield this node and all descendants, depth-first pre-order."""
        yield self
        for child in self.children:
            yield from child.walk()

    def compute_label(self, counter: dict[PatternIdentity, LabelCounter]) -> str:
        """Compute and store this node's labels, then its children's.

        The disambiguation number is taken before recursing, so numbering
        follows pre-order; the full label is assembled after the children.

        Returns:
            The full label
        """
        short_label = self.pattern.abbreviation + modifier_suffix(self.multimatch, self.optional)
        entry = counter.get(self.identity)
        number = entry.next_number() if entry is not None else None
        if number is not None:
            short_label = f"{short_label} {number}"

        child_labels = [child.compute_label(counter) for child in self.children]
        self._short_label = short_label
        self._label = f"{short_label} {{ {' '.join(child_labels)} }}" if child_labels else short_label
        return self._label


class CaptureReplace(BaseModel):
    """Echo the constituent matched by a find pattern of the same rule.

    The target is held as a non-owning handle. ``label`` is only the
    persisted form of the reference, written before saving and read back
    after loading.
    """

    model_config = ConfigDict(extra="forbid")

    kind: Literal["capture"] = "capture"
    label: str = ""

    _target: PatternHandle | None = PrivateAttr(default=None)

    @classmethod
    def of(cls, target: PatternHandle) -> CaptureReplace:
        capture = cls()
        capture.bind(target)
        return capture

    @property
    def target(self) -> PatternHandle | None:
        return self._target

    def bind(self, target: PatternHandle | None) -> None:
        self._target = target


class LiteralReplace(BaseModel):
    """Insert a fixed word."""

    model_config = ConfigDict(extra="forbid")

    kind: Literal["literal"] = "literal"
    text: str = DEFAULT_LITERAL


ReplacePattern = Annotated[CaptureReplace | LiteralReplace, Field(discriminator="kind")]


class GrammarRule(BaseModel):
    """A find-pattern forest mapped to a replace-pattern list.

    Both lists start empty (unset). A rule is complete once both are
    non-empty. The rule exclusively owns its pattern trees; captures only
    hold handles into the rule's arena.
    """

    model_config = ConfigDict(extra="forbid")

    find_patterns: list[FindPattern] = Field(default_factory=list)
    replace_patterns: list[ReplacePattern] = Field(default_factory=list)

    _arena: PatternArena = PrivateAttr(default_factory=PatternArena)

    def model_post_init(self, __context: object) -> None:
        for node in self.iter_patterns():
            node._handle = self._arena.insert(node)
        self.recompute_labels()

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def is_complete(self) -> bool:
        """True once both the find and the replace side are set."""
        return bool(self.find_patterns) and bool(self.replace_patterns)

    def iter_patterns(self) -> Iterator[FindPattern]:
        """Every find pattern in the forest, depth-first pre-order."""
        return walk_forest(self.find_patterns)

    def get(self, handle: PatternHandle | None) -> FindPattern | None:
        return self._arena.get(handle)

    def require(self, handle: PatternHandle) -> FindPattern:
        """Resolve a handle or raise.

        Raises:
            PatternNotFoundError: If the handle is stale or foreign
        """
        node = self._arena.get(handle)
        if node is None:
            raise PatternNotFoundError(f"No find pattern for handle {handle}")
        return node

    def find_by_label(self, short_label: str) -> FindPattern | None:
        for node in self.iter_patterns():
            if node.short_label == short_label:
                return node
        return None

    def resolve_capture(self, capture: CaptureReplace) -> FindPattern | None:
        """Return the captured find pattern, or None if unresolved."""
        return self._arena.get(capture.target)

    def is_resolved(self, replace: ReplacePattern) -> bool:
        if isinstance(replace, CaptureReplace):
            return self.resolve_capture(replace) is not None
        return True

    def replace_text(self, replace: ReplacePattern) -> str:
        """Display text of a replace pattern; unresolved captures show as unset."""
        if isinstance(replace, LiteralReplace):
            return f'"{replace.text}"'
        target = self.resolve_capture(replace)
        return target.short_label if target is not None else NOT_SET

    def capture_choices(self) -> list[tuple[str, PatternHandle]]:
        """``(short label, handle)`` for every node a capture may target."""
        return [(node.short_label, node.handle) for node in self.iter_patterns() if node.handle]

    def replace_choices(self) -> list[tuple[str, PatternHandle | None]]:
        """Replace-pattern picker: every forest node, then ``Exact Word`` (None)."""
        return [*self.capture_choices(), (EXACT_WORD, None)]

    def unresolved_captures(self) -> list[int]:
        """Indices of replace patterns whose capture target is gone."""
        return [i for i, r in enumerate(self.replace_patterns) if not self.is_resolved(r)]

    def describe(self) -> str:
        """One-line rendering, e.g. ``Noun Verb? -> Verb? Noun``."""
        find = " ".join(node.label for node in self.find_patterns) or NOT_SET
        replace = " ".join(self.replace_text(r) for r in self.replace_patterns) or NOT_SET
        return f"{find} -> {replace}"

    # ------------------------------------------------------------------
    # Find-pattern mutations
    # ------------------------------------------------------------------

    def insert_find_pattern(
        self,
        pattern: PatternType,
        index: int | None = None,
        parent: PatternHandle | None = None,
    ) -> PatternHandle:
        """Insert a new find pattern.

        Args:
            pattern: Constituent type of the new node
            index: Position among its siblings; None appends
            parent: Deep-match parent; None inserts at the root level

        Returns:
            Handle to the new node

        Raises:
            PatternNotFoundError: If ``parent`` is stale
            ValueError: If ``parent`` is a literal (literals have no deep match)
            IndexError: If ``index`` is out of range
        """
        if parent is None:
            siblings = self.find_patterns
        else:
            parent_node = self.require(parent)
            if parent_node.is_literal:
                raise ValueError("Exact-word patterns cannot have deep-match children")
            siblings = parent_node.children

        if index is None:
            index = len(siblings)
        if not 0 <= index <= len(siblings):
            raise IndexError(f"Insert index {index} out of range 0-{len(siblings)}")

        node = FindPattern(pattern=pattern)
        siblings.insert(index, node)
        node._handle = self._arena.insert(node)
        self._structure_changed()
        return node._handle

    def prepend_find_pattern(
        self, pattern: PatternType, parent: PatternHandle | None = None
    ) -> PatternHandle:
        return self.insert_find_pattern(pattern, 0, parent)

    def add_deep_match(self, parent: PatternHandle, pattern: PatternType) -> PatternHandle:
        """Append a deep-match child to a non-literal node."""
        return self.insert_find_pattern(pattern, None, parent)

    def remove_find_pattern(self, handle: PatternHandle) -> FindPattern:
        """Delete a node and its deep-match subtree.

        Captures of any removed node become unresolved; they are kept in
        the replace list.

        Raises:
            PatternNotFoundError: If the handle is stale
        """
        node = self.require(handle)
        siblings, index = self._locate(node)
        del siblings[index]
        for removed in node.walk():
            self._arena.remove(removed._handle)
            removed._handle = None
        self._structure_changed()
        return node

    def move_find_pattern(self, handle: PatternHandle, index: int) -> None:
        """Move a node to ``index`` among its siblings.

        Raises:
            PatternNotFoundError: If the handle is stale
            IndexError: If ``index`` is out of range
        """
        node = self.require(handle)
        siblings, current = self._locate(node)
        if not 0 <= index < len(siblings):
            raise IndexError(f"Move index {index} out of range 0-{len(siblings) - 1}")
        siblings.insert(index, siblings.pop(current))
        self._structure_changed()

    def set_modifiers(
        self,
        handle: PatternHandle,
        *,
        multimatch: bool | None = None,
        optional: bool | None = None,
    ) -> None:
        node = self.require(handle)
        if multimatch is not None:
            node.multimatch = multimatch
        if optional is not None:
            node.optional = optional
        self._structure_changed()

    def toggle_multimatch(self, handle: PatternHandle) -> bool:
        node = self.require(handle)
        self.set_modifiers(handle, multimatch=not node.multimatch)
        return node.multimatch

    def toggle_optional(self, handle: PatternHandle) -> bool:
        node = self.require(handle)
        self.set_modifiers(handle, optional=not node.optional)
        return node.optional

    def set_literal_text(self, handle: PatternHandle, text: str) -> None:
        """Change the word an exact-word pattern matches.

        Raises:
            ValueError: If the node is not an exact-word pattern
        """
        node = self.require(handle)
        if not node.is_literal:
            raise ValueError("Only exact-word patterns have editable text")
        node.pattern = LiteralPattern(text=text)
        self._structure_changed()

    # ------------------------------------------------------------------
    # Replace-pattern mutations
    # ------------------------------------------------------------------

    def insert_capture(self, target: PatternHandle, index: int | None = None) -> CaptureReplace:
        """Insert a capture of any node in this rule's forest.

        Raises:
            PatternNotFoundError: If ``target`` is not a live node of this rule
        """
        self.require(target)
        capture = CaptureReplace.of(target)
        self._insert_replace(capture, index)
        return capture

    def insert_literal(self, text: str = DEFAULT_LITERAL, index: int | None = None) -> LiteralReplace:
        literal = LiteralReplace(text=text)
        self._insert_replace(literal, index)
        return literal

    def remove_replace_pattern(self, index: int) -> ReplacePattern:
        return self.replace_patterns.pop(index)

    def prune_unresolved_captures(self) -> int:
        """Drop captures whose target was deleted.

        Returns:
            Number of replace patterns removed
        """
        before = len(self.replace_patterns)
        self.replace_patterns[:] = [r for r in self.replace_patterns if self.is_resolved(r)]
        return before - len(self.replace_patterns)

    # ------------------------------------------------------------------
    # Labels and persistence hooks
    # ------------------------------------------------------------------

    def recompute_labels(self) -> None:
        recompute_labels(self.find_patterns)

    def prepare_for_save(self) -> None:
        """Store each capture target's current short label in the capture."""
        for replace in self.replace_patterns:
            if isinstance(replace, CaptureReplace):
                target = self.resolve_capture(replace)
                replace.label = target.short_label if target is not None else ""

    def resolve_after_load(self) -> int:
        """Rebind captures from their persisted labels.

        Labels are looked up among this rule's current short labels; a
        label that no longer exists leaves the capture unresolved.

        Returns:
            Number of captures that could not be resolved
        """
        lookup: dict[str, FindPattern] = {}
        for node in self.iter_patterns():
            assert node.short_label not in lookup, f"Duplicate pattern label {node.short_label!r}"
            lookup[node.short_label] = node

        misses = 0
        for replace in self.replace_patterns:
            if not isinstance(replace, CaptureReplace):
                continue
            node = lookup.get(replace.label)
            replace.bind(node.handle if node is not None else None)
            if node is None:
                misses += 1
        return misses

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _structure_changed(self) -> None:
        self.recompute_labels()

    def _insert_replace(self, replace: ReplacePattern, index: int | None) -> None:
        if index is None:
            index = len(self.replace_patterns)
        if not 0 <= index <= len(self.replace_patterns):
            raise IndexError(f"Insert index {index} out of range 0-{len(self.replace_patterns)}")
        self.replace_patterns.insert(index, replace)

    def _locate(self, node: FindPattern) -> tuple[list[FindPattern], int]:
        """Find the sibling list holding ``node`` and its position in it."""
        stack = [self.find_patterns]
        while stack:
            siblings = stack.pop()
            for index, candidate in enumerate(siblings):
                if candidate is node:
                    return siblings, index
                stack.append(candidate.children)
        raise PatternNotFoundError("Find pattern is not part of this rule")


__all__ = [
    "NOT_SET",
    "CaptureReplace",
    "FindPattern",
    "GrammarRule",
    "LiteralReplace",
    "PatternIdentity",
    "PatternNotFoundError",
    "ReplacePattern",
]
