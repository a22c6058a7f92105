"""Generational slot arena for find-pattern nodes.

Replace-pattern captures refer to find-pattern nodes without owning them.
Each rule keeps its nodes in an arena and hands out ``(index, generation)``
handles. Removing a node bumps its slot's generation, so every handle
issued for it resolves to ``None`` from then on, even after the slot is
reused. Invalidation is structural and does not depend on when the
garbage collector runs.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from alchemist.core.grammar.models import FindPattern


@dataclass(frozen=True)
class PatternHandle:
    """Non-owning reference to a find-pattern slot."""

    index: int
    generation: int


@dataclass
class _Slot:
    node: FindPattern | None
    generation: int = 0


class PatternArena:
    """Slot storage for the find patterns of one rule.

    Example:
        >>> arena = PatternArena()
        >>> handle = arena.insert(node)
        >>> arena.get(handle) is node
        True
        >>> arena.remove(handle)
        >>> arena.get(handle) is None
        True
    """

    def __init__(self) -> None:
        self._slots: list[_Slot] = []
        self._free: list[int] = []

    def insert(self, node: FindPattern) -> PatternHandle:
        """Store ``node`` and return a fresh handle for it."""
        if self._free:
            index = self._free.pop()
            slot = self._slots[index]
            slot.node = node
        else:
            index = len(self._slots)
            slot = _Slot(node)
            self._slots.append(slot)
        return PatternHandle(index, slot.generation)

    def get(self, handle: PatternHandle | None) -> FindPattern | None:
        """Resolve a handle, or return None if it is stale or unset."""
        if handle is None or not 0 <= handle.index < len(self._slots):
            return None
        slot = self._slots[handle.index]
        if slot.generation != handle.generation:
            return None
        return slot.node

    def remove(self, handle: PatternHandle | None) -> FindPattern | None:
        """Free a slot, invalidating every handle issued for it.

        Returns:
            The removed node, or None if the handle was already stale
        """
        node = self.get(handle)
        if node is None or handle is None:
            return None
        slot = self._slots[handle.index]
        slot.node = None
        slot.generation += 1
        self._free.append(handle.index)
        return node

    def clear(self) -> None:
        """Invalidate every live handle."""
        for index, slot in enumerate(self._slots):
            if slot.node is not None:
                slot.node = None
                slot.generation += 1
                self._free.append(index)

    def __contains__(self, handle: object) -> bool:
        return isinstance(handle, PatternHandle) and self.get(handle) is not None

    def __iter__(self) -> Iterator[FindPattern]:
        return (slot.node for slot in self._slots if slot.node is not None)

    def __len__(self) -> int:
        return sum(1 for slot in self._slots if slot.node is not None)


__all__ = [
    "PatternArena",
    "PatternHandle",
]
