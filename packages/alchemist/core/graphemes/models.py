"""Grapheme models and containers.

A grapheme is an atomic output unit: a letter, a multigraph such as
English <ch> or <sh>, or any other glyph. Two container policies exist:

- GraphemeList: ordered append-list, duplicates allowed (literal strings).
- GraphemeSet: ordered-unique set, sorted lexicographically (inventories,
  random choice sets).

Both serialize as plain JSON arrays.
"""

from __future__ import annotations

import bisect
from collections.abc import Callable, Iterable, Iterator
from typing import Annotated

from pydantic import Field, RootModel, StringConstraints, TypeAdapter, field_validator

Grapheme = Annotated[str, StringConstraints(min_length=1, pattern=r"^\S+$")]
"""A non-empty token with no whitespace. Identity is string equality."""

_grapheme_adapter: TypeAdapter[str] = TypeAdapter(Grapheme)


class GraphemeList(RootModel[list[Grapheme]]):
    """Ordered grapheme container that permits duplicates.

    Example:
        >>> word = GraphemeList(["k", "a", "t"])
        >>> word.add("a")
        >>> "".join(word)
        'kata'
    """

    root: list[Grapheme] = Field(default_factory=list)

    def add(self, grapheme: str) -> None:
        """Append a grapheme, keeping any existing copies.

        Raises:
            ValidationError: If ``grapheme`` is empty or contains whitespace
        """
        self.root.append(_grapheme_adapter.validate_python(grapheme))

    def contains(self, grapheme: str) -> bool:
        return grapheme in self.root

    def is_empty(self) -> bool:
        return not self.root

    def retain_if(self, predicate: Callable[[str], bool]) -> None:
        self.root[:] = [g for g in self.root if predicate(g)]

    def __contains__(self, grapheme: object) -> bool:
        return grapheme in self.root

    def __iter__(self) -> Iterator[str]:  # type: ignore[override]
        return iter(self.root)

    def __len__(self) -> int:
        return len(self.root)

    def __getitem__(self, index: int) -> str:
        return self.root[index]

    def __str__(self) -> str:
        return " ".join(self.root)


class GraphemeSet(RootModel[list[Grapheme]]):
    """Ordered-unique grapheme container.

    Graphemes are kept sorted and deduplicated; adding a grapheme that is
    already present is a no-op.

    Example:
        >>> inventory = GraphemeSet(["sh", "a"])
        >>> inventory.add("sh")
        >>> list(inventory)
        ['a', 'sh']
    """

    root: list[Grapheme] = Field(default_factory=list)

    @field_validator("root")
    @classmethod
    def _sort_unique(cls, v: list[str]) -> list[str]:
        """Normalize to sorted unique order."""
        return sorted(set(v))

    @classmethod
    def of(cls, graphemes: Iterable[str]) -> GraphemeSet:
        """Build a set from any iterable of graphemes."""
        return cls(list(graphemes))

    def add(self, grapheme: str) -> None:
        """Insert a grapheme at its sorted position unless already present.

        Raises:
            ValidationError: If ``grapheme`` is empty or contains whitespace
        """
        grapheme = _grapheme_adapter.validate_python(grapheme)
        index = bisect.bisect_left(self.root, grapheme)
        if index < len(self.root) and self.root[index] == grapheme:
            return
        self.root.insert(index, grapheme)

    def contains(self, grapheme: str) -> bool:
        index = bisect.bisect_left(self.root, grapheme)
        return index < len(self.root) and self.root[index] == grapheme

    def is_empty(self) -> bool:
        return not self.root

    def retain_if(self, predicate: Callable[[str], bool]) -> None:
        self.root[:] = [g for g in self.root if predicate(g)]

    def __contains__(self, grapheme: object) -> bool:
        return isinstance(grapheme, str) and self.contains(grapheme)

    def __iter__(self) -> Iterator[str]:  # type: ignore[override]
        return iter(self.root)

    def __len__(self) -> int:
        return len(self.root)

    def __getitem__(self, index: int) -> str:
        return self.root[index]

    def __str__(self) -> str:
        return "{ " + " ".join(self.root) + " }" if self.root else "{ }"


# The master inventory that other grapheme containers may be linked to.
MasterGraphemeStorage = GraphemeSet


__all__ = [
    "Grapheme",
    "GraphemeList",
    "GraphemeSet",
    "MasterGraphemeStorage",
]
