"""Protocol definitions for grapheme containers.

Containers set their own policies on ordering and duplicate
permissibility; everything that edits or validates graphemes goes
through this interface.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Protocol, runtime_checkable


@runtime_checkable
class GraphemeStorage(Protocol):
    """A container that can hold graphemes.

    Example:
        >>> def strip_unknown(storage: GraphemeStorage, master) -> None:
        ...     storage.retain_if(lambda g: g in master)
    """

    def add(self, grapheme: str) -> None:
        """Add a grapheme to the container."""
        ...

    def contains(self, grapheme: str) -> bool:
        """Return True if the container holds the grapheme."""
        ...

    def is_empty(self) -> bool:
        """Return True if the container holds no graphemes."""
        ...

    def retain_if(self, predicate: Callable[[str], bool]) -> None:
        """Remove every grapheme for which ``predicate`` returns False."""
        ...

    def __iter__(self) -> Iterator[str]: ...

    def __len__(self) -> int: ...


__all__ = ["GraphemeStorage"]
