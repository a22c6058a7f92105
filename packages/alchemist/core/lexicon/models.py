"""Native-to-conlang word mapping."""

from __future__ import annotations

import logging
from collections import defaultdict
from collections.abc import Iterator
from enum import Enum

from pydantic import Field, RootModel

logger = logging.getLogger(__name__)


class EntryExistsError(KeyError):
    """Raised when a native phrase is already mapped to another word."""


class SearchMode(str, Enum):
    """Which side of the lexicon a search matches against.

    Attributes:
        NATIVE: Match native phrases.
        CONLANG: Match conlang translations.
    """

    NATIVE = "native"
    CONLANG = "conlang"


class Lexicon(RootModel[dict[str, str]]):
    """Mapping of native phrases to conlang phrases.

    Example:
        >>> lexicon = Lexicon()
        >>> lexicon.add("water", "nalu")
        >>> lexicon.get("water")
        'nalu'
    """

    root: dict[str, str] = Field(default_factory=dict)

    def add(self, native: str, conlang: str) -> None:
        """Map a new native phrase.

        Raises:
            ValueError: If ``native`` is blank
            EntryExistsError: If ``native`` is already mapped
        """
        native = native.strip()
        if not native:
            raise ValueError("Native phrase must not be empty")
        if native in self.root:
            raise EntryExistsError(self.overwrite_warning(native))
        self.root[native] = conlang.strip()
        logger.debug("Added lexicon entry %r -> %r", native, self.root[native])

    def update(self, original: str, native: str, conlang: str) -> None:
        """Replace the entry for ``original`` with ``native -> conlang``.

        Raises:
            KeyError: If ``original`` is not mapped
            ValueError: If ``native`` is blank
            EntryExistsError: If the new native phrase belongs to another entry
        """
        if original not in self.root:
            raise KeyError(original)
        native = native.strip()
        if not native:
            raise ValueError("Native phrase must not be empty")
        if native != original and native in self.root:
            raise EntryExistsError(self.overwrite_warning(native))
        del self.root[original]
        self.root[native] = conlang.strip()
        logger.debug("Updated lexicon entry %r -> %r: %r", original, native, self.root[native])

    def remove(self, native: str) -> str:
        conlang = self.root.pop(native)
        logger.debug("Removed lexicon entry %r", native)
        return conlang

    def get(self, native: str) -> str | None:
        return self.root.get(native)

    def overwrite_warning(self, native: str) -> str | None:
        """Message shown before an entry would be replaced, or None."""
        existing = self.root.get(native.strip())
        if existing is None:
            return None
        return f"Already mapped to {existing}"

    def search(self, query: str, mode: SearchMode = SearchMode.NATIVE) -> list[tuple[str, str]]:
        """Case-insensitive substring search, sorted by native phrase."""
        needle = query.strip().lower()
        index = 0 if mode == SearchMode.NATIVE else 1
        return sorted(entry for entry in self.root.items() if needle in entry[index].lower())

    def homonyms(self) -> dict[str, list[str]]:
        """Conlang forms mapped from more than one native phrase."""
        reverse: dict[str, list[str]] = defaultdict(list)
        for native, conlang in sorted(self.root.items()):
            reverse[conlang].append(native)
        return {conlang: natives for conlang, natives in reverse.items() if len(natives) > 1}

    def __contains__(self, native: object) -> bool:
        return native in self.root

    def __iter__(self) -> Iterator[str]:  # type: ignore[override]
        return iter(self.root)

    def __len__(self) -> int:
        return len(self.root)


__all__ = [
    "EntryExistsError",
    "Lexicon",
    "SearchMode",
]
