"""Grapheme input parsing and inventory linking."""

from __future__ import annotations

import logging

from alchemist.core.graphemes.models import MasterGraphemeStorage
from alchemist.core.graphemes.protocols import GraphemeStorage

logger = logging.getLogger(__name__)

EMPTY_INVENTORY_ERROR = "The graphemic inventory must contain at least one grapheme"
NOT_IN_INVENTORY = "Not in graphemic inventory"


def consume_input(storage: GraphemeStorage, buffer: str, *, commit: bool = False) -> str:
    """Move typed graphemes from an input buffer into a container.

    Every whitespace-terminated token in ``buffer`` is added to ``storage``;
    runs of whitespace produce no empty graphemes. The unterminated tail is
    returned as the new buffer contents. When ``commit`` is True (the input
    lost focus), the tail is added as well and an empty buffer is returned.

    Args:
        storage: Container receiving the graphemes
        buffer: Current input text
        commit: Also add the trailing partial token

    Returns:
        Remaining buffer text

    Example:
        >>> inventory = MasterGraphemeStorage()
        >>> consume_input(inventory, "a sh  k")
        'k'
        >>> list(inventory)
        ['a', 'sh']
    """
    complete = buffer.split()
    remainder = ""
    if complete and not buffer[-1].isspace():
        remainder = complete.pop()

    if commit and remainder:
        complete.append(remainder)
        remainder = ""

    for grapheme in complete:
        storage.add(grapheme)

    if complete:
        logger.debug("Consumed %d grapheme(s) from input", len(complete))
    return remainder


def is_linked_valid(grapheme: str, master: MasterGraphemeStorage | None) -> bool:
    """Return True unless a master inventory is given and lacks the grapheme."""
    return master is None or grapheme in master


def invalid_graphemes(storage: GraphemeStorage, master: MasterGraphemeStorage) -> list[str]:
    """List graphemes in ``storage`` that are missing from the master inventory.

    Invalid graphemes are reported, never removed.
    """
    return [g for g in storage if not is_linked_valid(g, master)]


def inventory_errors(master: MasterGraphemeStorage) -> list[str]:
    """Validation messages for the master inventory itself."""
    if master.is_empty():
        return [EMPTY_INVENTORY_ERROR]
    return []


__all__ = [
    "EMPTY_INVENTORY_ERROR",
    "NOT_IN_INVENTORY",
    "consume_input",
    "invalid_graphemes",
    "inventory_errors",
    "is_linked_valid",
]
