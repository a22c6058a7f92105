"""Grapheme model - atomic output units and their containers."""

from alchemist.core.graphemes.inventory import (
    EMPTY_INVENTORY_ERROR,
    NOT_IN_INVENTORY,
    consume_input,
    invalid_graphemes,
    inventory_errors,
    is_linked_valid,
)
from alchemist.core.graphemes.models import (
    Grapheme,
    GraphemeList,
    GraphemeSet,
    MasterGraphemeStorage,
)
from alchemist.core.graphemes.protocols import GraphemeStorage

__all__ = [
    # Models
    "Grapheme",
    "GraphemeList",
    "GraphemeSet",
    "MasterGraphemeStorage",
    # Protocols
    "GraphemeStorage",
    # Inventory helpers
    "EMPTY_INVENTORY_ERROR",
    "NOT_IN_INVENTORY",
    "consume_input",
    "invalid_graphemes",
    "inventory_errors",
    "is_linked_valid",
]
