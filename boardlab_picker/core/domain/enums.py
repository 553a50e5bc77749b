# boardlab_picker/core/domain/enums.py

"""Domain enumerations for the board and port picker"""

# Standard library imports
from enum import Enum


class MatchKind(Enum):
    """How a board name match was found, in decreasing strictness"""

    EXACT = "exact"  # Normalized names are equal
    NORMALIZED = "normalized"  # Compact names (no separators) are equal
    FUZZY = "fuzzy"  # Approximate search above the minimum score


class ItemAction(Enum):
    """Actions a presentation item offers to the picker"""

    PIN = "pin"
    UNPIN = "unpin"
    REMOVE_FROM_HISTORY = "remove_from_history"


class Section(Enum):
    """History sections shown before the category groups"""

    PINNED = "pinned"
    RECENT = "recent"


# Tooltips shown for item actions
ACTION_DESCRIPTIONS = {
    ItemAction.PIN: "Pin",
    ItemAction.UNPIN: "Unpin",
    ItemAction.REMOVE_FROM_HISTORY: "Remove from history",
}
