# boardlab_picker/core/domain/presentation.py

"""Presentation items produced by reconciliation

Items are a tagged variant: ``LiveItem`` for candidates currently in the
catalog, ``HistoryOnlyItem`` for pinned/recent entries revived from their
identity key, and ``PlaceholderItem`` for the single explanatory line shown
when there is nothing else. Items are rebuilt on every reconciliation pass.
"""

# Standard library imports
from typing import Annotated
from typing import Literal

# Third party imports
from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field

# Local imports
from boardlab_picker.core.domain.enums import ItemAction
from boardlab_picker.core.domain.identity import BoardIdentifier
from boardlab_picker.core.domain.identity import Port

NOT_DETECTED = "not detected"


class _IdentityItem(BaseModel):
    """Fields shared by every selectable item"""

    model_config = ConfigDict(frozen=True)

    key: str
    label: str
    section: str = Field(description="'pinned', 'recent' or a category label")
    description: str = ""
    detail: str = ""
    actions: tuple[ItemAction, ...] = ()


class LiveItem(_IdentityItem):
    """A candidate the catalog currently reports"""

    kind: Literal["live"] = "live"
    candidate: Port | BoardIdentifier
    port: Port | None = Field(default=None, description="Port a live board was detected on")

    @property
    def detected(self) -> bool:
        return True


class HistoryOnlyItem(_IdentityItem):
    """A history entry whose identity is not in the current catalog"""

    kind: Literal["history_only"] = "history_only"
    identity: Port | BoardIdentifier
    description: str = NOT_DETECTED

    @property
    def detected(self) -> bool:
        return False


class PlaceholderItem(BaseModel):
    """Non-selectable explanatory line"""

    model_config = ConfigDict(frozen=True)

    kind: Literal["placeholder"] = "placeholder"
    label: str


type PresentationItem = Annotated[
    LiveItem | HistoryOnlyItem | PlaceholderItem, Field(discriminator="kind")
]


def group_items(
    items: list[LiveItem | HistoryOnlyItem | PlaceholderItem],
) -> list[tuple[str, list[LiveItem | HistoryOnlyItem | PlaceholderItem]]]:
    """Regroup a flat reconciliation result into consecutive sections

    Placeholders form their own unnamed section.

    Args:
        items: Items in presentation order

    Returns:
        List of (section label, items) pairs in presentation order
    """
    groups: list[tuple[str, list[LiveItem | HistoryOnlyItem | PlaceholderItem]]] = []
    for item in items:
        section = "" if isinstance(item, PlaceholderItem) else item.section
        if groups and groups[-1][0] == section:
            groups[-1][1].append(item)
        else:
            groups.append((section, [item]))
    return groups


def describe_item(item: LiveItem | HistoryOnlyItem | PlaceholderItem) -> str:
    """Single-line text for an item, resolving the variant once"""
    match item:
        case LiveItem(label=label, description=description) if description:
            return f"{label} ({description})"
        case LiveItem(label=label):
            return label
        case HistoryOnlyItem(label=label, description=description):
            return f"{label} ({description})"
        case PlaceholderItem(label=label):
            return label
    raise TypeError(f"Unknown presentation item: {item!r}")
