# boardlab_picker/core/types/protocols.py

"""Protocol definitions for the collaborators of the picker core."""

# Standard library imports
from typing import Protocol

# Local imports
from boardlab_picker.core.types.aliases import DetectedPorts
from boardlab_picker.core.types.aliases import Listener
from boardlab_picker.core.types.aliases import Unsubscribe

# ============================================================================
# Persistence
# ============================================================================


class Memento(Protocol):
    """Key-value store that durably keeps ordered key lists."""

    def get(self, storage_key: str) -> list[str]: ...
    async def update(self, storage_key: str, items: list[str]) -> None: ...


# ============================================================================
# Catalog and history
# ============================================================================


class CatalogProvider(Protocol):
    """Supplies snapshots of currently detected ports."""

    def detected_ports(self) -> DetectedPorts: ...
    def on_did_change(self, listener: Listener) -> Unsubscribe: ...


class RecentItems(Protocol):
    """Narrow history interface the core works against."""

    @property
    def items(self) -> list[str]: ...
    async def add(self, key: str) -> bool: ...
    async def remove(self, key: str) -> bool: ...
    def on_did_update(self, listener: Listener) -> Unsubscribe: ...


__all__ = ["Memento", "CatalogProvider", "RecentItems"]
