# boardlab_picker/infrastructure/persistence/_history_store.py

"""Pinned and recent history of identity keys"""

# Standard library imports
from asyncio import Lock
from logging import getLogger

# Local imports
from boardlab_picker.core.domain.enums import Section
from boardlab_picker.core.types.aliases import Listener
from boardlab_picker.core.types.aliases import Unsubscribe
from boardlab_picker.core.types.protocols import Memento
from boardlab_picker.infrastructure.config import ConfigLoader
from boardlab_picker.infrastructure.config import get_config

logger = getLogger(__name__)


def _unique(keys: list[str]) -> list[str]:
    """Drop repeated keys, keeping the first occurrence"""
    seen: set[str] = set()
    result = []
    for key in keys:
        if key not in seen:
            seen.add(key)
            result.append(key)
    return result


class HistoryStore:
    """Ordered, bounded, deduplicated list of identity keys

    Most recent entry first. Every mutation is persisted through the memento
    before the in-memory list changes and before listeners are notified, so
    observers only ever see durable state. Mutations on one instance are
    serialized.
    """

    def __init__(self, memento: Memento, storage_key: str, max_size: int | None = None) -> None:
        """Initialize the store and restore persisted keys

        Args:
            memento: Persistence collaborator
            storage_key: Key under which this history is persisted
            max_size: Maximum number of retained keys, None for unbounded
        """
        if max_size is not None and max_size < 1:
            raise ValueError(f"max_size must be positive, got {max_size}")

        self.memento = memento
        self.storage_key = storage_key
        self.max_size = max_size
        self._items: list[str] = []
        self._listeners: list[Listener] = []
        self._lock = Lock()
        self.load()

    def load(self) -> None:
        """Restore persisted keys, dropping duplicates and overflow"""
        self._items = self._truncate(_unique(self.memento.get(self.storage_key)))

    def _truncate(self, keys: list[str]) -> list[str]:
        if self.max_size is None:
            return keys
        return keys[: self.max_size]

    @property
    def items(self) -> list[str]:
        """Copy of the keys, most recent first"""
        return list(self._items)

    def __contains__(self, key: object) -> bool:
        return key in self._items

    def __len__(self) -> int:
        return len(self._items)

    async def add(self, key: str) -> bool:
        """Add a key or move it to the front

        Args:
            key: Identity key

        Returns:
            True if the history changed, False if the key already was the most recent

        Raises:
            HistoryPersistenceError: If the change could not be persisted
        """
        async with self._lock:
            if self._items and self._items[0] == key:
                return False

            updated = self._truncate([key] + [item for item in self._items if item != key])
            await self._commit(updated)
            return True

    async def remove(self, key: str) -> bool:
        """Remove a key

        Args:
            key: Identity key

        Returns:
            True if the key was present and removed, False otherwise

        Raises:
            HistoryPersistenceError: If the change could not be persisted
        """
        async with self._lock:
            if key not in self._items:
                return False

            await self._commit([item for item in self._items if item != key])
            return True

    async def _commit(self, updated: list[str]) -> None:
        await self.memento.update(self.storage_key, updated)
        self._items = updated
        self._fire_did_update()

    def on_did_update(self, listener: Listener) -> Unsubscribe:
        """Register a listener called after every persisted change

        Args:
            listener: Zero-argument callable

        Returns:
            Callable that unregisters the listener
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _fire_did_update(self) -> None:
        for listener in list(self._listeners):
            try:
                listener()
            except Exception:
                logger.exception(f"History listener failed for '{self.storage_key}'")


class NoopHistory:
    """History that never records anything"""

    @property
    def items(self) -> list[str]:
        return []

    async def add(self, key: str) -> bool:
        return False

    async def remove(self, key: str) -> bool:
        return False

    def on_did_update(self, listener: Listener) -> Unsubscribe:
        return lambda: None


def history_storage_key(kind: str, section: str) -> str:
    """Storage key of a history, e.g. ``ports.pinned``"""
    return f"{kind}.{section}"


def open_histories(
    memento: Memento, kind: str, config: ConfigLoader | None = None
) -> tuple[HistoryStore, HistoryStore]:
    """Open the pinned and recent histories of one picker kind

    Args:
        memento: Persistence collaborator shared by all histories
        kind: Picker kind, ``ports`` or ``boards``
        config: Optional configuration loader for the retention limits

    Returns:
        (pinned, recent) stores
    """
    history_config = (config or get_config()).history
    pinned = HistoryStore(
        memento, history_storage_key(kind, Section.PINNED.value), history_config.max_pinned
    )
    recent = HistoryStore(
        memento, history_storage_key(kind, Section.RECENT.value), history_config.max_recent
    )
    return pinned, recent
