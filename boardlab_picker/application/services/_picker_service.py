# boardlab_picker/application/services/_picker_service.py

"""Picker service wiring a catalog, history stores and a reconciler.

The service keeps the latest reconciled item list current: catalog change
notifications and history updates each trigger a new reconciliation pass,
and only the newest pass is published.
"""

# Standard library imports
from asyncio import Task
from asyncio import get_running_loop
from collections.abc import Callable
from collections.abc import Sequence
from logging import getLogger

# Local imports
from boardlab_picker.application.processing.constraints import PickConstraints
from boardlab_picker.application.processing.reconciler import BoardReconciler
from boardlab_picker.application.processing.reconciler import ReconciledItem
from boardlab_picker.application.processing.reconciler import Reconciler
from boardlab_picker.application.services._refresher import LatestWinsRefresher
from boardlab_picker.core.domain.enums import ItemAction
from boardlab_picker.core.domain.identity import BoardIdentifier
from boardlab_picker.core.types.aliases import Unsubscribe
from boardlab_picker.core.types.protocols import CatalogProvider
from boardlab_picker.core.types.protocols import RecentItems

logger = getLogger(__name__)


class PickerService:
    """Application service behind one picker (ports or boards).

    Subscriptions are only active between ``start`` and ``dispose``; a
    one-shot caller can call ``refresh`` directly.
    """

    def __init__(
        self,
        catalog: CatalogProvider,
        reconciler: Reconciler,
        pinned: RecentItems,
        recent: RecentItems,
        constraints: PickConstraints | None = None,
        boards: Sequence[BoardIdentifier] = (),
        on_items: Callable[[list[ReconciledItem]], None] | None = None,
    ) -> None:
        """Initialize the service.

        Args:
            catalog: Source of detected ports
            reconciler: Port or board reconciler
            pinned: Pinned history of identity keys
            recent: Recent history of identity keys
            constraints: Inclusion filters for the picker
            boards: Additional board catalog, used by board reconcilers only
            on_items: Called with every published item list
        """
        self.catalog = catalog
        self.reconciler = reconciler
        self.pinned = pinned
        self.recent = recent
        self.constraints = constraints
        self.boards = list(boards)
        self._on_items = on_items
        self._items: list[ReconciledItem] = []
        self._refresher: LatestWinsRefresher[list[ReconciledItem]] = LatestWinsRefresher(
            self._publish
        )
        self._subscriptions: list[Unsubscribe] = []
        self._tasks: set[Task] = set()

    @property
    def items(self) -> list[ReconciledItem]:
        """Latest published item list"""
        return list(self._items)

    @property
    def busy(self) -> bool:
        """True while the newest reconciliation pass is running"""
        return self._refresher.busy

    def _publish(self, items: list[ReconciledItem]) -> None:
        self._items = items
        if self._on_items is not None:
            self._on_items(list(items))

    async def _reconcile(self) -> list[ReconciledItem]:
        detected_ports = self.catalog.detected_ports()
        pinned = self.pinned.items
        recent = self.recent.items
        if isinstance(self.reconciler, BoardReconciler):
            return await self.reconciler.reconcile(
                detected_ports, pinned, recent, self.constraints, boards=self.boards
            )
        return await self.reconciler.reconcile(detected_ports, pinned, recent, self.constraints)

    async def refresh(self) -> list[ReconciledItem] | None:
        """Run a reconciliation pass

        Returns:
            The new item list, or None if a newer pass superseded this one
        """
        return await self._refresher.refresh(self._reconcile)

    def start(self) -> None:
        """Subscribe to catalog and history changes and schedule a first pass"""
        if self._subscriptions:
            return
        self._subscriptions = [
            self.catalog.on_did_change(self._schedule_refresh),
            self.pinned.on_did_update(self._schedule_refresh),
            self.recent.on_did_update(self._schedule_refresh),
        ]
        self._schedule_refresh()

    def dispose(self) -> None:
        """Drop subscriptions and cancel pending passes"""
        for unsubscribe in self._subscriptions:
            unsubscribe()
        self._subscriptions = []
        for task in list(self._tasks):
            task.cancel()
        self._tasks.clear()

    def _schedule_refresh(self) -> None:
        try:
            loop = get_running_loop()
        except RuntimeError:
            logger.debug("No running event loop, refresh not scheduled")
            return
        task = loop.create_task(self.refresh())
        self._tasks.add(task)
        task.add_done_callback(self._task_done)

    def _task_done(self, task: Task) -> None:
        self._tasks.discard(task)
        if task.cancelled():
            return
        error = task.exception()
        if error is not None:
            logger.error(f"Picker refresh failed: {error}", exc_info=error)

    # ------------------------------------------------------------------
    # History actions
    # ------------------------------------------------------------------

    def _aliases(self, store: RecentItems, key: str) -> list[str]:
        """Stored keys that encode the same identity as ``key``"""
        return [item for item in store.items if self.reconciler.canonical_key(item) == key]

    async def _add(self, store: RecentItems, key: str) -> bool:
        key = self.reconciler.canonical_key(key)
        changed = await store.add(key)
        for alias in self._aliases(store, key):
            if alias != key:
                changed = await store.remove(alias) or changed
        return changed

    async def _remove(self, store: RecentItems, key: str) -> bool:
        changed = False
        for alias in self._aliases(store, self.reconciler.canonical_key(key)):
            changed = await store.remove(alias) or changed
        return changed

    async def record_selection(self, key: str) -> bool:
        """Move a picked identity to the front of the recent history

        Keys are stored in their canonical form; legacy spellings of the same
        identity are dropped.
        """
        return await self._add(self.recent, key)

    async def pin(self, key: str) -> bool:
        return await self._add(self.pinned, key)

    async def unpin(self, key: str) -> bool:
        return await self._remove(self.pinned, key)

    async def forget(self, key: str) -> bool:
        """Remove an identity, under any of its spellings, from the recent history"""
        return await self._remove(self.recent, key)

    async def apply_action(self, action: ItemAction, key: str) -> bool:
        """Run the history action offered on an item

        Args:
            action: Action picked by the user
            key: Identity key of the item

        Returns:
            True if a history changed
        """
        match action:
            case ItemAction.PIN:
                return await self.pin(key)
            case ItemAction.UNPIN:
                return await self.unpin(key)
            case ItemAction.REMOVE_FROM_HISTORY:
                return await self.forget(key)
        raise ValueError(f"Unknown item action: {action!r}")
