# boardlab_picker/application/processing/history_updates.py

"""Board history rewrites when platforms are installed or removed

After a platform is removed its boards can no longer be resolved, so history
entries pointing at them are replaced by name-only placeholders. After a
platform is installed, placeholders whose name matches the newly resolved
board are replaced by the resolved board.
"""

# Standard library imports
from collections.abc import Sequence
from dataclasses import dataclass
from dataclasses import field
from logging import getLogger

# Local imports
from boardlab_picker.application.processing.identity_keys import create_board_key
from boardlab_picker.application.processing.identity_keys import revive_board
from boardlab_picker.application.processing.name_matcher import find_board_history_matches
from boardlab_picker.core.domain.identity import BoardIdentifier
from boardlab_picker.core.domain.identity import PlatformRef
from boardlab_picker.core.types.protocols import RecentItems
from boardlab_picker.shared.utils.fqbn_utils import matches_platform_id

logger = getLogger(__name__)


@dataclass(slots=True)
class HistoryUpdates:
    """Boards to remove from a history, then boards to add"""

    remove: list[BoardIdentifier] = field(default_factory=list)
    add: list[BoardIdentifier] = field(default_factory=list)

    def __bool__(self) -> bool:
        return bool(self.remove or self.add)


def to_unresolved_board(
    board: BoardIdentifier, platform: PlatformRef | None = None
) -> BoardIdentifier:
    """Name-only copy of a named board, keeping whatever is known about its platform"""
    if platform is not None and (platform.id or platform.name or platform.version):
        return BoardIdentifier(name=board.name, platform=platform)
    return BoardIdentifier(name=board.name)


def collect_history_updates(items: Sequence[BoardIdentifier], platform_id: str) -> HistoryUpdates:
    """Replace resolved boards of a platform with name-only placeholders

    Args:
        items: History entries
        platform_id: Platform that is no longer available, e.g. ``arduino:avr``

    Returns:
        Named resolved entries of that platform to remove, and one placeholder
        per distinct name to add. Entries without a name have nothing to be
        replaced by and are kept.
    """
    updates = HistoryUpdates()
    added_names: set[str] = set()
    for item in items:
        if not item.name.strip() or not item.fqbn:
            continue
        if not matches_platform_id(item.fqbn, platform_id):
            continue
        updates.remove.append(item)
        if item.name not in added_names:
            added_names.add(item.name)
            updates.add.append(BoardIdentifier(name=item.name))
    return updates


class HistoryResolver:
    """Applies board history rewrites to key based history stores

    Stores hold board keys. Keys of resolved boards carry no name, so callers
    that want placeholders named after removed boards pass the boards they
    know about; their names are looked up by key.
    """

    def history_boards(
        self, store: RecentItems, known_boards: Sequence[BoardIdentifier] = ()
    ) -> list[BoardIdentifier]:
        """Revive the entries of a store, filling in names of known boards

        Args:
            store: Board history
            known_boards: Boards whose names should be attached to matching keys

        Returns:
            Boards in history order; undecodable keys are skipped
        """
        names = {create_board_key(board): board.name for board in known_boards if board.name}
        boards = []
        for key in store.items:
            board = revive_board(key)
            if board is None:
                logger.debug(f"Skipping board history key that cannot be decoded: {key!r}")
                continue
            if not board.name and key in names:
                board = board.model_copy(update={"name": names[key]})
            boards.append(board)
        return boards

    async def apply_updates(self, store: RecentItems, updates: HistoryUpdates) -> None:
        """Apply removals first, then additions"""
        for board in updates.remove:
            await store.remove(create_board_key(board))
        for board in updates.add:
            await store.add(create_board_key(board))

    async def resolve_board_history(
        self, stores: Sequence[RecentItems], previous_name: str, resolved: BoardIdentifier
    ) -> int:
        """Replace name-only entries for ``previous_name`` with a resolved board

        Only stores that held a matching placeholder receive the resolved board.

        Args:
            stores: Board histories, e.g. recent and pinned
            previous_name: Name the placeholder entries were recorded under
            resolved: Board the name now resolves to; must have a name and FQBN

        Returns:
            Number of stores that were rewritten
        """
        if not resolved.name or not resolved.fqbn:
            return 0

        entry = BoardIdentifier(name=resolved.name, fqbn=resolved.fqbn)
        rewritten = 0
        for store in stores:
            matches = find_board_history_matches(self.history_boards(store), previous_name)
            if not matches:
                continue
            await self.apply_updates(store, HistoryUpdates(remove=matches, add=[entry]))
            rewritten += 1

        if rewritten:
            logger.info(
                f"Resolved board history '{previous_name}' to {resolved.fqbn} "
                f"in {rewritten} store(s)"
            )
        return rewritten

    async def release_platform(
        self,
        stores: Sequence[RecentItems],
        platform_id: str,
        known_boards: Sequence[BoardIdentifier] = (),
    ) -> int:
        """Turn history entries of a removed platform into name-only placeholders

        Args:
            stores: Board histories
            platform_id: Platform that was removed
            known_boards: Boards of that platform, used to name the placeholders;
                entries with no known name stay as they are

        Returns:
            Number of stores that were rewritten
        """
        rewritten = 0
        for store in stores:
            updates = collect_history_updates(self.history_boards(store, known_boards), platform_id)
            if not updates:
                continue
            await self.apply_updates(store, updates)
            rewritten += 1

        if rewritten:
            logger.info(f"Released board history of platform {platform_id} in {rewritten} store(s)")
        return rewritten
