# boardlab_picker/application/processing/reconciler.py

"""Reconciliation of live catalog entries with pinned and recent history

Every call rebuilds the presentation list from its arguments alone:

1. live candidates are gated by the constraints
2. history keys are brought to their canonical form, then pinned keys and
   recent keys not already pinned become history sections;
   keys that are not live are revived from the key and gated again, keys
   that cannot be revived are skipped
3. remaining live candidates are grouped by category in discovery order
4. an empty result becomes one explanatory placeholder

No state is kept between calls, so a stale in-flight call can simply be
discarded by the caller.
"""

# Standard library imports
from abc import ABC
from abc import abstractmethod
from collections.abc import Iterable
from collections.abc import Mapping
from collections.abc import Sequence
from dataclasses import dataclass
from logging import getLogger

# Local imports
from boardlab_picker.application.processing.constraints import PickConstraints
from boardlab_picker.application.processing.constraints import matches_constraints
from boardlab_picker.application.processing.identity_keys import create_board_key
from boardlab_picker.application.processing.identity_keys import create_port_key
from boardlab_picker.application.processing.identity_keys import revive_board
from boardlab_picker.application.processing.identity_keys import revive_port
from boardlab_picker.core.domain.enums import ItemAction
from boardlab_picker.core.domain.enums import Section
from boardlab_picker.core.domain.identity import BoardIdentifier
from boardlab_picker.core.domain.identity import BoardPickCandidate
from boardlab_picker.core.domain.identity import DetectedPort
from boardlab_picker.core.domain.identity import Port
from boardlab_picker.core.domain.identity import PortPickCandidate
from boardlab_picker.core.domain.presentation import HistoryOnlyItem
from boardlab_picker.core.domain.presentation import LiveItem
from boardlab_picker.core.domain.presentation import PlaceholderItem
from boardlab_picker.infrastructure.config import ConfigLoader
from boardlab_picker.shared.mixins.mixins import ConfigurableMixin

logger = getLogger(__name__)

type ReconciledItem = LiveItem | HistoryOnlyItem | PlaceholderItem


@dataclass(frozen=True, slots=True)
class LiveEntry[C]:
    """A live catalog candidate prepared for reconciliation"""

    key: str
    identity: Port | BoardIdentifier
    candidate: C
    category: str
    port: Port | None = None
    description: str = ""
    detail: str = ""


def unique_keys(keys: Iterable[str]) -> list[str]:
    """Stable de-duplication, first occurrence wins"""
    seen: set[str] = set()
    result = []
    for key in keys:
        if key not in seen:
            seen.add(key)
            result.append(key)
    return result


def item_actions(key: str, pinned_keys: set[str], recent_keys: set[str]) -> tuple[ItemAction, ...]:
    """Actions offered for a key given current history membership"""
    actions = [ItemAction.UNPIN if key in pinned_keys else ItemAction.PIN]
    if key in recent_keys:
        actions.append(ItemAction.REMOVE_FROM_HISTORY)
    return tuple(actions)


class Reconciler[C](ConfigurableMixin, ABC):
    """Domain independent reconciliation; subclasses supply identity hooks"""

    # Plural noun used in placeholders ("No detected ports")
    noun: str = "items"

    def __init__(
        self, config: ConfigLoader | None = None, recent_display_limit: int | None = None
    ) -> None:
        """Initialize with presentation configuration

        Args:
            config: Optional configuration loader
            recent_display_limit: Overrides the configured recent section cap
        """
        self.config = self._init_config(config)
        if recent_display_limit is None:
            recent_display_limit = self.config.presentation.recent_display_limit
        self.recent_display_limit = recent_display_limit

    @abstractmethod
    def revive(self, key: str) -> Port | BoardIdentifier | None:
        """Decode a history key into a stand-in identity"""

    def canonical_key(self, key: str) -> str:
        """Current encoding of a history key, the key itself when it does not decode"""
        identity = self.revive(key)
        if identity is None:
            return key
        return self.encode(identity)

    @abstractmethod
    def encode(self, identity: Port | BoardIdentifier) -> str:
        """Identity key of an identity"""

    @abstractmethod
    def history_candidate(self, identity: Port | BoardIdentifier) -> C:
        """Constraint candidate for a revived identity"""

    @abstractmethod
    def label(self, identity: Port | BoardIdentifier) -> str:
        """Display label of an identity"""

    async def reconcile_entries(
        self,
        entries: Sequence[LiveEntry[C]],
        pinned_keys: Sequence[str],
        recent_keys: Sequence[str],
        constraints: PickConstraints[C] | None = None,
    ) -> list[ReconciledItem]:
        """Build the presentation list from prepared live entries

        Args:
            entries: Live catalog entries in catalog order
            pinned_keys: Pinned history, most relevant first
            recent_keys: Recent history, most recent first
            constraints: Inclusion filters applied to live and revived candidates

        Returns:
            Items in presentation order: pinned, recent, then category groups
        """
        accepted: dict[str, LiveEntry[C]] = {}
        live_keys: set[str] = set()
        for entry in entries:
            live_keys.add(entry.key)
            if entry.key in accepted:
                continue
            if await matches_constraints(entry.candidate, constraints):
                accepted[entry.key] = entry

        pinned = unique_keys(self.canonical_key(key) for key in pinned_keys)
        pinned_set = set(pinned)
        recent_all = unique_keys(self.canonical_key(key) for key in recent_keys)
        recent_set = set(recent_all)
        recent = [key for key in recent_all if key not in pinned_set]

        items: list[ReconciledItem] = []
        shown: set[str] = set()

        for key in pinned:
            item = await self._history_item(
                key, Section.PINNED.value, accepted, live_keys, constraints, pinned_set, recent_set
            )
            if item is not None:
                items.append(item)
                shown.add(key)

        recent_items: list[ReconciledItem] = []
        for key in recent:
            if len(recent_items) >= self.recent_display_limit:
                break
            item = await self._history_item(
                key, Section.RECENT.value, accepted, live_keys, constraints, pinned_set, recent_set
            )
            if item is not None:
                recent_items.append(item)
                shown.add(key)
        items.extend(recent_items)

        groups: dict[str, list[ReconciledItem]] = {}
        for entry in accepted.values():
            if entry.key in shown:
                continue
            groups.setdefault(entry.category, []).append(
                self._live_item(entry, entry.category, pinned_set, recent_set)
            )
        for group in groups.values():
            items.extend(group)

        if not items:
            message = f"No matching {self.noun}" if live_keys else f"No detected {self.noun}"
            return [PlaceholderItem(label=message)]

        return self.finalize(items)

    def finalize(self, items: list[ReconciledItem]) -> list[ReconciledItem]:
        """Hook for domain specific post-processing of a non-empty result"""
        return items

    async def _history_item(
        self,
        key: str,
        section: str,
        accepted: Mapping[str, LiveEntry[C]],
        live_keys: set[str],
        constraints: PickConstraints[C] | None,
        pinned_set: set[str],
        recent_set: set[str],
    ) -> ReconciledItem | None:
        entry = accepted.get(key)
        if entry is not None:
            return self._live_item(entry, section, pinned_set, recent_set)

        if key in live_keys:
            # Live but rejected by the constraints
            return None

        identity = self.revive(key)
        if identity is None:
            logger.debug(f"Skipping history key that cannot be decoded: {key!r}")
            return None

        if not await matches_constraints(self.history_candidate(identity), constraints):
            return None

        return HistoryOnlyItem(
            key=key,
            label=self.label(identity),
            section=section,
            actions=item_actions(key, pinned_set, recent_set),
            identity=identity,
        )

    def _live_item(
        self, entry: LiveEntry[C], section: str, pinned_set: set[str], recent_set: set[str]
    ) -> LiveItem:
        return LiveItem(
            key=entry.key,
            label=self.label(entry.identity),
            section=section,
            description=entry.description,
            detail=entry.detail,
            actions=item_actions(entry.key, pinned_set, recent_set),
            candidate=entry.identity,
            port=entry.port,
        )


def _iter_detected(
    detected_ports: Mapping[str, DetectedPort] | Iterable[DetectedPort],
) -> list[DetectedPort]:
    if isinstance(detected_ports, Mapping):
        return list(detected_ports.values())
    return list(detected_ports)


class PortReconciler(Reconciler[PortPickCandidate]):
    """Reconciles detected ports with pinned/recent port keys, grouped by protocol"""

    noun = "ports"

    def revive(self, key: str) -> Port | None:
        return revive_port(key)

    def encode(self, identity: Port | BoardIdentifier) -> str:
        assert isinstance(identity, Port)
        return create_port_key(identity)

    def history_candidate(self, identity: Port | BoardIdentifier) -> PortPickCandidate:
        assert isinstance(identity, Port)
        return PortPickCandidate(port=identity)

    def label(self, identity: Port | BoardIdentifier) -> str:
        return identity.display_label

    def live_entries(
        self, detected_ports: Mapping[str, DetectedPort] | Iterable[DetectedPort]
    ) -> list[LiveEntry[PortPickCandidate]]:
        """Prepare detected ports; the port key is always recomputed from the port"""
        entries = []
        for detected_port in _iter_detected(detected_ports):
            port = detected_port.port
            description = ""
            detail = ""
            if len(detected_port.boards) == 1:
                description = detected_port.boards[0].display_label
            elif len(detected_port.boards) > 1:
                detail = ", ".join(
                    f"{board.name} ({board.fqbn})" if board.fqbn else board.name
                    for board in detected_port.boards
                )
            entries.append(
                LiveEntry(
                    key=create_port_key(port),
                    identity=port,
                    candidate=PortPickCandidate(port=port, detected_port=detected_port),
                    category=port.protocol,
                    port=port,
                    description=description,
                    detail=detail,
                )
            )
        return entries

    async def reconcile(
        self,
        detected_ports: Mapping[str, DetectedPort] | Iterable[DetectedPort],
        pinned_keys: Sequence[str],
        recent_keys: Sequence[str],
        constraints: PickConstraints[PortPickCandidate] | None = None,
    ) -> list[ReconciledItem]:
        """Reconcile a detected ports snapshot with port history"""
        return await self.reconcile_entries(
            self.live_entries(detected_ports), pinned_keys, recent_keys, constraints
        )


class BoardReconciler(Reconciler[BoardPickCandidate]):
    """Reconciles boards on detected ports (and an optional board catalog) with board history

    Boards are grouped by platform id. Boards sharing a label are told apart
    by their platform name, and boards of deprecated platforms move behind
    the others that share their label.
    """

    noun = "boards"
    unknown_category = "other"

    def revive(self, key: str) -> BoardIdentifier | None:
        return revive_board(key)

    def encode(self, identity: Port | BoardIdentifier) -> str:
        assert isinstance(identity, BoardIdentifier)
        return create_board_key(identity)

    def history_candidate(self, identity: Port | BoardIdentifier) -> BoardPickCandidate:
        assert isinstance(identity, BoardIdentifier)
        return BoardPickCandidate(board=identity)

    def label(self, identity: Port | BoardIdentifier) -> str:
        return identity.display_label

    def live_entries(
        self,
        detected_ports: Mapping[str, DetectedPort] | Iterable[DetectedPort],
        boards: Sequence[BoardIdentifier] = (),
    ) -> list[LiveEntry[BoardPickCandidate]]:
        """Prepare boards attached to detected ports, then catalog boards"""
        entries = []
        for detected_port in _iter_detected(detected_ports):
            port = detected_port.port
            for board in detected_port.boards:
                entries.append(
                    LiveEntry(
                        key=create_board_key(board),
                        identity=board,
                        candidate=BoardPickCandidate(board=board, port=port),
                        category=board.platform_id or self.unknown_category,
                        port=port,
                        description=f"on {port.address}",
                    )
                )
        for board in boards:
            entries.append(
                LiveEntry(
                    key=create_board_key(board),
                    identity=board,
                    candidate=BoardPickCandidate(board=board),
                    category=board.platform_id or self.unknown_category,
                )
            )
        return entries

    async def reconcile(
        self,
        detected_ports: Mapping[str, DetectedPort] | Iterable[DetectedPort],
        pinned_keys: Sequence[str],
        recent_keys: Sequence[str],
        constraints: PickConstraints[BoardPickCandidate] | None = None,
        boards: Sequence[BoardIdentifier] = (),
    ) -> list[ReconciledItem]:
        """Reconcile attached and catalog boards with board history"""
        return await self.reconcile_entries(
            self.live_entries(detected_ports, boards), pinned_keys, recent_keys, constraints
        )

    def finalize(self, items: list[ReconciledItem]) -> list[ReconciledItem]:
        positions_by_label: dict[str, list[int]] = {}
        for index, item in enumerate(items):
            if isinstance(item, LiveItem) and isinstance(item.candidate, BoardIdentifier):
                positions_by_label.setdefault(item.label, []).append(index)

        result = list(items)
        for positions in positions_by_label.values():
            if len(positions) < 2:
                continue
            group = []
            for index in positions:
                item = result[index]
                assert isinstance(item, LiveItem) and isinstance(item.candidate, BoardIdentifier)
                platform = item.candidate.platform
                if platform is not None and platform.name:
                    item = item.model_copy(update={"description": platform.name})
                group.append(item)
            group.sort(key=lambda item: _is_deprecated(item))
            for index, item in zip(positions, group):
                result[index] = item
        return result


def _is_deprecated(item: LiveItem) -> bool:
    board = item.candidate
    return (
        isinstance(board, BoardIdentifier)
        and board.platform is not None
        and board.platform.is_deprecated
    )
