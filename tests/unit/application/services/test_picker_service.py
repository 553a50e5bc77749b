# tests/unit/application/services/test_picker_service.py

"""Tests for the picker service"""

# Standard library imports
from asyncio import run
from asyncio import sleep

# Third party imports
from pytest import raises

# Local imports
from boardlab_picker.application.processing.reconciler import BoardReconciler
from boardlab_picker.application.processing.reconciler import PortReconciler
from boardlab_picker.application.services import PickerService
from boardlab_picker.core.domain.enums import ItemAction
from boardlab_picker.core.domain.identity import DetectedPort
from boardlab_picker.core.domain.identity import Port
from boardlab_picker.core.domain.presentation import PlaceholderItem
from boardlab_picker.infrastructure.catalog import StaticCatalog
from boardlab_picker.infrastructure.persistence import InMemoryMemento
from boardlab_picker.infrastructure.persistence import open_histories

COM1_KEY = "arduino+serial://COM1"


async def settle() -> None:
    """Let scheduled refresh tasks run"""
    for _ in range(5):
        await sleep(0)


def make_service(config, catalog=None, on_items=None, reconciler=None, **kwargs):
    pinned, recent = open_histories(InMemoryMemento(), "ports", config)
    return PickerService(
        catalog or StaticCatalog(),
        reconciler or PortReconciler(config),
        pinned,
        recent,
        on_items=on_items,
        **kwargs,
    )


class TestRefresh:
    """Test one-shot reconciliation"""

    def test_refresh_publishes(self, default_config):
        """Test that a refresh publishes its items"""
        published = []
        catalog = StaticCatalog([DetectedPort(port=Port(protocol="serial", address="COM1"))])
        service = make_service(default_config, catalog, on_items=published.append)

        items = run(service.refresh())

        assert [item.key for item in items] == [COM1_KEY]
        assert service.items == items
        assert published == [items]

    def test_board_service_uses_board_catalog(self, default_config, uno):
        """Test that board services pass their board catalog"""
        service = make_service(
            default_config, reconciler=BoardReconciler(default_config), boards=[uno]
        )

        items = run(service.refresh())

        assert [item.label for item in items] == ["Arduino Uno"]


class TestSubscriptions:
    """Test refreshes triggered by change notifications"""

    def test_catalog_change_triggers_refresh(self, default_config):
        """Test that catalog and history changes republish the items"""
        published = []
        catalog = StaticCatalog()
        service = make_service(default_config, catalog, on_items=published.append)

        async def scenario():
            service.start()
            await settle()
            catalog.set_detected_ports([DetectedPort(port=Port(protocol="serial", address="COM1"))])
            await settle()
            await service.pin(COM1_KEY)
            await settle()
            service.dispose()

        run(scenario())

        assert published[0] == [PlaceholderItem(label="No detected ports")]
        assert [item.section for item in published[1]] == ["serial"]
        assert [item.section for item in published[-1]] == ["pinned"]

    def test_dispose_stops_updates(self, default_config):
        """Test that no refresh runs after dispose"""
        published = []
        catalog = StaticCatalog()
        service = make_service(default_config, catalog, on_items=published.append)

        async def scenario():
            service.start()
            await settle()
            service.dispose()
            catalog.set_detected_ports([DetectedPort(port=Port(protocol="serial", address="COM1"))])
            await settle()

        run(scenario())

        assert len(published) == 1

    def test_start_without_loop(self, default_config):
        """Test that starting outside an event loop only subscribes"""
        service = make_service(default_config)

        service.start()
        service.dispose()

        assert service.items == []


class TestHistoryActions:
    """Test history edits through the service"""

    def test_actions(self, default_config):
        """Test pin, unpin, selection and removal"""
        service = make_service(default_config)

        async def scenario():
            assert await service.apply_action(ItemAction.PIN, COM1_KEY)
            assert await service.record_selection(COM1_KEY)
            assert not await service.record_selection(COM1_KEY)
            assert await service.apply_action(ItemAction.UNPIN, COM1_KEY)
            assert await service.apply_action(ItemAction.REMOVE_FROM_HISTORY, COM1_KEY)

        run(scenario())

        assert service.pinned.items == []
        assert service.recent.items == []

    def test_unknown_action(self, default_config):
        """Test that unknown actions are rejected"""
        service = make_service(default_config)

        with raises(ValueError):
            run(service.apply_action("explode", COM1_KEY))

    def test_legacy_key_unpinned(self, default_config):
        """Test that unpinning a canonical key removes its legacy spelling"""
        service = make_service(default_config)

        async def scenario():
            await service.pinned.add("serial:COM1")
            assert await service.unpin(COM1_KEY)

        run(scenario())

        assert service.pinned.items == []

    def test_selection_replaces_legacy_key(self, default_config):
        """Test that a selection stores the canonical key once"""
        service = make_service(default_config)

        async def scenario():
            await service.recent.add("serial:COM1")
            assert await service.record_selection("serial:COM1")

        run(scenario())

        assert service.recent.items == [COM1_KEY]
