# tests/unit/application/services/test_refresher.py

"""Tests for latest-wins refresh coordination"""

# Standard library imports
from asyncio import Event
from asyncio import create_task
from asyncio import run
from asyncio import sleep

# Third party imports
from pytest import raises

# Local imports
from boardlab_picker.application.services import LatestWinsRefresher


class TestLatestWinsRefresher:
    """Test delivery of overlapping refreshes"""

    def test_single_refresh(self):
        """Test that an uncontested result is delivered"""
        delivered = []
        refresher = LatestWinsRefresher(delivered.append)

        async def compute():
            return [1, 2]

        assert run(refresher.refresh(compute)) == [1, 2]
        assert delivered == [[1, 2]]
        assert refresher.generation == 1
        assert not refresher.busy

    def test_stale_result_dropped(self):
        """Test that an older request finishing last is discarded"""
        delivered = []
        refresher = LatestWinsRefresher(delivered.append)

        async def scenario():
            old_gate = Event()
            new_gate = Event()

            async def old():
                await old_gate.wait()
                return "old"

            async def new():
                await new_gate.wait()
                return "new"

            old_task = create_task(refresher.refresh(old))
            await sleep(0)
            new_task = create_task(refresher.refresh(new))
            await sleep(0)
            busy_while_running = refresher.busy

            new_gate.set()
            new_result = await new_task
            busy_after_newest = refresher.busy

            old_gate.set()
            old_result = await old_task
            return busy_while_running, busy_after_newest, new_result, old_result

        busy_while_running, busy_after_newest, new_result, old_result = run(scenario())

        assert busy_while_running
        assert not busy_after_newest
        assert new_result == "new"
        assert old_result is None
        assert delivered == ["new"]

    def test_failure_clears_busy(self):
        """Test that a failing newest request propagates and is no longer busy"""
        refresher = LatestWinsRefresher()

        async def broken():
            raise RuntimeError("catalog unavailable")

        with raises(RuntimeError):
            run(refresher.refresh(broken))
        assert not refresher.busy
