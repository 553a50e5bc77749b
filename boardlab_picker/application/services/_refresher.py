# boardlab_picker/application/services/_refresher.py

"""Latest-wins coordination of overlapping asynchronous refreshes"""

# Standard library imports
from collections.abc import Awaitable
from collections.abc import Callable
from logging import getLogger

logger = getLogger(__name__)


class LatestWinsRefresher[R]:
    """Hands only the result of the most recently started request to its sink

    Each request is stamped with a generation number. A request that finishes
    after a newer one was started is dropped, whatever the completion order.
    """

    def __init__(self, sink: Callable[[R], None] | None = None) -> None:
        """Initialize the refresher

        Args:
            sink: Receives each result that is still current when it completes
        """
        self._sink = sink
        self._generation = 0
        self._busy = False

    @property
    def generation(self) -> int:
        return self._generation

    @property
    def busy(self) -> bool:
        """True while the newest request is in flight"""
        return self._busy

    async def refresh(self, compute: Callable[[], Awaitable[R]]) -> R | None:
        """Run a request and deliver its result if no newer request started meanwhile

        Args:
            compute: Zero-argument coroutine function producing the result

        Returns:
            The result if it was current, None if it was superseded

        Raises:
            Exception: Whatever ``compute`` raises
        """
        self._generation += 1
        generation = self._generation
        self._busy = True
        try:
            result = await compute()
        finally:
            if generation == self._generation:
                self._busy = False

        if generation != self._generation:
            logger.debug(f"Dropping stale refresh result {generation} (latest {self._generation})")
            return None

        if self._sink is not None:
            self._sink(result)
        return result
