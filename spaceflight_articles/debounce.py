"""
Debounced search input.

Collapses a rapid stream of text-input events into a single committed value
once the user stops typing for a quiet period.
"""

import asyncio
import logging
from typing import Callable, Optional

from .config import DEBOUNCE_DELAY_SECONDS

logger = logging.getLogger(__name__)


class Debouncer:
    """
    Delays committing typed text until input pauses.

    Every notify() cancels the pending commit and schedules a new one, so a
    burst of input commits exactly once, with the last value. Must be used
    from within a running event loop.
    """

    def __init__(
        self,
        on_commit: Callable[[str], None],
        delay: float = DEBOUNCE_DELAY_SECONDS,
    ):
        """
        Initialize a debouncer.

        Args:
            on_commit: Called with the text once the quiet period elapses
            delay: Time in seconds to wait after the last input before committing
        """
        self.delay = delay
        self._on_commit = on_commit
        self._task: Optional[asyncio.Task] = None
        self._closed = False

    @property
    def pending(self) -> bool:
        """Whether a commit is currently scheduled."""
        return self._task is not None and not self._task.done()

    def notify(self, text: str) -> None:
        """
        Record new input and restart the quiet-period timer.

        Args:
            text: Current content of the search field
        """
        if self._closed:
            logger.debug("Ignoring input after teardown")
            return

        self._cancel_pending()
        self._task = asyncio.get_running_loop().create_task(self._delayed_commit(text))
        logger.debug(f"Search commit scheduled in {self.delay:.2f}s")

    def cancel(self) -> None:
        """Release the pending timer; no commit fires afterwards."""
        self._closed = True
        self._cancel_pending()

    def _cancel_pending(self) -> None:
        if self._task is not None:
            self._task.cancel()
            self._task = None

    async def _delayed_commit(self, text: str) -> None:
        await asyncio.sleep(self.delay)
        self._task = None
        logger.debug(f"Committing search text {text!r}")
        self._on_commit(text)
