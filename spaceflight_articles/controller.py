"""Article list controller.

Wires the debouncer, the query state and the list fetcher together and is
the only object a presentation layer talks to. Inbound calls: notify(),
set_ordering(), set_page(). Outbound state: query, result, max_page, plus
change notifications through subscribe().
"""

import asyncio
import logging
from typing import Callable, Optional

from .client import ArticlesClient
from .config import DEBOUNCE_DELAY_SECONDS, ClientConfig, get_client_config
from .debounce import Debouncer
from .fetcher import ArticleSource, ListFetcher
from .models import ResultState
from .query_state import QueryState

logger = logging.getLogger(__name__)


class ArticleListController:
    """
    Translates user intent into remote queries and exposes their outcome.

    Any inbound call that changes the (offset, search, ordering) tuple starts
    exactly one fetch cycle; calls that leave it unchanged are no-ops. All
    methods must be called from the event loop that runs the controller.
    """

    def __init__(
        self,
        source: ArticleSource,
        debounce_delay: float = DEBOUNCE_DELAY_SECONDS,
    ):
        """
        Initialize the controller.

        Args:
            source: Article reader used for every fetch cycle
            debounce_delay: Quiet period in seconds before typed text is committed
        """
        self.query = QueryState()
        self._fetcher = ListFetcher(source, on_change=self._on_result_change)
        self._debouncer = Debouncer(self._commit_search, delay=debounce_delay)
        self._subscribers: list[Callable[["ArticleListController"], None]] = []
        self._tasks: set[asyncio.Task] = set()
        self._closed = False

    @classmethod
    def from_config(
        cls, config: Optional[ClientConfig] = None
    ) -> "ArticleListController":
        """Build a controller talking to the configured remote endpoint."""
        config = config or get_client_config()
        client = ArticlesClient(
            base_url=config.base_url, timeout=config.request_timeout
        )
        return cls(client, debounce_delay=config.debounce_delay)

    @property
    def result(self) -> ResultState:
        return self._fetcher.state

    @property
    def max_page(self) -> int:
        return self._fetcher.state.max_page

    @property
    def closed(self) -> bool:
        return self._closed

    def subscribe(self, callback: Callable[["ArticleListController"], None]):
        """
        Subscribe to result changes.

        Args:
            callback: Called with the controller after every ResultState change

        Returns:
            A function that removes the subscription
        """
        self._subscribers.append(callback)
        return lambda: self._subscribers.remove(callback)

    # Inbound calls from the presentation layer

    def start(self) -> None:
        """Issue the initial fetch (first page, no search, default order)."""
        self._refresh()

    def notify(self, text: str) -> None:
        """Record search field input; it is committed once typing pauses."""
        self.query.set_input_text(text)
        self._debouncer.notify(text)

    def set_ordering(self, field: str) -> None:
        """Toggle ordering on a sortable column."""
        self.query.set_ordering(field)
        self._refresh()

    def set_page(self, page: int) -> None:
        self.query.set_page(page)
        self._refresh()

    # Lifecycle

    async def wait_idle(self) -> None:
        """Wait until no fetch cycle is in flight."""
        while self._tasks:
            await asyncio.gather(*list(self._tasks), return_exceptions=True)

    def close(self) -> None:
        """
        Tear the controller down.

        Cancels the pending search commit and abandons in-flight fetch cycles.
        Further inbound calls still update the query state but fetch nothing.
        """
        if self._closed:
            return
        self._closed = True
        self._debouncer.cancel()
        for task in list(self._tasks):
            task.cancel()
        logger.debug("Article list controller closed")

    async def __aenter__(self):
        self.start()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        self.close()
        await self.wait_idle()

    # Internals

    def _commit_search(self, text: str) -> None:
        self.query.commit_search(text)
        self._refresh()

    def _refresh(self) -> None:
        if self._closed:
            return

        task = self._fetcher.request(self.query.params)
        if task is None:
            return

        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)

    def _on_result_change(self, state: ResultState) -> None:
        for callback in list(self._subscribers):
            try:
                callback(self)
            except Exception:
                logger.exception("Result subscriber failed")
