"""List fetcher: runs fetch cycles and owns the result state.

Each fetch cycle is numbered when it is issued. Only the completion of the
most recently issued cycle is applied, so a slow response to an older query
can never overwrite the result of a newer one.
"""

import asyncio
import logging
from dataclasses import replace
from typing import Callable, Optional, Protocol

from .models import ArticlesPage, FetchFailure, QueryParams, ResultState

logger = logging.getLogger(__name__)


class ArticleSource(Protocol):
    """Anything that can read one page of articles (blocking)."""

    def list_articles(self, params: QueryParams) -> ArticlesPage: ...


class ListFetcher:
    """Issues remote reads and reconciles their outcomes into ResultState."""

    def __init__(
        self,
        source: ArticleSource,
        on_change: Optional[Callable[[ResultState], None]] = None,
    ) -> None:
        """Initialize ListFetcher.

        Args:
            source: Blocking article reader, run off the event loop
            on_change: Called with the new state after every state change
        """
        self._source = source
        self._on_change = on_change
        self._state = ResultState()
        self._sequence = 0
        self._last_params: QueryParams | None = None

    @property
    def state(self) -> ResultState:
        return self._state

    @property
    def last_params(self) -> QueryParams | None:
        """Parameters of the most recently issued fetch cycle."""
        return self._last_params

    def should_fetch(self, params: QueryParams) -> bool:
        return params != self._last_params

    def request(self, params: QueryParams) -> Optional[asyncio.Task]:
        """Start a fetch cycle unless params equal the last issued ones.

        The loading flag is set before this returns; the remote read runs
        in the returned task.

        Args:
            params: Parameters of the page to read

        Returns:
            The task running the cycle, or None for a repeated tuple
        """
        if not self.should_fetch(params):
            logger.debug(f"Skipping fetch, parameters unchanged: {params}")
            return None

        sequence = self._begin(params)
        return asyncio.get_running_loop().create_task(self._run(sequence, params))

    async def fetch(self, params: QueryParams) -> ResultState:
        """Run one fetch cycle to completion.

        Failures never propagate; they are reported through is_error.

        Args:
            params: Parameters of the page to read

        Returns:
            The result state after the cycle (unchanged if the cycle was
            superseded while in flight)
        """
        sequence = self._begin(params)
        await self._run(sequence, params)
        return self._state

    def _begin(self, params: QueryParams) -> int:
        self._sequence += 1
        self._last_params = params
        logger.debug(f"Fetch cycle {self._sequence} issued: {params}")
        self._set_state(replace(self._state, is_loading=True))
        return self._sequence

    async def _run(self, sequence: int, params: QueryParams) -> None:
        try:
            page = await asyncio.to_thread(self._source.list_articles, params)
        except FetchFailure as e:
            if self._is_stale(sequence):
                return
            logger.warning(f"Fetch cycle {sequence} failed: {e.message}")
            self._set_state(ResultState(is_error=True))
            return
        except Exception:
            if self._is_stale(sequence):
                return
            logger.exception(f"Fetch cycle {sequence} failed unexpectedly")
            self._set_state(ResultState(is_error=True))
            return

        if self._is_stale(sequence):
            return

        self._set_state(
            ResultState(items=list(page.results), total_count=page.count)
        )

    def _is_stale(self, sequence: int) -> bool:
        if sequence != self._sequence:
            logger.debug(
                f"Discarding fetch cycle {sequence}, superseded by {self._sequence}"
            )
            return True
        return False

    def _set_state(self, state: ResultState) -> None:
        self._state = state
        if self._on_change is not None:
            self._on_change(state)
