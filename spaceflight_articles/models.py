"""Data models for the Spaceflight Articles browser.

This module defines the core data structures used throughout the library:
- Article: A single row of the remote article list
- ArticlesPage: The paginated response envelope
- QueryParams: The fetch key sent to the remote endpoint
- ResultState: The latest fetch outcome read by the presentation layer
- Column: Table column descriptors and the ordering whitelist
- FetchFailure: The single error kind of the remote boundary
"""

import math
from dataclasses import dataclass, field
from datetime import datetime
from typing import Literal

from .config import PAGE_SIZE

OrderingField = Literal["published_at", "updated_at"]
ResultStatus = Literal["loading", "error", "empty", "ready"]


@dataclass(frozen=True)
class Column:
    """Describes one column of the article table.

    Attributes:
        key: Article attribute shown in the column
        label: Human-readable header text
        is_orderable: Whether the remote endpoint accepts the key as ordering
    """

    key: str
    label: str
    is_orderable: bool = False


COLUMNS: tuple[Column, ...] = (
    Column("title", "Title"),
    Column("summary", "Summary"),
    Column("news_site", "News site"),
    Column("published_at", "Published at", is_orderable=True),
    Column("updated_at", "Updated at", is_orderable=True),
)

ORDERABLE_FIELDS: frozenset[str] = frozenset(
    column.key for column in COLUMNS if column.is_orderable
)


@dataclass(frozen=True)
class Article:
    """Represents a single article returned by the list endpoint.

    Attributes:
        id: Unique identifier assigned by the remote API
        title: Article headline
        summary: Short description
        news_site: Name of the publishing site
        published_at: Publication instant (timezone-aware)
        updated_at: Last modification instant (timezone-aware)
    """

    id: int
    title: str
    summary: str
    news_site: str
    published_at: datetime
    updated_at: datetime


@dataclass(frozen=True)
class ArticlesPage:
    """Response envelope of one remote read.

    Attributes:
        count: Total number of articles matching the query
        results: Articles on the requested page
        next: URL of the next page, if any
        previous: URL of the previous page, if any
    """

    count: int
    results: list[Article]
    next: str | None = None
    previous: str | None = None


@dataclass(frozen=True)
class QueryParams:
    """Request parameters for one fetch cycle.

    Instances are hashable and compare by value, so they double as the
    fetch key: two equal instances describe the same remote read.

    Attributes:
        offset: Index of the first article (a multiple of PAGE_SIZE)
        search: Free-text filter (None or "" = unfiltered)
        ordering: Sortable field key (None = remote default order)
    """

    offset: int = 0
    search: str | None = None
    ordering: str | None = None

    def __post_init__(self) -> None:
        if self.offset < 0 or self.offset % PAGE_SIZE:
            raise ValueError(
                f"offset must be a non-negative multiple of {PAGE_SIZE}, "
                f"got {self.offset}"
            )
        if self.ordering is not None and self.ordering not in ORDERABLE_FIELDS:
            raise ValueError(f"{self.ordering!r} is not an orderable field")

    @classmethod
    def for_page(
        cls,
        page: int,
        search: str | None = None,
        ordering: str | None = None,
    ) -> "QueryParams":
        """Build parameters for a zero-based page index."""
        return cls(offset=page * PAGE_SIZE, search=search, ordering=ordering)

    @property
    def page(self) -> int:
        return self.offset // PAGE_SIZE

    def to_request_params(self) -> dict:
        """Render the query string for the remote endpoint.

        Returns:
            Dictionary of query parameters; empty search and unset ordering
            are omitted
        """
        params: dict = {"offset": self.offset, "limit": PAGE_SIZE}

        if self.search:
            params["search"] = self.search

        if self.ordering:
            params["ordering"] = self.ordering

        return params


def max_page(total_count: int) -> int:
    """Number of pages needed to show total_count articles."""
    return math.ceil(total_count / PAGE_SIZE)


@dataclass(frozen=True)
class ResultState:
    """Latest materialized outcome of the fetch cycle.

    items and total_count always come from the same response.

    Attributes:
        items: Articles of the current page
        total_count: Total number of matching articles
        is_loading: Whether a fetch cycle is in flight
        is_error: Whether the latest applied fetch cycle failed
    """

    items: list[Article] = field(default_factory=list)
    total_count: int = 0
    is_loading: bool = False
    is_error: bool = False

    @property
    def max_page(self) -> int:
        return max_page(self.total_count)

    @property
    def status(self) -> ResultStatus:
        """What the presentation layer should show, in priority order."""
        if self.is_loading:
            return "loading"
        if self.is_error:
            return "error"
        if not self.items:
            return "empty"
        return "ready"


class FetchFailure(Exception):
    """A remote read did not produce a usable page.

    Covers network failures, non-success responses and malformed payloads
    alike; callers treat every instance the same way.

    Attributes:
        message: Human-readable error description
        status_code: HTTP status when the server answered, else None
    """

    def __init__(self, message: str, status_code: int | None = None) -> None:
        self.message = message
        self.status_code = status_code
        super().__init__(message)
