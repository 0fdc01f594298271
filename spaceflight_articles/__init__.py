"""Spaceflight Articles browser.

Query-and-fetch orchestration for a paginated, searchable, sortable list of
articles served by the Spaceflight News API:
- ArticleListController: Entry point for a presentation layer
- ListFetcher: Fetch cycles with a last-issued-wins staleness guard
- Debouncer: Commits typed search text once input pauses
- QueryState: Page, committed search and ordering
- ArticlesClient: Remote reads of the article list endpoint
"""

from .client import ArticlesClient
from .config import PAGE_SIZE, ClientConfig, get_client_config
from .controller import ArticleListController
from .debounce import Debouncer
from .fetcher import ListFetcher
from .models import (
    COLUMNS,
    ORDERABLE_FIELDS,
    Article,
    ArticlesPage,
    Column,
    FetchFailure,
    QueryParams,
    ResultState,
    max_page,
)
from .query_state import QueryState

__all__ = [
    "PAGE_SIZE",
    "COLUMNS",
    "ORDERABLE_FIELDS",
    "Article",
    "ArticleListController",
    "ArticlesClient",
    "ArticlesPage",
    "ClientConfig",
    "Column",
    "Debouncer",
    "FetchFailure",
    "ListFetcher",
    "QueryParams",
    "QueryState",
    "ResultState",
    "get_client_config",
    "max_page",
]
