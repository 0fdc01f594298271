"""Query state: page, committed search and ordering."""

from dataclasses import dataclass

from .models import ORDERABLE_FIELDS, QueryParams


@dataclass
class QueryState:
    """The three independent query dimensions and the raw search input.

    Attributes:
        raw_input_text: Text currently in the search field (not yet committed)
        committed_search: Search text in effect for the remote query
        ordering: Active sortable field key (None = remote default order)
        page: Zero-based page index
    """

    raw_input_text: str | None = None
    committed_search: str | None = None
    ordering: str | None = None
    page: int = 0

    @property
    def params(self) -> QueryParams:
        """Request parameters derived from the current state."""
        return QueryParams.for_page(
            self.page, search=self.committed_search, ordering=self.ordering
        )

    def set_input_text(self, text: str) -> None:
        self.raw_input_text = text

    def commit_search(self, text: str) -> None:
        """Make text the active search filter and go back to the first page.

        Args:
            text: Search text to commit ("" clears the filter)
        """
        self.committed_search = text
        self.page = 0

    def set_ordering(self, field: str) -> None:
        """Toggle ordering on field.

        Selecting the active field clears ordering; any other orderable
        field replaces it. The page is kept as is.

        Args:
            field: Sortable field key

        Raises:
            ValueError: If field is not orderable
        """
        if field not in ORDERABLE_FIELDS:
            raise ValueError(f"{field!r} is not an orderable field")

        self.ordering = None if self.ordering == field else field

    def set_page(self, page: int) -> None:
        """Jump to a page.

        Pages past the last one are accepted; the remote endpoint answers
        them with an empty result.

        Args:
            page: Zero-based page index

        Raises:
            ValueError: If page is negative
        """
        if page < 0:
            raise ValueError(f"page must not be negative, got {page}")
        self.page = page
