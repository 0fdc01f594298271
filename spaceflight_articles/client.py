"""Spaceflight News API client for reading the article list."""

from datetime import datetime

import requests

from .config import DEFAULT_BASE_URL, REQUEST_TIMEOUT_SECONDS, ARTICLES_PATH
from .models import Article, ArticlesPage, FetchFailure, QueryParams


class ArticlesClient:
    """Client for the read-only article list endpoint.

    Attributes:
        articles_url: Full URL of the list endpoint
        timeout: Transport timeout in seconds
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = REQUEST_TIMEOUT_SECONDS,
    ) -> None:
        """Initialize ArticlesClient.

        Args:
            base_url: Scheme and host of the API
            timeout: Transport timeout for each request, in seconds
        """
        self.articles_url = base_url.rstrip("/") + ARTICLES_PATH
        self.timeout = timeout

    def list_articles(self, params: QueryParams) -> ArticlesPage:
        """Fetch one page of articles.

        Args:
            params: Offset, search and ordering of the page to read

        Returns:
            ArticlesPage with the total count and the page's articles

        Raises:
            FetchFailure: If the request fails, the server answers with a
                non-success status or the payload cannot be parsed
        """
        try:
            response = requests.get(
                self.articles_url,
                params=params.to_request_params(),
                timeout=self.timeout,
            )

            if not response.ok:
                raise FetchFailure(
                    f"Article list request failed with status {response.status_code}",
                    status_code=response.status_code,
                )

            return self._parse_response(response.json())

        except FetchFailure:
            raise
        except Exception as e:
            raise FetchFailure(str(e)) from e

    def _parse_response(self, data: dict) -> ArticlesPage:
        """Parse the response envelope into an ArticlesPage.

        Args:
            data: Decoded JSON body of the list endpoint

        Returns:
            ArticlesPage object

        Raises:
            FetchFailure: If required fields are missing or mistyped
        """
        if not isinstance(data, dict):
            raise FetchFailure("Response body is not an object")

        count = data.get("count")
        results = data.get("results")
        if not isinstance(count, int) or count < 0:
            raise FetchFailure(f"Invalid article count: {count!r}")
        if not isinstance(results, list):
            raise FetchFailure("Response has no results list")

        return ArticlesPage(
            count=count,
            results=[self._parse_article(item) for item in results],
            next=data.get("next"),
            previous=data.get("previous"),
        )

    def _parse_article(self, item: dict) -> Article:
        return Article(
            id=item["id"],
            title=item["title"],
            summary=item.get("summary") or "",
            news_site=item["news_site"],
            published_at=_parse_instant(item["published_at"]),
            updated_at=_parse_instant(item["updated_at"]),
        )


def _parse_instant(value: str) -> datetime:
    """Parse an ISO 8601 instant, accepting a trailing 'Z'."""
    parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    if parsed.tzinfo is None:
        raise ValueError(f"Timestamp without timezone: {value!r}")
    return parsed
