"""Tests for ArticlesClient."""

from datetime import datetime, timezone
from unittest.mock import MagicMock, patch

import pytest
import requests

from spaceflight_articles.client import ArticlesClient
from spaceflight_articles.models import FetchFailure, QueryParams


def create_article_payload(article_id: int) -> dict:
    """Helper to create one article as served by the API."""
    return {
        "id": article_id,
        "title": f"Launch {article_id}",
        "url": f"https://example.com/{article_id}",
        "image_url": "https://example.com/image.jpg",
        "news_site": "SpaceNews",
        "summary": "A rocket went up.",
        "published_at": "2024-05-01T12:00:00Z",
        "updated_at": "2024-05-02T08:30:00.123456Z",
        "featured": False,
        "launches": [],
        "events": [],
    }


def create_mock_response(body, status_code: int = 200) -> MagicMock:
    mock_response = MagicMock()
    mock_response.status_code = status_code
    mock_response.ok = status_code < 400
    mock_response.json.return_value = body
    return mock_response


class TestListArticles:
    """Test ArticlesClient.list_articles() method."""

    def test_returns_page_with_count_and_articles(self) -> None:
        """Should parse the envelope into an ArticlesPage."""
        body = {
            "count": 25,
            "next": "https://api.spaceflightnewsapi.net/v4/articles/?offset=10",
            "previous": None,
            "results": [create_article_payload(1), create_article_payload(2)],
        }

        with patch("requests.get", return_value=create_mock_response(body)):
            page = ArticlesClient().list_articles(QueryParams())

        assert page.count == 25
        assert [article.id for article in page.results] == [1, 2]
        assert page.next.endswith("offset=10")
        assert page.previous is None

    def test_parses_timestamps_as_aware_datetimes(self) -> None:
        body = {"count": 1, "results": [create_article_payload(7)]}

        with patch("requests.get", return_value=create_mock_response(body)):
            article = ArticlesClient().list_articles(QueryParams()).results[0]

        assert article.published_at == datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)
        assert article.updated_at.tzinfo is not None
        assert article.news_site == "SpaceNews"

    def test_sends_query_parameters(self) -> None:
        """Should send offset, limit, search and ordering."""
        body = {"count": 0, "results": []}
        params = QueryParams.for_page(2, search="mars", ordering="published_at")

        with patch(
            "requests.get", return_value=create_mock_response(body)
        ) as mock_get:
            ArticlesClient(base_url="https://example.test/", timeout=3).list_articles(
                params
            )

        call_args = mock_get.call_args
        assert call_args[0][0] == "https://example.test/v4/articles/"
        assert call_args[1]["params"] == {
            "offset": 20,
            "limit": 10,
            "search": "mars",
            "ordering": "published_at",
        }
        assert call_args[1]["timeout"] == 3

    def test_omits_unset_search_and_ordering(self) -> None:
        body = {"count": 0, "results": []}

        with patch(
            "requests.get", return_value=create_mock_response(body)
        ) as mock_get:
            ArticlesClient().list_articles(QueryParams(search=""))

        assert mock_get.call_args[1]["params"] == {"offset": 0, "limit": 10}


class TestListArticlesFailures:
    """Every failure should surface as FetchFailure."""

    def test_non_success_status(self) -> None:
        mock_response = create_mock_response({"detail": "boom"}, status_code=500)

        with patch("requests.get", return_value=mock_response):
            with pytest.raises(FetchFailure) as exc_info:
                ArticlesClient().list_articles(QueryParams())

        assert exc_info.value.status_code == 500

    def test_connection_error(self) -> None:
        with patch(
            "requests.get",
            side_effect=requests.ConnectionError("Connection refused"),
        ):
            with pytest.raises(FetchFailure) as exc_info:
                ArticlesClient().list_articles(QueryParams())

        assert "Connection refused" in exc_info.value.message
        assert exc_info.value.status_code is None

    def test_invalid_json(self) -> None:
        mock_response = create_mock_response(None)
        mock_response.json.side_effect = ValueError("Expecting value")

        with patch("requests.get", return_value=mock_response):
            with pytest.raises(FetchFailure):
                ArticlesClient().list_articles(QueryParams())

    @pytest.mark.parametrize(
        "body",
        [
            [],
            {"results": []},
            {"count": -1, "results": []},
            {"count": "3", "results": []},
            {"count": 1},
            {"count": 1, "results": [{"id": 1, "title": "No dates"}]},
        ],
    )
    def test_malformed_payload(self, body) -> None:
        """A payload missing required fields is a failure, not an empty page."""
        with patch("requests.get", return_value=create_mock_response(body)):
            with pytest.raises(FetchFailure):
                ArticlesClient().list_articles(QueryParams())

    def test_malformed_timestamp(self) -> None:
        article = create_article_payload(1)
        article["published_at"] = "yesterday"
        body = {"count": 1, "results": [article]}

        with patch("requests.get", return_value=create_mock_response(body)):
            with pytest.raises(FetchFailure):
                ArticlesClient().list_articles(QueryParams())
