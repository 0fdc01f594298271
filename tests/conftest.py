"""Shared fixtures and fakes for the article browser tests."""

import threading
from datetime import datetime, timezone

import pytest

from spaceflight_articles.models import Article, ArticlesPage, FetchFailure, QueryParams


def create_article(article_id: int, title: str | None = None) -> Article:
    """Helper to create an Article."""
    return Article(
        id=article_id,
        title=title or f"Test Article {article_id}",
        summary="Test summary",
        news_site="NASA",
        published_at=datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc),
        updated_at=datetime(2024, 5, 2, 8, 30, tzinfo=timezone.utc),
    )


class FakeSource:
    """Blocking article source recording every call.

    Pages are looked up by QueryParams; unknown parameters get an empty
    page. A parameter tuple can be gated on a threading.Event so tests
    control the order in which responses complete.
    """

    def __init__(self) -> None:
        self.calls: list[QueryParams] = []
        self.pages: dict[QueryParams, ArticlesPage] = {}
        self.failures: dict[QueryParams, Exception] = {}
        self.gates: dict[QueryParams, threading.Event] = {}
        self.fail_all: Exception | None = None
        self._lock = threading.Lock()

    def gate(self, params: QueryParams) -> threading.Event:
        event = threading.Event()
        self.gates[params] = event
        return event

    def list_articles(self, params: QueryParams) -> ArticlesPage:
        with self._lock:
            self.calls.append(params)

        gate = self.gates.get(params)
        if gate is not None:
            gate.wait(timeout=5)

        if self.fail_all is not None:
            raise self.fail_all
        if params in self.failures:
            raise self.failures[params]
        return self.pages.get(params, ArticlesPage(count=0, results=[]))


@pytest.fixture
def source() -> FakeSource:
    return FakeSource()


@pytest.fixture
def failing_source() -> FakeSource:
    fake = FakeSource()
    fake.fail_all = FetchFailure("Connection refused")
    return fake
