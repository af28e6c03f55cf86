"""
API tests for fetching news through NewsRepository.
"""
import asyncio
from unittest.mock import MagicMock

import pytest
import requests
import requests_mock

from newsapp.feed import Feed, NewsFilters
from newsapp.models import Article, NewsResponse, Source
from newsapp.news_api import NewsAPI
from newsapp.news_repository import FETCH_ERROR, NewsRepository
from newsapp.resource import Error, Success

TOP_URL = "https://newsapi.org/v2/top-headlines"
ALL_URL = "https://newsapi.org/v2/everything"


class TestGetNews:
    """Test suite for NewsRepository.get_news."""

    @pytest.fixture
    def repository(self):
        """Create a repository with a real API client and a mock store."""
        return NewsRepository(news_api=NewsAPI(api_key="test_api_key"), store=MagicMock())

    def test_top_news_success(self, repository):
        """Test a successful top headlines page."""
        body = {
            "status": "ok",
            "totalResults": 1,
            "articles": [{"title": "T", "url": "http://x", "source": {"id": "", "name": "S"}}],
        }
        with requests_mock.Mocker() as m:
            m.get(TOP_URL, json=body)

            result = asyncio.run(repository.get_news(Feed.TOP_NEWS, NewsFilters(country="us"), 1))

            assert result == Success(NewsResponse(
                status="ok",
                totalResults=1,
                articles=[Article(title="T", url="http://x", source=Source(id="", name="S"))],
            ))
            assert result.data.articles[0].id is None
            assert m.request_history[0].qs == {"country": ["us"], "page": ["1"]}

    def test_all_news_uses_everything_endpoint(self, repository):
        """Test that ALL_NEWS queries the everything endpoint with its filters."""
        with requests_mock.Mocker() as m:
            m.get(ALL_URL, json={"status": "ok", "totalResults": 0, "articles": []})

            filters = NewsFilters(country="us", keywords="python", language="en")
            result = asyncio.run(repository.get_news(Feed.ALL_NEWS, filters, 2))

            assert result == Success(NewsResponse(status="ok", totalResults=0, articles=[]))
            assert m.request_history[0].qs == {"q": ["python"], "language": ["en"], "page": ["2"]}

    def test_feed_value_string_accepted(self, repository):
        """Test that the feed value string selects the feed."""
        with requests_mock.Mocker() as m:
            m.get(ALL_URL, json={"status": "ok", "totalResults": 0, "articles": []})

            result = asyncio.run(repository.get_news("all"))

            assert isinstance(result, Success)

    def test_unknown_feed_rejected(self, repository):
        """Test that only TOP_NEWS and ALL_NEWS are accepted."""
        with requests_mock.Mocker() as m:
            with pytest.raises(ValueError):
                asyncio.run(repository.get_news("sports"))
            assert m.call_count == 0

    def test_server_error_with_message(self, repository):
        """Test that the server message is used for non-2xx responses."""
        with requests_mock.Mocker() as m:
            m.get(
                TOP_URL,
                status_code=500,
                json={"status": "error", "code": "unexpectedError", "message": "Something went wrong"}
            )

            result = asyncio.run(repository.get_news(Feed.TOP_NEWS))

            assert result == Error("Something went wrong")

    def test_server_error_without_body_uses_reason(self, repository):
        """Test that the HTTP reason is used when the error body has no message."""
        with requests_mock.Mocker() as m:
            m.get(TOP_URL, status_code=500, reason="Internal Server Error", text="")

            result = asyncio.run(repository.get_news(Feed.TOP_NEWS))

            assert result == Error("Internal Server Error")

    def test_empty_success_body(self, repository):
        """Test that a 2xx response without a JSON body is an Error."""
        with requests_mock.Mocker() as m:
            m.get(TOP_URL, status_code=200, text="")

            result = asyncio.run(repository.get_news(Feed.TOP_NEWS))

            assert result == Error(FETCH_ERROR)

    def test_unparseable_success_body(self, repository):
        """Test that a 2xx response with a non-object body is an Error."""
        with requests_mock.Mocker() as m:
            m.get(TOP_URL, status_code=200, json=["not", "an", "object"])

            result = asyncio.run(repository.get_news(Feed.TOP_NEWS))

            assert result == Error(FETCH_ERROR)

    def test_timeout(self, repository):
        """Test that a timeout becomes an Error with the exception message."""
        with requests_mock.Mocker() as m:
            m.get(TOP_URL, exc=requests.exceptions.ConnectTimeout("Connection timed out"))

            result = asyncio.run(repository.get_news(Feed.TOP_NEWS))

            assert result == Error("Connection timed out")

    def test_exception_without_message(self, repository):
        """Test the fallback message for transport errors without a message."""
        with requests_mock.Mocker() as m:
            m.get(TOP_URL, exc=requests.exceptions.ConnectionError())

            result = asyncio.run(repository.get_news(Feed.TOP_NEWS))

            assert result == Error("Unknown error")

    def test_non_object_source_reads_as_empty(self, repository):
        """Test that an article whose source is not an object still parses."""
        body = {
            "status": "ok",
            "totalResults": 1,
            "articles": [{"title": "T", "url": "u", "source": "Reuters"}],
        }
        with requests_mock.Mocker() as m:
            m.get(TOP_URL, json=body)

            result = asyncio.run(repository.get_news(Feed.TOP_NEWS))

            assert isinstance(result, Success)
            assert result.data.articles[0].source == Source(id="", name="")
