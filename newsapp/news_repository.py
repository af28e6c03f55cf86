"""
Repository mediating between the news API and the local bookmark store.

Every public operation returns a Resource. Expected failures (network and
parse problems, store errors, duplicate saves, removing an unsaved article)
become Error values with a message that can be shown to the user. Other
exceptions are not caught.
"""
import asyncio
import logging
from typing import Any, Dict, List, Optional, Union

import requests

from newsapp.document_store import DocumentStore, StoreError
from newsapp.feed import Feed, NewsFilters
from newsapp.models import Article, NewsResponse, Source
from newsapp.news_api import NewsAPI
from newsapp.resource import Error, Resource, Success

logger = logging.getLogger(__name__)

ARTICLE_FIELDS = (
    "author",
    "content",
    "description",
    "publishedAt",
    "source",
    "title",
    "url",
    "urlToImage",
)

FETCH_ERROR = "An unknown error has occurred trying to fetch news"
LOAD_ERROR = "An unknown error has occurred trying to load data from database"
SAVE_ERROR = "An unknown error has occurred trying to save data to database"
DELETE_ERROR = "An unknown error has occurred trying to delete record from database"
ALREADY_SAVED = "Article is already saved in the database"
NO_ID = "No ID is associated with the article"


def _row_string(row: Dict[str, Any], key: str) -> str:
    value = row.get(key)
    return value if isinstance(value, str) else ""


def document_to_article(row: Dict[str, Any]) -> Article:
    """
    Map a projected store row to an Article.

    Missing string fields, including the nested source fields, become "".
    """
    source = row.get("source")
    if not isinstance(source, dict):
        source = {}
    document_id = row.get("id")
    return Article(
        author=_row_string(row, "author"),
        content=_row_string(row, "content"),
        description=_row_string(row, "description"),
        publishedAt=_row_string(row, "publishedAt"),
        title=_row_string(row, "title"),
        url=_row_string(row, "url"),
        urlToImage=_row_string(row, "urlToImage"),
        source=Source(id=_row_string(source, "id"), name=_row_string(source, "name")),
        id=document_id if isinstance(document_id, str) else None,
    )


def article_to_document(article: Article) -> Dict[str, Any]:
    """Build the store document for an Article. The id is not part of the body."""
    return {
        "author": article.author,
        "content": article.content,
        "description": article.description,
        "publishedAt": article.publishedAt,
        "source": {"id": article.source.id, "name": article.source.name},
        "title": article.title,
        "url": article.url,
        "urlToImage": article.urlToImage,
    }


def _error_message(response: requests.Response) -> str:
    """Pick the most useful message from an unsuccessful API response."""
    try:
        body = response.json()
    except ValueError:
        body = None
    if isinstance(body, dict) and body.get("message"):
        return str(body["message"])
    return response.reason or FETCH_ERROR


class NewsRepository:
    """Fetches news from the API and manages saved articles."""

    def __init__(self, news_api: NewsAPI, store: DocumentStore):
        """
        Initialize the repository.

        Args:
            news_api: Client for the remote news API
            store: Already-open document store used for saved articles
        """
        self.news_api = news_api
        self.store = store

    # ================== REMOTE NEWS ==================

    async def get_news(
        self,
        feed: Union[Feed, str],
        filters: Optional[NewsFilters] = None,
        page: int = 1
    ) -> Resource[NewsResponse]:
        """
        Fetch one page of news for a feed.

        Args:
            feed: Feed.TOP_NEWS or Feed.ALL_NEWS (or their values "top"/"all")
            filters: Query filters; those that do not apply to the feed are ignored
            page: Page number, starting at 1

        Returns:
            Success(NewsResponse) or Error(message)

        Raises:
            ValueError: If feed is not a known Feed
        """
        feed = Feed(feed)
        filters = filters or NewsFilters()
        try:
            if feed is Feed.TOP_NEWS:
                response = await asyncio.to_thread(
                    self.news_api.get_top_news,
                    country=filters.country,
                    category=filters.category,
                    keywords=filters.keywords,
                    page=page
                )
            else:
                response = await asyncio.to_thread(
                    self.news_api.get_news,
                    keywords=filters.keywords,
                    domains=filters.domains,
                    from_date=filters.from_date,
                    to_date=filters.to_date,
                    language=filters.language,
                    page=page
                )
        except requests.exceptions.RequestException as e:
            logger.warning("News request failed: %s", e)
            return Error(str(e) or "Unknown error")

        if not 200 <= response.status_code < 300:
            message = _error_message(response)
            logger.warning("News API returned HTTP %s: %s", response.status_code, message)
            return Error(message)

        try:
            result = NewsResponse.from_dict(response.json())
        except ValueError as e:
            logger.error("Could not parse news response: %s", e)
            return Error(FETCH_ERROR)

        logger.info(
            "Fetched %d of %d articles (feed=%s, page=%d)",
            len(result.articles), result.totalResults, feed.name, page
        )
        return Success(result)

    # ================== SAVED ARTICLES ==================

    def get_saved_articles(self) -> Resource[List[Article]]:
        """Return every saved article in store order."""
        try:
            rows = self.store.query(ARTICLE_FIELDS, include_id=True)
        except StoreError as e:
            logger.error("Failed to load saved articles: %s", e)
            return Error(str(e) or LOAD_ERROR)
        return Success([document_to_article(row) for row in rows])

    def get_saved_articles_count(self) -> Resource[int]:
        """Return the number of saved articles."""
        try:
            return Success(self.store.count())
        except StoreError as e:
            logger.error("Failed to count saved articles: %s", e)
            return Error(str(e) or LOAD_ERROR)

    def is_article_saved(self, url: str) -> Resource[bool]:
        """
        Check whether an article with this url is saved.

        Scans every document; the bookmark list is expected to stay small.
        """
        try:
            rows = self.store.query(("url",))
        except StoreError as e:
            logger.error("Failed to check saved state for %s: %s", url, e)
            return Error(str(e) or LOAD_ERROR)
        return Success(any(row.get("url") == url for row in rows))

    def save_article(self, article: Article) -> Resource[str]:
        """
        Save an article and set its id.

        Args:
            article: Article to save; its id is set to the new document id

        Returns:
            Success(new document id) or Error(message)
        """
        is_saved = self.is_article_saved(article.url)
        if isinstance(is_saved, Error):
            return is_saved
        if is_saved.data:
            return Error(ALREADY_SAVED)

        try:
            document_id = self.store.save(article_to_document(article))
        except StoreError as e:
            logger.error("Failed to save article %s: %s", article.url, e)
            return Error(str(e) or SAVE_ERROR)

        article.id = document_id
        logger.info("Saved article %s as %s", article.url, document_id)
        return Success(document_id)

    def remove_article(self, article: Article) -> Resource[str]:
        """
        Remove a saved article and clear its id.

        A document that no longer exists in the store is not an error.

        Args:
            article: Previously saved article

        Returns:
            Success(removed id) or Error(message)
        """
        if article.id is None:
            return Error(NO_ID)

        try:
            if self.store.get_document(article.id) is not None:
                self.store.delete(article.id)
        except StoreError as e:
            logger.error("Failed to remove article %s: %s", article.id, e)
            return Error(str(e) or DELETE_ERROR)

        document_id = article.id
        article.id = None
        logger.info("Removed saved article %s", document_id)
        return Success(document_id)
