"""
News API wrapper for the news reader.
Issues top-headlines and everything queries against newsapi.org.
"""
import logging
from typing import Any, Dict, Optional

import requests

# Configure logging
logger = logging.getLogger(__name__)


class NewsAPI:
    """Wrapper for the news API endpoints."""

    DEFAULT_BASE_URL = "https://newsapi.org/v2"

    def __init__(self, api_key: str, base_url: Optional[str] = None, timeout: int = 30):
        """
        Initialize news API client.

        Args:
            api_key: News API key, sent in the X-Api-Key header
            base_url: API root (defaults to https://newsapi.org/v2)
            timeout: Request timeout in seconds
        """
        self.api_key = api_key
        self.base_url = (base_url or self.DEFAULT_BASE_URL).rstrip("/")
        self.timeout = timeout
        self.session = requests.Session()

    @staticmethod
    def _build_params(**params: Any) -> Dict[str, Any]:
        """Drop unset query parameters."""
        return {key: value for key, value in params.items() if value is not None}

    def _get(self, endpoint: str, params: Dict[str, Any]) -> requests.Response:
        url = f"{self.base_url}/{endpoint}"
        logger.debug("GET %s params=%s", url, params)
        return self.session.get(
            url,
            params=params,
            headers={"X-Api-Key": self.api_key},
            timeout=self.timeout
        )

    def get_top_news(
        self,
        country: Optional[str] = None,
        category: Optional[str] = None,
        keywords: Optional[str] = None,
        page: int = 1
    ) -> requests.Response:
        """
        Fetch top headlines.

        Args:
            country: Two-letter country code (e.g. "us")
            category: Headline category (e.g. "business")
            keywords: Keywords or phrase to search for
            page: Page number, starting at 1

        Returns:
            Raw HTTP response; status is not checked here
        """
        params = self._build_params(country=country, category=category, q=keywords, page=page)
        return self._get("top-headlines", params)

    def get_news(
        self,
        keywords: Optional[str] = None,
        domains: Optional[str] = None,
        from_date: Optional[str] = None,
        to_date: Optional[str] = None,
        language: Optional[str] = None,
        page: int = 1
    ) -> requests.Response:
        """
        Search all articles.

        Args:
            keywords: Keywords or phrase to search for
            domains: Comma-separated domains to restrict the search to
            from_date: Oldest publication date (ISO 8601)
            to_date: Newest publication date (ISO 8601)
            language: Two-letter language code
            page: Page number, starting at 1

        Returns:
            Raw HTTP response; status is not checked here
        """
        params = self._build_params(
            q=keywords,
            domains=domains,
            language=language,
            page=page,
            **{"from": from_date, "to": to_date}
        )
        return self._get("everything", params)
