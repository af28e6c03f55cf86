"""
Data models for news articles and API responses.

JSON field names mirror the news API payload (publishedAt, urlToImage,
totalResults) so the same dicts travel between the API, the local store
and the HTTP server unchanged.
"""
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


def _str(data: Dict[str, Any], key: str) -> str:
    """Read a string field, treating null or missing as an empty string."""
    value = data.get(key)
    return value if isinstance(value, str) else ""


@dataclass
class Source:
    """Publisher of an article."""

    id: str = ""
    name: str = ""

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "Source":
        if not isinstance(data, dict):
            data = {}
        return cls(id=_str(data, "id"), name=_str(data, "name"))

    def to_dict(self) -> Dict[str, str]:
        return {"id": self.id, "name": self.name}


@dataclass
class Article:
    """
    A single news item.

    ``id`` is the local store document id. It is None for articles that came
    from the news API and have not been saved.
    """

    title: str = ""
    url: str = ""
    author: Optional[str] = None
    content: str = ""
    description: str = ""
    publishedAt: str = ""  # pylint: disable=invalid-name
    urlToImage: str = ""  # pylint: disable=invalid-name
    source: Source = field(default_factory=Source)
    id: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Article":
        """
        Build an Article from a news API (or server request) payload.

        Args:
            data: Article mapping with news API field names.

        Returns:
            Article instance
        """
        author = data.get("author")
        article_id = data.get("id")
        return cls(
            title=_str(data, "title"),
            url=_str(data, "url"),
            author=author if isinstance(author, str) else None,
            content=_str(data, "content"),
            description=_str(data, "description"),
            publishedAt=_str(data, "publishedAt"),
            urlToImage=_str(data, "urlToImage"),
            source=Source.from_dict(data.get("source")),
            id=article_id if isinstance(article_id, str) else None,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "author": self.author,
            "content": self.content,
            "description": self.description,
            "publishedAt": self.publishedAt,
            "source": self.source.to_dict(),
            "title": self.title,
            "url": self.url,
            "urlToImage": self.urlToImage,
            "id": self.id,
        }

    @property
    def display_date(self) -> str:
        """Publication timestamp formatted for display (2024-01-01 12:00:00)."""
        return self.publishedAt.replace("T", " ").rstrip("Z")


@dataclass
class NewsResponse:
    """One page of articles returned by the news API."""

    status: str = ""
    totalResults: int = 0  # pylint: disable=invalid-name
    articles: List[Article] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "NewsResponse":
        """
        Parse a news API response body.

        Raises:
            ValueError: If the body is not a JSON object or has malformed fields.
        """
        if not isinstance(data, dict):
            raise ValueError("News response body must be a JSON object")
        articles = data.get("articles") or []
        if not isinstance(articles, list):
            raise ValueError("'articles' must be a list")
        try:
            total = int(data.get("totalResults") or 0)
        except (TypeError, ValueError) as exc:
            raise ValueError(f"Invalid totalResults: {data.get('totalResults')!r}") from exc
        return cls(
            status=_str(data, "status"),
            totalResults=total,
            articles=[Article.from_dict(a) for a in articles if isinstance(a, dict)],
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "status": self.status,
            "totalResults": self.totalResults,
            "articles": [a.to_dict() for a in self.articles],
        }
