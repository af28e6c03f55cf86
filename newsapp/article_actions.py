"""
Save and remove actions for the article currently being viewed.
"""
from typing import Optional

from newsapp.models import Article
from newsapp.news_repository import NewsRepository
from newsapp.resource import Error, Resource


class ArticleActions:
    """Binds one article to the repository operations the article view offers."""

    def __init__(self, article: Article, repository: NewsRepository):
        self.article = article
        self.repository = repository

    def is_saved(self) -> Resource[bool]:
        return self.repository.is_article_saved(self.article.url)

    def save(self) -> Optional[str]:
        """Save the article. Returns None on success, else the error message."""
        result = self.repository.save_article(self.article)
        return result.message if isinstance(result, Error) else None

    def remove(self) -> Optional[str]:
        """Remove the article. Returns None on success, else the error message."""
        result = self.repository.remove_article(self.article)
        return result.message if isinstance(result, Error) else None
