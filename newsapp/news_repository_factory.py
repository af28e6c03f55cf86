"""
Factory function for creating the news repository.
"""
from typing import Optional

from newsapp.config import Config
from newsapp.document_store_factory import create_document_store
from newsapp.news_api import NewsAPI
from newsapp.news_repository import NewsRepository


def create_news_repository(config: Optional[Config] = None) -> NewsRepository:
    """
    Create a news repository from configuration.

    The document store backend is chosen by ARTICLE_STORAGE_TYPE
    (see create_document_store).

    Args:
        config: Configuration (defaults to a new Config)

    Returns:
        NewsRepository: Repository wired to the news API and the document store
    """
    config = config or Config()
    news_api = NewsAPI(
        api_key=config.news_api_key,
        base_url=config.news_api_base_url,
        timeout=config.news_api_timeout
    )
    return NewsRepository(news_api=news_api, store=create_document_store(state_dir=config.state_dir))
