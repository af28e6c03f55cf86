"""
HTTP API server for the news reader.
Serves news pages from the news API and manages saved articles.
"""
import logging
from typing import Any, Dict, List, Optional

from fastapi import Body, FastAPI, HTTPException, Query

from newsapp.article_actions import ArticleActions
from newsapp.feed import Feed, NewsFilters
from newsapp.models import Article
from newsapp.news_repository import NewsRepository
from newsapp.resource import Error

# Configure server logger
logger = logging.getLogger('server')
logger.setLevel(logging.INFO)

# Add console handler if not already present
if not logger.handlers:
    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.INFO)
    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)


def sanitize_log_input(value: Any) -> str:
    """
    Sanitize user input for logging to prevent log injection.

    Args:
        value: The user input to sanitize

    Returns:
        Sanitized string safe for logging
    """
    if not isinstance(value, str):
        value = str(value)
    sanitized = value.replace('\n', '_').replace('\r', '_').replace('\t', '_')
    return sanitized[:200]


def create_app(repository: Optional[NewsRepository] = None) -> FastAPI:
    """
    Create the news reader FastAPI application.

    Args:
        repository: Optional repository instance (defaults to factory-created)

    Returns:
        FastAPI application instance
    """
    app = FastAPI()  # pylint: disable=redefined-outer-name

    if repository is None:
        from newsapp.news_repository_factory import create_news_repository  # pylint: disable=import-outside-toplevel
        repository = create_news_repository()

    # ================== NEWS ==================
    @app.get("/api/news")
    async def get_news(
        feed: str = Query("top"),
        country: Optional[str] = Query(None),
        category: Optional[str] = Query(None),
        q: Optional[str] = Query(None),
        domains: Optional[str] = Query(None),
        from_date: Optional[str] = Query(None, alias="from"),
        to_date: Optional[str] = Query(None, alias="to"),
        language: Optional[str] = Query(None),
        page: int = Query(1, ge=1),
    ) -> Dict[str, Any]:
        """Get one page of news for the selected feed."""
        logger.info("GET /api/news feed=%s page=%s", sanitize_log_input(feed), page)
        try:
            selected = Feed(feed)
        except ValueError as e:
            raise HTTPException(status_code=400, detail=f"Unknown feed: {feed}") from e

        filters = NewsFilters(
            country=country,
            category=category,
            keywords=q,
            domains=domains,
            from_date=from_date,
            to_date=to_date,
            language=language,
        )
        result = await repository.get_news(selected, filters, page)
        if isinstance(result, Error):
            logger.warning("GET /api/news failed: %s", result.message)
            raise HTTPException(status_code=502, detail=result.message)
        return result.data.to_dict()

    # ================== SAVED ARTICLES ==================
    # Store calls block; plain def handlers run in the threadpool.
    @app.get("/api/articles/saved")
    def get_saved_articles() -> List[Dict[str, Any]]:
        """Get all saved articles."""
        logger.info("GET /api/articles/saved")
        result = repository.get_saved_articles()
        if isinstance(result, Error):
            raise HTTPException(status_code=400, detail=result.message)
        return [article.to_dict() for article in result.data]

    @app.get("/api/articles/saved/count")
    def get_saved_articles_count() -> Dict[str, int]:
        """Get the number of saved articles."""
        logger.info("GET /api/articles/saved/count")
        result = repository.get_saved_articles_count()
        if isinstance(result, Error):
            raise HTTPException(status_code=400, detail=result.message)
        return {"count": result.data}

    @app.get("/api/articles/saved/status")
    def get_saved_status(url: str = Query(...)) -> Dict[str, Any]:
        """Check whether an article url is saved."""
        logger.info("GET /api/articles/saved/status url=%s", sanitize_log_input(url))
        result = ArticleActions(Article(url=url), repository).is_saved()
        if isinstance(result, Error):
            raise HTTPException(status_code=400, detail=result.message)
        return {"url": url, "saved": result.data}

    @app.post("/api/articles/saved")
    def save_article(payload: Dict[str, Any] = Body(...)) -> Dict[str, Optional[str]]:
        """Save an article posted as news API JSON."""
        if not isinstance(payload, dict) or not payload.get("url"):
            raise HTTPException(status_code=400, detail="Article url is required")

        article = Article.from_dict(payload)
        article.id = None
        logger.info("POST /api/articles/saved url=%s", sanitize_log_input(article.url))
        message = ArticleActions(article, repository).save()
        if message is not None:
            logger.warning("POST /api/articles/saved failed: %s", message)
            raise HTTPException(status_code=400, detail=message)
        return {"id": article.id}

    @app.delete("/api/articles/saved/{article_id}")
    def remove_article(article_id: str) -> Dict[str, str]:
        """Remove a saved article by id."""
        logger.info("DELETE /api/articles/saved/%s", sanitize_log_input(article_id))
        message = ArticleActions(Article(id=article_id), repository).remove()
        if message is not None:
            logger.warning("DELETE /api/articles/saved/%s failed: %s", sanitize_log_input(article_id), message)
            raise HTTPException(status_code=400, detail=message)
        return {"id": article_id}

    return app
