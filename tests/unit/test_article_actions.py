"""
Unit tests for article save and remove actions.
"""
from unittest.mock import MagicMock

import pytest

from newsapp.article_actions import ArticleActions
from newsapp.models import Article
from newsapp.news_repository import ALREADY_SAVED, NO_ID, NewsRepository
from newsapp.resource import Success


class TestArticleActions:
    """Test suite for ArticleActions."""

    @pytest.fixture
    def repository(self, tmp_path):
        """Create a repository over a temporary local store."""
        from newsapp.local_disk_document_store import LocalDiskDocumentStore
        store = LocalDiskDocumentStore(state_dir=str(tmp_path))
        return NewsRepository(news_api=MagicMock(), store=store)

    def test_save_returns_none_on_success(self, repository):
        """Test that a successful save returns no message."""
        actions = ArticleActions(Article(title="T", url="http://x"), repository)
        assert actions.is_saved() == Success(False)
        assert actions.save() is None
        assert actions.is_saved() == Success(True)
        assert actions.article.id is not None

    def test_save_twice_returns_message(self, repository):
        """Test that a duplicate save returns the error message."""
        actions = ArticleActions(Article(title="T", url="http://x"), repository)
        actions.save()
        other = ArticleActions(Article(title="T", url="http://x"), repository)
        assert other.save() == ALREADY_SAVED

    def test_remove_returns_none_on_success(self, repository):
        """Test that a successful remove returns no message."""
        actions = ArticleActions(Article(title="T", url="http://x"), repository)
        actions.save()
        assert actions.remove() is None
        assert actions.article.id is None

    def test_remove_unsaved_returns_message(self, repository):
        """Test that removing an unsaved article returns the error message."""
        actions = ArticleActions(Article(title="T", url="http://x"), repository)
        assert actions.remove() == NO_ID
