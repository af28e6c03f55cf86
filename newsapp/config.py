"""
Configuration management for the news reader.
Loads environment variables and provides access to configuration settings.
"""
import logging
import os
from typing import Optional

from dotenv import load_dotenv

# Configure logging
logger = logging.getLogger(__name__)


class Config:
    """Configuration settings loaded from environment variables."""

    def __init__(self):
        """Initialize configuration by loading environment variables."""
        load_dotenv()

    def get(self, key: str, default: Optional[str] = None) -> Optional[str]:
        """
        Get a configuration value by key.

        Args:
            key: Configuration key name
            default: Default value if key not found

        Returns:
            Configuration value or default
        """
        return os.getenv(key, default)

    @property
    def news_api_key(self) -> str:
        """Get news API key."""
        return os.getenv("NEWS_API_KEY", "")

    @property
    def news_api_base_url(self) -> str:
        """Get news API base URL."""
        return os.getenv("NEWS_API_BASE_URL", "https://newsapi.org/v2")

    @property
    def news_api_timeout(self) -> int:
        """Get news API request timeout in seconds."""
        value = os.getenv("NEWS_API_TIMEOUT", "30")
        try:
            return int(value)
        except ValueError:
            logger.warning("Invalid NEWS_API_TIMEOUT %r, using 30 seconds", value)
            return 30

    @property
    def storage_type(self) -> str:
        """Get saved article storage backend ('local' or 'tigris')."""
        return os.getenv("ARTICLE_STORAGE_TYPE", "local").lower()

    @property
    def state_dir(self) -> str:
        """Get directory for local state files."""
        return os.getenv("STATE_DIR", "state")

    @property
    def server_host(self) -> str:
        """Get API server host."""
        return os.getenv("SERVER_HOST", "127.0.0.1")

    @property
    def server_port(self) -> int:
        """Get API server port."""
        return int(os.getenv("SERVER_PORT", "8000"))
