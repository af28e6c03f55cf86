"""
Unit tests for configuration management.
"""
from newsapp.config import Config


class TestConfig:
    """Test suite for Config class."""

    def test_config_initialization(self):
        """Test that Config initializes properly."""
        config = Config()
        assert config is not None

    def test_get_with_default(self):
        """Test get method with default value."""
        config = Config()
        value = config.get("NONEXISTENT_KEY", "default_value")
        assert value == "default_value"

    def test_news_api_key_property(self, monkeypatch):
        """Test news_api_key property."""
        monkeypatch.setenv("NEWS_API_KEY", "test_key")
        config = Config()
        assert config.news_api_key == "test_key"

    def test_news_api_base_url_default(self, monkeypatch):
        """Test news_api_base_url default."""
        monkeypatch.delenv("NEWS_API_BASE_URL", raising=False)
        config = Config()
        assert config.news_api_base_url == "https://newsapi.org/v2"

    def test_news_api_timeout_property(self, monkeypatch):
        """Test news_api_timeout property returns integer."""
        monkeypatch.setenv("NEWS_API_TIMEOUT", "10")
        config = Config()
        assert config.news_api_timeout == 10

    def test_news_api_timeout_invalid(self, monkeypatch):
        """Test that an invalid timeout falls back to 30 seconds."""
        monkeypatch.setenv("NEWS_API_TIMEOUT", "soon")
        config = Config()
        assert config.news_api_timeout == 30

    def test_storage_type_lowercased(self, monkeypatch):
        """Test storage_type property is lowercased."""
        monkeypatch.setenv("ARTICLE_STORAGE_TYPE", "Tigris")
        config = Config()
        assert config.storage_type == "tigris"

    def test_state_dir_default(self, monkeypatch):
        """Test state_dir default."""
        monkeypatch.delenv("STATE_DIR", raising=False)
        config = Config()
        assert config.state_dir == "state"

    def test_server_properties(self, monkeypatch):
        """Test server host and port properties."""
        monkeypatch.setenv("SERVER_HOST", "0.0.0.0")
        monkeypatch.setenv("SERVER_PORT", "9000")
        config = Config()
        assert config.server_host == "0.0.0.0"
        assert config.server_port == 9000
