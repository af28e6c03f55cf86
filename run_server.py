#!/usr/bin/env python
"""
Run the news reader API server.
"""
import uvicorn

from newsapp.config import Config
from newsapp.news_repository_factory import create_news_repository
from server import create_app


def main():
    """Run the API server."""
    config = Config()

    app = create_app(repository=create_news_repository(config))

    print("Starting news reader server...")
    print(f"Saved articles storage: {config.storage_type}")
    print(f"Listening on http://{config.server_host}:{config.server_port}")

    uvicorn.run(
        app,
        host=config.server_host,
        port=config.server_port,
        log_level="info"
    )


if __name__ == "__main__":
    main()
