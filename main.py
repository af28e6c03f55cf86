#!/usr/bin/env python
"""
Command line entry point for the news reader.
Prints news pages from the news API and the saved article list.
"""
import argparse
import asyncio
import logging
import sys
from typing import Iterable, List, Optional

from newsapp.config import Config
from newsapp.feed import Feed, NewsFilters
from newsapp.models import Article
from newsapp.news_repository_factory import create_news_repository
from newsapp.resource import Error


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description="Read news and manage saved articles")
    parser.add_argument("--log-level", default="WARNING", help="Logging verbosity")
    commands = parser.add_subparsers(dest="command", required=True)

    top = commands.add_parser("top", help="Show top headlines")
    top.add_argument("--country")
    top.add_argument("--category")
    top.add_argument("-q", "--keywords")
    top.add_argument("--page", type=int, default=1)

    everything = commands.add_parser("all", help="Search all articles")
    everything.add_argument("-q", "--keywords")
    everything.add_argument("--domains")
    everything.add_argument("--from", dest="from_date")
    everything.add_argument("--to", dest="to_date")
    everything.add_argument("--language")
    everything.add_argument("--page", type=int, default=1)

    commands.add_parser("saved", help="List saved articles")
    commands.add_parser("count", help="Show the number of saved articles")
    return parser.parse_args(argv)


def print_articles(articles: Iterable[Article]) -> None:
    """Print one block per article."""
    for article in articles:
        print(article.title)
        details = [article.source.name, article.display_date]
        if article.author:
            details.insert(0, article.author)
        print("  " + " | ".join(d for d in details if d))
        print(f"  {article.url}")
        if article.id:
            print(f"  saved as {article.id}")


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point. Returns the process exit code."""
    args = parse_args(argv)
    logging.basicConfig(
        level=args.log_level.upper(),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    repository = create_news_repository(Config())

    if args.command in ("top", "all"):
        filters = NewsFilters(
            country=getattr(args, "country", None),
            category=getattr(args, "category", None),
            keywords=args.keywords,
            domains=getattr(args, "domains", None),
            from_date=getattr(args, "from_date", None),
            to_date=getattr(args, "to_date", None),
            language=getattr(args, "language", None),
        )
        result = asyncio.run(repository.get_news(Feed(args.command), filters, args.page))
        if isinstance(result, Error):
            print(result.message, file=sys.stderr)
            return 1
        print(f"{result.data.totalResults} results")
        print_articles(result.data.articles)
        return 0

    if args.command == "saved":
        result = repository.get_saved_articles()
        if isinstance(result, Error):
            print(result.message, file=sys.stderr)
            return 1
        print_articles(result.data)
        return 0

    result = repository.get_saved_articles_count()
    if isinstance(result, Error):
        print(result.message, file=sys.stderr)
        return 1
    print(result.data)
    return 0


if __name__ == "__main__":
    sys.exit(main())
