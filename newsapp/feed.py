"""
Feed selection and query filters for the news API.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Optional


class Feed(Enum):
    """Which news API query shape to use."""

    TOP_NEWS = "top"
    ALL_NEWS = "all"


@dataclass
class NewsFilters:
    """
    Optional query filters.

    TOP_NEWS uses country, category and keywords. ALL_NEWS uses keywords,
    domains, from_date, to_date and language. Filters that do not apply to
    the selected feed are ignored.
    """

    country: Optional[str] = None
    category: Optional[str] = None
    keywords: Optional[str] = None
    domains: Optional[str] = None
    from_date: Optional[str] = None
    to_date: Optional[str] = None
    language: Optional[str] = None
