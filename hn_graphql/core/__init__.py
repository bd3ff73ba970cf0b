"""
Core components for the Hacker News GraphQL service.
"""

from .fetcher import HNGraphQLError, InvalidStoryTypeError, ItemFetcher, StoryListKind
from .hn_client import HackerNewsAPIError, HackerNewsClient
from .pagination import fetch_items, fetch_items_page

__all__ = [
    "HNGraphQLError",
    "InvalidStoryTypeError",
    "ItemFetcher",
    "StoryListKind",
    "HackerNewsAPIError",
    "HackerNewsClient",
    "fetch_items",
    "fetch_items_page",
]
