"""
GraphQL schema for the Hacker News API.

``schema`` is the executable Strawberry schema; resolvers read their item
fetcher from an ``HNContext`` passed as the execution context.
"""

from .context import HNContext
from .query import Query, schema

__all__ = [
    "HNContext",
    "Query",
    "schema",
]
