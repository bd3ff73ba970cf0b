"""
Item fetcher contract consumed by the GraphQL resolvers.

Resolvers only depend on the ``ItemFetcher`` protocol, so the live
``HackerNewsClient`` can be swapped for an in-memory stub in tests.
"""

from enum import Enum
from typing import List, Optional, Protocol, runtime_checkable

from hn_graphql.models import HNItem, HNUser


class HNGraphQLError(Exception):
    """Base class for errors raised by the Hacker News GraphQL service."""


class InvalidStoryTypeError(HNGraphQLError, ValueError):
    """Raised when a ``storyType`` selector does not name a bulk story list."""

    def __init__(self, story_type: str):
        self.story_type = story_type
        choices = ", ".join(kind.value for kind in StoryListKind)
        super().__init__(f"Invalid storyType {story_type!r}; expected one of: {choices}")


class StoryListKind(str, Enum):
    """Bulk id lists maintained by Hacker News, keyed by ``storyType`` selector."""

    TOP = "top"
    NEW = "new"
    ASK = "ask"
    SHOW = "show"
    JOB = "job"

    @property
    def endpoint(self) -> str:
        """Upstream resource name, e.g. ``topstories``."""
        return f"{self.value}stories"

    @classmethod
    def from_selector(cls, value: str) -> "StoryListKind":
        """
        Map a ``storyType`` argument onto a list kind.

        Raises:
            InvalidStoryTypeError: If ``value`` is not a known selector.
        """
        try:
            return cls(value)
        except ValueError:
            raise InvalidStoryTypeError(value) from None


@runtime_checkable
class ItemFetcher(Protocol):
    """
    Minimal contract for retrieving Hacker News records.

    Design rules:
    - Every method is async because implementations perform network I/O.
    - Missing records come back as ``None``; transport failures raise.
    """

    async def get_item(self, item_id: int) -> Optional[HNItem]:
        ...

    async def get_user(self, user_id: str) -> Optional[HNUser]:
        ...

    async def get_story_ids(self, kind: StoryListKind) -> List[int]:
        ...
