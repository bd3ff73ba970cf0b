"""
Field resolvers for the Hacker News schema.

Plain attributes are projected straight off the raw ``HNItem`` / ``HNUser``
records by Strawberry's default resolver. The functions here cover derived
fields (ISO timestamps, string ids) and relationship fields that trigger
further fetches.
"""

import logging
from datetime import datetime, timezone
from typing import Annotated, List, Optional, Union

import strawberry
from strawberry.types import Info

from hn_graphql.core.fetcher import HNGraphQLError, ItemFetcher
from hn_graphql.core.pagination import fetch_items, fetch_items_page
from hn_graphql.models import HNItem, HNUser, ItemKind

logger = logging.getLogger(__name__)

DEFAULT_KIDS_LIMIT = 10
DEFAULT_SUBMITTED_LIMIT = 10

# Kinds whose text is required
TEXT_REQUIRED_KINDS = frozenset({ItemKind.comment, ItemKind.pollopt})

LimitArg = Annotated[Optional[int], strawberry.argument(description="Number of items to return")]
OffsetArg = Annotated[
    Optional[int], strawberry.argument(description="Initial offset of number of items to return")
]


class MissingTextError(HNGraphQLError):
    """Raised when a comment or pollopt record carries no text."""

    def __init__(self, item: HNItem):
        self.item_id = item.id
        self.kind = item.type
        super().__init__(f"Cannot return null for text of {item.type.value} {item.id}")


def get_fetcher(info: Info) -> ItemFetcher:
    """Return the fetcher attached to the request context."""
    return info.context.fetcher


def unix_to_iso(timestamp: int) -> str:
    """
    Convert Unix seconds to an ISO-8601 UTC string with millisecond precision.

    >>> unix_to_iso(0)
    '1970-01-01T00:00:00.000Z'
    """
    moment = datetime.fromtimestamp(timestamp, tz=timezone.utc)
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def resolve_id(root: Union[HNItem, HNUser]) -> str:
    return str(root.id)


def resolve_time_iso(root: HNItem) -> str:
    return unix_to_iso(root.time)


def resolve_created_iso(root: HNUser) -> str:
    return unix_to_iso(root.created)


def resolve_job_url(root: HNItem) -> Optional[str]:
    return root.url


def resolve_item_text(root: HNItem) -> Optional[str]:
    """
    Text of an item read through the generic item type.

    The field itself stays nullable there, but comments and pollopts must
    carry text, so a missing value is reported as a field error.
    """
    if root.text is None and root.type in TEXT_REQUIRED_KINDS:
        raise MissingTextError(root)
    return root.text


async def resolve_by(root: HNItem, info: Info) -> Optional[HNUser]:
    """Fetch the item's author. Deleted items have no author."""
    if not root.by:
        return None
    return await get_fetcher(info).get_user(root.by)


async def resolve_parent(root: HNItem, info: Info) -> Optional[HNItem]:
    if not root.parent:
        return None
    return await get_fetcher(info).get_item(root.parent)


async def resolve_parts(root: HNItem, info: Info) -> Optional[List[Optional[HNItem]]]:
    """Fetch every pollopt of a poll concurrently, in display order."""
    if not root.parts:
        return None
    return await fetch_items(get_fetcher(info), root.parts)


async def resolve_kids(
    root: HNItem,
    info: Info,
    limit: LimitArg = None,
    offset: OffsetArg = None,
) -> Optional[List[Optional[HNItem]]]:
    """Fetch one page of the item's comments, in ranked display order."""
    return await fetch_items_page(
        get_fetcher(info),
        root.kids,
        offset=0 if offset is None else offset,
        limit=DEFAULT_KIDS_LIMIT if limit is None else limit,
    )


async def resolve_submitted(
    root: HNUser,
    info: Info,
    limit: LimitArg = None,
    offset: OffsetArg = None,
) -> Optional[List[Optional[HNItem]]]:
    """Fetch one page of the user's stories, polls and comments."""
    return await fetch_items_page(
        get_fetcher(info),
        root.submitted,
        offset=0 if offset is None else offset,
        limit=DEFAULT_SUBMITTED_LIMIT if limit is None else limit,
    )
