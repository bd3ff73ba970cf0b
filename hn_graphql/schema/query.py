"""
Query root and executable schema for the Hacker News API.

The root exposes single item/user lookups, the five bulk story lists and a
parameterized ``stories`` field that selects a list by name.
"""

import logging
from typing import Annotated, List, Optional

import strawberry
from strawberry.types import Info

from hn_graphql.core.fetcher import StoryListKind
from hn_graphql.core.pagination import fetch_items_page
from hn_graphql.models import HNItem, HNUser
from hn_graphql.schema.resolvers import LimitArg, OffsetArg, get_fetcher
from hn_graphql.schema.types import Item, TopLevelItem, User

logger = logging.getLogger(__name__)

DEFAULT_STORIES_LIMIT = 30


async def fetch_story_page(
    info: Info,
    kind: StoryListKind,
    limit: Optional[int],
    offset: Optional[int],
) -> List[Optional[HNItem]]:
    """Fetch the bulk id list for ``kind`` and then one page of its items."""
    fetcher = get_fetcher(info)
    ids = await fetcher.get_story_ids(kind)
    logger.debug(f"{kind.endpoint}: {len(ids)} ids available")
    return await fetch_items_page(
        fetcher,
        ids,
        offset=0 if offset is None else offset,
        limit=DEFAULT_STORIES_LIMIT if limit is None else limit,
    )


def story_list_field(kind: StoryListKind, description: str):
    """Build a paginated ``[TopLevelItem!]!`` field backed by one bulk id list."""

    async def resolve(
        info: Info,
        limit: LimitArg = None,
        offset: OffsetArg = None,
    ) -> List[Optional[HNItem]]:
        return await fetch_story_page(info, kind, limit, offset)

    return strawberry.field(resolver=resolve, description=description)


async def resolve_item(
    info: Info,
    id: Annotated[int, strawberry.argument(description="id of the item")],
) -> Optional[HNItem]:
    return await get_fetcher(info).get_item(id)


async def resolve_user(
    info: Info,
    id: Annotated[str, strawberry.argument(description="id of the user")],
) -> Optional[HNUser]:
    return await get_fetcher(info).get_user(id)


async def resolve_stories(
    info: Info,
    story_type: Annotated[str, strawberry.argument(description="Type of story to list")],
    limit: LimitArg = None,
    offset: OffsetArg = None,
) -> Optional[List[Optional[HNItem]]]:
    """
    List stories from the bulk list named by ``story_type``.

    Raises:
        InvalidStoryTypeError: If ``story_type`` is not one of top, show,
            new, ask or job. Nothing is fetched in that case.
    """
    kind = StoryListKind.from_selector(story_type)
    return await fetch_story_page(info, kind, limit, offset)


@strawberry.type(name="HackerNewsAPI", description="The Hacker News V0 API")
class Query:
    item: Optional[Item] = strawberry.field(resolver=resolve_item)
    user: Optional[User] = strawberry.field(resolver=resolve_user)
    top_stories: List[TopLevelItem] = story_list_field(StoryListKind.TOP, "Up to 500 of the top stories")
    new_stories: List[TopLevelItem] = story_list_field(StoryListKind.NEW, "Up to 500 of the newest stories")
    show_stories: List[TopLevelItem] = story_list_field(StoryListKind.SHOW, "Up to 200 of the Show HN stories")
    ask_stories: List[TopLevelItem] = story_list_field(StoryListKind.ASK, "Up to 200 of the Ask HN stories")
    job_stories: List[TopLevelItem] = story_list_field(StoryListKind.JOB, "Up to 200 of the Job stories")
    stories: Optional[List[Optional[Item]]] = strawberry.field(
        resolver=resolve_stories, description="Return list of stories"
    )


schema = strawberry.Schema(query=Query)
