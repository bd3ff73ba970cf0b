"""
GraphQL type registry for the Hacker News schema.

Every type is backed by a raw ``HNItem`` or ``HNUser`` record. Fields are
built by small factory functions so each type gets its own field descriptor
and can choose its own nullability through its class annotation (e.g. text is
required on comments and pollopts but optional on stories).
"""

from typing import Annotated, Any, List, Optional, Union

import strawberry
from strawberry.types import Info

from hn_graphql.models import ItemKind
from hn_graphql.schema import resolvers

ItemType = strawberry.enum(ItemKind, name="ItemType", description="The type of item")


# Field factories

def id_field():
    return strawberry.field(resolver=resolvers.resolve_id, description="The item's unique id.")


def deleted_field():
    return strawberry.field(description="if the item is deleted")


def dead_field():
    return strawberry.field(description="if the item is dead")


def type_field():
    return strawberry.field(
        description='The type of item. One of "job", "story", "comment", "poll", or "pollopt".'
    )


def by_field():
    return strawberry.field(resolver=resolvers.resolve_by, description="The item's author.")


def time_field():
    return strawberry.field(description="Creation date of the item, in Unix Time.")


def time_iso_field():
    return strawberry.field(
        name="timeISO",
        resolver=resolvers.resolve_time_iso,
        description="Creation date of the item, in ISO8601",
    )


def text_field():
    return strawberry.field(description="The comment, story or poll text. HTML.")


def url_field():
    return strawberry.field(description="The URL of the story.")


def score_field():
    return strawberry.field(description="The story's score, or the votes for a pollopt.")


def title_field():
    return strawberry.field(description="The title of the story, poll or job.")


def descendants_field():
    return strawberry.field(description="In the case of stories or polls, the total comment count.")


def parent_field():
    return strawberry.field(
        resolver=resolvers.resolve_parent,
        description=(
            "The item's parent. For comments, either another comment or the relevant story. "
            "For pollopts, the relevant poll."
        ),
    )


def parts_field():
    return strawberry.field(
        resolver=resolvers.resolve_parts,
        description="A list of related pollopts, in display order.",
    )


def kids_field():
    return strawberry.field(
        resolver=resolvers.resolve_kids,
        description="The item's comments, in ranked display order.",
    )


@strawberry.type(
    name="HackerNewsItem",
    description=(
        "Stories, comments, jobs, Ask HNs and even polls are just items. "
        "They're identified by their ids, which are unique integers"
    ),
)
class Item:
    id: str = id_field()
    deleted: Optional[bool] = deleted_field()
    type: ItemType = type_field()
    by: Optional["User"] = by_field()
    time: int = time_field()
    time_iso: str = time_iso_field()
    text: Optional[str] = strawberry.field(
        resolver=resolvers.resolve_item_text,
        description="The comment, story or poll text. HTML.",
    )
    dead: Optional[bool] = dead_field()
    url: Optional[str] = url_field()
    score: Optional[int] = score_field()
    title: Optional[str] = title_field()
    parent: Optional["Item"] = parent_field()
    parts: Optional[List[Optional["Item"]]] = parts_field()
    kids: Optional[List["Comment"]] = kids_field()
    descendants: Optional[int] = descendants_field()


@strawberry.type(name="HackerNewsComment")
class Comment:
    id: str = id_field()
    by: Optional["User"] = by_field()
    parent: Optional[Item] = parent_field()
    text: str = text_field()
    time: int = time_field()
    time_iso: str = time_iso_field()
    kids: Optional[List["Comment"]] = kids_field()
    deleted: Optional[bool] = deleted_field()
    dead: Optional[bool] = dead_field()


@strawberry.type(name="HackerNewsPollopt")
class Pollopt:
    id: str = id_field()
    by: Optional["User"] = by_field()
    score: int = score_field()
    time: int = time_field()
    time_iso: str = time_iso_field()
    text: str = text_field()
    parent: Optional[Item] = parent_field()
    deleted: Optional[bool] = deleted_field()


class TopLevelMember:
    """Resolves ``TopLevelItem`` members from raw records by their discriminant."""

    @classmethod
    def is_type_of(cls, obj: Any, info: Info) -> bool:
        return resolve_top_level_type(getattr(obj, "type", None)) is cls


@strawberry.type(name="Story")
class Story(TopLevelMember):
    id: str = id_field()
    by: Optional["User"] = by_field()
    descendants: int = descendants_field()
    score: int = score_field()
    time: int = time_field()
    time_iso: str = time_iso_field()
    title: str = title_field()
    url: Optional[str] = url_field()
    text: Optional[str] = text_field()
    kids: Optional[List[Comment]] = kids_field()
    deleted: Optional[bool] = deleted_field()
    dead: Optional[bool] = dead_field()


@strawberry.type(name="Poll")
class Poll(TopLevelMember):
    id: str = id_field()
    by: Optional["User"] = by_field()
    descendants: int = descendants_field()
    score: int = score_field()
    time: int = time_field()
    time_iso: str = time_iso_field()
    title: str = title_field()
    text: Optional[str] = text_field()
    kids: Optional[List[Comment]] = kids_field()
    deleted: Optional[bool] = deleted_field()
    dead: Optional[bool] = dead_field()
    parts: Optional[List[Pollopt]] = parts_field()


@strawberry.type(name="Job")
class Job(TopLevelMember):
    id: str = id_field()
    by: Optional["User"] = by_field()
    score: int = score_field()
    title: str = title_field()
    time: int = time_field()
    time_iso: str = time_iso_field()
    job_url: str = strawberry.field(resolver=resolvers.resolve_job_url, description="The URL of the story.")
    deleted: Optional[bool] = deleted_field()
    dead: Optional[bool] = dead_field()


@strawberry.type(
    name="HackerNewsUser",
    description=(
        "Users are identified by case-sensitive ids. Only users that have public activity "
        "(comments or story submissions) on the site are available through the API."
    ),
)
class User:
    id: str = strawberry.field(resolver=resolvers.resolve_id, description="The user's unique username.")
    delay: int = strawberry.field(
        description="Delay in minutes between a comment's creation and its visibility to other users."
    )
    created: int = strawberry.field(description="Creation date of the user, in Unix Time.")
    created_iso: str = strawberry.field(
        name="createdISO",
        resolver=resolvers.resolve_created_iso,
        description="Creation date of the user, in ISO8601",
    )
    karma: int = strawberry.field(description="The user's karma.")
    about: Optional[str] = strawberry.field(description="The user's optional self-description. HTML.")
    submitted: Optional[List[Optional[Item]]] = strawberry.field(
        resolver=resolvers.resolve_submitted,
        description="List of the user's stories, polls and comments.",
    )


TOP_LEVEL_TYPES = {
    ItemKind.story: Story,
    ItemKind.poll: Poll,
    ItemKind.job: Job,
}


def resolve_top_level_type(kind: Any) -> Optional[type]:
    """
    Map an item discriminant onto its ``TopLevelItem`` member type.

    Accepts an ``ItemKind`` or its string value. Comments, pollopts and any
    unrecognized value map to ``None``.
    """
    try:
        kind = ItemKind(kind)
    except ValueError:
        return None
    return TOP_LEVEL_TYPES.get(kind)


TopLevelItem = Annotated[
    Union[Story, Poll, Job],
    strawberry.union("TopLevelItem", description="A story, poll or job listed on the front page."),
]
