"""
Pydantic Data Transfer Objects (DTOs) for Hacker News records.

These models mirror the JSON payloads returned by the Hacker News v0 API and
are the raw records handed to the GraphQL field resolvers.
"""

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class ItemKind(str, Enum):
    """Discriminant of an item (the ``type`` attribute upstream)."""

    # Member names are exposed as the GraphQL enum values
    job = "job"
    story = "story"
    comment = "comment"
    poll = "poll"
    pollopt = "pollopt"


class HNItem(BaseModel):
    """
    DTO for a single Hacker News item.

    Stories, comments, jobs, polls and pollopts share one record shape; which
    optional attributes are populated depends on ``type``.
    """

    id: int
    type: ItemKind
    deleted: Optional[bool] = None
    dead: Optional[bool] = None
    by: Optional[str] = None
    time: int = 0
    text: Optional[str] = None
    url: Optional[str] = None
    title: Optional[str] = None
    score: Optional[int] = None
    descendants: Optional[int] = None
    parent: Optional[int] = None
    poll: Optional[int] = None  # Parent poll of a pollopt
    kids: Optional[List[int]] = None
    parts: Optional[List[int]] = None

    model_config = ConfigDict(extra="ignore", frozen=True)


class HNUser(BaseModel):
    """
    DTO for a Hacker News user.

    The API only exposes users with public activity; ``delay`` is missing from
    most payloads and defaults to zero.
    """

    id: str
    created: int
    delay: int = 0
    karma: int = 0
    about: Optional[str] = None
    submitted: List[int] = Field(default_factory=list)

    model_config = ConfigDict(extra="ignore", frozen=True)
