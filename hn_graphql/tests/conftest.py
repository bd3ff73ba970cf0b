import pytest

from hn_graphql.core.fetcher import StoryListKind
from hn_graphql.models import HNItem, HNUser
from hn_graphql.schema import HNContext
from hn_graphql.tests.stubs.fake_fetcher import FakeFetcher


@pytest.fixture
def hn_items():
    """A small thread: a story with comments, a poll with pollopts and a job."""
    return [
        HNItem(id=1, type="story", by="pg", time=1160418111, title="Y Combinator", url="http://ycombinator.com",
               score=57, descendants=2, kids=[2, 3]),
        HNItem(id=2, type="comment", by="norvig", time=1160418628, text="Aw shucks", parent=1, kids=[4]),
        HNItem(id=3, type="comment", by="pg", time=1160419000, text="Thanks", parent=1),
        HNItem(id=4, type="comment", by="pg", time=1160420000, text="Nested reply", parent=2),
        HNItem(id=10, type="poll", by="pg", time=1204403652, title="Poll: best language?", score=46,
               descendants=1, kids=[], parts=[11, 12]),
        HNItem(id=11, type="pollopt", by="pg", time=1204403652, text="Python", score=104, parent=10, poll=10),
        HNItem(id=12, type="pollopt", by="pg", time=1204403652, text="Lisp", score=99, parent=10, poll=10),
        HNItem(id=20, type="job", by="justin", time=1210981217, title="Justin.tv is hiring",
               url="http://www.justin.tv/jobs", score=6),
        HNItem(id=30, type="comment", by="ghost", time=1300000000, text=None, parent=1),
    ]


@pytest.fixture
def hn_users():
    return [
        HNUser(id="pg", created=1160418092, karma=155111, delay=0, about="Bug fixer.", submitted=[1, 3, 4, 10]),
        HNUser(id="norvig", created=1160418000, karma=42, submitted=[2]),
    ]


@pytest.fixture
def fake_fetcher(hn_items, hn_users):
    return FakeFetcher(
        items=hn_items,
        users=hn_users,
        story_ids={
            StoryListKind.TOP: [1, 10, 20],
            StoryListKind.NEW: [20, 1],
            StoryListKind.ASK: [],
            StoryListKind.SHOW: [10],
            StoryListKind.JOB: [20],
        },
    )


@pytest.fixture
def context(fake_fetcher):
    return HNContext(fake_fetcher)
