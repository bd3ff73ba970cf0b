import asyncio
import random

import pytest

from hn_graphql.core.hn_client import HackerNewsAPIError
from hn_graphql.core.pagination import fetch_items, fetch_items_page
from hn_graphql.models import HNItem
from hn_graphql.tests.stubs.fake_fetcher import FakeFetcher


def make_items(ids):
    return [HNItem(id=item_id, type="comment", time=0, text=f"comment {item_id}") for item_id in ids]


@pytest.mark.asyncio
@pytest.mark.parametrize("ids", [None, []])
async def test_fetch_items_page_empty_ids(ids):
    """A missing or empty id list yields an empty page without fetching."""
    fetcher = FakeFetcher()

    page = await fetch_items_page(fetcher, ids, offset=0, limit=10)

    assert page == []
    assert fetcher.item_calls == []


@pytest.mark.asyncio
async def test_fetch_items_page_selects_slice():
    fetcher = FakeFetcher(items=make_items(range(1, 11)))

    page = await fetch_items_page(fetcher, list(range(1, 11)), offset=2, limit=3)

    assert [item.id for item in page] == [3, 4, 5]
    assert sorted(fetcher.item_calls) == [3, 4, 5]


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "offset, limit, expected",
    [
        (0, 100, [1, 2, 3]),
        (2, 10, [3]),
        (3, 10, []),
        (50, 5, []),
        (0, 0, []),
        (-4, 2, [1, 2]),
        (1, -1, []),
    ],
)
async def test_fetch_items_page_clips_out_of_range_bounds(offset, limit, expected):
    fetcher = FakeFetcher(items=make_items([1, 2, 3]))

    page = await fetch_items_page(fetcher, [1, 2, 3], offset=offset, limit=limit)

    assert [item.id for item in page] == expected


@pytest.mark.asyncio
async def test_fetch_items_page_default_bounds():
    fetcher = FakeFetcher(items=make_items(range(1, 21)))

    page = await fetch_items_page(fetcher, list(range(1, 21)))

    assert [item.id for item in page] == list(range(1, 11))


@pytest.mark.asyncio
async def test_fetch_items_page_keeps_input_order_under_random_latency():
    """Results follow the requested id order, not fetch completion order."""
    ids = list(range(100, 120))
    rng = random.Random(1234)
    delays = {item_id: rng.uniform(0, 0.02) for item_id in ids}
    fetcher = FakeFetcher(items=make_items(ids), delays=delays)

    page = await fetch_items_page(fetcher, ids, offset=0, limit=len(ids))

    assert [item.id for item in page] == ids
    assert fetcher.completed != ids  # completion order was shuffled


@pytest.mark.asyncio
async def test_fetch_items_runs_fetches_concurrently():
    """The slowest fetch is issued first but finishes last."""
    fetcher = FakeFetcher(items=make_items([1, 2, 3]), delays={1: 0.05, 2: 0.02, 3: 0})

    items = await fetch_items(fetcher, [1, 2, 3])

    assert [item.id for item in items] == [1, 2, 3]
    assert fetcher.item_calls == [1, 2, 3]
    assert fetcher.completed == [3, 2, 1]


@pytest.mark.asyncio
async def test_fetch_items_page_missing_item_is_none():
    fetcher = FakeFetcher(items=make_items([1, 3]))

    page = await fetch_items_page(fetcher, [1, 2, 3], limit=3)

    assert page[0].id == 1
    assert page[1] is None
    assert page[2].id == 3


@pytest.mark.asyncio
async def test_fetch_items_page_single_failure_fails_page():
    fetcher = FakeFetcher(items=make_items([1, 2, 3]), failing_ids=[2])

    with pytest.raises(HackerNewsAPIError):
        await fetch_items_page(fetcher, [1, 2, 3], limit=3)


@pytest.mark.asyncio
async def test_fetch_items_failure_cancels_in_flight_fetches():
    """Slower sibling fetches are cancelled once one fetch in the batch fails."""
    fetcher = FakeFetcher(items=make_items([1, 2, 3]), delays={1: 0.05, 2: 0, 3: 0.05}, failing_ids=[2])

    with pytest.raises(HackerNewsAPIError):
        await fetch_items(fetcher, [1, 2, 3])
    await asyncio.sleep(0.1)

    assert fetcher.item_calls == [1, 2, 3]
    assert fetcher.completed == []
