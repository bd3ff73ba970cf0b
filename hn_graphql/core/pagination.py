"""
Concurrent batch fetching of items by id.

Every id in a page is fetched in parallel; the page keeps the order of the
requested ids regardless of which fetch completes first.
"""

import asyncio
import logging
from typing import List, Optional, Sequence

from hn_graphql.core.fetcher import ItemFetcher
from hn_graphql.models import HNItem

logger = logging.getLogger(__name__)


async def fetch_items(fetcher: ItemFetcher, ids: Sequence[int]) -> List[Optional[HNItem]]:
    """
    Fetch all ``ids`` concurrently, preserving input order.

    A failing fetch propagates and fails the whole batch; fetches still in
    flight at that point are cancelled.
    """
    if not ids:
        return []
    tasks = [asyncio.ensure_future(fetcher.get_item(item_id)) for item_id in ids]
    try:
        return list(await asyncio.gather(*tasks))
    except Exception:
        pending = [task for task in tasks if not task.done()]
        for task in pending:
            task.cancel()
        if pending:
            logger.debug("Cancelled %d in-flight fetches after a failed fetch", len(pending))
        raise


async def fetch_items_page(
    fetcher: ItemFetcher,
    ids: Optional[Sequence[int]],
    offset: int = 0,
    limit: int = 10,
) -> List[Optional[HNItem]]:
    """
    Fetch the ``[offset, offset + limit)`` slice of ``ids``.

    Args:
        fetcher: Source of item records.
        ids: Ordered item ids; ``None`` is treated as an empty list.
        offset: Index of the first id to fetch. Negative values clip to 0.
        limit: Maximum number of ids to fetch. Negative values clip to 0.

    Returns:
        The fetched records in the same order as the selected ids. Bounds past
        the end of ``ids`` are clipped, never an error.
    """
    ids = ids or []
    offset = max(offset, 0)
    limit = max(limit, 0)
    selected = list(ids[offset:offset + limit])
    logger.debug("Fetching page of %d items (offset=%d, limit=%d, available=%d)", len(selected), offset, limit, len(ids))
    return await fetch_items(fetcher, selected)
