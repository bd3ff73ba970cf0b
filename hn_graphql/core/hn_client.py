"""
HTTP client for the Hacker News v0 API.

This module provides the live ``ItemFetcher`` implementation backed by
``httpx.AsyncClient``, including retry logic with exponential backoff and
validation of the returned payloads.
"""

import asyncio
import logging
from typing import Any, List, Optional
from urllib.parse import quote

import httpx
from pydantic import ValidationError

from hn_graphql.config.settings import settings
from hn_graphql.core.fetcher import HNGraphQLError, StoryListKind
from hn_graphql.models import HNItem, HNUser

logger = logging.getLogger(__name__)

RETRYABLE_STATUS_CODES = frozenset({429, 500, 502, 503, 504})


class HackerNewsAPIError(HNGraphQLError):
    """Raised when the Hacker News API cannot be reached or returns bad data."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)


class HackerNewsClient:
    """
    Async client for the Hacker News Firebase API.

    Use as an async context manager, or call ``close()`` when done. An existing
    ``httpx.AsyncClient`` may be passed in; it is then left open on close.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        max_retries: Optional[int] = None,
        backoff_seconds: Optional[float] = None,
        client: Optional[httpx.AsyncClient] = None,
    ):
        """
        Initialize the API client.

        Args:
            base_url: Base URL of the Hacker News API
            timeout: Request timeout in seconds
            max_retries: Retry attempts for transient failures
            backoff_seconds: Initial backoff, doubled after each retry
            client: Optional pre-configured httpx client
        """
        self.base_url = base_url or settings.HN_API_BASE_URL
        if not self.base_url.endswith("/"):
            self.base_url += "/"
        self.timeout = timeout if timeout is not None else settings.HN_API_TIMEOUT_SECONDS
        self.max_retries = max_retries if max_retries is not None else settings.HN_API_MAX_RETRIES
        self.backoff_seconds = backoff_seconds if backoff_seconds is not None else settings.HN_API_BACKOFF_SECONDS

        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(
            base_url=self.base_url,
            timeout=httpx.Timeout(self.timeout),
            headers={"User-Agent": settings.HN_API_USER_AGENT, "Accept": "application/json"},
            limits=httpx.Limits(max_connections=settings.HN_API_MAX_CONNECTIONS),
        )
        logger.info(f"Initialized HackerNewsClient with base_url: {self.base_url}")

    async def __aenter__(self) -> "HackerNewsClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()

    async def close(self) -> None:
        """Close the underlying HTTP client if this instance created it."""
        if self._owns_client:
            await self._client.aclose()

    async def _get_json(self, path: str) -> Any:
        """
        GET ``path`` relative to the base URL and decode the JSON body.

        Transport errors, 429 and 5xx responses are retried with exponential
        backoff; any other non-200 response fails immediately.

        Raises:
            HackerNewsAPIError: If the request fails after all retries.
        """
        url = self.base_url + path
        backoff = self.backoff_seconds

        for attempt in range(self.max_retries + 1):
            try:
                logger.debug(f"GET {url} (attempt {attempt + 1})")
                response = await self._client.get(url)
            except httpx.HTTPError as e:
                if attempt < self.max_retries:
                    logger.warning(f"Request to {url} failed ({e!r}), retrying in {backoff}s")
                    await asyncio.sleep(backoff)
                    backoff *= 2
                    continue
                raise HackerNewsAPIError(f"Request to {url} failed after {attempt + 1} attempts: {e}") from e

            if response.status_code == 200:
                try:
                    return response.json()
                except ValueError as e:
                    raise HackerNewsAPIError(f"Invalid JSON from {url}: {e}", response.status_code) from e

            if response.status_code in RETRYABLE_STATUS_CODES and attempt < self.max_retries:
                logger.warning(f"HTTP {response.status_code} from {url}, retrying in {backoff}s")
                await asyncio.sleep(backoff)
                backoff *= 2
                continue

            raise HackerNewsAPIError(f"HTTP {response.status_code}: {response.text}", response.status_code)

        # Unreachable: the loop either returns or raises
        raise HackerNewsAPIError(f"Request to {url} failed")

    async def get_item(self, item_id: int) -> Optional[HNItem]:
        """
        Fetch a single item.

        Returns:
            HNItem | None: The item, or None if the API has no such item
        """
        payload = await self._get_json(f"item/{int(item_id)}.json")
        if payload is None:
            return None
        try:
            return HNItem.model_validate(payload)
        except ValidationError as e:
            raise HackerNewsAPIError(f"Malformed item {item_id}: {e}") from e

    async def get_user(self, user_id: str) -> Optional[HNUser]:
        """
        Fetch a user by case-sensitive id.

        Returns:
            HNUser | None: The user, or None if the API has no such user
        """
        payload = await self._get_json(f"user/{quote(user_id, safe='')}.json")
        if payload is None:
            return None
        try:
            return HNUser.model_validate(payload)
        except ValidationError as e:
            raise HackerNewsAPIError(f"Malformed user {user_id!r}: {e}") from e

    async def get_story_ids(self, kind: StoryListKind) -> List[int]:
        """Fetch one of the bulk story id lists (top, new, ask, show, job)."""
        payload = await self._get_json(f"{StoryListKind(kind).endpoint}.json")
        if payload is None:
            return []
        if not isinstance(payload, list):
            raise HackerNewsAPIError(f"Expected a list of ids for {kind.value}stories, got {type(payload).__name__}")
        return [int(item_id) for item_id in payload]
