"""Per-request GraphQL context."""

from strawberry.fastapi import BaseContext

from hn_graphql.core.fetcher import ItemFetcher


class HNContext(BaseContext):
    """Carries the item fetcher used by every resolver in a request."""

    def __init__(self, fetcher: ItemFetcher):
        super().__init__()
        self.fetcher = fetcher
