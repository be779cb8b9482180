"""Cached access to the RAWG catalog: trending, search, and game details.

Each operation checks the cache first and only calls RAWG on a miss.
Failures are never cached, and the caller only sees a generic message.
"""

import logging
from typing import Any

from errors import CatalogUnavailableError, ParseError, UpstreamError
from services.cache import TTLCache
from services.rawg_client import (
    RawgClient,
    UpstreamRequest,
    details_request,
    search_request,
    trending_request,
)

logger = logging.getLogger(__name__)

TRENDING_KEY = "trending"


def search_key(query: str) -> str:
    """Raw query, no normalization: "zelda" and "Zelda" cache separately."""
    return f"search_{query}"


def game_key(game_id: str) -> str:
    return f"game_{game_id}"


class GameCatalog:
    def __init__(self, cache: TTLCache, client: RawgClient):
        self.cache = cache
        self.client = client

    async def get_trending(self) -> Any:
        return await self._cached(TRENDING_KEY, trending_request(), "Failed to fetch trending games")

    async def search_games(self, query: str) -> Any:
        return await self._cached(search_key(query), search_request(query), "Failed to search games")

    async def get_game_details(self, game_id: str) -> Any:
        return await self._cached(
            game_key(game_id), details_request(game_id), "Failed to fetch game details"
        )

    async def _cached(self, key: str, request: UpstreamRequest, failure_message: str) -> Any:
        cached = self.cache.get(key)
        if cached is not None:
            return cached

        try:
            data = await self.client.fetch(request)
        except (UpstreamError, ParseError) as e:
            logger.error("%s (%s): %s", failure_message, key, e)
            raise CatalogUnavailableError(failure_message) from e

        self.cache.set(key, data)
        return data
