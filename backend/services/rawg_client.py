"""RAWG video game database client.

Keeps the API key server-side: callers describe a request as a path plus
query params, and the key is only attached here on the way out.
"""

import logging
from dataclasses import dataclass, field
from urllib.parse import quote

import httpx

from errors import ParseError, UpstreamError

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.rawg.io/api"

TRENDING_PAGE_SIZE = 100
SEARCH_PAGE_SIZE = 24


@dataclass(frozen=True)
class UpstreamRequest:
    path: str
    params: dict[str, str | int] = field(default_factory=dict)


def trending_request() -> UpstreamRequest:
    """Most-added games first, one big page."""
    return UpstreamRequest("/games", {"ordering": "-added", "page_size": TRENDING_PAGE_SIZE})


def search_request(query: str) -> UpstreamRequest:
    return UpstreamRequest("/games", {"search": query, "page_size": SEARCH_PAGE_SIZE})


def details_request(game_id: str) -> UpstreamRequest:
    return UpstreamRequest(f"/games/{quote(game_id, safe='')}")


class RawgClient:
    """Stateless async client for the RAWG API.

    Args:
        api_key: RAWG API key, sent as the ``key`` query parameter.
        base_url: API root, without a trailing slash.
        timeout: Seconds before an outbound call is abandoned.
        transport: Optional httpx transport (tests pass ``httpx.MockTransport``).
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 10,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._api_key = api_key
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._transport = transport

    async def fetch(self, request: UpstreamRequest) -> dict:
        """Perform one GET against RAWG and return the decoded JSON body.

        Raises:
            UpstreamError: Non-2xx status, or the request failed in transit.
            ParseError: The body was not valid JSON.
        """
        params = {"key": self._api_key, **request.params}

        try:
            async with httpx.AsyncClient(
                base_url=self._base_url, timeout=self._timeout, transport=self._transport
            ) as client:
                resp = await client.get(request.path, params=params)
        except httpx.HTTPError as e:
            # httpx transport errors do not embed the request URL, so the key stays out
            raise UpstreamError(f"RAWG request to {request.path} failed: {e!r}") from e

        if not resp.is_success:
            raise UpstreamError(
                f"RAWG API responded with {resp.status_code} for {request.path}",
                upstream_status=resp.status_code,
            )

        try:
            return resp.json()
        except ValueError as e:
            raise ParseError(request.path) from e
