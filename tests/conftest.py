"""Shared fixtures: a fake clock and a fake RAWG upstream."""

import os

# Set before any application import; app.py builds the app at import time
os.environ["RAWG_API_KEY"] = "test_api_key_for_ci_testing_only"  # pragma: allowlist secret

import httpx
import pytest

from services.cache import TTLCache
from services.games import GameCatalog
from services.rawg_client import RawgClient

TEST_API_KEY = os.environ["RAWG_API_KEY"]


class FakeClock:
    """Monotonic clock the test advances by hand."""

    def __init__(self, now: float = 1000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class FakeRawg:
    """Records outbound requests and answers them with a canned handler."""

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self.respond = lambda request: httpx.Response(200, json={"count": 0, "results": []})

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.respond(request)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def fake_rawg() -> FakeRawg:
    return FakeRawg()


@pytest.fixture
def rawg_client(fake_rawg: FakeRawg) -> RawgClient:
    return RawgClient(api_key=TEST_API_KEY, transport=fake_rawg.transport)


@pytest.fixture
def catalog(clock: FakeClock, rawg_client: RawgClient) -> GameCatalog:
    return GameCatalog(TTLCache(clock=clock), rawg_client)
