"""Tests for the lazy-expiry TTL cache."""

from services.cache import DEFAULT_TTL_SECONDS, CacheEntry, TTLCache


def test_default_ttl_is_ten_minutes():
    assert DEFAULT_TTL_SECONDS == 600
    assert TTLCache().ttl_seconds == 600


def test_get_unknown_key_misses(clock):
    cache = TTLCache(clock=clock)
    assert cache.get("trending") is None
    assert len(cache) == 0


def test_set_then_get_returns_value(clock):
    cache = TTLCache(clock=clock)
    page = {"results": [{"id": 1, "name": "Portal 2"}]}
    cache.set("trending", page)
    assert cache.get("trending") is page


def test_entry_records_store_time(clock):
    cache = TTLCache(clock=clock)
    cache.set("game_1", {"id": 1})
    assert cache._store["game_1"] == CacheEntry(value={"id": 1}, stored_at=clock.now)


def test_trending_hit_just_before_ttl_and_miss_just_after(clock):
    cache = TTLCache(clock=clock)
    page = {"results": []}
    cache.set("trending", page)

    clock.advance(9 * 60 + 59)
    assert cache.get("trending") == page

    clock.advance(2)  # now at 10m01s
    assert cache.get("trending") is None


def test_entry_at_exactly_ttl_is_still_fresh(clock):
    cache = TTLCache(ttl_seconds=60, clock=clock)
    cache.set("k", "v")
    clock.advance(60)
    assert cache.get("k") == "v"


def test_expiry_deletes_entry_and_stays_expired(clock):
    cache = TTLCache(ttl_seconds=60, clock=clock)
    cache.set("k", "v")
    clock.advance(61)

    assert cache.get("k") is None
    assert len(cache) == 0
    assert cache.get("k") is None


def test_expired_entries_linger_until_looked_up(clock):
    cache = TTLCache(ttl_seconds=60, clock=clock)
    cache.set("a", 1)
    cache.set("b", 2)
    clock.advance(61)

    cache.get("a")
    assert len(cache) == 1


def test_overwrite_replaces_value(clock):
    cache = TTLCache(clock=clock)
    cache.set("k", "v1")
    cache.set("k", "v2")
    assert cache.get("k") == "v2"


def test_overwrite_after_expiry_restarts_ttl(clock):
    cache = TTLCache(ttl_seconds=60, clock=clock)
    cache.set("k", "v1")
    clock.advance(120)
    cache.set("k", "v2")
    clock.advance(30)
    assert cache.get("k") == "v2"


def test_keys_are_case_sensitive(clock):
    cache = TTLCache(clock=clock)
    cache.set("search_zelda", "lower")
    assert cache.get("search_Zelda") is None
    assert cache.get("search_zelda") == "lower"


def test_lookups_are_logged(clock, caplog):
    cache = TTLCache(ttl_seconds=60, clock=clock)
    with caplog.at_level("INFO", logger="services.cache"):
        cache.get("k")
        cache.set("k", "v")
        cache.get("k")
        clock.advance(61)
        cache.get("k")

    messages = [r.getMessage() for r in caplog.records]
    assert messages == ["Cache miss: k", "Cache set: k", "Cache hit: k", "Cache expired: k"]
