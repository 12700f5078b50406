# This project was developed with assistance from AI tools.
"""Tests for the TTL cache and the per-client rate limiter."""

import pytest

from casaready.services.cache import TTLCache
from casaready.services.rate_limit import FixedWindowRateLimiter


class FakeClock:
    def __init__(self, now: float = 1000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


# -- TTLCache --


def test_cache_returns_value_before_expiry():
    clock = FakeClock()
    cache = TTLCache(ttl_seconds=60, clock=clock)
    cache.set("austin-tx", {"population": 960_000})

    clock.advance(59.9)
    assert cache.get("austin-tx") == {"population": 960_000}


def test_cache_expires_entries_lazily():
    clock = FakeClock()
    cache = TTLCache(ttl_seconds=60, clock=clock)
    cache.set("austin-tx", "value")
    assert len(cache) == 1

    clock.advance(60)
    assert cache.get("austin-tx") is None
    assert len(cache) == 0


def test_cache_set_refreshes_expiry():
    clock = FakeClock()
    cache = TTLCache(ttl_seconds=60, clock=clock)
    cache.set("key", "old")
    clock.advance(50)
    cache.set("key", "new")
    clock.advance(50)
    assert cache.get("key") == "new"


def test_cache_write_sweeps_expired_keys():
    clock = FakeClock()
    cache = TTLCache(ttl_seconds=60, clock=clock)
    cache.set("austin-tx", 1)
    cache.set("dallas-tx", 2)

    clock.advance(60)
    cache.set("houston-tx", 3)
    assert len(cache) == 1
    assert cache.get("houston-tx") == 3


def test_cache_miss_and_clear():
    cache = TTLCache(ttl_seconds=60)
    assert cache.get("missing") is None
    cache.set("a", 1)
    cache.clear()
    assert len(cache) == 0


def test_cache_rejects_non_positive_ttl():
    with pytest.raises(ValueError):
        TTLCache(ttl_seconds=0)


# -- FixedWindowRateLimiter --


def test_limiter_allows_up_to_limit():
    limiter = FixedWindowRateLimiter(max_requests=3, window_seconds=60, clock=FakeClock())
    assert [limiter.allow("1.2.3.4") for _ in range(4)] == [True, True, True, False]


def test_limiter_tracks_keys_independently():
    limiter = FixedWindowRateLimiter(max_requests=1, window_seconds=60, clock=FakeClock())
    assert limiter.allow("1.2.3.4") is True
    assert limiter.allow("5.6.7.8") is True
    assert limiter.allow("1.2.3.4") is False


def test_limiter_window_resets():
    clock = FakeClock()
    limiter = FixedWindowRateLimiter(max_requests=1, window_seconds=60, clock=clock)
    assert limiter.allow("ip") is True
    assert limiter.allow("ip") is False

    clock.advance(60)
    assert limiter.allow("ip") is True


def test_limiter_retry_after_rounds_up():
    clock = FakeClock()
    limiter = FixedWindowRateLimiter(max_requests=1, window_seconds=60, clock=clock)
    assert limiter.retry_after("ip") == 0

    limiter.allow("ip")
    clock.advance(10.5)
    assert limiter.retry_after("ip") == 50

    clock.advance(60)
    assert limiter.retry_after("ip") == 0


def test_limiter_reset():
    limiter = FixedWindowRateLimiter(max_requests=1, window_seconds=60, clock=FakeClock())
    limiter.allow("ip")
    limiter.reset()
    assert limiter.allow("ip") is True


def test_limiter_sweeps_expired_windows():
    clock = FakeClock()
    limiter = FixedWindowRateLimiter(max_requests=1, window_seconds=60, clock=clock)
    for ip in ("10.0.0.1", "10.0.0.2", "10.0.0.3"):
        limiter.allow(ip)
    assert len(limiter) == 3

    clock.advance(60)
    assert limiter.allow("10.0.0.4") is True
    assert len(limiter) == 1
