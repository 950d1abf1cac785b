"""
Shared fixtures: an in-memory stand-in for redis.asyncio.Redis and sample records.
"""

from datetime import UTC, datetime, timedelta
from fnmatch import fnmatch

import pytest
from redis.exceptions import ConnectionError as RedisConnectionError
from redis.exceptions import RedisError

from domain.models.rates import DashUSDRate, Quote

FETCH_TIME = datetime(2025, 11, 5, 10, 30, 0, tzinfo=UTC)


class FakeRedis:
    """Implements the handful of redis commands the cache service uses."""

    def __init__(self):
        self.store: dict[str, str] = {}
        self.ttls: dict[str, timedelta] = {}
        self.ping_fails = False
        self.failing_keys: set[str] = set()

    async def ping(self):
        if self.ping_fails:
            raise RedisConnectionError('Connection refused')
        return True

    async def setex(self, key, ttl, value):
        if key in self.failing_keys:
            raise RedisError(f'OOM command not allowed for {key}')
        self.store[key] = value
        self.ttls[key] = ttl
        return True

    async def get(self, key):
        return self.store.get(key)

    async def scan_iter(self, match='*'):
        for key in list(self.store):
            if fnmatch(key, match):
                yield key


@pytest.fixture
def fake_redis():
    return FakeRedis()


@pytest.fixture
def kraken_rate():
    return DashUSDRate(name='Kraken', rate_usd=100.0, volume_usd=10000.0, fetched_at=FETCH_TIME)


@pytest.fixture
def binance_rate():
    return DashUSDRate(name='Binance', rate_usd=95.5, volume_usd=None, fetched_at=FETCH_TIME)


def make_quote(quote_currency='BTC', last_price=0.002, volume=100.0, base_currency='DASH'):
    return Quote(
        base_currency=base_currency,
        quote_currency=quote_currency,
        last_price=last_price,
        base_asset_volume=volume,
        fetch_time=FETCH_TIME,
    )


@pytest.fixture
def quote_factory():
    return make_quote


@pytest.fixture
def fetch_time():
    return FETCH_TIME
