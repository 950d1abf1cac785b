import logging
from datetime import timedelta

from redis import asyncio as redis
from redis.exceptions import RedisError

from domain.exceptions.rates import StoreReadError, StoreUnreachableError, StoreWriteError
from domain.models.rates import DashUSDRate
from infrastructure.cache.serialization import encode_rate

logger = logging.getLogger(__name__)


class RedisCacheService:
	KEY_PREFIX = 'rate:'

	def __init__(self, redis_client: redis.Redis, rate_ttl: timedelta = timedelta(hours=24)):
		self.redis = redis_client
		self.rate_ttl = rate_ttl

	def _make_rate_key(self, name: str) -> str:
		return f'{self.KEY_PREFIX}{name}'

	async def ping(self) -> None:
		try:
			alive = await self.redis.ping()
		except (RedisError, OSError) as e:
			raise StoreUnreachableError(f'Unable to ping redis: {e}') from e
		if not alive:
			raise StoreUnreachableError('Redis did not answer PING')

	async def put(self, name: str, rate: DashUSDRate, ttl: timedelta | None = None) -> None:
		key = self._make_rate_key(name)
		try:
			value = encode_rate(rate)
		except ValueError as e:
			raise StoreWriteError(f'Refusing to write {key}: {e}') from e
		try:
			# SETEX resets the expiration on every write
			await self.redis.setex(key, ttl or self.rate_ttl, value)
		except (RedisError, OSError) as e:
			raise StoreWriteError(f'Failed to write {key}: {e}') from e

	async def get(self, name: str) -> str | None:
		key = self._make_rate_key(name)
		try:
			return await self.redis.get(key)
		except (RedisError, OSError) as e:
			raise StoreReadError(f'Failed to read {key}: {e}') from e

	async def list_all(self) -> list[tuple[str, str]]:
		"""Return (exchange name, raw value) for every cached rate."""
		try:
			keys = [key async for key in self.redis.scan_iter(match=f'{self.KEY_PREFIX}*')]
		except (RedisError, OSError) as e:
			raise StoreReadError(f'Failed to list cached rates: {e}') from e

		entries = []
		for key in keys:
			if isinstance(key, bytes):
				key = key.decode()
			name = key.removeprefix(self.KEY_PREFIX)
			raw = await self.get(name)
			if raw is None:
				logger.debug(f'Cached rate {key} expired before it could be read')
				continue
			entries.append((name, raw))
		return entries
