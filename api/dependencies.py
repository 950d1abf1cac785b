import logging
from datetime import timedelta
from typing import Annotated

from fastapi import Depends
from redis.asyncio import Redis

from application.services import RateReaderService
from config.settings import Settings
from infrastructure.cache.redis_cache import RedisCacheService

logger = logging.getLogger(__name__)


class AppDependencies:
	"""Container for application-wide singleton dependencies."""

	redis_client: Redis | None = None
	redis_cache: RedisCacheService | None = None


deps = AppDependencies()


def init_dependencies(settings: Settings) -> None:
	"""Initialize all singleton dependencies. Called at app startup."""
	logger.info('Initializing dependencies...')

	deps.redis_client = Redis.from_url(settings.REDIS_URL, decode_responses=True)
	deps.redis_cache = RedisCacheService(
		deps.redis_client, rate_ttl=timedelta(hours=settings.RATE_TTL_HOURS)
	)
	logger.info('Dependencies initialized')


async def cleanup_dependencies() -> None:
	logger.info('Cleaning up dependencies...')

	if deps.redis_client:
		await deps.redis_client.aclose()
	deps.redis_client = None
	deps.redis_cache = None

	logger.info('Cleanup complete')


def get_redis_cache() -> RedisCacheService:
	if deps.redis_cache is None:
		raise RuntimeError('Redis cache not initialized')
	return deps.redis_cache


def get_rate_reader(
	cache: Annotated[RedisCacheService, Depends(get_redis_cache)],
) -> RateReaderService:
	return RateReaderService(cache=cache)
