import logging

from domain.exceptions.rates import DecodeError
from domain.models.rates import DashUSDRate
from infrastructure.cache.redis_cache import RedisCacheService
from infrastructure.cache.serialization import decode_rate

logger = logging.getLogger(__name__)


class RateReaderService:
	def __init__(self, cache: RedisCacheService):
		self.cache = cache

	async def collect_all(self) -> list[DashUSDRate]:
		"""
		Snapshot of every cached rate. One undecodable entry fails the whole
		read; a partial list is never returned.
		"""
		await self.cache.ping()

		rates = []
		for name, raw in await self.cache.list_all():
			try:
				rates.append(decode_rate(raw))
			except DecodeError as e:
				logger.error(f'Corrupt cached rate for {name}: {e}')
				raise

		logger.debug(f'Read {len(rates)} cached rates')
		return rates
