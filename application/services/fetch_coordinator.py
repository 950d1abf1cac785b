import asyncio
import logging
from datetime import datetime, timedelta

from application.services.normalizer import RateNormalizer
from domain.exceptions.rates import BridgeRateError, RateException
from domain.models.rates import FetchCycleResult
from infrastructure.cache.redis_cache import RedisCacheService
from infrastructure.providers.base import BridgeRateProvider, ExchangeRateProvider

logger = logging.getLogger(__name__)


class RateFetchCoordinator:
	"""
	Runs one fetch cycle: bridge rate first, then every exchange concurrently.

	Each exchange is fetched, normalized and cached in its own task. A failing
	exchange is logged and left out of the cache for this cycle; it never stops
	the others. Only a missing cache or bridge rate fails the whole cycle.
	"""

	def __init__(
		self,
		cache: RedisCacheService,
		bridge_provider: BridgeRateProvider,
		providers: list[ExchangeRateProvider],
		normalizer: RateNormalizer,
		rate_ttl: timedelta = timedelta(hours=24),
	):
		self.cache = cache
		self.bridge_provider = bridge_provider
		self.providers = providers
		self.normalizer = normalizer
		self.rate_ttl = rate_ttl

	async def run(self) -> FetchCycleResult:
		cycle_start = datetime.now()

		await self.cache.ping()

		try:
			bridge = await self.bridge_provider.fetch_rate()
		except RateException as e:
			raise BridgeRateError(f'Bridge rate from {self.bridge_provider.name} failed: {e}') from e

		bridge_rate_usd = bridge.last_price
		logger.info(f'Bridge rate from {self.bridge_provider.name}: {bridge_rate_usd}')

		tasks = [self._fetch_and_store(provider, bridge_rate_usd) for provider in self.providers]
		results = await asyncio.gather(*tasks, return_exceptions=True)

		result = FetchCycleResult(bridge_rate_usd=bridge_rate_usd)
		for provider, outcome in zip(self.providers, results, strict=True):
			if outcome is True:
				result.succeeded.append(provider.name)
			else:
				if isinstance(outcome, BaseException):
					logger.error(
						f'Unexpected failure for {provider.name}: {outcome!r}',
						exc_info=outcome,
					)
				result.failed.append(provider.name)

		cycle_duration = (datetime.now() - cycle_start).total_seconds()
		logger.info(
			f'Fetch cycle completed in {cycle_duration:.2f}s: '
			f'{len(result.succeeded)}/{result.attempted} exchanges updated',
			extra={
				'extra_data': {
					'succeeded': result.succeeded,
					'failed': result.failed,
					'bridge_rate_usd': bridge_rate_usd,
					'cycle_duration_seconds': cycle_duration,
				}
			},
		)
		return result

	async def _fetch_and_store(self, provider: ExchangeRateProvider, bridge_rate_usd: float) -> bool:
		try:
			quote = await provider.fetch_rate()
			rate = self.normalizer.normalize(bridge_rate_usd, provider.name, quote)
			await self.cache.put(provider.name, rate, self.rate_ttl)
		except RateException as e:
			logger.error(f'{type(e).__name__} for {provider.name}: {e}')
			return False

		logger.info(f'Rate for {provider.name}: {rate}')
		return True
