import argparse
import asyncio
import contextlib
import logging
import signal
import sys
from datetime import timedelta

import httpx
from redis.asyncio import Redis

from application.services import RateFetchCoordinator, RateNormalizer
from config.logging import setup_logging
from config.settings import Settings, load_settings
from domain.exceptions.rates import ConfigMissingError, RateException
from infrastructure.cache.redis_cache import RedisCacheService
from infrastructure.providers import CoinCapProvider, build_exchange_providers

logger = logging.getLogger(__name__)


class RateFetchWorker:
	"""
	Background worker that runs a fetch cycle on a fixed interval.

	It runs independently of the API server; the two only share the cache.
	"""

	def __init__(self, coordinator: RateFetchCoordinator, update_interval: int = 1800):
		self.coordinator = coordinator
		self.update_interval = update_interval
		self.is_running = False
		self._stop_event = asyncio.Event()

	async def run_cycle(self) -> bool:
		"""Run one fetch cycle. Returns False when the cycle as a whole failed."""
		try:
			await self.coordinator.run()
		except RateException as e:
			logger.error(f'Fetch cycle failed: {type(e).__name__}: {e}')
			return False
		return True

	async def run(self) -> None:
		self.is_running = True
		self._stop_event.clear()
		logger.info(f'Rate fetch worker started, interval {self.update_interval}s')

		cycle_count = 0
		while self.is_running:
			cycle_count += 1
			logger.info(f'Cycle #{cycle_count}')
			try:
				await self.run_cycle()
			except asyncio.CancelledError:
				logger.info('Worker received cancellation signal')
				break
			except Exception as e:
				logger.critical(f'Unexpected error in fetch cycle: {e}', exc_info=True)

			try:
				await self._wait_for_next_cycle()
			except asyncio.CancelledError:
				logger.info('Worker received cancellation signal')
				break

		logger.info('Rate fetch worker stopped')

	def stop(self) -> None:
		logger.info('Stopping rate fetch worker...')
		self.is_running = False
		self._stop_event.set()

	async def _wait_for_next_cycle(self) -> None:
		with contextlib.suppress(TimeoutError):
			await asyncio.wait_for(self._stop_event.wait(), timeout=self.update_interval)


def build_coordinator(
	settings: Settings, redis_client: Redis, http_client: httpx.AsyncClient
) -> RateFetchCoordinator:
	rate_ttl = timedelta(hours=settings.RATE_TTL_HOURS)
	return RateFetchCoordinator(
		cache=RedisCacheService(redis_client, rate_ttl=rate_ttl),
		bridge_provider=CoinCapProvider(client=http_client),
		providers=build_exchange_providers(http_client),
		normalizer=RateNormalizer(settings.TRACKED_ASSET, settings.BRIDGE_ASSET),
		rate_ttl=rate_ttl,
	)


async def main(once: bool = False) -> int:
	try:
		settings = load_settings()
	except ConfigMissingError as e:
		setup_logging()
		logger.error(f'Invalid worker configuration: {e}')
		return 1

	setup_logging(settings.LOG_LEVEL, settings.LOG_JSON)

	redis_client = Redis.from_url(settings.REDIS_URL, decode_responses=True)
	http_client = httpx.AsyncClient(timeout=settings.HTTP_TIMEOUT_SECONDS)
	worker = RateFetchWorker(
		build_coordinator(settings, redis_client, http_client),
		update_interval=settings.FETCH_INTERVAL_SECONDS,
	)

	try:
		if once:
			return 0 if await worker.run_cycle() else 1

		loop = asyncio.get_running_loop()
		for sig in (signal.SIGINT, signal.SIGTERM):
			loop.add_signal_handler(sig, worker.stop)
		await worker.run()
		return 0
	finally:
		await http_client.aclose()
		await redis_client.aclose()
		logger.info('Cleanup completed')


def cli() -> None:
	parser = argparse.ArgumentParser(description='Fetch Dash/USD rates into the cache.')
	parser.add_argument('--once', action='store_true', help='run a single fetch cycle and exit')
	args = parser.parse_args()
	sys.exit(asyncio.run(main(once=args.once)))


if __name__ == '__main__':
	cli()
