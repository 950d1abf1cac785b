from abc import ABC, abstractmethod
from datetime import UTC, datetime
from typing import Any, Protocol

import httpx

from domain.exceptions.rates import ProviderError
from domain.models.rates import BridgeQuote, Quote


class ExchangeRateProvider(Protocol):
	@property
	def name(self) -> str: ...

	async def fetch_rate(self) -> Quote: ...

	async def close(self) -> None: ...


class BridgeRateProvider(Protocol):
	@property
	def name(self) -> str: ...

	async def fetch_rate(self) -> BridgeQuote: ...

	async def close(self) -> None: ...


class BaseHTTPProvider(ABC):
	"""Shared HTTP handling for public ticker endpoints."""

	URL: str = ''

	def __init__(self, client: httpx.AsyncClient | None = None, timeout: float = 10):
		self._owns_client = client is None
		self._client = client or httpx.AsyncClient(timeout=timeout)

	@property
	@abstractmethod
	def name(self) -> str: ...

	async def _request(self, url: str, params: dict | None = None) -> Any:
		try:
			response = await self._client.get(url, params=params)
			response.raise_for_status()
			return response.json()

		except httpx.HTTPStatusError as e:
			raise ProviderError(
				f'{self.name} HTTP error {e.response.status_code}: {e.response.text[:200]}'
			) from e
		except httpx.RequestError as e:
			raise ProviderError(f'{self.name} request failed: {e.__class__.__name__}') from e
		except ValueError as e:
			raise ProviderError(f'{self.name} response parsing error: {str(e)}') from e

	async def close(self) -> None:
		if self._owns_client:
			await self._client.aclose()


class BaseExchangeProvider(BaseHTTPProvider):
	"""
	An exchange ticker client. Subclasses set the endpoint, the pair it quotes
	and how to pull the last price and base volume out of the payload.
	"""

	BASE_CURRENCY = 'DASH'
	QUOTE_CURRENCY = 'BTC'
	PARAMS: dict | None = None

	@abstractmethod
	def _parse(self, data: Any) -> tuple[float, float]:
		"""Return (last price, base asset volume) from a decoded response."""

	async def fetch_rate(self) -> Quote:
		data = await self._request(self.URL, self.PARAMS)
		try:
			last_price, volume = self._parse(data)
			last_price, volume = float(last_price), float(volume)
		except ProviderError:
			raise
		except (AttributeError, KeyError, IndexError, TypeError, ValueError) as e:
			raise ProviderError(f'{self.name} unexpected response shape: {e!r}') from e

		return Quote(
			base_currency=self.BASE_CURRENCY,
			quote_currency=self.QUOTE_CURRENCY,
			last_price=last_price,
			base_asset_volume=volume,
			fetch_time=datetime.now(UTC),
		)
