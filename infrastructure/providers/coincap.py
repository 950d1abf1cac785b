import math
from datetime import UTC, datetime

from domain.exceptions.rates import ProviderError
from domain.models.rates import BridgeQuote

from .base import BaseHTTPProvider


class CoinCapProvider(BaseHTTPProvider):
	"""BTC/USD bridge rate from CoinCap."""

	URL = 'https://api.coincap.io/v2/assets/bitcoin'

	@property
	def name(self) -> str:
		return 'CoinCap'

	async def fetch_rate(self) -> BridgeQuote:
		data = await self._request(self.URL)
		try:
			price = float(data['data']['priceUsd'])
		except (KeyError, TypeError, ValueError) as e:
			raise ProviderError(f'CoinCap missing BTC price: {e!r}') from e

		if not math.isfinite(price) or price <= 0:
			raise ProviderError(f'CoinCap returned invalid BTC price: {price}')

		return BridgeQuote(last_price=price, fetch_time=datetime.now(UTC))
