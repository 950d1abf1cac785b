from typing import Any

from .base import BaseExchangeProvider


class CoinbaseProProvider(BaseExchangeProvider):
	URL = 'https://api.pro.coinbase.com/products/DASH-USD/ticker'
	QUOTE_CURRENCY = 'USD'

	@property
	def name(self) -> str:
		return 'Coinbase Pro'

	def _parse(self, data: Any) -> tuple[float, float]:
		return data['price'], data['volume']
