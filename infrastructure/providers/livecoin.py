from typing import Any

from .base import BaseExchangeProvider


class LivecoinProvider(BaseExchangeProvider):
	URL = 'https://api.livecoin.net/exchange/ticker'
	PARAMS = {'currencyPair': 'DASH/BTC'}

	@property
	def name(self) -> str:
		return 'Livecoin'

	def _parse(self, data: Any) -> tuple[float, float]:
		return data['last'], data['volume']
