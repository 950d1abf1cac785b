from typing import Any

from .base import BaseExchangeProvider


class BinanceProvider(BaseExchangeProvider):
	URL = 'https://api.binance.com/api/v3/ticker/24hr'
	PARAMS = {'symbol': 'DASHBTC'}

	@property
	def name(self) -> str:
		return 'Binance'

	def _parse(self, data: Any) -> tuple[float, float]:
		return data['lastPrice'], data['volume']
