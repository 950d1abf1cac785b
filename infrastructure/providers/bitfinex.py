from typing import Any

from .base import BaseExchangeProvider

LAST_PRICE_INDEX = 6
VOLUME_INDEX = 7


class BitfinexProvider(BaseExchangeProvider):
	URL = 'https://api-pub.bitfinex.com/v2/ticker/tDSHUSD'
	QUOTE_CURRENCY = 'USD'

	@property
	def name(self) -> str:
		return 'Bitfinex'

	def _parse(self, data: Any) -> tuple[float, float]:
		return data[LAST_PRICE_INDEX], data[VOLUME_INDEX]
