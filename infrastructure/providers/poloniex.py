from typing import Any

from .base import BaseExchangeProvider


class PoloniexProvider(BaseExchangeProvider):
	URL = 'https://poloniex.com/public'
	PARAMS = {'command': 'returnTicker'}

	@property
	def name(self) -> str:
		return 'Poloniex'

	def _parse(self, data: Any) -> tuple[float, float]:
		ticker = data['BTC_DASH']
		# Poloniex names pairs quote-first, so quoteVolume is the DASH side
		return ticker['last'], ticker['quoteVolume']
