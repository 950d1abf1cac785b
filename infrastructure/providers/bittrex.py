from typing import Any

from domain.exceptions.rates import ProviderError

from .base import BaseExchangeProvider


class BittrexProvider(BaseExchangeProvider):
	URL = 'https://api.bittrex.com/api/v1.1/public/getmarketsummary'
	PARAMS = {'market': 'BTC-DASH'}

	@property
	def name(self) -> str:
		return 'Bittrex'

	def _parse(self, data: Any) -> tuple[float, float]:
		if not data.get('success', False):
			raise ProviderError(f'Bittrex API error: {data.get("message", "Unknown error")}')

		summary = data['result'][0]
		return summary['Last'], summary['Volume']
