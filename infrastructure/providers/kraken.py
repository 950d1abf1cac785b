from typing import Any

from domain.exceptions.rates import ProviderError

from .base import BaseExchangeProvider


class KrakenProvider(BaseExchangeProvider):
	URL = 'https://api.kraken.com/0/public/Ticker'
	PARAMS = {'pair': 'DASHUSD'}
	QUOTE_CURRENCY = 'USD'

	@property
	def name(self) -> str:
		return 'Kraken'

	def _parse(self, data: Any) -> tuple[float, float]:
		if data.get('error'):
			raise ProviderError(f'Kraken API error: {data["error"]}')

		# result is keyed by Kraken's own pair name, which differs from the request
		ticker = list(data['result'].values())[0]
		# c = [last trade price, lot volume], v = [today, last 24 hours]
		return ticker['c'][0], ticker['v'][1]
