from typing import Any

from domain.exceptions.rates import ProviderError

from .base import BaseExchangeProvider


class BigONEProvider(BaseExchangeProvider):
	URL = 'https://big.one/api/v3/asset_pairs/DASH-BTC/ticker'

	@property
	def name(self) -> str:
		return 'BigONE'

	def _parse(self, data: Any) -> tuple[float, float]:
		if data.get('code', 0) != 0:
			raise ProviderError(f'BigONE API error: {data.get("message", "Unknown error")}')

		ticker = data['data']
		return ticker['close'], ticker['volume']
