from typing import Any

from domain.exceptions.rates import ProviderError

from .base import BaseExchangeProvider


class HuobiProvider(BaseExchangeProvider):
	URL = 'https://api.huobi.pro/market/detail/merged'
	PARAMS = {'symbol': 'dashbtc'}

	@property
	def name(self) -> str:
		return 'Huobi'

	def _parse(self, data: Any) -> tuple[float, float]:
		if data.get('status') != 'ok':
			raise ProviderError(f'Huobi API error: {data.get("err-msg", "Unknown error")}')

		tick = data['tick']
		# amount is base volume, vol is quote volume
		return tick['close'], tick['amount']
