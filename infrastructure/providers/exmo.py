from typing import Any

from .base import BaseExchangeProvider


class ExmoProvider(BaseExchangeProvider):
	URL = 'https://api.exmo.com/v1.1/ticker'

	@property
	def name(self) -> str:
		return 'Exmo'

	def _parse(self, data: Any) -> tuple[float, float]:
		# the ticker endpoint returns every pair at once
		ticker = data['DASH_BTC']
		return ticker['last_trade'], ticker['vol']
