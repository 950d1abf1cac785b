from typing import Any

from .base import BaseExchangeProvider


class HitBTCProvider(BaseExchangeProvider):
	URL = 'https://api.hitbtc.com/api/2/public/ticker/DASHBTC'

	@property
	def name(self) -> str:
		return 'HitBTC'

	def _parse(self, data: Any) -> tuple[float, float]:
		return data['last'], data['volume']
