from typing import Any

from .base import BaseExchangeProvider


class CexProvider(BaseExchangeProvider):
	URL = 'https://cex.io/api/ticker/DASH/USD'
	QUOTE_CURRENCY = 'USD'

	@property
	def name(self) -> str:
		return 'CEX.IO'

	def _parse(self, data: Any) -> tuple[float, float]:
		return data['last'], data['volume']
