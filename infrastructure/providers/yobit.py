from typing import Any

from .base import BaseExchangeProvider


class YobitProvider(BaseExchangeProvider):
	URL = 'https://yobit.net/api/3/ticker/dash_btc'

	@property
	def name(self) -> str:
		return 'YoBit'

	def _parse(self, data: Any) -> tuple[float, float]:
		ticker = data['dash_btc']
		# vol is denominated in BTC, vol_cur in DASH
		return ticker['last'], ticker['vol_cur']
