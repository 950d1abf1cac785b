import math

from domain.exceptions.rates import (
	InvalidQuoteError,
	UnexpectedBaseCurrencyError,
	UnexpectedQuoteCurrencyError,
)
from domain.models.rates import DashUSDRate, Quote

USD = 'USD'


class RateNormalizer:
	"""Converts exchange quotes of the tracked asset into USD rates."""

	def __init__(self, tracked_asset: str = 'DASH', bridge_asset: str = 'BTC'):
		self.tracked_asset = tracked_asset.upper()
		self.bridge_asset = bridge_asset.upper()

	def normalize(self, bridge_rate_usd: float, source_name: str, quote: Quote) -> DashUSDRate:
		if quote.base_currency.upper() != self.tracked_asset:
			raise UnexpectedBaseCurrencyError(
				f'{source_name}: base currency {quote.base_currency} is not {self.tracked_asset}'
			)
		if not math.isfinite(quote.last_price) or quote.last_price <= 0:
			raise InvalidQuoteError(f'{source_name}: invalid last price {quote.last_price}')
		if not math.isfinite(quote.base_asset_volume) or quote.base_asset_volume < 0:
			raise InvalidQuoteError(f'{source_name}: invalid volume {quote.base_asset_volume}')

		quote_currency = quote.quote_currency.upper()
		if quote_currency == self.bridge_asset:
			rate_usd = quote.last_price * bridge_rate_usd
		elif quote_currency == USD:
			rate_usd = quote.last_price
		else:
			raise UnexpectedQuoteCurrencyError(
				f'{source_name}: cannot convert quote currency {quote.quote_currency} to {USD}'
			)

		if not math.isfinite(rate_usd) or rate_usd <= 0:
			raise InvalidQuoteError(f'{source_name}: USD price {rate_usd} out of range')

		volume_usd = quote.base_asset_volume * rate_usd
		if not math.isfinite(volume_usd):
			raise InvalidQuoteError(f'{source_name}: USD volume {volume_usd} out of range')

		return DashUSDRate(
			name=source_name,
			rate_usd=rate_usd,
			# zero means no volume data, not a confirmed zero
			volume_usd=volume_usd if volume_usd != 0 else None,
			fetched_at=quote.fetch_time,
		)
