from .responses import ExchangeRateEntry, HealthResponse

__all__ = [
	'ExchangeRateEntry',
	'HealthResponse',
]
