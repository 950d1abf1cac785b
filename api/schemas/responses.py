from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from domain.models.rates import DashUSDRate


class ExchangeRateEntry(BaseModel):
	exchange: str = Field(..., description='Exchange the rate was fetched from')
	price: float = Field(..., description='Price of one DASH in USD')
	volume: float | None = Field(
		default=None, description='24h traded volume in USD, omitted when unknown'
	)
	fetched_at: datetime = Field(..., alias='fetchedAt', description='When the rate was fetched')

	model_config = ConfigDict(
		populate_by_name=True,
		json_schema_extra={
			'example': {
				'exchange': 'Kraken',
				'price': 100.0,
				'volume': 10000.0,
				'fetchedAt': '2025-09-27T10:30:00Z',
			}
		},
	)

	@classmethod
	def from_rate(cls, rate: DashUSDRate) -> 'ExchangeRateEntry':
		return cls(
			exchange=rate.name,
			price=rate.rate_usd,
			volume=rate.volume_usd,
			fetched_at=rate.fetched_at,
		)


class HealthResponse(BaseModel):
	status: str = Field(..., description='healthy or unhealthy')
	cache: str = Field(..., description='Cache status')
	timestamp: datetime
