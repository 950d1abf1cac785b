from dataclasses import dataclass, field
from datetime import datetime


@dataclass(frozen=True)
class Quote:
	base_currency: str
	quote_currency: str
	last_price: float
	base_asset_volume: float
	fetch_time: datetime


@dataclass(frozen=True)
class BridgeQuote:
	last_price: float  # bridge asset price in USD
	fetch_time: datetime


@dataclass(frozen=True)
class DashUSDRate:
	name: str
	rate_usd: float
	volume_usd: float | None
	fetched_at: datetime


@dataclass(frozen=True)
class FetchCycleResult:
	bridge_rate_usd: float
	succeeded: list[str] = field(default_factory=list)
	failed: list[str] = field(default_factory=list)

	@property
	def attempted(self) -> int:
		return len(self.succeeded) + len(self.failed)
