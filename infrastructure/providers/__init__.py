import httpx

from .base import BaseExchangeProvider, BridgeRateProvider, ExchangeRateProvider
from .bigone import BigONEProvider
from .binance import BinanceProvider
from .bitfinex import BitfinexProvider
from .bittrex import BittrexProvider
from .cex import CexProvider
from .coinbasepro import CoinbaseProProvider
from .coincap import CoinCapProvider
from .exmo import ExmoProvider
from .hitbtc import HitBTCProvider
from .huobi import HuobiProvider
from .kraken import KrakenProvider
from .livecoin import LivecoinProvider
from .poloniex import PoloniexProvider
from .yobit import YobitProvider

EXCHANGE_PROVIDERS: list[type[BaseExchangeProvider]] = [
	BinanceProvider,
	KrakenProvider,
	BitfinexProvider,
	PoloniexProvider,
	HuobiProvider,
	BittrexProvider,
	LivecoinProvider,
	ExmoProvider,
	HitBTCProvider,
	YobitProvider,
	CexProvider,
	BigONEProvider,
	CoinbaseProProvider,
]


def build_exchange_providers(client: httpx.AsyncClient) -> list[ExchangeRateProvider]:
	"""Instantiate every exchange client on a shared HTTP client."""
	return [provider_cls(client=client) for provider_cls in EXCHANGE_PROVIDERS]


__all__ = [
	'EXCHANGE_PROVIDERS',
	'BaseExchangeProvider',
	'BigONEProvider',
	'BinanceProvider',
	'BitfinexProvider',
	'BittrexProvider',
	'BridgeRateProvider',
	'CexProvider',
	'CoinCapProvider',
	'CoinbaseProProvider',
	'ExchangeRateProvider',
	'ExmoProvider',
	'HitBTCProvider',
	'HuobiProvider',
	'KrakenProvider',
	'LivecoinProvider',
	'PoloniexProvider',
	'YobitProvider',
	'build_exchange_providers',
]
