class RateException(Exception):
	pass


class ConfigMissingError(RateException):
	pass


class ProviderError(RateException):
	pass


class BridgeRateError(RateException):
	pass


class NormalizationError(RateException):
	pass


class UnexpectedBaseCurrencyError(NormalizationError):
	pass


class UnexpectedQuoteCurrencyError(NormalizationError):
	pass


class InvalidQuoteError(NormalizationError):
	pass


class CacheError(RateException):
	pass


class StoreUnreachableError(CacheError):
	pass


class StoreWriteError(CacheError):
	pass


class StoreReadError(CacheError):
	pass


class DecodeError(CacheError):
	pass
