from .fetch_coordinator import RateFetchCoordinator
from .normalizer import RateNormalizer
from .rate_reader import RateReaderService

__all__ = ['RateFetchCoordinator', 'RateNormalizer', 'RateReaderService']
