from functools import lru_cache

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from domain.exceptions.rates import ConfigMissingError


class Settings(BaseSettings):
	REDIS_URL: str = Field(min_length=1)

	TRACKED_ASSET: str = 'DASH'
	BRIDGE_ASSET: str = 'BTC'

	RATE_TTL_HOURS: int = Field(default=24, gt=0)
	HTTP_TIMEOUT_SECONDS: float = Field(default=10.0, gt=0)
	FETCH_INTERVAL_SECONDS: int = Field(default=1800, ge=1)

	# Application
	APP_NAME: str = 'Dash Exchange Rates API'
	LOG_LEVEL: str = 'INFO'
	LOG_JSON: bool = False

	model_config = SettingsConfigDict(env_file='.env', case_sensitive=False, extra='ignore')


def load_settings() -> Settings:
	"""Build settings from the environment, failing before any network call."""
	try:
		return Settings()
	except ValidationError as e:
		fields = ', '.join(str(err['loc'][0]) for err in e.errors() if err['loc'])
		raise ConfigMissingError(f'Missing or invalid configuration: {fields}') from e


@lru_cache
def get_settings() -> Settings:
	return load_settings()
