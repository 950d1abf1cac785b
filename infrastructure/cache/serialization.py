import json
import math
from datetime import datetime

from domain.exceptions.rates import DecodeError
from domain.models.rates import DashUSDRate


def encode_rate(rate: DashUSDRate) -> str:
	rate_dict = {
		'exchange': rate.name,
		'price': rate.rate_usd,
		'fetchedAt': rate.fetched_at.isoformat(),
	}
	if rate.volume_usd is not None:
		rate_dict['volume'] = rate.volume_usd

	return json.dumps(rate_dict, allow_nan=False)


def decode_rate(raw: str | bytes) -> DashUSDRate:
	try:
		rate_dict = json.loads(raw)
	except (json.JSONDecodeError, UnicodeDecodeError, TypeError) as e:
		raise DecodeError(f'Invalid json data: {e}') from e

	if not isinstance(rate_dict, dict):
		raise DecodeError(f'Expected a json object, got {type(rate_dict).__name__}')

	try:
		name = rate_dict['exchange']
		price = rate_dict['price']
		volume = rate_dict.get('volume')
		fetched_at = datetime.fromisoformat(rate_dict['fetchedAt'])
	except KeyError as e:
		raise DecodeError(f'Missing field {e} in cached rate') from e
	except (TypeError, ValueError) as e:
		raise DecodeError(f'Invalid fetchedAt in cached rate: {e}') from e

	if not isinstance(name, str):
		raise DecodeError('Cached rate exchange must be a string')
	if not _is_number(price):
		raise DecodeError(f'Cached rate price for {name} is not a number')
	if not math.isfinite(price) or price <= 0:
		raise DecodeError(f'Cached rate price for {name} is not a positive finite number')
	if volume is not None and not _is_number(volume):
		raise DecodeError(f'Cached rate volume for {name} is not a number')
	if volume is not None and (not math.isfinite(volume) or volume < 0):
		raise DecodeError(f'Cached rate volume for {name} is not a non-negative finite number')

	return DashUSDRate(
		name=name,
		rate_usd=float(price),
		volume_usd=float(volume) if volume is not None else None,
		fetched_at=fetched_at,
	)


def _is_number(value) -> bool:
	return isinstance(value, int | float) and not isinstance(value, bool)
