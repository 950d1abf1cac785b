# nosec B101


from unittest.mock import AsyncMock, Mock

import httpx
import pytest

from domain.exceptions.rates import ProviderError
from domain.models.rates import BridgeQuote
from infrastructure.providers import CoinCapProvider


def mock_client_returning(payload):
    mock_client = AsyncMock(spec=httpx.AsyncClient)
    mock_response = Mock()
    mock_response.json.return_value = payload
    mock_response.raise_for_status = Mock()
    mock_client.get.return_value = mock_response
    return mock_client


@pytest.mark.asyncio
async def test_fetch_rate_returns_btc_price():
    mock_client = mock_client_returning({
        'data': {'id': 'bitcoin', 'symbol': 'BTC', 'priceUsd': '43521.1234567'},
        'timestamp': 1730802600000,
    })

    bridge = await CoinCapProvider(client=mock_client).fetch_rate()

    assert isinstance(bridge, BridgeQuote)
    assert bridge.last_price == 43521.1234567
    assert mock_client.get.call_args[0][0] == 'https://api.coincap.io/v2/assets/bitcoin'


@pytest.mark.asyncio
@pytest.mark.parametrize('payload', [
    {'error': 'bitcoin not found'},
    {'data': {'priceUsd': None}},
    {'data': {'priceUsd': 'abc'}},
])
async def test_missing_price_raises_provider_error(payload):
    with pytest.raises(ProviderError) as exc_info:
        await CoinCapProvider(client=mock_client_returning(payload)).fetch_rate()

    assert 'CoinCap missing BTC price' in str(exc_info.value)


@pytest.mark.asyncio
@pytest.mark.parametrize('price', ['0', '-1', 'NaN', 'Infinity', '-inf'])
async def test_invalid_price_raises_provider_error(price):
    mock_client = mock_client_returning({'data': {'priceUsd': price}})

    with pytest.raises(ProviderError) as exc_info:
        await CoinCapProvider(client=mock_client).fetch_rate()

    assert 'invalid BTC price' in str(exc_info.value)


@pytest.mark.asyncio
async def test_http_429_rate_limit():
    mock_client = AsyncMock(spec=httpx.AsyncClient)
    error_response = Mock()
    error_response.status_code = 429
    error_response.text = 'Too Many Requests'
    mock_client.get.side_effect = httpx.HTTPStatusError(
        'Rate limited', request=Mock(), response=error_response
    )

    with pytest.raises(ProviderError) as exc_info:
        await CoinCapProvider(client=mock_client).fetch_rate()

    assert 'HTTP error 429' in str(exc_info.value)
