# nosec B101


import asyncio
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from domain.exceptions.rates import BridgeRateError, StoreUnreachableError
from domain.models.rates import FetchCycleResult
from workers import rate_fetcher
from workers.rate_fetcher import RateFetchWorker


@pytest.fixture
def coordinator():
    mock_coordinator = MagicMock()
    mock_coordinator.run = AsyncMock(return_value=FetchCycleResult(bridge_rate_usd=50000.0))
    return mock_coordinator


@pytest.mark.asyncio
async def test_run_cycle_success(coordinator):
    assert await RateFetchWorker(coordinator).run_cycle() is True
    coordinator.run.assert_awaited_once()


@pytest.mark.asyncio
@pytest.mark.parametrize('error', [
    BridgeRateError('CoinCap down'),
    StoreUnreachableError('Unable to ping redis'),
])
async def test_run_cycle_reports_cycle_failure(coordinator, error):
    coordinator.run.side_effect = error

    assert await RateFetchWorker(coordinator).run_cycle() is False


@pytest.mark.asyncio
async def test_stop_interrupts_wait_between_cycles(coordinator):
    worker = RateFetchWorker(coordinator, update_interval=3600)

    async def run_then_stop():
        worker.stop()
        return FetchCycleResult(bridge_rate_usd=1.0)

    coordinator.run.side_effect = run_then_stop

    await asyncio.wait_for(worker.run(), timeout=2)

    assert worker.is_running is False
    coordinator.run.assert_awaited_once()


@pytest.mark.asyncio
async def test_failed_cycle_does_not_stop_the_loop(coordinator):
    worker = RateFetchWorker(coordinator, update_interval=0)
    calls = []

    async def flaky():
        calls.append(1)
        if len(calls) == 1:
            raise BridgeRateError('CoinCap down')
        worker.stop()
        return FetchCycleResult(bridge_rate_usd=1.0)

    coordinator.run.side_effect = flaky

    await asyncio.wait_for(worker.run(), timeout=2)

    assert len(calls) == 2


@pytest.mark.asyncio
async def test_unexpected_error_does_not_stop_the_loop(coordinator):
    worker = RateFetchWorker(coordinator, update_interval=0)
    calls = []

    async def broken_then_ok():
        calls.append(1)
        if len(calls) == 1:
            raise RuntimeError('unexpected transport failure')
        worker.stop()
        return FetchCycleResult(bridge_rate_usd=1.0)

    coordinator.run.side_effect = broken_then_ok

    await asyncio.wait_for(worker.run(), timeout=2)

    assert len(calls) == 2


# ============================================================================
# TEST: main()
# ============================================================================

@pytest.fixture
def wiring():
    with patch.object(rate_fetcher, 'setup_logging'), \
         patch.object(rate_fetcher, 'Redis') as mock_redis_cls, \
         patch.object(rate_fetcher, 'build_coordinator') as mock_build:
        mock_redis_cls.from_url.return_value = AsyncMock()
        yield mock_redis_cls, mock_build


@pytest.mark.asyncio
async def test_main_missing_config_exits_before_connecting(monkeypatch, wiring):
    mock_redis_cls, mock_build = wiring
    monkeypatch.delenv('REDIS_URL', raising=False)
    monkeypatch.setattr(rate_fetcher, 'load_settings', MagicMock(
        side_effect=rate_fetcher.ConfigMissingError('Missing or invalid configuration: REDIS_URL')
    ))

    assert await rate_fetcher.main(once=True) == 1

    mock_redis_cls.from_url.assert_not_called()
    mock_build.assert_not_called()


@pytest.mark.asyncio
async def test_main_once_success(monkeypatch, wiring, coordinator):
    mock_redis_cls, mock_build = wiring
    monkeypatch.setenv('REDIS_URL', 'redis://cache:6379/0')
    mock_build.return_value = coordinator

    assert await rate_fetcher.main(once=True) == 0

    mock_redis_cls.from_url.assert_called_once_with('redis://cache:6379/0', decode_responses=True)
    coordinator.run.assert_awaited_once()
    mock_redis_cls.from_url.return_value.aclose.assert_awaited_once()


@pytest.mark.asyncio
async def test_main_once_cycle_failure_returns_non_zero(monkeypatch, wiring, coordinator):
    _, mock_build = wiring
    monkeypatch.setenv('REDIS_URL', 'redis://cache:6379/0')
    coordinator.run.side_effect = StoreUnreachableError('Unable to ping redis')
    mock_build.return_value = coordinator

    assert await rate_fetcher.main(once=True) == 1
