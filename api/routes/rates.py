from typing import Annotated

from fastapi import APIRouter, Depends, status

from api.dependencies import get_rate_reader
from api.schemas import ExchangeRateEntry
from application.services import RateReaderService

router = APIRouter(tags=['rates'])


@router.get(
	'/exchange',
	response_model=list[ExchangeRateEntry],
	response_model_exclude_none=True,
	status_code=status.HTTP_200_OK,
	summary='List cached Dash/USD rates for every exchange',
)
async def get_exchange_rates(
	service: Annotated[RateReaderService, Depends(get_rate_reader)],
) -> list[ExchangeRateEntry]:
	rates = await service.collect_all()
	return [ExchangeRateEntry.from_rate(rate) for rate in rates]
