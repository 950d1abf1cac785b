import logging
from datetime import UTC, datetime
from typing import Annotated

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from api.dependencies import get_redis_cache
from api.schemas import HealthResponse
from domain.exceptions.rates import StoreUnreachableError
from infrastructure.cache.redis_cache import RedisCacheService

logger = logging.getLogger(__name__)

router = APIRouter(tags=['health'])


@router.get('/health', response_model=HealthResponse, summary='Cache health check')
async def health_check(cache: Annotated[RedisCacheService, Depends(get_redis_cache)]):
	try:
		await cache.ping()
	except StoreUnreachableError as e:
		logger.error(f'Cache health check failed: {e}')
		body = HealthResponse(status='unhealthy', cache='unreachable', timestamp=datetime.now(UTC))
		return JSONResponse(status_code=503, content=body.model_dump(mode='json'))

	return HealthResponse(status='healthy', cache='reachable', timestamp=datetime.now(UTC))
