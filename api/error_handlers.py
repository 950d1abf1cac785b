import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from domain.exceptions.rates import DecodeError, StoreReadError, StoreUnreachableError

logger = logging.getLogger(__name__)


def register_exception_handlers(app: FastAPI) -> None:
	@app.exception_handler(StoreUnreachableError)
	async def store_unreachable_handler(request: Request, exc: StoreUnreachableError):
		logger.error(f'Cache unreachable: {exc}')
		return JSONResponse(status_code=503, content={'detail': 'Rate cache unavailable'})

	@app.exception_handler(StoreReadError)
	async def store_read_handler(request: Request, exc: StoreReadError):
		logger.error(f'Cache read failed: {exc}')
		return JSONResponse(status_code=503, content={'detail': 'Rate cache unavailable'})

	@app.exception_handler(DecodeError)
	async def decode_error_handler(request: Request, exc: DecodeError):
		logger.error(f'Corrupt cache entry: {exc}')
		return JSONResponse(status_code=500, content={'detail': 'Cached rates are corrupt'})
