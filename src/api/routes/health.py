"""Health check endpoint."""

import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from api.dependencies import get_dictionary_cache, get_settings
from api.models import HealthResponse
from port.dictionary_cache import DictionaryCachePort
from utils.settings import Settings

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/health", tags=["health"])


@router.get("", response_model=HealthResponse)
async def health(
    settings: Settings = Depends(get_settings),
    dictionary_cache: DictionaryCachePort = Depends(get_dictionary_cache),
):
    """Health check with dictionary cache status.

    The external dictionary is not probed; it is only reached on cache misses.
    """
    try:
        cache_healthy = await dictionary_cache.ping()
    except Exception as e:
        logger.warning("Dictionary cache health check failed", extra={"error": str(e)[:200]})
        cache_healthy = False

    body = HealthResponse(
        status="healthy" if cache_healthy else "degraded",
        dictionary=settings.dictionary_backend,
        cache="healthy" if cache_healthy else "unhealthy",
    )
    status_code = status.HTTP_200_OK if cache_healthy else status.HTTP_503_SERVICE_UNAVAILABLE
    return JSONResponse(content=body.model_dump(), status_code=status_code)
