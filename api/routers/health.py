# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-02-04
# Description: health.py
# -----------------------------------------------------------------------------
import logging
from fastapi import APIRouter, Depends

from api.AppContainer import get_app_container
from api.schemas.health import HealthResponse, DeepHealthResponse
from api.dependencies import get_health_service
from services.W2VHealthService import W2VHealthService
from utility.exceptions import ModelNotLoadedError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/health", tags=["health"])


@router.get("/", response_model=HealthResponse)
async def health_check():
    try:
        count = get_app_container().store.count()
    except ModelNotLoadedError:
        return HealthResponse(status="ok", message="W2V server running, no model loaded", model_loaded=False)
    return HealthResponse(status="ok", message=f"W2V server running, {count} vectors loaded", model_loaded=True)


@router.get("/deep", response_model=DeepHealthResponse)
def deep_health_check(
    svc: W2VHealthService = Depends(get_health_service),
) -> DeepHealthResponse:
    logger.info("GET /health/deep called")
    result = svc.deep_health()
    logger.info("GET /health/deep completed with status=%s (%.1f ms)", result.status, result.elapsed_ms)
    return result
