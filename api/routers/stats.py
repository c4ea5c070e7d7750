# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-02-04
# Description: stats.py
# -----------------------------------------------------------------------------
import logging

from fastapi import APIRouter, Depends

from api.dependencies import get_stats_service
from api.schemas.stats import W2VStatsResponse
from services.W2VStatsService import W2VStatsService

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/stats",
    tags=["stats"]
)

@router.get("", response_model=W2VStatsResponse)
def get_w2v_stats(
    svc: W2VStatsService = Depends(get_stats_service),
) -> W2VStatsResponse:
    logger.info("Getting model stats")
    return svc.get_stats()
