# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-02-04
# Description: vectors router
# -----------------------------------------------------------------------------
import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException

from api.dependencies import get_query_service
from services.W2VQueryService import W2VQueryService
from utility.exceptions import NotFoundError

logger = logging.getLogger(__name__)

router = APIRouter(tags=["vectors"])


@router.get("/get_vector/{word}", response_model=List[float])
def get_vector(
    word: str,
    svc: W2VQueryService = Depends(get_query_service),
) -> List[float]:
    try:
        vector = svc.get_vector(word)
    except NotFoundError as e:
        logger.info("get_vector: %s", e)
        raise HTTPException(status_code=404, detail=str(e))

    return vector.tolist()
