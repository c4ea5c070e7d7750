# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-02-04
# Description: similar router
# -----------------------------------------------------------------------------
import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from api.dependencies import get_query_service
from api.schemas.similar import SimilarWord, VectorQueryRequest
from services.W2VQueryService import W2VQueryService
from utility.exceptions import DimensionMismatch, InvalidVectorError, NotFoundError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/get_similar", tags=["similar"])


@router.get("/{word}", response_model=List[SimilarWord])
def get_similar_by_word(
    word: str,
    count: Optional[str] = Query(None, description="Number of results, clamped to [1, 512]; default 128"),
    svc: W2VQueryService = Depends(get_query_service),
) -> List[SimilarWord]:
    try:
        results = svc.query_by_word(word, count)
    except NotFoundError as e:
        logger.info("get_similar: %s", e)
        raise HTTPException(status_code=404, detail=str(e))

    return [SimilarWord(**h) for h in svc.to_hits(results)]


@router.post("", response_model=List[SimilarWord])
def get_similar_by_vector(
    req: VectorQueryRequest,
    svc: W2VQueryService = Depends(get_query_service),
) -> List[SimilarWord]:
    try:
        results = svc.query_by_vector(req.vector, req.count)
    except (DimensionMismatch, InvalidVectorError) as e:
        logger.info("get_similar by vector rejected: %s", e)
        raise HTTPException(status_code=400, detail=str(e))

    return [SimilarWord(**h) for h in svc.to_hits(results)]
