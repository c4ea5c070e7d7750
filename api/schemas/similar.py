# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-02-03
# Description: similar.py
# -----------------------------------------------------------------------------
from typing import List, Optional, Union

from pydantic import BaseModel, Field

class SimilarWord(BaseModel):
    distance: float
    word: str

class VectorQueryRequest(BaseModel):
    vector: List[float] = Field(..., min_length=1)
    # clamped/defaulted by the query service, so any value is accepted here
    count: Optional[Union[int, float, str]] = None
