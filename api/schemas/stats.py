# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-02-04
# Description: stats.py
# -----------------------------------------------------------------------------
from typing import Any, Dict, Optional

from pydantic import BaseModel

class StoreStats(BaseModel):
    vector_count: int
    unique_words: int
    dimension: int

class W2VStatsResponse(BaseModel):
    vectors_path: Optional[str] = None
    store: StoreStats
    index: Dict[str, Any]
