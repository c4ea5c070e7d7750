# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-02-02
# Description: EmbeddingRecord
# -----------------------------------------------------------------------------
from dataclasses import dataclass
from typing import Dict, Any

import numpy as np


@dataclass(frozen=True)
class Embedding:
    """Dense id + word + unit-normalized vector."""
    id: int
    word: str
    vector: np.ndarray


@dataclass(frozen=True, order=True)
class QueryResult:
    """One similarity hit; ordering compares distance first, then word."""
    distance: float
    word: str

    def to_dict(self) -> Dict[str, Any]:
        return {"distance": self.distance, "word": self.word}
