# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-02-03
# Description: W2VQueryService
# -----------------------------------------------------------------------------
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence

import numpy as np

import settings
from embedding.EmbeddingRecord import QueryResult
from embedding.EmbeddingStore import EmbeddingStore
from utility.exceptions import DimensionMismatch, InvalidVectorError, NotFoundError
from vectorstore.AnnIndex import AnnIndex


def resolve_count(count: Any = None) -> int:
    """
    Result-count policy: missing or non-numeric -> default (128),
    anything numeric is clamped to [1, 512].
    """
    if count is None or isinstance(count, bool):
        return settings.DEFAULT_RESULT_COUNT
    try:
        value = int(str(count).strip())
    except ValueError:
        return settings.DEFAULT_RESULT_COUNT
    return max(settings.MIN_RESULT_COUNT, min(value, settings.MAX_RESULT_COUNT))


@dataclass
class W2VQueryService:
    store: EmbeddingStore
    index: AnnIndex

    def get_vector(self, word: str) -> np.ndarray:
        vector = self.store.get_vector(word)
        if vector is None:
            raise NotFoundError(word)
        return vector

    def query_by_word(self, word: str, count: Any = None) -> List[QueryResult]:
        vector = self.get_vector(word)
        return self._nearest(vector, resolve_count(count))

    def query_by_vector(self, vector: Sequence[float] | np.ndarray, count: Any = None) -> List[QueryResult]:
        vec = np.asarray(vector, dtype=np.float64).reshape(-1)
        if vec.shape[0] != self.store.dimension():
            raise DimensionMismatch(self.store.dimension(), vec.shape[0])
        if not np.all(np.isfinite(vec)):
            raise InvalidVectorError()

        # a zero query cannot be normalized; it is searched as-is
        norm = np.linalg.norm(vec)
        if norm > 0.0:
            vec = vec / norm
        return self._nearest(vec.astype(np.float32), resolve_count(count))

    def _nearest(self, vector: np.ndarray, k: int) -> List[QueryResult]:
        return [
            QueryResult(distance=distance, word=self.store.word_at(idx))
            for distance, idx in self.index.nearest(vector, k)
        ]

    @staticmethod
    def to_hits(results: Sequence[QueryResult]) -> List[Dict[str, Any]]:
        """Flatten results into {"distance", "word"} dicts for the API layer."""
        return [r.to_dict() for r in results]
