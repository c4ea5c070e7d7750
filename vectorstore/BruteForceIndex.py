# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-02-02
# Description: BruteForceIndex
# -----------------------------------------------------------------------------
import logging
from typing import Any, Dict, List, Set

import numpy as np

from utility.exceptions import IndexBuildError
from utility.logging_utils import get_class_logger
from vectorstore.AnnIndex import Candidates, VectorSource, as_query_vector, cosine_distances, rank_candidates


class BruteForceIndex:
    """Exact scan over every indexed id. Same ordering contract as the LSH index."""

    def __init__(self, source: VectorSource, dimension: int, *, logger: logging.Logger | None = None):
        self.source = source
        self.dimension = dimension
        self.logger = logger or get_class_logger(self.__class__)
        self._ids: List[int] = []
        self._seen: Set[int] = set()
        self._id_array = np.empty(0, dtype=np.int64)
        self._contiguous = False
        self._sealed = False

    def build(self, vectors: np.ndarray) -> None:
        matrix = np.asarray(vectors)
        if matrix.ndim != 2 or (matrix.shape[0] and matrix.shape[1] != self.dimension):
            raise IndexBuildError(f"expected a (n, {self.dimension}) matrix, got shape {matrix.shape}")
        for item_id in range(matrix.shape[0]):
            self.insert(item_id, matrix[item_id])
        self._id_array = np.asarray(self._ids, dtype=np.int64)
        self._contiguous = bool(np.array_equal(self._id_array, np.arange(self._id_array.size)))
        self._sealed = True
        self.logger.info("Built brute-force index: %d ids", len(self._ids))

    def insert(self, item_id: int, vector: np.ndarray) -> None:
        if self._sealed:
            raise IndexBuildError("index is sealed; build() has already run")
        if np.asarray(vector).reshape(-1).shape[0] != self.dimension:
            raise IndexBuildError(f"vector for id {item_id} does not have dimension {self.dimension}")
        if item_id in self._seen:
            raise IndexBuildError(f"id {item_id} inserted twice")
        self._seen.add(item_id)
        self._ids.append(int(item_id))

    def nearest(self, query: np.ndarray, k: int) -> Candidates:
        vec = as_query_vector(query, self.dimension)
        ids = self._id_array if self._sealed else np.asarray(self._ids, dtype=np.int64)
        if k <= 0 or ids.size == 0:
            return []
        # ids 0..n-1 index the leading rows directly, no gather copy
        rows = self.source.vectors[: ids.size] if self._contiguous else self.source.vectors[ids]
        distances = cosine_distances(rows, vec)
        return rank_candidates(ids, distances, k)

    def stats(self) -> Dict[str, Any]:
        return {"backend": "brute", "size": len(self._ids), "dimension": self.dimension}
