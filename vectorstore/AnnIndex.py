# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-02-02
# Description: AnnIndex
# -----------------------------------------------------------------------------
from typing import Protocol, List, Tuple, Dict, Any, Sequence, runtime_checkable

import numpy as np

from utility.exceptions import DimensionMismatch

# (distance, id) pairs, ascending by distance then id
Candidates = List[Tuple[float, int]]

# rows converted to float64 at a time when scanning or hashing the store
CHUNK_ROWS = 65536


@runtime_checkable
class VectorSource(Protocol):
    """Owner of the vectors an index refers to by id."""

    @property
    def vectors(self) -> np.ndarray:
        ...

    def dimension(self) -> int:
        ...


@runtime_checkable
class AnnIndex(Protocol):
    def build(self, vectors: np.ndarray) -> None:
        ...

    def insert(self, item_id: int, vector: np.ndarray) -> None:
        ...

    def nearest(self, query: np.ndarray, k: int) -> Candidates:
        ...

    def stats(self) -> Dict[str, Any]:
        ...


def cosine_distance(a: np.ndarray, b: np.ndarray) -> float:
    """1 - a.b for unit vectors, clamped to [0, 2]."""
    a = np.asarray(a, dtype=np.float64)
    b = np.asarray(b, dtype=np.float64)
    if a.shape != b.shape:
        raise DimensionMismatch(a.shape[-1], b.shape[-1])
    return float(np.clip(1.0 - np.dot(a, b), 0.0, 2.0))


def cosine_distances(matrix: np.ndarray, query: np.ndarray) -> np.ndarray:
    """Vectorised cosine_distance of every row of ``matrix`` against ``query``."""
    q = np.asarray(query, dtype=np.float64)
    sims = np.empty(matrix.shape[0], dtype=np.float64)
    # float64 in bounded blocks; the store itself is float32
    for start in range(0, matrix.shape[0], CHUNK_ROWS):
        block = np.asarray(matrix[start:start + CHUNK_ROWS], dtype=np.float64)
        sims[start:start + block.shape[0]] = block @ q
    return np.clip(1.0 - sims, 0.0, 2.0)


def rank_candidates(ids: Sequence[int] | np.ndarray, distances: np.ndarray, k: int) -> Candidates:
    """Sort ascending by distance, ties by ascending id, and keep the first k."""
    ids = np.asarray(ids, dtype=np.int64)
    order = np.lexsort((ids, distances))[:k]
    return [(float(distances[i]), int(ids[i])) for i in order]


def as_query_vector(query: np.ndarray, dimension: int) -> np.ndarray:
    vec = np.asarray(query, dtype=np.float32).reshape(-1)
    if vec.shape[0] != dimension:
        raise DimensionMismatch(dimension, vec.shape[0])
    return vec
