# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-02-02
# Description: HyperplaneLSHIndex
# -----------------------------------------------------------------------------
import logging
import time
from typing import Any, Dict, List, Optional, Set

import numpy as np

from utility.exceptions import IndexBuildError
from utility.logging_utils import get_class_logger
from vectorstore.AnnIndex import (
    CHUNK_ROWS,
    Candidates,
    VectorSource,
    as_query_vector,
    cosine_distances,
    rank_candidates,
)

MAX_PLANES = 64


class HyperplaneLSHIndex:
    """
    Random-hyperplane locality-sensitive hashing over cosine similarity.

    ``n_tables`` independent tables each hold ``n_planes`` random unit normals.
    A vector's signature in a table has bit j set when its dot product with
    normal j is non-negative; the vector's id is added to that signature's bucket.

    nearest() unions the buckets matching the query's exact signature in every
    table and reranks the candidates by exact cosine distance against the vectors
    held by ``source``. The index stores ids only.

    build() seals the index; further insert() calls raise IndexBuildError.
    """

    def __init__(
            self,
            source: VectorSource,
            dimension: int,
            *,
            n_tables: int,
            n_planes: int,
            seed: Optional[int] = None,
            logger: logging.Logger | None = None,
    ):
        if n_tables < 1:
            raise IndexBuildError(f"n_tables must be >= 1, got {n_tables}")
        if not 1 <= n_planes <= MAX_PLANES:
            raise IndexBuildError(f"n_planes must be in [1, {MAX_PLANES}], got {n_planes}")
        if dimension < 1:
            raise IndexBuildError(f"dimension must be >= 1, got {dimension}")

        self.source = source
        self.dimension = dimension
        self.n_tables = n_tables
        self.n_planes = n_planes
        self.seed = seed
        self.logger = logger or get_class_logger(self.__class__)

        # (n_tables, n_planes, dimension) unit normals, drawn independently per table
        rng = np.random.default_rng(seed)
        planes = rng.standard_normal((n_tables, n_planes, dimension))
        planes /= np.linalg.norm(planes, axis=2, keepdims=True)
        self._planes = planes
        self._planes.flags.writeable = False

        self._bit_weights = np.left_shift(np.uint64(1), np.arange(n_planes, dtype=np.uint64))
        self._tables: List[Dict[int, Set[int]]] = [{} for _ in range(n_tables)]
        self._ids: Set[int] = set()
        self._sealed = False

    # -------------------------------------------------------------------------
    # Build
    # -------------------------------------------------------------------------
    def build(self, vectors: np.ndarray) -> None:
        """Insert row i of ``vectors`` under id i for every row, then seal."""
        start_time = time.time()
        matrix = np.asarray(vectors)
        if matrix.ndim != 2 or (matrix.shape[0] and matrix.shape[1] != self.dimension):
            raise IndexBuildError(
                f"expected a (n, {self.dimension}) matrix, got shape {matrix.shape}"
            )
        self._check_open()

        for start in range(0, matrix.shape[0], CHUNK_ROWS):
            block = np.asarray(matrix[start:start + CHUNK_ROWS], dtype=np.float64)
            # (rows, n_tables) signatures
            signatures = np.stack(
                [self._signatures(block, t) for t in range(self.n_tables)], axis=1
            )
            for offset, row in enumerate(signatures):
                self._add(start + offset, row)

        self._sealed = True
        elapsed = (time.time() - start_time) * 1000.0
        stats = self.stats()
        self.logger.info(
            "Built LSH index: %d ids, tables=%d, planes=%d, buckets=%d, "
            "max_bucket=%d (%.1f ms)",
            stats["size"],
            self.n_tables,
            self.n_planes,
            stats["buckets"],
            stats["max_bucket_size"],
            elapsed,
        )

    def insert(self, item_id: int, vector: np.ndarray) -> None:
        self._check_open()
        vec = np.asarray(vector, dtype=np.float64).reshape(-1)
        if vec.shape[0] != self.dimension:
            raise IndexBuildError(
                f"vector for id {item_id} has dimension {vec.shape[0]}, expected {self.dimension}"
            )
        self._add(int(item_id), self._query_signatures(vec))

    def _add(self, item_id: int, signatures: np.ndarray) -> None:
        if item_id in self._ids:
            raise IndexBuildError(f"id {item_id} inserted twice")
        self._ids.add(item_id)
        for table, sig in zip(self._tables, signatures):
            table.setdefault(int(sig), set()).add(item_id)

    def _check_open(self) -> None:
        if self._sealed:
            raise IndexBuildError("index is sealed; build() has already run")

    # -------------------------------------------------------------------------
    # Hashing
    # -------------------------------------------------------------------------
    def _signatures(self, matrix: np.ndarray, table: int) -> np.ndarray:
        bits = (matrix @ self._planes[table].T) >= 0
        return bits.astype(np.uint64) @ self._bit_weights

    def _query_signatures(self, vec: np.ndarray) -> np.ndarray:
        # same projection path as build()
        row = np.asarray(vec, dtype=np.float64).reshape(1, -1)
        return np.array([self._signatures(row, t)[0] for t in range(self.n_tables)], dtype=np.uint64)

    # -------------------------------------------------------------------------
    # Query
    # -------------------------------------------------------------------------
    def candidates(self, query: np.ndarray) -> np.ndarray:
        """Sorted, deduplicated ids sharing a bucket with ``query`` in any table."""
        vec = as_query_vector(query, self.dimension)
        found: Set[int] = set()
        for table, sig in zip(self._tables, self._query_signatures(vec)):
            bucket = table.get(int(sig))
            if bucket:
                found.update(bucket)
        return np.fromiter(sorted(found), dtype=np.int64, count=len(found))

    def nearest(self, query: np.ndarray, k: int) -> Candidates:
        vec = as_query_vector(query, self.dimension)
        if k <= 0:
            return []

        ids = self.candidates(vec)
        if ids.size == 0:
            return []

        distances = cosine_distances(self.source.vectors[ids], vec)
        self.logger.debug("LSH query: %d candidates, k=%d", ids.size, k)
        return rank_candidates(ids, distances, k)

    # -------------------------------------------------------------------------
    def stats(self) -> Dict[str, Any]:
        sizes = [len(b) for table in self._tables for b in table.values()]
        return {
            "backend": "lsh",
            "size": len(self._ids),
            "dimension": self.dimension,
            "n_tables": self.n_tables,
            "n_planes": self.n_planes,
            "seed": self.seed,
            "buckets": len(sizes),
            "max_bucket_size": max(sizes) if sizes else 0,
            "mean_bucket_size": float(np.mean(sizes)) if sizes else 0.0,
        }
