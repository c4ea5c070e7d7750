# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-02-02
# Description: EmbeddingStore
# -----------------------------------------------------------------------------
import logging
import time
from typing import Dict, Iterable, Iterator, List, Optional, Tuple

import numpy as np

from embedding.EmbeddingRecord import Embedding
from ingestion.WordVectorReader import WordVectorReader
from utility.exceptions import ParseError
from utility.logging_utils import get_class_logger


class EmbeddingStore:
    """
    Immutable collection of unit-normalized word embeddings.

    Ids are dense and assigned in ingestion order starting at 0. Vectors live in
    one read-only float32 matrix of shape (count, dimension); words in a parallel
    tuple. A word that occurs twice keeps both vectors under their ids, but the
    word -> id mapping points at the later occurrence.

    Zero-norm vectors cannot be normalized. With ``zero_norm_policy="reject"``
    (the default) they fail the build with ParseError; with ``"zero"`` they are
    kept as zero vectors.
    """

    def __init__(
            self,
            vectors: np.ndarray,
            words: Tuple[str, ...],
            word_to_id: Dict[str, int],
            *,
            logger: logging.Logger | None = None,
    ):
        if vectors.ndim != 2 or vectors.shape[0] != len(words):
            raise ValueError(
                f"vectors shape {vectors.shape} does not match {len(words)} words"
            )
        vectors.flags.writeable = False
        self._vectors = vectors
        self._words = words
        self._word_to_id = word_to_id
        self.logger = logger or get_class_logger(self.__class__)

    # -------------------------------------------------------------------------
    # Build
    # -------------------------------------------------------------------------
    @classmethod
    def build(
            cls,
            records: Iterable[Tuple[str, np.ndarray]],
            dimension: int,
            *,
            zero_norm_policy: str = "reject",
            logger: logging.Logger | None = None,
    ) -> "EmbeddingStore":
        """
        Normalize and index ``(word, raw_vector)`` records.
        Raises ParseError on a dimension mismatch, a non-finite value or a
        rejected zero-norm vector. Norms are taken in float64.
        """
        logger = logger or get_class_logger(cls)
        if zero_norm_policy not in ("reject", "zero"):
            raise ValueError(f"unknown zero_norm_policy {zero_norm_policy!r}")

        start_time = time.time()
        rows: List[np.ndarray] = []
        words: List[str] = []
        word_to_id: Dict[str, int] = {}
        duplicates = 0
        zero_vectors = 0

        for word, raw in records:
            next_id = len(rows)
            # float64 so the norm neither overflows nor underflows for finite float32 input
            vector = np.asarray(raw, dtype=np.float64).reshape(-1)
            if vector.shape[0] != dimension:
                raise ParseError(
                    f"vector for {word!r} has dimension {vector.shape[0]}, expected {dimension}",
                    record=next_id,
                )
            if not np.all(np.isfinite(vector)):
                raise ParseError(f"vector for {word!r} has a non-finite value", record=next_id)

            norm = np.linalg.norm(vector)
            if norm == 0.0:
                if zero_norm_policy == "reject":
                    raise ParseError(f"vector for {word!r} has zero norm", record=next_id)
                zero_vectors += 1
                logger.warning("Storing zero vector for %r (id=%d) unnormalized", word, next_id)
            else:
                vector = vector / norm

            if word in word_to_id:
                duplicates += 1
                logger.debug("Duplicate word %r: id %d replaces id %d", word, next_id, word_to_id[word])

            rows.append(vector.astype(np.float32))
            words.append(word)
            word_to_id[word] = next_id

        if rows:
            matrix = np.vstack(rows).astype(np.float32, copy=False)
        else:
            matrix = np.empty((0, dimension), dtype=np.float32)

        elapsed = (time.time() - start_time) * 1000.0
        logger.info(
            "Built embedding store: %d vectors, %d unique words, dimension=%d "
            "(duplicates=%d, zero_vectors=%d, %.1f ms)",
            len(rows),
            len(word_to_id),
            dimension,
            duplicates,
            zero_vectors,
            elapsed,
        )
        return cls(matrix, tuple(words), word_to_id, logger=logger)

    @classmethod
    def from_reader(
            cls,
            reader: WordVectorReader,
            *,
            zero_norm_policy: str = "reject",
            logger: logging.Logger | None = None,
    ) -> "EmbeddingStore":
        return cls.build(reader, reader.dimension, zero_norm_policy=zero_norm_policy, logger=logger)

    # -------------------------------------------------------------------------
    # Read-only queries
    # -------------------------------------------------------------------------
    def get_vector(self, word: str) -> Optional[np.ndarray]:
        idx = self._word_to_id.get(word)
        if idx is None:
            return None
        return self._vectors[idx]

    def get_id(self, word: str) -> Optional[int]:
        return self._word_to_id.get(word)

    def word_at(self, idx: int) -> str:
        return self._words[idx]

    def vector_at(self, idx: int) -> np.ndarray:
        return self._vectors[idx]

    @property
    def vectors(self) -> np.ndarray:
        """Read-only (count, dimension) matrix; row i is the vector of id i."""
        return self._vectors

    @property
    def words(self) -> Tuple[str, ...]:
        return self._words

    def dimension(self) -> int:
        return self._vectors.shape[1]

    def count(self) -> int:
        return self._vectors.shape[0]

    def unique_words(self) -> int:
        return len(self._word_to_id)

    def iter_embeddings(self) -> Iterator[Embedding]:
        for idx, word in enumerate(self._words):
            yield Embedding(id=idx, word=word, vector=self._vectors[idx])

    def __len__(self) -> int:
        return self.count()

    def __contains__(self, word: object) -> bool:
        return word in self._word_to_id
