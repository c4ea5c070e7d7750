# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-02-04
# Description: IndexHealth
# -----------------------------------------------------------------------------
import logging
import time
from typing import Optional

from embedding.EmbeddingStore import EmbeddingStore
from utility.logging_utils import get_logger
from vectorstore.AnnIndex import AnnIndex

SELF_DISTANCE_TOLERANCE = 1e-5


class IndexHealth:
    """
    Smoke test for the ANN index.

    Queries the index with a stored vector and expects that vector's own id
    back first at distance ~0.
    """

    def __init__(
        self,
        store: EmbeddingStore,
        index: AnnIndex,
        logger: Optional[logging.Logger] = None,
    ):
        self.store = store
        self.index = index
        self.logger = logger or get_logger(__name__)

    def run(self, probe_id: int = 0) -> bool:
        if self.store.count() == 0:
            self.logger.error("Cannot probe an empty index.")
            return False

        vector = self.store.vector_at(probe_id)
        start = time.time()
        hits = self.index.nearest(vector, 1)
        elapsed_ms = (time.time() - start) * 1000.0

        if not hits:
            self.logger.error("Self-query for id %d returned no candidates.", probe_id)
            return False

        distance, found_id = hits[0]
        if distance > SELF_DISTANCE_TOLERANCE:
            self.logger.error(
                "Self-query for id %d: nearest distance %.3g exceeds tolerance.", probe_id, distance
            )
            return False
        if found_id != probe_id:
            self.logger.info(
                "Self-query for id %d matched identical vector id %d (%r).",
                probe_id,
                found_id,
                self.store.word_at(found_id),
            )

        self.logger.info("Index self-query passed in %.1f ms.", elapsed_ms)
        return True
