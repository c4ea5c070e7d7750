# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-02-04
# Description: StoreHealth
# -----------------------------------------------------------------------------
import logging
from typing import Optional

import numpy as np

import settings
from embedding.EmbeddingStore import EmbeddingStore
from utility.logging_utils import get_logger


class StoreHealth:
    """
    Smoke test for the loaded embedding store.

    Verifies:
      - The store holds at least one vector
      - A sample of stored vectors has unit L2 norm (zero vectors are skipped)
    """

    def __init__(
        self,
        store: EmbeddingStore,
        sample_size: int = 1000,
        logger: Optional[logging.Logger] = None,
    ):
        self.store = store
        self.sample_size = sample_size
        self.logger = logger or get_logger(__name__)

    def check_loaded(self) -> bool:
        count = self.store.count()
        if count == 0:
            self.logger.error("Embedding store is empty.")
            return False
        self.logger.info(
            "Embedding store holds %d vectors (dimension=%d).", count, self.store.dimension()
        )
        return True

    def check_normalized(self) -> bool:
        count = self.store.count()
        if count == 0:
            return False

        # evenly spaced sample, deterministic
        ids = np.unique(np.linspace(0, count - 1, num=min(count, self.sample_size)).astype(np.int64))
        norms = np.linalg.norm(self.store.vectors[ids].astype(np.float64), axis=1)
        norms = norms[norms > 0.0]

        worst = float(np.max(np.abs(norms - 1.0))) if norms.size else 0.0
        if worst > settings.NORM_TOLERANCE:
            self.logger.error("Norm check FAILED: worst deviation from 1.0 is %.3g", worst)
            return False

        self.logger.info("Norm check passed on %d sampled vectors (worst deviation %.3g).", ids.size, worst)
        return True
