# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-02-04
# Description: W2VStatsService.py
# -----------------------------------------------------------------------------

import logging
from typing import Any, Dict, Optional

from embedding.EmbeddingStore import EmbeddingStore
from utility.logging_utils import get_class_logger
from vectorstore.AnnIndex import AnnIndex


class W2VStatsService:
    """
    Stats service for the /stats endpoint.

    Responsibilities:
      - report store size and dimension
      - report index backend parameters and bucket occupancy
    """

    def __init__(
        self,
        *,
        store: EmbeddingStore,
        index: AnnIndex,
        vectors_path: Optional[str] = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self.store = store
        self.index = index
        self.vectors_path = vectors_path
        self.logger = logger or get_class_logger(self.__class__)

    def get_stats(self) -> Dict[str, Any]:
        index_stats = self.index.stats()
        self.logger.info(
            "Stats: %d vectors, backend=%s",
            self.store.count(),
            index_stats.get("backend"),
        )
        return {
            "vectors_path": self.vectors_path,
            "store": {
                "vector_count": self.store.count(),
                "unique_words": self.store.unique_words(),
                "dimension": self.store.dimension(),
            },
            "index": index_stats,
        }
