# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-02-04
# Description: AppContainer.py
# -----------------------------------------------------------------------------
import logging
import time
from typing import Optional

from config.Config import Config
from embedding.EmbeddingStore import EmbeddingStore
from health.TestRunner import TestRunner
from ingestion.VectorFileLoader import VectorFileLoader
from ingestion.WordVectorReader import WordVectorReader
from services.W2VHealthService import W2VHealthService
from services.W2VQueryService import W2VQueryService
from services.W2VStatsService import W2VStatsService
from utility.exceptions import ModelNotLoadedError
from utility.logging_utils import get_logger
from vectorstore.AnnIndex import AnnIndex
from vectorstore.IndexFactory import build_index

logger = get_logger(__name__)


class AppContainer:
    """
    Owns the loaded model and application wiring.

    The store and index are built once, sequentially, and never mutated
    afterwards; services share them read-only. A container can be built from a
    Config (loads the vectors file) or from an already built store and index.
    """

    def __init__(
        self,
        *,
        store: EmbeddingStore,
        index: AnnIndex,
        cfg: Optional[Config] = None,
    ) -> None:
        self.cfg = cfg
        self.store = store
        self.index = index

        # Query engine
        self.query_service = W2VQueryService(store=self.store, index=self.index)

        # Stats for /stats
        self.stats_service = W2VStatsService(
            store=self.store,
            index=self.index,
            vectors_path=cfg.vectors_path if cfg else None,
        )

        # Smoke tests / health
        self.test_runner = TestRunner(store=self.store, index=self.index)
        self.health_service = W2VHealthService(test_runner=self.test_runner)

    @classmethod
    def from_config(cls, cfg: Config, *, file_loader: Optional[VectorFileLoader] = None) -> "AppContainer":
        """Load the vectors file and build store + index. Build errors propagate."""
        logger.info("Loading word vectors with config: %s", cfg.summary())
        start = time.time()

        file_loader = file_loader or VectorFileLoader()
        with file_loader.open_stream(cfg.vectors_path, compressed=cfg.compressed) as stream:
            reader = WordVectorReader(stream, limit=cfg.limit or None, binary=cfg.binary)
            store = EmbeddingStore.from_reader(reader, zero_norm_policy=cfg.zero_norm_policy)

        index = build_index(
            store,
            backend=cfg.index_backend,
            n_tables=cfg.n_tables,
            n_planes=cfg.n_planes,
            seed=cfg.seed,
        )

        logger.info(
            "Loaded %d word vectors (%.1f s)", store.count(), time.time() - start
        )
        return cls(store=store, index=index, cfg=cfg)

    def close(self) -> None:
        logger.info("Releasing word vector model (%d vectors)", self.store.count())
        self.query_service = None
        self.stats_service = None
        self.health_service = None
        self.index = None
        self.store = None


# -----------------------------------------------------------------------------
# Process-wide container: initialised once at startup, torn down at exit
# -----------------------------------------------------------------------------
_app_container: Optional[AppContainer] = None


def init_app_container(cfg: Optional[Config] = None, *, container: Optional[AppContainer] = None) -> AppContainer:
    global _app_container
    if _app_container is not None:
        raise RuntimeError("App container is already initialised")
    _app_container = container or AppContainer.from_config(cfg or Config.from_env())
    return _app_container


def get_app_container() -> AppContainer:
    if _app_container is None:
        raise ModelNotLoadedError("No word vector model loaded")
    return _app_container


def teardown_app_container() -> None:
    global _app_container
    if _app_container is not None:
        _app_container.close()
        _app_container = None
