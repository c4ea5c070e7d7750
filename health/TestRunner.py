# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-02-04
# Description: TestRunner
# -----------------------------------------------------------------------------

from __future__ import annotations

import logging
from typing import Dict, Optional

from embedding.EmbeddingStore import EmbeddingStore
from health.IndexHealth import IndexHealth
from health.StoreHealth import StoreHealth
from utility.logging_utils import get_class_logger
from vectorstore.AnnIndex import AnnIndex


class TestRunner:
    """
    Orchestrates the model smoke tests and reports a consolidated result.

    Tests included:
      - store_loaded     (store holds vectors)
      - store_normalized (sampled vectors have unit norm)
      - index_self_query (a stored vector finds itself)
    """

    __test__ = False  # not a pytest class

    def __init__(self, store: EmbeddingStore, index: AnnIndex, logger: Optional[logging.Logger] = None):
        self.logger = logger or get_class_logger(self.__class__)
        self.store_health = StoreHealth(store)
        self.index_health = IndexHealth(store, index)

    # -------------------------------------------------------------------------
    def run_all(self) -> Dict[str, bool]:
        """
        Run all configured smoke tests.

        :return: Dict mapping test names to True/False.
        """
        self.logger.info("Starting model smoke test suite")

        results: Dict[str, bool] = {}
        checks = (
            ("store_loaded", self.store_health.check_loaded),
            ("store_normalized", self.store_health.check_normalized),
            ("index_self_query", self.index_health.run),
        )

        for name, check in checks:
            try:
                ok = check()
            except Exception as e:
                self.logger.exception("%s raised an exception: %s", name, e)
                ok = False
            results[name] = ok
            self._log_result(name, ok)

        self._log_summary(results)
        return results

    # -------------------------------------------------------------------------
    def _log_result(self, name: str, ok: bool) -> None:
        if ok:
            self.logger.info("%s: PASS", name)
        else:
            self.logger.error("%s: FAIL", name)

    def _log_summary(self, results: Dict[str, bool]) -> None:
        total = len(results)
        passed = sum(1 for v in results.values() if v)
        failed = total - passed

        self.logger.info("Smoke test summary: %d total, %d passed, %d failed", total, passed, failed)
