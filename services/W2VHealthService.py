# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-02-04
# Description: W2VHealthService.py
# -----------------------------------------------------------------------------
import time
from dataclasses import dataclass

from health.TestRunner import TestRunner
from api.schemas.health import DeepHealthResponse, SmokeTestSummary


@dataclass
class W2VHealthService:
    """
    Runs the model smoke tests (store + index) through TestRunner
    and returns a DeepHealthResponse for the API layer.
    """

    test_runner: TestRunner

    def deep_health(self) -> DeepHealthResponse:
        start = time.time()
        results = self.test_runner.run_all()
        elapsed_ms = (time.time() - start) * 1000.0

        passed = sum(1 for ok in results.values() if ok)
        summary = SmokeTestSummary(
            total=len(results),
            passed=passed,
            failed=len(results) - passed,
        )

        store = self.test_runner.store_health.store
        return DeepHealthResponse(
            status="ok" if summary.failed == 0 else "error",
            vector_count=store.count(),
            dimension=store.dimension(),
            elapsed_ms=elapsed_ms,
            results=results,
            summary=summary,
        )
