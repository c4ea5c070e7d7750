# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-02-04
# Description: ResponseTimer
# -----------------------------------------------------------------------------
import time

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

from utility.logging_utils import get_class_logger


class ResponseTimer(BaseHTTPMiddleware):
    """Logs how long each request took and reports it in X-Response-Time-Ms."""

    def __init__(self, app):
        super().__init__(app)
        self.logger = get_class_logger(self.__class__)

    async def dispatch(self, request: Request, call_next):
        start = time.perf_counter_ns()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter_ns() - start) / 1_000_000.0

        self.logger.info("Request `%s` took: %.3f ms", request.url, elapsed_ms)
        response.headers["X-Response-Time-Ms"] = f"{elapsed_ms:.3f}"
        return response
