# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-02-04
# Description: main.py
# -----------------------------------------------------------------------------
import logging
from contextlib import asynccontextmanager
from typing import Callable, Optional

from fastapi import FastAPI

from api.AppContainer import AppContainer, init_app_container, teardown_app_container
from api.middleware.ResponseTimer import ResponseTimer
from api.routers import health, similar, stats, vectors
from config.Config import Config

logging.basicConfig(level=logging.INFO, format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",)


def create_app(container_factory: Optional[Callable[[], AppContainer]] = None) -> FastAPI:
    """
    Build the FastAPI app. The model is loaded in the lifespan startup, so a
    build error stops the server before it accepts traffic.
    """

    @asynccontextmanager
    async def lifespan(_app: FastAPI):
        if container_factory is not None:
            init_app_container(container=container_factory())
        else:
            init_app_container(Config.from_env())
        try:
            yield
        finally:
            teardown_app_container()

    app = FastAPI(title="W2V Server", lifespan=lifespan)
    app.add_middleware(ResponseTimer)
    app.include_router(health.router)
    app.include_router(vectors.router)
    app.include_router(similar.router)
    app.include_router(stats.router)
    return app


# `uvicorn api.main:app` loads the model from W2V_* environment variables
app = create_app()
