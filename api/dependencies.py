# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-02-04
# Description: dependencies.py
# -----------------------------------------------------------------------------
from fastapi import HTTPException

from api.AppContainer import AppContainer, get_app_container
from services.W2VHealthService import W2VHealthService
from services.W2VQueryService import W2VQueryService
from services.W2VStatsService import W2VStatsService
from utility.exceptions import ModelNotLoadedError


def get_container() -> AppContainer:
    try:
        return get_app_container()
    except ModelNotLoadedError as e:
        raise HTTPException(status_code=500, detail=str(e))

def get_query_service() -> W2VQueryService:
    # use the singleton service from the container
    return get_container().query_service

def get_stats_service() -> W2VStatsService:
    # use the singleton service from the container
    return get_container().stats_service

def get_health_service() -> W2VHealthService:
    # use the singleton service from the container
    return get_container().health_service
