"""
Health check endpoint.
"""

from fastapi import APIRouter, Query

from schedule_engine.schemas.health import HealthResponse
from schedule_engine.deps.di_container import get_container

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def get_health(
    check_data_source: bool = Query(True, description="Ping the remote data source"),
) -> HealthResponse:
    """
    Uptime, holiday cache state and, unless skipped, data source reachability.
    A failed check degrades the status but still answers 200.
    """
    controller = get_container().health_controller()
    return await controller.get_health(check_data_source=check_data_source)
