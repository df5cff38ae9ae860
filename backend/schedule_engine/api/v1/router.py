"""
API v1 router that aggregates all endpoint routers.
"""

from fastapi import APIRouter

from schedule_engine.api.v1.endpoints import (
    health,
    availability,
    calendar,
    holidays,
    weekly_grid,
    leave_requests,
)

api_router = APIRouter()

api_router.include_router(health.router, tags=["health"])
api_router.include_router(availability.router, prefix="/availability", tags=["availability"])
api_router.include_router(calendar.router, prefix="/calendar", tags=["calendar"])
api_router.include_router(holidays.router, prefix="/holidays", tags=["holidays"])
api_router.include_router(weekly_grid.router, prefix="/weekly-grid", tags=["weekly-grid"])
api_router.include_router(leave_requests.router, prefix="/leave-requests", tags=["leave-requests"])
