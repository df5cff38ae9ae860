"""
Calendar API endpoints.
"""

from datetime import date

from fastapi import APIRouter, Query

from schedule_engine.deps.di_container import get_container
from schedule_engine.schemas.day_view import DayView, MonthViewResponse

router = APIRouter()


@router.get("/{user_id}/month", response_model=MonthViewResponse)
async def get_month_view(
    user_id: str,
    year: int = Query(..., ge=2000, le=2100),
    month: int = Query(..., ge=1, le=12),
) -> MonthViewResponse:
    """Resolved day statuses and totals for the visible weeks of a month."""
    controller = get_container().calendar_controller()
    return await controller.get_month_view(user_id, year, month)


@router.get("/{user_id}/day/{day}", response_model=DayView)
async def get_day_view(
    user_id: str,
    day: date,
) -> DayView:
    """Resolved status of one date."""
    controller = get_container().calendar_controller()
    return await controller.get_day_view(user_id, day)
