"""
Holiday API endpoints.
"""

from fastapi import APIRouter, Query, status

from schedule_engine.deps.di_container import get_container
from schedule_engine.schemas.holiday import HolidayListResponse

router = APIRouter()


@router.get("/{year}", response_model=HolidayListResponse)
async def list_holidays(
    year: int,
    country: str = Query(None, min_length=2, max_length=3),
) -> HolidayListResponse:
    """Holiday set for a year and country code."""
    controller = get_container().calendar_controller()
    return await controller.list_holidays(year, country)


@router.delete("/cache", status_code=status.HTTP_204_NO_CONTENT)
async def clear_holiday_cache():
    """Drop every cached holiday set."""
    controller = get_container().calendar_controller()
    controller.clear_holiday_cache()
