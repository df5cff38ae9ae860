"""
Calendar controller.
"""

from datetime import date
from typing import Optional

from schedule_engine.controllers.base_controller import BaseController
from schedule_engine.services.calendar_service import CalendarService
from schedule_engine.services.holiday_service import HolidayCache
from schedule_engine.schemas.day_view import DayView, MonthViewResponse
from schedule_engine.schemas.holiday import HolidayListResponse


class CalendarController(BaseController):
    """Controller for month calendar and holiday operations."""

    def __init__(self, calendar_service: CalendarService, holiday_cache: HolidayCache):
        self.calendar_service = calendar_service
        self.holiday_cache = holiday_cache

    async def get_month_view(self, user_id: str, year: int, month: int) -> MonthViewResponse:
        return await self.calendar_service.get_month_view(user_id, year, month)

    async def get_day_view(self, user_id: str, day: date) -> DayView:
        return await self.calendar_service.get_day_view(user_id, day)

    async def list_holidays(self, year: int, country: Optional[str] = None) -> HolidayListResponse:
        """Holiday set for a year, served from the cache when possible."""
        country = country or self.holiday_cache.default_country
        holidays = await self.holiday_cache.get_holidays(year, country)
        return HolidayListResponse(year=year, country=country, items=holidays, total=len(holidays))

    def clear_holiday_cache(self) -> None:
        self.holiday_cache.clear()
