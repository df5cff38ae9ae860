"""
Calendar service: month navigation state, loading and day views for one user.
"""

import asyncio
import logging
from datetime import date, timedelta
from typing import Dict, List, Optional

from schedule_engine.core.exceptions import DataSourceError
from schedule_engine.core.integrations.data_source import DataSourceClient
from schedule_engine.services.base_service import BaseService
from schedule_engine.services.day_view_service import group_entries_by_date, resolve_day_view
from schedule_engine.services.holiday_service import HolidayCache
from schedule_engine.services.leave_request_service import LeaveRequestService
from schedule_engine.services.summary_service import calculate_month_summary
from schedule_engine.schemas.day_view import DayView, MonthSummary, MonthViewResponse
from schedule_engine.schemas.holiday import Holiday
from schedule_engine.schemas.leave_request import LeaveRequestCreate, LeaveRequestResponse
from schedule_engine.schemas.schedule import ScheduleEntry

logger = logging.getLogger(__name__)


def month_start(day: date) -> date:
    return day.replace(day=1)


def month_end(day: date) -> date:
    next_month = (day.replace(day=28) + timedelta(days=4)).replace(day=1)
    return next_month - timedelta(days=1)


def visible_range(month: date) -> tuple[date, date]:
    """Monday on or before the 1st through the Sunday on or after the last day."""
    first = month_start(month)
    last = month_end(month)
    return (
        first - timedelta(days=first.weekday()),
        last + timedelta(days=6 - last.weekday()),
    )


class CalendarSession:
    """
    Month calendar for one user.

    Each load takes a generation number; a response that arrives after a
    newer load of the same kind has started is dropped, so fast navigation
    never shows data for a month that is no longer displayed.
    """

    def __init__(
        self,
        user_id: str,
        data_source: DataSourceClient,
        holiday_cache: HolidayCache,
        country: Optional[str] = None,
        today: Optional[date] = None,
    ):
        self.user_id = user_id
        self.data_source = data_source
        self.holiday_cache = holiday_cache
        self.country = country or holiday_cache.default_country
        self._today = today

        start = self.today()
        self.current_month = month_start(start)
        self.current_year = start.year
        self.schedule_entries: Dict[date, List[ScheduleEntry]] = {}
        self.holidays: List[Holiday] = []
        self.availability_error: Optional[str] = None

        self._availability_generation = 0
        self._holiday_generation = 0
        self._holidays_loaded_for: Optional[int] = None

    def today(self) -> date:
        return self._today or date.today()

    async def load_availability(self) -> None:
        """
        Fetch the visible range of the current month.

        A failure of a superseded load is logged and dropped.

        Raises:
            DataSourceError: after resetting the entries to empty
        """
        if not self.user_id:
            return
        self._availability_generation += 1
        generation = self._availability_generation
        month = self.current_month
        range_start, range_end = visible_range(month)

        try:
            entries = await self.data_source.fetch_user_availability(self.user_id, range_start, range_end)
        except DataSourceError as exc:
            logger.error(
                f"Failed to fetch user schedule: {exc.message}",
                extra={"user_id": self.user_id, "month": month.isoformat()},
            )
            if generation != self._availability_generation:
                return
            self.schedule_entries = {}
            self.availability_error = exc.message
            raise

        if generation != self._availability_generation:
            logger.debug(
                "Discarding superseded availability response",
                extra={"user_id": self.user_id, "month": month.isoformat()},
            )
            return
        self.schedule_entries = group_entries_by_date(entries)
        self.availability_error = None

    async def load_holidays(self, year: Optional[int] = None) -> None:
        """Fetch the holiday set of a year, the current one by default. Never raises."""
        self._holiday_generation += 1
        generation = self._holiday_generation
        year = year or self.current_year

        holidays = await self.holiday_cache.get_holidays(year, self.country)

        if generation != self._holiday_generation:
            logger.debug("Discarding superseded holiday response", extra={"year": year})
            return
        self.holidays = holidays
        self._holidays_loaded_for = year

    async def handle_month_change(self, day: date) -> None:
        """
        Display the month containing `day`.

        Holidays are reloaded only when the year changes; they load alongside
        the availability fetch.
        """
        self.current_month = month_start(day)
        holidays_load = None
        if day.year != self.current_year or self._holidays_loaded_for != day.year:
            self.current_year = day.year
            holidays_load = asyncio.ensure_future(self.load_holidays(day.year))
        try:
            await self.load_availability()
        finally:
            if holidays_load is not None:
                await holidays_load

    async def go_to_today(self) -> None:
        await self.handle_month_change(self.today())

    async def refresh(self) -> None:
        """Re-fetch availability after an external write."""
        await self.load_availability()

    def find_holiday_for_date(self, day: date) -> Optional[Holiday]:
        """Holiday on `day`, looked up only within the loaded year."""
        if day.year != self.current_year:
            return None
        return next((holiday for holiday in self.holidays if holiday.date == day), None)

    def can_select_date(self, day: date) -> bool:
        """Holidays cannot be picked for an availability or leave request."""
        return self.find_holiday_for_date(day) is None

    def day_view(self, day: date) -> DayView:
        view = resolve_day_view(day, self.schedule_entries.get(day, []), self.find_holiday_for_date(day))
        if day.month != self.current_month.month or day.year != self.current_month.year:
            view.outside_month = True
        return view

    def month_grid(self) -> List[DayView]:
        range_start, range_end = visible_range(self.current_month)
        return [
            self.day_view(range_start + timedelta(days=offset))
            for offset in range((range_end - range_start).days + 1)
        ]

    def summary(self) -> MonthSummary:
        return calculate_month_summary(self.schedule_entries, self.holidays, self.current_month)

    async def submit_leave_request(
        self,
        service: LeaveRequestService,
        request: LeaveRequestCreate,
    ) -> LeaveRequestResponse:
        """
        Submit a leave request and re-fetch availability once it is accepted.

        A failed re-fetch does not fail the submit; it is reported through
        availability_error.
        """
        if request.user_id is None:
            request = request.model_copy(update={"user_id": self.user_id})
        response = await service.submit(request, today=self.today())
        try:
            await self.refresh()
        except DataSourceError:
            logger.warning(
                "Leave request stored but availability re-fetch failed",
                extra={"leave_request_id": response.id, "user_id": self.user_id},
            )
        return response

    def to_response(self) -> MonthViewResponse:
        range_start, range_end = visible_range(self.current_month)
        return MonthViewResponse(
            user_id=self.user_id,
            year=self.current_month.year,
            month=self.current_month.month,
            range_start=range_start,
            range_end=range_end,
            days=self.month_grid(),
            summary=self.summary(),
            holidays=self.holidays,
            availability_error=self.availability_error,
        )


class CalendarService(BaseService):
    """Service for month calendar operations."""

    def __init__(
        self,
        data_source: DataSourceClient,
        holiday_cache: HolidayCache,
        country: Optional[str] = None,
    ):
        self.data_source = data_source
        self.holiday_cache = holiday_cache
        self.country = country

    def open_session(self, user_id: str, today: Optional[date] = None) -> CalendarSession:
        return CalendarSession(
            user_id,
            self.data_source,
            self.holiday_cache,
            country=self.country,
            today=today,
        )

    async def _load_month(self, user_id: str, year: int, month: int) -> CalendarSession:
        session = self.open_session(user_id)
        try:
            await session.handle_month_change(date(year, month, 1))
        except DataSourceError:
            # Resolution continues over an empty entry set; the message is
            # reported in availability_error.
            pass
        return session

    async def get_month_view(self, user_id: str, year: int, month: int) -> MonthViewResponse:
        """Month grid, summary and holidays for a user."""
        session = await self._load_month(user_id, year, month)
        return session.to_response()

    async def get_day_view(self, user_id: str, day: date) -> DayView:
        """Resolved status of a single date."""
        session = await self._load_month(user_id, day.year, day.month)
        return session.day_view(day)
