"""
Derived per-day and per-month view schemas.
"""

import datetime as dt
from enum import Enum
from typing import Annotated, List, Literal, Optional, Union

from pydantic import BaseModel, Field

from schedule_engine.schemas.holiday import Holiday
from schedule_engine.schemas.schedule import AvailabilityMeta, LeaveMeta


class DayStatus(str, Enum):
    """Resolved status of a single calendar day."""
    HOLIDAY = "holiday"
    LEAVE = "leave"
    LEAVE_PENDING = "leave_pending"
    AVAILABLE = "available"
    UNAVAILABLE = "unavailable"


class DayViewBase(BaseModel):
    """Fields shared by every day view variant."""
    date: dt.date
    content: List[str] = []
    tooltip: Optional[str] = None
    outside_month: bool = False


class HolidayDayView(DayViewBase):
    status: Literal[DayStatus.HOLIDAY] = DayStatus.HOLIDAY
    holiday: Holiday


class LeaveDayView(DayViewBase):
    status: Literal[DayStatus.LEAVE, DayStatus.LEAVE_PENDING]
    leave: LeaveMeta
    color: Optional[str] = None


class AvailableDayView(DayViewBase):
    status: Literal[DayStatus.AVAILABLE] = DayStatus.AVAILABLE
    windows: List[AvailabilityMeta]


class UnavailableDayView(DayViewBase):
    status: Literal[DayStatus.UNAVAILABLE] = DayStatus.UNAVAILABLE


DayView = Annotated[
    Union[HolidayDayView, LeaveDayView, AvailableDayView, UnavailableDayView],
    Field(discriminator="status"),
]


class MonthSummary(BaseModel):
    """Operational totals for the displayed month."""
    working_hours: int = 0
    leave_days: int = 0
    holidays_in_month: int = 0


class MonthViewResponse(BaseModel):
    """Month grid, totals and holidays for one user."""
    user_id: str
    year: int
    month: int = Field(..., ge=1, le=12)
    range_start: dt.date
    range_end: dt.date
    days: List[DayView]
    summary: MonthSummary
    holidays: List[Holiday] = []
    availability_error: Optional[str] = None
