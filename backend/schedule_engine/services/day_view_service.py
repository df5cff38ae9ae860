"""
Precedence resolution of schedule entries into one status per day.

Dominance order, first match wins: holiday, leave, availability, nothing.
"""

import logging
from collections import defaultdict
from datetime import date
from typing import Dict, Iterable, List, Optional, Sequence

from schedule_engine.schemas.day_view import (
    AvailableDayView,
    DayStatus,
    DayView,
    HolidayDayView,
    LeaveDayView,
    UnavailableDayView,
)
from schedule_engine.schemas.holiday import Holiday
from schedule_engine.schemas.schedule import (
    AvailableEntry,
    LeaveEntry,
    LeaveStatus,
    ScheduleEntry,
)

logger = logging.getLogger(__name__)

HOLIDAY_CONTENT = "Holiday"


def _sort_key(entry: ScheduleEntry):
    if isinstance(entry, AvailableEntry):
        return (0, entry.meta.start_time)
    # Leave entries tie, the stable sort keeps their arrival order
    return (1, "")


def sort_day_entries(entries: Iterable[ScheduleEntry]) -> List[ScheduleEntry]:
    """Availability before leave, availability ascending by start time."""
    return sorted(entries, key=_sort_key)


def group_entries_by_date(entries: Iterable[ScheduleEntry]) -> Dict[date, List[ScheduleEntry]]:
    """Group entries per date, each group pre-sorted for resolution."""
    grouped: Dict[date, List[ScheduleEntry]] = defaultdict(list)
    for entry in entries:
        grouped[entry.date].append(entry)
    return {day: sort_day_entries(day_entries) for day, day_entries in grouped.items()}


def resolve_day_view(
    day: date,
    entries: Sequence[ScheduleEntry],
    holiday: Optional[Holiday] = None,
) -> DayView:
    """
    Build the single display status for a date.

    Entries are expected in the order produced by sort_day_entries. When a
    date carries several leave records the first one wins.
    """
    if holiday is not None:
        return HolidayDayView(
            date=day,
            content=[HOLIDAY_CONTENT],
            tooltip=holiday.description,
            holiday=holiday,
        )

    leave = next((entry for entry in entries if isinstance(entry, LeaveEntry)), None)
    if leave is not None:
        leave_count = sum(1 for entry in entries if isinstance(entry, LeaveEntry))
        if leave_count > 1:
            logger.debug(
                "Several leave records on one date, showing the first",
                extra={"date": day.isoformat(), "leave_count": leave_count},
            )
        meta = leave.meta
        status = DayStatus.LEAVE_PENDING if meta.status == LeaveStatus.PENDING else DayStatus.LEAVE
        return LeaveDayView(
            date=day,
            status=status,
            content=[meta.leave_type_label],
            tooltip=meta.reason,
            leave=meta,
            color=meta.color,
        )

    windows = [entry.meta for entry in entries if isinstance(entry, AvailableEntry)]
    if windows:
        windows = sorted(windows, key=lambda meta: meta.start_time)
        return AvailableDayView(
            date=day,
            content=[f"{meta.start_time}-{meta.end_time}" for meta in windows],
            windows=windows,
        )

    return UnavailableDayView(date=day)
