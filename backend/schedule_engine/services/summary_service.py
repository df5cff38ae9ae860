"""
Monthly summary aggregation.
"""

import logging
from datetime import date
from typing import Iterable, Mapping, Sequence

from schedule_engine.schemas.day_view import MonthSummary
from schedule_engine.schemas.holiday import Holiday
from schedule_engine.schemas.schedule import AvailableEntry, LeaveEntry, ScheduleEntry
from schedule_engine.utils.time_utils import parse_hour

logger = logging.getLogger(__name__)


def _entry_hours(entry: AvailableEntry) -> int:
    """Whole hours of a window, minutes ignored. Malformed times count as zero."""
    try:
        return parse_hour(entry.meta.end_time) - parse_hour(entry.meta.start_time)
    except ValueError:
        logger.warning(
            "Error parsing time for working hours summary",
            extra={
                "entry_id": entry.meta.id,
                "start_time": entry.meta.start_time,
                "end_time": entry.meta.end_time,
            },
        )
        return 0


def calculate_month_summary(
    entries_by_date: Mapping[date, Sequence[ScheduleEntry]],
    holidays: Iterable[Holiday],
    displayed_month: date,
) -> MonthSummary:
    """
    Reduce loaded entries and holidays into month totals.

    Every loaded entry counts, including those on visible days of the
    neighbouring months. Each leave entry is one day; multi-day leave arrives
    as one entry per date. Holidays are matched on month only, so a holiday
    list spanning several years counts every year's occurrences.
    """
    summary = MonthSummary()

    for entries in entries_by_date.values():
        for entry in entries:
            if isinstance(entry, AvailableEntry):
                summary.working_hours += _entry_hours(entry)
            elif isinstance(entry, LeaveEntry):
                summary.leave_days += 1

    summary.holidays_in_month = sum(
        1 for holiday in holidays if holiday.date.month == displayed_month.month
    )
    return summary
