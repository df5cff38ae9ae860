"""
Weekly schedule grid layout.

Weeks start on Monday. Every (weekday, work line) pair with at least one
shift becomes a single block spanning its earliest start to its latest end,
positioned on a grid where one clock hour is `unit_height` tall.
"""

from collections import defaultdict
from datetime import date, timedelta
from typing import Dict, Iterable, List, Optional, Sequence

from schedule_engine.services.base_service import BaseService
from schedule_engine.schemas.weekly_schedule import (
    WORK_LINE_LABELS,
    WeekLayout,
    WeeklyScheduleEntry,
    WorkBlock,
    WorkLine,
)
from schedule_engine.utils.time_utils import format_minutes, to_minutes

DEFAULT_UNIT_HEIGHT = 48


def get_week_start(anchor: date) -> date:
    """Monday on or before the anchor date."""
    return anchor - timedelta(days=anchor.weekday())


def shift_week(anchor: date, weeks: int) -> date:
    return anchor + timedelta(weeks=weeks)


def can_go_forward(anchor: date, today: date, forward_weeks: int = 3) -> bool:
    """
    Forward navigation stops once the anchor is `forward_weeks` ahead of today.

    The earlier client compared `anchor + forward_weeks > today`, which is
    inverted: it allowed unlimited forward paging and blocked weeks far in
    the past. This checks the intended upper bound instead.
    """
    return anchor < shift_week(today, forward_weeks)


def entries_in_week(entries: Iterable[WeeklyScheduleEntry], anchor: date) -> List[WeeklyScheduleEntry]:
    week_start = get_week_start(anchor)
    week_end = week_start + timedelta(days=6)
    return [entry for entry in entries if week_start <= entry.date <= week_end]


def bucket_entries(
    entries: Iterable[WeeklyScheduleEntry],
) -> Dict[int, Dict[WorkLine, List[WeeklyScheduleEntry]]]:
    """Group by ISO weekday (Monday 1 .. Sunday 7), then by work line."""
    buckets: Dict[int, Dict[WorkLine, List[WeeklyScheduleEntry]]] = defaultdict(dict)
    for entry in entries:
        buckets[entry.date.isoweekday()].setdefault(entry.work_line, []).append(entry)
    return dict(buckets)


def merge_block(entries: Sequence[WeeklyScheduleEntry], unit_height: float = DEFAULT_UNIT_HEIGHT) -> WorkBlock:
    """
    Merge one bucket into a bounding block.

    Raises:
        ValueError: for an empty bucket or a malformed time
    """
    if not entries:
        raise ValueError("Cannot build a work block from an empty bucket")

    start = min(to_minutes(entry.start_time) for entry in entries)
    end = max(to_minutes(entry.end_time) for entry in entries)
    first = entries[0]
    return WorkBlock(
        day_index=first.date.isoweekday(),
        date=first.date,
        work_line=first.work_line,
        label=WORK_LINE_LABELS[first.work_line],
        start_time=format_minutes(start),
        end_time=format_minutes(end),
        top_offset=start / 60 * unit_height,
        height=(end - start) / 60 * unit_height,
        entry_count=len(entries),
    )


class WeeklyGridService(BaseService):
    """Lays out a week of shifts."""

    def __init__(self, unit_height: float = DEFAULT_UNIT_HEIGHT, forward_weeks: int = 3):
        self.unit_height = unit_height
        self.forward_weeks = forward_weeks

    def build_week_layout(
        self,
        entries: Iterable[WeeklyScheduleEntry],
        anchor: date,
        today: Optional[date] = None,
    ) -> WeekLayout:
        """Blocks for the week containing `anchor`, ordered by day then first appearance."""
        week_start = get_week_start(anchor)
        buckets = bucket_entries(entries_in_week(entries, anchor))

        blocks = [
            merge_block(bucket, self.unit_height)
            for day_index in sorted(buckets)
            for bucket in buckets[day_index].values()
        ]
        return WeekLayout(
            week_start=week_start,
            week_end=week_start + timedelta(days=6),
            unit_height=self.unit_height,
            can_go_forward=can_go_forward(anchor, today or date.today(), self.forward_weeks),
            blocks=blocks,
        )
