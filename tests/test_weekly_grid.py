"""
Weekly grid layout tests.
"""

from datetime import date

import pytest

from schedule_engine.schemas.weekly_schedule import WeeklyScheduleEntry, WorkLine
from schedule_engine.services.weekly_grid_service import (
    WeeklyGridService,
    bucket_entries,
    can_go_forward,
    get_week_start,
    merge_block,
)

UNIT = 48
# Week of Monday 2024-05-06 .. Sunday 2024-05-12
WEDNESDAY = date(2024, 5, 8)


def shift(day, start, end, work_line=WorkLine.CUSTOMER_SERVICE):
    return WeeklyScheduleEntry(date=day, start_time=start, end_time=end, work_line=work_line)


def test_week_starts_on_monday():
    assert get_week_start(WEDNESDAY) == date(2024, 5, 6)
    assert get_week_start(date(2024, 5, 6)) == date(2024, 5, 6)
    assert get_week_start(date(2024, 5, 12)) == date(2024, 5, 6)


def test_single_entry_block_geometry():
    block = merge_block([shift(WEDNESDAY, "09:30", "17:00")], UNIT)

    assert block.top_offset == 9 * UNIT + 0.5 * UNIT
    assert block.height == 7.5 * UNIT
    assert block.day_index == 3
    assert block.label == "Customer Service"


def test_bucket_merges_to_bounding_block():
    block = merge_block([
        shift(WEDNESDAY, "13:00", "17:45"),
        shift(WEDNESDAY, "08:15", "12:00"),
    ], UNIT)

    assert (block.start_time, block.end_time) == ("08:15", "17:45")
    assert block.top_offset == 8.25 * UNIT
    assert block.height == 9.5 * UNIT
    assert block.entry_count == 2


def test_sunday_is_day_seven():
    buckets = bucket_entries([shift(date(2024, 5, 12), "10:00", "14:00")])
    assert list(buckets) == [7]


def test_layout_filters_to_anchor_week():
    entries = [
        shift(date(2024, 5, 5), "09:00", "17:00"),   # previous Sunday
        shift(date(2024, 5, 6), "09:00", "17:00"),
        shift(date(2024, 5, 12), "09:00", "17:00"),
        shift(date(2024, 5, 13), "09:00", "17:00"),  # next Monday
    ]

    layout = WeeklyGridService(unit_height=UNIT).build_week_layout(entries, WEDNESDAY, today=WEDNESDAY)

    assert layout.week_start == date(2024, 5, 6)
    assert layout.week_end == date(2024, 5, 12)
    assert [block.date for block in layout.blocks] == [date(2024, 5, 6), date(2024, 5, 12)]


def test_one_block_per_day_and_work_line():
    entries = [
        shift(WEDNESDAY, "08:00", "12:00", WorkLine.SALES),
        shift(WEDNESDAY, "13:00", "16:00", WorkLine.SALES),
        shift(WEDNESDAY, "16:00", "20:00", WorkLine.SUPPORT),
        shift(date(2024, 5, 6), "09:00", "10:00", WorkLine.SALES),
    ]

    layout = WeeklyGridService(unit_height=UNIT).build_week_layout(entries, WEDNESDAY, today=WEDNESDAY)

    assert [(block.day_index, block.work_line) for block in layout.blocks] == [
        (1, WorkLine.SALES),
        (3, WorkLine.SALES),
        (3, WorkLine.SUPPORT),
    ]


def test_empty_week_has_no_blocks():
    layout = WeeklyGridService().build_week_layout([], WEDNESDAY, today=WEDNESDAY)
    assert layout.blocks == []


def test_empty_bucket_is_rejected():
    with pytest.raises(ValueError):
        merge_block([], UNIT)


def test_forward_navigation_limit():
    today = date(2024, 5, 8)
    assert can_go_forward(date(2024, 4, 10), today)
    assert can_go_forward(today, today)
    assert can_go_forward(date(2024, 5, 28), today)
    assert not can_go_forward(date(2024, 5, 29), today)
    assert not can_go_forward(date(2024, 6, 12), today)
