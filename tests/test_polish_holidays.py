"""
Local Polish holiday calendar tests.
"""

from datetime import date

import pytest

from schedule_engine.schemas.holiday import HolidayKind
from schedule_engine.utils.polish_holidays import (
    calculate_easter,
    fetch_polish_holidays,
    get_holiday_name,
    get_holidays,
    is_holiday,
)


@pytest.mark.parametrize(
    "year,easter",
    [(2023, date(2023, 4, 9)), (2024, date(2024, 3, 31)), (2025, date(2025, 4, 20))],
)
def test_easter_sunday(year, easter):
    assert calculate_easter(year) == easter


def test_holiday_set_for_2024():
    holidays = get_holidays(2024)

    assert len(holidays) == 12
    dates = [holiday.date for holiday in holidays]
    assert dates == sorted(dates)
    assert date(2024, 4, 1) in dates    # Easter Monday
    assert date(2024, 5, 19) in dates   # Pentecost
    assert date(2024, 5, 30) in dates   # Corpus Christi
    assert sum(1 for holiday in holidays if holiday.type == HolidayKind.MOVABLE) == 3


def test_holiday_names():
    assert get_holiday_name(date(2024, 11, 11)) == "Święto Niepodległości"
    assert get_holiday_name(date(2024, 5, 30)) == "Boże Ciało"
    assert get_holiday_name(date(2024, 5, 29)) is None
    assert is_holiday(date(2024, 12, 26))
    assert not is_holiday(date(2024, 12, 27))


@pytest.mark.asyncio
async def test_local_fetcher_only_knows_poland():
    assert len(await fetch_polish_holidays(2024, "pl")) == 12
    with pytest.raises(ValueError):
        await fetch_polish_holidays(2024, "DE")
