"""
Polish public holidays.
Used as the holiday source when the remote calendar is not configured.
"""

from datetime import date, timedelta
from typing import List, Optional

from schedule_engine.schemas.holiday import Holiday, HolidayKind


# (month, day, name)
FIXED_HOLIDAYS = [
    (1, 1, "Nowy Rok"),
    (1, 6, "Święto Trzech Króli"),
    (5, 1, "Święto Pracy"),
    (5, 3, "Święto Konstytucji 3 Maja"),
    (8, 15, "Wniebowzięcie Najświętszej Maryi Panny"),
    (11, 1, "Wszystkich Świętych"),
    (11, 11, "Święto Niepodległości"),
    (12, 25, "Boże Narodzenie (pierwszy dzień)"),
    (12, 26, "Boże Narodzenie (drugi dzień)"),
]

# (days after Easter Sunday, name)
MOVABLE_HOLIDAYS = [
    (1, "Poniedziałek Wielkanocny"),
    (49, "Zielone Świątki"),
    (60, "Boże Ciało"),
]


def calculate_easter(year: int) -> date:
    """
    Calculate Easter Sunday for a given year.
    Uses the Meeus/Jones/Butcher algorithm.
    """
    a = year % 19
    b = year // 100
    c = year % 100
    d = b // 4
    e = b % 4
    f = (b + 8) // 25
    g = (b - f + 1) // 3
    h = (19 * a + b - d - g + 15) % 30
    i = c // 4
    k = c % 4
    l = (32 + 2 * e + 2 * i - h - k) % 7
    m = (a + 11 * h + 22 * l) // 451
    month = (h + l - 7 * m + 114) // 31
    day = ((h + l - 7 * m + 114) % 31) + 1
    return date(year, month, day)


def get_holidays(year: int) -> List[Holiday]:
    """Get all public holidays for a given year, in calendar order."""
    holidays = [
        Holiday(date=date(year, month, day), description=name, type=HolidayKind.FIXED)
        for month, day, name in FIXED_HOLIDAYS
    ]
    easter = calculate_easter(year)
    holidays.extend(
        Holiday(date=easter + timedelta(days=offset), description=name, type=HolidayKind.MOVABLE)
        for offset, name in MOVABLE_HOLIDAYS
    )
    return sorted(holidays, key=lambda holiday: holiday.date)


def get_holiday_name(day: date) -> Optional[str]:
    """Get holiday name for a given date, or None if it is a working day."""
    for month, fixed_day, name in FIXED_HOLIDAYS:
        if (day.month, day.day) == (month, fixed_day):
            return name

    easter = calculate_easter(day.year)
    for offset, name in MOVABLE_HOLIDAYS:
        if day == easter + timedelta(days=offset):
            return name
    return None


def is_holiday(day: date) -> bool:
    """Check if a given date is a holiday."""
    return get_holiday_name(day) is not None


async def fetch_polish_holidays(year: int, country: str) -> List[Holiday]:
    """Holiday fetcher backed by the local calendar; only knows PL."""
    if country.upper() != "PL":
        raise ValueError(f"No local holiday calendar for country {country!r}")
    return get_holidays(year)
