"""Conversions between month/day and day of the year."""

from __future__ import annotations

_DAYS_IN_MONTH = (
    (0, 31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31),
    (0, 31, 29, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31),
)

_MONTH_NAMES = (
    "Illegal month", "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)


def is_leap(year: int) -> bool:
    """Return True for a Gregorian leap year."""
    return year % 4 == 0 and year % 100 != 0 or year % 400 == 0


def day_of_year(year: int, month: int, day: int) -> int:
    """Return the day of the year for the given month and day."""
    table = _DAYS_IN_MONTH[is_leap(year)]
    if not 1 <= month <= 12:
        raise ValueError(f"month out of range: {month}")
    if not 1 <= day <= table[month]:
        raise ValueError(f"day out of range for month {month}: {day}")
    return day + sum(table[1:month])


def month_day(year: int, yearday: int) -> tuple[int, int]:
    """Return ``(month, day)`` for a day of the year."""
    table = _DAYS_IN_MONTH[is_leap(year)]
    if not 1 <= yearday <= sum(table):
        raise ValueError(f"day of year out of range: {yearday}")
    month = 1
    while yearday > table[month]:
        yearday -= table[month]
        month += 1
    return month, yearday


def month_name(n: int) -> str:
    """Return the name of month ``n``, or ``"Illegal month"``."""
    return _MONTH_NAMES[n] if 1 <= n <= 12 else _MONTH_NAMES[0]