import calendar
import datetime

import pytest

from knrtools.dates import day_of_year, is_leap, month_day, month_name


@pytest.mark.parametrize("year", [1900, 2000, 2023, 2024, 2100, 2400])
def test_is_leap_matches_calendar(year):
    assert is_leap(year) == calendar.isleap(year)


@pytest.mark.parametrize("year", [2023, 2024, 1900, 2000])
def test_day_of_year_matches_datetime(year):
    day = datetime.date(year, 1, 1)
    while day.year == year:
        assert day_of_year(year, day.month, day.day) == day.timetuple().tm_yday
        day += datetime.timedelta(days=1)


@pytest.mark.parametrize("year", [2023, 2024])
def test_month_day_matches_datetime(year):
    total = 366 if calendar.isleap(year) else 365
    for yearday in range(1, total + 1):
        date = datetime.date(year, 1, 1) + datetime.timedelta(days=yearday - 1)
        assert month_day(year, yearday) == (date.month, date.day)


def test_source_example_round_trip():
    yearday = day_of_year(2024, 11, 9)
    assert month_day(2024, yearday) == (11, 9)
    assert month_name(month_day(2024, yearday)[0]) == "November"


def test_month_names():
    assert month_name(1) == "January"
    assert month_name(12) == "December"
    assert month_name(0) == "Illegal month"
    assert month_name(13) == "Illegal month"


@pytest.mark.parametrize("month", [0, 13, -1])
def test_day_of_year_bad_month(month):
    with pytest.raises(ValueError):
        day_of_year(2023, month, 1)


def test_day_of_year_bad_day():
    with pytest.raises(ValueError):
        day_of_year(2023, 2, 29)
    with pytest.raises(ValueError):
        day_of_year(2023, 1, 0)


def test_leap_day_accepted_in_leap_year():
    assert month_day(2024, day_of_year(2024, 2, 29)) == (2, 29)


@pytest.mark.parametrize("year,yearday", [(2023, 366), (2024, 367), (2024, 0)])
def test_month_day_out_of_range(year, yearday):
    with pytest.raises(ValueError):
        month_day(year, yearday)