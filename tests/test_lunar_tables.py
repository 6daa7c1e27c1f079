import calendar
from datetime import date

import pytest

from mydaily.lunar_tables import (
    MAX_DATE,
    MIN_DATE,
    solar_holiday,
    solar_terms,
)


@pytest.mark.parametrize(
    ("month", "day", "name"),
    [
        (1, 1, "元旦"),
        (2, 14, "情人节"),
        (3, 8, "妇女节"),
        (5, 4, "青年节"),
        (9, 10, "教师节"),
        (10, 1, "国庆节"),
        (12, 25, "圣诞节"),
    ],
)
def test_solar_holiday_known(month, day, name):
    assert solar_holiday(month, day) == name


@pytest.mark.parametrize(("month", "day"), [(3, 3), (12, 24), (2, 29), (7, 4)])
def test_solar_holiday_none(month, day):
    assert solar_holiday(month, day) == ""


def test_solar_terms_january_2024():
    assert solar_terms(date(2024, 1, 15)) == (6, 20)


def test_solar_terms_february_2024():
    assert solar_terms(date(2024, 2, 1)) == (4, 19)


def test_solar_terms_same_for_whole_month():
    for month in range(1, 13):
        last = calendar.monthrange(2023, month)[1]
        assert solar_terms(date(2023, month, 1)) == solar_terms(date(2023, month, last))


@pytest.mark.parametrize("year", [1901, 1950, 2000, 2024, 2060, 2099])
def test_solar_terms_fall_inside_month_in_order(year):
    for month in range(1, 13):
        first, second = solar_terms(date(year, month, 1))
        last = calendar.monthrange(year, month)[1]
        assert 1 <= first < second <= last


def test_solar_terms_accepts_range_bounds():
    first, second = solar_terms(MIN_DATE)
    assert first < second
    first, second = solar_terms(MAX_DATE)
    assert first < second


@pytest.mark.parametrize("day", [date(1900, 12, 31), date(2100, 1, 1), date(1850, 6, 1)])
def test_solar_terms_out_of_range(day):
    with pytest.raises(ValueError):
        solar_terms(day)