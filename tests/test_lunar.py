from datetime import date, datetime, timedelta

import pytest

from mydaily.lunar import LunarDay, display_lines, lunar_day, zodiac
from mydaily.lunar_tables import CHINESE_DAYS, TERM_NAMES, solar_terms


def test_lunar_new_year_2024():
    info = lunar_day(date(2024, 2, 10))
    assert info.month_day == "正月初一"
    assert info.lunar_festival == "春节"
    assert info.year == "甲辰年"


def test_mid_autumn_2024():
    info = lunar_day(date(2024, 9, 17))
    assert info.month_day == "八月十五"
    assert "中秋节" in info.festivals()


def test_new_years_eve_in_previous_lunar_year():
    info = lunar_day(date(2024, 2, 9))
    assert info.month_day == "腊月三十"
    assert info.lunar_festival == "除夕"


def test_first_supported_day():
    assert lunar_day(date(1901, 1, 1)).month_day == "十一月十一"


@pytest.mark.parametrize("day", [date(1900, 12, 31), date(2100, 1, 1)])
def test_out_of_range_raises(day):
    with pytest.raises(ValueError):
        lunar_day(day)


def test_solar_holiday_field():
    assert lunar_day(date(2023, 10, 1)).solar_festival == "国庆节"
    assert lunar_day(date(2023, 10, 2)).solar_festival == ""


def test_terms_match_term_table():
    day = date(2023, 1, 1)
    while day.year == 2023:
        first, second = solar_terms(day)
        info = lunar_day(day)
        if day.day == first:
            assert TERM_NAMES[(day.month - 1) * 2] in info.terms
        elif day.day == second:
            assert TERM_NAMES[(day.month - 1) * 2 + 1] in info.terms
        else:
            assert info.terms == ""
        day += timedelta(days=1)


def test_day_names_are_valid_over_a_year():
    day = date(2030, 1, 1)
    while day.year == 2030:
        info = lunar_day(day)
        assert info.month_day.split("月")[-1] in CHINESE_DAYS[1:]
        assert info.year.endswith("年")
        assert info.month.endswith("月")
        assert info.day.endswith("日")
        day += timedelta(days=1)


def test_festivals_order():
    info = LunarDay("正月初一", "", "", "", "立春", "春节", "元旦")
    assert info.festivals() == ["元旦", "春节", "立春"]


def test_festivals_skip_empty():
    info = LunarDay("二月初二", "", "", "", "", "", "")
    assert info.festivals() == []


def test_zodiac_cycle():
    assert zodiac(2024) == "龙"
    for year in range(1990, 2010):
        assert zodiac(year) == zodiac(year + 12)


def test_display_lines_new_year():
    now = datetime(2024, 2, 10, 8, 30, 0)
    time_text, lunar_text, festival_text = display_lines(now)
    assert time_text.startswith("2024-02-10 ")
    assert time_text.endswith("08:30:00 [龙]")
    assert lunar_text.startswith("农历: 正月初一 ")
    assert lunar_text.endswith(" 甲辰年")
    assert festival_text == " | ".join(lunar_day(now.date()).festivals())
    assert "春节" in festival_text


def test_display_lines_out_of_range():
    _, lunar_text, festival_text = display_lines(datetime(2100, 1, 1, 0, 0, 0))
    assert lunar_text == "农历:    "
    assert festival_text == ""