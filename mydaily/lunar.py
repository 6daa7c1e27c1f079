"""Chinese lunisolar calendar conversion and the date/time display texts."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime

from mydaily.lunar_tables import (
    CHINESE_DAYS,
    CHINESE_MONTHS,
    EARTHLY_BRANCHES,
    HEAVENLY_STEMS,
    LUNAR_CALENDAR_TABLE,
    LUNAR_FESTIVALS,
    MONTH_OFFSETS,
    TERM_NAMES,
    ZODIAC_ANIMALS,
    solar_holiday,
    solar_terms,
)

_EPOCH = date(1900, 1, 30)
_WEEKDAYS = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")
_FIRST_MONTH_BIT = 0x80000
_SHORT_MONTH = 29
_LONG_MONTH = 30


@dataclass(frozen=True)
class LunarDay:
    """Lunar calendar facts for one Gregorian day."""

    month_day: str
    year: str
    month: str
    day: str
    terms: str
    lunar_festival: str
    solar_festival: str

    def festivals(self) -> list[str]:
        """Return the non-empty solar festival, lunar festival and term names, in that order."""
        return [text for text in (self.solar_festival, self.lunar_festival, self.terms) if text]


def _table(year: int) -> int:
    # Years before the table (only 1900 is reachable) carry no data.
    return LUNAR_CALENDAR_TABLE[year - 1901] if year >= 1901 else 0


def _leap_month(entry: int) -> int:
    return (entry & 0xF00000) >> 20


def _month_length(entry: int, index: int) -> int:
    """Return the number of days of the index-th month (1-based) described by entry."""
    mask = _FIRST_MONTH_BIT >> (index - 1)
    is_long = bool(entry & mask)
    return _LONG_MONTH if is_long else _SHORT_MONTH


def _cyclic(year: int, suffix: str) -> str:
    cycle = (year - 4) % 60
    return HEAVENLY_STEMS[cycle % 10] + EARTHLY_BRANCHES[cycle % 12] + suffix


def zodiac(year: int) -> str:
    """Return the zodiac animal of a year."""
    return ZODIAC_ANIMALS[((year - 4) % 60) % 12]


def lunar_day(day: date) -> LunarDay:
    """Convert a Gregorian date to its lunar description.

    Raises ValueError for dates outside 1901-01-01 .. 2099-12-31.
    """
    first_term, second_term = solar_terms(day)
    year, month, mday = day.year, day.month, day.day

    month_number = (year - 1901) * 12 - 2 + month
    if mday < first_term:
        month_number -= 1
    cyclic_month = (
        HEAVENLY_STEMS[(month_number + 6) % 10] + EARTHLY_BRANCHES[(month_number + 2) % 12] + "月"
    )
    day_number = abs((day - _EPOCH).days)
    cyclic_day = HEAVENLY_STEMS[(day_number + 9) % 10] + EARTHLY_BRANCHES[(day_number + 3) % 12] + "日"

    entry = _table(year)
    spring = (entry & 0x1F) - 1
    if (entry & 0x60) >> 5 != 1:
        spring += 31
    offset = MONTH_OFFSETS[month - 1] + mday - 1
    if year % 4 == 0 and month > 2:
        offset += 1

    month_count = 1
    flag = False
    if offset >= spring:
        offset -= spring
        month = 1
        index = 1
        length = _month_length(entry, index)
        while offset >= length:
            offset -= length
            index += 1
            if month == _leap_month(entry):
                flag = not flag
                if not flag:
                    month += 1
            else:
                month += 1
            length = _month_length(entry, index)
            month_count += 1
        lunar_mday = offset + 1
    else:
        spring -= offset
        year -= 1
        month = 12
        entry = _table(year)
        if year >= 1901:
            index = 12 if _leap_month(entry) == 0 else 13
            length = _month_length(entry, index)
        else:
            index = 12
            length = _LONG_MONTH
        while spring > length:
            spring -= length
            index -= 1
            if not flag:
                month -= 1
            if month == _leap_month(entry):
                flag = not flag
            length = _month_length(entry, index)
            month_count += 1
        lunar_mday = length - spring + 1

    month_name = CHINESE_MONTHS[month & 0xF]
    if month == _leap_month(_table(year)) and month != month_count:
        month_name = "闰" + month_name
    month_day = month_name + "月" + CHINESE_DAYS[lunar_mday & 0x3F]

    terms = ""
    if day.day == first_term:
        terms += TERM_NAMES[(day.month - 1) * 2]
    if day.day == second_term:
        terms += TERM_NAMES[(day.month - 1) * 2 + 1]

    festival = ""
    if (length == _SHORT_MONTH and month_day == "腊月廿九") or (
        length == _LONG_MONTH and month_day == "腊月三十"
    ):
        festival += "除夕"
    if day.day == first_term - 1 and day.month == 4:
        festival += "寒食节"
    festival += LUNAR_FESTIVALS.get(month_day, "")

    return LunarDay(
        month_day=month_day,
        year=_cyclic(year, "年"),
        month=cyclic_month,
        day=cyclic_day,
        terms=terms,
        lunar_festival=festival,
        solar_festival=solar_holiday(day.month, day.day),
    )


def display_lines(now: datetime) -> tuple[str, str, str]:
    """Return the clock line, the lunar date line and the festival line for a moment."""
    time_text = (
        f"{now:%Y-%m-%d} {_WEEKDAYS[now.weekday()]} {now:%H:%M:%S} [{zodiac(now.year)}]"
    )
    try:
        info = lunar_day(now.date())
    except ValueError:
        return time_text, "农历:    ", ""
    lunar_text = f"农历: {info.month_day} {info.month} {info.day} {info.year}"
    return time_text, lunar_text, " | ".join(info.festivals())