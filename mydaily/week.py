"""Week-view layout of a user's events, plus the greeting and picture pickers."""

from __future__ import annotations

import random
from dataclasses import dataclass
from datetime import date, time, timedelta

from mydaily.database import Database

ROWS_PER_HOUR = 6
MINUTES_PER_ROW = 60 // ROWS_PER_HOUR

_MONTH_ABBR = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")
_DAY_ABBR = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")

GREETINGS: tuple[str, ...] = (
    "今天也要好好照顾自己。",
    "一步一步来，总会走到想去的地方。",
    "给自己一点耐心，好事正在路上。",
    "认真生活的人，日子会慢慢发光。",
    "累了就歇一歇，明天依旧值得期待。",
    "把握当下，就是对未来最好的准备。",
    "愿你今天有好心情，也有好运气。",
    "小小的进步，也值得被庆祝。",
    "保持好奇，世界会回应你的热情。",
    "做喜欢的事，见想见的人。",
    "晴天雨天，都是生活的好风景。",
    "温柔地对待自己，也温柔地对待他人。",
)

IMAGE_COUNT = 12
IMAGE_PATHS: tuple[str, ...] = tuple(f":/tool/{n}.jpg" for n in range(1, IMAGE_COUNT + 1))


def time_to_row(t: time) -> int:
    """Return the grid row of a time; row 0 holds the day headers."""
    return t.hour * ROWS_PER_HOUR + t.minute // MINUTES_PER_ROW + 1


def duration_in_rows(start: time, end: time) -> int:
    """Return how many grid rows the span from start to end covers."""
    return time_to_row(end) - time_to_row(start)


def hour_labels() -> list[str]:
    """Return the time labels of the grid rows, from 00:00 to 24:00."""
    labels = [
        f"{i // ROWS_PER_HOUR:02d}:{(i % ROWS_PER_HOUR) * MINUTES_PER_ROW:02d}"
        for i in range(24 * ROWS_PER_HOUR)
    ]
    labels.append("24:00")
    return labels


def random_greeting(rng: random.Random | None = None) -> str:
    """Return one greeting chosen at random."""
    return (rng or random).choice(GREETINGS)


def random_image(rng: random.Random | None = None) -> str:
    """Return the resource path of one picture chosen at random."""
    return (rng or random).choice(IMAGE_PATHS)


@dataclass(frozen=True)
class EventPlacement:
    """Where one event sits in the week grid."""

    event_id: int
    title: str
    color: str
    row: int
    column: int
    row_span: int


class WeekView:
    """The week shown in the calendar and the events placed in it."""

    def __init__(self, database: Database, user_id: int, today: date | None = None) -> None:
        self.database = database
        self.user_id = user_id
        self.current_date = today or date.today()

    def set_week(self, day: date) -> None:
        """Show the week that contains day."""
        self.current_date = day

    def next_week(self) -> None:
        """Move one week forward."""
        self.set_week(self.current_date + timedelta(days=7))

    def previous_week(self) -> None:
        """Move one week back."""
        self.set_week(self.current_date - timedelta(days=7))

    def jump_to_date(self, day: date) -> None:
        """Show the week that contains day."""
        self.set_week(day)

    def week_start(self) -> date:
        """Return the Monday of the shown week."""
        return self.current_date - timedelta(days=self.current_date.weekday())

    def year_label(self) -> str:
        """Return the year heading of the view."""
        return f"{self.current_date.year}年"

    def day_labels(self) -> list[str]:
        """Return the seven column headings, Monday first."""
        start = self.week_start()
        days = (start + timedelta(days=i) for i in range(7))
        return [f"{_MONTH_ABBR[d.month - 1]} {d.day} {_DAY_ABBR[d.weekday()]}" for d in days]

    def placements(self) -> list[EventPlacement]:
        """Return the grid placement of every event of the user in the shown week."""
        start = self.week_start()
        end = start + timedelta(days=7)
        return [
            EventPlacement(
                event_id=event.id,
                title=event.title,
                color=event.color,
                row=time_to_row(event.start),
                column=event.date.isoweekday(),
                row_span=duration_in_rows(event.start, event.end),
            )
            for event in self.database.load_events(self.user_id)
            if start <= event.date < end
        ]