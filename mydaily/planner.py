"""Event entry, deletion and reminder scheduling for a logged-in user."""

from __future__ import annotations

import calendar
from dataclasses import dataclass
from datetime import date, datetime, time, timedelta

from mydaily.database import CalendarEvent, Database, DatabaseError

FIRST_YEAR = 2000
LAST_YEAR = 3000
MAX_NAME_LENGTH = 12
STEP_MINUTES = 10
LAST_START = time(23, 40)
REMINDER_LEAD = timedelta(minutes=20)
REMINDER_TITLE = "提醒"

EMPTY_NAME = "事件名不能为空"
TIME_CONFLICT = "时间重叠了"
ADD_FAILED = "添加失败"
NAME_TOO_LONG = "事件名过长"


class EventError(Exception):
    """Raised when an event cannot be added; the message is shown to the user."""


@dataclass(frozen=True)
class Reminder:
    """A notice due shortly before an event starts."""

    event_id: int
    title: str
    at: datetime
    message: str


def _all_slots() -> list[time]:
    return [
        time(hour, minute)
        for hour in range(24)
        for minute in range(0, 60, STEP_MINUTES)
    ]


def start_time_choices() -> list[time]:
    """Return the selectable start times, 00:00 to 23:40 in ten-minute steps."""
    return [slot for slot in _all_slots() if slot <= LAST_START]


def end_time_choices(start_index: int) -> list[time]:
    """Return the selectable end times: every start choice after the chosen one."""
    return start_time_choices()[start_index + 1:]


def year_choices() -> list[int]:
    """Return the selectable years."""
    return list(range(FIRST_YEAR, LAST_YEAR + 1))


def day_choices(year: int, month: int) -> list[int]:
    """Return the days of the given month."""
    return list(range(1, calendar.monthrange(year, month)[1] + 1))


def reminder_message(title: str) -> str:
    """Return the reminder text for an event with this title."""
    return "20分钟后即将开始的事件: " + title


class Planner:
    """A user's event list backed by the database."""

    def __init__(self, database: Database, user_id: int) -> None:
        self.database = database
        self.user_id = user_id

    def add_event(self, name: str, event_date: date, start: time, end: time) -> int:
        """Store a new event and return its id; raise EventError if it is refused."""
        if not name:
            raise EventError(EMPTY_NAME)
        if len(name) > MAX_NAME_LENGTH:
            raise EventError(NAME_TOO_LONG)
        try:
            if self.database.has_time_conflict(self.user_id, event_date, start, end):
                raise EventError(TIME_CONFLICT)
            return self.database.add_event(self.user_id, name, event_date, start, end)
        except DatabaseError as err:
            raise EventError(ADD_FAILED) from err

    def delete_event(self, event_id: int) -> None:
        """Remove an event."""
        self.database.delete_event(event_id)

    def events(self) -> list[CalendarEvent]:
        """Return all events of the user."""
        return self.database.load_events(self.user_id)

    def reminders(self, now: datetime | None = None) -> list[Reminder]:
        """Return the reminders still due after now, twenty minutes before each event."""
        current = now or datetime.now()
        due = []
        for event in self.events():
            at = datetime.combine(event.date, event.start) - REMINDER_LEAD
            if current < at:
                due.append(
                    Reminder(
                        event_id=event.id,
                        title=event.title,
                        at=at,
                        message=reminder_message(event.title),
                    )
                )
        return due