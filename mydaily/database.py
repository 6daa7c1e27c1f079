"""SQLite storage for users, their calendar events and event notes."""

from __future__ import annotations

import os
import random
import sqlite3
import sys
from dataclasses import dataclass
from datetime import date, time
from pathlib import Path

DEFAULT_NICKNAME = "未设置昵称"
DEFAULT_AVATAR = ":/images/head.png"
DATABASE_FILENAME = "UserData.db"
APP_NAME = "mydaily"

_SCHEMA = (
    "CREATE TABLE IF NOT EXISTS users ("
    "id INTEGER PRIMARY KEY AUTOINCREMENT, "
    "username TEXT UNIQUE, "
    "password TEXT, "
    f"nickname TEXT DEFAULT '{DEFAULT_NICKNAME}', "
    f"avatar_path TEXT DEFAULT '{DEFAULT_AVATAR}')",
    "CREATE TABLE IF NOT EXISTS events ("
    "event_id INTEGER PRIMARY KEY AUTOINCREMENT, "
    "user_id INTEGER, "
    "event_name TEXT, "
    "event_date DATE, "
    "start_time TIME, "
    "end_time TIME, "
    "color TEXT,"
    "note TEXT,"
    "FOREIGN KEY(user_id) REFERENCES users(id))",
)

# Random event colours are kept away from near-white so white text stays legible.
_MAX_COLOR_SUM = 600


class DatabaseError(Exception):
    """Raised when the database cannot be opened or a statement fails."""


@dataclass
class CalendarEvent:
    """One stored calendar event."""

    id: int
    date: date
    start: time
    end: time
    title: str
    color: str


def default_database_path() -> Path:
    """Return the per-user location of the application's database file."""
    if sys.platform.startswith("win"):
        appdata = os.environ.get("APPDATA")
        base = Path(appdata) if appdata else Path.home() / "AppData" / "Roaming"
    elif sys.platform == "darwin":
        base = Path.home() / "Library" / "Application Support"
    else:
        xdg = os.environ.get("XDG_DATA_HOME")
        base = Path(xdg) if xdg else Path.home() / ".local" / "share"
    return base / APP_NAME / DATABASE_FILENAME


def _random_color() -> str:
    while True:
        r, g, b = (random.randrange(256) for _ in range(3))
        if r + g + b <= _MAX_COLOR_SUM:
            return f"#{r:02x}{g:02x}{b:02x}"


class Database:
    """A connection to the user and event store; usable as a context manager."""

    def __init__(self, path: str | os.PathLike[str] | None = None) -> None:
        target = default_database_path() if path is None else path
        if str(target) != ":memory:":
            Path(target).parent.mkdir(parents=True, exist_ok=True)
        try:
            self._conn = sqlite3.connect(str(target), isolation_level=None)
            for statement in _SCHEMA:
                self._conn.execute(statement)
        except sqlite3.Error as err:
            raise DatabaseError(f"cannot open database {target}: {err}") from err

    def __enter__(self) -> Database:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def close(self) -> None:
        """Close the connection."""
        self._conn.close()

    def _execute(self, sql: str, params: tuple | dict = ()) -> sqlite3.Cursor:
        try:
            return self._conn.execute(sql, params)
        except sqlite3.Error as err:
            raise DatabaseError(str(err)) from err

    def create_user(self, username: str, password: str) -> int:
        """Create a user and return its id; raise DatabaseError if that fails."""
        cursor = self._execute(
            "INSERT INTO users (username, password) VALUES (?, ?)", (username, password)
        )
        return cursor.lastrowid

    def validate_user(self, username: str, password: str) -> bool:
        """Return whether the username exists and has this password."""
        row = self._execute(
            "SELECT password FROM users WHERE username = ?", (username,)
        ).fetchone()
        return row is not None and row[0] == password

    def username_exists(self, username: str) -> bool:
        """Return whether a user with this name exists."""
        row = self._execute(
            "SELECT username FROM users WHERE username = ?", (username,)
        ).fetchone()
        return row is not None

    def load_events(self, user_id: int) -> list[CalendarEvent]:
        """Return all events of a user in insertion order."""
        rows = self._execute(
            "SELECT event_id, event_name, event_date, start_time, end_time, color "
            "FROM events WHERE user_id = :user_id ORDER BY event_id",
            {"user_id": user_id},
        ).fetchall()
        return [
            CalendarEvent(
                id=event_id,
                title=name or "",
                date=date.fromisoformat(event_date),
                start=time.fromisoformat(start),
                end=time.fromisoformat(end),
                color=color or "",
            )
            for event_id, name, event_date, start, end, color in rows
        ]

    def add_event(self, user_id: int, name: str, event_date: date, start: time, end: time) -> int:
        """Store an event with a random colour and return its id."""
        cursor = self._execute(
            "INSERT INTO events (user_id, event_name, event_date, start_time, end_time, color) "
            "VALUES (:user_id, :event_name, :event_date, :start_time, :end_time, :color)",
            {
                "user_id": user_id,
                "event_name": name,
                "event_date": event_date.isoformat(),
                "start_time": start.strftime("%H:%M"),
                "end_time": end.strftime("%H:%M"),
                "color": _random_color(),
            },
        )
        return cursor.lastrowid

    def delete_event(self, event_id: int) -> None:
        """Delete an event; deleting an unknown id does nothing."""
        self._execute("DELETE FROM events WHERE event_id = :event_id", {"event_id": event_id})

    def get_user_id(self, username: str) -> int | None:
        """Return the id of a user, or None if there is no such user."""
        row = self._execute(
            "SELECT id FROM users WHERE username = :username", {"username": username}
        ).fetchone()
        return None if row is None else row[0]

    def get_user_details(self, user_id: int) -> tuple[str, str]:
        """Return (nickname, avatar path) of a user, or two empty strings."""
        row = self._execute(
            "SELECT nickname, avatar_path FROM users WHERE id = :id", {"id": user_id}
        ).fetchone()
        if row is None:
            return "", ""
        return row[0] or "", row[1] or ""

    def update_nickname(self, user_id: int, nickname: str) -> None:
        """Set a user's nickname; an empty nickname raises ValueError."""
        if not nickname:
            raise ValueError("nickname must not be empty")
        self._execute(
            "UPDATE users SET nickname = :nickname WHERE id = :id",
            {"nickname": nickname, "id": user_id},
        )

    def update_avatar_path(self, user_id: int, avatar_path: str) -> None:
        """Set a user's avatar path; an empty path raises ValueError."""
        if not avatar_path:
            raise ValueError("avatar path must not be empty")
        self._execute(
            "UPDATE users SET avatar_path = :avatar_path WHERE id = :id",
            {"avatar_path": avatar_path, "id": user_id},
        )

    def has_time_conflict(self, user_id: int, event_date: date, start: time, end: time) -> bool:
        """Return whether the span overlaps an existing event of the user on that date."""
        return any(
            event.date == event_date and start < event.end and end > event.start
            for event in self.load_events(user_id)
        )

    def save_event_note(self, event_id: int, note: str) -> None:
        """Store the note of an event."""
        self._execute(
            "UPDATE events SET note = :note WHERE event_id = :event_id",
            {"note": note, "event_id": event_id},
        )

    def load_event_note(self, event_id: int) -> str:
        """Return the note of an event, or '' if it has none."""
        row = self._execute(
            "SELECT note FROM events WHERE event_id = :event_id", {"event_id": event_id}
        ).fetchone()
        return "" if row is None or row[0] is None else row[0]