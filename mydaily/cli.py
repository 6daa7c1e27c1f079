"""Command-line front end of the daily planner."""

from __future__ import annotations

import argparse
import sys
from datetime import date, datetime, time
from pathlib import Path

from mydaily.accounts import REGISTERED, AccountError, login, register, store_avatar, update_settings
from mydaily.database import Database, DatabaseError, default_database_path
from mydaily.lunar import display_lines
from mydaily.planner import (
    REMINDER_TITLE,
    EventError,
    Planner,
    end_time_choices,
    start_time_choices,
)
from mydaily.week import WeekView

ADDED = "添加成功"
DELETED = "删除成功"
INVALID_TIME = "时间无效"
DATABASE_ERROR = "数据库错误"


def _add_user_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("username")
    parser.add_argument("--password", required=True)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="mydaily", description="A personal daily planner.")
    parser.add_argument("--db", type=Path, default=None, help="database file")
    sub = parser.add_subparsers(dest="command", required=True)

    today = sub.add_parser("today", help="show the date, lunar date and festivals")
    today.add_argument("--at", type=datetime.fromisoformat, default=None)

    reg = sub.add_parser("register", help="create a user")
    _add_user_args(reg)
    reg.add_argument("--confirm", required=True)

    events = sub.add_parser("events", help="list the user's events")
    _add_user_args(events)

    add = sub.add_parser("add", help="add an event")
    _add_user_args(add)
    add.add_argument("name")
    add.add_argument("date", type=date.fromisoformat)
    add.add_argument("start", type=time.fromisoformat)
    add.add_argument("end", type=time.fromisoformat)

    delete = sub.add_parser("delete", help="delete an event")
    _add_user_args(delete)
    delete.add_argument("event_id", type=int)

    week = sub.add_parser("week", help="show the week grid")
    _add_user_args(week)
    week.add_argument("--date", type=date.fromisoformat, default=None)

    reminders = sub.add_parser("reminders", help="list upcoming reminders")
    _add_user_args(reminders)
    reminders.add_argument("--now", type=datetime.fromisoformat, default=None)

    settings = sub.add_parser("settings", help="change nickname or avatar")
    _add_user_args(settings)
    settings.add_argument("--nickname", default=None)
    settings.add_argument("--avatar", type=Path, default=None)
    return parser


def _check_times(start: time, end: time) -> None:
    starts = start_time_choices()
    if start not in starts or end not in end_time_choices(starts.index(start)):
        raise EventError(INVALID_TIME)


def _run(args: argparse.Namespace, db: Database, db_path: Path) -> None:
    if args.command == "register":
        register(db, args.username, args.password, args.confirm)
        print(REGISTERED)
        return

    user_id = login(db, args.username, args.password)
    planner = Planner(db, user_id)

    if args.command == "events":
        for event in planner.events():
            print(
                f"{event.id}\t{event.date:%Y-%m-%d}\t"
                f"{event.start:%H:%M} - {event.end:%H:%M}\t{event.title}"
            )
    elif args.command == "add":
        _check_times(args.start, args.end)
        event_id = planner.add_event(args.name, args.date, args.start, args.end)
        print(f"{ADDED} {event_id}")
    elif args.command == "delete":
        planner.delete_event(args.event_id)
        print(DELETED)
    elif args.command == "week":
        view = WeekView(db, user_id, args.date)
        print(view.year_label())
        print("\t".join(view.day_labels()))
        for spot in view.placements():
            print(f"{spot.column}\t{spot.row}\t{spot.row_span}\t{spot.color}\t{spot.title}")
    elif args.command == "reminders":
        for reminder in planner.reminders(args.now):
            print(f"{reminder.at:%Y-%m-%d %H:%M}\t{REMINDER_TITLE}: {reminder.message}")
    elif args.command == "settings":
        avatar = None
        if args.avatar is not None:
            avatar = str(store_avatar(args.avatar, db_path.parent))
        nickname, avatar_path = update_settings(db, user_id, args.nickname, avatar)
        print(nickname)
        print(avatar_path)


def main(argv: list[str] | None = None) -> int:
    """Run one planner command and return the exit status."""
    args = _build_parser().parse_args(argv)

    if args.command == "today":
        for line in display_lines(args.at or datetime.now()):
            print(line)
        return 0

    db_path = args.db if args.db is not None else default_database_path()
    try:
        database = Database(db_path)
    except DatabaseError:
        print(DATABASE_ERROR, file=sys.stderr)
        return 1
    try:
        with database:
            _run(args, database, db_path)
    except (AccountError, EventError, DatabaseError, ValueError) as err:
        print(err, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())