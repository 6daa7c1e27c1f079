# mydaily

mydaily is a personal weekly planner. Each user has an account and a list of
events. It places events on a week grid of ten-minute rows, refuses events
that overlap on the same day, and works out when each upcoming event needs a
reminder, which is twenty minutes before it starts. It also gives the Chinese
lunar date, the solar terms and the festivals of any day from 1901 to 2099.

All data lives in one SQLite file, `UserData.db`, in a `mydaily` folder in
your user data directory. The `--db` option picks a different file.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command line

```
mydaily [--db FILE] COMMAND ...
```

`today` needs no account:

```
mydaily today
mydaily today --at 2024-02-10T08:00:00
```

It prints the date, weekday, time and zodiac animal, then the lunar date with
its cyclic month, day and year, then the festivals and solar terms of that day
joined with ` | `.

Every other command except `register` logs in first with a user name and
`--password`:

```
mydaily register alice --password password --confirm password
mydaily add alice --password password Standup 2024-05-06 09:00 09:30
mydaily events alice --password password
mydaily delete alice --password password 1
mydaily week alice --password password --date 2024-05-06
mydaily reminders alice --password password --now 2024-05-06T08:00
mydaily settings alice --password password --nickname Alice --avatar me.png
```

- `register` creates the user; the password and its confirmation must match.
- `add` stores an event. The name may be at most 12 characters. The start must
  be a ten-minute step from 00:00 to 23:40 and the end a later ten-minute step
  up to 23:50. It prints the new event's id.
- `events` lists id, date, start and end, and title of each event.
- `delete` removes an event by id.
- `week` prints the year, the seven day headings from Monday, and for each
  event in that week its column (1 = Monday), start row, row span, colour and
  title. Without `--date` it shows the current week.
- `reminders` lists the reminders still to come after `--now` (default: now).
- `settings` sets the nickname and/or copies a `.png`, `.jpg` or `.jpeg` file
  into an `avatars` folder next to the database under a fresh name, then
  prints the nickname and avatar path.

Messages are in Chinese. On a refused action the message goes to standard
error and the exit status is 1.

## Library use

```python
from datetime import date, time

from mydaily.database import Database, default_database_path
from mydaily.accounts import register, login
from mydaily.planner import Planner
from mydaily.week import WeekView
from mydaily.lunar import lunar_day

with Database(default_database_path()) as db:
    register(db, "alice", "password", "password")
    user_id = login(db, "alice", "password")

    planner = Planner(db, user_id)
    planner.add_event("Standup", date(2024, 5, 6), time(9, 0), time(9, 30))

    view = WeekView(db, user_id, date(2024, 5, 6))
    for placement in view.placements():
        print(placement)

print(lunar_day(date(2024, 2, 10)).festivals())
```

Modules:

- `mydaily.database`: `Database` (a context manager) stores users, events and
  event notes; `CalendarEvent` is one stored event; failures raise
  `DatabaseError`. `Database(":memory:")` gives a throwaway store.
- `mydaily.accounts`: `login`, `register`, `update_settings` and
  `store_avatar`, which raise `AccountError` with a message for the user.
- `mydaily.planner`: `Planner` adds, deletes and lists events, raising
  `EventError` for an empty or too long name, an overlap or a storage failure;
  `Planner.reminders` returns `Reminder` objects. `start_time_choices`,
  `end_time_choices`, `year_choices` (2000 to 3000) and `day_choices` give the
  selectable values.
- `mydaily.week`: `WeekView` with `next_week`, `previous_week`,
  `jump_to_date`, `day_labels` and `placements`; `time_to_row`,
  `duration_in_rows` and `hour_labels` describe the grid; `random_greeting`
  and `random_image` pick a greeting or a picture name.
- `mydaily.lunar`: `lunar_day` returns a `LunarDay`; `zodiac` and
  `display_lines` give the display texts. Dates outside 1901-2099 raise
  `ValueError`.
- `mydaily.lunar_tables`: the calendar tables, `solar_holiday` and
  `solar_terms`.

## What it does not do

- There is no graphical window, clock face or tray icon; the package is a
  library and a command-line tool.
- Reminders are computed, not delivered: nothing runs in the background to
  show them when they fall due.
- Event notes can be saved and read through `Database.save_event_note` and
  `Database.load_event_note`, but no command edits them.
- `random_image` returns a picture name such as `:/tool/3.jpg`; no pictures
  ship with the package.
- Passwords are stored as given, without hashing.