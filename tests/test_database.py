import re
from datetime import date, time

import pytest

from mydaily.database import (
    DEFAULT_AVATAR,
    DEFAULT_NICKNAME,
    CalendarEvent,
    Database,
    DatabaseError,
    default_database_path,
)


@pytest.fixture
def db(tmp_path):
    with Database(tmp_path / "UserData.db") as database:
        yield database


def test_default_database_path_file_name():
    path = default_database_path()
    assert path.name == "UserData.db"
    assert path.parent.name == "mydaily"


def test_creates_missing_directories(tmp_path):
    target = tmp_path / "a" / "b" / "store.db"
    with Database(target) as database:
        database.create_user("alice", "password")
    assert target.exists()


def test_create_user_and_lookup(db):
    user_id = db.create_user("alice", "password")
    assert db.username_exists("alice")
    assert not db.username_exists("bob")
    assert db.get_user_id("alice") == user_id
    assert db.get_user_id("bob") is None


def test_duplicate_username_raises(db):
    db.create_user("alice", "password")
    with pytest.raises(DatabaseError):
        db.create_user("alice", "secret")


def test_validate_user(db):
    db.create_user("alice", "password")
    assert db.validate_user("alice", "password")
    assert not db.validate_user("alice", "secret")
    assert not db.validate_user("bob", "password")


def test_user_details_defaults_and_updates(db):
    user_id = db.create_user("alice", "password")
    assert db.get_user_details(user_id) == (DEFAULT_NICKNAME, DEFAULT_AVATAR)
    db.update_nickname(user_id, "Ally")
    db.update_avatar_path(user_id, "/tmp/avatar.png")
    assert db.get_user_details(user_id) == ("Ally", "/tmp/avatar.png")


def test_user_details_unknown_user(db):
    assert db.get_user_details(12345) == ("", "")


def test_empty_updates_raise(db):
    user_id = db.create_user("alice", "password")
    with pytest.raises(ValueError):
        db.update_nickname(user_id, "")
    with pytest.raises(ValueError):
        db.update_avatar_path(user_id, "")
    assert db.get_user_details(user_id) == (DEFAULT_NICKNAME, DEFAULT_AVATAR)


def test_add_and_load_events_round_trip(db):
    user_id = db.create_user("alice", "password")
    event_id = db.add_event(user_id, "Meeting", date(2024, 3, 5), time(9, 30), time(10, 40))
    events = db.load_events(user_id)
    assert len(events) == 1
    event = events[0]
    assert isinstance(event, CalendarEvent)
    assert (event.id, event.title, event.date, event.start, event.end) == (
        event_id,
        "Meeting",
        date(2024, 3, 5),
        time(9, 30),
        time(10, 40),
    )


def test_event_colour_is_dark_enough(db):
    user_id = db.create_user("alice", "password")
    for hour in range(20):
        db.add_event(user_id, "x", date(2024, 1, 1), time(hour, 0), time(hour, 10))
    for event in db.load_events(user_id):
        assert re.fullmatch(r"#[0-9a-f]{6}", event.color)
        channels = [int(event.color[i:i + 2], 16) for i in (1, 3, 5)]
        assert sum(channels) <= 600


def test_events_belong_to_their_user(db):
    alice = db.create_user("alice", "password")
    bob = db.create_user("bob", "password")
    db.add_event(alice, "A", date(2024, 1, 1), time(8, 0), time(9, 0))
    db.add_event(bob, "B", date(2024, 1, 1), time(8, 0), time(9, 0))
    assert [e.title for e in db.load_events(alice)] == ["A"]
    assert [e.title for e in db.load_events(bob)] == ["B"]


def test_delete_event(db):
    user_id = db.create_user("alice", "password")
    keep = db.add_event(user_id, "keep", date(2024, 1, 1), time(8, 0), time(9, 0))
    drop = db.add_event(user_id, "drop", date(2024, 1, 2), time(8, 0), time(9, 0))
    db.delete_event(drop)
    assert [e.id for e in db.load_events(user_id)] == [keep]


def test_time_conflict(db):
    user_id = db.create_user("alice", "password")
    day = date(2024, 5, 1)
    db.add_event(user_id, "busy", day, time(10, 0), time(11, 0))
    assert db.has_time_conflict(user_id, day, time(10, 30), time(11, 30))
    assert db.has_time_conflict(user_id, day, time(9, 0), time(12, 0))
    assert not db.has_time_conflict(user_id, day, time(11, 0), time(12, 0))
    assert not db.has_time_conflict(user_id, day, time(9, 0), time(10, 0))
    assert not db.has_time_conflict(user_id, date(2024, 5, 2), time(10, 30), time(11, 30))
    other = db.create_user("bob", "password")
    assert not db.has_time_conflict(other, day, time(10, 30), time(11, 30))


def test_event_note_round_trip(db):
    user_id = db.create_user("alice", "password")
    event_id = db.add_event(user_id, "x", date(2024, 1, 1), time(8, 0), time(9, 0))
    assert db.load_event_note(event_id) == ""
    db.save_event_note(event_id, "bring slides")
    assert db.load_event_note(event_id) == "bring slides"
    assert db.load_event_note(event_id + 100) == ""


def test_data_persists_across_connections(tmp_path):
    path = tmp_path / "UserData.db"
    with Database(path) as first:
        user_id = first.create_user("alice", "password")
        first.add_event(user_id, "Persist", date(2024, 2, 2), time(7, 0), time(8, 0))
    with Database(path) as second:
        assert second.validate_user("alice", "password")
        assert [e.title for e in second.load_events(user_id)] == ["Persist"]


def test_closed_database_raises(tmp_path):
    database = Database(tmp_path / "UserData.db")
    database.close()
    with pytest.raises(DatabaseError):
        database.username_exists("alice")