from pathlib import Path

import pytest

from mydaily.accounts import (
    DUPLICATE_USER,
    EMPTY_CREDENTIALS,
    UNKNOWN_USER,
    AccountError,
    login,
    register,
    store_avatar,
    update_settings,
)
from mydaily.database import DEFAULT_AVATAR, DEFAULT_NICKNAME, Database


@pytest.fixture
def db():
    with Database(":memory:") as database:
        yield database


def test_register_then_login_returns_same_id(db):
    user_id = register(db, "alice", "password", "password")
    assert db.username_exists("alice")
    assert login(db, "alice", "password") == user_id


def test_register_rejects_empty_fields(db):
    with pytest.raises(AccountError) as info:
        register(db, "", "password", "password")
    assert str(info.value) == EMPTY_CREDENTIALS
    with pytest.raises(AccountError):
        register(db, "alice", "", "")
    assert not db.username_exists("alice")


def test_register_rejects_mismatched_confirmation(db):
    with pytest.raises(AccountError):
        register(db, "alice", "password", "secret")
    assert not db.username_exists("alice")


def test_register_rejects_duplicate(db):
    register(db, "alice", "password", "password")
    with pytest.raises(AccountError) as info:
        register(db, "alice", "secret", "secret")
    assert str(info.value) == DUPLICATE_USER


def test_login_errors(db):
    register(db, "alice", "password", "password")
    with pytest.raises(AccountError) as info:
        login(db, "bob", "password")
    assert str(info.value) == UNKNOWN_USER
    with pytest.raises(AccountError):
        login(db, "alice", "secret")
    with pytest.raises(AccountError) as info:
        login(db, "alice", "")
    assert str(info.value) == EMPTY_CREDENTIALS


def test_update_settings_only_changes_given_fields(db):
    user_id = register(db, "alice", "password", "password")
    assert update_settings(db, user_id) == (DEFAULT_NICKNAME, DEFAULT_AVATAR)
    assert update_settings(db, user_id, nickname="Ally") == ("Ally", DEFAULT_AVATAR)
    assert update_settings(db, user_id, avatar_path="pic.png") == ("Ally", "pic.png")
    assert db.get_user_details(user_id) == ("Ally", "pic.png")


def test_store_avatar_copies_file(tmp_path: Path):
    source = tmp_path / "face.PNG"
    source.write_bytes(b"\x89PNG data")
    data_dir = tmp_path / "data"
    first = store_avatar(source, data_dir)
    second = store_avatar(source, data_dir)
    assert first.parent == data_dir / "avatars"
    assert first.suffix == ".PNG"
    assert first.read_bytes() == source.read_bytes()
    assert first != second


def test_store_avatar_rejects_non_images(tmp_path: Path):
    source = tmp_path / "notes.txt"
    source.write_text("hello")
    with pytest.raises(AccountError):
        store_avatar(source, tmp_path)


def test_store_avatar_missing_file(tmp_path: Path):
    with pytest.raises(AccountError):
        store_avatar(tmp_path / "absent.jpg", tmp_path)
    assert list((tmp_path / "avatars").iterdir()) == []