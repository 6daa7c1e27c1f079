"""Sign-up, sign-in and profile settings of calendar users."""

from __future__ import annotations

import shutil
import uuid
from pathlib import Path

from mydaily.database import Database, DatabaseError

EMPTY_CREDENTIALS = "用户名和密码不能为空"
UNKNOWN_USER = "用户名不存在"
REJECTED_LOGIN = "密码错误"
CONFIRM_MISMATCH = REJECTED_LOGIN
DUPLICATE_USER = "用户名重复"
REGISTER_FAILED = "注册失败"
REGISTERED = "注册成功"
AVATAR_FAILED = "头像保存失败"

IMAGE_SUFFIXES = frozenset({".png", ".jpg", ".jpeg"})
AVATAR_DIR = "avatars"


class AccountError(Exception):
    """Raised when an account action is refused; the message is shown to the user."""


def login(database: Database, username: str, password: str) -> int:
    """Check the credentials and return the user's id."""
    if not username or not password:
        raise AccountError(EMPTY_CREDENTIALS)
    if not database.username_exists(username):
        raise AccountError(UNKNOWN_USER)
    if not database.validate_user(username, password):
        raise AccountError(REJECTED_LOGIN)
    user_id = database.get_user_id(username)
    if user_id is None:
        raise AccountError(UNKNOWN_USER)
    return user_id


def register(database: Database, username: str, password: str, confirm: str) -> int:
    """Create a new user and return its id."""
    if not username or not password:
        raise AccountError(EMPTY_CREDENTIALS)
    if password != confirm:
        raise AccountError(CONFIRM_MISMATCH)
    if database.username_exists(username):
        raise AccountError(DUPLICATE_USER)
    try:
        return database.create_user(username, password)
    except DatabaseError as err:
        raise AccountError(REGISTER_FAILED) from err


def update_settings(
    database: Database,
    user_id: int,
    nickname: str | None = None,
    avatar_path: str | None = None,
) -> tuple[str, str]:
    """Store whichever of nickname and avatar path are given; return the new details."""
    if nickname:
        database.update_nickname(user_id, nickname)
    if avatar_path:
        database.update_avatar_path(user_id, str(avatar_path))
    return database.get_user_details(user_id)


def store_avatar(source: str | Path, data_dir: str | Path) -> Path:
    """Copy an image into the avatar folder under a unique name and return the new path."""
    source = Path(source)
    suffix = source.suffix.lower()
    if suffix not in IMAGE_SUFFIXES:
        raise AccountError(AVATAR_FAILED)
    target_dir = Path(data_dir) / AVATAR_DIR
    target = target_dir / f"{uuid.uuid4()}{source.suffix}"
    try:
        target_dir.mkdir(parents=True, exist_ok=True)
        shutil.copyfile(source, target)
    except OSError as err:
        raise AccountError(AVATAR_FAILED) from err
    return target