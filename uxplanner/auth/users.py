from __future__ import annotations

from typing import Any
from uuid import uuid4

import bcrypt

# bcrypt only looks at the first 72 bytes; newer releases raise past that.
BCRYPT_MAX_BYTES = 72

_users: dict[str, dict[str, Any]] = {}

PROFILE_FIELDS = ("full_name", "role", "company")


def _hash_password(plain: str) -> str:
    return bcrypt.hashpw(plain.encode(), bcrypt.gensalt()).decode()


def _verify_password(plain: str, hashed: str) -> bool:
    if len(plain.encode()) > BCRYPT_MAX_BYTES:
        return False
    return bcrypt.checkpw(plain.encode(), hashed.encode())


def _public(username: str, record: dict[str, Any]) -> dict[str, Any]:
    return {
        "id": record["id"],
        "username": username,
        **{field: record.get(field) for field in PROFILE_FIELDS},
    }


def _seed_users() -> None:
    """Pre-seed a demo user on import."""
    create_user("demo", "demo12345", full_name="Demo Designer", role="UX Designer")


def create_user(username: str, password: str, **profile: Any) -> dict[str, Any] | None:
    """Register a user. Returns the public user dict, or ``None`` if taken."""
    if username in _users:
        return None
    _users[username] = {
        "id": str(uuid4()),
        "password_hash": _hash_password(password),
        **{field: profile.get(field) for field in PROFILE_FIELDS},
    }
    return _public(username, _users[username])


def authenticate(username: str, password: str) -> dict[str, Any] | None:
    """Verify credentials. Returns the public user dict or ``None``."""
    record = _users.get(username)
    if record and _verify_password(password, record["password_hash"]):
        return _public(username, record)
    return None


def get_user(user_id: str) -> dict[str, Any] | None:
    for username, record in _users.items():
        if record["id"] == user_id:
            return _public(username, record)
    return None


def update_profile(user_id: str, **updates: Any) -> dict[str, Any] | None:
    for username, record in _users.items():
        if record["id"] == user_id:
            for field in PROFILE_FIELDS:
                if field in updates:
                    record[field] = updates[field]
            return _public(username, record)
    return None


def delete_user(user_id: str) -> bool:
    for username, record in list(_users.items()):
        if record["id"] == user_id:
            del _users[username]
            return True
    return False


_seed_users()
